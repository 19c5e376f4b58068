"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

Conversion between base58 addresses and the script hashes they encode.
"""

import hashlib

from base58 import b58decode, b58encode

from neotx import NeoError
from neotx.util.encode import ByteArray


# AddressVersion is the leading byte of every NEO address payload.
AddressVersion = 0x17

# ScriptHashSize is the length of a script hash, in bytes.
ScriptHashSize = 20


def checksum(b):
    """
    The first four bytes of the double SHA-256 hash.

    Args:
        b (bytes-like): The bytes to hash.

    Returns:
        ByteArray: The checksum.
    """
    h = hashlib.sha256(hashlib.sha256(bytes(b)).digest()).digest()
    return ByteArray(h[:4])


def b58CheckDecode(s):
    """
    Decode the base-58 encoded address, parsing the version byte and the
    payload. An exception is raised if the checksum is invalid or missing.

    Args:
        s (str): The base-58 encoded address.

    Returns:
        ByteArray: Decoded bytes minus the leading version and trailing
            checksum.
        int: The version byte.
    """
    try:
        decoded = ByteArray(b58decode(s))
    except ValueError as e:
        raise NeoError("invalid base58 string %r: %s" % (s, e))
    if len(decoded) < 5:
        raise NeoError("decoded lacking version/checksum")
    if decoded[-4:] != checksum(decoded[:-4]):
        raise NeoError("checksum error")
    return decoded[1:-4], decoded[0]


def b58CheckEncode(version, payload):
    """
    Encode the version byte and payload as base-58 with a checksum.

    Args:
        version (int): The version byte.
        payload (bytes-like): The payload.

    Returns:
        str: The encoded string.
    """
    b = ByteArray(bytes([version])) + payload
    b += checksum(b)
    return b58encode(b.bytes()).decode()


def addressToScriptHash(addr):
    """
    The script hash encoded in the address.

    Args:
        addr (str): The base-58 encoded address.

    Returns:
        ByteArray: The 20-byte script hash.
    """
    payload, version = b58CheckDecode(addr)
    if version != AddressVersion:
        raise NeoError("unknown address version 0x%02x" % version)
    if len(payload) != ScriptHashSize:
        raise NeoError(
            "address payload is %d bytes, expected %d" % (len(payload), ScriptHashSize)
        )
    return payload


def scriptHashToAddress(scriptHash):
    """
    The address for the script hash.

    Args:
        scriptHash (bytes-like): The 20-byte script hash.

    Returns:
        str: The base-58 encoded address.
    """
    scriptHash = ByteArray(scriptHash)
    if len(scriptHash) != ScriptHashSize:
        raise NeoError(
            "script hash is %d bytes, expected %d" % (len(scriptHash), ScriptHashSize)
        )
    return b58CheckEncode(AddressVersion, scriptHash)
