"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

Unspent transaction outputs, as returned by a node's query API, and the
selection of outputs to fund a transaction.
"""

import math
import re
import string

from neotx import NeoError
from neotx.util import helpers
from neotx.util.encode import ByteArray

from . import addrlib


log = helpers.getLogger("UTXO")

_decimalRE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_hexDigits = frozenset(string.hexdigits)


class ParseError(NeoError):
    """
    A decimal value string could not be parsed.
    """

    pass


class HexDecodeError(NeoError):
    """
    A hexadecimal string is malformed.
    """

    pass


class InsufficientFundsError(NeoError):
    """
    The candidate outputs cannot cover the requested value.
    """

    pass


def parseDecimal(s):
    """
    Parse the decimal string as a float. Only plain decimal notation with an
    optional exponent is accepted, and the result must be finite.

    Args:
        s (str): The decimal string, e.g. "12.5".

    Returns:
        float: The value.

    Raises:
        ParseError: The string is not a finite decimal number.
    """
    if not isinstance(s, str) or not _decimalRE.fullmatch(s):
        raise ParseError("invalid decimal value %r" % (s,))
    v = float(s)
    if not math.isfinite(v):
        raise ParseError("decimal value %r out of range" % (s,))
    return v


def decodeHex(s):
    """
    Strictly decode a hexadecimal string. Whitespace and prefixes are not
    accepted.

    Args:
        s (str): The hex string.

    Returns:
        ByteArray: The decoded bytes.

    Raises:
        HexDecodeError: The string has odd length or a non-hex character.
    """
    if not isinstance(s, str):
        raise HexDecodeError("expected a hex string, got %s" % type(s))
    if len(s) % 2 != 0:
        raise HexDecodeError("odd length hex string %r" % s)
    if not _hexDigits.issuperset(s):
        raise HexDecodeError("invalid hex string %r" % s)
    return ByteArray(bytes.fromhex(s))


class Vout:
    """
    Vout is the output record nested in a node's unspent output response.
    """

    def __init__(self, address, asset, n, value):
        """
        Args:
            address (str): The base58 address the output pays to.
            asset (str): The asset ID.
            n (int): The output index in its transaction.
            value (str): The decimal value.
        """
        self.address = address
        self.asset = asset
        self.n = n
        self.value = value

    @staticmethod
    def parse(obj):
        """
        Parse the decoded JSON output record.

        Args:
            obj (dict): The record, with keys Address, Asset, N and Value.
        """
        return Vout(
            address=obj.get("Address", ""),
            asset=obj["Asset"],
            n=obj["N"],
            value=obj["Value"],
        )


class UTXO:
    """
    UTXO is an unspent output that is a candidate for spending.

    The parsed value is cached on first successful access. The cache is not
    guarded, so a UTXO should have a single owner. If a set of UTXOs is to be
    shared between threads, resolve their values first with resolveValues.
    """

    def __init__(self, txid, vout):
        """
        Args:
            txid (str): The hex-encoded ID of the transaction holding the output.
            vout (Vout): The output record.
        """
        self.txid = txid
        self.vout = vout
        self._value = None

    def __repr__(self):
        return "UTXO(%s, %s)" % (self.key(), self.vout.value)

    @staticmethod
    def parse(obj):
        """
        Parse the decoded JSON from the node API into a UTXO.

        Args:
            obj (dict): A record with keys txid and vout.
        """
        return UTXO(txid=obj["txid"], vout=Vout.parse(obj["vout"]))

    @property
    def asset(self):
        return self.vout.asset

    @property
    def n(self):
        return self.vout.n

    def value(self):
        """
        The output value. Parsed on first use and cached. A failed parse is not
        cached, so a later call will try again.

        Returns:
            float: The value.

        Raises:
            ParseError: The value string is not a decimal number.
        """
        if self._value is None:
            self._value = parseDecimal(self.vout.value)
        return self._value

    def idBytes(self):
        """
        The transaction ID decoded from hex.

        Returns:
            ByteArray: The transaction ID bytes.

        Raises:
            HexDecodeError: The transaction ID is not valid hex.
        """
        return decodeHex(self.txid)

    def scriptHash(self):
        """
        The script hash the output pays to, decoded from its address.

        Returns:
            ByteArray: The 20-byte script hash.
        """
        return addrlib.addressToScriptHash(self.vout.address)

    def key(self):
        """
        A unique ID for this UTXO.
        """
        return UTXO.makeKey(self.txid, self.vout.n)

    @staticmethod
    def makeKey(txid, n):
        """
        A unique ID for a UTXO.

        Args:
            txid (str): UTXO's transaction ID.
            n (int): UTXO's transaction output index.
        """
        return txid + "#" + str(n)


def resolveValues(utxos):
    """
    Resolve the value of every UTXO, in order. Afterwards the UTXOs are safe to
    read from multiple threads.

    Args:
        utxos (list(UTXO)): The outputs.

    Returns:
        float: The total value.

    Raises:
        ParseError: The first value that fails to parse.
    """
    total = 0.0
    for utxo in utxos:
        total += utxo.value()
    return total


def selectUTXOs(utxos, target, asset=None, approve=None):
    """
    Find UTXOs, smallest first, that sum to at least the target value. UTXOs
    with equal values keep their input order. UTXOs whose values cannot be
    parsed are skipped and logged.

    Args:
        utxos (list(UTXO)): The candidate outputs.
        target (float): The required value.
        asset (str): optional. Only consider outputs of this asset.
        approve (func(UTXO) -> bool): optional. Only consider outputs for which
            approve returns True.

    Returns:
        list(UTXO): The selected outputs, in ascending value order.

    Raises:
        InsufficientFundsError: The considered outputs sum to less than target.
    """
    if target <= 0:
        return []

    pairs = []
    for utxo in utxos:
        if asset is not None and utxo.asset != asset:
            continue
        if approve and not approve(utxo):
            continue
        try:
            pairs.append((utxo.value(), utxo))
        except ParseError as e:
            log.warning("skipping output %s: %s", utxo.key(), e)

    matches = []
    collected = 0.0
    for v, utxo in sorted(pairs, key=lambda p: p[0]):
        matches.append(utxo)
        collected += v
        if collected >= target:
            log.debug(
                "selected %d of %d outputs, total %s for target %s",
                len(matches),
                len(pairs),
                collected,
                target,
            )
            return matches

    raise InsufficientFundsError(
        "insufficient funds: %s available, %s requested" % (collected, target)
    )
