"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

ByteArray wraps a bytearray and accepts the various byte-like inputs used
throughout neotx, including hex strings and integers.
"""

from neotx import NeoError


def intToBytes(i, signed=False):
    """
    Encodes an integer to the minimal number of big-endian bytes.

    Args:
        i (int): The integer.
        signed (bool): Whether to encode as a two's complement signed integer.

    Returns:
        bytearray: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return bytearray(i.to_bytes(length, byteorder="big", signed=signed))


def intFromBytes(b, signed=False):
    """
    Decodes an integer from big-endian bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode to
            a bytearray. Strings are interpreted as hexadecimal. Integers are
            minimally encoded to an unsigned integer.
        copy (bool): For bytearray and ByteArray input, whether to copy the
            underlying buffer rather than share it.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray([0])
    if isinstance(b, str):
        return bytearray.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray is a bytearray manager. Comparison and concatenation accept any
    input understood by decodeBA, so a ByteArray can be compared directly with
    bytes, lists of ints or hex strings.

    An integer argument to the constructor results in the shortest possible
    big-endian representation of the integer, where for bytearray an int
    argument results in a zero-valued bytearray of said length. Use the
    `length` keyword to left-pad with zeros to a fixed width.
    """

    def __init__(self, b=b"", copy=True, length=None):
        """
        Set copy to False if you want to share the memory with another
        bytearray/ByteArray. If the type of b is not bytearray or ByteArray,
        copy has no effect.
        """
        self.b = decodeBA(b, copy=copy)
        if length:
            if len(self.b) > length:
                raise NeoError(
                    "ByteArray: %d bytes do not fit length %d" % (len(self.b), length)
                )
            self.b = bytearray(length - len(self.b)) + self.b

    def __eq__(self, a):
        try:
            return bytearray.__eq__(self.b, decodeBA(a))
        except Exception:
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        """Concatenate and return a new ByteArray."""
        return ByteArray(self.b + decodeBA(a))

    def __iadd__(self, a):
        return self.__add__(a)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __reversed__(self):
        return ByteArray(bytearray(reversed(self.b)))

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(bytes(self.b))

    def hex(self):
        """
        A lowercase hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def rhex(self):
        """
        A reversed hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.__reversed__().hex()

    def int(self):
        """The bytes as a big-endian unsigned integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)

    def littleEndian(self):
        """A copy of the ByteArray, reversed."""
        return ByteArray(reversed(self.b))

    def copy(self):
        """A copy of the ByteArray."""
        return ByteArray(self.b)
