"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

Transaction attributes. An attribute is a usage tag and an opaque payload.
"""

from neotx.util.encode import ByteArray


# Attribute usage tags of the NEO 2 protocol. TxAttr accepts any byte as its
# usage, these are for convenience.
# fmt: off
ContractHash   = 0x00
ECDH02         = 0x02
ECDH03         = 0x03
Script         = 0x20
Vote           = 0x30
DescriptionUrl = 0x81
Description    = 0x90

Hash1          = 0xA1
Hash2          = 0xA2
Hash3          = 0xA3
Hash4          = 0xA4
Hash5          = 0xA5
Hash6          = 0xA6
Hash7          = 0xA7
Hash8          = 0xA8
Hash9          = 0xA9
Hash10         = 0xAA
Hash11         = 0xAB
Hash12         = 0xAC
Hash13         = 0xAD
Hash14         = 0xAE
Hash15         = 0xAF

Remark         = 0xF0
Remark1        = 0xF1
Remark2        = 0xF2
Remark3        = 0xF3
Remark4        = 0xF4
Remark5        = 0xF5
Remark6        = 0xF6
Remark7        = 0xF7
Remark8        = 0xF8
Remark9        = 0xF9
Remark10       = 0xFA
Remark11       = 0xFB
Remark12       = 0xFC
Remark13       = 0xFD
Remark14       = 0xFE
Remark15       = 0xFF
# fmt: on


class TxAttr:
    """
    TxAttr is a transaction attribute.
    """

    def __init__(self, usage, data=None):
        """
        Args:
            usage (int): The usage byte. Not validated.
            data (bytes-like): optional. The payload. default empty.
        """
        self.usage = usage
        self.data = ByteArray(data) if data is not None else ByteArray(b"")

    def __eq__(self, other):
        return (
            isinstance(other, TxAttr)
            and self.usage == other.usage
            and self.data == other.data
        )

    def __repr__(self):
        return "TxAttr(0x%02x, %s)" % (self.usage, self.data.hex())

    def serialize(self):
        """
        The usage byte followed by the payload verbatim. No length prefix is
        written; framing the payload is up to the producer.

        Returns:
            ByteArray: The serialized attribute.
        """
        return ByteArray(bytes([self.usage])) + self.data

    def serializeSize(self):
        """
        Returns:
            int: The length of the serialized attribute.
        """
        return 1 + len(self.data)
