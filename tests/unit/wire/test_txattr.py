"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details
"""

from neotx.util.encode import ByteArray
from neotx.wire import txattr
from neotx.wire.txattr import TxAttr


def test_serialize():
    attr = TxAttr(0x20, [0xDE, 0xAD])
    assert attr.serialize() == [0x20, 0xDE, 0xAD]
    assert attr.serializeSize() == 3


def test_serialize_any_usage(randBytes):
    # Usage is not checked against the known tags, and no length is written.
    for usage in range(256):
        data = randBytes()
        b = TxAttr(usage, data).serialize()
        assert len(b) == 1 + len(data)
        assert b[0] == usage
        assert b[1:] == data


def test_empty_data():
    assert TxAttr(txattr.Remark).serialize() == ByteArray("f0")
    assert TxAttr(txattr.ContractHash, b"").serialize() == ByteArray("00")


def test_usages():
    assert txattr.Script == 0x20
    assert txattr.DescriptionUrl == 0x81
    assert txattr.Hash1 == 0xA1
    assert txattr.Hash15 == 0xAF
    assert txattr.Remark15 == 0xFF
    remark = TxAttr(txattr.Remark1, "hello".encode())
    assert remark.serialize() == ByteArray("f1") + b"hello"


def test_equality():
    assert TxAttr(1, "ab") == TxAttr(1, [0xAB])
    assert TxAttr(1, "ab") != TxAttr(2, "ab")
    assert TxAttr(1, "ab") != TxAttr(1, "ac")
    assert repr(TxAttr(0x90, "ff")) == "TxAttr(0x90, ff)"
