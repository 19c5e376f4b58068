"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details
"""

import logging
import random

import pytest

from neotx import NeoError
from neotx.wallet import addrlib, utxo
from neotx.wallet.utxo import (
    UTXO,
    HexDecodeError,
    InsufficientFundsError,
    ParseError,
    Vout,
)


NEO = "c56f33fc6ecfcd0c225c4ab356fee59390af8560be0e930faebe74a6daff7c9b"
GAS = "602c79718b16e442de58778e148d0b1084e3b2dffd5de6b7b16cee7969282de7"

TXID = "deadbeef" * 8


def newUTXO(value, n=0, txid=TXID, asset=NEO, address=""):
    return UTXO(txid, Vout(address=address, asset=asset, n=n, value=value))


def makeUTXOs(*values, asset=NEO):
    return [newUTXO(v, n=i, asset=asset) for i, v in enumerate(values)]


def total(utxos):
    return sum(u.value() for u in utxos)


@pytest.mark.parametrize(
    "s, v",
    [
        ("1", 1.0),
        ("1.0", 1.0),
        ("2.5", 2.5),
        ("0.00000001", 1e-8),
        ("-3", -3.0),
        ("+3.", 3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("1.5E-2", 0.015),
    ],
)
def test_parse_decimal(s, v):
    assert utxo.parseDecimal(s) == v


@pytest.mark.parametrize(
    "s",
    ["", "abc", "1.0.0", "1,5", " 1", "1 ", "1_000", "0x10", "nan", "inf", "1e400", None, 5],
)
def test_parse_decimal_invalid(s):
    with pytest.raises(ParseError):
        utxo.parseDecimal(s)


class TestUTXO:
    def test_parse(self):
        obj = {
            "txid": TXID,
            "vout": {"Address": "addr", "Asset": GAS, "N": 3, "Value": "12.5"},
        }
        u = UTXO.parse(obj)
        assert u.txid == TXID
        assert u.asset == GAS
        assert u.n == 3
        assert u.vout.address == "addr"
        assert u.vout.value == "12.5"
        assert u.value() == 12.5
        assert u.key() == TXID + "#3"
        assert UTXO.makeKey("ab", 0) == "ab#0"
        assert TXID in repr(u)

    def test_value_cached(self, monkeypatch):
        calls = []
        parse = utxo.parseDecimal

        def countingParse(s):
            calls.append(s)
            return parse(s)

        monkeypatch.setattr(utxo, "parseDecimal", countingParse)
        u = newUTXO("7.25")
        assert u.value() == 7.25
        assert u.value() == 7.25
        assert len(calls) == 1

    def test_value_parse_error_not_cached(self, monkeypatch):
        calls = []
        parse = utxo.parseDecimal

        def countingParse(s):
            calls.append(s)
            return parse(s)

        monkeypatch.setattr(utxo, "parseDecimal", countingParse)
        u = newUTXO("bad")
        with pytest.raises(ParseError):
            u.value()
        with pytest.raises(ParseError):
            u.value()
        # Each failed call re-attempts the parse.
        assert len(calls) == 2
        assert u._value is None

        # A corrected value string is picked up on the next call.
        u.vout.value = "3"
        assert u.value() == 3.0
        assert len(calls) == 3

    def test_id_bytes(self):
        u = newUTXO("1", txid="deadbeef")
        assert u.idBytes() == [0xDE, 0xAD, 0xBE, 0xEF]
        assert newUTXO("1", txid="DEADBEEF").idBytes() == [0xDE, 0xAD, 0xBE, 0xEF]
        assert newUTXO("1", txid="").idBytes() == b""

    @pytest.mark.parametrize("txid", ["xyz", "abc", "zz", "de ad", "0xdead", "dead\n"])
    def test_id_bytes_invalid(self, txid):
        with pytest.raises(HexDecodeError):
            newUTXO("1", txid=txid).idBytes()

    def test_script_hash(self):
        scriptHash = bytes(range(20))
        addr = addrlib.scriptHashToAddress(scriptHash)
        assert newUTXO("1", address=addr).scriptHash() == scriptHash
        with pytest.raises(NeoError):
            newUTXO("1", address="notanaddress").scriptHash()


def test_resolve_values():
    utxos = makeUTXOs("1.0", "2.5", "0.5")
    assert utxo.resolveValues(utxos) == 4.0
    assert all(u._value is not None for u in utxos)

    utxos = makeUTXOs("1.0", "x", "0.5", "y")
    with pytest.raises(ParseError, match="'x'"):
        utxo.resolveValues(utxos)


@pytest.mark.usefixtures("prepareLogger")
class TestSelectUTXOs:
    def test_scenario(self):
        utxos = makeUTXOs("1.0", "2.5", "0.5")
        selected = utxo.selectUTXOs(utxos, 2.0)
        assert [u.value() for u in selected] == [0.5, 1.0, 2.5]
        assert [u.n for u in selected] == [2, 0, 1]

    def test_ordering_regression(self):
        # Ordering must compare each candidate's own value, not a fixed pair
        # of elements. Distinct values in scrambled order catch that.
        utxos = makeUTXOs("5", "3", "1", "4", "2")
        selected = utxo.selectUTXOs(utxos, 6)
        assert [u.value() for u in selected] == [1, 2, 3]
        selected = utxo.selectUTXOs(utxos, 15)
        assert [u.value() for u in selected] == [1, 2, 3, 4, 5]
        selected = utxo.selectUTXOs(utxos, 0.5)
        assert [u.n for u in selected] == [2]

    def test_stops_at_target(self):
        utxos = makeUTXOs("1", "1", "1", "1")
        selected = utxo.selectUTXOs(utxos, 2)
        assert len(selected) == 2
        selected = utxo.selectUTXOs(utxos, 2.1)
        assert len(selected) == 3

    def test_stable_ties(self):
        utxos = makeUTXOs("2", "1", "2", "1", "2")
        selected = utxo.selectUTXOs(utxos, 3)
        assert [u.n for u in selected] == [1, 3, 0]
        # Reordering the input reorders equal-valued selections.
        selected = utxo.selectUTXOs(list(reversed(utxos)), 3)
        assert [u.n for u in selected] == [3, 1, 4]

    def test_zero_target(self):
        assert utxo.selectUTXOs(makeUTXOs("1"), 0) == []
        assert utxo.selectUTXOs([], 0) == []

    def test_insufficient(self):
        utxos = makeUTXOs("1.0", "2.5", "0.5")
        with pytest.raises(InsufficientFundsError):
            utxo.selectUTXOs(utxos, 4.01)
        with pytest.raises(InsufficientFundsError):
            utxo.selectUTXOs([], 1)
        # Exactly the total is enough.
        assert len(utxo.selectUTXOs(utxos, 4.0)) == 3

    def test_unparseable_skipped(self, caplog):
        utxos = makeUTXOs("1.0", "bad", "0.5", "3")
        with caplog.at_level(logging.WARNING):
            selected = utxo.selectUTXOs(utxos, 1.5)
        assert [u.n for u in selected] == [2, 0]
        assert "skipping output" in caplog.text
        # The unparseable output's value does not count toward the total.
        utxos = makeUTXOs("1.0", "100x")
        with pytest.raises(InsufficientFundsError):
            utxo.selectUTXOs(utxos, 2)

    def test_asset_filter(self):
        utxos = makeUTXOs("1", "2") + makeUTXOs("10", asset=GAS)
        selected = utxo.selectUTXOs(utxos, 5, asset=GAS)
        assert [u.asset for u in selected] == [GAS]
        with pytest.raises(InsufficientFundsError):
            utxo.selectUTXOs(utxos, 5, asset=NEO)
        assert len(utxo.selectUTXOs(utxos, 5)) == 3

    def test_approve(self):
        utxos = makeUTXOs("1", "2", "3")
        selected = utxo.selectUTXOs(utxos, 3, approve=lambda u: u.n != 0)
        assert [u.n for u in selected] == [1, 2]
        with pytest.raises(InsufficientFundsError):
            utxo.selectUTXOs(utxos, 1, approve=lambda u: False)

    def test_duplicates_not_removed(self):
        u = newUTXO("1")
        selected = utxo.selectUTXOs([u, u], 2)
        assert selected == [u, u]

    def test_sufficiency_random(self):
        random.seed(0)
        for _ in range(200):
            values = [random.randint(1, 10000) / 100 for _ in range(random.randint(1, 12))]
            utxos = makeUTXOs(*[str(v) for v in values])
            target = random.uniform(0, sum(values))
            selected = utxo.selectUTXOs(utxos, target)
            picked = [u.value() for u in selected]
            # Ascending order and sufficiency.
            assert picked == sorted(picked)
            assert total(selected) >= target
            # Greedy stop: everything before the last pick was not enough.
            if len(selected) > 1:
                assert total(selected[:-1]) < target
            # The selection is the smallest values.
            assert picked == sorted(values)[: len(picked)]
