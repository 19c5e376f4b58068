"""
Copyright (c) 2020, the NeoTx developers

This example script selects outputs to fund a GAS payment from a node's
unspent output response, then prints the selected inputs along with the
disassembly of a single-signature verification script and the serialized
remark attribute.
"""

from neotx import config
from neotx.script import opcode
from neotx.script.txscript import ScriptBuilder, disasmScript
from neotx.wallet.utxo import UTXO, InsufficientFundsError, selectUTXOs
from neotx.wire import txattr
from neotx.wire.txattr import TxAttr

GAS = "602c79718b16e442de58778e148d0b1084e3b2dffd5de6b7b16cee7969282de7"

# A node response, decoded.
UNSPENT = [
    {
        "txid": "4ee4af75d5aa60598fbae40ce86fb9a23ffec5a75dfa8b59d259d15f9e304319",
        "vout": {"Address": "", "Asset": GAS, "N": 0, "Value": "1.0"},
    },
    {
        "txid": "9e2da8b5d4c27dd4a3ba6c5fc2bc3a6adf9a6ae1a84d0e7cd4c7ac6b0e6cf6d9",
        "vout": {"Address": "", "Asset": GAS, "N": 1, "Value": "2.5"},
    },
    {
        "txid": "1f2bde9a9f2f0cd5d3bdc4a0c8ed54b2d7b86d4b2a0e7c6f1d0a3d5b8a4b9c0e",
        "vout": {"Address": "", "Asset": GAS, "N": 0, "Value": "0.5"},
    },
]


def main():
    cfg = config.load()
    cfg.prepareLogging()

    utxos = [UTXO.parse(obj) for obj in UNSPENT]
    try:
        selected = selectUTXOs(utxos, 2.0, asset=GAS)
    except InsufficientFundsError as e:
        print("Cannot fund the payment: %s" % e)
        return

    for utxo in selected:
        print("input %s value %s" % (utxo.key(), utxo.value()))

    pubKey = "02" + "11" * 32
    verification = ScriptBuilder().addData(pubKey).addOp(opcode.CHECKSIG).script()
    print(disasmScript(verification))

    remark = TxAttr(txattr.Remark, "paid with neotx".encode())
    print("remark attribute %s" % remark.serialize().hex())


if __name__ == "__main__":
    main()
