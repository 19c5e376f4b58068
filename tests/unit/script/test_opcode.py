"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details
"""

import pytest

from neotx.script import opcode


def test_name_of_defined():
    for code, op in opcode.opcodeArray.items():
        name = opcode.nameOf(code)
        assert len(name) == opcode.MNEMONIC_WIDTH
        assert name.strip() != ""
        assert name == op.mnemonic
        assert op.value == code


@pytest.mark.parametrize(
    "code, name",
    [
        (opcode.PUSH0, "PUSH0      "),
        (opcode.PUSHF, "PUSH0      "),
        (opcode.PUSHBYTES1, "PUSHBYTES1 "),
        (opcode.PUSHBYTES75, "PUSHBYTES75"),
        (opcode.PUSHDATA2, "PUSHDATA2  "),
        (opcode.PUSHM1, "PUSHM1     "),
        (opcode.PUSHT, "PUSH1      "),
        (opcode.PUSH16, "PUSH16     "),
        (opcode.DUPFROMALTSTACK, "DUPFROMALTS"),
        (opcode.FROMALTSTACK, "FROMALTSTAC"),
        (opcode.NUMNOTEQUAL, "NUMNOTEQUAL"),
        (opcode.CHECKMULTISIG, "CHECKMULTIS"),
        (opcode.CHECKSIG, "CHECKSIG   "),
        (opcode.THROWIFNOT, "THROWIFNOT "),
    ],
)
def test_name_of_mnemonics(code, name):
    assert opcode.nameOf(code) == name


def test_name_of_undefined():
    defined = set(opcode.opcodeArray)
    undefined = [c for c in range(256) if c not in defined]
    # Gaps in the table, e.g. 0x50, 0x6E-0x71, 0x88-0x8A, 0xFF.
    for c in (0x50, 0x6E, 0x71, 0x88, 0x8E, 0x9D, 0xA6, 0xAB, 0xAD, 0xC7, 0xF2, 0xFF):
        assert c in undefined
    for c in undefined:
        assert opcode.nameOf(c) == ""
    # Values outside of a byte are never defined.
    assert opcode.nameOf(256) == ""
    assert opcode.nameOf(-1) == ""


def test_opcode_values():
    assert opcode.PUSHBYTES1 == 0x01
    assert opcode.PUSHBYTES33 == 0x21
    assert opcode.PUSHBYTES75 == 0x4B
    assert opcode.PUSHDATA1 == 0x4C
    assert opcode.PUSH1 == 0x51
    assert opcode.PUSH16 == 0x60
    assert opcode.NOP == 0x61
    assert opcode.SYSCALL == 0x68
    assert opcode.CHECKSIG == 0xAC
    assert opcode.THROW == 0xF0


def test_opcode_lengths():
    arr = opcode.opcodeArray
    assert arr[opcode.PUSH0].length == 1
    assert arr[opcode.PUSHBYTES1].length == 2
    assert arr[opcode.PUSHBYTES20].length == 21
    assert arr[opcode.PUSHBYTES75].length == 76
    assert arr[opcode.PUSHDATA1].length == -1
    assert arr[opcode.PUSHDATA2].length == -2
    assert arr[opcode.PUSHDATA4].length == -4
    assert arr[opcode.PUSH5].length == 1
    assert arr[opcode.JMP].length == 3
    assert arr[opcode.APPCALL].length == 21
    assert arr[opcode.SYSCALL].length == -1
