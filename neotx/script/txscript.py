"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

Instruction encoding for NEO VM scripts. An Op is an opcode and its operand.
Op does not frame its own operand. For PUSHDATA1/2/4 the operand must already
begin with the little-endian data length, which is what pushData and
ScriptBuilder produce.
"""

from neotx import NeoError
from neotx.util import helpers
from neotx.util.encode import ByteArray, intToBytes

from . import opcode


log = helpers.getLogger("TXSCRIPT")

# MaxPushData4 is the largest data length a PUSHDATA4 length prefix can hold.
MaxPushData4 = 0xFFFFFFFF


class ScriptParseError(NeoError):
    """
    A serialized script could not be split into instructions.
    """

    pass


class Op:
    """
    Op is a single VM instruction, an opcode followed by its operand bytes.
    """

    def __init__(self, code, arg=None):
        """
        Args:
            code (int): The opcode, 0 - 255.
            arg (bytes-like): optional. The operand, already framed as the
                opcode requires. default empty.
        """
        self.code = code
        self.arg = ByteArray(arg) if arg is not None else ByteArray(b"")

    def __eq__(self, other):
        return (
            isinstance(other, Op) and self.code == other.code and self.arg == other.arg
        )

    def __repr__(self):
        name = opcode.nameOf(self.code).strip() or hex(self.code)
        return "Op(%s, %s)" % (name, self.arg.hex())

    def __str__(self):
        return self.disasm()

    def serialize(self):
        """
        The wire encoding of the instruction. The opcode byte followed by the
        operand, verbatim.

        Returns:
            ByteArray: The serialized instruction.
        """
        return ByteArray(bytes([self.code])) + self.arg

    def serializeSize(self):
        """
        The length of the serialized instruction.

        Returns:
            int: 1 + the operand length.
        """
        return 1 + len(self.arg)

    def disasm(self):
        """
        A two-line diagnostic representation: the mnemonic, then the operand
        as lowercase hex. This is for logging and is not meant to be parsed.

        Returns:
            str: The disassembled instruction.
        """
        return "%s\n%s" % (opcode.nameOf(self.code), self.arg.hex())


def scriptNumBytes(n):
    """
    The minimal little-endian two's complement encoding of n, as used by the
    VM for integers.

    Args:
        n (int): The integer.

    Returns:
        ByteArray: The encoded integer. Zero encodes to no bytes.
    """
    if n == 0:
        return ByteArray(b"")
    return ByteArray(intToBytes(n, signed=True)).littleEndian()


def pushData(data):
    """
    A push instruction for the data, with the operand framed for the smallest
    suitable push opcode.

    Args:
        data (bytes-like): The data to push.

    Returns:
        Op: The push instruction.
    """
    data = ByteArray(data)
    dataLen = len(data)
    if dataLen == 0:
        return Op(opcode.PUSH0)
    if dataLen <= opcode.PUSHBYTES75:
        return Op(opcode.PUSHBYTES1 - 1 + dataLen, data)
    if dataLen <= 0xFF:
        return Op(opcode.PUSHDATA1, ByteArray(bytes([dataLen])) + data)
    if dataLen <= 0xFFFF:
        return Op(opcode.PUSHDATA2, ByteArray(dataLen.to_bytes(2, "little")) + data)
    if dataLen > MaxPushData4:
        raise NeoError("cannot push %d bytes" % dataLen)
    return Op(opcode.PUSHDATA4, ByteArray(dataLen.to_bytes(4, "little")) + data)


def pushInt(n):
    """
    A push instruction for the integer. The small-integer opcodes are used
    where they apply.

    Args:
        n (int): The integer.

    Returns:
        Op: The push instruction.
    """
    if n == -1:
        return Op(opcode.PUSHM1)
    if n == 0:
        return Op(opcode.PUSH0)
    if 1 <= n <= 16:
        return Op(opcode.PUSH1 - 1 + n)
    return pushData(scriptNumBytes(n))


class ScriptBuilder:
    """
    ScriptBuilder accumulates instructions and produces the serialized script.
    Methods return the builder so calls can be chained.
    """

    def __init__(self):
        self.ops = []

    def addOp(self, op):
        """
        Add an instruction. An int is taken as an opcode with no operand.

        Args:
            op (Op or int): The instruction.
        """
        self.ops.append(op if isinstance(op, Op) else Op(op))
        return self

    def addData(self, data):
        """Add a push of the data."""
        self.ops.append(pushData(data))
        return self

    def addInt(self, n):
        """Add a push of the integer."""
        self.ops.append(pushInt(n))
        return self

    def addSysCall(self, api):
        """
        Add a SYSCALL of the named interop service. The operand is the
        length-prefixed ASCII name.

        Args:
            api (str): The service name, e.g. "Neo.Runtime.CheckWitness".
        """
        name = api.encode("ascii")
        if len(name) > 252:
            raise NeoError("syscall name too long: %s" % api)
        self.ops.append(Op(opcode.SYSCALL, ByteArray(bytes([len(name)])) + name))
        return self

    def script(self):
        """
        Returns:
            ByteArray: The serialized script.
        """
        b = ByteArray(b"")
        for op in self.ops:
            b += op.serialize()
        return b


class ScriptTokenizer:
    """
    ScriptTokenizer splits a serialized script into instructions. Each call to
    next parses one instruction and returns False when the script is exhausted
    or a parse error was encountered. The error, if any, is available as err.

    The operand of each parsed Op is framed exactly as it appears in the
    script, so that serializing the parsed instructions reproduces the script.
    """

    def __init__(self, script):
        self.script = ByteArray(script)
        self.offset = 0
        self.op = None
        self.err = None

    def next(self):
        """
        Parse the next instruction.

        Returns:
            bool: True if an instruction was parsed.
        """
        if self.done():
            return False
        script = self.script
        code = script[self.offset]
        entry = opcode.opcodeArray.get(code)
        length = entry.length if entry else 1
        if entry is None:
            log.debug("unknown opcode 0x%02x at offset %d", code, self.offset)

        if length == 1:
            self.op = Op(code)
            self.offset += 1
            return True

        remaining = script[self.offset + 1 :]
        if length > 1:
            # Fixed-size operands: PUSHBYTES1-75, jumps and calls.
            dataLen = length - 1
            if len(remaining) < dataLen:
                self.err = ScriptParseError(
                    "opcode %s requires %d bytes, but script only has %d remaining"
                    % (entry.name, dataLen, len(remaining))
                )
                return False
            self.op = Op(code, remaining[:dataLen])
            self.offset += length
            return True

        # PUSHDATA1/2/4 and SYSCALL. The next -length bytes are the little endian
        # length of the data.
        prefixLen = -length
        if len(remaining) < prefixLen:
            self.err = ScriptParseError(
                "opcode %s requires %d bytes, but script only has %d remaining"
                % (entry.name, prefixLen, len(remaining))
            )
            return False
        dataLen = remaining[:prefixLen].littleEndian().int()
        if dataLen > len(remaining) - prefixLen:
            self.err = ScriptParseError(
                "opcode %s pushes %d bytes, but script only has %d remaining"
                % (entry.name, dataLen, len(remaining) - prefixLen)
            )
            return False
        self.op = Op(code, remaining[: prefixLen + dataLen])
        self.offset += 1 + prefixLen + dataLen
        return True

    def done(self):
        """
        Returns:
            bool: True if tokenizing is complete, successfully or not.
        """
        return self.err is not None or self.offset >= len(self.script)


def parseScript(script):
    """
    Split the serialized script into instructions.

    Args:
        script (bytes-like): The serialized script.

    Returns:
        list(Op): The instructions.

    Raises:
        ScriptParseError: A push runs past the end of the script.
    """
    tokenizer = ScriptTokenizer(script)
    ops = []
    while tokenizer.next():
        ops.append(tokenizer.op)
    if tokenizer.err is not None:
        raise tokenizer.err
    return ops


def disasmScript(script):
    """
    The disassembly of each instruction in the script, joined by newlines.

    Args:
        script (bytes-like): The serialized script.

    Returns:
        str: The disassembly.
    """
    return "\n".join(op.disasm() for op in parseScript(script))
