"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

Opcodes of the NEO virtual machine, along with the mnemonic table used for
disassembly.
"""

# fmt: off
PUSH0           = 0x00 # An empty array of bytes is pushed onto the stack.
PUSHF           = PUSH0
PUSHBYTES1      = 0x01 # The next 1 byte is pushed onto the stack.
PUSHBYTES2      = 0x02 # The next 2 bytes are pushed onto the stack.
PUSHBYTES3      = 0x03 # The next 3 bytes are pushed onto the stack.
PUSHBYTES4      = 0x04 # The next 4 bytes are pushed onto the stack.
PUSHBYTES5      = 0x05 # The next 5 bytes are pushed onto the stack.
PUSHBYTES6      = 0x06 # The next 6 bytes are pushed onto the stack.
PUSHBYTES7      = 0x07 # The next 7 bytes are pushed onto the stack.
PUSHBYTES8      = 0x08 # The next 8 bytes are pushed onto the stack.
PUSHBYTES9      = 0x09 # The next 9 bytes are pushed onto the stack.
PUSHBYTES10     = 0x0A # The next 10 bytes are pushed onto the stack.
PUSHBYTES11     = 0x0B # The next 11 bytes are pushed onto the stack.
PUSHBYTES12     = 0x0C # The next 12 bytes are pushed onto the stack.
PUSHBYTES13     = 0x0D # The next 13 bytes are pushed onto the stack.
PUSHBYTES14     = 0x0E # The next 14 bytes are pushed onto the stack.
PUSHBYTES15     = 0x0F # The next 15 bytes are pushed onto the stack.
PUSHBYTES16     = 0x10 # The next 16 bytes are pushed onto the stack.
PUSHBYTES17     = 0x11 # The next 17 bytes are pushed onto the stack.
PUSHBYTES18     = 0x12 # The next 18 bytes are pushed onto the stack.
PUSHBYTES19     = 0x13 # The next 19 bytes are pushed onto the stack.
PUSHBYTES20     = 0x14 # The next 20 bytes are pushed onto the stack.
PUSHBYTES21     = 0x15 # The next 21 bytes are pushed onto the stack.
PUSHBYTES22     = 0x16 # The next 22 bytes are pushed onto the stack.
PUSHBYTES23     = 0x17 # The next 23 bytes are pushed onto the stack.
PUSHBYTES24     = 0x18 # The next 24 bytes are pushed onto the stack.
PUSHBYTES25     = 0x19 # The next 25 bytes are pushed onto the stack.
PUSHBYTES26     = 0x1A # The next 26 bytes are pushed onto the stack.
PUSHBYTES27     = 0x1B # The next 27 bytes are pushed onto the stack.
PUSHBYTES28     = 0x1C # The next 28 bytes are pushed onto the stack.
PUSHBYTES29     = 0x1D # The next 29 bytes are pushed onto the stack.
PUSHBYTES30     = 0x1E # The next 30 bytes are pushed onto the stack.
PUSHBYTES31     = 0x1F # The next 31 bytes are pushed onto the stack.
PUSHBYTES32     = 0x20 # The next 32 bytes are pushed onto the stack.
PUSHBYTES33     = 0x21 # The next 33 bytes are pushed onto the stack.
PUSHBYTES34     = 0x22 # The next 34 bytes are pushed onto the stack.
PUSHBYTES35     = 0x23 # The next 35 bytes are pushed onto the stack.
PUSHBYTES36     = 0x24 # The next 36 bytes are pushed onto the stack.
PUSHBYTES37     = 0x25 # The next 37 bytes are pushed onto the stack.
PUSHBYTES38     = 0x26 # The next 38 bytes are pushed onto the stack.
PUSHBYTES39     = 0x27 # The next 39 bytes are pushed onto the stack.
PUSHBYTES40     = 0x28 # The next 40 bytes are pushed onto the stack.
PUSHBYTES41     = 0x29 # The next 41 bytes are pushed onto the stack.
PUSHBYTES42     = 0x2A # The next 42 bytes are pushed onto the stack.
PUSHBYTES43     = 0x2B # The next 43 bytes are pushed onto the stack.
PUSHBYTES44     = 0x2C # The next 44 bytes are pushed onto the stack.
PUSHBYTES45     = 0x2D # The next 45 bytes are pushed onto the stack.
PUSHBYTES46     = 0x2E # The next 46 bytes are pushed onto the stack.
PUSHBYTES47     = 0x2F # The next 47 bytes are pushed onto the stack.
PUSHBYTES48     = 0x30 # The next 48 bytes are pushed onto the stack.
PUSHBYTES49     = 0x31 # The next 49 bytes are pushed onto the stack.
PUSHBYTES50     = 0x32 # The next 50 bytes are pushed onto the stack.
PUSHBYTES51     = 0x33 # The next 51 bytes are pushed onto the stack.
PUSHBYTES52     = 0x34 # The next 52 bytes are pushed onto the stack.
PUSHBYTES53     = 0x35 # The next 53 bytes are pushed onto the stack.
PUSHBYTES54     = 0x36 # The next 54 bytes are pushed onto the stack.
PUSHBYTES55     = 0x37 # The next 55 bytes are pushed onto the stack.
PUSHBYTES56     = 0x38 # The next 56 bytes are pushed onto the stack.
PUSHBYTES57     = 0x39 # The next 57 bytes are pushed onto the stack.
PUSHBYTES58     = 0x3A # The next 58 bytes are pushed onto the stack.
PUSHBYTES59     = 0x3B # The next 59 bytes are pushed onto the stack.
PUSHBYTES60     = 0x3C # The next 60 bytes are pushed onto the stack.
PUSHBYTES61     = 0x3D # The next 61 bytes are pushed onto the stack.
PUSHBYTES62     = 0x3E # The next 62 bytes are pushed onto the stack.
PUSHBYTES63     = 0x3F # The next 63 bytes are pushed onto the stack.
PUSHBYTES64     = 0x40 # The next 64 bytes are pushed onto the stack.
PUSHBYTES65     = 0x41 # The next 65 bytes are pushed onto the stack.
PUSHBYTES66     = 0x42 # The next 66 bytes are pushed onto the stack.
PUSHBYTES67     = 0x43 # The next 67 bytes are pushed onto the stack.
PUSHBYTES68     = 0x44 # The next 68 bytes are pushed onto the stack.
PUSHBYTES69     = 0x45 # The next 69 bytes are pushed onto the stack.
PUSHBYTES70     = 0x46 # The next 70 bytes are pushed onto the stack.
PUSHBYTES71     = 0x47 # The next 71 bytes are pushed onto the stack.
PUSHBYTES72     = 0x48 # The next 72 bytes are pushed onto the stack.
PUSHBYTES73     = 0x49 # The next 73 bytes are pushed onto the stack.
PUSHBYTES74     = 0x4A # The next 74 bytes are pushed onto the stack.
PUSHBYTES75     = 0x4B # The next 75 bytes are pushed onto the stack.
PUSHDATA1       = 0x4C # The next byte contains the number of bytes to be pushed onto the stack.
PUSHDATA2       = 0x4D # The next two bytes contain the number of bytes to be pushed onto the stack.
PUSHDATA4       = 0x4E # The next four bytes contain the number of bytes to be pushed onto the stack.
PUSHM1          = 0x4F # The number -1 is pushed onto the stack.
PUSH1           = 0x51 # The number 1 is pushed onto the stack.
PUSHT           = PUSH1
PUSH2           = 0x52 # The number 2 is pushed onto the stack.
PUSH3           = 0x53 # The number 3 is pushed onto the stack.
PUSH4           = 0x54 # The number 4 is pushed onto the stack.
PUSH5           = 0x55 # The number 5 is pushed onto the stack.
PUSH6           = 0x56 # The number 6 is pushed onto the stack.
PUSH7           = 0x57 # The number 7 is pushed onto the stack.
PUSH8           = 0x58 # The number 8 is pushed onto the stack.
PUSH9           = 0x59 # The number 9 is pushed onto the stack.
PUSH10          = 0x5A # The number 10 is pushed onto the stack.
PUSH11          = 0x5B # The number 11 is pushed onto the stack.
PUSH12          = 0x5C # The number 12 is pushed onto the stack.
PUSH13          = 0x5D # The number 13 is pushed onto the stack.
PUSH14          = 0x5E # The number 14 is pushed onto the stack.
PUSH15          = 0x5F # The number 15 is pushed onto the stack.
PUSH16          = 0x60 # The number 16 is pushed onto the stack.
NOP             = 0x61 # Does nothing.
JMP             = 0x62
JMPIF           = 0x63
JMPIFNOT        = 0x64
CALL            = 0x65
RET             = 0x66
APPCALL         = 0x67
SYSCALL         = 0x68
TAILCALL        = 0x69
DUPFROMALTSTACK = 0x6A
TOALTSTACK      = 0x6B # Puts the input onto the top of the alt stack. Removes it from the main stack.
FROMALTSTACK    = 0x6C # Puts the input onto the top of the main stack. Removes it from the alt stack.
XDROP           = 0x6D
XSWAP           = 0x72
XTUCK           = 0x73
DEPTH           = 0x74 # Puts the number of stack items onto the stack.
DROP            = 0x75 # Removes the top stack item.
DUP             = 0x76 # Duplicates the top stack item.
NIP             = 0x77 # Removes the second-to-top stack item.
OVER            = 0x78 # Copies the second-to-top stack item to the top.
PICK            = 0x79 # The item n back in the stack is copied to the top.
ROLL            = 0x7A # The item n back in the stack is moved to the top.
ROT             = 0x7B # The top three items on the stack are rotated to the left.
SWAP            = 0x7C # The top two items on the stack are swapped.
TUCK            = 0x7D # The item at the top of the stack is copied and inserted before the second-to-top item.
CAT             = 0x7E # Concatenates two strings.
SUBSTR          = 0x7F # Returns a section of a string.
LEFT            = 0x80 # Keeps only characters left of the specified point in a string.
RIGHT           = 0x81 # Keeps only characters right of the specified point in a string.
SIZE            = 0x82 # Returns the length of the input string.
INVERT          = 0x83 # Flips all of the bits in the input.
AND             = 0x84 # Boolean and between each bit in the inputs.
OR              = 0x85 # Boolean or between each bit in the inputs.
XOR             = 0x86 # Boolean exclusive or between each bit in the inputs.
EQUAL           = 0x87 # Returns 1 if the inputs are exactly equal, 0 otherwise.
INC             = 0x8B # 1 is added to the input.
DEC             = 0x8C # 1 is subtracted from the input.
SIGN            = 0x8D
NEGATE          = 0x8F # The sign of the input is flipped.
ABS             = 0x90 # The input is made positive.
NOT             = 0x91 # If the input is 0 or 1, it is flipped. Otherwise the output will be 0.
NZ              = 0x92 # Returns 0 if the input is 0. 1 otherwise.
ADD             = 0x93 # a is added to b.
SUB             = 0x94 # b is subtracted from a.
MUL             = 0x95 # a is multiplied by b.
DIV             = 0x96 # a is divided by b.
MOD             = 0x97 # Returns the remainder after dividing a by b.
SHL             = 0x98 # Shifts a left b bits, preserving sign.
SHR             = 0x99 # Shifts a right b bits, preserving sign.
BOOLAND         = 0x9A # If both a and b are not 0, the output is 1. Otherwise 0.
BOOLOR          = 0x9B # If a or b is not 0, the output is 1. Otherwise 0.
NUMEQUAL        = 0x9C # Returns 1 if the numbers are equal, 0 otherwise.
NUMNOTEQUAL     = 0x9E # Returns 1 if the numbers are not equal, 0 otherwise.
LT              = 0x9F # Returns 1 if a is less than b, 0 otherwise.
GT              = 0xA0 # Returns 1 if a is greater than b, 0 otherwise.
LTE             = 0xA1 # Returns 1 if a is less than or equal to b, 0 otherwise.
GTE             = 0xA2 # Returns 1 if a is greater than or equal to b, 0 otherwise.
MIN             = 0xA3 # Returns the smaller of a and b.
MAX             = 0xA4 # Returns the larger of a and b.
WITHIN          = 0xA5 # Returns 1 if x is within the specified range (left-inclusive), 0 otherwise.
SHA1            = 0xA7 # The input is hashed using SHA-1.
SHA256          = 0xA8 # The input is hashed using SHA-256.
HASH160         = 0xA9
HASH256         = 0xAA
CHECKSIG        = 0xAC
CHECKMULTISIG   = 0xAE
ARRAYSIZE       = 0xC0
PACK            = 0xC1
UNPACK          = 0xC2
PICKITEM        = 0xC3
SETITEM         = 0xC4
NEWARRAY        = 0xC5 # Reference type.
NEWSTRUCT       = 0xC6 # Value type.
THROW           = 0xF0
THROWIFNOT      = 0xF1
# fmt: on

# MNEMONIC_WIDTH is the fixed width of every disassembled mnemonic. Longer
# names are truncated.
MNEMONIC_WIDTH = 11


class opcode:
    """
    An opcode defines the information related to a VM opcode. length describes
    how the instruction is framed in a serialized script: 1 for an opcode with
    no operand, n + 1 for an opcode followed by n bytes of data, and -n for an
    opcode followed by an n-byte little-endian data length and then the data.
    """

    def __init__(self, value, name, length):
        self.value    = value   # byte
        self.name     = name    # string
        self.length   = length  # int
        self.mnemonic = name[:MNEMONIC_WIDTH].ljust(MNEMONIC_WIDTH)


# opcodeArray holds details about every defined opcode: its framing length and
# its human-readable name. It is built once at import and must not be modified.
opcodeArray = {}

# fmt: off
# Data push opcodes.
opcodeArray[PUSH0]       = opcode(PUSH0, "PUSH0", 1)
opcodeArray[PUSHBYTES1]  = opcode(PUSHBYTES1, "PUSHBYTES1", 2)
opcodeArray[PUSHBYTES2]  = opcode(PUSHBYTES2, "PUSHBYTES2", 3)
opcodeArray[PUSHBYTES3]  = opcode(PUSHBYTES3, "PUSHBYTES3", 4)
opcodeArray[PUSHBYTES4]  = opcode(PUSHBYTES4, "PUSHBYTES4", 5)
opcodeArray[PUSHBYTES5]  = opcode(PUSHBYTES5, "PUSHBYTES5", 6)
opcodeArray[PUSHBYTES6]  = opcode(PUSHBYTES6, "PUSHBYTES6", 7)
opcodeArray[PUSHBYTES7]  = opcode(PUSHBYTES7, "PUSHBYTES7", 8)
opcodeArray[PUSHBYTES8]  = opcode(PUSHBYTES8, "PUSHBYTES8", 9)
opcodeArray[PUSHBYTES9]  = opcode(PUSHBYTES9, "PUSHBYTES9", 10)
opcodeArray[PUSHBYTES10] = opcode(PUSHBYTES10, "PUSHBYTES10", 11)
opcodeArray[PUSHBYTES11] = opcode(PUSHBYTES11, "PUSHBYTES11", 12)
opcodeArray[PUSHBYTES12] = opcode(PUSHBYTES12, "PUSHBYTES12", 13)
opcodeArray[PUSHBYTES13] = opcode(PUSHBYTES13, "PUSHBYTES13", 14)
opcodeArray[PUSHBYTES14] = opcode(PUSHBYTES14, "PUSHBYTES14", 15)
opcodeArray[PUSHBYTES15] = opcode(PUSHBYTES15, "PUSHBYTES15", 16)
opcodeArray[PUSHBYTES16] = opcode(PUSHBYTES16, "PUSHBYTES16", 17)
opcodeArray[PUSHBYTES17] = opcode(PUSHBYTES17, "PUSHBYTES17", 18)
opcodeArray[PUSHBYTES18] = opcode(PUSHBYTES18, "PUSHBYTES18", 19)
opcodeArray[PUSHBYTES19] = opcode(PUSHBYTES19, "PUSHBYTES19", 20)
opcodeArray[PUSHBYTES20] = opcode(PUSHBYTES20, "PUSHBYTES20", 21)
opcodeArray[PUSHBYTES21] = opcode(PUSHBYTES21, "PUSHBYTES21", 22)
opcodeArray[PUSHBYTES22] = opcode(PUSHBYTES22, "PUSHBYTES22", 23)
opcodeArray[PUSHBYTES23] = opcode(PUSHBYTES23, "PUSHBYTES23", 24)
opcodeArray[PUSHBYTES24] = opcode(PUSHBYTES24, "PUSHBYTES24", 25)
opcodeArray[PUSHBYTES25] = opcode(PUSHBYTES25, "PUSHBYTES25", 26)
opcodeArray[PUSHBYTES26] = opcode(PUSHBYTES26, "PUSHBYTES26", 27)
opcodeArray[PUSHBYTES27] = opcode(PUSHBYTES27, "PUSHBYTES27", 28)
opcodeArray[PUSHBYTES28] = opcode(PUSHBYTES28, "PUSHBYTES28", 29)
opcodeArray[PUSHBYTES29] = opcode(PUSHBYTES29, "PUSHBYTES29", 30)
opcodeArray[PUSHBYTES30] = opcode(PUSHBYTES30, "PUSHBYTES30", 31)
opcodeArray[PUSHBYTES31] = opcode(PUSHBYTES31, "PUSHBYTES31", 32)
opcodeArray[PUSHBYTES32] = opcode(PUSHBYTES32, "PUSHBYTES32", 33)
opcodeArray[PUSHBYTES33] = opcode(PUSHBYTES33, "PUSHBYTES33", 34)
opcodeArray[PUSHBYTES34] = opcode(PUSHBYTES34, "PUSHBYTES34", 35)
opcodeArray[PUSHBYTES35] = opcode(PUSHBYTES35, "PUSHBYTES35", 36)
opcodeArray[PUSHBYTES36] = opcode(PUSHBYTES36, "PUSHBYTES36", 37)
opcodeArray[PUSHBYTES37] = opcode(PUSHBYTES37, "PUSHBYTES37", 38)
opcodeArray[PUSHBYTES38] = opcode(PUSHBYTES38, "PUSHBYTES38", 39)
opcodeArray[PUSHBYTES39] = opcode(PUSHBYTES39, "PUSHBYTES39", 40)
opcodeArray[PUSHBYTES40] = opcode(PUSHBYTES40, "PUSHBYTES40", 41)
opcodeArray[PUSHBYTES41] = opcode(PUSHBYTES41, "PUSHBYTES41", 42)
opcodeArray[PUSHBYTES42] = opcode(PUSHBYTES42, "PUSHBYTES42", 43)
opcodeArray[PUSHBYTES43] = opcode(PUSHBYTES43, "PUSHBYTES43", 44)
opcodeArray[PUSHBYTES44] = opcode(PUSHBYTES44, "PUSHBYTES44", 45)
opcodeArray[PUSHBYTES45] = opcode(PUSHBYTES45, "PUSHBYTES45", 46)
opcodeArray[PUSHBYTES46] = opcode(PUSHBYTES46, "PUSHBYTES46", 47)
opcodeArray[PUSHBYTES47] = opcode(PUSHBYTES47, "PUSHBYTES47", 48)
opcodeArray[PUSHBYTES48] = opcode(PUSHBYTES48, "PUSHBYTES48", 49)
opcodeArray[PUSHBYTES49] = opcode(PUSHBYTES49, "PUSHBYTES49", 50)
opcodeArray[PUSHBYTES50] = opcode(PUSHBYTES50, "PUSHBYTES50", 51)
opcodeArray[PUSHBYTES51] = opcode(PUSHBYTES51, "PUSHBYTES51", 52)
opcodeArray[PUSHBYTES52] = opcode(PUSHBYTES52, "PUSHBYTES52", 53)
opcodeArray[PUSHBYTES53] = opcode(PUSHBYTES53, "PUSHBYTES53", 54)
opcodeArray[PUSHBYTES54] = opcode(PUSHBYTES54, "PUSHBYTES54", 55)
opcodeArray[PUSHBYTES55] = opcode(PUSHBYTES55, "PUSHBYTES55", 56)
opcodeArray[PUSHBYTES56] = opcode(PUSHBYTES56, "PUSHBYTES56", 57)
opcodeArray[PUSHBYTES57] = opcode(PUSHBYTES57, "PUSHBYTES57", 58)
opcodeArray[PUSHBYTES58] = opcode(PUSHBYTES58, "PUSHBYTES58", 59)
opcodeArray[PUSHBYTES59] = opcode(PUSHBYTES59, "PUSHBYTES59", 60)
opcodeArray[PUSHBYTES60] = opcode(PUSHBYTES60, "PUSHBYTES60", 61)
opcodeArray[PUSHBYTES61] = opcode(PUSHBYTES61, "PUSHBYTES61", 62)
opcodeArray[PUSHBYTES62] = opcode(PUSHBYTES62, "PUSHBYTES62", 63)
opcodeArray[PUSHBYTES63] = opcode(PUSHBYTES63, "PUSHBYTES63", 64)
opcodeArray[PUSHBYTES64] = opcode(PUSHBYTES64, "PUSHBYTES64", 65)
opcodeArray[PUSHBYTES65] = opcode(PUSHBYTES65, "PUSHBYTES65", 66)
opcodeArray[PUSHBYTES66] = opcode(PUSHBYTES66, "PUSHBYTES66", 67)
opcodeArray[PUSHBYTES67] = opcode(PUSHBYTES67, "PUSHBYTES67", 68)
opcodeArray[PUSHBYTES68] = opcode(PUSHBYTES68, "PUSHBYTES68", 69)
opcodeArray[PUSHBYTES69] = opcode(PUSHBYTES69, "PUSHBYTES69", 70)
opcodeArray[PUSHBYTES70] = opcode(PUSHBYTES70, "PUSHBYTES70", 71)
opcodeArray[PUSHBYTES71] = opcode(PUSHBYTES71, "PUSHBYTES71", 72)
opcodeArray[PUSHBYTES72] = opcode(PUSHBYTES72, "PUSHBYTES72", 73)
opcodeArray[PUSHBYTES73] = opcode(PUSHBYTES73, "PUSHBYTES73", 74)
opcodeArray[PUSHBYTES74] = opcode(PUSHBYTES74, "PUSHBYTES74", 75)
opcodeArray[PUSHBYTES75] = opcode(PUSHBYTES75, "PUSHBYTES75", 76)
opcodeArray[PUSHDATA1]   = opcode(PUSHDATA1, "PUSHDATA1", -1)
opcodeArray[PUSHDATA2]   = opcode(PUSHDATA2, "PUSHDATA2", -2)
opcodeArray[PUSHDATA4]   = opcode(PUSHDATA4, "PUSHDATA4", -4)
opcodeArray[PUSHM1]      = opcode(PUSHM1, "PUSHM1", 1)
opcodeArray[PUSH1]       = opcode(PUSH1, "PUSH1", 1)
opcodeArray[PUSH2]       = opcode(PUSH2, "PUSH2", 1)
opcodeArray[PUSH3]       = opcode(PUSH3, "PUSH3", 1)
opcodeArray[PUSH4]       = opcode(PUSH4, "PUSH4", 1)
opcodeArray[PUSH5]       = opcode(PUSH5, "PUSH5", 1)
opcodeArray[PUSH6]       = opcode(PUSH6, "PUSH6", 1)
opcodeArray[PUSH7]       = opcode(PUSH7, "PUSH7", 1)
opcodeArray[PUSH8]       = opcode(PUSH8, "PUSH8", 1)
opcodeArray[PUSH9]       = opcode(PUSH9, "PUSH9", 1)
opcodeArray[PUSH10]      = opcode(PUSH10, "PUSH10", 1)
opcodeArray[PUSH11]      = opcode(PUSH11, "PUSH11", 1)
opcodeArray[PUSH12]      = opcode(PUSH12, "PUSH12", 1)
opcodeArray[PUSH13]      = opcode(PUSH13, "PUSH13", 1)
opcodeArray[PUSH14]      = opcode(PUSH14, "PUSH14", 1)
opcodeArray[PUSH15]      = opcode(PUSH15, "PUSH15", 1)
opcodeArray[PUSH16]      = opcode(PUSH16, "PUSH16", 1)

# Control, stack, splice, logic, arithmetic, crypto, array and exception opcodes.
opcodeArray[NOP] = opcode(NOP, "NOP", 1)
opcodeArray[JMP] = opcode(JMP, "JMP", 3)
opcodeArray[JMPIF] = opcode(JMPIF, "JMPIF", 3)
opcodeArray[JMPIFNOT] = opcode(JMPIFNOT, "JMPIFNOT", 3)
opcodeArray[CALL] = opcode(CALL, "CALL", 3)
opcodeArray[RET] = opcode(RET, "RET", 1)
opcodeArray[APPCALL] = opcode(APPCALL, "APPCALL", 21)
opcodeArray[SYSCALL] = opcode(SYSCALL, "SYSCALL", -1)
opcodeArray[TAILCALL] = opcode(TAILCALL, "TAILCALL", 21)
opcodeArray[DUPFROMALTSTACK] = opcode(DUPFROMALTSTACK, "DUPFROMALTSTACK", 1)
opcodeArray[TOALTSTACK] = opcode(TOALTSTACK, "TOALTSTACK", 1)
opcodeArray[FROMALTSTACK] = opcode(FROMALTSTACK, "FROMALTSTACK", 1)
opcodeArray[XDROP] = opcode(XDROP, "XDROP", 1)
opcodeArray[XSWAP] = opcode(XSWAP, "XSWAP", 1)
opcodeArray[XTUCK] = opcode(XTUCK, "XTUCK", 1)
opcodeArray[DEPTH] = opcode(DEPTH, "DEPTH", 1)
opcodeArray[DROP] = opcode(DROP, "DROP", 1)
opcodeArray[DUP] = opcode(DUP, "DUP", 1)
opcodeArray[NIP] = opcode(NIP, "NIP", 1)
opcodeArray[OVER] = opcode(OVER, "OVER", 1)
opcodeArray[PICK] = opcode(PICK, "PICK", 1)
opcodeArray[ROLL] = opcode(ROLL, "ROLL", 1)
opcodeArray[ROT] = opcode(ROT, "ROT", 1)
opcodeArray[SWAP] = opcode(SWAP, "SWAP", 1)
opcodeArray[TUCK] = opcode(TUCK, "TUCK", 1)
opcodeArray[CAT] = opcode(CAT, "CAT", 1)
opcodeArray[SUBSTR] = opcode(SUBSTR, "SUBSTR", 1)
opcodeArray[LEFT] = opcode(LEFT, "LEFT", 1)
opcodeArray[RIGHT] = opcode(RIGHT, "RIGHT", 1)
opcodeArray[SIZE] = opcode(SIZE, "SIZE", 1)
opcodeArray[INVERT] = opcode(INVERT, "INVERT", 1)
opcodeArray[AND] = opcode(AND, "AND", 1)
opcodeArray[OR] = opcode(OR, "OR", 1)
opcodeArray[XOR] = opcode(XOR, "XOR", 1)
opcodeArray[EQUAL] = opcode(EQUAL, "EQUAL", 1)
opcodeArray[INC] = opcode(INC, "INC", 1)
opcodeArray[DEC] = opcode(DEC, "DEC", 1)
opcodeArray[SIGN] = opcode(SIGN, "SIGN", 1)
opcodeArray[NEGATE] = opcode(NEGATE, "NEGATE", 1)
opcodeArray[ABS] = opcode(ABS, "ABS", 1)
opcodeArray[NOT] = opcode(NOT, "NOT", 1)
opcodeArray[NZ] = opcode(NZ, "NZ", 1)
opcodeArray[ADD] = opcode(ADD, "ADD", 1)
opcodeArray[SUB] = opcode(SUB, "SUB", 1)
opcodeArray[MUL] = opcode(MUL, "MUL", 1)
opcodeArray[DIV] = opcode(DIV, "DIV", 1)
opcodeArray[MOD] = opcode(MOD, "MOD", 1)
opcodeArray[SHL] = opcode(SHL, "SHL", 1)
opcodeArray[SHR] = opcode(SHR, "SHR", 1)
opcodeArray[BOOLAND] = opcode(BOOLAND, "BOOLAND", 1)
opcodeArray[BOOLOR] = opcode(BOOLOR, "BOOLOR", 1)
opcodeArray[NUMEQUAL] = opcode(NUMEQUAL, "NUMEQUAL", 1)
opcodeArray[NUMNOTEQUAL] = opcode(NUMNOTEQUAL, "NUMNOTEQUAL", 1)
opcodeArray[LT] = opcode(LT, "LT", 1)
opcodeArray[GT] = opcode(GT, "GT", 1)
opcodeArray[LTE] = opcode(LTE, "LTE", 1)
opcodeArray[GTE] = opcode(GTE, "GTE", 1)
opcodeArray[MIN] = opcode(MIN, "MIN", 1)
opcodeArray[MAX] = opcode(MAX, "MAX", 1)
opcodeArray[WITHIN] = opcode(WITHIN, "WITHIN", 1)
opcodeArray[SHA1] = opcode(SHA1, "SHA1", 1)
opcodeArray[SHA256] = opcode(SHA256, "SHA256", 1)
opcodeArray[HASH160] = opcode(HASH160, "HASH160", 1)
opcodeArray[HASH256] = opcode(HASH256, "HASH256", 1)
opcodeArray[CHECKSIG] = opcode(CHECKSIG, "CHECKSIG", 1)
opcodeArray[CHECKMULTISIG] = opcode(CHECKMULTISIG, "CHECKMULTISIG", 1)
opcodeArray[ARRAYSIZE] = opcode(ARRAYSIZE, "ARRAYSIZE", 1)
opcodeArray[PACK] = opcode(PACK, "PACK", 1)
opcodeArray[UNPACK] = opcode(UNPACK, "UNPACK", 1)
opcodeArray[PICKITEM] = opcode(PICKITEM, "PICKITEM", 1)
opcodeArray[SETITEM] = opcode(SETITEM, "SETITEM", 1)
opcodeArray[NEWARRAY] = opcode(NEWARRAY, "NEWARRAY", 1)
opcodeArray[NEWSTRUCT] = opcode(NEWSTRUCT, "NEWSTRUCT", 1)
opcodeArray[THROW] = opcode(THROW, "THROW", 1)
opcodeArray[THROWIFNOT] = opcode(THROWIFNOT, "THROWIFNOT", 1)
# fmt: on


def nameOf(code):
    """
    The fixed-width mnemonic for the opcode, for diagnostic output.

    Args:
        code (int): The opcode.

    Returns:
        str: The mnemonic, left-justified to MNEMONIC_WIDTH, or an empty string
            if the code is not a defined opcode.
    """
    op = opcodeArray.get(code)
    return op.mnemonic if op else ""
