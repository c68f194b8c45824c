"""Bytecode instruction, constant-tag and pattern-tag values."""

from enum import IntEnum


class Opcode(IntEnum):
    """Single-byte instructions understood by the virtual machine."""

    NCONST = 0x01  # push undef
    BCONST_F = 0x08  # push false
    BCONST_T = 0x09  # push true
    FCONST = 0x0A  # push function literal
    CCONST = 0x0B  # push closure literal

    HALT = 0x0F

    MATCH = 0x31  # pattern matching

    BOR = 0x40
    BXOR = 0x41
    BAND = 0x42
    BANDNOT = 0x43  # bitwise and with the right operand negated
    BNOT = 0x44
    BSL = 0x45
    BSR = 0x46

    ASS = 0x50  # assert

    ADD = 0x60
    SUB = 0x61
    MUL = 0x62
    EXP = 0x63
    FDIV = 0x64  # division returning a float
    IDIV = 0x65  # integer division
    MOD = 0x66
    NEG = 0x67
    POS = 0x68
    NOT = 0x69
    LEN = 0x6A
    CNCT = 0x6B  # concatenation of strings or lists

    LT = 0x70
    LE = 0x71
    GT = 0x72
    GE = 0x73
    EQ = 0x74
    ID = 0x76  # identity

    SET = 0x80
    GET = 0x88
    SLICE = 0x8A

    EXPORT = 0x90

    LIT = 0x9A
    LIT8 = 0x9B  # constant with an 8-byte index into the constant table
    NEWTABLE = 0x9C
    NEWLIST = 0x9D

    MOVEUP_FP = 0xA0  # move an element, indexed from fp, to the top

    END = 0xB0  # end-of-list marker on the stack
    SWAP = 0xB7
    DUP = 0xB8
    DEL_FP = 0xB9
    DECSP = 0xBD
    INCSP = 0xBE
    POP = 0xBF

    BR_8 = 0xC0  # unconditional branch, 8-byte offset
    BRF_8 = 0xC1  # branch if falsey
    BRT_8 = 0xC2  # branch if truthy
    BRN_8 = 0xC3  # branch if not undef

    INITFOR = 0xD0
    ENDCOMP = 0xD1
    ENDFOR = 0xD2
    ITER_1 = 0xD3

    INIT_MC = 0xE7
    INIT_CALL = 0xE8
    CALL = 0xE9
    RET = 0xEC
    CRET = 0xED

    GSTORE_8 = 0xF0
    GLOAD_8 = 0xF1
    USTORE = 0xF2
    ULOAD = 0xF3
    LSTORE = 0xF4
    LLOAD = 0xF5
    ECHO = 0xFF


class Constant(IntEnum):
    """Tags of entries in the constant table of compiled code."""

    FLOAT = 0
    INT_1 = 1
    INT_8 = 2
    STR = 3


class Pattern(IntEnum):
    """Tags used in compiled match patterns."""

    UNDEF = 0x01
    TYPE_BOOL = 0x02
    TYPE_INT = 0x03
    TYPE_FLOAT = 0x04
    TYPE_STR = 0x05
    TYPE_LS = 0x06
    TYPE_TABLE = 0x07
    BOOL = 0x08
    ANY = 0x0F
    LIT = 0x9A
    LIT8 = 0x9B
    TABLE = 0x9C
    LS = 0x9D
    VTABLE = 0xAC
    VLS = 0xAD
    ALT = 0xB0
    BIND = 0xF4