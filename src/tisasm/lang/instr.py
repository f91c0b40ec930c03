#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
from collections import namedtuple
from enum import IntEnum


# Local
from ..common import COMMENT_MARKER
from ..common import LABEL_SEP
from ..common import OPERAND_SEP
from ..common import S16_MAX
from ..common import S16_MIN
from ..errors import OperandSyntaxError
from ..errors import UnknownInstructionError
from .operand import Location
from .operand import parseLocation
from .operand import parseSource


class Opcode(IntEnum):
    Nop     =  0
    Mov     =  1
    Swp     =  2
    Sav     =  3
    Add     =  4
    Sub     =  5
    Neg     =  6
    Jmp     =  7
    Jez     =  8
    Jnz     =  9
    Jgz     = 10
    Jlz     = 11
    Jro     = 12
    Comment = 13
    Blank   = 14

    def isJump(self):
        return self in (
            Opcode.Jmp,
            Opcode.Jez,
            Opcode.Jnz,
            Opcode.Jgz,
            Opcode.Jlz
        )

    def isRetained(self):
        return self not in (
            Opcode.Comment,
            Opcode.Blank
        )


class OperandKind(IntEnum):
    MovSource   = 0     # Source immediately followed by ','
    Source      = 1
    Location    = 2
    Label       = 3

    def describe(self):
        if self == OperandKind.Location:
            return "dest"

        if self == OperandKind.Label:
            return "label"

        return "source"


MNEMONICS = {
    "NOP":  (Opcode.Nop,    ()),
    "MOV":  (Opcode.Mov,    (OperandKind.MovSource, OperandKind.Location)),
    "SWP":  (Opcode.Swp,    ()),
    "SAV":  (Opcode.Sav,    ()),
    "ADD":  (Opcode.Add,    (OperandKind.Source,)),
    "SUB":  (Opcode.Sub,    (OperandKind.Source,)),
    "NEG":  (Opcode.Neg,    ()),
    "JMP":  (Opcode.Jmp,    (OperandKind.Label,)),
    "JEZ":  (Opcode.Jez,    (OperandKind.Label,)),
    "JNZ":  (Opcode.Jnz,    (OperandKind.Label,)),
    "JGZ":  (Opcode.Jgz,    (OperandKind.Label,)),
    "JLZ":  (Opcode.Jlz,    (OperandKind.Label,)),
    "JRO":  (Opcode.Jro,    (OperandKind.Source,))
}

OPCODE_MNEMONICS = {opcode: mnemonic for mnemonic, (opcode, _) in MNEMONICS.items()}


class Instruction(namedtuple("Instruction", ("opcode", "operands"))):
    __slots__ = ()

    def __new__(cls, opcode, *operands):
        return super().__new__(cls, opcode, operands)

    def __getnewargs__(self):
        return (self.opcode, *self.operands)

    @property
    def label(self):
        assert self.opcode.isJump()
        return self.operands[0]

    @property
    def text(self):
        assert self.opcode == Opcode.Comment
        return self.operands[0]

    def toAsm(self):
        opcode = self.opcode

        if opcode == Opcode.Blank:
            return ''

        if opcode == Opcode.Comment:
            return self.operands[0]

        mnemonic = OPCODE_MNEMONICS[opcode]

        if opcode == Opcode.Mov:
            src, dest = self.operands
            return "%s %s%s %s" % (mnemonic, src.asAsm(), OPERAND_SEP, dest.asKeyword())

        operands = []
        for operand in self.operands:
            if isinstance(operand, str):
                operands.append(operand)
            elif isinstance(operand, Location):
                operands.append(operand.asKeyword())
            else:
                operands.append(operand.asAsm())

        return ' '.join((mnemonic, *operands))

    def __repr__(self):
        if not self.operands:
            return "Instruction(%s)" % self.opcode.name

        return "Instruction(%s, %s)" % (self.opcode.name, ", ".join(map(repr, self.operands)))


BLANK = Instruction(Opcode.Blank)


class PositionedInstruction(namedtuple("PositionedInstruction", ("instr", "position", "lineNo"))):
    """
    `position` is the 0-based index among the program's retained instructions.
    `lineNo` is the 1-based line of the whole document it was read from, if known.
    """

    __slots__ = ()

    def __new__(cls, instr, position, lineNo=None):
        return super().__new__(cls, instr, position, lineNo)


def readOperand(kind, words, mnemonic, value_min=S16_MIN, value_max=S16_MAX):
    token = next(words, None)
    if token is None:
        raise OperandSyntaxError("invalid %s instruction without %s" % (mnemonic, kind.describe()), mnemonic)

    if kind == OperandKind.MovSource:
        if not token.endswith(OPERAND_SEP):
            raise OperandSyntaxError("invalid %s instruction with no comma after %r" % (mnemonic, token), mnemonic)

        return parseSource(token[:-1], value_min, value_max)

    if kind == OperandKind.Source:
        return parseSource(token, value_min, value_max)

    if kind == OperandKind.Location:
        return parseLocation(token)

    # Labels are resolved after the whole program is read, if at all
    return token


def parseMov(words, value_min=S16_MIN, value_max=S16_MAX):
    """
    Parses the operands of a MOV instruction, e.g. `3, ACC`.
    `words` is an iterator over the whitespace-separated tokens following the mnemonic.
    """

    src = readOperand(OperandKind.MovSource, words, "MOV", value_min, value_max)
    dest = readOperand(OperandKind.Location, words, "MOV", value_min, value_max)
    return Instruction(Opcode.Mov, src, dest)


def parseLine(line, value_min=S16_MIN, value_max=S16_MAX):
    tokens = line.split()
    if not tokens:
        return BLANK

    mnemonic = tokens[0]
    if mnemonic.startswith(COMMENT_MARKER):
        return Instruction(Opcode.Comment, ' '.join(tokens))

    entry = MNEMONICS.get(mnemonic)
    if entry is None:
        raise UnknownInstructionError(mnemonic)

    opcode, kinds = entry
    words = iter(tokens[1:])

    operands = tuple(readOperand(kind, words, mnemonic, value_min, value_max) for kind in kinds)
    return Instruction(opcode, *operands)


def splitLabel(line):
    """
    Returns (label, rest) for `label:rest`, or (None, line) if the line has no label.
    Whitespace before the first ':' means the colon does not terminate a label.
    """

    idx = line.find(LABEL_SEP)
    if idx == -1:
        return None, line

    label = line[:idx]
    if any(c.isspace() for c in label):
        return None, line

    return label, line[idx + 1:]
