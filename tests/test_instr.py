#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import pytest

from tisasm.errors import InvalidOperandError, OperandSyntaxError, UnknownInstructionError
from tisasm.lang.instr import BLANK, Instruction, Opcode
from tisasm.lang.instr import parseLine, parseMov, splitLabel
from tisasm.lang.operand import Location, Source


def words(s):
    return iter(s.split())


def test_parse_mov():
    assert parseMov(words("3, ACC")) == Instruction(Opcode.Mov, Source.fromValue(3), Location.Acc)
    assert parseMov(words("ACC, ACC")) == Instruction(Opcode.Mov, Source.fromLocation(Location.Acc), Location.Acc)


def test_parse_mov_invalid_source():
    with pytest.raises(InvalidOperandError):
        parseMov(words("f, ACC"))


def test_parse_mov_invalid_dest():
    with pytest.raises(InvalidOperandError):
        parseMov(words("3, 4"))


@pytest.mark.parametrize("operands", ["", "3 ACC", "3 , ACC", "3,ACC", "3,"])
def test_parse_mov_syntax(operands):
    with pytest.raises(OperandSyntaxError) as exc_info:
        parseMov(words(operands))

    assert exc_info.value.mnemonic == "MOV"


def test_parse_mov_messages():
    with pytest.raises(OperandSyntaxError, match="without source"):
        parseMov(words(""))

    with pytest.raises(OperandSyntaxError, match="no comma"):
        parseMov(words("3 ACC"))

    with pytest.raises(OperandSyntaxError, match="without dest"):
        parseMov(words("3,"))


def test_parse_line():
    assert parseLine("MOV 3, ACC") == Instruction(Opcode.Mov, Source.fromValue(3), Location.Acc)
    assert parseLine("SWP") == Instruction(Opcode.Swp)
    assert parseLine("SUB LEFT") == Instruction(Opcode.Sub, Source.fromLocation(Location.Left))
    assert parseLine("JMP FOO") == Instruction(Opcode.Jmp, "FOO")


@pytest.mark.parametrize("line, opcode", [
    ("NOP", Opcode.Nop),
    ("SWP", Opcode.Swp),
    ("SAV", Opcode.Sav),
    ("NEG", Opcode.Neg),
])
def test_parse_line_no_operands(line, opcode):
    assert parseLine(line) == Instruction(opcode)
    assert parseLine("  %s  ignored" % line) == Instruction(opcode)


@pytest.mark.parametrize("mnemonic, opcode", [
    ("JMP", Opcode.Jmp),
    ("JEZ", Opcode.Jez),
    ("JNZ", Opcode.Jnz),
    ("JGZ", Opcode.Jgz),
    ("JLZ", Opcode.Jlz),
])
def test_parse_line_jumps(mnemonic, opcode):
    instr = parseLine("%s loop" % mnemonic)
    assert instr.opcode == opcode
    assert instr.opcode.isJump()
    assert instr.label == "loop"


def test_parse_line_sources():
    assert parseLine("ADD 10") == Instruction(Opcode.Add, Source.fromValue(10))
    assert parseLine("JRO -1") == Instruction(Opcode.Jro, Source.fromValue(-1))
    assert parseLine("JRO LAST") == Instruction(Opcode.Jro, Source.fromLocation(Location.Last))


def test_parse_line_value_range():
    assert parseLine("ADD 1000") == Instruction(Opcode.Add, Source.fromValue(1000))

    with pytest.raises(InvalidOperandError):
        parseLine("ADD 1000", -999, 999)

    with pytest.raises(InvalidOperandError):
        parseLine("ADD 32768")


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_parse_line_blank(line):
    assert parseLine(line) == BLANK
    assert not BLANK.opcode.isRetained()


def test_parse_line_comment():
    instr = parseLine("#  hello   world ")
    assert instr.opcode == Opcode.Comment
    assert instr.text == "# hello world"
    assert not instr.opcode.isRetained()

    assert parseLine("#").text == "#"


@pytest.mark.parametrize("line, token", [
    ("FOO", "FOO"),
    ("mov 1, ACC", "mov"),
    ("loop: NOP", "loop:"),
    ("@3", "@3"),
])
def test_parse_line_unknown(line, token):
    with pytest.raises(UnknownInstructionError) as exc_info:
        parseLine(line)

    assert exc_info.value.token == token


@pytest.mark.parametrize("line", ["ADD", "SUB", "JRO", "JMP", "JEZ", "MOV"])
def test_parse_line_missing_operand(line):
    with pytest.raises(OperandSyntaxError):
        parseLine(line)


@pytest.mark.parametrize("line, expected", [
    ("label nop", (None, "label nop")),
    ("label:nop", ("label", "nop")),
    ("label: nop", ("label", " nop")),
    ("label : nop", (None, "label : nop")),
    ("label:3: nop", ("label", "3: nop")),
    ("loop:", ("loop", "")),
    ("  loop: NOP", (None, "  loop: NOP")),
    ("", (None, "")),
])
def test_split_label(line, expected):
    assert splitLabel(line) == expected


@pytest.mark.parametrize("line", [
    "NOP",
    "MOV -3, LEFT",
    "MOV UP, ACC",
    "ADD 5",
    "SUB ACC",
    "JEZ end",
    "JRO -2",
    "# a comment",
])
def test_to_asm(line):
    assert parseLine(line).toAsm() == line


def test_repr():
    assert repr(parseLine("NEG")) == "Instruction(Neg)"
    assert repr(parseLine("ADD 1")) == "Instruction(Add, Source(1))"
