#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .common import TOOL_VERSION

from .config import Config

from .errors import ParseError
from .errors import HeaderError
from .errors import SectionSequenceError
from .errors import SectionTerminationError
from .errors import DuplicateLabelError
from .errors import UnknownInstructionError
from .errors import OperandSyntaxError
from .errors import InvalidOperandError

from .lang.instr import Instruction, Opcode, PositionedInstruction
from .lang.operand import Location, Source
from .lang.parser import Program, Spec
from .lang.parser import parseFile, parseLines, parseText


__all__ = [
    "TOOL_VERSION",
    "Config",
    "ParseError",
    "HeaderError",
    "SectionSequenceError",
    "SectionTerminationError",
    "DuplicateLabelError",
    "UnknownInstructionError",
    "OperandSyntaxError",
    "InvalidOperandError",
    "Instruction", "Opcode", "PositionedInstruction",
    "Location", "Source",
    "Program", "Spec",
    "parseFile", "parseLines", "parseText"
]
