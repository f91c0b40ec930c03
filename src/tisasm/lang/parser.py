#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
from types import MappingProxyType


# Local
from ..common import isBlank
from ..common import SECTION_MARKER
from ..config import Config
from ..errors import DuplicateLabelError
from ..errors import HeaderError
from ..errors import ParseError
from ..errors import SectionSequenceError
from ..errors import SectionTerminationError
from .instr import parseLine
from .instr import PositionedInstruction
from .instr import splitLabel
from .reader import LineReader


FIRST_HEADER = SECTION_MARKER + '0'


class Program:
    def __init__(self, instrs=(), labels=None):
        self.instrs = tuple(instrs)
        self.labels = MappingProxyType({} if labels is None else dict(labels))

    def __len__(self):
        return len(self.instrs)

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented

        return self.instrs == other.instrs and dict(self.labels) == dict(other.labels)

    def __repr__(self):
        return "Program(%r, %r)" % (self.instrs, dict(self.labels))

    def toObj(self):
        return {
            "Instructions": [p.instr.toAsm() for p in self.instrs],
            "Labels": dict(self.labels)
        }


class Spec:
    def __init__(self, programs=()):
        self.programs = tuple(programs)

    def __len__(self):
        return len(self.programs)

    def __iter__(self):
        return iter(self.programs)

    def __getitem__(self, section):
        return self.programs[section]

    def __eq__(self, other):
        if not isinstance(other, Spec):
            return NotImplemented

        return self.programs == other.programs

    def __repr__(self):
        return "Spec(%r)" % (self.programs,)

    def toObj(self):
        nodes = []
        for section, program in enumerate(self.programs):
            obj = program.toObj()
            obj["Node"] = section
            nodes.append(obj)

        return nodes


class ProgramAssembler:
    @staticmethod
    def assemble(lines, config=None, firstLineNo=None):
        """
        Builds the program of one section body (terminator already removed).
        `firstLineNo` is the document line of `lines[0]`, used for diagnostics only.
        """

        if config is None:
            config = Config()

        instrs = []
        labels = {}

        for offset, line in enumerate(lines):
            lineNo = None if firstLineNo is None else firstLineNo + offset

            try:
                label, rest = splitLabel(line)
                if label is not None:
                    if label in labels:
                        raise DuplicateLabelError(label)

                    # Points at the next retained instruction
                    labels[label] = len(instrs)

                instr = parseLine(rest, config.valueMin, config.valueMax)

            except ParseError as e:
                if lineNo is not None:
                    e.atLine(lineNo)

                raise

            if instr.opcode.isRetained():
                instrs.append(PositionedInstruction(instr, len(instrs), lineNo))

        return Program(instrs, labels)


class ParseState:
    def __init__(self, config):
        self.config = config
        self.programs = []

        self.section = 0
        self.sectionLines = []
        self.sectionLineNo = 1

    def beginSection(self, section, lineNo):
        self.section = section
        self.sectionLines = []
        self.sectionLineNo = lineNo


class SpecAssembler:
    @staticmethod
    def isHeader(line):
        tokens = line.split(maxsplit=1)
        if not tokens:
            return False

        token = tokens[0]
        return len(token) > 1 and token[0] == SECTION_MARKER and token[1] in "0123456789"

    @staticmethod
    def readHeader(line, lineNo):
        tokens = line.split()
        digits = tokens[0][1:]

        if len(tokens) != 1 or not all(c in "0123456789" for c in digits):
            raise HeaderError("invalid section header %r" % line, line, lineNo)

        return int(digits)

    @staticmethod
    def endSection(state, requireTerminator, lineNo):
        lines = state.sectionLines

        if lines and isBlank(lines[-1]):
            lines = lines[:-1]

        elif requireTerminator:
            raise SectionTerminationError(state.section, lineNo)

        state.programs.append(ProgramAssembler.assemble(lines, state.config, state.sectionLineNo))

    @classmethod
    def start(cls, reader, config=None):
        if config is None:
            config = Config()

        ### Header ###

        first = reader.readNextLine()
        if first is None:
            raise HeaderError("empty document, expected section header %r" % FIRST_HEADER)

        if first != FIRST_HEADER:
            raise HeaderError("expected section header %r, received: %r" % (FIRST_HEADER, first), first, reader.lineNo)

        state = ParseState(config)
        state.beginSection(0, reader.lineNo + 1)

        ### Sections ###

        while not reader.isEOF():
            line = reader.readNextLine()

            if not cls.isHeader(line):
                state.sectionLines.append(line)
                continue

            section = cls.readHeader(line, reader.lineNo)
            expected = state.section + 1

            if section != expected or section > config.maxSection:
                raise SectionSequenceError(expected, section, config.maxSection, reader.lineNo)

            cls.endSection(state, True, reader.lineNo)
            state.beginSection(section, reader.lineNo + 1)

        ### End of Input ###

        cls.endSection(state, config.requireFinalTerminator, reader.lineNo)

        return Spec(state.programs)


def parseLines(lines, config=None):
    return SpecAssembler.start(LineReader(lines), config)


def parseText(text, config=None):
    reader = LineReader()
    reader.setText(text)
    return SpecAssembler.start(reader, config)


def parseFile(path, config=None):
    reader = LineReader()
    reader.openFile(path)
    return SpecAssembler.start(reader, config)
