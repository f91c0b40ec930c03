#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Local
from ..common import stripNewline


class LineReader:
    def __init__(self, lines=()):
        self.initialize()
        self.setLines(lines)

    def initialize(self):
        self.lines = ()
        self.nextIdx = 0

    def setLines(self, lines):
        self.initialize()

        # Copy out of the caller's buffer, which may be transient
        self.lines = tuple(stripNewline(line) for line in lines)

    def setText(self, text):
        # Only '\n' ends a line; a trailing '\r' is removed by stripNewline()
        lines = text.split('\n')
        if lines[-1] == '':
            lines.pop()

        self.setLines(lines)

    def openFile(self, path):
        with open(path, encoding="utf-8-sig", newline='') as inf:
            self.setText(inf.read())

    def isEOF(self):
        return self.nextIdx >= len(self.lines)

    @property
    def lineNo(self):
        """
        1-based number of the line last returned by `readNextLine()`.
        """

        return self.nextIdx

    def readNextLine(self):
        if self.isEOF():
            return None

        line = self.lines[self.nextIdx]
        self.nextIdx += 1
        return line
