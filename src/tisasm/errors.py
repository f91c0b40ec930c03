#!/usr/bin/env python3
# -*- coding: utf-8 -*-


class ParseError(ValueError):
    def __init__(self, msg, lineNo=None):
        super().__init__(msg)
        self.msg = msg
        self.lineNo = lineNo

    def atLine(self, lineNo):
        if self.lineNo is None:
            self.lineNo = lineNo

        return self

    def __str__(self):
        if self.lineNo is None:
            return self.msg

        return "At line %d: %s" % (self.lineNo, self.msg)


class HeaderError(ParseError):
    def __init__(self, msg, found=None, lineNo=None):
        super().__init__(msg, lineNo)
        self.found = found


class SectionSequenceError(ParseError):
    def __init__(self, expected, found, maxSection, lineNo=None):
        if found > maxSection:
            msg = "section @%d exceeds the last node @%d" % (found, maxSection)
        else:
            msg = "expected section @%d, received: @%d" % (expected, found)

        super().__init__(msg, lineNo)
        self.expected = expected
        self.found = found


class SectionTerminationError(ParseError):
    def __init__(self, section, lineNo=None):
        super().__init__("section @%d did not end with an empty line" % section, lineNo)
        self.section = section


class DuplicateLabelError(ParseError):
    def __init__(self, label, lineNo=None):
        super().__init__("label %r is defined more than once" % label, lineNo)
        self.label = label


class UnknownInstructionError(ParseError):
    def __init__(self, token, lineNo=None):
        super().__init__("invalid instruction %r" % token, lineNo)
        self.token = token


class OperandSyntaxError(ParseError):
    def __init__(self, msg, mnemonic, lineNo=None):
        super().__init__(msg, lineNo)
        self.mnemonic = mnemonic


class InvalidOperandError(ParseError):
    def __init__(self, msg, token, lineNo=None):
        super().__init__(msg, lineNo)
        self.token = token
