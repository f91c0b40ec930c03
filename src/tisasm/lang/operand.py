#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
from collections import namedtuple
from enum import IntEnum
import re


# Local
from ..common import S16_MAX
from ..common import S16_MIN
from ..errors import InvalidOperandError


class Location(IntEnum):
    Left    = 0
    Right   = 1
    Up      = 2
    Down    = 3
    Acc     = 4
    Last    = 5

    @staticmethod
    def fromString(string):
        loc = LOCATION_KEYWORDS.get(string)
        if loc is None:
            raise InvalidOperandError("invalid location %r" % string, string)

        return loc

    def asKeyword(self):
        return self.name.upper()


LOCATION_KEYWORDS = {
    "LEFT":     Location.Left,
    "RIGHT":    Location.Right,
    "UP":       Location.Up,
    "DOWN":     Location.Down,
    "ACC":      Location.Acc,
    "LAST":     Location.Last
}


class Source(namedtuple("Source", ("value", "location"))):
    """
    Operand read by an instruction.
    Exactly one of `value` (an integer literal) and `location` is set.
    """

    __slots__ = ()

    @classmethod
    def fromValue(cls, value):
        return cls(value, None)

    @classmethod
    def fromLocation(cls, location):
        return cls(None, location)

    def isLocation(self):
        return self.location is not None

    def asAsm(self):
        if self.location is not None:
            return self.location.asKeyword()

        return str(self.value)

    def __repr__(self):
        if self.location is not None:
            return "Source(%s)" % self.location.name

        return "Source(%d)" % self.value


DECIMAL_RE_OBJ = re.compile(r'[+-]?[0-9]+')


def parseLocation(token):
    return Location.fromString(token)


def parseLiteral(token, value_min=S16_MIN, value_max=S16_MAX):
    if not token:
        raise InvalidOperandError("cannot parse integer from empty string", token)

    if not DECIMAL_RE_OBJ.fullmatch(token):
        raise InvalidOperandError("invalid digit found in string: %r" % token, token)

    value = int(token)
    if value > value_max:
        raise InvalidOperandError("number too large to fit in range [%d, %d]: %s" % (value_min, value_max, token), token)

    if value < value_min:
        raise InvalidOperandError("number too small to fit in range [%d, %d]: %s" % (value_min, value_max, token), token)

    return value


def parseSource(token, value_min=S16_MIN, value_max=S16_MAX):
    loc = LOCATION_KEYWORDS.get(token)
    if loc is not None:
        return Source.fromLocation(loc)

    # Not a keyword, so it has to be a literal
    return Source.fromValue(parseLiteral(token, value_min, value_max))
