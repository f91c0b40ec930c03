#!/usr/bin/env python3
# -*- coding: utf-8 -*-


TOOL_VERSION    = "0"

SECTION_MARKER  = '@'
COMMENT_MARKER  = '#'
LABEL_SEP       = ':'
OPERAND_SEP     = ','

NODE_COUNT      = 12

S16_MIN         = -0x8000
S16_MAX         =  0x7FFF

NODE_VALUE_MIN  = -999
NODE_VALUE_MAX  =  999


def isBlank(line):
    return not line or line.isspace()


def stripNewline(line):
    if line.endswith('\r\n'):
        return line[:-2]

    if line.endswith(('\n', '\r')):
        return line[:-1]

    return line
