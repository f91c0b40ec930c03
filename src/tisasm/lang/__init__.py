#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Document:
#
# start         '@0' NEWLINE section_body { header NEWLINE section_body }* EOF
#
# header        '@' decimal_literal         (must equal previous section + 1, at most 11)
#
# section_body  { line NEWLINE }* EMPTY_LINE
#
# line          [ label ':' ] [ instruction | comment ]
#
# label         { NON_WHITESPACE - ':' }*
#
# comment       '#' { ANY }*


# Instruction:
#
# instruction   'NOP' | 'SWP' | 'SAV' | 'NEG'
#             | 'MOV' source ',' location   (no whitespace between source and ',')
#             | ('ADD' | 'SUB' | 'JRO') source
#             | ('JMP' | 'JEZ' | 'JNZ' | 'JGZ' | 'JLZ') label
#
# source        location | integer_literal
#
# location      'LEFT' | 'RIGHT' | 'UP' | 'DOWN' | 'ACC' | 'LAST'
#
# integer_literal   [ '+' | '-' ] { DIGIT }+    (signed 16-bit)


from . import instr
from . import operand
from . import parser
from . import reader


__all__ = [
    "instr",
    "operand",
    "parser",
    "reader"
]
