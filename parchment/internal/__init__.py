# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .byte_classes import is_whitespace, is_delimiter, is_regular, \
                          is_digit, is_numeric, hex_value, octal_value

__all__ = [
    "is_whitespace",
    "is_delimiter",
    "is_regular",
    "is_digit",
    "is_numeric",
    "hex_value",
    "octal_value",
]
