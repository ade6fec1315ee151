# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

# Without assigning meaning just yet, these are the accepted PDF
# whitespace characters.
WHITESPACE      = frozenset(b"\0\t\n\f\r ")

# These are the PDF delimiters.
DELIMITERS      = frozenset(b"()<>[]{}/%")

# All 8-bit characters other than whitespace and delimiters are
# considered in PDFs to be "regular" characters.
IRREGULAR       = WHITESPACE | DELIMITERS

DIGITS          = frozenset(b"0123456789")
OCTAL_DIGITS    = frozenset(b"01234567")

# Numbers can only ever be made out of these.
NUMERIC         = DIGITS | frozenset(b".+-")

HEX_VALUES      = dict((byte, int(chr(byte), 16))
                       for byte in b"0123456789abcdefABCDEF")

def is_whitespace (byte):
    return byte in WHITESPACE

def is_delimiter (byte):
    return byte in DELIMITERS

def is_regular (byte):
    """Neither whitespace nor a delimiter"""
    return byte is not None and byte not in IRREGULAR

def is_digit (byte):
    return byte in DIGITS

def is_numeric (byte):
    """Could this byte be part of a number?"""
    return byte in NUMERIC

def hex_value (byte):
    """Get the value of a hex digit, or None if it isn't one"""
    return HEX_VALUES.get(byte)

def octal_value (byte):
    """Get the value of an octal digit, or None if it isn't one"""
    if byte in OCTAL_DIGITS:
        return byte - 0x30
