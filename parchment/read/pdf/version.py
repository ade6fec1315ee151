# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple

from ...exceptions  import  PdfMalformedHeader, PdfUnsupportedVersion, \
                            PdfExpectedInteger, PdfIntegerOutOfRange

class PdfVersion (namedtuple("PdfVersion", ("major", "minor"))):
    """PDF Version

    Being a tuple, versions already sort by major and then by minor.

        >>> PdfVersion(1, 4) < PdfVersion(1, 5) < PdfVersion(2, 0)
        True
        >>> str(PdfVersion(1, 4))
        '1.4'
    """

    __slots__ = ()

    def __str__ (self):
        return "{:d}.{:d}".format(self.major, self.minor)

SUPPORTED_VERSION   = PdfVersion(1, 4)

# Each half of the version has to fit in a byte.
VERSION_PART_MAX    = 0xff

def read_version (tokenizer):
    """Find the header and read `M.m` out of it

    The tokenizer should still be in the skip state; this moves it on
    to normal lexing.
    """
    tokenizer.skip_to_header()
    cursor  = tokenizer.cursor
    begin   = cursor.tell()

    try:
        major   = cursor.chop_int(VERSION_PART_MAX)

        if cursor.chop_char() != b"."[0]:
            raise PdfMalformedHeader(cursor.tell() - 1,
                                     "expected a dot after the major" \
                                     " version")

        minor   = cursor.chop_int(VERSION_PART_MAX)

    except (PdfExpectedInteger, PdfIntegerOutOfRange) as error:
        raise PdfMalformedHeader(error.position,
                                 repr(cursor.data[begin:begin + 8])) \
                from error

    return PdfVersion(major, minor)

def check_version (version, ceiling = SUPPORTED_VERSION, position = 0):
    """Complain if the version is newer than we can handle"""
    if version > ceiling:
        raise PdfUnsupportedVersion(position, version, ceiling)

    return version
