# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections.abc    import  Hashable

class LexerState:
    """Where the tokenizer thinks it is"""

    # We haven't found the %PDF- header yet.
    Skip    = "skip"

    # Normal token scanning.
    Lex     = "lex"

    # We just emitted the stream keyword, so the next thing is raw
    # bytes.
    Stream  = "stream"

class PdfToken (Hashable):
    """PDF Token

    Tokens are values with a type attached. Two tokens are only equal
    if they're the same kind of token with the same value, so an
    `IntToken(3)` is never mistaken for a `FloatToken(3.0)`.
    """

    __slots__ = ("value",)

    def __init__ (self, value):
        self.value  = value

    def __hash__ (self):
        return hash((self.__class__.__name__, self.value))

    def __eq__ (self, other):
        if type(other) is not type(self):
            return False

        return self.value == other.value

    def __ne__ (self, other):
        return not self == other

    def __repr__ (self):
        """Represent the token"""
        return "<{} {}>".format(self.__class__.__name__,
                                repr(self.value))

class Marker (PdfToken):
    """Structural delimiter with no payload"""
    __slots__ = ()

class IntToken (PdfToken):
    __slots__ = ()

class FloatToken (PdfToken):
    __slots__ = ()

class StringToken (PdfToken):
    """Literal string, hex string, or raw stream data"""
    __slots__ = ()

    def __bytes__ (self):
        return self.value

class Keyword (PdfToken):
    """Regular bytes that mean something to the parser"""
    __slots__ = ()

    def __bytes__ (self):
        return self.value

ArrayBegin  = Marker(b"[")
ArrayEnd    = Marker(b"]")
DictBegin   = Marker(b"<<")
DictEnd     = Marker(b">>")
Solidus     = Marker(b"/")

class Keywords:
    R           = Keyword(b"R")
    xref        = Keyword(b"xref")
    n           = Keyword(b"n")
    f           = Keyword(b"f")
    obj         = Keyword(b"obj")
    endobj      = Keyword(b"endobj")
    stream      = Keyword(b"stream")
    endstream   = Keyword(b"endstream")
    trailer     = Keyword(b"trailer")
    startxref   = Keyword(b"startxref")
    true        = Keyword(b"true")
    false       = Keyword(b"false")
    null        = Keyword(b"null")

KEYWORD_TABLE   = dict((bytes(keyword), keyword) for keyword in (
                        Keywords.R,
                        Keywords.xref,
                        Keywords.n,
                        Keywords.f,
                        Keywords.obj,
                        Keywords.endobj,
                        Keywords.stream,
                        Keywords.endstream,
                        Keywords.trailer,
                        Keywords.startxref,
                        Keywords.true,
                        Keywords.false,
                        Keywords.null))
