# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from ...exceptions  import  UnexpectedEOF, PdfUnexpectedToken,          \
                            PdfNonNameKey, PdfUnterminatedObject,       \
                            PdfNestingTooDeep,                          \
                            PdfMissingEndobj, PdfMissingEndstream,      \
                            PdfStreamDictRequired,                      \
                            PdfStreamLengthMissing,                     \
                            PdfStreamLengthNotInteger,                  \
                            PdfUnresolvableReference
from .objects       import  PdfDict, PdfStream, PdfObjectReference,     \
                            PdfIndirectObject
from .tokenizer     import  PdfTokenizer
from .tokens        import  Keywords, IntToken, FloatToken, StringToken, \
                            ArrayBegin, ArrayEnd, DictBegin, DictEnd,   \
                            Solidus

def describe (token):
    """Say what we found, for error messages"""
    if token is None:
        return "end of file"

    return repr(token)

def is_integer (value):
    # Booleans are ints as far as python is concerned, but not as far as
    # a PDF is concerned.
    return isinstance(value, int) and not isinstance(value, bool)

class PdfObjectBuilder:
    """PDF Object Builder

    This reads whole objects out of a PdfTokenizer. It decides what each
    object is by peeking at no more than three tokens.

        >>> builder = PdfObjectBuilder(b"[7 0 R 7 (seven)] 7 0 obj 42 endobj")
        >>> builder.read_object()
        [PdfObjectReference(number=7, generation=0), 7, b'seven']
        >>> builder.read_object()
        42

    Streams whose Length is an indirect reference need something that
    can look that reference up. That's the resolver, and it only has to
    offer a `resolve_length` method. Without one, only direct lengths
    work.
    """

    # These objects are presented as values rather than operators.
    known_values    = {
        Keywords.null:  None,
        Keywords.true:  True,
        Keywords.false: False,
    }

    # Every array, dictionary and object body we're inside of costs us
    # a few python stack frames, so we stop well before python does.
    max_depth       = 0x80

    def __init__ (self, tokenizer, resolver = None):
        if isinstance(tokenizer, PdfTokenizer):
            self.tokenizer  = tokenizer

        else:
            self.tokenizer  = PdfTokenizer(tokenizer)

        self.resolver   = resolver
        self.depth      = 0

    @property
    def cursor (self):
        return self.tokenizer.cursor

    def __repr__ (self):
        return "<{} {:08x}>".format(self.__class__.__name__,
                                    self.cursor.tell())

    def read_object (self):
        """Read the next object, whatever it is

        Return values:

        1.  int, float and bytes for numbers and strings (hex strings
            are already decoded).

        2.  True, False and None for `true`, `false` and `null`.

        3.  PdfName, list and PdfDict for names, arrays and
            dictionaries.

        4.  PdfObjectReference for `N G R`.

        5.  For `N G obj ... endobj`, the object inside. If the inside
            is a dictionary followed by a stream, a PdfStream.

        Objects nested more than `max_depth` deep raise
        PdfNestingTooDeep.
        """
        if self.depth >= self.max_depth:
            self.cursor.error(PdfNestingTooDeep, self.max_depth)

        self.depth += 1

        try:
            return self.read_value()

        finally:
            self.depth -= 1

    def read_value (self):
        tokenizer   = self.tokenizer
        token       = tokenizer.peek_token()

        if token is None:
            self.cursor.error(UnexpectedEOF)

        if token == ArrayBegin:
            return self.read_array()

        if token == DictBegin:
            return self.read_dict()

        if token == Solidus:
            tokenizer.chop_token()
            return tokenizer.chop_name()

        if isinstance(token, IntToken):
            return self.read_int_or_more()

        if isinstance(token, (FloatToken, StringToken)):
            tokenizer.chop_token()
            return token.value

        if token in self.known_values:
            tokenizer.chop_token()
            return self.known_values[token]

        self.cursor.error(PdfUnexpectedToken, describe(token))

    def read_int_or_more (self):
        """Read an integer, a reference, or an entire indirect object

        We can't know which until we've looked at up to two more tokens.
        If it turns out to be just an integer, we go back to where it
        ended.
        """
        tokenizer   = self.tokenizer
        number      = tokenizer.chop_token().value
        mark        = tokenizer.save()
        generation  = tokenizer.peek_token()

        if isinstance(generation, IntToken):
            tokenizer.chop_token()
            token = tokenizer.peek_token()

            if token == Keywords.R:
                tokenizer.chop_token()
                return PdfObjectReference(number, generation.value)

            if token == Keywords.obj:
                tokenizer.chop_token()
                return self.read_object_body(number, generation.value)

        tokenizer.restore(mark)
        return number

    def read_indirect_object (self):
        """Read `N G obj ... endobj` and keep track of N and G"""
        begin   = self.cursor.tell()
        tokens  = [self.tokenizer.chop_token() for i in range(3)]

        if not isinstance(tokens[0], IntToken)      \
                or not isinstance(tokens[1], IntToken) \
                or tokens[2] != Keywords.obj:
            raise PdfUnexpectedToken(begin, " ".join(map(describe,
                                                         tokens)))

        reference   = PdfObjectReference(tokens[0].value,
                                         tokens[1].value)

        return PdfIndirectObject(reference,
                                 self.read_object_body(*reference))

    def read_object_body (self, number, generation):
        """Read what's between `obj` and `endobj`"""
        tokenizer   = self.tokenizer

        if tokenizer.peek_token() is None:
            self.cursor.error(PdfUnterminatedObject,
                              "object {:d} {:d}".format(number,
                                                        generation))

        value       = self.read_object()
        token       = tokenizer.peek_token()

        if token == Keywords.endobj:
            tokenizer.chop_token()
            return value

        if token == Keywords.stream:
            if not isinstance(value, PdfDict):
                self.cursor.error(PdfStreamDictRequired,
                                  type(value).__name__)

            stream  = self.read_stream(value)
            token   = tokenizer.chop_token()

            if token != Keywords.endobj:
                self.cursor.error(PdfMissingEndobj, describe(token))

            return stream

        if token is None:
            self.cursor.error(PdfUnterminatedObject,
                              "object {:d} {:d}".format(number,
                                                        generation))

        self.cursor.error(PdfMissingEndobj, describe(token))

    def read_array (self):
        tokenizer   = self.tokenizer
        tokenizer.chop_token()
        result      = [ ]

        while True:
            token   = tokenizer.peek_token()

            if token is None:
                self.cursor.error(PdfUnterminatedObject, "an array")

            if token == ArrayEnd:
                tokenizer.chop_token()
                return result

            result.append(self.read_object())

    def read_dict (self):
        tokenizer   = self.tokenizer
        tokenizer.chop_token()
        result      = PdfDict()

        while True:
            token   = tokenizer.peek_token()

            if token is None:
                self.cursor.error(PdfUnterminatedObject, "a dictionary")

            if token == DictEnd:
                tokenizer.chop_token()
                return result

            if token != Solidus:
                self.cursor.error(PdfNonNameKey, describe(token))

            tokenizer.chop_token()
            key         = tokenizer.chop_name()
            result[key] = self.read_object()

    def read_stream (self, dictionary):
        """Read the stream keyword, the data, and endstream

        The Length is the only thing that says where the data ends. We
        don't go looking for `endstream` in the data, since the data
        could well contain it.
        """
        tokenizer   = self.tokenizer

        # This puts the tokenizer in the stream state.
        tokenizer.chop_token()

        length      = self.stream_length(dictionary)
        data        = tokenizer.chop_stream_data(length).value
        token       = tokenizer.chop_token()

        if token != Keywords.endstream:
            self.cursor.error(PdfMissingEndstream, describe(token))

        return PdfStream(dictionary, data)

    def stream_length (self, dictionary):
        if "Length" not in dictionary:
            self.cursor.error(PdfStreamLengthMissing)

        length  = dictionary["Length"]

        if isinstance(length, PdfObjectReference):
            # We can follow exactly one reference, and we need someone
            # who knows where the objects are to do it.
            if self.resolver is None:
                self.cursor.error(PdfUnresolvableReference, *length)

            length  = self.resolver.resolve_length(length,
                                                   self.cursor.tell())

        if not is_integer(length) or length < 0:
            self.cursor.error(PdfStreamLengthNotInteger, repr(length))

        return length
