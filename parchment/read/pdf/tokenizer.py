# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging
from re             import  compile as re_compile

from ...exceptions  import  UnexpectedEOF, PdfMissingHeader,            \
                            PdfLexerStateError, PdfIllegalNumericLiteral, \
                            PdfIllegalEscape, PdfIllegalHexDigit,       \
                            PdfStrayDelimiter, PdfUnknownKeyword,       \
                            PdfMissingEndstream, PdfStreamMissingNewline
from ...internal.byte_classes import is_whitespace, is_regular,         \
                                     is_numeric, hex_value, octal_value
from ..cursor       import  ByteCursor
from .objects       import  PdfName, safe_decode
from .tokens        import  LexerState, IntToken, FloatToken,           \
                            StringToken, Keywords, KEYWORD_TABLE,       \
                            ArrayBegin, ArrayEnd, DictBegin, DictEnd,   \
                            Solidus

log = logging.getLogger(__name__)

class PdfTokenizer:
    """PDF Tokenizer

    This should be initialized with a ByteCursor (or just the bytes of
    the file, in which case we'll make the cursor ourselves).

        >>> tokenizer = PdfTokenizer(b"7 0 obj << /Length 3 >> stream")
        >>> tokenizer.chop_token()
        <IntToken 7>
        >>> tokenizer.peek_token()
        <IntToken 0>
        >>> tokenizer.chop_token()
        <IntToken 0>
        >>> tokenizer.chop_token()
        <Keyword b'obj'>

    Tokens don't know where they came from. If you want to know where
    you are, ask the cursor.
    """

    # Here are some meaningful names for specific, meaningful bytes.
    eol_lf,             \
        eol_cr,         \
        delim_comment,  \
        delim_name,     \
        delim_array,    \
        delim_array_end,\
        delim_string,   \
        delim_string_end,\
        delim_angle,    \
        delim_angle_end,\
        backslash,      \
        hashtag     = b"\n\r%/[]()<>\\#"

    header_marker   = b"%PDF-"
    stream_end      = b"endstream"

    keywords        = KEYWORD_TABLE

    # String literals escape characters with backslashes. These are the
    # simple cases. Left out are EOL sequences and octals, which require
    # somewhat more-specialized handling.
    string_escapes  = {
        b"n"[0]:  b"\n"[0],
        b"r"[0]:  b"\r"[0],
        b"t"[0]:  b"\t"[0],
        b"b"[0]:  b"\b"[0],
        b"f"[0]:  b"\f"[0],
        b"\\"[0]: b"\\"[0],
        b"("[0]:  b"("[0],
        b")"[0]:  b")"[0],
    }

    # Integers are one or more decimal digits optionally preceded by a
    # sign symbol.
    re_integer      = re_compile(rb"[-+]?[0-9]+")

    # Real numbers are a dot with one or more decimal digits on one side
    # and zero or more on the other. Like an integer, it is also
    # optionally preceded by a sign symbol.
    re_real         = re_compile(rb"[-+]?(?:\.[0-9]+|[0-9]+\.[0-9]*)")

    # Integers have to fit in 64 signed bits. Anything bigger is read
    # as a real.
    int_min         = -0x8000000000000000
    int_max         = 0x7fffffffffffffff

    def __init__ (self, cursor, state = LexerState.Lex):
        if isinstance(cursor, ByteCursor):
            self.cursor = cursor

        else:
            self.cursor = ByteCursor(cursor)

        self.state          = state
        self.header_offset  = None

    def __repr__ (self):
        return "<{} {} {:08x}>".format(self.__class__.__name__,
                                       self.state,
                                       self.cursor.tell())

    def __iter__ (self):
        """Iterate over every token until the end of the buffer

        Names come out as a Solidus followed by the PdfName itself.
        """
        while True:
            token = self.chop_token()

            if token is None:
                return

            yield token

            if token == Solidus:
                yield self.chop_name()

    def save (self):
        """Get a mark we can come back to"""
        return (self.cursor.tell(), self.state)

    def restore (self, mark):
        pos, self.state = mark
        self.cursor.seek(pos)

    def skip_to_header (self):
        """Find `%PDF-` and stand just after it"""
        if self.state != LexerState.Skip:
            self.cursor.error(PdfLexerStateError,
                              "look for the header", self.state)

        self.cursor.find_forwards(self.header_marker, PdfMissingHeader)

        # Any junk before the header is none of our business, but we'll
        # remember how much of it there was.
        self.header_offset  = self.cursor.tell()
        self.cursor.seek(self.header_offset + len(self.header_marker))
        self.state          = LexerState.Lex

        log.debug("found header at %d", self.header_offset)

    def skip_whitespace (self):
        """Skip whitespace and comments"""
        while True:
            self.cursor.chop_while(is_whitespace)

            if self.cursor.peek_char() != self.delim_comment:
                return

            # A comment runs until the end of the line.
            self.cursor.chop_while(self.is_not_eol)

    def is_not_eol (self, byte):
        return byte != self.eol_lf and byte != self.eol_cr

    def peek_token (self):
        """Read the next token without consuming it"""
        mark = self.save()

        try:
            return self.chop_token()

        finally:
            self.restore(mark)

    def chop_token (self):
        """Read the next token, or None at the end of the buffer"""
        if self.state == LexerState.Stream:
            # The stream keyword promised us raw bytes, so that's what
            # we'll hand out.
            return self.chop_stream_data()

        if self.state != LexerState.Lex:
            self.cursor.error(PdfLexerStateError,
                              "read a token", self.state)

        self.skip_whitespace()

        cursor  = self.cursor
        byte    = cursor.peek_char()

        if byte is None:
            return None

        if byte == self.delim_angle:
            cursor.seek(cursor.tell() + 1)

            if cursor.peek_char() == self.delim_angle:
                cursor.seek(cursor.tell() + 1)
                return DictBegin

            return self.chop_hex_string()

        if byte == self.delim_angle_end:
            if cursor.data.startswith(b">>", cursor.tell()):
                cursor.seek(cursor.tell() + 2)
                return DictEnd

            cursor.error(PdfStrayDelimiter, "'>'")

        if byte == self.delim_array:
            cursor.seek(cursor.tell() + 1)
            return ArrayBegin

        if byte == self.delim_array_end:
            cursor.seek(cursor.tell() + 1)
            return ArrayEnd

        if byte == self.delim_name:
            # The name itself is read separately, by chop_name.
            cursor.seek(cursor.tell() + 1)
            return Solidus

        if byte == self.delim_string:
            return self.chop_literal_string()

        if is_numeric(byte):
            return self.chop_number()

        if not is_regular(byte):
            # This is only possible with one of the following three
            # bytes: ')', '{', '}'
            #
            # Everything else is handled. These are delimiters that
            # don't delimit anything we know about.
            cursor.error(PdfStrayDelimiter, repr(chr(byte)))

        return self.chop_keyword()

    def chop_keyword (self):
        begin   = self.cursor.tell()
        word    = self.cursor.chop_word()

        if word not in self.keywords:
            raise PdfUnknownKeyword(begin, safe_decode(word))

        keyword = self.keywords[word]

        if keyword == Keywords.stream:
            # Whatever comes next is raw data.
            self.state  = LexerState.Stream

        return keyword

    def chop_number (self):
        begin   = self.cursor.tell()
        run     = self.cursor.chop_while(is_numeric)

        if self.re_integer.fullmatch(run) is not None:
            value   = int(run)

            if self.int_min <= value <= self.int_max:
                return IntToken(value)

            return FloatToken(float(value))

        if self.re_real.fullmatch(run) is not None:
            return FloatToken(float(run))

        raise PdfIllegalNumericLiteral(begin, run.decode("ascii"))

    def chop_hex_string (self):
        """Read hex digits up through the closing `>`

        We expect to be just past the opening `<`.
        """
        nibbles = [ ]

        while True:
            byte = self.cursor.chop_char()

            if byte is None:
                self.cursor.error(UnexpectedEOF)

            if byte == self.delim_angle_end:
                break

            if is_whitespace(byte):
                continue

            value = hex_value(byte)

            if value is None:
                raise PdfIllegalHexDigit(self.cursor.tell() - 1,
                                         repr(chr(byte)))

            nibbles.append(value)

        if len(nibbles) % 2 == 1:
            # A missing final digit is taken to be zero.
            nibbles.append(0)

        return StringToken(bytes((nibbles[i] << 4) | nibbles[i + 1]
                                 for i in range(0, len(nibbles), 2)))

    def chop_literal_string (self):
        """Read a parenthesized string, which may nest"""
        cursor      = self.cursor

        # Step past the opening parenthesis.
        cursor.seek(cursor.tell() + 1)

        # We start with a parenthesis depth of 1, since we've just
        # opened one.
        paren_depth = 1
        result      = bytearray()

        while True:
            # Line endings inside the string come out as plain line
            # feeds.
            byte = cursor.chop_char()

            if byte is None:
                cursor.error(UnexpectedEOF)

            if byte == self.backslash:
                self.chop_string_escape(result)
                continue

            if byte == self.delim_string:
                paren_depth += 1

            elif byte == self.delim_string_end:
                paren_depth -= 1

                if paren_depth == 0:
                    # We don't add the final parenthesis.
                    break

            result.append(byte)

        return StringToken(bytes(result))

    def chop_string_escape (self, result):
        """Handle whatever follows a backslash in a string literal"""
        cursor  = self.cursor
        begin   = cursor.tell() - 1
        byte    = cursor.chop_char()

        if byte is None:
            cursor.error(UnexpectedEOF)

        if byte in self.string_escapes:
            result.append(self.string_escapes[byte])
            return

        if byte == self.eol_lf:
            # An escaped line ending just continues the string onto the
            # next line.
            return

        value = octal_value(byte)

        if value is None:
            raise PdfIllegalEscape(begin, repr("\\" + chr(byte)))

        for i in range(2):
            # There could be up to two more digits.
            next_digit = octal_value(cursor.peek_char())

            if next_digit is None:
                break

            cursor.seek(cursor.tell() + 1)
            value = value * 8 + next_digit

        # High-order overflow is ignored.
        result.append(value & 0xff)

    def chop_name (self):
        """Read the name following a Solidus, expanding `#XX` escapes"""
        cursor  = self.cursor
        result  = bytearray()

        while is_regular(cursor.peek_char()):
            byte = cursor.chop_char()

            if byte == self.hashtag:
                high    = hex_value(cursor.peek_char())
                cursor.seek(cursor.tell() + 1)
                low     = hex_value(cursor.peek_char())
                cursor.seek(cursor.tell() + 1)

                if high is None or low is None:
                    raise PdfIllegalHexDigit(cursor.tell() - 3,
                                             "in a name's # escape")

                byte = (high << 4) | low

            result.append(byte)

        return PdfName(bytes(result))

    def chop_stream_data (self, length = None):
        """Read the raw bytes of a stream body

        If we're given a length, we take exactly that many bytes and
        don't look at them. Otherwise we scan for `endstream`, which is
        only safe when the data can't contain that word.
        """
        cursor  = self.cursor

        if self.state != LexerState.Stream:
            cursor.error(PdfLexerStateError,
                         "read stream data", self.state)

        # The stream keyword must be followed by exactly one newline,
        # and the data starts right after it.
        if cursor.chop_char() != self.eol_lf:
            raise PdfStreamMissingNewline(cursor.tell() - 1)

        begin   = cursor.tell()

        if length is not None:
            data    = cursor.chop_bytes(length)

        else:
            cursor.find_forwards(self.stream_end, PdfMissingEndstream,
                                 "end of file")
            data    = self.strip_final_eol(cursor.data[begin:cursor.tell()])

        log.debug("read %d bytes of stream data at %d", len(data), begin)

        # That was our one string token. Back to normal.
        self.state  = LexerState.Lex
        return StringToken(data)

    def strip_final_eol (self, data):
        if data.endswith(b"\r\n"):
            return data[:-2]

        if data.endswith(b"\n") or data.endswith(b"\r"):
            return data[:-1]

        return data
