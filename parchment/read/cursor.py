# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from ..exceptions               import  UnexpectedEOF, PdfExpectedInteger, \
                                        PdfIntegerOutOfRange
from ..internal.byte_classes    import  is_regular, is_digit

class ByteCursor:
    """Byte Cursor

    This walks back and forth over an immutable buffer of bytes. Its
    position is the only record of where we are in the file; nothing
    else keeps track.

        >>> cursor = ByteCursor(b"12 0 obj\\r\\n")
        >>> cursor.chop_int()
        12
        >>> cursor
        <ByteCursor 00000002>

    Carriage returns come out as line feeds, and CRLF pairs come out as
    a single line feed.

        >>> cursor.seek(8)
        >>> cursor.chop_char()
        10
        >>> cursor.tell()
        10
    """

    eol_lf, eol_cr = b"\n\r"

    def __init__ (self, data, pos = 0):
        if isinstance(data, (bytearray, memoryview)):
            # We never write to the buffer, and we'd like nobody else
            # to either.
            data    = bytes(data)

        if not isinstance(data, bytes):
            raise TypeError("Expected a bytes-like buffer")

        self.data   = data
        self.pos    = pos

    def __len__ (self):
        return len(self.data)

    def __repr__ (self):
        """Represent our position"""
        return "<{} {:08x}>".format(self.__class__.__name__, self.pos)

    def tell (self):
        return self.pos

    def seek (self, pos):
        self.pos    = pos

    def at_end (self):
        return self.pos >= len(self.data)

    def peek_char (self):
        """Get the raw byte at our position without moving"""
        if self.pos < len(self.data):
            return self.data[self.pos]

    def starts_with (self, target):
        return self.data.startswith(target, self.pos)

    def error (self, exception_class, *args):
        """Raise an exception pointing at our position"""
        raise exception_class(self.pos, *args)

    def chop_char (self):
        """Move forward one character, normalizing line endings"""
        byte    = self.peek_char()

        if byte is None:
            # There's nothing left, and we stay put.
            return None

        self.pos   += 1

        if byte == self.eol_cr:
            if self.peek_char() == self.eol_lf:
                # CRLF counts as one character.
                self.pos   += 1

            return self.eol_lf

        return byte

    def chop_char_backwards (self):
        """Move backward one character, normalizing line endings"""
        if self.pos <= 0:
            return None

        self.pos   -= 1
        byte        = self.data[self.pos]

        if byte == self.eol_lf:
            if self.pos > 0 and self.data[self.pos - 1] == self.eol_cr:
                # Coming at CRLF from the right, we hit the LF first.
                self.pos   -= 1

            return self.eol_lf

        if byte == self.eol_cr:
            return self.eol_lf

        return byte

    def chop_while (self, predicate):
        """Consume a run of bytes and return them as they were"""
        begin   = self.pos
        end     = len(self.data)

        while self.pos < end and predicate(self.data[self.pos]):
            self.pos   += 1

        return self.data[begin:self.pos]

    def chop_while_backwards (self, predicate):
        end     = self.pos

        while self.pos > 0 and predicate(self.data[self.pos - 1]):
            self.pos   -= 1

        return self.data[self.pos:end]

    def chop_word (self):
        return self.chop_while(is_regular)

    def chop_int (self, max_value = None):
        """Consume a run of decimal digits as an unsigned integer"""
        begin   = self.pos
        digits  = self.chop_while(is_digit)

        if not digits:
            raise PdfExpectedInteger(begin)

        value   = int(digits)

        if max_value is not None and value > max_value:
            # It's a fine number; it just doesn't fit where it's going.
            raise PdfIntegerOutOfRange(begin, value, max_value)

        return value

    def chop_bytes (self, length):
        """Slice exactly this many raw bytes"""
        end     = self.pos + length

        if length < 0 or end > len(self.data):
            self.error(UnexpectedEOF)

        result      = self.data[self.pos:end]
        self.pos    = end

        return result

    def find_backwards (self, target, exception_class, *args,
                        lower_bound = 0):
        """Step back until the buffer at our position starts with the
        target.

        We count our current position as a candidate. If the target
        isn't anywhere between the lower bound and here, we raise the
        exception class given to us.
        """
        found   = self.data.rfind(target, lower_bound,
                                  self.pos + len(target))

        if found == -1:
            # We'd have run right off the front of the buffer.
            raise exception_class(lower_bound, *args)

        self.pos    = found

    def find_forwards (self, target, exception_class, *args):
        """Step forward until the buffer at our position starts with the
        target"""
        found   = self.data.find(target, self.pos)

        if found == -1:
            raise exception_class(len(self.data), *args)

        self.pos    = found
