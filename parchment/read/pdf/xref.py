# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging
from collections.abc    import  Mapping

from ...exceptions      import  PdfMissingEOFMarker, PdfNoNewlineBeforeEOF, \
                                PdfMissingStartXref, PdfMissingTrailer, \
                                PdfTrailerNotDict, PdfTrailerNotReady,  \
                                PdfMissingXrefKeyword, PdfXrefEntryError, \
                                PdfUnsupportedIncrementalUpdate,        \
                                PdfUnresolvableReference,               \
                                PdfCircularReference,                   \
                                PdfObjectNumberMismatch
from ...internal.byte_classes import is_whitespace, is_digit
from ..cursor           import  ByteCursor
from .builder           import  PdfObjectBuilder, describe
from .objects           import  PdfDict, PdfObjectReference
from .tokenizer         import  PdfTokenizer
from .tokens            import  Keywords, IntToken

log = logging.getLogger(__name__)

class PdfCrossReference (Mapping):
    """PDF Cross Reference Table

    Everything here is found by working backward from the end of the
    file:

    1.  `%%EOF`, which must be right after a newline.
    2.  The `startxref` offset right before that.
    3.  The trailer dictionary, somewhere before `startxref`.
    4.  The xref section, at the `startxref` offset.

    Reading the xref section only tells us where each object lives.
    Objects are parsed the first time anyone asks for them, and we keep
    them after that. This way a stream can have its Length in an object
    that comes later in the file.

        >>> xref = PdfCrossReference(pdf_bytes)
        >>> xref.trailer["Size"]
        3
        >>> xref[1]
        <PdfDict {<PdfName 'Type'>: <PdfName 'Catalog'>}>

    Keys are object numbers of in-use objects. Free objects aren't in
    the mapping at all.
    """

    eof_marker          = b"%%EOF"
    startxref_marker    = b"startxref"
    trailer_marker      = b"trailer"

    # In the PDF spec, the last line of the PDF should simply be
    # `%%EOF`, but implementation note 18 (appendix H) goes on to say
    # that Acrobat Reader allows it to exist anywhere in the last 1024
    # bytes of the file. Therefore I should also allow it to exist
    # anywhere in the last 1024 bytes of the file.
    eof_search_window   = 0x400

    # Only the very first generation of each object is supported, and
    # free objects must never be reused.
    in_use_generation   = 0
    free_generation     = 65535

    def __init__ (self, data):
        if isinstance(data, ByteCursor):
            data = data.data

        self.data               = ByteCursor(data).data

        # Object numbers mapped to byte offsets, plus whatever we've
        # parsed so far.
        self.offsets            = { }
        self.internal_dict      = { }

        # We don't track free objects beyond knowing they're free.
        self.free_numbers       = set()
        self.declared_count     = 0

        self.trailer            = None
        self.xref_offset        = None

        # Objects we're in the middle of parsing.
        self.in_progress        = set()

        cursor = self.locate_footer()
        self.read_trailer(cursor)
        self.read_xref_section()

    def __getitem__ (self, key):
        return self.resolve(key)

    def __iter__ (self):
        return iter(sorted(self.offsets))

    def __len__ (self):
        return len(self.offsets)

    def __contains__ (self, key):
        return key in self.offsets

    def __repr__ (self):
        return "<{} {:d} objects, {:d} free>".format(
                self.__class__.__name__,
                len(self.offsets),
                len(self.free_numbers))

    def locate_footer (self):
        """Find the startxref offset and return a cursor pointing at
        the startxref keyword"""
        cursor  = ByteCursor(self.data, len(self.data))

        cursor.find_backwards(self.eof_marker,
                              PdfMissingEOFMarker,
                              self.eof_search_window,
                              lower_bound = max(0, len(self.data)
                                                  - self.eof_search_window))

        eof_pos = cursor.tell()

        if cursor.chop_char_backwards() != cursor.eol_lf:
            raise PdfNoNewlineBeforeEOF(eof_pos)

        # The offset is the run of digits on the line before.
        cursor.chop_while_backwards(is_whitespace)
        digits  = cursor.chop_while_backwards(is_digit)

        if not digits:
            cursor.error(PdfMissingStartXref)

        self.xref_offset = int(digits)

        # And the startxref keyword comes right before that.
        cursor.chop_while_backwards(is_whitespace)
        keyword_pos = cursor.tell() - len(self.startxref_marker)

        if keyword_pos < 0 or not self.data.startswith(
                self.startxref_marker, keyword_pos):
            cursor.error(PdfMissingStartXref)

        cursor.seek(keyword_pos)

        log.debug("startxref at %d points to %d",
                  keyword_pos, self.xref_offset)

        return cursor

    def read_trailer (self, cursor):
        """Read the trailer dictionary before the cursor's position"""
        cursor.find_backwards(self.trailer_marker, PdfMissingTrailer)
        trailer_pos = cursor.tell()

        tokenizer   = PdfTokenizer(cursor)
        token       = tokenizer.chop_token()

        if token != Keywords.trailer:
            raise PdfMissingTrailer(trailer_pos)

        trailer     = PdfObjectBuilder(tokenizer).read_object()

        if not isinstance(trailer, PdfDict):
            raise PdfTrailerNotDict(trailer_pos, type(trailer).__name__)

        for key in ("Prev", "XRefStm"):
            if key in trailer:
                # There's more than one cross reference section, and we
                # only know how to read one.
                raise PdfUnsupportedIncrementalUpdate(
                        trailer_pos, "the trailer has {}".format(key))

        log.debug("trailer at %d has keys %s", trailer_pos,
                  ", ".join(map(str, trailer)))

        self.trailer = trailer
        return trailer

    def read_xref_section (self):
        """Read every subsection of the xref section at the startxref
        offset"""
        if self.trailer is None:
            raise PdfTrailerNotReady(self.xref_offset or 0)

        tokenizer   = PdfTokenizer(ByteCursor(self.data, self.xref_offset))
        token       = tokenizer.chop_token()

        if token != Keywords.xref:
            raise PdfMissingXrefKeyword(self.xref_offset, describe(token))

        subsections = 0

        while isinstance(tokenizer.peek_token(), IntToken):
            self.read_xref_subsection(tokenizer)
            subsections += 1

        token       = tokenizer.peek_token()

        if subsections == 0 or token != Keywords.trailer:
            tokenizer.cursor.error(PdfXrefEntryError,
                                   "expected a subsection or trailer;" \
                                   " found {}".format(describe(token)))

        log.debug("read %d xref subsections: %d in use, %d free",
                  subsections, len(self.offsets), len(self.free_numbers))

    def read_xref_subsection (self, tokenizer):
        cursor  = tokenizer.cursor
        start   = tokenizer.chop_token().value
        count   = tokenizer.chop_token()

        if not isinstance(count, IntToken) or start < 0 or count.value < 0:
            cursor.error(PdfXrefEntryError,
                         "subsection {:d} has no entry count".format(start))

        for number in range(start, start + count.value):
            # Each line has three things on it: two numbers and a type
            # token.
            entry_pos   = cursor.tell()
            entry       = [tokenizer.chop_token() for i in range(3)]
            offset, generation, kind = entry

            if not isinstance(offset, IntToken)         \
                    or not isinstance(generation, IntToken) \
                    or kind not in (Keywords.n, Keywords.f)  \
                    or offset.value < 0:
                raise PdfXrefEntryError(entry_pos,
                        "object {:d} should be `offset generation n|f`," \
                        " not {}".format(number,
                                         " ".join(map(describe, entry))))

            self.declared_count += 1

            if number in self.offsets or number in self.free_numbers:
                # If we've already seen this object number, we should
                # silently ignore it (because Acrobat will also silently
                # ignore it).
                continue

            if kind == Keywords.n:
                if generation.value != self.in_use_generation:
                    raise PdfUnsupportedIncrementalUpdate(entry_pos,
                            "object {:d} has generation {:d}".format(
                                    number, generation.value))

                self.offsets[number] = offset.value

            else:
                if generation.value != self.free_generation:
                    raise PdfUnsupportedIncrementalUpdate(entry_pos,
                            "free object {:d} has generation {:d}".format(
                                    number, generation.value))

                self.free_numbers.add(number)

    def resolve (self, number):
        """Parse an object (or remember having parsed it)"""
        if number in self.internal_dict:
            return self.internal_dict[number]

        # Raises KeyError for objects we don't have, as any mapping
        # would.
        offset  = self.offsets[number]

        if number in self.in_progress:
            # Parsing this object led right back to itself.
            raise PdfCircularReference(offset, number)

        self.in_progress.add(number)

        try:
            builder = PdfObjectBuilder(PdfTokenizer(ByteCursor(self.data,
                                                               offset)),
                                       self)
            indirect_object = builder.read_indirect_object()

        finally:
            self.in_progress.discard(number)

        expected = PdfObjectReference(number, self.in_use_generation)

        if indirect_object.reference != expected:
            raise PdfObjectNumberMismatch(offset,
                                          expected.number,
                                          expected.generation,
                                          indirect_object.reference.number,
                                          indirect_object.reference.generation)

        log.debug("resolved object %d at %d", number, offset)

        self.internal_dict[number] = indirect_object.value
        return indirect_object.value

    def resolve_length (self, reference, position = 0):
        """Look up the object a stream's Length points at"""
        number, generation = reference

        if number not in self.offsets \
                or generation != self.in_use_generation:
            raise PdfUnresolvableReference(position, number, generation)

        return self.resolve(number)

    def resolve_all (self):
        """Parse every in-use object, lowest number first"""
        for number in sorted(self.offsets):
            self.resolve(number)

        return self

    def follow (self, value):
        """Follow references until we reach something that isn't one"""
        seen = set()

        while isinstance(value, PdfObjectReference):
            number, generation = value

            if number in seen:
                raise PdfCircularReference(self.offsets.get(number, 0),
                                           number)

            seen.add(number)

            if number not in self.offsets \
                    or generation != self.in_use_generation:
                # According to the PDF spec, there are no incorrect
                # indirect references to objects. If a referenced object
                # does not actually exist, it should be treated as null.
                return None

            value = self.resolve(number)

        return value
