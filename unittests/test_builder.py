# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
import unittest

from parchment.exceptions import UnexpectedEOF, PdfUnexpectedToken,    \
        PdfNonNameKey, PdfUnterminatedObject, PdfMissingEndobj,         \
        PdfNestingTooDeep,                                              \
        PdfMissingEndstream, PdfStreamDictRequired,                     \
        PdfStreamLengthMissing, PdfStreamLengthNotInteger,              \
        PdfUnresolvableReference
from parchment.read.pdf.builder import PdfObjectBuilder
from parchment.read.pdf.objects import PdfName, PdfDict, \
        PdfObjectReference, PdfIndirectObject

from .matchers import a_reference_to, a_stream_with, raises_at
from .samples import stream_body

def read_one (data):
    return PdfObjectBuilder(data).read_object()

class LengthTable:
    """Stands in for a cross reference table that knows some lengths"""

    def __init__ (self, lengths):
        self.lengths    = lengths
        self.requests   = [ ]

    def resolve_length (self, reference, position = 0):
        self.requests.append(reference)

        if reference.number not in self.lengths:
            raise PdfUnresolvableReference(position, *reference)

        return self.lengths[reference.number]

class IntegerLookaheadTest (unittest.TestCase):

    def test_reference (self):
        assert_that(read_one(b"7 0 R"), is_(a_reference_to(7, 0)))

    def test_indirect_object (self):
        assert_that(read_one(b"7 0 obj 42 endobj"), is_(equal_to(42)))

    def test_indirect_object_keeps_its_number (self):
        builder = PdfObjectBuilder(b"7 0 obj 42 endobj")
        assert_that(builder.read_indirect_object(),
                    is_(equal_to(PdfIndirectObject(
                            PdfObjectReference(7, 0), 42))))

    def test_bare_integer_rewinds (self):
        builder = PdfObjectBuilder(b"7 0 /Name")
        assert_that(builder.read_object(), is_(equal_to(7)))
        assert_that(builder.cursor.tell(), is_(equal_to(1)))
        assert_that(builder.read_object(), is_(equal_to(0)))
        assert_that(builder.read_object(), is_(equal_to("Name")))

    def test_integer_at_end_of_buffer (self):
        builder = PdfObjectBuilder(b"7")
        assert_that(builder.read_object(), is_(equal_to(7)))
        assert_that(builder.cursor.tell(), is_(equal_to(1)))

    def test_integers_in_an_array (self):
        assert_that(read_one(b"[1 2 3 0 R 4 5]"),
                    contains_exactly(1, 2, a_reference_to(3), 4, 5))

    def test_not_an_indirect_object_header (self):
        builder = PdfObjectBuilder(b"1 0 0 obj")
        assert_that(calling(builder.read_indirect_object),
                    raises(PdfUnexpectedToken))

class SimpleObjectTest (unittest.TestCase):

    def test_float (self):
        assert_that(read_one(b"-0.5"), is_(equal_to(-0.5)))

    def test_strings (self):
        assert_that(read_one(b"[(abc) <616263>]"),
                    contains_exactly(b"abc", b"abc"))

    def test_name (self):
        name = read_one(b"/Catalog")
        assert_that(name, is_(instance_of(PdfName)))
        assert_that(name, is_(equal_to("Catalog")))

    def test_booleans_and_null (self):
        assert_that(read_one(b"[true false null]"),
                    contains_exactly(True, False, None))

    def test_nested_containers (self):
        value = read_one(b"<< /A [1 [2] << /B (x) >>] /C << >> >>")
        assert_that(value, is_(instance_of(PdfDict)))
        assert_that(value["A"][0], is_(equal_to(1)))
        assert_that(value["A"][1], is_(equal_to([2])))
        assert_that(value["A"][2].get_python_dict(),
                    is_(equal_to({"B": b"x"})))
        assert_that(value["C"], has_length(0))

    def test_repeated_key_keeps_the_last_value (self):
        value = read_one(b"<< /A 1 /B 2 /A 3 >>")
        assert_that(value.get_python_dict(),
                    is_(equal_to({"A": 3, "B": 2})))

    def test_nothing_there (self):
        assert_that(calling(read_one).with_args(b"  "),
                    raises(UnexpectedEOF))

    def test_stray_keyword (self):
        assert_that(calling(read_one).with_args(b"endobj"),
                    raises(PdfUnexpectedToken))

    def test_stray_array_end (self):
        assert_that(calling(read_one).with_args(b"]"),
                    raises(PdfUnexpectedToken))

    def test_dictionary_keys_must_be_names (self):
        assert_that(calling(read_one).with_args(b"<< (A) 1 >>"),
                    raises(PdfNonNameKey))

    def test_unterminated_array (self):
        assert_that(calling(read_one).with_args(b"[1 2"),
                    raises(PdfUnterminatedObject))

    def test_unterminated_dictionary (self):
        assert_that(calling(read_one).with_args(b"<< /A 1"),
                    raises(PdfUnterminatedObject))

    def test_unterminated_object (self):
        assert_that(calling(read_one).with_args(b"1 0 obj 42"),
                    raises(PdfUnterminatedObject))

    def test_empty_object (self):
        assert_that(calling(read_one).with_args(b"1 0 obj"),
                    raises(PdfUnterminatedObject))

    def test_missing_endobj (self):
        assert_that(calling(read_one).with_args(b"1 0 obj 42 43 endobj"),
                    raises(PdfMissingEndobj))

class NestingTest (unittest.TestCase):

    def test_deep_arrays_are_fine (self):
        value = read_one(b"[" * 128 + b"]" * 128)

        for i in range(127):
            assert_that(value, has_length(1))
            value = value[0]

        assert_that(value, is_(equal_to([ ])))

    def test_too_deep_arrays (self):
        assert_that(calling(read_one).with_args(b"[" * 600 + b"]" * 600),
                    raises_at(PdfNestingTooDeep, 128))

    def test_too_deep_dictionaries (self):
        data = b"<< /A " * 600 + b"1" + b" >>" * 600
        assert_that(calling(read_one).with_args(data),
                    raises(PdfNestingTooDeep, "128"))

    def test_too_deep_object_bodies (self):
        data = b"1 0 obj " * 600 + b"1" + b" endobj" * 600
        assert_that(calling(read_one).with_args(data),
                    raises(PdfNestingTooDeep))

    def test_depth_is_back_to_zero_after_an_error (self):
        builder = PdfObjectBuilder(b"[" * 600)
        assert_that(calling(builder.read_object),
                    raises(PdfNestingTooDeep))
        assert_that(builder.depth, is_(equal_to(0)))

    def test_ceiling_can_be_raised (self):
        class DeeperBuilder (PdfObjectBuilder):
            max_depth = 0xc0

        value = DeeperBuilder(b"[" * 150 + b"]" * 150).read_object()
        assert_that(value, has_length(1))

class StreamTest (unittest.TestCase):

    def test_direct_length (self):
        value = read_one(b"4 0 obj\n" + stream_body(b"abcde") + b"\nendobj")
        assert_that(value, is_(a_stream_with(b"abcde", Length=5)))

    def test_length_wins_over_endstream_in_the_data (self):
        data    = b"xx\nendstream\nyy"
        value   = read_one(b"4 0 obj " + stream_body(data) + b" endobj")
        assert_that(value, is_(a_stream_with(data)))

    def test_indirect_length (self):
        table   = LengthTable({9: 5})
        builder = PdfObjectBuilder(b"4 0 obj "
                                   + stream_body(b"abcde", b"9 0 R")
                                   + b" endobj", table)

        assert_that(builder.read_object(), is_(a_stream_with(b"abcde")))
        assert_that(table.requests, contains_exactly(a_reference_to(9)))

    def test_indirect_length_needs_a_resolver (self):
        assert_that(calling(read_one).with_args(
                            b"4 0 obj " + stream_body(b"abcde", b"9 0 R")
                            + b" endobj"),
                    raises(PdfUnresolvableReference))

    def test_unknown_indirect_length (self):
        builder = PdfObjectBuilder(b"4 0 obj "
                                   + stream_body(b"abcde", b"8 0 R")
                                   + b" endobj", LengthTable({9: 5}))
        assert_that(calling(builder.read_object),
                    raises(PdfUnresolvableReference))

    def test_missing_length (self):
        assert_that(calling(read_one).with_args(
                            b"4 0 obj << >>\nstream\nabc\nendstream endobj"),
                    raises(PdfStreamLengthMissing))

    def test_length_must_be_an_integer (self):
        for length in (b"5.0", b"(5)", b"true", b"-1"):
            assert_that(calling(read_one).with_args(
                                b"4 0 obj " + stream_body(b"abcde", length)
                                + b" endobj"),
                        raises(PdfStreamLengthNotInteger))

    def test_length_too_short (self):
        assert_that(calling(read_one).with_args(
                            b"4 0 obj " + stream_body(b"hello 42", b"5")
                            + b" endobj"),
                    raises(PdfMissingEndstream))

    def test_length_past_the_end (self):
        assert_that(calling(read_one).with_args(
                            b"4 0 obj " + stream_body(b"abc", b"500")
                            + b" endobj"),
                    raises(UnexpectedEOF))

    def test_missing_endobj_after_stream (self):
        assert_that(calling(read_one).with_args(
                            b"4 0 obj " + stream_body(b"abc") + b" 12"),
                    raises(PdfMissingEndobj))

    def test_stream_needs_a_dictionary (self):
        assert_that(calling(read_one).with_args(
                            b"4 0 obj [1]\nstream\nabc\nendstream endobj"),
                    raises(PdfStreamDictRequired))

    def test_empty_stream (self):
        value = read_one(b"4 0 obj " + stream_body(b"") + b" endobj")
        assert_that(value, is_(a_stream_with(b"", Length=0)))

if __name__ == "__main__":
    unittest.main()
