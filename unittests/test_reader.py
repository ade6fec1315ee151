# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
from io import BytesIO, StringIO
import unittest

from parchment import Pdf, read_pdf, PdfStructureError, \
                      PdfUnsupportedFeature
from parchment.exceptions import PdfUnsupportedVersion, PdfMissingHeader, \
                                 PdfUnsupportedIncrementalUpdate
from parchment.read.pdf.version import PdfVersion

from .matchers import a_reference_to, a_stream_with, raises_at
from .samples import build_pdf, minimal_objects, minimal_pdf, \
                     PAGE_CONTENT

class GivenMinimalPdf (unittest.TestCase):

    def setUp (self):
        self.pdf = Pdf(minimal_pdf())

    def test_version (self):
        assert_that(self.pdf.version, is_(equal_to(PdfVersion(1, 4))))
        assert_that(self.pdf.header_offset, is_(equal_to(0)))

    def test_trailer (self):
        assert_that(self.pdf.trailer["Size"], is_(equal_to(5)))
        assert_that(self.pdf.trailer["Root"], is_(a_reference_to(1)))

    def test_every_object_is_read (self):
        assert_that(self.pdf, has_length(4))
        assert_that(self.pdf.objects.internal_dict, has_length(4))
        assert_that(list(self.pdf), contains_exactly(1, 2, 3, 4))

    def test_root (self):
        assert_that(self.pdf.root["Type"], is_(equal_to("Catalog")))

    def test_page_tree (self):
        pages   = self.pdf.follow(self.pdf.root["Pages"])
        page    = self.pdf.follow(pages["Kids"][0])

        assert_that(pages["Count"], is_(equal_to(1)))
        assert_that(page["MediaBox"], contains_exactly(0, 0, 612, 792))
        assert_that(self.pdf.follow(page["Contents"]),
                    is_(a_stream_with(PAGE_CONTENT)))

    def test_xref_offset (self):
        assert_that(self.pdf.xref_offset,
                    is_(equal_to(minimal_pdf().index(b"xref"))))

class GivenOtherSources (unittest.TestCase):

    def test_binary_file (self):
        pdf = read_pdf(BytesIO(minimal_pdf()))
        assert_that(pdf[4], is_(a_stream_with(PAGE_CONTENT)))

    def test_bytearray (self):
        assert_that(read_pdf(bytearray(minimal_pdf())), has_length(4))

    def test_memoryview (self):
        assert_that(read_pdf(memoryview(minimal_pdf())), has_length(4))

    def test_text_file (self):
        assert_that(calling(read_pdf).with_args(StringIO("%PDF-1.4")),
                    raises(TypeError))

    def test_text (self):
        assert_that(calling(read_pdf).with_args("%PDF-1.4"),
                    raises(TypeError))

    def test_junk_before_header (self):
        pdf = read_pdf(minimal_pdf(header_junk = b"\x00" * 12))
        assert_that(pdf.header_offset, is_(equal_to(12)))
        assert_that(pdf.root["Type"], is_(equal_to("Catalog")))

class GivenVersions (unittest.TestCase):

    def test_older_version (self):
        pdf = read_pdf(minimal_pdf(version = b"1.2"))
        assert_that(pdf.version, is_(equal_to(PdfVersion(1, 2))))

    def test_newer_version (self):
        assert_that(calling(read_pdf).with_args(
                            minimal_pdf(version = b"1.5")),
                    raises(PdfUnsupportedVersion))

    def test_newer_version_with_junk_before_header (self):
        data = minimal_pdf(version = b"1.7", header_junk = b"junk")
        assert_that(calling(read_pdf).with_args(data),
                    raises_at(PdfUnsupportedVersion, 4))

    def test_ceiling_can_be_raised (self):
        pdf = read_pdf(minimal_pdf(version = b"1.7"), PdfVersion(2, 0))
        assert_that(pdf.version, is_(equal_to(PdfVersion(1, 7))))

    def test_ceiling_as_a_class_attribute (self):
        class ModernPdf (Pdf):
            max_version = PdfVersion(1, 7)

        assert_that(ModernPdf(minimal_pdf(version = b"1.6")),
                    has_length(4))

    def test_no_header (self):
        data = minimal_pdf().replace(b"%PDF-", b"%PDX-")
        assert_that(calling(read_pdf).with_args(data),
                    raises(PdfMissingHeader))

class GivenBrokenFiles (unittest.TestCase):

    def test_feature_errors_and_structure_errors_differ (self):
        trailer = b"<< /Size 5 /Root 1 0 R /Prev 100 >>"
        data    = build_pdf(minimal_objects(), trailer = trailer)

        assert_that(calling(read_pdf).with_args(data),
                    raises(PdfUnsupportedIncrementalUpdate))
        assert_that(issubclass(PdfUnsupportedIncrementalUpdate,
                               PdfStructureError),
                    is_(False))

    def test_broken_object_fails_the_whole_file (self):
        data = minimal_pdf().replace(b"/Count 1 >>", b"/Count 1 >]")
        assert_that(calling(read_pdf).with_args(data),
                    raises(PdfStructureError))

    def test_errors_say_where_they_happened (self):
        data = minimal_pdf().replace(b"/Type /Pages", b"/Type )Pages")
        assert_that(calling(read_pdf).with_args(data),
                    raises(PdfStructureError, r"\(0x[0-9a-f]{8}\)"))

    def test_unsupported_features_can_be_caught_together (self):
        assert_that(calling(read_pdf).with_args(
                            minimal_pdf(version = b"2.0")),
                    raises(PdfUnsupportedFeature))

if __name__ == "__main__":
    unittest.main()
