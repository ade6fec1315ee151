# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging
from collections.abc    import  Mapping
from io                 import  BufferedIOBase, RawIOBase

from .tokenizer         import  PdfTokenizer
from .tokens            import  LexerState
from .version           import  SUPPORTED_VERSION, read_version, \
                                check_version
from .xref              import  PdfCrossReference

log = logging.getLogger(__name__)

def read_all_bytes (source):
    """Get the whole file as one bytes object"""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    if isinstance(source, (BufferedIOBase, RawIOBase)) \
            or getattr(source, "mode", None) == "rb":
        return source.read()

    # Assert that we have a file.
    raise TypeError("Expected bytes or a file with mode 'rb'")

class Pdf (Mapping):
    """PDF File

    This takes the bytes of an entire PDF (or a file opened in `rb`
    mode) and reads every object in it.

        >>> with open("/path/to/file.pdf", "rb") as pdf_file:
        ...     pdf = Pdf(pdf_file)
        ...
        >>> pdf.version
        PdfVersion(major=1, minor=4)
        >>> pdf.trailer["Root"]
        PdfObjectReference(number=1, generation=0)
        >>> pdf.root
        <PdfDict {<PdfName 'Type'>: <PdfName 'Catalog'>, ...}>

    Nothing is returned if anything is wrong; any problem at all raises
    an exception, and no partial table is kept.
    """

    max_version = SUPPORTED_VERSION

    def __init__ (self, source, max_version = None):
        if max_version is not None:
            self.max_version = max_version

        self.data           = read_all_bytes(source)

        # Start with the header, since there's no point in doing
        # anything else if we can't handle this version.
        tokenizer           = PdfTokenizer(self.data, LexerState.Skip)
        self.version        = read_version(tokenizer)
        self.header_offset  = tokenizer.header_offset

        check_version(self.version, self.max_version, self.header_offset)

        log.debug("reading version %s pdf of %d bytes",
                  self.version, len(self.data))

        # Next comes everything at the end of the file, and then every
        # object it points to.
        self.objects        = PdfCrossReference(self.data).resolve_all()
        self.trailer        = self.objects.trailer
        self.xref_offset    = self.objects.xref_offset

    def __getitem__ (self, key):
        return self.objects[key]

    def __len__ (self):
        return len(self.objects)

    def __iter__ (self):
        return iter(self.objects)

    def __contains__ (self, key):
        return key in self.objects

    def __repr__ (self):
        return "<{} {} {:d} objects>".format(self.__class__.__name__,
                                             self.version,
                                             len(self.objects))

    @property
    def root (self):
        return self.follow(self.trailer.get("Root"))

    def follow (self, value):
        return self.objects.follow(value)

def read_pdf (source, max_version = None):
    return Pdf(source, max_version)
