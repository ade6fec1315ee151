# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .exceptions import ParchmentBaseError, FileReadError, UnexpectedEOF, \
                        PdfError, PdfUnsupportedFeature, PdfStructureError
from .read.pdf   import Pdf, read_pdf

__all__ = [
    "read",

    "Pdf",
    "read_pdf",

    # Exceptions
    "ParchmentBaseError",
    "FileReadError",
    "UnexpectedEOF",
    "PdfError",
    "PdfUnsupportedFeature",
    "PdfStructureError",
]
