# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .builder   import PdfObjectBuilder
from .objects   import PdfName, PdfDict, PdfStream, PdfObjectReference, \
                       PdfIndirectObject
from .reader    import Pdf, read_pdf
from .tokenizer import PdfTokenizer
from .tokens    import LexerState
from .version   import PdfVersion
from .xref      import PdfCrossReference

__all__ = [
    "Pdf",
    "read_pdf",
    "PdfCrossReference",
    "PdfObjectBuilder",
    "PdfTokenizer",
    "LexerState",
    "PdfVersion",

    # Objects
    "PdfName",
    "PdfDict",
    "PdfStream",
    "PdfObjectReference",
    "PdfIndirectObject",
]
