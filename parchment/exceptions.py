# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class ParchmentBaseError (Exception):
    """Root for all Parchment errors.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Examples:
        For the sake of clarity, all child exceptions default to showing
        the docstring if ever converted to strings.

        >>> class MyParchmentError (ParchmentBaseError):
        ...     '''Quick description of this subclass.'''
        ...     pass
        ...
        >>> raise MyParchmentError
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        MyParchmentError: Quick description of this subclass.

    """

    def __repr__ (self):
        # Assume the child exception class has implemented its own
        # __str__ method. If not, this'll look much the same as any
        # other python exception.
        return "{}({})".format(self.__class__.__name__, repr(str(self)))

    def __str__ (self):
        # By default, let's just keep our docstrings short.
        return self.__doc__

class FileReadError (ParchmentBaseError):
    """File Read Error

    Something unexpected has happened while reading a file.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Args:
        position (int):     The byte in the file.

    Examples:
        >>> two_fifty_six = UnexpectedEOF(256)
        >>> two_fifty_six
        UnexpectedEOF('Unexpected end of file. (0x00000100)')
        >>> raise PdfUnknownKeyword(42, "endobject")
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        PdfUnknownKeyword: Unknown keyword: 'endobject' (0x0000002a)

        The message is set by the child class's docstring, and the
        output contains an eight-digit hexadecimal pointing to the exact
        byte in the file where the problem was detected.

    """

    def __init__ (self, position, *args):
        # All I want to actually take in is a positional argument; the
        # message should be set by the child class.
        self.position   = position
        self.args       = args

    def __str__ (self):
        # After displaying the message, display the relevant position in
        # the file.
        return "{} (0x{:08x})".format(self.__doc__.format(*(self.args)),
                                      self.position)

class UnexpectedEOF (FileReadError):
    """Unexpected end of file."""
    pass

class PdfError (FileReadError):
    """Catch-all for pdf errors."""
    pass

########################################################################
# Things the file is allowed to be but that we don't handle. Callers
# can catch these and try something else with the same file.

class PdfUnsupportedFeature (PdfError):
    """Catch-all for valid pdf features that aren't supported."""
    pass

class PdfUnsupportedVersion (PdfUnsupportedFeature):
    """PDF version {} is newer than the supported {}."""
    pass

class PdfUnsupportedIncrementalUpdate (PdfUnsupportedFeature):
    """Incrementally updated files are not supported: {}"""
    pass

########################################################################
# Things the file isn't allowed to be.

class PdfStructureError (PdfError):
    """Catch-all for structurally broken pdf files."""
    pass

class PdfMissingHeader (PdfStructureError):
    """Couldn't find the %PDF- header."""
    pass

class PdfMalformedHeader (PdfStructureError):
    """Malformed version number in header: {}"""
    pass

class PdfMissingEOFMarker (PdfStructureError):
    """Couldn't find %%EOF marker anywhere in the last {:d} bytes."""
    pass

class PdfNoNewlineBeforeEOF (PdfStructureError):
    """Expected a newline before the %%EOF marker."""
    pass

class PdfMissingStartXref (PdfStructureError):
    """Expected `startxref` and an offset before the %%EOF marker."""
    pass

class PdfMissingTrailer (PdfStructureError):
    """Couldn't find the trailer keyword."""
    pass

class PdfTrailerNotDict (PdfStructureError):
    """The trailer must be a dictionary, not {}."""
    pass

class PdfTrailerNotReady (PdfStructureError):
    """Tried to read the xref table before the trailer dictionary."""
    pass

class PdfMissingXrefKeyword (PdfStructureError):
    """Expected keyword `xref`; found {}."""
    pass

class PdfXrefEntryError (PdfStructureError):
    """Malformed cross reference section: {}"""
    pass

class PdfLexerStateError (PdfStructureError):
    """Can't {} while the lexer is in the {} state."""
    pass

class PdfExpectedInteger (PdfStructureError):
    """Expected decimal digits."""
    pass

class PdfIntegerOutOfRange (PdfStructureError):
    """Integer {:d} is larger than {:d}."""
    pass

# Token-level errors.

class PdfIllegalNumericLiteral (PdfStructureError):
    """Illegal numeric literal: {}"""
    pass

class PdfIllegalEscape (PdfStructureError):
    """Illegal escape in string literal: {}"""
    pass

class PdfIllegalHexDigit (PdfStructureError):
    """Illegal hexadecimal digit: {}"""
    pass

class PdfStrayDelimiter (PdfStructureError):
    """Unexpected {} delimiter."""
    pass

class PdfUnknownKeyword (PdfStructureError):
    """Unknown keyword: {!r}"""
    pass

# Object-level errors.

class PdfUnexpectedToken (PdfStructureError):
    """Can't build an object starting with {}."""
    pass

class PdfNonNameKey (PdfStructureError):
    """Dictionary keys must be names, not {}."""
    pass

class PdfUnterminatedObject (PdfStructureError):
    """Reached end of file inside {}."""
    pass

class PdfNestingTooDeep (PdfStructureError):
    """Objects are nested more than {:d} deep."""
    pass

class PdfMissingEndobj (PdfStructureError):
    """Expected endobj; found {}."""
    pass

class PdfMissingEndstream (PdfStructureError):
    """Expected endstream; found {}."""
    pass

class PdfStreamDictRequired (PdfStructureError):
    """A stream must begin with a dictionary, not {}."""
    pass

class PdfStreamLengthMissing (PdfStructureError):
    """Stream dictionary has no Length."""
    pass

class PdfStreamLengthNotInteger (PdfStructureError):
    """Stream Length must be a non-negative integer, not {}."""
    pass

class PdfUnresolvableReference (PdfStructureError):
    """Can't resolve the reference {} {} R."""
    pass

class PdfCircularReference (PdfStructureError):
    """Object {:d} depends on itself."""
    pass

class PdfObjectNumberMismatch (PdfStructureError):
    """Expected object {} {} obj; found {} {} obj."""
    pass

class PdfStreamMissingNewline (PdfStructureError):
    """Expected a newline right after the stream keyword."""
    pass
