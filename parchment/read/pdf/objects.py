# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections        import  namedtuple
from collections.abc    import  Hashable, Mapping

def safe_decode (bytestring):
    """Decode bytes into a unicode string"""
    try:
        # Always start by trying to decode using UTF-8. Ideally,
        # everything I get will be encoded with that.
        return bytestring.decode("utf_8")

    except UnicodeDecodeError:
        try:
            # If it's not valid UTF-8, it could be that old pesky
            # MICROS~1 codepage 1252. Give that a whirl, just in case.
            return bytestring.decode("cp1252")

        except UnicodeDecodeError:
            # Failing that, every byte is at least a latin-1 character.
            return bytestring.decode("latin_1")

class PdfName (Hashable):
    """PDF Name

    The tokenizer has already expanded any `#XX` escapes, so this just
    takes the finished bytes. Names compare equal to plain strings,
    which keeps dictionary lookups painless.

        >>> PdfName(b"A B") == "A B"
        True
        >>> {PdfName(b"Length"): 5}["Length"]
        5
    """

    def __init__ (self, name_bytes):
        if isinstance(name_bytes, str):
            self.name       = name_bytes
            self.raw        = name_bytes.encode("utf_8")

        else:
            self.raw        = bytes(name_bytes)
            self.name       = safe_decode(self.raw)

    def __str__ (self):
        """Convert to unicode"""
        return self.name

    def __bytes__ (self):
        return self.raw

    def __eq__ (self, other):
        if isinstance(other, PdfName):
            # Same field as the hash, so names and strings agree.
            return self.name == other.name

        if isinstance(other, str):
            return self.name == other

        return False

    def __ne__ (self, other):
        return not self == other

    def __hash__ (self):
        """Hashed on the name itself"""
        return hash(self.name)

    def __repr__ (self):
        """Python representation"""
        return "<{} {}>".format(self.__class__.__name__,
                                repr(str(self)))

class PdfDict (Mapping):
    """PDF Dictionary

    Keys are names, and each one appears at most once. If a file repeats
    a key, the last value wins.
    """

    def __init__ (self, pairs = ()):
        self.internal_dict  = { }

        for key, value in pairs:
            self[key] = value

    def __getitem__ (self, key):
        return self.internal_dict[key]

    def __setitem__ (self, key, value):
        if not isinstance(key, PdfName):
            key = PdfName(key)

        # Dropping the old key first means the new one takes its place
        # at the end of the insertion order.
        self.internal_dict.pop(key, None)
        self.internal_dict[key] = value

    def __iter__ (self):
        return iter(self.internal_dict)

    def __len__ (self):
        return len(self.internal_dict)

    def __contains__ (self, key):
        return key in self.internal_dict

    def __eq__ (self, other):
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())

        return NotImplemented

    __hash__ = None

    def get_python_dict (self):
        """Return a simple dict with string keys"""
        return dict((str(key), value) for key, value in self.items())

    def __repr__ (self):
        pairs = [ ]
        for key, value in self.items():
            pairs.append("{}: {}".format(repr(key), repr(value)))

        return "<{} {{{}}}>".format(self.__class__.__name__,
                                    ", ".join(pairs))

PdfObjectReference  = namedtuple("PdfObjectReference",
                                 ("number", "generation"))

PdfIndirectObject   = namedtuple("PdfIndirectObject",
                                 ("reference", "value"))

class PdfStream:
    """PDF Stream

    A dictionary paired with the raw, still-encoded bytes that follow
    it. We don't decode anything; the data is exactly `Length` bytes
    long.
    """

    def __init__ (self, dictionary, data):
        self.dictionary = dictionary
        self.data       = data

    def __bytes__ (self):
        return self.data

    def __eq__ (self, other):
        if not isinstance(other, PdfStream):
            return NotImplemented

        return self.dictionary == other.dictionary \
                and self.data == other.data

    __hash__ = None

    def __repr__ (self):
        return "<{} {} ({:d} bytes)>".format(self.__class__.__name__,
                                             repr(self.dictionary),
                                             len(self.data))
