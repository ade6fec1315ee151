# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def as_bytes (value):
    return str(value).encode("ascii")

def stream_body (data, length = None, extra = b""):
    """Dictionary, stream keyword, data, and endstream"""
    if length is None:
        length = as_bytes(len(data))

    return b"<< /Length " + length + extra + b" >>\nstream\n" \
            + data + b"\nendstream"

def build_pdf (objects,
               version      = b"1.4",
               trailer      = None,
               header_junk  = b"",
               eol          = b"\n",
               subsections  = None):
    """Lay out a complete pdf with correct offsets

    Objects are (number, body) pairs. Any object number between zero
    and the highest one that isn't given is listed as free.

    Subsections, if given, are (start, count) pairs covering the same
    entries, so the xref section can be split up.
    """
    result  = bytearray(header_junk)
    result += b"%PDF-" + version + eol
    result += b"%\xe2\xe3\xcf\xd3" + eol

    offsets = { }

    for number, body in objects:
        offsets[number] = len(result)
        result += as_bytes(number) + b" 0 obj" + eol
        result += body + eol
        result += b"endobj" + eol

    size        = max(offsets) + 1
    xref_offset = len(result)

    if subsections is None:
        subsections = [(0, size)]

    result += b"xref" + eol

    for start, count in subsections:
        result += as_bytes(start) + b" " + as_bytes(count) + eol

        for number in range(start, start + count):
            if number in offsets:
                result += "{:010d} 00000 n".format(
                                    offsets[number]).encode("ascii")

            else:
                result += b"0000000000 65535 f"

            result += b" " + eol

    if trailer is None:
        trailer = b"<< /Size " + as_bytes(size) + b" /Root 1 0 R >>"

    result += b"trailer" + eol
    result += trailer + eol
    result += b"startxref" + eol
    result += as_bytes(xref_offset) + eol
    result += b"%%EOF" + eol

    return bytes(result)

PAGE_CONTENT    = b"BT /F1 12 Tf 72 712 Td (Hello) Tj ET"

def minimal_objects (content = PAGE_CONTENT, length = None):
    return [
        (1, b"<< /Type /Catalog /Pages 2 0 R >>"),
        (2, b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>"),
        (3, b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]"
            b" /Contents 4 0 R >>"),
        (4, stream_body(content, length)),
    ]

def minimal_pdf (**kwargs):
    return build_pdf(minimal_objects(), **kwargs)
