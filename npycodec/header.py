# -*- coding: utf-8 -*-
# Copyright (C) 2008-2014, Luis Pedro Coelho <luis@luispedro.org>
# vim: set ts=4 sts=4 sw=4 expandtab smartindent:
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
#  THE SOFTWARE.

'''
header: the NPY preamble and header-text grammar shared by both codecs

Layout::

    \x93NUMPY | major | minor | header length (<u2 for 1.0, <u4 for 2.0) | header text

The header text is a dictionary literal holding the 'descr', 'fortran_order'
and 'shape' keys.
'''

import re
import struct
import logging
logger = logging.getLogger(__name__)

from .errors import NpyIOError, FormatError, UnsupportedError, ShapeError

__all__ = [
    'MAGIC_PREFIX', 'MAGIC_LEN', 'SUPPORTED_VERSIONS', 'FLOAT_WIDTHS',
    'read_exact', 'read_magic', 'read_header_text',
    'parse_descr', 'parse_fortran_order', 'parse_shape',
    'build_header', 'write_header',
    ]

MAGIC_PREFIX = b'\x93NUMPY'
MAGIC_LEN = len(MAGIC_PREFIX) + 2

SUPPORTED_VERSIONS = ((1, 0), (2, 0))

_length_formats = {
    1: struct.Struct('<H'),
    2: struct.Struct('<I'),
}

# descr value -> bytes per element
FLOAT_WIDTHS = {
    '<f4': 4,
    '<f8': 8,
}

_descr_re = re.compile(r'''['"]descr['"]\s*:\s*['"]([^'"]*)['"]''')
_fortran_order_re = re.compile(r'''['"]fortran_order['"]\s*:\s*(\w+)''')
_shape_re = re.compile(r'''['"]shape['"]\s*:\s*\(([^)]*)\)''')
_dim_re = re.compile(r'[0-9]+')

_read_chunk_size = 1 << 20

def read_exact(stream, size, what):
    '''
    data = read_exact(stream, size, what)

    Read exactly `size` bytes from `stream`. Reads are made in chunks of at
    most 1 MiB, so a header declaring more data than the stream holds fails
    on the short read instead of allocating the declared size up front.

    Raises
    ------
    NpyIOError
        if the stream ends early. `what` names the field being read.
    '''
    buffer = bytearray()
    while len(buffer) < size:
        chunk = stream.read(min(size - len(buffer), _read_chunk_size))
        if not chunk:
            break
        buffer += chunk
    data = bytes(buffer)
    if len(data) != size:
        raise NpyIOError('unexpected end of stream while reading %s (expected %s bytes, got %s)'
                         % (what, size, len(data)))
    return data

def read_magic(stream):
    '''
    major, minor = read_magic(stream)

    Consume and validate the magic string and version bytes.
    '''
    prefix = stream.read(len(MAGIC_PREFIX))
    if prefix != MAGIC_PREFIX:
        raise FormatError('not an array file (bad magic string)', prefix)
    major, minor = read_exact(stream, 2, 'format version')
    if (major, minor) not in SUPPORTED_VERSIONS:
        raise FormatError('unsupported version (only 1.0 and 2.0 are supported)', '%s.%s' % (major, minor))
    logger.debug('NPY format version %s.%s', major, minor)
    return major, minor

def read_header_text(stream, major):
    '''
    text = read_header_text(stream, major)

    Read the header length field for format `major` and the header text
    that follows it.
    '''
    length_format = _length_formats[major]
    header_length, = length_format.unpack(read_exact(stream, length_format.size, 'header length'))
    text = read_exact(stream, header_length, 'header text').decode('latin1')
    logger.debug('NPY header (%s bytes): %r', header_length, text)
    return text

def parse_descr(text):
    '''
    width = parse_descr(text)

    Element width in bytes for the header's 'descr' value.
    '''
    match = _descr_re.search(text)
    if match is None:
        raise FormatError("malformed header: no 'descr' field", text)
    descr = match.group(1)
    width = FLOAT_WIDTHS.get(descr)
    if width is None:
        raise UnsupportedError('unsupported dtype (only <f4 and <f8 are supported)', descr)
    return width

def parse_fortran_order(text):
    '''
    fortran_order = parse_fortran_order(text)

    Only the token bound to the 'fortran_order' key is inspected. A True
    token is rejected, as column-major arrays are not supported.
    '''
    match = _fortran_order_re.search(text)
    if match is None:
        raise FormatError("malformed header: no 'fortran_order' field", text)
    token = match.group(1)
    if token == 'True':
        raise UnsupportedError('Fortran order unsupported')
    if token != 'False':
        raise FormatError("malformed header: bad 'fortran_order' value", token)
    return False

def parse_shape(text):
    '''
    shape = parse_shape(text)

    Parse the parenthesized 'shape' value into a tuple of positive ints.
    A single trailing comma, as in ``(3,)``, is allowed.
    '''
    match = _shape_re.search(text)
    if match is None:
        raise FormatError("malformed header: no 'shape' field", text)
    body = match.group(1)
    if not body.strip():
        raise ShapeError('0-dimensional arrays unsupported')
    segments = body.split(',')
    if len(segments) > 1 and not segments[-1].strip():
        segments.pop()
    shape = []
    for segment in segments:
        segment = segment.strip()
        if not _dim_re.fullmatch(segment):
            raise FormatError("malformed header: bad 'shape' dimension", segment)
        shape.append(int(segment))
    if 0 in shape:
        raise ShapeError('zero-size dimension', tuple(shape))
    return tuple(shape)

def _header_dict_text(shape):
    dims = ', '.join(str(dim) for dim in shape)
    if len(shape) == 1:
        dims += ','
    return "{'descr': '<f8', 'fortran_order': False, 'shape': (%s), }" % dims

def _aligned_length(preamble, needed, alignment):
    return -(-(preamble + needed) // alignment) * alignment - preamble

def build_header(shape, options):
    '''
    version, header = build_header(shape, options)

    Build the padded header text for a float64 C-order array of `shape`.

    The text is padded with spaces and a final newline to
    ``options.header_length`` bytes. If it does not fit, it is grown so that
    the whole preamble is a multiple of ``options.header_alignment``, moving
    to format 2.0 whenever the length no longer fits two bytes.

    Returns
    -------
    version : (major, minor)
    header : bytes
    '''
    text = _header_dict_text(shape)
    needed = len(text) + 1
    version = (1, 0)
    length = options.header_length
    if needed > length:
        alignment = options.header_alignment
        length = _aligned_length(MAGIC_LEN + _length_formats[1].size, needed, alignment)
        if length > 0xffff:
            version = (2, 0)
            length = _aligned_length(MAGIC_LEN + _length_formats[2].size, needed, alignment)
        logger.debug('Header for shape %s needs %s bytes; growing to %s', shape, needed, length)
    elif length > 0xffff:
        version = (2, 0)
    return version, (text.ljust(length - 1) + '\n').encode('latin1')

def write_header(stream, version, header):
    '''
    write_header(stream, version, header)

    Write magic, version, header length and header text to `stream`.
    '''
    major, minor = version
    stream.write(MAGIC_PREFIX)
    stream.write(bytes((major, minor)))
    stream.write(_length_formats[major].pack(len(header)))
    stream.write(header)
