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

import os
import contextlib
from io import BytesIO

import logging
logger = logging.getLogger(__name__)

import numpy as np

from .array import Array, ensure_legit
from .codecs import NpyDecoder, NpyEncoder
from .errors import NpyError, NpyIOError, FormatError
from .open_compressed import open_compressed

__all__ = ['load', 'save', 'encode', 'decode', 'encode_to', 'decode_from']

decoder = NpyDecoder()
encoder = NpyEncoder()

@contextlib.contextmanager
def _opened(path_or_stream, mode):
    '''
    Yield a binary stream for `path_or_stream`. Paths are opened here and
    always closed on exit; streams are passed through and left open.
    '''
    if not isinstance(path_or_stream, (str, bytes, os.PathLike)):
        yield path_or_stream
        return
    try:
        stream = open(path_or_stream, mode)
    except OSError as e:
        raise NpyIOError('failed to open %s' % os.fsdecode(path_or_stream)) from e
    logger.debug("Opened %r (mode=%s)", path_or_stream, mode)
    with stream:
        yield stream

def _as_array(obj):
    if isinstance(obj, np.ndarray):
        return Array.from_numpy(obj)
    if not encoder.can_dump(obj):
        raise ValueError("No valid encoder for obj.", obj)
    return obj

def encode(obj, options=None):
    """Encode array to NPY bytes.

    Parameters
    ----------
      obj : Array (or numpy.ndarray, converted with Array.from_numpy)
      options : npycodec.options.Options, optional

    Returns
    -------
      s : bytes

    See
    ---
      `decode`
    """
    output = BytesIO()
    encode_to(obj, output, options)
    return output.getvalue()

def encode_to(obj, stream, options=None):
    """Encode array to output stream.

    The array is validated before anything is written.

    Parameters
    ----------
      obj : Array (or numpy.ndarray)
      stream : File-like object opened for binary writing.
      options : npycodec.options.Options, optional
    """
    obj = _as_array(obj)
    ensure_legit(obj)
    try:
        encoder.dump(obj, stream, options)
    except NpyError:
        raise
    except OSError as e:
        raise NpyIOError('failed to write array data') from e

def decode(s):
    '''Decode array from NPY bytes.

    Reverses `encode`.

    Parameters
    ----------
      s : bytes representation of array

    Returns
    -------
      array : Array
    '''
    return decode_from(BytesIO(s))

def decode_from(stream):
    '''Decode array from stream.

    gzip and bz2 compressed streams are decompressed transparently when
    `stream` is seekable.

    Parameters
    ----------
    stream : file-like object

    Returns
    -------
    array : Array
    '''
    seekable = getattr(stream, 'seekable', None)
    source = stream
    try:
        if seekable is not None and seekable():
            source = open_compressed(stream)
            if not decoder.can_load(source):
                raise FormatError('not an array file (bad magic string)')
            logger.debug("Resolved decoder: %s", decoder)
        return decoder.load(source)
    except NpyError:
        raise
    except (OSError, EOFError) as e:
        raise NpyIOError('failed to read array data') from e
    finally:
        if source is not stream:
            source.close()

def load(path_or_stream):
    '''
    array = load(path_or_stream)

    Load an NPY file (path or binary stream) into an Array.

    Raises
    ------
    NpyError
        any I/O, format, unsupported-feature or shape failure.
    '''
    with _opened(path_or_stream, 'rb') as stream:
        return decode_from(stream)

def save(array, path_or_stream, options=None):
    '''
    save(array, path_or_stream, options=None)

    Save `array` as NPY (format 1.0 unless the header outgrows it). The array
    is validated before the output is opened, so an invalid array never
    creates or truncates a file.
    '''
    array = _as_array(array)
    ensure_legit(array)
    with _opened(path_or_stream, 'wb') as stream:
        encode_to(array, stream, options)
