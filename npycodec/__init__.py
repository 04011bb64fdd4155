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
npycodec: read and write float32/float64 C-order NPY arrays

    from npycodec import Array, load, save

    save(Array((2, 2), [1., 2., 3., 4.]), 'a.npy')
    a = load('a.npy')
'''

from .array import Array, ensure_legit
from .errors import NpyError, NpyIOError, FormatError, UnsupportedError, ShapeError
from .encode import load, save, encode, decode, encode_to, decode_from
from .options import Options, default_options

__version__ = '0.1.0'

__all__ = [
    'Array', 'ensure_legit',
    'load', 'save', 'encode', 'decode', 'encode_to', 'decode_from',
    'NpyError', 'NpyIOError', 'FormatError', 'UnsupportedError', 'ShapeError',
    'Options', 'default_options',
    ]
