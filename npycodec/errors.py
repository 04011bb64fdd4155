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
errors: failures raised while loading or saving NPY arrays

Every failure derives from NpyError and carries a ``kind`` tag naming the
class of check that failed.
'''

__all__ = ['NpyError', 'NpyIOError', 'FormatError', 'UnsupportedError', 'ShapeError']

class NpyError(Exception):
    kind = 'npy'

    def __init__(self, message, value=None):
        if value is not None:
            message = '%s: %r' % (message, value)
        super().__init__(message)
        self.value = value

class NpyIOError(NpyError, OSError):
    '''Stream could not be opened, or ended before the expected byte count.'''
    kind = 'io'

class FormatError(NpyError):
    '''Bad magic, unsupported version or a missing/unparsable header field.'''
    kind = 'format'

class UnsupportedError(NpyError):
    '''Valid NPY feature that this codec does not implement (dtype, Fortran order).'''
    kind = 'unsupported'

class ShapeError(NpyError):
    kind = 'shape'
