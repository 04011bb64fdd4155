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
array: in-memory representation of a dense float64 array

An Array is a shape plus the flattened, row-major element data. The codec
never mutates an Array it did not create itself.
'''

import operator

import numpy as np

from .errors import ShapeError, UnsupportedError

__all__ = ['Array', 'ensure_legit', 'shape_product']

def shape_product(shape):
    '''
    n = shape_product(shape)

    Number of elements described by `shape` (1 for an empty shape).
    '''
    n = 1
    for dim in shape:
        n *= dim
    return n

def _dimension(dim):
    # integers only; 2.7 or '3' are rejected rather than truncated
    try:
        return operator.index(dim)
    except TypeError:
        raise ShapeError('non-integral dimension', dim) from None

def ensure_legit(array):
    '''
    ensure_legit(array)

    Check that `array` can be saved: a non-empty shape, no zero dimension and
    exactly one data element per shape position.

    Raises
    ------
    ShapeError
    '''
    if not len(array.shape):
        raise ShapeError('cannot save a 0-dimensional array')
    for dim in array.shape:
        if dim == 0:
            raise ShapeError('cannot save an array with a zero dimension', tuple(array.shape))
        if dim < 0:
            raise ShapeError('cannot save an array with a negative dimension', tuple(array.shape))
    expected = shape_product(array.shape)
    if len(array.data) != expected:
        raise ShapeError('size mismatch between shape %s (%s elements) and data (%s elements)'
                         % (tuple(array.shape), expected, len(array.data)))

class Array(object):
    '''
    Array(shape, data)

    Parameters
    ----------
    shape : sequence of int
        Dimensions, outer to inner.
    data : sequence of float
        Flattened elements in row-major order. Stored as a 1-D float64
        numpy array.
    '''
    __slots__ = ('shape', 'data')

    def __init__(self, shape, data):
        self.shape = tuple(_dimension(dim) for dim in shape)
        self.data = np.asarray(data, dtype=np.float64).reshape(-1)

    @property
    def ndim(self):
        return len(self.shape)

    @property
    def size(self):
        return shape_product(self.shape)

    def ensure_legit(self):
        ensure_legit(self)

    @classmethod
    def from_numpy(cls, ndarray):
        '''Build an Array from a real-valued numpy array, flattening in C order.'''
        ndarray = np.asarray(ndarray)
        if ndarray.dtype.kind not in 'biuf':
            raise UnsupportedError('cannot convert numpy array of dtype %s' % ndarray.dtype)
        return cls(ndarray.shape, np.ravel(ndarray, order='C').astype(np.float64))

    def to_numpy(self):
        '''Return a float64 ndarray with this array's shape (data is copied).'''
        return self.data.copy().reshape(self.shape)

    def __eq__(self, other):
        if not isinstance(other, Array):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.data, other.data, equal_nan=True)

    __hash__ = None

    def __repr__(self):
        return 'Array(shape=%r, data=%r)' % (self.shape, self.data.tolist())
