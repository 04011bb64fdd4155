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
options: encoder settings

An Options object answers attribute lookups from its own settings first and
falls back to its parent, so callers only override what they need::

    opts = Options(default_options)
    opts.header_length = 118
'''

__all__ = ['Options', 'default_options']

class Options(object):
    def __init__(self, next):
        self.next = next

    def __getattr__(self, name):
        if name == '__deepcopy__' or name == '__getstate__' or name == 'next':
            raise AttributeError(name)
        if self.next is None:
            raise AttributeError('npycodec.options.Options: unknown option %r' % name)
        return getattr(self.next, name)

    def copy(self):
        '''Return a child Options that starts out identical to this one.'''
        return Options(self)

default_options = Options(None)

# Header text length; with magic, version and length field the header totals 256 bytes.
default_options.header_length = 246

# Headers that outgrow header_length are padded to a multiple of this.
default_options.header_alignment = 64
