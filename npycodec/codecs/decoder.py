import sys
import logging
logger = logging.getLogger(__name__)

import numpy as np

from .base import BaseDecoder
from ..array import Array, shape_product
from ..errors import ShapeError
from .. import header

# on-disk element width -> little-endian numpy dtype
_payload_dtypes = {
    4: np.dtype('<f4'),
    8: np.dtype('<f8'),
}

class NpyDecoder(BaseDecoder):
    @classmethod
    def can_load(cls, stream):
        position = stream.tell()
        try:
            return stream.read(len(header.MAGIC_PREFIX)) == header.MAGIC_PREFIX
        finally:
            stream.seek(position)

    @classmethod
    def load(cls, stream):
        """
        array = NpyDecoder.load(stream)

        Decode a little-endian float32/float64 C-order NPY stream into an
        Array. Float32 payloads are widened to float64.
        """
        major, _ = header.read_magic(stream)
        text = header.read_header_text(stream, major)
        width = header.parse_descr(text)
        header.parse_fortran_order(text)
        shape = header.parse_shape(text)

        n = shape_product(shape)
        if n * width > sys.maxsize:
            raise ShapeError('array too large for this platform', shape)
        logger.debug('Decoding %s elements of %s bytes, shape %s', n, width, shape)

        payload = header.read_exact(stream, n * width, 'array data')
        data = np.frombuffer(payload, dtype=_payload_dtypes[width]).astype(np.float64)
        return Array(shape, data)
