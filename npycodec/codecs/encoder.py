import logging
logger = logging.getLogger(__name__)

import numpy as np

from .base import BaseEncoder
from ..array import Array, ensure_legit
from ..options import default_options
from .. import header

class NpyEncoder(BaseEncoder):
    @classmethod
    def can_dump(cls, obj):
        return isinstance(obj, Array)

    @classmethod
    def dump(cls, obj, stream, options=None):
        """
        NpyEncoder.dump(array, stream, options=None)

        Validate `array` and write it as a float64 C-order NPY stream.
        Nothing is written when validation fails.
        """
        if options is None:
            options = default_options
        ensure_legit(obj)
        version, text = header.build_header(obj.shape, options)
        logger.debug('Encoding shape %s with a %s byte header', obj.shape, len(text))
        header.write_header(stream, version, text)
        stream.write(np.ascontiguousarray(obj.data, dtype='<f8').tobytes())
