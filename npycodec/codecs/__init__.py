from .base import BaseDecoder, BaseEncoder
from .decoder import NpyDecoder
from .encoder import NpyEncoder

__all__ = ['BaseDecoder', 'BaseEncoder', 'NpyDecoder', 'NpyEncoder']
