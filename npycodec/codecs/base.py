"""Abstract bases for npycodec stream decoders and encoders."""

from abc import ABCMeta, abstractmethod

class BaseDecoder(metaclass=ABCMeta):
    @abstractmethod
    def can_load(self, stream):
        """True if decoder can decode the contents of the given stream."""
        raise NotImplementedError("can_load")

    @abstractmethod
    def load(self, stream):
        """Decode object from stream."""
        raise NotImplementedError("load")

class BaseEncoder(metaclass=ABCMeta):
    @abstractmethod
    def can_dump(self, obj):
        """True if encoder can encode obj to stream."""
        raise NotImplementedError("can_dump")

    @abstractmethod
    def dump(self, obj, stream):
        """Write obj to given stream."""
        raise NotImplementedError("dump")
