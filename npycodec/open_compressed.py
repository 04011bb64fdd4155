import bz2
import gzip
import logging
logger = logging.getLogger(__name__)

def _open_gzip_compressed(f):
    return gzip.GzipFile(fileobj=f, mode='rb')

def _open_bz2_compressed(f):
    # BZ2File reads concatenated multi-stream files as one stream
    return bz2.BZ2File(f, mode='rb')

_compressed_magic_bytes = {}
_compressed_magic_bytes[b"\x1f\x8b\x08"] = _open_gzip_compressed
_compressed_magic_bytes[b"\x42\x5a\x68"] = _open_bz2_compressed

def open_compressed(file_object):
    """Wrap a possibly compressed stream in a decompressing file object.
    Checks for prefix bytes and returns a decompression stream if needed,
    otherwise the stream itself, rewound to where it was.
    file_object - binary file object supporting tell and seek
    """
    current_stream_position = file_object.tell()
    file_prefix = file_object.read(max(len(b) for b in _compressed_magic_bytes))
    file_object.seek(current_stream_position)

    for magic_bytes in _compressed_magic_bytes:
        if file_prefix.startswith(magic_bytes):
            logger.debug("Detected compressed stream: %s", _compressed_magic_bytes[magic_bytes].__name__)
            return _compressed_magic_bytes[magic_bytes](file_object)
    else:
        return file_object
