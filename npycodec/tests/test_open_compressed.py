import bz2
import gzip
from io import BytesIO

from npycodec.open_compressed import open_compressed

def test_plain_stream_is_returned():
    stream = BytesIO(b'\x93NUMPY\x01\x00')
    stream.seek(2)
    assert open_compressed(stream) is stream
    assert stream.tell() == 2

def test_gzip():
    assert open_compressed(BytesIO(gzip.compress(b'payload'))).read() == b'payload'

def test_bz2():
    assert open_compressed(BytesIO(bz2.compress(b'payload'))).read() == b'payload'
