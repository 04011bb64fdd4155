from io import BytesIO

import numpy as np
import pytest

from npycodec.array import Array
from npycodec.codecs import NpyDecoder
from npycodec.errors import NpyError, NpyIOError, FormatError, UnsupportedError, ShapeError
from npycodec.tests.utils import header_dict, npy_bytes, f4_payload, f8_payload

def _load(raw):
    return NpyDecoder.load(BytesIO(raw))

def test_load_f8():
    values = [1.5, -2.25, 3.0, 1e300]
    a = _load(npy_bytes(header_dict(shape='(2, 2)'), f8_payload(values)))
    assert a == Array((2, 2), values)
    assert a.data.dtype == np.float64

def test_load_f4_is_widened():
    values = [0.1, 2.5, -7.0]
    a = _load(npy_bytes(header_dict(descr='<f4', shape='(3,)'), f4_payload(values)))
    assert a.shape == (3,)
    assert a.data.dtype == np.float64
    assert a.data.tolist() == [float(np.float32(v)) for v in values]

def test_row_major_layout():
    values = [float(i) for i in range(6)]
    a = _load(npy_bytes(header_dict(shape='(2, 3)'), f8_payload(values)))
    for i in range(2):
        for j in range(3):
            assert a.data[i * 3 + j] == a.to_numpy()[i, j] == values[i * 3 + j]

def test_version_2():
    a = _load(npy_bytes(header_dict(shape='(2,)'), f8_payload([1., 2.]), version=(2, 0)))
    assert a == Array((2,), [1., 2.])

def test_trailing_data_is_ignored():
    a = _load(npy_bytes(header_dict(shape='(1,)'), f8_payload([4., 5.])))
    assert a.data.tolist() == [4.]

@pytest.mark.parametrize('trailing', [b'', b'\x01\x00', b'garbage' * 40])
def test_bad_magic(trailing):
    with pytest.raises(FormatError):
        _load(b'\x93NUMPZ' + trailing)

def test_bad_version():
    with pytest.raises(FormatError):
        _load(npy_bytes(header_dict(), f8_payload([0.] * 4), version=(3, 0)))

def test_fortran_order_rejected():
    with pytest.raises(UnsupportedError):
        _load(npy_bytes(header_dict(fortran_order='True'), f8_payload([0.] * 4)))

@pytest.mark.parametrize('descr', ['>f8', '<i8', '<f2', '|b1'])
def test_unsupported_dtype(descr):
    with pytest.raises(UnsupportedError):
        _load(npy_bytes(header_dict(descr=descr), f8_payload([0.] * 4)))

def test_empty_shape():
    with pytest.raises(ShapeError):
        _load(npy_bytes(header_dict(shape='()'), f8_payload([0.])))

def test_zero_dimension():
    with pytest.raises(ShapeError):
        _load(npy_bytes(header_dict(shape='(3, 0, 2)')))

def test_missing_field():
    with pytest.raises(FormatError):
        _load(npy_bytes("{'descr': '<f8', 'shape': (2,), }", f8_payload([0.] * 2)))

def test_short_payload():
    with pytest.raises(NpyIOError) as e:
        _load(npy_bytes(header_dict(shape='(2, 3)'), f8_payload([0.] * 5)))
    assert isinstance(e.value, OSError)
    assert e.value.kind == 'io'

def test_short_header():
    raw = npy_bytes(header_dict(), f8_payload([0.] * 4))
    with pytest.raises(NpyIOError):
        _load(raw[:40])

def test_too_large():
    with pytest.raises(ShapeError):
        _load(npy_bytes(header_dict(shape='(1099511627776, 1099511627776)')))

def test_errors_share_a_base():
    for raw in [b'', npy_bytes(header_dict(fortran_order='True'))]:
        with pytest.raises(NpyError):
            _load(raw)

def test_load_numpy_written():
    for dtype in (np.float32, np.float64):
        arr = (np.arange(60, dtype=dtype) / 7).reshape((3, 4, 5))
        out = BytesIO()
        np.save(out, arr)
        a = _load(out.getvalue())
        assert a.shape == (3, 4, 5)
        assert np.all(a.to_numpy() == arr.astype(np.float64))

def test_can_load():
    stream = BytesIO(npy_bytes(header_dict(), f8_payload([0.] * 4)))
    stream.seek(0)
    assert NpyDecoder.can_load(stream)
    assert stream.tell() == 0
    assert not NpyDecoder.can_load(BytesIO(b'PK\x03\x04'))
    assert not NpyDecoder.can_load(BytesIO(b''))
