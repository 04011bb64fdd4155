import pytest

from npycodec.options import Options, default_options

def test_defaults():
    assert default_options.header_length == 246
    assert default_options.header_alignment == 64

def test_chaining():
    opts = Options(default_options)
    opts.header_length = 118
    assert opts.header_length == 118
    assert opts.header_alignment == 64
    assert default_options.header_length == 246

    child = opts.copy()
    assert child.header_length == 118

def test_unknown_option():
    with pytest.raises(AttributeError):
        Options(default_options).no_such_option
