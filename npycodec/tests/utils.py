import struct

from npycodec.header import MAGIC_PREFIX

def header_dict(descr="<f8", fortran_order="False", shape="(2, 2)"):
    return "{'descr': '%s', 'fortran_order': %s, 'shape': %s, }" % (descr, fortran_order, shape)

def npy_bytes(text, payload=b'', version=(1, 0), magic=MAGIC_PREFIX):
    '''Raw NPY stream with `text` as header (padded to a 64 byte boundary).'''
    major, minor = version
    length_format = '<H' if major == 1 else '<I'
    preamble = len(magic) + 2 + struct.calcsize(length_format)
    text = text + ' ' * (-(preamble + len(text) + 1) % 64) + '\n'
    raw = text.encode('latin1')
    return magic + bytes([major, minor]) + struct.pack(length_format, len(raw)) + raw + payload

def f8_payload(values):
    return struct.pack('<%dd' % len(values), *values)

def f4_payload(values):
    return struct.pack('<%df' % len(values), *values)
