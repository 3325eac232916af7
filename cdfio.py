"""
cdfio.py

Binary storage of empirical cdf's.  The file holds the raw fields of the cdf
(cutoff, reject count, and sorted samples) together with a free-form header
string.  Layout, with all integers little-endian int64:

    magic           4 bytes, b'ECDF'
    version         int64
    header          int64 length, then utf-8 bytes
    variant         int64, 0 = EmpiricalCDF, 1 = EmpiricalCDFHi
    dtype           int64 length, then ascii numpy dtype string ('<f8')
    lowreject       float64
    rejectcounts    int64
    n               int64
    samples         n values of dtype

Destinations and sources are paths or binary file objects (e.g. BytesIO).
"""
import os
import logging
import numpy as np
from collections import namedtuple
from contextlib import nullcontext
from cdf import EmpiricalCDF, EmpiricalCDFHi
from cdferrors import CDFFormatError

MAGIC = b'ECDF'
FORMAT_VERSION = 1
INT   = np.dtype('<i8')
FLOAT = np.dtype('<f8')

UNBOUNDED, CUTOFF = 0, 1

CDFFile = namedtuple('CDFFile', ['cdf', 'header'])
CDFInfo = namedtuple(
    'CDFInfo', ['header', 'variant', 'dtype', 'lowreject', 'rejectcounts', 'n'],
    )

def _open(path, mode):
    if isinstance(path, (str, os.PathLike)):
        return open(path, mode)
    return nullcontext(path)

def _write_int(file, i):
    file.write(np.array(i, dtype = INT).tobytes())
    return

def _write_string(file, s, encoding):
    raw = s.encode(encoding)
    _write_int(file, len(raw))
    file.write(raw)
    return

def _read_exact(file, nbytes):
    raw = file.read(nbytes)
    if len(raw) != nbytes:
        raise CDFFormatError('unexpected end of file')
    return raw

def _read_int(file):
    return int(np.frombuffer(_read_exact(file, INT.itemsize), dtype = INT)[0])

def _read_string(file, encoding):
    nbytes = _read_int(file)
    if nbytes < 0:
        raise CDFFormatError('negative string length')
    return _read_exact(file, nbytes).decode(encoding)

def save_cdf(dest, cdf, header = ''):
    """
    Sort cdf and write it to dest.

    Args:
        dest   : path, or binary file object opened for writing
        cdf    : EmpiricalCDF or EmpiricalCDFHi
        header : string stored ahead of the data
    """
    cdf.sort()
    X = cdf.data()
    dtype = X.dtype.newbyteorder('<')
    if isinstance(cdf, EmpiricalCDFHi):
        variant, lowreject = CUTOFF, cdf.lowreject
    else:
        variant, lowreject = UNBOUNDED, -np.inf
    with _open(dest, 'wb') as file:
        file.write(MAGIC)
        _write_int(file, FORMAT_VERSION)
        _write_string(file, header, 'utf-8')
        _write_int(file, variant)
        _write_string(file, dtype.str, 'ascii')
        file.write(np.array(lowreject, dtype = FLOAT).tobytes())
        _write_int(file, cdf.rejectcounts)
        _write_int(file, X.shape[0])
        file.write(X.astype(dtype, copy = False).tobytes())
    logging.info('saved %r with header %r', cdf, header)
    return

def _read_info(file):
    magic = file.read(len(MAGIC))
    if magic != MAGIC:
        raise CDFFormatError('not an empirical cdf file (magic {!r})'.format(magic))
    version = _read_int(file)
    if version != FORMAT_VERSION:
        raise CDFFormatError('unsupported format version {}'.format(version))
    header  = _read_string(file, 'utf-8')
    variant = _read_int(file)
    if variant not in (UNBOUNDED, CUTOFF):
        raise CDFFormatError('unknown cdf variant {}'.format(variant))
    try:
        dtype = np.dtype(_read_string(file, 'ascii'))
    except TypeError:
        raise CDFFormatError('bad sample dtype')
    if dtype.hasobject:
        raise CDFFormatError('object dtype cannot be stored')
    lowreject = float(np.frombuffer(_read_exact(file, FLOAT.itemsize), dtype = FLOAT)[0])
    rejectcounts = _read_int(file)
    n = _read_int(file)
    if rejectcounts < 0 or n < 0:
        raise CDFFormatError('negative counts')
    return CDFInfo(header, variant, dtype, lowreject, rejectcounts, n)

def read_cdf_info(src):
    """ Read the header and counts of a saved cdf, without its samples """
    with _open(src, 'rb') as file:
        return _read_info(file)

def read_cdf(src):
    """
    Read a cdf written by save_cdf.  Returns CDFFile(cdf, header); the cdf is
    sorted and ready to be queried.
    """
    with _open(src, 'rb') as file:
        info = _read_info(file)
        X = np.frombuffer(_read_exact(file, info.n * info.dtype.itemsize), dtype = info.dtype)
    if info.variant == CUTOFF:
        cdf = EmpiricalCDFHi(info.lowreject, info.dtype.newbyteorder('='))
        cdf.rejectcounts = info.rejectcounts
    else:
        cdf = EmpiricalCDF(info.dtype.newbyteorder('='))
    cdf.append(X)
    cdf.sort()
    logging.info('read %r with header %r', cdf, info.header)
    return CDFFile(cdf, info.header)

# EOF
