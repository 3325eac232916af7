import io
import numpy as np
import pytest

from cdf import EmpiricalCDF, EmpiricalCDFHi
from cdferrors import EmptyDistributionError
from cdfprint import logprint, linprint, printcdf, write_summary, COLUMNS


def _print(func, cdf, *args, **kwargs):
    out = io.StringIO()
    nrows = func(out, cdf, *args, **kwargs)
    return nrows, out.getvalue()

def _rows(text):
    lines = [line for line in text.splitlines() if not line.startswith('#')]
    return np.array([[float(f) for f in line.split('\t')] for line in lines])

def _header(text):
    return [line for line in text.splitlines() if line.startswith('#')]


def test_linear_rows(small_cdf):
    nrows, text = _print(linprint, small_cdf, 5)
    assert nrows == 4
    rows = _rows(text)
    assert rows.shape == (4, 6)
    assert np.allclose(rows[:,3], [1., 2., 3., 4.])
    assert np.allclose(rows[:,4], [0.2, 0.4, 0.6, 0.8])
    assert np.allclose(rows[:,5], [0.8, 0.6, 0.4, 0.2])
    assert np.allclose(rows[:,0], np.log10(rows[:,3]))
    assert np.allclose(rows[:,1], np.log10(rows[:,5]))
    assert np.allclose(rows[:,2], np.log10(rows[:,4]))

def test_header(small_cdf):
    _, text = _print(linprint, small_cdf, 5)
    assert _header(text) == [
        '# cdf: linear spacing of coordinate',
        '# cdf of samples',
        '# cdf: total     counts = 5',
        '# cdf: number of points in cdf: 5',
        COLUMNS,
        ]

def test_cutoff_header_and_rows(cutoff_cdf):
    nrows, text = _print(linprint, cutoff_cdf, 3)
    header = _header(text)
    assert '# cdf: total     counts = 5' in header
    assert '# cdf: lowreject = 3.0' in header
    assert '# cdf: lowreject counts = 2' in header
    assert '# cdf: fraction kept = 0.600000' in header
    assert '# cdf: number of points in cdf: 3' in header
    rows = _rows(text)
    assert nrows == 2
    assert np.allclose(rows[:,3], [3., 4.])
    assert np.allclose(rows[:,4], [0.6, 0.8])

def test_lastpt(small_cdf):
    nrows, text = _print(linprint, small_cdf, 5, lastpt = True)
    assert nrows == 5
    last = _rows(text)[-1]
    assert last[3] == 5. and last[4] == 1. and last[5] == 0.
    assert np.isneginf(last[1])

def test_log_spacing_header():
    cdf = EmpiricalCDF().append(np.arange(1., 101.))
    _, text = _print(logprint, cdf, 10)
    assert text.splitlines()[0] == '# cdf: log spacing of coordinate'

def test_log_falls_back_to_linear():
    cdf = EmpiricalCDF().append([0., 1., 2., 3., 4.])
    nrows, text = _print(logprint, cdf, 5)
    assert text.splitlines()[0] == '# cdf: linear spacing of coordinate'
    assert np.allclose(_rows(text)[:,3], [0., 1., 2., 3.])
    assert np.isneginf(_rows(text)[0,0])

def test_log_rows_are_sparse_in_linear_region():
    cdf = EmpiricalCDF().append(np.arange(1., 1001.))
    nrows, text = _print(logprint, cdf, 4)
    # points 1, 10, 100, 1000; the last is the final sample and is skipped
    assert nrows == 3
    assert np.allclose(_rows(text)[:,3], [1., 10., 100.], rtol = 0.2)

def test_explicit_points(small_cdf):
    nrows, text = _print(printcdf, small_cdf, [2.5, 4.])
    assert nrows == 2
    assert text.splitlines()[0] == '# cdf of samples'
    assert np.allclose(_rows(text)[:,3], [3., 4.])

def test_points_exhausted(small_cdf):
    nrows, _ = _print(linprint, small_cdf, 2)
    assert nrows == 1

def test_sorts_in_place():
    cdf = EmpiricalCDF().append([3., 1., 2.])
    nrows, text = _print(linprint, cdf, 3)
    assert cdf.is_sorted
    assert list(cdf.data()) == [1., 2., 3.]
    assert np.allclose(_rows(text)[:,3], [1., 2.])

def test_rows_bounded_by_points():
    X = np.random.default_rng(1).exponential(size = 10000)
    cdf = EmpiricalCDF().append(X)
    nrows, text = _print(write_summary, cdf, 'log', 200)
    rows = _rows(text)
    assert 0 < nrows <= 200
    assert np.all(np.diff(rows[:,3]) > 0)
    assert np.all(np.diff(rows[:,4]) > 0)

def test_path_destination(small_cdf, tmp_path):
    path = tmp_path / 'cdf.dat'
    nrows = linprint(str(path), small_cdf, 5)
    assert nrows == 4
    assert path.read_text().splitlines()[0] == '# cdf: linear spacing of coordinate'
    assert logprint(path, small_cdf) == nrows

def test_empty():
    for cdf in (EmpiricalCDF(), EmpiricalCDFHi(1.), EmpiricalCDFHi(1.).push(0.)):
        with pytest.raises(EmptyDistributionError):
            logprint(io.StringIO(), cdf)
        with pytest.raises(EmptyDistributionError):
            linprint(io.StringIO(), cdf)

def test_empty_does_not_create_file(tmp_path):
    path = tmp_path / 'cdf.dat'
    with pytest.raises(EmptyDistributionError):
        logprint(path, EmpiricalCDF())
    assert not path.exists()
