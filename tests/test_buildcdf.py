import numpy as np
import pytest

import buildcdf
from cdf import EmpiricalCDF, EmpiricalCDFHi
from cdfio import read_cdf, save_cdf


@pytest.fixture(autouse = True)
def no_renice(monkeypatch):
    monkeypatch.setattr(buildcdf, 'limit_cpu', lambda: None)

@pytest.fixture
def samples_csv(tmp_path):
    path = tmp_path / 'samples.csv'
    path.write_text('# samples\n' + '\n'.join('{},{}'.format(i, 2 * i) for i in range(1, 101)) + '\n')
    return path


def _rows(path):
    return np.loadtxt(path, comments = '#', ndmin = 2)


def test_load_samples_in_chunks(samples_csv):
    cdf = EmpiricalCDF()
    assert buildcdf.load_samples(cdf, samples_csv, column = 1, chunksize = 7) == 100
    cdf.sort()
    assert cdf.extrema() == (2., 200.)

def test_load_samples_drops_bad_entries(tmp_path):
    path = tmp_path / 'samples.txt'
    path.write_text('1.5\nnan\nabc\n2.5\n')
    cdf = EmpiricalCDFHi(2.)
    assert buildcdf.load_samples(cdf, path) == 2
    assert cdf.rejectcounts == 1
    assert list(cdf.data()) == [2.5]

def test_main_prints_and_saves(samples_csv, tmp_path):
    out = tmp_path / 'cdf.dat'
    saved = tmp_path / 'cdf.bin'
    status = buildcdf.main([
        str(samples_csv), str(out), '--lowreject', '51', '--spacing', 'lin',
        '--npts', '10', '--save', str(saved), '--header', 'test run',
        ])
    assert status == 0
    text = out.read_text()
    assert '# cdf: lowreject counts = 50' in text
    assert text.startswith('# cdf: linear spacing of coordinate')
    rows = _rows(out)
    assert 0 < rows.shape[0] <= 10
    assert rows[0,3] == 51. and rows[0,4] == pytest.approx(0.51)
    cdffile = read_cdf(saved)
    assert cdffile.header == 'test run'
    assert cdffile.cdf.count() == 100
    assert len(cdffile.cdf) == 50

def test_main_binary_in(tmp_path, capsys):
    saved = tmp_path / 'cdf.bin'
    save_cdf(saved, EmpiricalCDF().append(np.arange(1., 11.)), 'ten')
    assert buildcdf.main([str(saved), '-', '--binary-in', '--npts', '5']) == 0
    stdout = capsys.readouterr().out
    assert stdout.startswith('# cdf: log spacing of coordinate')
    assert '# cdf: total     counts = 10' in stdout

def test_main_empty_fails(tmp_path):
    path = tmp_path / 'samples.txt'
    path.write_text('1\n2\n')
    out = tmp_path / 'cdf.dat'
    assert buildcdf.main([str(path), str(out), '--lowreject', '5']) == 1
    assert not out.exists()
