"""
cdfprint.py

Writes a compact text summary of an empirical cdf: a few comment lines
followed by (no more than) one row per print point,

    log10(t)  log10(1-P(t))  log10(P(t))  t  P(t)  1-P(t)

with tab separated fields.  Printing sorts the cdf in place.  The destination
may be an open text stream or a path; a path is opened and closed here.
"""
import os
import logging
import numpy as np
from contextlib import nullcontext
from cdf import EmpiricalCDFHi
from cdferrors import EmptyDistributionError
from cdfpoints import PrintPoints, LOG, LINEAR

NPRINT_PTS = 2000
ROW_FORMAT = '%e\t%e\t%e\t%e\t%e\t%e\n'
COLUMNS    = '# log10(t)  log10(1-P(t))  log10(P(t))  t  P(t)  1-P(t)'

def _open(dest):
    if isinstance(dest, (str, os.PathLike)):
        return open(dest, 'w')
    return nullcontext(dest)

def _printheader(io, cdf):
    n = len(cdf)
    print('# cdf of samples', file = io)
    print('# cdf: total     counts = {}'.format(cdf.count()), file = io)
    if isinstance(cdf, EmpiricalCDFHi):
        print('# cdf: lowreject = {}'.format(cdf.lowreject), file = io)
        print('# cdf: lowreject counts = {}'.format(cdf.rejectcounts), file = io)
        print('# cdf: fraction kept = {:f}'.format(n / cdf.count()), file = io)
    print('# cdf: number of points in cdf: {}'.format(n), file = io)
    print(COLUMNS, file = io)
    return

def _printrows(io, cdf, prpts, lastpt):
    """
    Walks the sorted samples and the print points together.  For each point,
    the first sample not yet printed with value >= point gives one row.  The
    last sample (P = 1) is skipped unless lastpt.
    """
    X = cdf.data()
    ulim = X.shape[0] if lastpt else X.shape[0] - 1
    i = 0
    nrows = 0
    with np.errstate(divide = 'ignore'):
        for p in prpts:
            i = max(i, int(np.searchsorted(X, p, side = 'left')))
            if i >= ulim:
                break
            xp = X[i]
            cdf_val = cdf.val_at_index(i + 1)
            io.write(ROW_FORMAT % (
                np.log10(abs(xp)), np.log10(abs(1 - cdf_val)), np.log10(abs(cdf_val)),
                xp, cdf_val, 1 - cdf_val,
                ))
            nrows += 1
            i += 1
    return nrows

def _printcdf(io, cdf, prpts, lastpt):
    _printheader(io, cdf)
    nrows = _printrows(io, cdf, prpts, lastpt)
    logging.debug('printed %d rows of %r', nrows, cdf)
    return nrows

def _check_printable(cdf):
    if len(cdf) == 0:
        raise EmptyDistributionError('Trying to print empty cdf')
    return

def write_summary(dest, cdf, spacing = LOG, nprint_pts = NPRINT_PTS, prpts = None, lastpt = False):
    """
    Sort cdf and print it to dest.

    Args:
        dest       : open text stream, or path of the file to write
        cdf        : AbstractEmpiricalCDF with at least one stored sample
        spacing    : 'log' or 'lin'; log falls back to lin if minimum <= 0
        nprint_pts : maximum number of points printed
        prpts      : explicit ascending print points; overrides spacing and nprint_pts
        lastpt     : also consider the last sample, whose P(t) is 1
    Returns:
        number of rows printed
    """
    _check_printable(cdf)
    cdf.sort()
    if prpts is None:
        prpts = PrintPoints(*cdf.extrema(), nprint_pts, spacing)
    with _open(dest) as io:
        if isinstance(prpts, PrintPoints):
            if prpts.islog:
                print('# cdf: log spacing of coordinate', file = io)
            else:
                print('# cdf: linear spacing of coordinate', file = io)
        return _printcdf(io, cdf, prpts, lastpt)

def logprint(dest, cdf, nprint_pts = NPRINT_PTS, lastpt = False):
    """ print (not more than) nprint_pts log spaced points after sorting the data """
    return write_summary(dest, cdf, LOG, nprint_pts, lastpt = lastpt)

def linprint(dest, cdf, nprint_pts = NPRINT_PTS, lastpt = False):
    """ print (not more than) nprint_pts linearly spaced points after sorting the data """
    return write_summary(dest, cdf, LINEAR, nprint_pts, lastpt = lastpt)

def printcdf(dest, cdf, prpts, lastpt = False):
    """ print cdf at the points prpts, used verbatim """
    return write_summary(dest, cdf, prpts = prpts, lastpt = lastpt)

# EOF
