"""
buildcdf.py

Command line driver: reads samples from a text file (or a saved cdf), prints
the summary of the empirical cdf, and optionally saves it in binary form.

    buildcdf samples.csv cdf.dat --lowreject 1e-3 --save cdf.bin
"""
import sys
import logging
import numpy as np
from pandas import read_csv, to_numeric
from argparser import argparser_buildcdf as argparser, CHUNKSIZE
from cdf import empirical_cdf
from cdferrors import CDFError
from cdfio import read_cdf, save_cdf
from cdfprint import write_summary
from procutil import limit_cpu, memory_usage_gb, cdf_memory_gb

def load_samples(cdf, path, column = 0, chunksize = CHUNKSIZE, sep = ','):
    """
    Stream one column of a text file into cdf, chunk by chunk, so that the
    raw file never has to fit in memory.  Unparseable entries and NaN's are
    dropped.  Returns the number of samples pushed.
    """
    npushed = 0
    reader = read_csv(
        path, header = None, usecols = [column], sep = sep,
        comment = '#', chunksize = chunksize,
        )
    for chunk in reader:
        X = to_numeric(chunk[column], errors = 'coerce').to_numpy(dtype = float)
        X = X[~np.isnan(X)]
        cdf.append(X)
        npushed += X.shape[0]
        logging.debug('pushed %d samples; %r', npushed, cdf)
    logging.info('read %d samples from %s', npushed, path)
    return npushed

def main(args = None):
    p = argparser(args)
    logging.basicConfig(
        level  = logging.DEBUG if p.verbose else logging.INFO,
        format = '%(asctime)s %(levelname)s %(message)s',
        )
    limit_cpu()
    header = p.header
    try:
        if p.binary_in:
            cdffile = read_cdf(p.in_path)
            cdf = cdffile.cdf
            header = header or cdffile.header
        else:
            cdf = empirical_cdf(p.lowreject)
            load_samples(cdf, p.in_path, p.column, p.chunksize, p.sep)
        logging.info(
            '%r: %d counts, buffer %.3f GB, resident %.3f GB',
            cdf, cdf.count(), cdf_memory_gb(cdf), memory_usage_gb(),
            )
        out = sys.stdout if p.out_path == '-' else p.out_path
        nrows = write_summary(out, cdf, p.spacing, p.npts, lastpt = p.lastpt)
        logging.info('wrote %d rows to %s', nrows, p.out_path)
        if p.save is not None:
            save_cdf(p.save, cdf, header)
    except CDFError as e:
        logging.error('%s', e)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())

# EOF
