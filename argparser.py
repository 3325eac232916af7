import argparse
from cdfpoints import SPACINGS, LOG
from cdfprint import NPRINT_PTS

CHUNKSIZE = 100000

def argparser_buildcdf(args = None):
    p = argparse.ArgumentParser(
        prog = 'buildcdf',
        description = 'Build an empirical cdf from a file of samples and print a summary.',
        )
    p.add_argument('in_path', help = 'text/csv file of samples, or a saved cdf with --binary-in')
    p.add_argument('out_path', help = "summary destination; '-' for standard output")
    p.add_argument('--binary-in', action = 'store_true', dest = 'binary_in')
    p.add_argument('--column', type = int, default = 0)
    p.add_argument('--sep', default = ',', help = r"field separator; '\s+' for whitespace")
    p.add_argument('--chunksize', type = int, default = CHUNKSIZE)
    p.add_argument('--lowreject', type = float, default = float('-inf'))
    p.add_argument('--spacing', choices = SPACINGS, default = LOG)
    p.add_argument('--npts', type = int, default = NPRINT_PTS)
    p.add_argument('--lastpt', action = 'store_true')
    p.add_argument('--save', default = None, help = 'also write the cdf in binary form')
    p.add_argument('--header', default = '')
    p.add_argument('--verbose', action = 'store_true')
    return p.parse_args(args)

# EOF
