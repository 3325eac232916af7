"""
cdfpoints.py

Points at which a sorted cdf is printed.  Points are either log spaced or
linearly spaced over [xmin, xmax].  Log spacing needs xmin > 0; otherwise
linear spacing is used in its place.
"""
import logging
import numpy as np

LOG    = 'log'
LINEAR = 'lin'
SPACINGS = (LOG, LINEAR)

class PrintPoints(object):
    """
    Up to n ascending points spanning [xmin, xmax].  Points are generated
    lazily; each iteration re-derives the sequence, so the same object can be
    consumed any number of times.  The endpoints are exactly xmin and xmax.
    """
    def __init__(self, xmin, xmax, n, spacing = LOG):
        if spacing not in SPACINGS:
            raise ValueError('spacing must be one of {}'.format(SPACINGS))
        if int(n) < 1:
            raise ValueError('need at least one print point')
        if xmax < xmin:
            raise ValueError('xmax < xmin')
        if spacing == LOG and xmin <= 0:
            logging.info('minimum %s is not positive; using linear spacing', xmin)
            spacing = LINEAR
        self.xmin    = float(xmin)
        self.xmax    = float(xmax)
        self.n       = int(n)
        self.spacing = spacing
        return

    @property
    def islog(self):
        return self.spacing == LOG

    def __len__(self):
        return self.n

    def __iter__(self):
        yield self.xmin
        if self.n == 1:
            return
        if self.islog:
            lo, hi = np.log10(self.xmin), np.log10(self.xmax)
        else:
            lo, hi = self.xmin, self.xmax
        step = (hi - lo) / (self.n - 1)
        for k in range(1, self.n - 1):
            y = lo + k * step
            yield float(10.**y) if self.islog else float(y)
        yield self.xmax

    def __repr__(self):
        return 'PrintPoints({}, {}, {}, {!r})'.format(
            self.xmin, self.xmax, self.n, self.spacing,
            )

def logpoints(xmin, xmax, n):
    """ log spaced points, falling back to linear spacing for xmin <= 0 """
    return PrintPoints(xmin, xmax, n, LOG)

def linpoints(xmin, xmax, n):
    return PrintPoints(xmin, xmax, n, LINEAR)

# EOF
