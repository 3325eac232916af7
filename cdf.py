"""
cdf.py

Empirical CDF's built up from a stream of samples.

Samples are added with push (one at a time) or append (many at a time).  The
CDF must be sorted before it is evaluated, inverted, or printed.
EmpiricalCDFHi discards samples below a cutoff, but keeps a count of them so
that the retained upper tail stays normalized against all samples seen.
"""
import numpy as np
from math import floor
from numpy.random import uniform
from cdferrors import EmptyDistributionError, DomainError, \
    OutOfRangeIndexError, UnsortedCDFError

INITIAL_CAPACITY = 16

class AbstractEmpiricalCDF(object):
    """
    Storage and queries shared by EmpiricalCDF and EmpiricalCDFHi.

    Samples are held in a numpy buffer which grows geometrically; only the
    first len(self) entries are live.  Subclasses implement push, append,
    and the lower end of the domain of the inverse (pmin).
    """
    rejectcounts = 0
    pmin = 0.

    def __init__(self, dtype = np.float64):
        self.dtype  = np.dtype(dtype)
        self._buf   = np.empty(INITIAL_CAPACITY, dtype = self.dtype)
        self._n     = 0
        self._sorted = True
        return

    # storage

    def _reserve(self, m):
        """ make room for m more samples """
        if self._n + m > self._buf.shape[0]:
            capacity = max(2 * self._buf.shape[0], self._n + m)
            buf = np.empty(capacity, dtype = self.dtype)
            buf[:self._n] = self._buf[:self._n]
            self._buf = buf
        return

    def _store(self, x):
        self._reserve(1)
        self._buf[self._n] = x
        self._n += 1
        self._sorted = False
        return

    def _extend(self, values):
        m = values.shape[0]
        if m == 0:
            return
        self._reserve(m)
        self._buf[self._n : self._n + m] = values
        self._n += m
        self._sorted = False
        return

    def _as_samples(self, values):
        """ Cast an iterable (or array) of samples to a flat array of self.dtype """
        if hasattr(values, '__array__'):
            return np.asarray(values).astype(self.dtype, copy = False).ravel()
        return np.fromiter(values, dtype = self.dtype)

    def _as_raw(self, values):
        """ Flat array of samples as given, before any cast to self.dtype """
        if hasattr(values, '__array__'):
            return np.asarray(values).ravel()
        return np.asarray(list(values)).ravel()

    def push(self, x):
        raise NotImplementedError('Overwrite Me!')

    def append(self, values):
        raise NotImplementedError('Overwrite Me!')

    def sort(self):
        """ Sort the samples in place.  Must be called before the CDF is queried. """
        self._buf[:self._n].sort()
        self._sorted = True
        return self

    @property
    def is_sorted(self):
        """ False if samples were stored since the last sort """
        return self._sorted

    def data(self):
        """ Read-only view of the stored samples """
        view = self._buf[:self._n]
        view.flags.writeable = False
        return view

    @property
    def nbytes(self):
        """ Bytes held by the sample buffer, including unused capacity """
        return self._buf.nbytes

    def __len__(self):
        return self._n

    def count(self):
        """ Number of samples added, including those rejected by the cutoff """
        return self._n + self.rejectcounts

    # evaluation

    def _check_query(self):
        if self.count() == 0:
            raise EmptyDistributionError('cdf has no samples')
        if not self._sorted:
            raise UnsortedCDFError('cdf must be sorted before it is queried')
        return

    def val_at_index(self, i):
        """ Value of the cdf given the number of stored samples <= x """
        return (i + self.rejectcounts) / self.count()

    def getcdfindex(self, x):
        """ Number of stored samples less than or equal to x """
        return np.searchsorted(self._buf[:self._n], x, side = 'right')

    def evaluate(self, x):
        """ P(X <= x) """
        self._check_query()
        return self.val_at_index(int(self.getcdfindex(x)))

    def evaluate_many(self, xs):
        """ P(X <= x) for each x in xs, in the order given """
        self._check_query()
        xs = np.asarray(xs)
        return self.val_at_index(self.getcdfindex(xs))

    def __call__(self, x):
        if np.ndim(x) == 0:
            return self.evaluate(x)
        return self.evaluate_many(x)

    __getitem__ = __call__

    # inversion

    def _check_domain(self, p):
        if not (self.pmin <= p < 1):
            raise DomainError(
                'probability {} outside [{}, 1)'.format(p, self.pmin),
                )
        return

    def _inverse(self, p):
        idx = floor(self.count() * p) - self.rejectcounts
        if idx < 0 or idx >= self._n:
            raise OutOfRangeIndexError(
                'index {} outside stored samples [0, {})'.format(idx, self._n),
                )
        return self._buf[idx]

    def inverse(self, p):
        """ Stored sample at rank floor(count * p) + 1 """
        self._check_query()
        self._check_domain(p)
        return self._inverse(p)

    def finv(self):
        """
        Returns the functional inverse of the cdf: a function of p which
        captures this CDF, equivalent to calling self.inverse(p).
        """
        def icdf(p):
            return self.inverse(p)
        return icdf

    invert_as_function = finv

    def rand(self, rng = None):
        """
        Draw a random sample from the distribution.  The probability is drawn
        uniformly over the retained mass, [rejectcounts / count, 1), so that
        the draw always lands on a stored sample.
        """
        self._check_query()
        if self._n == 0:
            raise EmptyDistributionError('all samples were rejected by the cutoff')
        u = uniform() if rng is None else rng.uniform()
        idx = min(int(u * self._n), self._n - 1)
        return self._buf[idx]

    # statistics over the stored samples.  These ignore rejected samples.

    def _stored(self):
        if self._n == 0:
            raise EmptyDistributionError('cdf has no stored samples')
        return self._buf[:self._n]

    def minimum(self):
        return self._stored().min()

    def maximum(self):
        return self._stored().max()

    def extrema(self):
        X = self._stored()
        return X.min(), X.max()

    def mean(self):
        return self._stored().mean()

    def median(self):
        return np.median(self._stored())

    def std(self):
        """ sample standard deviation (ddof = 1) """
        return self._stored().std(ddof = 1)

    standard_deviation = std

    def quantile(self, q):
        return np.quantile(self._stored(), q)

class EmpiricalCDF(AbstractEmpiricalCDF):
    """
    Empirical CDF keeping every sample.

        cdf = EmpiricalCDF()
        cdf.append(normal(size = 10**6)).sort()
        cdf(0.)   # approximately 0.5
    """
    def push(self, x):
        """ add the sample x """
        self._store(x)
        return self

    def append(self, values):
        """ add each sample in values """
        self._extend(self._as_samples(values))
        return self

    def __repr__(self):
        return 'EmpiricalCDF(n={})'.format(self._n)

class EmpiricalCDFHi(AbstractEmpiricalCDF):
    """
    Empirical CDF with a lower cutoff: keeps only the tail.

    Samples x < lowreject, and NaN's, are counted but not stored.  The sorted CDF is still
    normalized against every sample pushed.
    """
    def __init__(self, lowreject, dtype = np.float64):
        super().__init__(dtype)
        self.lowreject = float(lowreject)
        self.rejectcounts = 0
        return

    @property
    def pmin(self):
        return self.lowreject

    def push(self, x):
        """ add the sample x, or count it as rejected if below the cutoff (or NaN) """
        if x >= self.lowreject:
            self._store(x)
        else:
            self.rejectcounts += 1
        return self

    def append(self, values):
        """ push each sample in values, in order """
        X = self._as_raw(values)
        kept = X >= self.lowreject
        self.rejectcounts += X.shape[0] - int(kept.sum())
        self._extend(X[kept].astype(self.dtype, copy = False))
        return self

    def __repr__(self):
        return 'EmpiricalCDFHi(n={},lowreject={})'.format(self._n, self.lowreject)

def empirical_cdf(lowreject = -np.inf, dtype = np.float64):
    """ EmpiricalCDFHi for a finite cutoff, otherwise EmpiricalCDF """
    if np.isfinite(lowreject):
        return EmpiricalCDFHi(lowreject, dtype)
    return EmpiricalCDF(dtype)

if __name__ == '__main__':
    from numpy.random import normal
    cdf = EmpiricalCDF()
    cdf.append(normal(size = 1000000)).sort()
    print(cdf(np.array([-1., 0., 1.])))

# EOF
