"""
cdferrors.py

Exceptions raised by the empirical CDF routines.
"""

class CDFError(Exception):
    """ Base class for all empirical CDF errors """
    pass

class EmptyDistributionError(CDFError, ValueError):
    """ Evaluation, inversion, printing or statistics on a CDF with no samples """
    pass

class DomainError(CDFError, ValueError):
    """ Probability passed to the inverse lies outside the valid domain """
    pass

class OutOfRangeIndexError(CDFError, IndexError):
    """ Inverse index falls outside the stored samples """
    pass

class UnsortedCDFError(CDFError, RuntimeError):
    """ Query attempted on a CDF that has not been sorted since the last insert """
    pass

class CDFFormatError(CDFError, ValueError):
    """ Malformed or unsupported binary CDF file """
    pass

# EOF
