import pytest
from cdf import EmpiricalCDF, EmpiricalCDFHi

@pytest.fixture
def small_cdf():
    """ samples 1..5, sorted """
    return EmpiricalCDF().append([5, 3, 1, 4, 2]).sort()

@pytest.fixture
def cutoff_cdf():
    """ samples 1..5 with cutoff 3: stores 3, 4, 5 and rejects 2 """
    return EmpiricalCDFHi(3).append([1, 2, 3, 4, 5]).sort()

# EOF
