import os
import psutil

def limit_cpu():
    """ Lower the priority of this process; building large cdf's is a background job """
    p = psutil.Process(os.getpid())
    if os.name == 'nt':
        p.nice(psutil.BELOW_NORMAL_PRIORITY_CLASS)
    elif os.name == 'posix':
        p.nice(10)
    else:
        pass
    return

def memory_usage_gb():
    """ Resident memory of this process, in GB """
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / (1024 ** 3)

def cdf_memory_gb(cdf):
    """ Memory held by the sample buffer of cdf, in GB """
    return cdf.nbytes / (1024 ** 3)

# EOF
