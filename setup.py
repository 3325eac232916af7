from setuptools import setup

setup(
    name = 'empiricalcdfs',
    version = '0.1.0',
    description = 'Empirical cdfs of large sample streams, with lower cutoff and compact printing',
    python_requires = '>=3.8',
    py_modules = [
        'cdf',
        'cdferrors',
        'cdfpoints',
        'cdfprint',
        'cdfio',
        'procutil',
        'argparser',
        'buildcdf',
        ],
    install_requires = [
        'numpy',
        'pandas',
        'psutil',
        ],
    extras_require = {
        'test' : ['pytest', 'hypothesis'],
        },
    entry_points = {
        'console_scripts' : ['buildcdf = buildcdf:main'],
        },
    )

# EOF
