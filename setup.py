"""
Setup script for hr2h5
"""
from setuptools import setup, find_packages
import os, re, io

REPO_URL = "https://github.com/issp-center-dev/hr2h5.git"

def readfile(*parts):
    """Return contents of file with path relative to script directory"""
    herepath = os.path.abspath(os.path.dirname(__file__))
    fullpath = os.path.join(herepath, *parts)
    with io.open(fullpath, 'r') as f:
        return f.read()

def extract_version(*parts):
    """Extract value of __version__ variable by parsing python script"""
    initfile = readfile(*parts)
    version_re = re.compile(r"(?m)^__version__\s*=\s*['\"]([^'\"]*)['\"]")
    match = version_re.search(initfile)
    return match.group(1)

VERSION = extract_version('src', 'hr2h5', '__init__.py')

setup(
    name='hr2h5',
    version=VERSION,

    description='Converter of Wannier90 HR files to HDF5',
    keywords=' '.join([
        'condensed-matter',
        'wannier90',
        'tight-binding',
        ]),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Physics',
        'Programming Language :: Python :: 3',
        ],

    url=REPO_URL,
    author='hr2h5 developers',

    python_requires='>=3.8, <4',
    install_requires=[
        'numpy',
        # h5py 2.10.0 has a bug.
        'h5py!=2.10.0',
        ],

    extras_require={
        'dev': ['pytest'],
        },

    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    entry_points={
        "console_scripts": [
            "hr2h5 = hr2h5.hr2h5:run",
        ]
    },

    zip_safe=False,
    )
