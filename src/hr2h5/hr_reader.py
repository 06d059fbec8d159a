#
# hr2h5 -- Converter of Wannier90 HR files to HDF5
# Copyright (C) 2017 The University of Tokyo
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
"""
Reader of Wannier90 HR files (seedname_hr.dat)

The file consists of
    a comment line,
    the number of Wannier functions,
    the number of R vectors,
    the degeneracy factors of the R vectors (15 per line),
    and one line "n1 n2 n3 alpha beta Re(H) Im(H)" per element of H(R).
"""

import re
from collections import namedtuple

import numpy

from .addressing import flat_index, hamiltonian_size
from .errors import AllocationError, DataError, InputError, ParseError, RangeError
from .line_cursor import LineCursor

HRData = namedtuple('HRData', ['num_wann', 'nrvecs', 'ndegen', 'rvecs', 'reH', 'imH'])

NUM_DEGEN_PER_LINE = 15

_leading_int = re.compile(r'\s*([+-]?\d+)')
_int_range = numpy.iinfo(int)


def read_int_from_nextline(cursor, name):
    """
    Read a line and return the integer at its head. Anything after the integer is ignored.
    """
    line = cursor.readline()
    if not line:
        raise ParseError("Unexpected end of file while reading {}".format(name), cursor.lineno + 1)
    m = _leading_int.match(line)
    if m is None:
        raise ParseError("Invalid input for {}: {}".format(name, line.strip()), cursor.lineno)
    return int(m.group(1))


def read_header(cursor):
    """
    Skip the comment line and read the number of Wannier functions and R vectors

    :return: (num_wann, nrvecs)
    """
    if not cursor.skipline():
        raise ParseError("The HR file is empty", 1)

    num_wann = read_int_from_nextline(cursor, "the number of Wannier functions")
    nrvecs = read_int_from_nextline(cursor, "the number of R vectors")

    if num_wann <= 0:
        raise DataError("The number of Wannier functions must be positive: {}".format(num_wann))
    if nrvecs <= 0:
        raise DataError("The number of R vectors must be positive: {}".format(nrvecs))
    return num_wann, nrvecs


def read_degeneracies(cursor, nrvecs):
    """
    Read the degeneracy factors of nrvecs R vectors.

    Whole lines are consumed until nrvecs integers have been read,
    which is ceil(nrvecs/15) lines for files written by Wannier90.
    The first element of H(R) stays in the cursor.
    """
    ndegen = []
    while len(ndegen) < nrvecs:
        line = cursor.peek()
        lineno = cursor.lineno + 1
        if not line:
            raise ParseError("Unexpected end of file while reading degeneracy factors: "
                             "{} of {} found".format(len(ndegen), nrvecs), lineno)
        tokens = line.split()
        try:
            vals = [int(tok) for tok in tokens]
        except ValueError as e:
            if len(tokens) == 7:
                # An element of H(R) is left in the cursor
                raise DataError("line {}: Degeneracy factors end after {} of {} values".format(
                    lineno, len(ndegen), nrvecs))
            raise ParseError("Invalid degeneracy factor ({})".format(e), lineno)
        for val in vals:
            if not _int_range.min <= val <= _int_range.max:
                raise ParseError("Degeneracy factor is out of range: {}".format(val), lineno)
        cursor.readline()

        ndegen.extend(vals)
        if len(ndegen) > nrvecs:
            raise DataError("line {}: Too many degeneracy factors: {} for {} R vectors".format(
                lineno, len(ndegen), nrvecs))

    ndegen = numpy.array(ndegen, dtype=int)
    bad = numpy.flatnonzero(ndegen <= 0)
    if bad.size > 0:
        raise DataError("Degeneracy factor must be positive: ndegen[{}] = {}".format(bad[0], ndegen[bad[0]]))
    return ndegen


def _allocate(num_wann, nrvecs):
    try:
        rvecs = numpy.zeros(3 * nrvecs, dtype=numpy.float64)
        reH = numpy.zeros(hamiltonian_size(num_wann, nrvecs), dtype=numpy.float64)
        imH = numpy.zeros(hamiltonian_size(num_wann, nrvecs), dtype=numpy.float64)
    except (MemoryError, ValueError) as e:
        raise AllocationError("Cannot allocate arrays for the real space model "
                              "(num_wann={}, nrvecs={}): {}".format(num_wann, nrvecs, e))
    return rvecs, reH, imH


def _orbital_index(value, num_wann, name, lineno):
    if not value.is_integer():
        raise ParseError("{} must be an integer: {}".format(name, value), lineno)
    idx = int(value) - 1
    if not 0 <= idx < num_wann:
        raise RangeError("line {}: {}={} is out of range [1, {}]".format(lineno, name, int(value), num_wann))
    return idx


def build_hamiltonian(cursor, num_wann, nrvecs, ndegen):
    """
    Read the elements of H(R) and scatter them into flat arrays.

    Lines for the same R vector must be contiguous.
    Each element is divided by the degeneracy factor of its R vector.

    :return: (rvecs, reH, imH)
    """
    rvecs, reH, imH = _allocate(num_wann, nrvecs)

    seen = set()
    last_r = None
    ir = -1
    for line in cursor:
        vals = line.split()
        if len(vals) == 0:
            continue
        lineno = cursor.lineno
        if len(vals) != 7:
            raise ParseError("Expected 7 columns (n1 n2 n3 alpha beta Re Im) but found {}".format(len(vals)), lineno)
        try:
            vals = [float(x) for x in vals]
        except ValueError as e:
            raise ParseError(str(e), lineno)

        r = tuple(vals[0:3])
        if r != last_r:
            if r in seen:
                raise DataError("line {}: R vector {} appears again after other R vectors. "
                                "Lines for one R vector must be contiguous.".format(lineno, r))
            ir += 1
            if ir >= nrvecs:
                raise DataError("line {}: More R vectors than declared in the header ({})".format(lineno, nrvecs))
            rvecs[3*ir:3*ir+3] = r
            seen.add(r)
            last_r = r

        alpha = _orbital_index(vals[3], num_wann, 'alpha', lineno)
        beta = _orbital_index(vals[4], num_wann, 'beta', lineno)

        idx = flat_index(ir, alpha, beta, num_wann, nrvecs)
        reH[idx] = vals[5] / ndegen[ir]
        imH[idx] = vals[6] / ndegen[ir]

    if ir + 1 != nrvecs:
        raise DataError("Found {} R vectors but the header declares {}".format(ir + 1, nrvecs))

    return rvecs, reH, imH


def read_hr_stream(f, verbose=0):
    """
    Read an HR file from an open text stream

    :return: HRData
    """
    cursor = LineCursor(f)

    num_wann, nrvecs = read_header(cursor)
    if verbose > 0:
        print("--- Number of wannier orbitals: {}".format(num_wann))
        print("--- Number of R vectors       : {}".format(nrvecs))

    ndegen = read_degeneracies(cursor, nrvecs)

    if verbose > 0:
        nbytes = 2 * hamiltonian_size(num_wann, nrvecs) * numpy.dtype(numpy.float64).itemsize
        print("--- Size of the model data in memory: {} bytes".format(nbytes))

    rvecs, reH, imH = build_hamiltonian(cursor, num_wann, nrvecs, ndegen)

    return HRData(num_wann, nrvecs, ndegen, rvecs, reH, imH)


def read_hr(file_name, verbose=0):
    """
    Read seedname_hr.dat

    :param file_name: path to the HR file
    :param verbose: print what is read if > 0
    :return: HRData
    """
    try:
        # The comment line may hold non-ASCII characters; the rest is ASCII.
        with open(file_name, 'r', encoding='latin-1') as f:
            if verbose > 0:
                print("--- successfully opened the hr data file")
            return read_hr_stream(f, verbose)
    except OSError as e:
        raise InputError("Could not open file: {} ({})".format(file_name, e.strerror))
