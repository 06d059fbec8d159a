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
HDF5 container holding a real-space tight-binding model

    /reH    float64, num_wann*num_wann*nrvecs    Re H(R)/ndegen(R)
    /imH    float64, num_wann*num_wann*nrvecs    Im H(R)/ndegen(R)
    /rvecs  float64, 3*nrvecs                    R vectors (n1, n2, n3)
    /nw     scalar int                           num_wann
    /nr     scalar int                           nrvecs

The layout of /reH and /imH is described in hr2h5.addressing.
"""

import h5py
import numpy

from .addressing import hamiltonian_size
from .errors import DataError, InputError, OutputError
from .hr_reader import HRData

DATASETS = ('reH', 'imH', 'rvecs', 'nw', 'nr')


def _scalar_int32(name, value):
    info = numpy.iinfo(numpy.int32)
    if not info.min <= value <= info.max:
        raise OutputError("/{} = {} does not fit in a 32-bit integer".format(name, value))
    return numpy.array(value, dtype=numpy.int32)


def write_hr_h5(h5_file, data):
    """
    Write a model into a new HDF5 file. An existing file is overwritten.

    Datasets are created without timestamps,
    so that the same model always gives the same file.

    :param h5_file: output file name
    :param data: HRData
    """
    arrays = [
        ('reH', numpy.asarray(data.reH, dtype=numpy.float64)),
        ('imH', numpy.asarray(data.imH, dtype=numpy.float64)),
        ('rvecs', numpy.asarray(data.rvecs, dtype=numpy.float64)),
        ('nw', _scalar_int32('nw', data.num_wann)),
        ('nr', _scalar_int32('nr', data.nrvecs)),
    ]

    try:
        f = h5py.File(h5_file, 'w')
    except OSError as e:
        raise OutputError("Could not open HDF5 file for writing: {} ({})".format(h5_file, e))

    with f:
        for name, val in arrays:
            try:
                f.create_dataset('/' + name, data=val, track_times=False)
            except (OSError, ValueError, TypeError) as e:
                raise OutputError("Could not write /{} to HDF5 file: {} ({})".format(name, h5_file, e))


def load_hr_h5(h5_file):
    """
    Read a model written by write_hr_h5.
    The degeneracy factors are not stored and are returned as None.

    :return: HRData
    """
    try:
        f = h5py.File(h5_file, 'r')
    except OSError as e:
        raise InputError("Could not open HDF5 file: {} ({})".format(h5_file, e))

    with f:
        missing = [name for name in DATASETS if name not in f]
        if missing:
            raise DataError("Missing datasets in {}: {}".format(h5_file, ', '.join(missing)))
        num_wann = int(f['nw'][()])
        nrvecs = int(f['nr'][()])
        reH = f['reH'][()]
        imH = f['imH'][()]
        rvecs = f['rvecs'][()]

    size = hamiltonian_size(num_wann, nrvecs)
    if reH.shape != (size,) or imH.shape != (size,):
        raise DataError("Size of /reH or /imH does not match nw={} and nr={}".format(num_wann, nrvecs))
    if rvecs.shape != (3*nrvecs,):
        raise DataError("Size of /rvecs does not match nr={}".format(nrvecs))

    return HRData(num_wann, nrvecs, None, rvecs, reH, imH)
