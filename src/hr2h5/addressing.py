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
Layout of the hopping amplitudes in the flat arrays /reH and /imH.

The element for the R vector ir and the orbitals (alpha, beta) is stored at

    ir + num_wann * nrvecs * alpha + nrvecs * beta,

i.e. the flat array is a C-ordered array of shape (num_wann, num_wann, nrvecs)
whose axes are listed in AXES.
"""

import numpy

from .errors import RangeError

AXES = ('alpha', 'beta', 'rvec')


def hamiltonian_shape(num_wann, nrvecs):
    """
    Shape of the Hamiltonian arrays when they are viewed along AXES
    """
    return (num_wann, num_wann, nrvecs)


def hamiltonian_size(num_wann, nrvecs):
    return num_wann * num_wann * nrvecs


def flat_index(ir, alpha, beta, num_wann, nrvecs):
    """
    Map (R vector, orbital alpha, orbital beta) to a slot in the flat arrays.
    All indices are zero-based.
    """
    if not 0 <= ir < nrvecs:
        raise RangeError("Index of R vector {} is out of range [0, {})".format(ir, nrvecs))
    for name, idx in (('alpha', alpha), ('beta', beta)):
        if not 0 <= idx < num_wann:
            raise RangeError("Orbital index {}={} is out of range [0, {})".format(name, idx, num_wann))
    return ir + num_wann * nrvecs * alpha + nrvecs * beta


def unflatten_index(index, num_wann, nrvecs):
    """
    Inverse of flat_index

    :return: (ir, alpha, beta)
    """
    size = hamiltonian_size(num_wann, nrvecs)
    if not 0 <= index < size:
        raise RangeError("Flat index {} is out of range [0, {})".format(index, size))
    alpha, rest = divmod(index, num_wann * nrvecs)
    beta, ir = divmod(rest, nrvecs)
    return ir, alpha, beta


def dense_hamiltonian(data):
    """
    Return H(R) as a complex array of shape (nrvecs, num_wann, num_wann)

    :param data: HRData
    """
    shape = hamiltonian_shape(data.num_wann, data.nrvecs)
    ham = numpy.asarray(data.reH).reshape(shape) + 1J * numpy.asarray(data.imH).reshape(shape)
    # (alpha, beta, R) => (R, alpha, beta)
    return ham.transpose((2, 0, 1)).copy()


def get_Hk(data, kvec):
    """
    Compute H(k)

    The degeneracy factors have already been divided out when the HR file was read.

    :param data: HRData
    :param kvec: (float, float, float). Fraction coordinates in k space.
    :return: matrix of H(k)
    """
    HamR = dense_hamiltonian(data)
    irvec = numpy.asarray(data.rvecs).reshape((data.nrvecs, 3))
    factor = numpy.exp(2J * numpy.pi * numpy.dot(irvec, numpy.asarray(kvec, dtype=float)))
    return numpy.einsum('r,rij->ij', factor, HamR)
