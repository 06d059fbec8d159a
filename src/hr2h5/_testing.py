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
from datetime import datetime
from itertools import product

import numpy

from .hr_reader import NUM_DEGEN_PER_LINE


def mk_hr_square(nf, t, seedname, ndgen=None):
    """
    Nearest-neighbor hopping on a square lattice

    nf:
       Number of orbitals
    :return: (irvec, HamR, ndgen)
    """
    dim = 2
    nrpts = 3**dim

    HamR = numpy.zeros([nrpts, nf, nf], dtype=numpy.complex128)
    irvec = numpy.empty((nrpts, 3), dtype=int)

    if ndgen is None:
        ndgen = numpy.ones((nrpts,), dtype=int)
    for ir, (X, Y) in enumerate(product(range(-1,2), range(-1,2))):
        irvec[ir, :] = (X, Y, 0)
        if numpy.sum(irvec[ir, :]**2) == 1:
            # <0 |H| R>
            HamR[ir, :, :] = - t * numpy.identity(nf)
    write_hr(F"""{seedname}_hr.dat""", irvec, HamR, ndgen)
    return irvec, HamR, ndgen


def mk_hr_random(nf, nrpts, seedname, seed=1):
    """
    Random H(R) with random degeneracy factors on nrpts distinct R vectors

    :return: (irvec, HamR, ndgen)
    """
    rng = numpy.random.RandomState(seed)
    irvec = numpy.array([(ir, -ir, 2*ir) for ir in range(nrpts)], dtype=int)
    HamR = rng.randn(nrpts, nf, nf) + 1J * rng.randn(nrpts, nf, nf)
    ndgen = rng.randint(1, 5, size=nrpts)
    write_hr(F"""{seedname}_hr.dat""", irvec, HamR, ndgen)
    return irvec, HamR, ndgen


# Write data to *_hr.dat
def write_hr(filename, irvec, HamR, ndgen):
    nrpts, norb = HamR.shape[0:2]
    with open(filename, 'w') as f:
        print(datetime.now(), file=f)
        print(norb, file=f)
        print(nrpts, file=f)
        for k in range(nrpts):
            print(ndgen[k], file=f, end=' ')
            if k % NUM_DEGEN_PER_LINE == NUM_DEGEN_PER_LINE - 1 or k == nrpts - 1:
                print('', file=f)
        for k in range(nrpts):
            for j, i in product(range(norb), repeat=2):
                print("{} {} {}  {} {}  {!r} {!r}".format(
                    irvec[k, 0], irvec[k, 1], irvec[k, 2],
                    i + 1, j + 1, float(HamR[k, i, j].real), float(HamR[k, i, j].imag)), file=f)
