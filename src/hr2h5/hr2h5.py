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
import sys
import time
import argparse

from .errors import ConversionError, OutputError, UsageError
from .h5io import write_hr_h5
from .hr_reader import read_hr
from .program_options import default_parameters


def hr2h5(hr_file, h5_file, params=None, on_parsed=None):
    """
    Convert a Wannier90 HR file into an HDF5 file

    Parameters
    ----------
    hr_file : string
        Name of the HR file (seedname_hr.dat)
    h5_file : string
        Name of the HDF5 file to be created
    params : dict
        Options (see hr2h5.program_options). Defaults are used if None.
    on_parsed : callable
        Called as on_parsed(elapsed_seconds, data) once the HR file has been read.

    Returns
    -------
    data : HRData
    """
    if params is None:
        params = default_parameters()
    verbose = params['control']['verbose']

    if verbose > 0:
        print("--- Name of the file containing the TB model data: {}".format(hr_file))
        print("--- Name of the HDF5 file                        : {}".format(h5_file))
        print("")

    t_start = time.time()
    data = read_hr(hr_file, verbose=verbose)
    elapsed = time.time() - t_start

    if params['control']['timing'] and verbose > 0:
        print("--- Time taken to read the Hr file  : {:f} seconds".format(elapsed))
    if on_parsed is not None:
        on_parsed(elapsed, data)

    if verbose > 0:
        print("")
        print("--- Creating HDF5 data file ---")

    try:
        write_hr_h5(h5_file, data)
    except OutputError as e:
        if params['output']['strict']:
            raise
        print("Error: {}".format(e), file=sys.stderr)
        return data

    if verbose > 0:
        print("--- Done ---")
    return data


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def run(argv=None):
    from hr2h5.version import version, print_header

    parser = _ArgumentParser(
        prog='hr2h5',
        description='Convert a Wannier90 HR file (seedname_hr.dat) into an HDF5 file.',
        usage='$ hr2h5 seedname_hr.dat seedname.h5',
        add_help=True,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('path_hr_file',
                        action='store',
                        type=str,
                        help="Wannier90 HR file")
    parser.add_argument('path_h5_file',
                        action='store',
                        type=str,
                        help="HDF5 file to be created")
    parser.add_argument('--version', action='version', version='hr2h5 {}'.format(version))

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage()
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    print_header()

    try:
        hr2h5(args.path_hr_file, args.path_h5_file)
    except ConversionError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    run()
