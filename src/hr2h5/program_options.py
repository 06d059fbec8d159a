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


from .typed_parser import TypedParser


def create_parser(target_sections=None):
    """
    Create a parser for all options of hr2h5
    """
    if target_sections is None:
        parser = TypedParser(['control', 'output'])
    else:
        parser = TypedParser(target_sections)

    # [control]
    parser.add_option("control", "verbose", int, 1, "Verbosity of the standard output (0: quiet)")
    parser.add_option("control", "timing", bool, True, "Print the wall time taken to read the HR file")

    # [output]
    parser.add_option("output", "strict", bool, True,
                      "Whether a failure in writing the HDF5 file is fatal. If False, it is only reported.")

    return parser


def default_parameters():
    """
    Return the default options as a dict
    """
    params = create_parser().as_dict()
    parse_parameters(params)
    return params


def parse_parameters(params):
    """
    Check options

    :param params: dict returned by TypedParser.as_dict()
    """
    if params['control']['verbose'] < 0:
        raise RuntimeError("verbose must be non-negative!")

