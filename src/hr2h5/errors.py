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
Exceptions raised while converting an HR file.

All of them are RuntimeErrors, so callers that only care about
"the input is bad" can keep catching RuntimeError.
"""


class ConversionError(RuntimeError):
    """Base class of all errors raised by hr2h5"""


class UsageError(ConversionError):
    """Wrong command-line usage"""


class IoError(ConversionError):
    """A file could not be opened, created or written"""


class InputError(IoError):
    """The HR file is missing or unreadable"""


class OutputError(IoError):
    """The HDF5 container could not be created or written"""


class DataError(ConversionError):
    """The content of the HR file is inconsistent"""


class ParseError(DataError):
    """
    A line or a token of the HR file could not be parsed.

    lineno is the 1-based line number in the HR file (None if unknown).
    """
    def __init__(self, message, lineno=None):
        if lineno is not None:
            message = "line {}: {}".format(lineno, message)
        super(ParseError, self).__init__(message)
        self.lineno = lineno


class RangeError(DataError):
    """An orbital index or a flat index is out of range"""


class AllocationError(ConversionError):
    """Buffers for the model could not be allocated"""
