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


class LineCursor(object):
    """
    Line-by-line reader of a text stream with one line of lookahead.

    A section reader may peek at the next line and leave it in place
    for the next section; nothing is read twice and nothing is lost.
    """
    def __init__(self, f):
        self._f = f
        self._next = None
        self._lineno = 0

    @property
    def lineno(self):
        """1-based number of the line returned last by readline()"""
        return self._lineno

    def peek(self):
        """
        Return the next line without consuming it ('' at the end of the stream)
        """
        if self._next is None:
            self._next = self._f.readline()
        return self._next

    def readline(self):
        """
        Return the next line ('' at the end of the stream)
        """
        line = self.peek()
        self._next = None
        if line:
            self._lineno += 1
        return line

    def skipline(self):
        """
        Skip one line. Return False if the stream is already exhausted.
        """
        return self.readline() != ''

    def __iter__(self):
        while True:
            line = self.readline()
            if not line:
                return
            yield line
