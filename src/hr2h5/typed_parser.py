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
import os
import copy
import configparser
from enum import Enum
from warnings import warn
from collections import OrderedDict


class OptionStatus(Enum):
    VALID = 0
    DEPRECATED = 1
    RETIRED = 2


def cast(value_type, string):
    if value_type == bool:
        if string in ['true', 'True']:
            return True
        elif string in ['false', 'False']:
            return False
        else:
            raise ValueError("Cannot cast string "+string+" to bool.")
    else:
        return value_type(string)


class TypedParser(object):
    """
    Parser of an ini file holding the options of the converter.
    Options are declared in advance with their types, default values and descriptions.
    """
    def __init__(self, sections_to_be_used):
        self.__config_parser = configparser.ConfigParser()
        self.__config_parser.optionxform = str

        self.__definitions = OrderedDict()
        self.__results = OrderedDict()
        self.__sections_to_be_used = list(sections_to_be_used)

        self.__read = False

    def add_option(self, section, option, dtype, default, string, status=OptionStatus.VALID):
        """
        :param section: section name
        :param option: option name
        :param dtype: data type (int, float, str or bool)
        :param default: default value
        :param string: short description
        :param status: VALID, DEPRECATED, or RETIRED
        """
        if not section in self.__sections_to_be_used:
            return

        if self.__read:
            raise RuntimeError("Do not add option after an input file has been read!")

        if section in self.__definitions and option in self.__definitions[section]:
            raise RuntimeError("Redefinition of option {} in [{}] is not allowed!".format(option, section))

        self.__definitions.setdefault(section, OrderedDict())
        self.__results.setdefault(section, OrderedDict())

        self.__definitions[section][option] = {'dtype' : dtype,
                                               'description' : string,
                                               'default' : dtype(default),
                                               'status' : status}
        self.__results[section][option] = dtype(default)

    def read(self, in_file):
        """
        Read an ini file. This function must not be called more than once.
        Sections that are not used are ignored.
        """
        if self.__read:
            raise RuntimeError("An input file has been already read!")
        self.__read = True

        if not os.path.exists(in_file):
            raise RuntimeError("Not found "+in_file)
        self.__config_parser.read(in_file)

        for sect in self.__config_parser.sections():
            if sect not in self.__sections_to_be_used:
                continue
            for opt in self.__config_parser.options(sect):
                if sect not in self.__definitions or opt not in self.__definitions[sect]:
                    raise RuntimeError("Undefined option " + opt + " is not allowed in section " + sect + "!")
                definition = self.__definitions[sect][opt]
                if definition['status'] == OptionStatus.DEPRECATED:
                    warn("Parameter {0} [{1}] is deprecated.".format(opt, sect))
                elif definition['status'] == OptionStatus.RETIRED:
                    warn("Parameter {0} [{1}] is not used anymore.".format(opt, sect))
                value = self.__config_parser.get(sect, opt).strip('\'').strip('"')
                self.__results[sect][opt] = cast(definition['dtype'], value)

    def get(self, sect, opt):
        return self.__results[sect][opt]

    def get_type(self, sect, opt):
        return self.__definitions[sect][opt]['dtype']

    def get_predefined_sections(self):
        return list(self.__definitions.keys())

    def as_dict(self):
        """
        Convert all options and their values into a (nested) dict object
        """
        return {sect: copy.deepcopy(dict(opts)) for sect, opts in self.__results.items()}
