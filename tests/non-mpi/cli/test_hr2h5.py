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
import h5py
import numpy
import pytest

import hr2h5.hr2h5 as hr2h5_module
from hr2h5.hr2h5 import hr2h5, run
from hr2h5.program_options import create_parser, parse_parameters, default_parameters
from hr2h5.hr_reader import HRData
from hr2h5.errors import DataError, InputError, OutputError
from hr2h5._testing import mk_hr_random


hr_two_orb = """written on 19Oct2026 at 12:00:00
          2
          1
    1
    0    0    0    1    1    1.000000    0.000000
    0    0    0    1    2    0.000000    0.500000
    0    0    0    2    1    0.000000   -0.500000
    0    0    0    2    2    1.000000    0.000000
"""


@pytest.fixture
def two_orb_hr(tmp_path):
    hr_file = tmp_path / 'two_orb_hr.dat'
    hr_file.write_text(hr_two_orb)
    return str(hr_file)


def test_cli(two_orb_hr, tmp_path, capsys):
    h5_file = str(tmp_path / 'two_orb.h5')
    run([two_orb_hr, h5_file])

    with h5py.File(h5_file, 'r') as f:
        numpy.testing.assert_array_equal(f['reH'][()], [1, 0, 0, 1])
        numpy.testing.assert_array_equal(f['imH'][()], [0, 0.5, -0.5, 0])
        numpy.testing.assert_array_equal(f['rvecs'][()], [0, 0, 0])
        assert f['nw'][()] == 2
        assert f['nr'][()] == 1

    out = capsys.readouterr().out
    assert 'Number of wannier orbitals: 2' in out
    assert 'Time taken to read the Hr file' in out
    assert '--- Done ---' in out


@pytest.mark.parametrize("argv", [[], ['only_one_hr.dat'], ['a_hr.dat', 'b.h5', 'c.h5']])
def test_usage(argv, tmp_path, monkeypatch, capsys):
    def _must_not_be_called(*args, **kwargs):
        raise AssertionError("No file must be accessed")
    monkeypatch.setattr(hr2h5_module, 'read_hr', _must_not_be_called)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as e:
        run(argv)
    assert e.value.code == 1
    assert 'usage' in capsys.readouterr().out
    assert os.listdir(tmp_path) == []


def test_missing_input(tmp_path, capsys):
    h5_file = str(tmp_path / 'out.h5')
    with pytest.raises(SystemExit) as e:
        run([str(tmp_path / 'not_found_hr.dat'), h5_file])
    assert e.value.code == 1
    assert 'Could not open file' in capsys.readouterr().err
    assert not os.path.exists(h5_file)


def test_invalid_input(tmp_path, capsys):
    hr_file = tmp_path / 'zero_hr.dat'
    hr_file.write_text(hr_two_orb.replace('\n    1\n', '\n    0\n', 1))
    h5_file = str(tmp_path / 'out.h5')
    with pytest.raises(SystemExit) as e:
        run([str(hr_file), h5_file])
    assert e.value.code == 1
    assert 'Degeneracy factor must be positive' in capsys.readouterr().err
    assert not os.path.exists(h5_file)


def test_output_failure_is_fatal(two_orb_hr, tmp_path):
    h5_file = str(tmp_path / 'no_such_dir' / 'out.h5')
    with pytest.raises(SystemExit) as e:
        run([two_orb_hr, h5_file])
    assert e.value.code == 1

    with pytest.raises(OutputError):
        hr2h5(two_orb_hr, h5_file)


def test_output_failure_not_strict(two_orb_hr, tmp_path, capsys):
    params = default_parameters()
    params['output']['strict'] = False
    data = hr2h5(two_orb_hr, str(tmp_path / 'no_such_dir' / 'out.h5'), params)
    assert data.num_wann == 2
    captured = capsys.readouterr()
    assert 'Could not open HDF5 file' in captured.err
    assert '--- Done ---' not in captured.out


def test_errors_from_api(tmp_path):
    with pytest.raises(InputError):
        hr2h5(str(tmp_path / 'not_found_hr.dat'), str(tmp_path / 'out.h5'))

    hr_file = tmp_path / 'bad_hr.dat'
    hr_file.write_text(hr_two_orb.replace('\n          1\n', '\n          2\n', 1))
    with pytest.raises(DataError):
        hr2h5(str(hr_file), str(tmp_path / 'out.h5'))


def test_on_parsed_and_quiet(tmp_path, capsys):
    seedname = str(tmp_path / 'random')
    irvec, HamR, ndgen = mk_hr_random(2, 17, seedname)

    params = default_parameters()
    params['control']['verbose'] = 0
    calls = []
    data = hr2h5(seedname + '_hr.dat', seedname + '.h5', params,
                 on_parsed=lambda elapsed, d: calls.append((elapsed, d)))

    assert capsys.readouterr().out == ''
    assert len(calls) == 1
    assert calls[0][0] >= 0.0
    assert calls[0][1] is data
    numpy.testing.assert_array_equal(data.ndegen, ndgen)


def test_options_from_ini(tmp_path, two_orb_hr, capsys):
    ini = tmp_path / 'hr2h5.ini'
    ini.write_text("[control]\nverbose = 0\ntiming = False\n\n[output]\nstrict = False\n")

    parser = create_parser()
    parser.read(str(ini))
    params = parser.as_dict()
    parse_parameters(params)

    hr2h5(two_orb_hr, str(tmp_path / 'no_such_dir' / 'out.h5'), params)
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Could not open HDF5 file' in captured.err


def test_scalar_overflow_not_strict(tmp_path, monkeypatch, capsys):
    size = 2 * 2
    huge = HRData(2, 2**31, None, numpy.zeros(3), numpy.zeros(size), numpy.zeros(size))
    monkeypatch.setattr(hr2h5_module, 'read_hr', lambda *args, **kwargs: huge)

    params = default_parameters()
    params['output']['strict'] = False
    h5_file = str(tmp_path / 'out.h5')
    assert hr2h5('huge_hr.dat', h5_file, params) is huge
    assert '32-bit integer' in capsys.readouterr().err

    params['output']['strict'] = True
    with pytest.raises(OutputError):
        hr2h5('huge_hr.dat', h5_file, params)
