__copyright__ = "Copyright (C) 2019 Derek Rhodes"

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import sys

import numpy as np
import pytest

from everybit import (
    EverybitError,
    InvalidModulus,
    ModuloOverflowError,
    signed_modulo,
    truncating_remainder,
)

import logging
logger = logging.getLogger(__name__)


# {{{ concrete values

# generated from the output of the C modulo function
C_MODULO_TABLE = {
        -5: [0, 1, 1, 3],
        -4: [0, 0, 2, 0],
        -3: [0, 1, 0, 1],
        -2: [0, 0, 1, 2],
        -1: [0, 1, 2, 3],
        0: [0, 0, 0, 0],
        1: [0, 1, 1, 1],
        2: [0, 0, 2, 2],
        3: [0, 1, 0, 3],
        4: [0, 0, 1, 0],
        }


def test_modulo_matches_c_table():
    for n, expected in C_MODULO_TABLE.items():
        for m, r in zip(range(1, 5), expected):
            assert signed_modulo(n, m) == r, (n, m)


@pytest.mark.parametrize(("n", "m", "expected"), [
    (-5, 3, 1),
    (5, 3, 2),
    (-1, 1, 0),
    (0, 4, 0),
    (-7, 4, 1),
    (4, 4, 0),
    (-10**30, 7, (-10**30) % 7),
    ])
def test_modulo_scenarios(n, m, expected):
    assert signed_modulo(n, m) == expected


def test_modulo_returns_python_int():
    result = signed_modulo(np.int64(-5), np.int32(3))
    assert result == 1
    assert type(result) is int

# }}}


# {{{ properties

def test_range_and_congruence():
    for n in range(-50, 50):
        for m in range(1, 20):
            r = signed_modulo(n, m)
            assert 0 <= r < m
            assert (n - r) % m == 0
            assert (n - r) // m * m == n - r


def test_reduced_input_is_unchanged():
    for m in range(1, 30):
        for n in range(m):
            assert signed_modulo(n, m) == n


def test_periodicity():
    for n in range(-13, 13):
        for m in range(1, 9):
            for k in range(-4, 5):
                assert signed_modulo(n, m) == signed_modulo(n + k*m, m)

# }}}


# {{{ precondition

@pytest.mark.parametrize("m", [0, -1, -3, -2**63])
def test_non_positive_modulus_rejected(m):
    with pytest.raises(InvalidModulus) as exc_info:
        signed_modulo(5, m)

    assert exc_info.value.modulus == m
    assert isinstance(exc_info.value, EverybitError)
    # also a ValueError for callers that do not know about everybit
    assert isinstance(exc_info.value, ValueError)


def test_negative_modulus_not_coerced():
    with pytest.raises(InvalidModulus):
        signed_modulo(-5, -3)


@pytest.mark.parametrize(("n", "m"), [
    (1.5, 3),
    (1, 3.0),
    (True, 3),
    (1, True),
    ("1", 3),
    ])
def test_non_integer_arguments_rejected(n, m):
    with pytest.raises(TypeError):
        signed_modulo(n, m)

# }}}


# {{{ truncating remainder

def test_truncating_remainder_follows_c():
    assert truncating_remainder(-7, 3) == -1
    assert truncating_remainder(7, 3) == 1
    assert truncating_remainder(7, -3) == 1
    assert truncating_remainder(-7, -3) == -1
    assert truncating_remainder(23, -11) == 1

    with pytest.raises(ZeroDivisionError):
        truncating_remainder(1, 0)


def test_two_step_correction_agrees():
    for n in range(-40, 40):
        for m in range(1, 12):
            two_step = truncating_remainder(
                    truncating_remainder(n, m) + m, m)
            assert two_step == signed_modulo(n, m)

# }}}


# {{{ fixed width

@pytest.mark.parametrize("dtype", [np.int8, np.int32, np.intp])
def test_fixed_width_agrees(dtype):
    for n in range(-20, 20):
        for m in range(1, 9):
            assert signed_modulo(n, m, dtype=dtype) == signed_modulo(n, m)


def test_fixed_width_extremes():
    iinfo = np.iinfo(np.intp)
    assert signed_modulo(int(iinfo.min), 3, dtype=np.intp) \
            == int(iinfo.min) % 3
    assert signed_modulo(-1, int(iinfo.max), dtype=np.intp) \
            == int(iinfo.max) - 1

    assert signed_modulo(-1, 127, dtype=np.int8) == 126


def test_fixed_width_intermediate_overflow():
    # (1 rem 127) + 127 does not fit in int8
    with pytest.raises(ModuloOverflowError):
        signed_modulo(1, 127, dtype=np.int8)


@pytest.mark.parametrize(("n", "m", "dtype"), [
    (200, 3, np.int8),
    (3, 200, np.int8),
    (-5, 3, np.uint8),
    (2**63, 3, np.int64),
    ])
def test_fixed_width_unrepresentable_operand(n, m, dtype):
    with pytest.raises(ModuloOverflowError):
        signed_modulo(n, m, dtype=dtype)


def test_fixed_width_unsigned():
    assert signed_modulo(5, 3, dtype=np.uint8) == 2
    assert signed_modulo(255, 7, dtype=np.uint16) == 255 % 7


def test_fixed_width_checks_modulus_first():
    with pytest.raises(InvalidModulus):
        signed_modulo(1000, 0, dtype=np.int8)

# }}}


if __name__ == "__main__":
    if len(sys.argv) > 1:
        exec(sys.argv[1])
    else:
        from pytest import main
        main([__file__])

# vim: foldmethod=marker
