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

import numpy as np

from everybit.diagnostic import InvalidModulus, ModuloOverflowError


__doc__ = """
.. currentmodule:: everybit

.. autofunction:: signed_modulo

.. autofunction:: truncating_remainder
"""


def _as_python_int(value, what):
    # bool is an int subclass, but never a meaningful operand here
    if isinstance(value, (bool, np.bool_)) \
            or not isinstance(value, (int, np.integer)):
        raise TypeError("%s must be an integer, got '%s'"
                % (what, type(value).__name__))

    return int(value)


def truncating_remainder(dividend, modulus):
    """Return the remainder of integer division with the quotient rounded
    toward zero, as computed by ``%`` in C. The result has the sign of
    *dividend* and satisfies ``abs(result) < abs(modulus)``.

    :raises ZeroDivisionError: if *modulus* is zero.
    """
    dividend = _as_python_int(dividend, "dividend")
    modulus = _as_python_int(modulus, "modulus")

    result = abs(dividend) % abs(modulus)
    if dividend < 0:
        result = -result

    return result


def _check_fits(value, iinfo, what):
    if not iinfo.min <= value <= iinfo.max:
        raise ModuloOverflowError(
                "%s %d does not fit in %s (range [%d, %d])"
                % (what, value, iinfo.dtype, iinfo.min, iinfo.max))


def signed_modulo(dividend, modulus, dtype=None):
    """Return the non-negative remainder of *dividend* modulo *modulus*.

    The result *r* is the unique integer with ``0 <= r < modulus`` such that
    ``dividend - r`` is an exact multiple of *modulus*. For instance,
    ``signed_modulo(-5, 3) == 1`` since ``-5 == -2*3 + 1``.

    :arg dividend: any integer, including negative ones.
    :arg modulus: a strictly positive integer.
    :arg dtype: if given, a :mod:`numpy` integer type (e.g.
        :class:`numpy.intp`) whose width is emulated. Both operands must be
        representable in it, and the result is computed as
        ``((dividend rem modulus) + modulus) rem modulus`` with a truncating
        remainder, the intermediate sum being checked against the type's
        range.

    :raises InvalidModulus: if *modulus* is not strictly positive.
    :raises ModuloOverflowError: if *dtype* is given and an operand or the
        intermediate sum does not fit in it.
    :raises TypeError: if an argument is not an integer.
    """
    dividend = _as_python_int(dividend, "dividend")
    modulus = _as_python_int(modulus, "modulus")

    if modulus <= 0:
        raise InvalidModulus(modulus)

    if dtype is None:
        # Python's % rounds the quotient toward negative infinity, which for
        # a positive modulus is exactly the non-negative remainder.
        result = dividend % modulus

    else:
        iinfo = np.iinfo(dtype)
        _check_fits(dividend, iinfo, "dividend")
        _check_fits(modulus, iinfo, "modulus")

        shifted = truncating_remainder(dividend, modulus) + modulus
        _check_fits(shifted, iinfo, "intermediate sum")

        result = truncating_remainder(shifted, modulus)

    assert 0 <= result < modulus
    return result

# vim: foldmethod=marker
