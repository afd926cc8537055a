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


# {{{ errors

class EverybitError(RuntimeError):
    pass


class InvalidModulus(EverybitError, ValueError):
    """
    Raised when a modulus is not strictly positive. A non-positive modulus
    is always a defect in the caller, so this is never caught inside
    :mod:`everybit`.

    .. attribute:: modulus

        The offending modulus.
    """

    def __init__(self, modulus):
        super().__init__(
                "modulus must be strictly positive, got %r" % (modulus,))
        self.modulus = modulus


class ModuloOverflowError(EverybitError, OverflowError):
    """
    Raised when an operand or intermediate result of a fixed-width modulo
    does not fit the requested integer type.
    """
    pass


class EverybitIndexError(EverybitError, IndexError):
    pass


class BitStringError(EverybitError, ValueError):
    pass

# }}}


# vim: foldmethod=marker
