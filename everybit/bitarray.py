__copyright__ = """
Copyright (C) 2012 6.172 Staff
Copyright (C) 2019 Derek Rhodes
"""

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

from everybit.arith import signed_modulo
from everybit.diagnostic import BitStringError, EverybitIndexError


__doc__ = """
.. currentmodule:: everybit

.. autoclass:: BitArray
"""


class BitArray:
    """An array of bits stored in packed form, eight per byte. Bit *i* lives
    in byte ``i // 8`` under the mask ``1 << (i % 8)``.

    .. attribute:: bit_sz

        The number of bits stored. Need not be divisible by 8.

    .. automethod:: from_int
    .. automethod:: from_str
    .. automethod:: randfill
    .. automethod:: get
    .. automethod:: set
    .. automethod:: rotate
    .. automethod:: show
    """

    def __init__(self, bit_sz):
        if bit_sz < 0:
            raise ValueError("bit_sz must be non-negative, got %d" % bit_sz)

        self._bit_sz = bit_sz
        self.data = np.zeros(bit_sz // 8 + 1, dtype=np.uint8)

    # {{{ constructors

    @classmethod
    def from_int(cls, value, bit_sz=8):
        """Return a bit array of *bit_sz* bits holding the binary digits of
        the non-negative integer *value*, least significant as bit 0.
        """
        if value < 0 or value >= (1 << bit_sz):
            raise ValueError("%d does not fit in %d bits" % (value, bit_sz))

        result = cls(bit_sz)
        value_bytes = np.frombuffer(
                int(value).to_bytes(result.data.shape[0], "little"), dtype=np.uint8)
        result._pack(np.unpackbits(value_bytes, bitorder="little")[:bit_sz])
        return result

    @classmethod
    def from_str(cls, bits):
        """Return a bit array from a string of ``0`` and ``1`` characters,
        written most significant bit first (so the last character is bit 0).
        """
        result = cls(len(bits))
        for i, b in enumerate(reversed(bits)):
            if b == "0":
                result.set(i, False)
            elif b == "1":
                result.set(i, True)
            else:
                raise BitStringError(
                        "bad character %r in bit string %r" % (b, bits))
        return result

    # }}}

    @property
    def bit_sz(self):
        return self._bit_sz

    def __len__(self):
        return self._bit_sz

    def randfill(self, rng=None):
        """Fill all bits with random values drawn from *rng*, a
        :class:`numpy.random.Generator`.
        """
        if rng is None:
            rng = np.random.default_rng()

        self.data[:] = rng.integers(0, 256, size=self.data.shape, dtype=np.uint8)

    # {{{ element access

    def _check_index(self, bit_index):
        if not 0 <= bit_index < self._bit_sz:
            raise EverybitIndexError(
                    "bit index %d out of range for bit array of size %d"
                    % (bit_index, self._bit_sz))

    def get(self, bit_index):
        """Return the bit at the zero-based *bit_index* as a :class:`bool`."""
        self._check_index(bit_index)
        return bool(self.data[bit_index // 8] & (1 << (bit_index % 8)))

    def set(self, bit_index, val):
        """Set the bit at the zero-based *bit_index* to *val*."""
        self._check_index(bit_index)
        mask = np.uint8(1 << (bit_index % 8))
        if val:
            self.data[bit_index // 8] |= mask
        else:
            self.data[bit_index // 8] &= ~mask

    __getitem__ = get
    __setitem__ = set

    def _unpack(self):
        return np.unpackbits(self.data, bitorder="little")[:self._bit_sz]

    def _pack(self, bits):
        packed = np.packbits(bits, bitorder="little")
        self.data[:] = 0
        self.data[:len(packed)] = packed

    # }}}

    # {{{ rotation

    def rotate(self, bit_offset, bit_length, bit_right_amount):
        """Rotate the bits in the half-open range
        ``[bit_offset, bit_offset + bit_length)`` right by
        *bit_right_amount* places. A negative amount rotates left.

        For example, if *ba* holds the byte ``0b10010110``, then
        ``ba.rotate(0, ba.bit_sz, -1)`` leaves it holding ``0b01001011``,
        and ``ba.rotate(2, 5, 2)`` leaves it holding ``0b11010010``.
        """
        if bit_offset < 0 or bit_length < 0 \
                or bit_offset + bit_length > self._bit_sz:
            raise EverybitIndexError(
                    "rotation range [%d, %d) out of range for bit array "
                    "of size %d"
                    % (bit_offset, bit_offset + bit_length, self._bit_sz))

        if bit_length == 0:
            return

        self._rotate_left(bit_offset, bit_length,
                signed_modulo(-bit_right_amount, bit_length))

    def _rotate_left(self, bit_offset, bit_length, bit_left_amount):
        if bit_left_amount == 0:
            return

        bits = self._unpack()
        end = bit_offset + bit_length
        bits[bit_offset:end] = np.roll(bits[bit_offset:end], -bit_left_amount)
        self._pack(bits)

    # }}}

    def show(self):
        """Return the bits as a string, most significant bit first."""
        return "".join("1" if b else "0" for b in self._unpack()[::-1])

    def __str__(self):
        return self.show()

    def __repr__(self):
        return "BitArray.from_str(%r)" % self.show()

    def __eq__(self, other):
        if not isinstance(other, BitArray):
            return NotImplemented

        return (self._bit_sz == other._bit_sz
                and np.array_equal(self._unpack(), other._unpack()))

    __hash__ = None

# vim: foldmethod=marker
