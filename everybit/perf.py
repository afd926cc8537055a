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

import logging
from time import perf_counter

import numpy as np
from pytools import ProcessLogger

from everybit.bitarray import BitArray


logger = logging.getLogger(__name__)


__doc__ = """
.. currentmodule:: everybit

.. autofunction:: tier_bit_size

.. autofunction:: timed_rotation
"""


# {{{ timed rotation

TIER_GROWTH = 1.5
ROTATIONS_PER_TIER = 4

# 4 * 1.5**40 is about 4.4e7 bits; beyond that memory, not time, is the limit
DEFAULT_MAX_TIER = 40


def tier_bit_size(tier):
    """Return the number of bits in the bit array rotated at *tier*."""
    return int(4 * TIER_GROWTH**tier)


def _run_tier(tier, rng):
    bit_sz = tier_bit_size(tier)
    ba = BitArray(bit_sz)
    ba.randfill(rng)

    offset = bit_sz // 4
    length = bit_sz // 2

    start_time = perf_counter()
    for _i in range(ROTATIONS_PER_TIER):
        ba.rotate(offset, length, -(bit_sz // 4))
    return perf_counter() - start_time


def timed_rotation(time_limit, rng=None, max_tier=DEFAULT_MAX_TIER):
    """Rotate bit arrays of geometrically growing size until one tier takes
    longer than *time_limit* seconds.

    :arg rng: a :class:`numpy.random.Generator` used to fill the bit arrays.
    :arg max_tier: stop after this tier even if it completed in time.
    :returns: the last tier that completed within *time_limit*, or -1 if
        even tier 0 did not.
    """
    if time_limit <= 0:
        raise ValueError("time_limit must be positive, got %r" % time_limit)

    if rng is None:
        rng = np.random.default_rng()

    plog = ProcessLogger(logger, "timed rotation (limit %gs)" % time_limit)

    completed = -1
    for tier in range(max_tier + 1):
        elapsed = _run_tier(tier, rng)
        logger.debug("tier %d (%d bits): %g s", tier, tier_bit_size(tier), elapsed)

        if elapsed > time_limit:
            break

        completed = tier

    plog.done()
    logger.info("timed rotation completed tier %d", completed)
    return completed

# }}}

# vim: foldmethod=marker
