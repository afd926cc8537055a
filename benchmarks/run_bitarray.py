import numpy as np
import logging

import everybit as eb

logger = logging.getLogger(__name__)


def cached_data(params):
    data = {}
    rng = np.random.default_rng(17)
    for bit_sz in params:
        ba = eb.BitArray(bit_sz)
        ba.randfill(rng)
        data[bit_sz] = ba
    return data


class BitArraySuite:

    params = [40, 10**4, 10**6]

    param_names = ["bit_sz"]

    version = 1

    def setup_cache(self):
        return cached_data(self.params)

    def setup(self, data, bit_sz):
        self.rng = np.random.default_rng(17)

    def time_randfill(self, data, bit_sz):
        data[bit_sz].randfill(self.rng)

    def time_rotate(self, data, bit_sz):
        data[bit_sz].rotate(bit_sz // 4, bit_sz // 2, -(bit_sz // 4))

    # Run memory benchmarks as well
    peakmem_rotate = time_rotate


class SignedModuloSuite:

    params = [None, np.intp]

    param_names = ["dtype"]

    def time_table(self, dtype):
        for n in range(-50, 50):
            for m in range(1, 50):
                eb.signed_modulo(n, m, dtype=dtype)
