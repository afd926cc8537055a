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

import logging
import sys

import numpy as np

from everybit.arith import signed_modulo
from everybit.options import make_options
from everybit.perf import timed_rotation


logger = logging.getLogger(__name__)


TIME_LIMITS = {
        "small": 0.01,
        "medium": 0.1,
        "large": 1.0,
        }


def modulo_table(options):
    """Yield ``(dividend, modulus, remainder)`` for every pair in the sweep
    ranges of *options*, moduli varying fastest.
    """
    for n in options.dividends:
        for m in options.moduli:
            yield n, m, signed_modulo(n, m)


def format_modulo_table(options):
    return ["modulo(%d, %d) == %d" % row for row in modulo_table(options)]


def run_timed_rotation(options, time_limit, outf):
    rng = np.random.default_rng(options.seed)

    Fore = options._fore  # noqa
    Style = options._style  # noqa

    tier = timed_rotation(time_limit, rng)

    print(Fore.GREEN + "---- RESULTS ----" + Style.RESET_ALL, file=outf)
    print("Succesfully completed tier: %d" % tier, file=outf)
    print(Fore.GREEN + "---- END RESULTS ----" + Style.RESET_ALL, file=outf)
    return tier


def main(argv=None, outf=None):
    from argparse import ArgumentParser

    if outf is None:
        outf = sys.stdout

    parser = ArgumentParser(prog="everybit",
            description="Signed modulo and bit array rotation")

    parser.add_argument("command", nargs="?", choices=["table"],
            help="'table' prints the signed modulo of every dividend/modulus "
            "pair in the configured ranges")

    size = parser.add_mutually_exclusive_group()
    size.add_argument("-s", dest="size", action="store_const", const="small",
            help="runs the small (0.01s) rotation performance test")
    size.add_argument("-m", dest="size", action="store_const", const="medium",
            help="runs the medium (0.1s) rotation performance test")
    size.add_argument("-l", dest="size", action="store_const", const="large",
            help="runs the large (1s) rotation performance test")

    parser.add_argument("--options", metavar="KEY=VAL,...",
            help="comma-separated everybit options, e.g. "
            "'dividend_start=-10,modulus_stop=8,seed=17'")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    options = make_options(args.options)

    if args.command is None and args.size is None:
        # Nothing to do: tell the user how to actually run the program.
        parser.print_usage(sys.stderr)
        return 0

    if args.command == "table":
        for line in format_modulo_table(options):
            print(line, file=outf)

    if args.size is not None:
        run_timed_rotation(options, TIME_LIMITS[args.size], outf)

    return 0


if __name__ == "__main__":
    sys.exit(main())
