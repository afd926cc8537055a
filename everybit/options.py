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


from pytools import ImmutableRecord
import re
import os


ALLOW_TERMINAL_COLORS = True


class _ColoramaStub:
    def __getattribute__(self, name):
        return ""


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _seed_from_environment():
    seed = os.environ.get("EVERYBIT_SEED")
    if not seed:
        return None

    try:
        return int(seed)
    except ValueError:
        raise ValueError("EVERYBIT_SEED must be an integer, got '%s'" % seed)


class Options(ImmutableRecord):
    """
    .. rubric:: Output options

    .. attribute:: allow_terminal_colors

        A :class:`bool`. Whether to allow colors in terminal output.
        Defaults to *True* if :mod:`colorama` is available and the
        ``NO_COLOR`` environment variable is not set.

    .. rubric:: Modulo table options

    .. attribute:: dividend_start
    .. attribute:: dividend_stop

        The half-open range of dividends swept by the modulo table.
        Defaults to ``[-5, 5)``.

    .. attribute:: modulus_start
    .. attribute:: modulus_stop

        The half-open range of moduli swept by the modulo table.
        Defaults to ``[1, 5)``. A non-positive modulus in this range makes
        the table raise :exc:`~everybit.diagnostic.InvalidModulus`.

    .. rubric:: Timed rotation options

    .. attribute:: seed

        Seed for the random generator filling the rotated bit arrays.
        Defaults to the value of the ``EVERYBIT_SEED`` environment
        variable, or *None* for an unseeded generator.
    """

    def __init__(self, **kwargs):
        try:
            import colorama  # noqa
        except ImportError:
            allow_terminal_colors_def = False
        else:
            allow_terminal_colors_def = True

        allow_terminal_colors_def = (
                ALLOW_TERMINAL_COLORS
                and allow_terminal_colors_def
                # https://no-color.org/
                and "NO_COLOR" not in os.environ)

        fields = dict(
                allow_terminal_colors=kwargs.pop("allow_terminal_colors",
                    allow_terminal_colors_def),

                dividend_start=kwargs.pop("dividend_start", -5),
                dividend_stop=kwargs.pop("dividend_stop", 5),
                modulus_start=kwargs.pop("modulus_start", 1),
                modulus_stop=kwargs.pop("modulus_stop", 5),
                )

        if "seed" in kwargs:
            fields["seed"] = kwargs.pop("seed")
        else:
            fields["seed"] = _seed_from_environment()

        if kwargs:
            raise TypeError("unknown options: %s" % ", ".join(sorted(kwargs)))

        for name in ["dividend_start", "dividend_stop",
                "modulus_start", "modulus_stop"]:
            if not _is_int(fields[name]):
                raise ValueError("option '%s' must be an integer, got %r"
                        % (name, fields[name]))

        if fields["seed"] is not None and not _is_int(fields["seed"]):
            raise ValueError("option 'seed' must be an integer or None, "
                    "got %r" % (fields["seed"],))

        if fields["dividend_start"] >= fields["dividend_stop"]:
            raise ValueError("empty dividend range [%d, %d)"
                    % (fields["dividend_start"], fields["dividend_stop"]))
        if fields["modulus_start"] >= fields["modulus_stop"]:
            raise ValueError("empty modulus range [%d, %d)"
                    % (fields["modulus_start"], fields["modulus_stop"]))

        ImmutableRecord.__init__(self, **fields)

    @property
    def dividends(self):
        return range(self.dividend_start, self.dividend_stop)

    @property
    def moduli(self):
        return range(self.modulus_start, self.modulus_stop)

    @property
    def _fore(self):
        if self.allow_terminal_colors:
            import colorama
            return colorama.Fore
        else:
            return _ColoramaStub()

    @property
    def _style(self):
        if self.allow_terminal_colors:
            import colorama
            return colorama.Style
        else:
            return _ColoramaStub()


KEY_VAL_RE = re.compile("^([a-zA-Z0-9_]+)=(.*)$")


def make_options(options_arg):
    if options_arg is None:
        return Options()
    elif isinstance(options_arg, str):
        ioptions_args = {}
        for key_val in options_arg.split(","):
            key_val = key_val.strip()
            if not key_val:
                continue

            kv_match = KEY_VAL_RE.match(key_val)
            if kv_match is not None:
                key = kv_match.group(1)
                val = kv_match.group(2)
                try:
                    val = int(val)
                except ValueError:
                    pass

                ioptions_args[key] = val
            else:
                ioptions_args[key_val] = True

        return Options(**ioptions_args)
    elif isinstance(options_arg, Options):
        return options_arg
    elif isinstance(options_arg, dict):
        return Options(**options_arg)
    else:
        raise TypeError("invalid argument to make_options")
