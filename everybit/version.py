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


# {{{ find run-time git revision

import os
if os.environ.get("AKPYTHON_EXEC_IMPORT_UNAVAILABLE") is not None:
    # We're just being exec'd by setup.py. We can't import anything.
    GIT_REVISION = None

else:
    from pytools import find_module_git_revision
    GIT_REVISION = find_module_git_revision(__file__, n_levels_up=1)

# }}}


VERSION = (2024, 1)
VERSION_STATUS = ""
VERSION_TEXT = ".".join(str(x) for x in VERSION) + VERSION_STATUS

__doc__ = """

.. currentmodule:: everybit
.. data:: VERSION

    A tuple representing the current version number of everybit, for example
    **(2024, 1)**. Direct comparison of these tuples will always yield
    valid version comparisons.

.. data:: GIT_REVISION

    The git revision of the source tree everybit was imported from, or
    *None* if it is not running from a git checkout.
"""
