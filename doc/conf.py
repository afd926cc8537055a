from importlib import metadata
from urllib.request import urlopen


_conf_url = "https://tiker.net/sphinxconfig-v0.py"
with urlopen(_conf_url) as _inf:
    exec(compile(_inf.read(), _conf_url, "exec"), globals())

copyright = "2019, Derek Rhodes"
release = metadata.version("everybit")
version = ".".join(release.split(".")[:2])

exclude_patterns = ["_build"]

intersphinx_mapping = {
    "numpy": ("https://numpy.org/doc/stable/", None),
    "python": ("https://docs.python.org/3", None),
    "pytools": ("https://documen.tician.de/pytools", None),
}

nitpicky = True

sphinxconfig_missing_reference_aliases = {
    "numpy.random.Generator": "class:numpy.random.Generator",
    "numpy.intp": "obj:numpy.intp",
}


def setup(app):
    app.connect("missing-reference", process_autodoc_missing_reference)  # noqa: F821
