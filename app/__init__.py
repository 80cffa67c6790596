"""Debug probe application package.

Exposes the installed distribution version as ``__version__``.
"""
from importlib.metadata import PackageNotFoundError, version

try:  # Resolves once installed with `pip install -e .`
    __version__ = version("debug-probe")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
