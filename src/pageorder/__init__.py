"""pageorder: check and repair page orderings against precedence rules."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pageorder")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
