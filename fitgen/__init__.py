"""fitgen - Field type code generator for FIT style binary protocols."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fitgen")
except PackageNotFoundError:
    __version__ = "(local)"
