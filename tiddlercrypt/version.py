"""Installed distribution version, or the engine version for a source checkout."""

from importlib.metadata import PackageNotFoundError, version

from .main import tiddlercrypt

try:
    __version__ = version("tiddlercrypt")
except PackageNotFoundError:
    __version__ = tiddlercrypt.ENGINE_VERSION


__all__ = ["__version__"]
