"""apiscope: deterministic text views of a type catalog's API surface."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("apiscope")
except PackageNotFoundError:
    __version__ = "dev"
