"""scriptkit — script documentation extractors and git fleet helpers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scriptkit")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
