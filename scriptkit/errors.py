"""Exceptions raised by scriptkit (missing paths use the builtin OSError types)."""


class ScriptkitError(Exception):
    """Base class for scriptkit errors."""


class ConfigError(ScriptkitError):
    """Config file could not be read or has invalid values."""


class GitNotFoundError(ScriptkitError):
    """The git executable is not on PATH."""
