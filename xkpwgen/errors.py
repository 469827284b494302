"""Exceptions raised by xkpwgen."""


class XkpwgenError(Exception):
    """Base class for xkpwgen errors."""

class RandomSourceError(XkpwgenError):
    """The operating system's random source could not be initialized."""

class ConfigError(XkpwgenError):
    """A configuration file contains an invalid value."""
