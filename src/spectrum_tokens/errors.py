"""
Exceptions raised by the token compiler.

Two tiers:
- TokenError and subclasses are per-token. The loader catches them, drops
  the token and records a diagnostic; they never end a run.
- TokenFileError and ConfigError are fatal for the whole run.
"""


class TokenError(ValueError):
    """A single token could not be transformed."""


class InvalidColorFormat(TokenError):
    """Color value is neither an rgb() literal nor an alias."""


class InvalidSizeFormat(TokenError):
    """Layout value is not a px value, a number or an accepted alias."""


class MalformedTokenEntry(TokenError):
    """Token entry does not have the expected JSON structure."""


class TokenFileError(Exception):
    """A required token file is missing, unreadable or not valid JSON."""


class ConfigError(Exception):
    """Compiler configuration could not be loaded."""
