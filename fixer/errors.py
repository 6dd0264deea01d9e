"""Exception types for the Fixer screening package.

Screening rejections are never raised; they are returned as
``ContentFilterResult`` values. Exceptions are reserved for broken
configuration.
"""

from __future__ import annotations


class FixerError(Exception):
    """Base class for all Fixer screening errors."""


class RuleConfigError(FixerError):
    """A rule set could not be loaded or contains an invalid entry."""

    def __init__(self, message: str, source: str = "") -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
