"""Errors raised while building drawer configuration."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """A drawer option violates one of the configuration invariants.

    Attributes:
        field: Name of the offending option (or the first of several)
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
