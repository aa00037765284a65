# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for baseliner.

Only caller contract violations are exceptions.  Data conditions such as a
finding with no counterpart are reported as ``BaselineState`` values.
"""


class BaselinerError(Exception):
    """Base exception for all baseliner errors."""


class ConfigurationError(BaselinerError):
    """Invalid or missing configuration."""


class PropertyTypeError(BaselinerError, TypeError):
    """A property was read through the accessor for the wrong value kind."""


class PropertyNotFoundError(BaselinerError, KeyError):
    """The requested property is not present in the bag."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Property not found: {self.name!r}"


class MalformedInputError(BaselinerError, ValueError):
    """A record collection handed to the matcher violates its contract."""
