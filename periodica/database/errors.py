"""Errors raised by the periodic table database."""

from __future__ import annotations

from typing import Any


class PeriodicTableError(Exception):
    """Base class for periodic table errors."""


class InvalidArgumentError(PeriodicTableError, ValueError):
    """A required query argument is missing, empty or of the wrong type."""


class OutOfRangeError(PeriodicTableError, ValueError):
    """A numeric query argument lies outside its documented bounds."""

    def __init__(self, argument: str, value: Any, minimum: int, maximum: int, message: str = ""):
        self.argument = argument
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            message or f"{argument} must be between {minimum} and {maximum} (got {value!r})"
        )


class SubstanceNotFoundError(PeriodicTableError, LookupError):
    """No substance matches the query."""


class SchemaValidationError(PeriodicTableError):
    """The dataset could not be read or does not match its schema.

    Raised while loading; the table is unusable afterwards.
    """
