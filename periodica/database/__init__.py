"""Periodic table database (JSON-backed, read-only)."""

from .db import PeriodicTable, get_table
from .errors import (
    InvalidArgumentError,
    OutOfRangeError,
    PeriodicTableError,
    SchemaValidationError,
    SubstanceNotFoundError,
)
from .models import Substance, SubstanceImage, SubstancePhase

__all__ = [
    "PeriodicTable",
    "get_table",
    "Substance",
    "SubstanceImage",
    "SubstancePhase",
    "PeriodicTableError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "SubstanceNotFoundError",
    "SchemaValidationError",
]
