"""Read-only access to the periodic table."""

from .database import (
    InvalidArgumentError,
    OutOfRangeError,
    PeriodicTable,
    PeriodicTableError,
    SchemaValidationError,
    Substance,
    SubstanceImage,
    SubstanceNotFoundError,
    SubstancePhase,
    get_table,
)
from .lookup import (
    are_substances_registered_by_position,
    get_substance_by_atomic_number,
    get_substance_by_name,
    get_substance_by_symbol,
    get_substances,
    get_substances_by_position,
    is_substance_registered_by_atomic_number,
    is_substance_registered_by_name,
    is_substance_registered_by_symbol,
)

__version__ = "0.1.0"

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
    "get_substances",
    "get_substance_by_name",
    "is_substance_registered_by_name",
    "get_substance_by_symbol",
    "is_substance_registered_by_symbol",
    "get_substance_by_atomic_number",
    "is_substance_registered_by_atomic_number",
    "get_substances_by_position",
    "are_substances_registered_by_position",
]
