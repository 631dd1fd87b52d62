"""periodica.database.db

JSON-backed periodic table.

Data source:
    periodica/database/periodic_table.json

validated against:
    periodica/database/periodic_table.schema.json

The document is validated and deserialized once per (data, schema) path pair,
on first use, and the resulting records are shared by every PeriodicTable
instance for the rest of the process. The table is read-only.

Lookups are linear scans over at most 119 records:

- by name        (case-insensitive exact match)
- by symbol      (case-insensitive exact match)
- by atomic number
- by period and group (may match several records)

Every lookup comes as an ``exists_by_*`` variant returning ``(found, result)``
and a ``get_by_*`` variant that raises SubstanceNotFoundError.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
from pydantic import ValidationError

from .errors import (
    InvalidArgumentError,
    OutOfRangeError,
    SchemaValidationError,
    SubstanceNotFoundError,
)
from .models import Substance, SubstancePhase

logger = logging.getLogger(__name__)

DATA_PATH = os.path.join(os.path.dirname(__file__), "periodic_table.json")
SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "periodic_table.schema.json")

MIN_ATOMIC_NUMBER = 1
MAX_ATOMIC_NUMBER = 119
MIN_PERIOD = 1
MAX_PERIOD = 8
MIN_GROUP = 1
MAX_GROUP = 18

_load_lock = threading.Lock()
_default_lock = threading.Lock()
_default_table: Optional["PeriodicTable"] = None


def _norm(s: str) -> str:
    return s.casefold()


# ── Argument checks ─────────────────────────────────────────────────────

def _require_text(value: Any, argument: str, strip: bool = False) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"Substance {argument} is not provided")
    if strip:
        value = value.strip()
        if not value:
            raise InvalidArgumentError(f"Substance {argument} is blank")
    return value


def _require_int(value: Any, argument: str) -> int:
    # bool is an int subclass; True is not atomic number 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{argument} must be an integer (got {value!r})")
    return value


def _require_range(value: Any, argument: str, minimum: int, maximum: int, message: str = "") -> int:
    value = _require_int(value, argument)
    if value < minimum or value > maximum:
        raise OutOfRangeError(argument, value, minimum, maximum, message)
    return value


# ── Loading ─────────────────────────────────────────────────────────────

def _read_json(path: str, what: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.exception("Failed to read %s from %s", what, path)
        raise SchemaValidationError(f"Cannot read {what} at {path}: {e}") from e


def _check_unique(substances: Tuple[Substance, ...], data_path: str) -> None:
    seen: Dict[str, set] = {"atomic number": set(), "name": set(), "symbol": set()}
    for s in substances:
        keys = {
            "atomic number": s.atomic_number,
            "name": _norm(s.name),
            "symbol": _norm(s.symbol),
        }
        for label, key in keys.items():
            if key in seen[label]:
                raise SchemaValidationError(f"Duplicate {label} {key!r} in {data_path}")
            seen[label].add(key)


def load_substances(data_path: str = DATA_PATH, schema_path: str = SCHEMA_PATH) -> Tuple[Substance, ...]:
    """Read, validate and deserialize a periodic table document.

    Raises SchemaValidationError when either file cannot be read, the schema
    itself is invalid, the document does not match the schema, or the records
    are not unique by atomic number, name and symbol.
    """
    schema = _read_json(schema_path, "schema")
    document = _read_json(data_path, "dataset")

    try:
        jsonschema.validate(instance=document, schema=schema)
    except jsonschema.SchemaError as e:
        logger.exception("Schema %s is not a valid JSON Schema", schema_path)
        raise SchemaValidationError(f"Invalid schema at {schema_path}: {e.message}") from e
    except jsonschema.ValidationError as e:
        logger.exception("Dataset %s does not match schema %s", data_path, schema_path)
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise SchemaValidationError(
            f"Dataset {data_path} does not match its schema at {location}: {e.message}"
        ) from e

    elements = document.get("elements") if isinstance(document, dict) else None
    if not isinstance(elements, list):
        raise SchemaValidationError(f"Dataset {data_path} has no 'elements' array")

    try:
        substances = tuple(Substance.model_validate(entry) for entry in elements)
    except ValidationError as e:
        logger.exception("Dataset %s could not be deserialized", data_path)
        raise SchemaValidationError(f"Can't get a list of chemical substances from {data_path}: {e}") from e

    _check_unique(substances, data_path)
    logger.info("Loaded %d substances from %s", len(substances), data_path)
    return substances


class PeriodicTable:
    """Read-only view over the periodic table dataset.

    Usage:
        with PeriodicTable() as table:
            table.get_by_symbol("Fe")

    Queries load the dataset on first use, so the context manager is optional.
    """

    # keyed by (data path, schema path)
    _cache: Dict[Tuple[str, str], Tuple[Substance, ...]] = {}

    def __init__(self, data_path: str = DATA_PATH, schema_path: str = SCHEMA_PATH):
        self.data_path = os.path.abspath(data_path)
        self.schema_path = os.path.abspath(schema_path)
        self._substances: Tuple[Substance, ...] = ()

    def load(self) -> "PeriodicTable":
        if self._substances:
            return self
        key = (self.data_path, self.schema_path)
        cached = PeriodicTable._cache.get(key)
        if cached is None:
            with _load_lock:
                cached = PeriodicTable._cache.get(key)
                if cached is None:
                    cached = load_substances(self.data_path, self.schema_path)
                    PeriodicTable._cache[key] = cached
        else:
            logger.debug("Using cached substances for %s (schema %s)", self.data_path, self.schema_path)
        self._substances = cached
        return self

    @classmethod
    def clear_cache(cls) -> None:
        """Forget every loaded dataset. Existing instances keep their records."""
        with _load_lock:
            cls._cache.clear()

    def close(self) -> None:
        # Nothing is held open after loading.
        return

    def __enter__(self) -> "PeriodicTable":
        return self.load()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._records())

    def __iter__(self) -> Iterator[Substance]:
        return iter(self._records())

    def _records(self) -> Tuple[Substance, ...]:
        return self.load()._substances

    # ── Whole table ──────────────────────────────────────────────────

    def get_all(self) -> Tuple[Substance, ...]:
        """All substances in dataset order."""
        return self._records()

    # ── By name ──────────────────────────────────────────────────────

    def exists_by_name(self, name: str) -> Tuple[bool, Optional[Substance]]:
        _require_text(name, "name")
        key = _norm(name)
        for s in self._records():
            if _norm(s.name) == key:
                return True, s
        return False, None

    def get_by_name(self, name: str) -> Substance:
        found, substance = self.exists_by_name(name)
        if not found:
            raise SubstanceNotFoundError(f"There is no substance by this name: {name}")
        return substance

    # ── By symbol ────────────────────────────────────────────────────

    def exists_by_symbol(self, symbol: str) -> Tuple[bool, Optional[Substance]]:
        _require_text(symbol, "symbol")
        key = _norm(symbol)
        for s in self._records():
            if _norm(s.symbol) == key:
                return True, s
        return False, None

    def get_by_symbol(self, symbol: str) -> Substance:
        found, substance = self.exists_by_symbol(symbol)
        if not found:
            raise SubstanceNotFoundError(f"There is no substance by this symbol: {symbol}")
        return substance

    # ── By atomic number ─────────────────────────────────────────────

    def exists_by_atomic_number(self, atomic_number: int) -> Tuple[bool, Optional[Substance]]:
        _require_range(
            atomic_number,
            "atomic_number",
            MIN_ATOMIC_NUMBER,
            MAX_ATOMIC_NUMBER,
            "Atomic number may not be less than 1 (Hydrogen) or greater than 119 (Ununennium).",
        )
        for s in self._records():
            if s.atomic_number == atomic_number:
                return True, s
        return False, None

    def get_by_atomic_number(self, atomic_number: int) -> Substance:
        found, substance = self.exists_by_atomic_number(atomic_number)
        if not found:
            raise SubstanceNotFoundError(f"There is no substance by this atomic number: {atomic_number}")
        return substance

    # ── By period and group ──────────────────────────────────────────

    def exists_by_position(self, period: int, group: int) -> Tuple[bool, List[Substance]]:
        _require_range(
            period,
            "period",
            MIN_PERIOD,
            MAX_PERIOD,
            "Period (row) may not be less than 1 or greater than 8.",
        )
        _require_range(
            group,
            "group",
            MIN_GROUP,
            MAX_GROUP,
            "Group (column) may not be less than 1 or greater than 18.",
        )
        matches = [s for s in self._records() if s.period == period and s.group == group]
        return bool(matches), matches

    def get_by_position(self, period: int, group: int) -> List[Substance]:
        found, substances = self.exists_by_position(period, group)
        if not found:
            raise SubstanceNotFoundError(
                f"There are no substances by this period-group position: {period}, {group}"
            )
        return substances

    # ── Browsing ─────────────────────────────────────────────────────

    def search(self, query: str) -> List[Substance]:
        """Substances whose name or symbol contains ``query`` (case-insensitive)."""
        q = _norm(_require_text(query, "query", strip=True))
        return [s for s in self._records() if q in _norm(s.name) or q in _norm(s.symbol)]

    def list_by_category(self, category: str) -> List[Substance]:
        cat = _norm(_require_text(category, "category", strip=True))
        return [s for s in self._records() if _norm(s.category) == cat]

    def list_by_phase(self, phase: SubstancePhase) -> List[Substance]:
        phase = SubstancePhase.from_raw(phase)
        return [s for s in self._records() if s.phase is phase]

    # ── Mutating methods (the table is read-only) ────────────────────

    def add_substance(self, **kwargs):
        raise NotImplementedError("periodic table is read-only")

    def update_substance(self, **kwargs):
        raise NotImplementedError("periodic table is read-only")

    def remove_substance(self, **kwargs):
        raise NotImplementedError("periodic table is read-only")


def get_table() -> PeriodicTable:
    """Process-wide table over the shipped dataset, loaded on first call."""
    global _default_table
    if _default_table is None:
        with _default_lock:
            if _default_table is None:
                _default_table = PeriodicTable().load()
    return _default_table
