"""
Element browsing API routes.

Handles requests for:
    - Whole-table listing and substring search
    - Lookup by name, symbol or atomic number
    - Lookup by period/group position

Records are returned as plain dicts keyed like the shipped JSON document.
"""

from typing import Any, Dict, List

from ...database.db import PeriodicTable, get_table
from ...database.models import Substance


def _get_instance(data_path: str = None) -> PeriodicTable:
    """Return a table: the shared one for the default dataset, a fresh one for custom paths."""
    if data_path:
        return PeriodicTable(data_path).load()
    return get_table()


def _dump(substance: Substance) -> Dict[str, Any]:
    return substance.model_dump(mode="json", by_alias=True)


def list_elements(data_path: str = None) -> List[Dict[str, Any]]:
    """List every element in atomic-number order."""
    return [_dump(s) for s in _get_instance(data_path).get_all()]


def search_elements(query: str, data_path: str = None) -> List[Dict[str, Any]]:
    """Search elements by name or symbol fragment."""
    return [_dump(s) for s in _get_instance(data_path).search(query)]


def get_element_by_name(name: str, data_path: str = None) -> Dict[str, Any]:
    return _dump(_get_instance(data_path).get_by_name(name))


def get_element_by_symbol(symbol: str, data_path: str = None) -> Dict[str, Any]:
    return _dump(_get_instance(data_path).get_by_symbol(symbol))


def get_element_by_atomic_number(atomic_number: int, data_path: str = None) -> Dict[str, Any]:
    return _dump(_get_instance(data_path).get_by_atomic_number(atomic_number))


def get_elements_by_position(period: int, group: int, data_path: str = None) -> List[Dict[str, Any]]:
    """All elements sharing a period/group cell."""
    return [_dump(s) for s in _get_instance(data_path).get_by_position(period, group)]
