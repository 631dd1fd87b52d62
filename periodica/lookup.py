"""periodica.lookup

Module-level query API over the shipped periodic table.

All functions share the process-wide table from
periodica.database.db.get_table(), which is validated and loaded on the
first call:

    - get_substances() -> every record, in atomic-number order
    - get_substance_by_name(name) / is_substance_registered_by_name(name)
    - get_substance_by_symbol(symbol) / is_substance_registered_by_symbol(symbol)
    - get_substance_by_atomic_number(n) / is_substance_registered_by_atomic_number(n)
    - get_substances_by_position(period, group) / are_substances_registered_by_position(period, group)

``is_*``/``are_*`` return ``(found, result)``; ``get_*`` raise
SubstanceNotFoundError when nothing matches. Both validate their arguments.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from periodica.database.db import get_table
from periodica.database.models import Substance


def get_substances() -> Tuple[Substance, ...]:
    return get_table().get_all()


def is_substance_registered_by_name(name: str) -> Tuple[bool, Optional[Substance]]:
    return get_table().exists_by_name(name)


def get_substance_by_name(name: str) -> Substance:
    """Case-insensitive exact match on the element name, e.g. ``"hydrogen"``."""
    return get_table().get_by_name(name)


def is_substance_registered_by_symbol(symbol: str) -> Tuple[bool, Optional[Substance]]:
    return get_table().exists_by_symbol(symbol)


def get_substance_by_symbol(symbol: str) -> Substance:
    """Case-insensitive exact match on the element symbol, e.g. ``"fe"``."""
    return get_table().get_by_symbol(symbol)


def is_substance_registered_by_atomic_number(atomic_number: int) -> Tuple[bool, Optional[Substance]]:
    return get_table().exists_by_atomic_number(atomic_number)


def get_substance_by_atomic_number(atomic_number: int) -> Substance:
    """Raises OutOfRangeError outside 1..119."""
    return get_table().get_by_atomic_number(atomic_number)


def are_substances_registered_by_position(period: int, group: int) -> Tuple[bool, List[Substance]]:
    return get_table().exists_by_position(period, group)


def get_substances_by_position(period: int, group: int) -> List[Substance]:
    """All records at (period, group). Lanthanides and actinides share group 3."""
    return get_table().get_by_position(period, group)
