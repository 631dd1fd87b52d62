"""periodica.database.seed

The periodic table is shipped with the package at:
    periodica/database/periodic_table.json

This script writes a copy of that document (and, optionally, its schema) so
it can be edited and loaded through PeriodicTable(data_path=..., schema_path=...).

Usage:
    python -m periodica.database.seed              # writes a copy next to this file
    python -m periodica.database.seed /path/to/table.json

Note:
    The shipped table is never modified.
"""

from __future__ import annotations

import os
import shutil
import sys

from .db import DATA_PATH, SCHEMA_PATH


def export_dataset(data_path: str | None = None, schema_path: str | None = None) -> str:
    """Copy the shipped dataset to data_path, and the schema to schema_path if given.

    Returns the dataset path written.
    """
    if data_path is None:
        data_path = os.path.join(os.path.dirname(DATA_PATH), "periodic_table_copy.json")

    for src, dst in ((DATA_PATH, data_path), (SCHEMA_PATH, schema_path)):
        if dst is None:
            continue
        os.makedirs(os.path.dirname(os.path.abspath(dst)), exist_ok=True)
        shutil.copyfile(src, dst)
    return data_path


if __name__ == "__main__":
    out = export_dataset(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Wrote periodic table copy: {out}")
