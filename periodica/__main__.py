"""Command line entry point.

    python -m periodica show Fe
    python -m periodica show 26 --json
    python -m periodica serve --port 8000
"""

import argparse
import logging
import sys
from pathlib import Path

from periodica.database.errors import PeriodicTableError
from periodica.logging_config import setup_logging
from periodica.lookup import (
    get_substance_by_atomic_number,
    get_substance_by_name,
    is_substance_registered_by_symbol,
)

# __name__ is "__main__" under python -m
logger = logging.getLogger("periodica.cli")

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def find_substance(query: str):
    """Atomic number if ``query`` is all digits, else symbol, else name."""
    if query.isdigit():
        return get_substance_by_atomic_number(int(query))
    found, substance = is_substance_registered_by_symbol(query)
    if found:
        return substance
    return get_substance_by_name(query)


def _show(args: argparse.Namespace) -> int:
    try:
        substance = find_substance(args.query)
    except PeriodicTableError as e:
        logger.error("%s", e)
        return 1
    if args.json:
        print(substance.model_dump_json(by_alias=True, indent=2))
    else:
        print(substance)
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    logger.info("Serving periodica on http://%s:%d", args.host, args.port)
    uvicorn.run(
        "periodica.api.server:app",
        host=args.host,
        port=args.port,
        log_level=logging.getLevelName(logging.getLogger("periodica").level).lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="periodica", description="Periodic table lookups")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVELS,
        default=None,
        help="Logging level (default: $PERIODICA_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print one element by symbol, name or atomic number")
    show.add_argument("query")
    show.add_argument("--json", action="store_true", help="Print the full record as JSON")
    show.set_defaults(func=_show)

    serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(func=_serve)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args.log_level, args.log_file)
    except ValueError as e:
        parser.error(str(e))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
