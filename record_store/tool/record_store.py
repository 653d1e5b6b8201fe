"""Command line tool for loading records into a store and querying them."""

import argparse
import asyncio
import logging
import sys
import traceback

from record_store.exceptions import RecordStoreException
from . import best, list_records

_LOGGER = logging.getLogger(__name__)


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command line utility for querying a keyed record store.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=True)

    list_records.ListAction.register(subparsers)
    best.BestAction.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """record-store command line tool main entry point."""
    parser = _make_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logging.basicConfig(level=args.log_level)

    action = args.cls()
    try:
        asyncio.run(action.run(**vars(args)))
    except RecordStoreException as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print("record-store error: ", err, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
