"""record-store list action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import pathlib
from typing import cast, Any

from record_store.record import BaseRecord
from record_store.samples import ConstantPolicy, RECORD_KINDS

from .format import add_output_flag, formatter
from .loader import load_store


_LOGGER = logging.getLogger(__name__)


class ListAction:
    """List the records in a records file."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "list",
                aliases=["ls"],
                help="List records",
                description="Print the records in a records file in store order",
            ),
        )
        args.add_argument("path", type=pathlib.Path, help="YAML records file")
        args.add_argument(
            "--kind",
            choices=list(RECORD_KINDS),
            default="creature",
            help="Type of record stored in the file",
        )
        add_output_flag(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        path: pathlib.Path,
        kind: str,
        output: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        store = await load_store(path, RECORD_KINDS[kind], ConstantPolicy())
        results: list[dict[str, Any]] = []

        def visit(record: BaseRecord) -> None:
            results.append(record.to_dict())

        store.each(visit)
        if not results:
            print("No records found")
            return
        formatter(output).print(results)
