"""record-store best action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import pathlib
from typing import cast

from record_store.samples import Creature, build_policy

from .format import add_output_flag, formatter
from .loader import load_store


_LOGGER = logging.getLogger(__name__)


class BestAction:
    """Print the best creatures under a scoring policy."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "best",
                help="Print the best records",
                description=(
                    "Print every creature tied for the highest score under "
                    "the selected scoring policy"
                ),
            ),
        )
        args.add_argument("path", type=pathlib.Path, help="YAML records file")
        args.add_argument(
            "--policy",
            "-p",
            default="attack",
            help="Scoring policy: attack, balance, constant or field:<name>",
        )
        add_output_flag(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        path: pathlib.Path,
        policy: str,
        output: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        scoring_policy = build_policy(policy)
        store = await load_store(path, Creature, scoring_policy)
        best = store.get_best_wiki()
        _LOGGER.debug(
            "Best of %d records by %s: %s", len(store), scoring_policy, best
        )
        if not best:
            print("No records found")
            return
        formatter(output).print([record.to_dict() for record in best])
