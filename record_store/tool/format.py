"""Library for formatting output."""

from abc import ABC, abstractmethod
from typing import Generator, Any

import sys
from typing import TextIO
import yaml
import json


PADDING = 4


def column_format_string(rows: list[list[str]]) -> str:
    """Produce a format string based on max width of columns."""
    num_cols = len(rows[0])
    widths = [0] * num_cols
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(str(value)))
    return "".join([f"{{:{w+PADDING}}}" for w in widths])


def format_columns(
    headers: list[str], rows: list[list[str]]
) -> Generator[str, None, None]:
    """Yield the specified output rows in a column format."""
    data = [headers] + rows
    format_string = column_format_string(data)
    for row in data:
        yield format_string.format(*[str(x) for x in row]).rstrip()


class StructFormatter(ABC):
    """A formatter that prints a list of record dicts."""

    @abstractmethod
    def format(self, data: list[dict[str, Any]]) -> Generator[str, None, None]:
        """Format the data objects."""

    def print(
        self, data: list[dict[str, Any]], file: TextIO | None = None
    ) -> None:
        """Output the data objects, to the current stdout by default."""
        for line in self.format(data):
            print(line, file=file or sys.stdout)


class TableFormatter(StructFormatter):
    """A formatter that prints human readable columns.

    Records may have different fields, so the columns are the union of all
    keys in the order they are first seen.
    """

    def format(self, data: list[dict[str, Any]]) -> Generator[str, None, None]:
        """Format the data objects."""
        if not data:
            return
        keys: list[str] = []
        for row in data:
            keys.extend(key for key in row if key not in keys)
        rows = [[str(row.get(key, "")) for key in keys] for row in data]
        yield from format_columns([key.upper() for key in keys], rows)


class YamlFormatter(StructFormatter):
    """A formatter that prints yaml output for a list of records."""

    def format(self, data: list[dict[str, Any]]) -> Generator[str, None, None]:
        """Format the data objects."""
        content = yaml.dump(data, sort_keys=False, explicit_start=True)
        yield from content.rstrip("\n").split("\n")


class JsonFormatter(StructFormatter):
    """A formatter that prints json output."""

    def format(self, data: list[dict[str, Any]]) -> Generator[str, None, None]:
        """Format the data objects."""
        yield from json.dumps(data, indent=4, sort_keys=False).split("\n")


FORMATTERS: dict[str, type[StructFormatter]] = {
    "table": TableFormatter,
    "yaml": YamlFormatter,
    "json": JsonFormatter,
}


def add_output_flag(args: Any) -> None:
    """Add the --output flag to an argument parser."""
    args.add_argument(
        "--output",
        "-o",
        choices=list(FORMATTERS),
        default="table",
        help="Output format of the command",
    )


def formatter(output: str) -> StructFormatter:
    """Return the formatter for the output flag value."""
    return FORMATTERS[output]()
