"""Test helpers for record-store tools."""

import pytest

from record_store.tool.record_store import main


def run_command(args: list[str], capsys: pytest.CaptureFixture[str]) -> str:
    """Run the command line tool and return its standard output."""
    main(args)
    return capsys.readouterr().out
