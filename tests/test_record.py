"""Tests for the record library."""

from pathlib import Path

import pytest

from record_store.exceptions import InputException
from record_store.record import BaseRecord, parse_records, read_records, record_id
from record_store.samples import Creature, Vegetable

TESTDATA_DIR = Path(__file__).parent / "testdata"


def test_record_id() -> None:
    """Test the id of a record is returned."""
    assert record_id(BaseRecord(id="carrot")) == "carrot"


def test_record_id_missing() -> None:
    """Test records without a usable id are rejected."""
    with pytest.raises(InputException, match="Record is missing a string 'id'"):
        record_id({"id": "a"})
    with pytest.raises(InputException):
        record_id(BaseRecord(id=""))


def test_parse_records() -> None:
    """Test parsing a list of records."""
    records = parse_records(
        """
- id: carrot
  name: Mighty Carrot
- id: leek
""",
        Vegetable,
    )
    assert records == [
        Vegetable(id="carrot", name="Mighty Carrot"),
        Vegetable(id="leek", name=""),
    ]
    assert records[0].to_dict() == {"id": "carrot", "name": "Mighty Carrot"}


def test_parse_records_empty() -> None:
    """Test an empty document has no records."""
    assert parse_records("", Creature) == []


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("id: carrot", "Expected a list of records"),
        ("- carrot", "Expected a record mapping"),
        ("- name: carrot", "Invalid Vegetable record"),
        ("- [unclosed", "Unable to parse records"),
    ],
    ids=["not-list", "not-mapping", "missing-id", "invalid-yaml"],
)
def test_parse_records_invalid(content: str, match: str) -> None:
    """Test malformed record documents are rejected."""
    with pytest.raises(InputException, match=match):
        parse_records(content, Vegetable)


async def test_read_records() -> None:
    """Test reading records from a file."""
    records = await read_records(TESTDATA_DIR / "creatures.yaml", Creature)
    assert [record.id for record in records] == [
        "pikachu",
        "pikachu",
        "bulbasaur",
        "coffy",
        "charmander",
    ]
    assert records[1].attack == 90
    assert records[1].armor == 10


async def test_read_records_missing_file(tmp_path: Path) -> None:
    """Test reading a file that does not exist."""
    with pytest.raises(InputException, match="does not exist"):
        await read_records(tmp_path / "missing.yaml", Creature)
