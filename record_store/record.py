"""Records held by a store.

A store accepts any object with a string `id` attribute. `BaseRecord` is a
convenience base class for dataclass records that can also be loaded from
YAML, which is how the command line tool reads seed data.
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, TypeVar

import aiofiles
from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig
from mashumaro.exceptions import MissingField, InvalidFieldValue
import yaml

from .exceptions import InputException

__all__ = [
    "BaseRecord",
    "record_id",
    "parse_records",
    "read_records",
]

_LOGGER = logging.getLogger(__name__)

R = TypeVar("R", bound="BaseRecord")


@dataclass
class BaseRecord(DataClassDictMixin):
    """Base class for records with a caller assigned identifier."""

    id: str
    """The unique identifier of the record within a store."""

    class Config(BaseConfig):
        omit_none = True


def record_id(record: Any) -> str:
    """Return the identifier of the record, or raise if it has none."""
    value = getattr(record, "id", None)
    if not isinstance(value, str) or not value:
        raise InputException(f"Record is missing a string 'id': {record!r}")
    return value


def parse_records(content: str, cls: type[R]) -> list[R]:
    """Parse a YAML list of mappings into records of the given type."""
    try:
        docs = yaml.safe_load(content)
    except yaml.YAMLError as err:
        raise InputException(f"Unable to parse records: {err}") from err
    if docs is None:
        return []
    if not isinstance(docs, list):
        raise InputException(
            f"Expected a list of records, got {type(docs).__name__}"
        )
    records: list[R] = []
    for doc in docs:
        if not isinstance(doc, dict):
            raise InputException(f"Expected a record mapping, got: {doc!r}")
        try:
            record = cls.from_dict(doc)
        except (MissingField, InvalidFieldValue) as err:
            raise InputException(
                f"Invalid {cls.__name__} record {doc}: {err}"
            ) from err
        record_id(record)
        records.append(record)
    _LOGGER.debug("Parsed %d %s records", len(records), cls.__name__)
    return records


async def read_records(path: Path, cls: type[R]) -> list[R]:
    """Return the records stored in a YAML file."""
    try:
        async with aiofiles.open(str(path)) as records_file:
            content = await records_file.read()
    except FileNotFoundError as err:
        raise InputException(f"Records file {path} does not exist") from err
    return parse_records(content, cls)
