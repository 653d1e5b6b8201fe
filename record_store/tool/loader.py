"""Helpers for building a store from a records file."""

import logging
import pathlib
from typing import Any

from record_store.policy import ScoringPolicy
from record_store.record import BaseRecord, read_records
from record_store.store import BeforeSetEvent, InMemoryStore, ReadEvent

_LOGGER = logging.getLogger(__name__)


def _log_before_set(event: BeforeSetEvent[Any]) -> None:
    if event.existing_record is None:
        _LOGGER.debug("Storing %s", event.record)
    else:
        _LOGGER.debug("Replacing %s with %s", event.existing_record, event.record)


def _log_read(event: ReadEvent) -> None:
    _LOGGER.debug("Reading %s", event.id)


async def load_store(
    path: pathlib.Path,
    cls: type[BaseRecord],
    policy: ScoringPolicy[Any],
) -> InMemoryStore[Any]:
    """Return a store populated with the records in the file.

    Records are stored in file order, so a later record with a repeated id
    replaces the earlier one while keeping its position.
    """
    store: InMemoryStore[Any] = InMemoryStore(policy)
    store.on_before_set(_log_before_set)
    store.on_read(_log_read)
    for record in await read_records(path, cls):
        store.set(record)
    _LOGGER.debug("Loaded %d records from %s", len(store), path)
    return store
