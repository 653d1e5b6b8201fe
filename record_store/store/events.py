"""Events published by a store."""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = [
    "BeforeSetEvent",
    "ReadEvent",
]

T = TypeVar("T")


@dataclass(frozen=True)
class BeforeSetEvent(Generic[T]):
    """Published immediately before a record is committed to the store."""

    existing_record: T | None
    """The record currently stored under the same id, if any."""

    record: T
    """The record about to be stored."""


@dataclass(frozen=True)
class ReadEvent:
    """Published on every read attempt, whether or not the key is present."""

    id: str
