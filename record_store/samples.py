"""Sample record types and scoring policies.

These are the record shapes and policies used by the command line tool. They
also serve as examples of how to supply records and policies to a store.
"""

from collections.abc import Callable
from dataclasses import dataclass
import logging
import numbers
from typing import Any

from .exceptions import InputException
from .policy import MIN_SCORE, ScoringPolicy
from .record import BaseRecord

__all__ = [
    "Creature",
    "Vegetable",
    "BestAttack",
    "BestBalance",
    "ConstantPolicy",
    "FieldPolicy",
    "POLICIES",
    "RECORD_KINDS",
    "build_policy",
]

_LOGGER = logging.getLogger(__name__)


@dataclass
class Creature(BaseRecord):
    """A creature with combat stats."""

    attack: float = 0
    armor: float = 0


@dataclass
class Vegetable(BaseRecord):
    """A vegetable with a display name."""

    name: str = ""


class BestAttack(ScoringPolicy[Creature]):
    """Score creatures by their attack value."""

    def evaluate(self, record: Creature) -> float:
        return record.attack

    def __repr__(self) -> str:
        return "BestAttack()"


class BestBalance(ScoringPolicy[Creature]):
    """Score creatures by how evenly attack and armor are balanced.

    The score is the negated sum of the relative deviation of attack and armor
    from their median, so a perfectly balanced creature scores 0. A creature
    whose median is 0 cannot be scored and gets MIN_SCORE.
    """

    def evaluate(self, record: Creature) -> float:
        median = (record.attack + record.armor) * 0.5
        if median == 0:
            _LOGGER.warning("Median is 0, skipping evaluation of %s", record)
            return MIN_SCORE
        deviation = abs(median - record.attack) / median
        deviation += abs(median - record.armor) / median
        return -deviation

    def __repr__(self) -> str:
        return "BestBalance()"


class ConstantPolicy(ScoringPolicy[Any]):
    """Every record gets the same score, so every record is best."""

    def __init__(self, value: float = 0.0) -> None:
        self._value = value

    def evaluate(self, record: Any) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"ConstantPolicy({self._value})"


class FieldPolicy(ScoringPolicy[Any]):
    """Score records by the value of a numeric attribute."""

    def __init__(self, field: str) -> None:
        if not field:
            raise InputException("FieldPolicy requires a field name")
        self._field = field

    def evaluate(self, record: Any) -> float:
        value = getattr(record, self._field, None)
        if not isinstance(value, numbers.Real) or isinstance(value, bool):
            _LOGGER.warning(
                "Record %s has no numeric field '%s'", record, self._field
            )
            return MIN_SCORE
        return float(value)

    def __repr__(self) -> str:
        return f"FieldPolicy({self._field!r})"


POLICIES: dict[str, Callable[[], ScoringPolicy[Any]]] = {
    "attack": BestAttack,
    "balance": BestBalance,
    "constant": ConstantPolicy,
}

RECORD_KINDS: dict[str, type[BaseRecord]] = {
    "creature": Creature,
    "vegetable": Vegetable,
}

FIELD_PREFIX = "field:"


def build_policy(name: str) -> ScoringPolicy[Any]:
    """Return a new policy by registered name, or `field:<name>`."""
    if name.startswith(FIELD_PREFIX):
        return FieldPolicy(name[len(FIELD_PREFIX) :])
    if (factory := POLICIES.get(name)) is None:
        raise InputException(
            f"Unknown policy '{name}', expected one of: "
            + ", ".join([*POLICIES, f"{FIELD_PREFIX}<name>"])
        )
    return factory()
