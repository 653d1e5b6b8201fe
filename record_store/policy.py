"""Scoring policies used to select the best records in a store.

A scoring policy maps a record to a real valued score. The store keeps one
current policy that may be replaced at any time, and also accepts plain score
functions for one-off queries.

Policies return `MIN_SCORE` for input they cannot score (for example when the
computation would divide by zero). This is a normal return value, not an
error. Because the best-of scan starts from `MIN_SCORE`, such a record ties
with the starting value: it is only part of a result when every record in the
store scored `MIN_SCORE`.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
import math
from typing import Any, Generic, TypeVar

from .exceptions import InputException

__all__ = [
    "MIN_SCORE",
    "ScoreFunction",
    "ScoringPolicy",
    "FunctionPolicy",
    "best_of",
    "check_policy",
]

T = TypeVar("T")

MIN_SCORE = -math.inf

ScoreFunction = Callable[[T], float]


class ScoringPolicy(ABC, Generic[T]):
    """A replaceable capability that scores records."""

    @abstractmethod
    def evaluate(self, record: T) -> float:
        """Return the score for the record, higher is better."""


class FunctionPolicy(ScoringPolicy[T]):
    """A ScoringPolicy backed by a plain score function."""

    def __init__(self, score_fn: ScoreFunction[T]) -> None:
        """Initialize FunctionPolicy."""
        self._score_fn = score_fn

    def evaluate(self, record: T) -> float:
        """Return the score computed by the wrapped function."""
        return self._score_fn(record)

    def __repr__(self) -> str:
        name = getattr(self._score_fn, "__name__", repr(self._score_fn))
        return f"FunctionPolicy({name})"


def check_policy(policy: Any) -> None:
    """Raise InputException unless the object can act as a scoring policy.

    Any object with a callable `evaluate` attribute is accepted, it does not
    need to subclass ScoringPolicy.
    """
    if policy is None:
        raise InputException("A scoring policy is required")
    if isinstance(policy, type):
        raise InputException(
            f"Scoring policy {policy.__name__} is a class, expected an instance"
        )
    if not callable(getattr(policy, "evaluate", None)):
        raise InputException(
            f"Scoring policy {policy!r} does not have a callable 'evaluate'"
        )


def best_of(records: Iterable[T], score_fn: ScoreFunction[T]) -> list[T]:
    """Return every record that achieves the maximum score.

    Records are scanned once in iteration order. A strictly higher score
    restarts the result and an equal score is appended, so ties keep their
    scan order.
    """
    best = MIN_SCORE
    result: list[T] = []
    for record in records:
        score = score_fn(record)
        if score > best:
            result = [record]
            best = score
        elif score == best:
            result.append(record)
    return result
