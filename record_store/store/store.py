"""Store module for holding keyed records."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from record_store.channel import Observer, Unsubscribe
from record_store.policy import ScoreFunction, ScoringPolicy

from .events import BeforeSetEvent, ReadEvent

T = TypeVar("T")


class Store(ABC, Generic[T]):
    """Abstract base class for a keyed record store with event notification."""

    @abstractmethod
    def set(self, record: T) -> None:
        """Store the record under its id, replacing any previous record."""

    @abstractmethod
    def get(self, key: str) -> T | None:
        """Return the record stored under the key, or None if absent."""

    @abstractmethod
    def each(self, visit: Callable[[T], None]) -> None:
        """Invoke the visitor once per record in insertion order."""

    @abstractmethod
    def get_best_by_score(self, score_fn: ScoreFunction[T]) -> list[T]:
        """Return all records tied for the maximum score under `score_fn`."""

    @abstractmethod
    def set_best_strategy(self, policy: ScoringPolicy[T]) -> None:
        """Replace the policy used by `get_best_wiki`."""

    @abstractmethod
    def get_best_wiki(self) -> list[T]:
        """Return all records tied for the maximum score under the current policy."""

    @abstractmethod
    def on_before_set(
        self, observer: Observer[BeforeSetEvent[T]]
    ) -> Unsubscribe:
        """Register an observer notified before every write.

        Returns a callable that can be called to remove the observer.
        """

    @abstractmethod
    def on_read(self, observer: Observer[ReadEvent]) -> Unsubscribe:
        """Register an observer notified on every read attempt.

        Returns a callable that can be called to remove the observer.
        """
