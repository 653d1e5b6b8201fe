"""Module for in memory record store."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
import logging
from typing import TypeVar

from record_store.channel import Channel, Observer, Unsubscribe
from record_store.config import StoreConfig
from record_store.exceptions import ReentrantMutationError
from record_store.policy import ScoreFunction, ScoringPolicy, best_of, check_policy
from record_store.record import record_id

from .events import BeforeSetEvent, ReadEvent
from .store import Store

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_SCANNING = "scanning records"
_NOTIFYING = "notifying before-set observers"


class InMemoryStore(Store[T]):
    """In-memory implementation of the Store interface.

    Records are keyed by their `id` and kept in insertion order. Writes and
    reads are published to observers on two independent channels.
    """

    def __init__(
        self, policy: ScoringPolicy[T], config: StoreConfig | None = None
    ) -> None:
        """Initialize the InMemoryStore with its initial scoring policy."""
        check_policy(policy)
        self._records: dict[str, T] = {}
        self._policy = policy
        self._config = config or StoreConfig()
        self._before_set = Channel[BeforeSetEvent[T]]("before_set")
        self._read = Channel[ReadEvent]("read")
        self._busy: list[str] = []

    @contextmanager
    def _activity(self, activity: str) -> Iterator[None]:
        self._busy.append(activity)
        try:
            yield
        finally:
            self._busy.pop()

    def set(self, record: T) -> None:
        """Store the record under its id, replacing any previous record.

        Observers are notified before the record is committed. If an observer
        raises, the record is not stored.
        """
        key = record_id(record)
        if self._busy and not self._config.allow_reentrant_set:
            raise ReentrantMutationError(key, self._busy[-1])
        existing = self._records.get(key)
        with self._activity(_NOTIFYING):
            self._before_set.publish(
                BeforeSetEvent(existing_record=existing, record=record)
            )
        if existing is None:
            _LOGGER.debug("Adding record %s to store", key)
        else:
            _LOGGER.debug("Replacing existing record %s in store", key)
        self._records[key] = record

    def get(self, key: str) -> T | None:
        """Return the record stored under the key, or None if absent."""
        self._read.publish(ReadEvent(id=key))
        return self._records.get(key)

    def each(self, visit: Callable[[T], None]) -> None:
        """Invoke the visitor once per record in insertion order."""
        with self._activity(_SCANNING):
            for record in list(self._records.values()):
                visit(record)

    def get_best_by_score(self, score_fn: ScoreFunction[T]) -> list[T]:
        """Return all records tied for the maximum score under `score_fn`."""
        with self._activity(_SCANNING):
            return best_of(list(self._records.values()), score_fn)

    def set_best_strategy(self, policy: ScoringPolicy[T]) -> None:
        """Replace the policy used by `get_best_wiki`."""
        check_policy(policy)
        _LOGGER.debug("Replacing best strategy %s with %s", self._policy, policy)
        self._policy = policy

    def get_best_wiki(self) -> list[T]:
        """Return all records tied for the maximum score under the current policy."""
        return self.get_best_by_score(self._policy.evaluate)

    @property
    def best_strategy(self) -> ScoringPolicy[T]:
        """Return the policy currently used by `get_best_wiki`."""
        return self._policy

    def on_before_set(
        self, observer: Observer[BeforeSetEvent[T]]
    ) -> Unsubscribe:
        """Register an observer notified before every write."""
        return self._before_set.subscribe(observer)

    def on_read(self, observer: Observer[ReadEvent]) -> Unsubscribe:
        """Register an observer notified on every read attempt."""
        return self._read.subscribe(observer)

    def keys(self) -> list[str]:
        """Return the record ids in insertion order without publishing reads."""
        return list(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)
