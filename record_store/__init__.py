"""
record-store is a generic, in-memory keyed record store.

Writes and reads are published to observers through a small synchronous
publish/subscribe `Channel`, and the best records are selected by pluggable
scoring policies.

Example usage:

    store = InMemoryStore(FunctionPolicy(lambda creature: creature.attack))
    unsubscribe = store.on_before_set(print)
    store.set(Creature(id="pikachu", attack=90, armor=10))
    store.get_best_wiki()
"""

from .channel import Channel
from .config import StoreConfig
from .exceptions import InputException, RecordStoreException, ReentrantMutationError
from .policy import MIN_SCORE, FunctionPolicy, ScoringPolicy, best_of
from .record import BaseRecord
from .store import BeforeSetEvent, InMemoryStore, ReadEvent, Store

__all__ = [
    "BaseRecord",
    "BeforeSetEvent",
    "Channel",
    "FunctionPolicy",
    "InMemoryStore",
    "InputException",
    "MIN_SCORE",
    "ReadEvent",
    "RecordStoreException",
    "ReentrantMutationError",
    "ScoringPolicy",
    "Store",
    "StoreConfig",
    "best_of",
]
