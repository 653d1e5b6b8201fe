"""
The store module provides a generic, in-memory repository of records keyed by
their string `id`.

- Observers may subscribe to a notification before every write and on every
  read attempt.
- The best records may be selected by an ad-hoc score function or by the
  store's current, replaceable scoring policy.

This abstract interface allows for other implementations with the same
notification contract.
"""

from .store import Store
from .in_memory import InMemoryStore
from .events import BeforeSetEvent, ReadEvent

__all__ = [
    "Store",
    "InMemoryStore",
    "BeforeSetEvent",
    "ReadEvent",
]
