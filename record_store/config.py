"""Configuration objects for record-store."""

from dataclasses import dataclass


@dataclass
class StoreConfig:
    """Configuration for the InMemoryStore."""

    allow_reentrant_set: bool = False
    """Permit `set` from inside a scan visitor, policy, or pre-write observer.

    Scans always iterate over a snapshot of the records taken when the scan
    starts, so a nested write is never visited by the scan that caused it.
    """
