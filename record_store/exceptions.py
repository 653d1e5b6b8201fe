"""Exceptions related to record-store."""

__all__ = [
    "RecordStoreException",
    "InputException",
    "ReentrantMutationError",
]


class RecordStoreException(Exception):
    """Generic base exception used for this library."""


class InputException(RecordStoreException):
    """Raised when a record, policy, or record file is not formed as expected."""


class ReentrantMutationError(RecordStoreException):
    """Raised when a store is mutated while it is scanning or notifying."""

    def __init__(self, record_id: str, activity: str) -> None:
        super().__init__(
            f"Cannot set record {record_id} while store is {activity}"
        )
        self.record_id = record_id
        self.activity = activity
