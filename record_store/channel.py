"""A minimal synchronous publish/subscribe primitive.

A `Channel` owns an ordered list of subscriber callbacks for a single event
payload type. Publishing invokes every subscriber in subscription order on
the calling thread before returning.
"""

from collections.abc import Callable
import logging
from typing import Generic, TypeVar

__all__ = [
    "Channel",
    "Observer",
    "Unsubscribe",
]

_LOGGER = logging.getLogger(__name__)

E = TypeVar("E")

Observer = Callable[[E], None]
Unsubscribe = Callable[[], None]


class _Subscription(Generic[E]):
    """Wraps a callback so removal is by subscription identity."""

    __slots__ = ("callback",)

    def __init__(self, callback: Callable[[E], None]) -> None:
        self.callback = callback


class Channel(Generic[E]):
    """Publish events of a single payload type to subscribed callbacks."""

    def __init__(self, name: str = "channel") -> None:
        """Initialize an empty Channel."""
        self._name = name
        self._subscriptions: tuple[_Subscription[E], ...] = ()

    def subscribe(self, callback: Callable[[E], None]) -> Unsubscribe:
        """Register a callback for future events.

        Returns a callable that removes this subscription. Calling it more than
        once has no further effect.
        """
        subscription = _Subscription(callback)
        self._subscriptions = self._subscriptions + (subscription,)
        _LOGGER.debug(
            "Subscribed %s to %s (%d subscribers)",
            callback,
            self._name,
            len(self._subscriptions),
        )

        def unsubscribe() -> None:
            # The tuple is rebound rather than mutated so a publish pass in
            # progress keeps iterating over the subscribers it started with.
            remaining = tuple(s for s in self._subscriptions if s is not subscription)
            if len(remaining) != len(self._subscriptions):
                _LOGGER.debug("Unsubscribed %s from %s", callback, self._name)
                self._subscriptions = remaining

        return unsubscribe

    def publish(self, event: E) -> None:
        """Invoke every current subscriber with the event, in subscription order.

        Exceptions raised by a subscriber propagate to the caller and the
        remaining subscribers of this pass are not invoked.
        """
        for subscription in self._subscriptions:
            subscription.callback(event)

    def __len__(self) -> int:
        """Return the number of live subscriptions."""
        return len(self._subscriptions)

    def __repr__(self) -> str:
        return f"Channel({self._name!r}, subscribers={len(self._subscriptions)})"
