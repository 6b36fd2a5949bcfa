"""Channel: an ordered subscriber list with attach/detach/notify.

Both publisher channels ("newspaper" and "journal") are Channel instances.
Membership is a plain list: the same subscriber may be attached more than
once and is then notified once per attachment.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Protocol, TypeVar

T = TypeVar("T", contravariant=True)
S = TypeVar("S")

Disposer = Callable[[], None]

logger = logging.getLogger("patternplay.channel")


def once(fn: Callable[[], None]) -> Disposer:
    """Wrap fn in a disposer that runs it on the first call only."""
    disposed = False

    def _dispose() -> None:
        nonlocal disposed
        if disposed:
            return
        disposed = True
        fn()

    return _dispose


class Subscriber(Protocol[T]):
    """Anything with an update(state) method."""

    def update(self, state: T) -> None: ...


class Channel(Generic[S]):
    """Ordered list of subscribers notified in attachment order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: list[Subscriber[S]] = []

    def attach(self, subscriber: Subscriber[S]) -> Disposer:
        """Append a subscriber. Returns a function that detaches it."""
        self._subscribers.append(subscriber)
        logger.debug("%s: attached %r (%d total)", self.name, subscriber, len(self._subscribers))

        return once(lambda: self.detach(subscriber))

    def detach(self, subscriber: Subscriber[S]) -> None:
        """Remove the first matching entry. No-op when absent."""
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            logger.debug("%s: detach of %r ignored, not attached", self.name, subscriber)
            return
        logger.debug("%s: detached %r (%d left)", self.name, subscriber, len(self._subscribers))

    def notify(self, state: S) -> None:
        """Call update(state) on every subscriber, in order."""
        # Snapshot: a subscriber may detach itself while being notified.
        for subscriber in list(self._subscribers):
            subscriber.update(state)

    @property
    def subscribers(self) -> tuple[Subscriber[S], ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        return subscriber in self._subscribers

    def __repr__(self) -> str:
        return f"Channel({self.name!r}, {len(self._subscribers)} subscribers)"
