"""Publisher/subscriber demo.

A Publisher owns two integer states, one per channel ("newspaper" and
"journal"). Each channel's *_logic() method assigns a new random value to
its state and notifies only that channel's subscribers.

Subscribers receive a frozen PublisherState snapshot, never the publisher
itself, so they can read but not mutate it.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable

from patternplay.channel import Channel, Disposer, Subscriber, once
from patternplay.errors import UnknownChannelError

NEWSPAPER = "newspaper"
JOURNAL = "journal"
CHANNELS = (NEWSPAPER, JOURNAL)

PAUSE_SECONDS = 0.015

logger = logging.getLogger("patternplay.observer")


@dataclass(frozen=True)
class PublisherState:
    """Read-only view of a Publisher's state at notification time."""

    newspaper: int = 0
    journal: int = 0


class Publisher:
    """Owns the two channel states and their subscriber lists.

    rng: anything with randrange(start, stop). Defaults to random.Random(seed).
    pause: called with PAUSE_SECONDS between mutation and notification.
        Pacing only; pass a no-op in tests.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        pause: Callable[[float], None] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._pause = pause if pause is not None else time.sleep
        self.newspaper_state = 0
        self.journal_state = 0
        self._channels: dict[str, Channel[PublisherState]] = {
            name: Channel(name) for name in CHANNELS
        }

    @property
    def state(self) -> PublisherState:
        return PublisherState(newspaper=self.newspaper_state, journal=self.journal_state)

    def _channel(self, name: str) -> Channel[PublisherState]:
        try:
            return self._channels[name]
        except KeyError:
            raise UnknownChannelError(name, CHANNELS) from None

    def subscribers(self, channel: str = NEWSPAPER) -> tuple[Subscriber[PublisherState], ...]:
        return self._channel(channel).subscribers

    # --- Subscription management ---

    def attach(self, subscriber: Subscriber[PublisherState], channel: str = NEWSPAPER) -> Disposer:
        """Attach to a channel. Returns a disposer that detaches again."""
        self._channel(channel).attach(subscriber)
        print("Subject: Attached an observer.")
        return once(lambda: self.detach(subscriber, channel))

    def detach(self, subscriber: Subscriber[PublisherState], channel: str = NEWSPAPER) -> None:
        self._channel(channel).detach(subscriber)
        print("Subject: Detached an observer.")

    def notify(self, channel: str) -> None:
        target = self._channel(channel)
        state = self.state
        logger.debug("Publisher: notifying %d on %s with %r", len(target), channel, state)
        print("Subject: Notifying observers...")
        target.notify(state)

    # --- Business logic ---

    def newspaper_logic(self) -> int:
        print("\nNewspaper: I'm doing something important.")
        self.newspaper_state = self._rng.randrange(0, 10)
        self._pause(PAUSE_SECONDS)
        print(f"Newspaper: My state has just changed to: {self.newspaper_state}")
        self.notify(NEWSPAPER)
        return self.newspaper_state

    def journal_logic(self) -> int:
        print("\nJournal: I'm doing something important.")
        self.journal_state = self._rng.randrange(0, 10)
        self._pause(PAUSE_SECONDS)
        print(f"Journal: My state has just changed to: {self.journal_state}")
        self.notify(JOURNAL)
        return self.journal_state

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(ch)}" for name, ch in self._channels.items())
        return f"Publisher({self.state!r}, {counts})"


# ─── Clients ─────────────────────────────────────────────────────────────────


class FirstClient:
    """Reacts to cheap newspapers."""

    def update(self, state: PublisherState) -> None:
        print("Inside FirstClient")
        if state.newspaper < 3:
            print("FirstClient: Reacted to the event.")


class SecondClient:
    def update(self, state: PublisherState) -> None:
        print("Inside SecondClient")
        if state.newspaper == 0 or state.newspaper >= 2:
            print("SecondClient: Reacted to the event.")


class ThirdClient:
    """Reads the journal state, wherever it is attached."""

    def update(self, state: PublisherState) -> None:
        print("Inside ClientThird")
        if state.journal < 3:
            print("ClientThird: Reacted to the event.")
