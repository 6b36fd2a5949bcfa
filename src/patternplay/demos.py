"""The three fixed demo scripts and their console entry points."""

from __future__ import annotations

import random
from typing import Callable

from patternplay.observer import FirstClient, Publisher, SecondClient, ThirdClient
from patternplay.state import Hero
from patternplay.strategy import AscendingSort, Context, DescendingSort

SHOTS = 9


def run_observer_demo(
    rng: random.Random | None = None,
    pause: Callable[[float], None] | None = None,
) -> Publisher:
    subject = Publisher(rng, pause=pause)

    first = FirstClient()
    subject.attach(first)
    second = SecondClient()
    subject.attach(second)
    third = ThirdClient()
    subject.attach(third)

    subject.newspaper_logic()
    subject.newspaper_logic()
    subject.journal_logic()

    subject.detach(second)

    subject.newspaper_logic()
    return subject


def run_state_demo() -> list[int]:
    hero = Hero()
    return [hero.shoot() for _ in range(SHOTS)]


def run_strategy_demo() -> list[list[str]]:
    context = Context()

    print("Client: Strategy is set to normal sorting.")
    context.set_strategy(AscendingSort())
    ascending = context.execute()

    print()

    print("Client: Strategy is set to reverse sorting.")
    context.set_strategy(DescendingSort())
    descending = context.execute()
    return [ascending, descending]


# Console entry points return None so the process exits 0.


def observer_main() -> None:
    run_observer_demo()


def state_main() -> None:
    run_state_demo()


def strategy_main() -> None:
    run_strategy_demo()


def main() -> None:
    for demo in (observer_main, state_main, strategy_main):
        demo()
        print()
