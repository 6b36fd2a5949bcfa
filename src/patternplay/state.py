"""Finite-state behavior demo.

A Hero delegates shoot() to its current HeroState. Each state returns a
fixed damage and picks the next state:

    Common --(counter % 3 == 0)--> Super --> Hyper --> Common

States hold no reference to their hero; the hero passes itself into
do_damage() so a state can call transition_to() on it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("patternplay.state")


class HeroState(ABC):
    """One behavior of a Hero."""

    damage: int = 0

    @abstractmethod
    def do_damage(self, hero: Hero, shoot_counter: int) -> int:
        """Return the damage for this shot. May transition the hero."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CommonState(HeroState):
    damage = 5

    def do_damage(self, hero: Hero, shoot_counter: int) -> int:
        if shoot_counter % 3 == 0:
            hero.transition_to(SuperState())
        return self.damage


class SuperState(HeroState):
    damage = 10

    def do_damage(self, hero: Hero, shoot_counter: int) -> int:
        hero.transition_to(HyperState())
        return self.damage


class HyperState(HeroState):
    damage = 15

    def do_damage(self, hero: Hero, shoot_counter: int) -> int:
        hero.transition_to(CommonState())
        return self.damage


class Hero:
    """The actor: a current state plus a monotonic shot counter."""

    def __init__(self, state: HeroState | None = None) -> None:
        self._state: HeroState = state if state is not None else CommonState()
        self.shoot_counter = 0

    @property
    def state(self) -> HeroState:
        return self._state

    def transition_to(self, state: HeroState) -> None:
        logger.debug("Hero: transition %r -> %r", self._state, state)
        self._state = state

    def shoot(self) -> int:
        """Fire once. Prints and returns the damage dealt."""
        self.shoot_counter += 1
        damage = self._state.do_damage(self, self.shoot_counter)
        print(f"Hero do damage: {damage}")
        return damage

    def __repr__(self) -> str:
        return f"Hero({self._state!r}, shots={self.shoot_counter})"
