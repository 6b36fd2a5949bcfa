"""Interchangeable-algorithm demo.

A Context applies whatever SortStrategy it currently holds to a fixed
five-letter input. Swapping the strategy affects only later execute() calls.
"""

from __future__ import annotations

import logging
from typing import Protocol

from patternplay.errors import StrategyNotSetError

DEFAULT_DATA = ("a", "b", "c", "d", "e")

logger = logging.getLogger("patternplay.strategy")


class SortStrategy(Protocol):
    def do_algorithm(self, data: list[str]) -> list[str]: ...


class AscendingSort:
    """Stable ascending lexicographic sort."""

    def do_algorithm(self, data: list[str]) -> list[str]:
        data.sort()
        return data


class DescendingSort:
    """Ascending sort, then reversed."""

    def do_algorithm(self, data: list[str]) -> list[str]:
        data.sort()
        data.reverse()
        return data


class Context:
    """Holds one swappable SortStrategy and the data it runs on."""

    def __init__(self, strategy: SortStrategy | None = None) -> None:
        self._strategy = strategy
        self._data = DEFAULT_DATA

    @property
    def strategy(self) -> SortStrategy | None:
        return self._strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        logger.debug("Context: strategy %r -> %r", self._strategy, strategy)
        self._strategy = strategy

    def execute(self) -> list[str]:
        """Run the current strategy on a fresh copy of the data.

        Raises StrategyNotSetError if no strategy has been set.
        """
        if self._strategy is None:
            raise StrategyNotSetError()
        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm(list(self._data))
        print(",".join(result))
        return result
