"""Exceptions raised by patternplay."""

from typing import Iterable


class PatternPlayError(Exception):
    """Base class for all patternplay errors."""


class StrategyNotSetError(PatternPlayError):
    """Context.execute() was called before any strategy was set."""

    def __init__(self) -> None:
        super().__init__("no strategy set; call set_strategy() first")


class UnknownChannelError(PatternPlayError, KeyError):
    """A publisher channel name other than the ones it owns."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        super().__init__(f"unknown channel {name!r} (expected one of: {', '.join(known)})")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]
