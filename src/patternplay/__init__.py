"""patternplay: Observer, State, and Strategy pattern demos."""

from importlib.metadata import version as _version

__version__ = _version("patternplay")

from patternplay.channel import Channel, Subscriber
from patternplay.errors import PatternPlayError, StrategyNotSetError, UnknownChannelError
from patternplay.observer import (
    Publisher,
    PublisherState,
    FirstClient,
    SecondClient,
    ThirdClient,
)
from patternplay.state import Hero, HeroState, CommonState, SuperState, HyperState
from patternplay.strategy import Context, SortStrategy, AscendingSort, DescendingSort
# demos not auto-imported: entry points only

__all__ = [
    "Channel",
    "Subscriber",
    "PatternPlayError",
    "StrategyNotSetError",
    "UnknownChannelError",
    "Publisher",
    "PublisherState",
    "FirstClient",
    "SecondClient",
    "ThirdClient",
    "Hero",
    "HeroState",
    "CommonState",
    "SuperState",
    "HyperState",
    "Context",
    "SortStrategy",
    "AscendingSort",
    "DescendingSort",
]
