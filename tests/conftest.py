"""Shared fixtures."""

import pytest


class ScriptedRng:
    """Stands in for random.Random: randrange() returns scripted values."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        return self._values.pop(0)


@pytest.fixture
def no_pause():
    pauses = []
    return pauses.append


@pytest.fixture
def scripted_rng():
    return ScriptedRng
