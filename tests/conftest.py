"""Shared fixtures for the Antsiege test suite."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pytest
from numpy.random import Generator

from antsiege.colony.colony import AntColony
from antsiege.simulation.events import EventSink, GameEvent
from antsiege.simulation.game import AntGame
from antsiege.world.hive import Hive


class StubRng:
    """Stands in for a Generator when a test needs exact draws.

    ``random()`` pops the queued rolls; ``integers()`` pops the queued
    picks, falling back to ``low`` once they run out.
    """

    def __init__(self, rolls: Iterable[float] = (), picks: Iterable[int] = ()) -> None:
        self.rolls = list(rolls)
        self.picks = list(picks)

    def random(self) -> float:
        return self.rolls.pop(0)

    def integers(self, low: int, high: int) -> int:
        if self.picks:
            return self.picks.pop(0)
        return low


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def events() -> list[GameEvent]:
    """List that collects every event emitted through ``sink``."""
    return []


@pytest.fixture
def sink(events: list[GameEvent]) -> EventSink:
    hub = EventSink()
    hub.subscribe(events.append)
    return hub


@pytest.fixture
def small_colony(rng: Generator, sink: EventSink) -> AntColony:
    """A single 5-section tunnel with 10 food."""
    return AntColony(food=10, num_tunnels=1, tunnel_length=5, rng=rng, sink=sink)


@pytest.fixture
def wide_colony(rng: Generator) -> AntColony:
    """Three dry tunnels of length 8 with plenty of food."""
    return AntColony(food=100, num_tunnels=3, tunnel_length=8, rng=rng)


@pytest.fixture
def small_game(small_colony: AntColony) -> AntGame:
    """A game on ``small_colony`` whose hive makes 2-armor, 1-damage bees."""
    return AntGame(colony=small_colony, hive=Hive(bee_armor=2, bee_damage=1))


@pytest.fixture
def stub_rng() -> type[StubRng]:
    """The StubRng class, for tests that script their own draws."""
    return StubRng
