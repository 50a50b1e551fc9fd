"""Hive — where the bees wait before they attack.

The hive is a place of its own: scheduled bees live in it until their
wave's turn comes, then each one flies to a randomly chosen tunnel
entrance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antsiege.colony.insects import Bee
from antsiege.simulation.events import EventKind
from antsiege.world.place import Place

if TYPE_CHECKING:
    from antsiege.colony.colony import AntColony

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Hive(Place):
    """The bees' staging area and wave schedule.

    Attributes:
        bee_armor: Armor given to every bee this hive creates.
        bee_damage: Sting damage given to every bee this hive creates.
        waves: Turn number to the bees released on that turn.
    """

    name: str = "Hive"
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, list[Bee]] = field(default_factory=dict, repr=False)

    def schedule_wave(self, turn: int, count: int) -> Hive:
        """Create ``count`` bees and hold them here until ``turn``.

        Scheduling the same turn twice replaces the earlier wave list;
        the earlier bees stay in the hive without a release turn.

        Args:
            turn: Turn on which the wave attacks.
            count: Number of bees in the wave.

        Returns:
            The hive itself, so calls can be chained.
        """
        wave: list[Bee] = []
        for _ in range(count):
            bee = Bee(self.bee_armor, self.bee_damage)
            self.add_bee(bee)
            wave.append(bee)
        if turn in self.waves:
            logger.warning("Wave for turn %d replaced by a new wave", turn)
        self.waves[turn] = wave
        logger.debug("Scheduled %d bees for turn %d", count, turn)
        return self

    def pending(self, turn: int) -> list[Bee]:
        """Bees still waiting for ``turn`` (empty once released)."""
        return list(self.waves.get(turn, []))

    def release(self, colony: AntColony, turn: int) -> list[Bee]:
        """Send the wave scheduled for ``turn`` into the colony.

        Each bee picks a uniformly random entrance on its own.

        Args:
            colony: The colony under attack; supplies entrances and RNG.
            turn: The current turn.

        Returns:
            The released bees, or an empty list if nothing was due.
        """
        wave = self.waves.pop(turn, None)
        if wave is None:
            return []
        entrances = colony.entrances
        for bee in wave:
            self.remove_bee(bee)
            entrance = entrances[int(colony.rng.integers(0, len(entrances)))]
            entrance.add_bee(bee)
        colony.sink.emit(
            EventKind.INVADE,
            f"{len(wave)} bees invade on turn {turn}",
            turn=turn,
            count=len(wave),
        )
        return wave
