"""AntGame — turn sequencing, win/loss, and the player's command surface.

A turn runs in a fixed order:

1. Ants act (Guards trigger the ants they shield)
2. Bees act (sting or advance)
3. Places act (water drowns non-swimmers)
4. The hive releases the wave scheduled for the current turn
5. The turn counter advances

Commands take coordinates as ``"row,col"`` strings and report failures
as ``CommandError`` values instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np
from numpy.typing import NDArray

from antsiege.colony.colony import AntColony, CommandError
from antsiege.colony.insects import Ant, AntKind
from antsiege.simulation.events import EventKind, EventSink
from antsiege.world.hive import Hive
from antsiege.world.place import Place

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """State of the game as seen after a turn."""

    UNDECIDED = auto()
    WON = auto()
    LOST = auto()


@dataclass
class AntGame:
    """Drives one colony against one hive.

    Attributes:
        colony: The defended colony.
        hive: The attacking hive.
        turn: Number of completed turns.
    """

    colony: AntColony
    hive: Hive
    turn: int = 0

    @property
    def sink(self) -> EventSink:
        return self.colony.sink

    def advance_turn(self) -> None:
        """Run one full turn (see module docstring for the order)."""
        self.colony.sweep_defenders()
        self.colony.sweep_attackers()
        self.colony.sweep_terrain()
        self.hive.release(self.colony, self.turn)
        self.turn += 1
        self.sink.emit(EventKind.TURN, f"Turn {self.turn} complete", turn=self.turn)

    def run(self, turns: int) -> Outcome:
        """Advance up to ``turns`` turns, stopping early once decided."""
        outcome = self.outcome()
        for _ in range(turns):
            self.advance_turn()
            outcome = self.outcome()
            if outcome is not Outcome.UNDECIDED:
                logger.info("Game %s on turn %d", outcome.name.lower(), self.turn)
                break
        return outcome

    def outcome(self) -> Outcome:
        """LOST if any bee reached the queen, WON if no bees remain."""
        if self.colony.queen_has_bees():
            return Outcome.LOST
        if not self.colony.all_bees() and not self.hive.bees:
            return Outcome.WON
        return Outcome.UNDECIDED

    # -- Commands -------------------------------------------------------------

    def place_at(self, coordinates: str) -> Place | None:
        """Resolve ``"row,col"`` to a grid place, or None if illegal."""
        parts = coordinates.split(",")
        if len(parts) != 2:
            return None
        try:
            row, col = (int(part.strip()) for part in parts)
        except ValueError:
            return None
        if not (0 <= row < self.colony.num_tunnels):
            return None
        if not (0 <= col < self.colony.tunnel_length):
            return None
        return self.colony.places[row][col]

    def deploy_by_name(self, ant_type: str, coordinates: str) -> CommandError | None:
        """Deploy a new ant of the named kind at ``coordinates``."""
        kind = AntKind.from_name(ant_type)
        if kind is None:
            return CommandError.UNKNOWN_ANT_TYPE
        place = self.place_at(coordinates)
        if place is None:
            return CommandError.ILLEGAL_LOCATION
        return self.colony.deploy(Ant.create(kind), place)

    def remove_at(self, coordinates: str) -> CommandError | None:
        """Remove the front ant at ``coordinates``; empty places are fine."""
        place = self.place_at(coordinates)
        if place is None:
            return CommandError.ILLEGAL_LOCATION
        self.colony.remove(place)
        return None

    def boost_at(self, boost: str, coordinates: str) -> CommandError | None:
        """Give ``boost`` to the front ant at ``coordinates``."""
        place = self.place_at(coordinates)
        if place is None:
            return CommandError.ILLEGAL_LOCATION
        return self.colony.apply_boost(boost, place)

    # -- Queries --------------------------------------------------------------

    @property
    def places(self) -> list[list[Place]]:
        return self.colony.places

    @property
    def food(self) -> int:
        return self.colony.food

    @property
    def hive_bee_count(self) -> int:
        return len(self.hive.bees)

    def boost_names(self) -> list[str]:
        return self.colony.boost_names()

    def bee_counts(self) -> NDArray[np.int64]:
        return self.colony.bee_counts()
