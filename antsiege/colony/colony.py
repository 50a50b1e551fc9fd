"""AntColony — the board, the food economy and the per-turn sweeps.

The colony owns the tunnel grid, the queen's place, the bee entrances,
the food counter and the boost inventory.  Each turn the game asks it to
run three sweeps in order: ants act, bees act, places act (water).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.random import Generator
from numpy.typing import NDArray

from antsiege.colony.insects import (
    BUG_SPRAY,
    FLYING_LEAF,
    ICY_LEAF,
    STICKY_LEAF,
    Ant,
    Bee,
)
from antsiege.simulation.events import EventKind, EventSink
from antsiege.world.place import Place, build_tunnels


class CommandError(Enum):
    """Reasons a player command can be refused."""

    UNKNOWN_ANT_TYPE = "unknown ant type"
    ILLEGAL_LOCATION = "illegal location"
    NOT_ENOUGH_FOOD = "not enough food"
    OCCUPIED = "tunnel already occupied"
    NO_SUCH_BOOST = "no such boost"
    NO_ANT = "no Ant at location"

    def __str__(self) -> str:
        return self.value


def _starting_boosts() -> dict[str, int]:
    return {FLYING_LEAF: 1, STICKY_LEAF: 1, ICY_LEAF: 1, BUG_SPRAY: 0}


@dataclass
class AntColony:
    """The colony under attack.

    Attributes:
        food: Food available for deploying ants.
        num_tunnels: Number of tunnels (grid rows).
        tunnel_length: Sections per tunnel (grid columns).
        rng: Seeded generator for Grower rolls.
        moat_frequency: Every n-th section is water; 0 for none.
        sink: Event sink for narration.
        guard_double_action: Whether an ant shielded by a Guard also acts
            in the regular pass after the Guard has triggered it.
        boosts: Boost name to count.  A positive count means the boost
            has been found and may be applied any number of times.
        places: Grid indexed as ``places[row][col]``; col 0 touches the
            queen.
        entrances: Rightmost place of every tunnel.
        queen_place: Shared sink every tunnel exits into.
    """

    food: int
    num_tunnels: int
    tunnel_length: int
    rng: Generator = field(repr=False)
    moat_frequency: int = 0
    sink: EventSink = field(default_factory=EventSink, repr=False)
    guard_double_action: bool = True
    boosts: dict[str, int] = field(default_factory=_starting_boosts)
    places: list[list[Place]] = field(init=False, repr=False)
    entrances: list[Place] = field(init=False, repr=False)
    queen_place: Place = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the tunnel grid behind the queen's place."""
        self.queen_place = Place("Ant Queen")
        self.places, self.entrances = build_tunnels(
            self.queen_place,
            self.num_tunnels,
            self.tunnel_length,
            self.moat_frequency,
        )

    # -- Economy ------------------------------------------------------------

    def increase_food(self, amount: int) -> None:
        self.food += amount

    def add_boost(self, boost: str) -> None:
        """Record one more find of ``boost``, registering it if new."""
        self.boosts.setdefault(boost, 0)
        self.boosts[boost] += 1
        self.sink.emit(EventKind.FOUND_BOOST, f"Found a {boost}!", boost=boost)

    def boost_names(self) -> list[str]:
        """Names of boosts with a positive count, in registration order."""
        return [name for name, count in self.boosts.items() if count > 0]

    def deploy(self, ant: Ant, place: Place) -> CommandError | None:
        """Place ``ant`` at ``place`` and pay its food cost.

        Returns:
            None on success, ``NOT_ENOUGH_FOOD`` if the colony cannot pay,
            or ``OCCUPIED`` if the matching slot is taken.  A refused
            deployment changes nothing.
        """
        if self.food < ant.food_cost:
            return CommandError.NOT_ENOUGH_FOOD
        if not place.place(ant):
            return CommandError.OCCUPIED
        self.food -= ant.food_cost
        self.sink.emit(EventKind.DEPLOY, f"Deployed {ant}", ant=ant.name)
        return None

    def remove(self, place: Place) -> Ant | None:
        """Take the front ant (guard first) off ``place``; no refund."""
        removed = place.remove_defender()
        if removed is not None:
            self.sink.emit(
                EventKind.REMOVE,
                f"Removed {removed.name} from {place}",
                ant=removed.name,
            )
        return removed

    def apply_boost(self, boost: str, place: Place) -> CommandError | None:
        """Give ``boost`` to the front ant at ``place``.

        The inventory is not decremented.

        Returns:
            None on success, ``NO_SUCH_BOOST`` if the boost was never
            found, or ``NO_ANT`` if the place is empty.
        """
        if self.boosts.get(boost, 0) < 1:
            return CommandError.NO_SUCH_BOOST
        ant = place.front_ant()
        if ant is None:
            return CommandError.NO_ANT
        ant.set_boost(boost, self.sink)
        return None

    # -- Board queries --------------------------------------------------------

    def iter_places(self) -> list[Place]:
        """All grid places, tunnel by tunnel, queen side first."""
        return [place for tunnel in self.places for place in tunnel]

    def all_ants(self) -> list[Ant]:
        """The front ant of every occupied place, in board order."""
        ants: list[Ant] = []
        for place in self.iter_places():
            ant = place.front_ant()
            if ant is not None:
                ants.append(ant)
        return ants

    def all_bees(self) -> list[Bee]:
        """Every bee on the grid, in board order then arrival order."""
        return [bee for place in self.iter_places() for bee in place.bees]

    def queen_has_bees(self) -> bool:
        return bool(self.queen_place.bees)

    def bee_counts(self) -> NDArray[np.int64]:
        """Bees per place as a ``(num_tunnels, tunnel_length)`` array."""
        counts = np.zeros((self.num_tunnels, self.tunnel_length), dtype=np.int64)
        for row, tunnel in enumerate(self.places):
            for col, place in enumerate(tunnel):
                counts[row, col] = len(place.bees)
        return counts

    def water_mask(self) -> NDArray[np.bool_]:
        """Boolean grid, True where a place is water."""
        return np.array(
            [[place.is_water for place in tunnel] for tunnel in self.places],
            dtype=np.bool_,
        ).reshape(self.num_tunnels, self.tunnel_length)

    # -- Sweeps ---------------------------------------------------------------

    def sweep_defenders(self) -> None:
        """Let every ant act once, in board order.

        A Guard first triggers the ant it shields, then acts itself.
        With ``guard_double_action`` the shielded ant acts again right
        after, as part of the regular pass.  Ants that leave the board
        mid-sweep are skipped.
        """
        for ant in self.all_ants():
            if ant.place is None:
                continue
            if not ant.is_guard:
                ant.act(self)
                continue
            guarded = ant.guarded()
            if guarded is not None:
                guarded.act(self)
            if ant.place is not None:
                ant.act(self)
            if (
                self.guard_double_action
                and guarded is not None
                and guarded.place is not None
            ):
                guarded.act(self)

    def sweep_attackers(self) -> None:
        """Let every bee on the board act once."""
        for bee in self.all_bees():
            if bee.place is None:
                continue
            bee.act(self)

    def sweep_terrain(self) -> None:
        """Apply water to every place, drowning ants that cannot swim."""
        for place in self.iter_places():
            for ant in place.terrain_effect():
                self.sink.emit(
                    EventKind.DROWN,
                    f"{ant.name} drowned in {place}",
                    ant=ant.name,
                )
