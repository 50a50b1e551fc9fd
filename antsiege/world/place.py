"""Place — a single section of a tunnel.

Places form one doubly-linked chain per tunnel.  ``exit`` points toward
the Ant Queen (left), ``entrance`` points toward the Hive (right).  A
place holds at most one regular ant and at most one guard ant, plus any
number of bees in arrival order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antsiege.colony.insects import Ant, Bee, Insect


@dataclass(eq=False)
class Place:
    """A node in the tunnel graph.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]`` or ``water[1,2]``.
        is_water: Whether this section is flooded.
        exit: Neighbour toward the queen (None for the queen itself).
        entrance: Neighbour toward the hive (None at the tunnel mouth).
        ant: The regular (non-guard) ant, if any.
        guard: The guard ant, if any.
        bees: Bees present, earliest arrival first.
    """

    name: str
    is_water: bool = False
    exit: Place | None = field(default=None, repr=False)
    entrance: Place | None = field(default=None, repr=False)
    ant: Ant | None = None
    guard: Ant | None = None
    bees: list[Bee] = field(default_factory=list)

    def __str__(self) -> str:
        return self.name

    # -- Ant occupancy --------------------------------------------------------

    def front_ant(self) -> Ant | None:
        """Return the ant that bees run into: the guard if present."""
        if self.guard is not None:
            return self.guard
        return self.ant

    def guarded_ant(self) -> Ant | None:
        """Return the regular ant, which a guard (if any) is shielding."""
        return self.ant

    def place(self, ant: Ant) -> bool:
        """Put ``ant`` into its matching slot.

        Guard ants go into the guard slot, everything else into the
        regular slot.

        Args:
            ant: The ant to place.

        Returns:
            True if the slot was free and the ant now lives here, False
            if the slot was already taken.
        """
        if ant.is_guard:
            if self.guard is not None:
                return False
            self.guard = ant
        else:
            if self.ant is not None:
                return False
            self.ant = ant
        ant.place = self
        return True

    def remove_defender(self) -> Ant | None:
        """Remove and return the guard if present, else the regular ant."""
        if self.guard is not None:
            removed, self.guard = self.guard, None
        else:
            removed, self.ant = self.ant, None
        if removed is not None:
            removed.place = None
        return removed

    def detach_ant(self, ant: Ant) -> None:
        """Remove one specific ant from whichever slot holds it."""
        if self.guard is ant:
            self.guard = None
        elif self.ant is ant:
            self.ant = None
        else:
            return
        ant.place = None

    # -- Bees -----------------------------------------------------------------

    def add_bee(self, bee: Bee) -> None:
        self.bees.append(bee)
        bee.place = self

    def remove_bee(self, bee: Bee) -> None:
        """Remove ``bee`` if present; a bee that is not here is ignored."""
        for i, present in enumerate(self.bees):
            if present is bee:
                del self.bees[i]
                bee.place = None
                return

    def remove_insect(self, insect: Insect) -> None:
        """Detach an ant or a bee, whichever ``insect`` is."""
        if insect.is_ant:
            self.detach_ant(insect)  # type: ignore[arg-type]
        else:
            self.remove_bee(insect)  # type: ignore[arg-type]

    def closest_attacker(
        self,
        max_distance: int,
        min_distance: int = 0,
    ) -> Bee | None:
        """Return the nearest bee within a distance window.

        Walks hive-ward along ``entrance`` links.  Distance 0 is this
        place.  Within one place the earliest-arrived bee wins.

        Args:
            max_distance: Furthest place (inclusive) to look at.
            min_distance: Nearest place (inclusive) to look at.

        Returns:
            The first matching bee, or None if the chain ends or the
            window holds no bees.
        """
        place: Place | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place.bees:
                return place.bees[0]
            place = place.entrance
            distance += 1
        return None

    def advance_attacker(self, bee: Bee) -> None:
        """Move ``bee`` one place toward the queen.

        Raises:
            ValueError: If this place has no exit.
        """
        if self.exit is None:
            msg = f"{self} has no exit to advance {bee} into"
            raise ValueError(msg)
        self.remove_bee(bee)
        self.exit.add_bee(bee)

    # -- Terrain --------------------------------------------------------------

    def terrain_effect(self) -> list[Ant]:
        """Drown every ant that cannot swim, if this place is water.

        The guard always drowns; the regular ant drowns unless it is
        watersafe.

        Returns:
            The ants that were removed (empty for dry places).
        """
        if not self.is_water:
            return []
        drowned: list[Ant] = []
        if self.guard is not None:
            guard = self.guard
            self.detach_ant(guard)
            drowned.append(guard)
        if self.ant is not None and not self.ant.is_watersafe:
            ant = self.ant
            self.detach_ant(ant)
            drowned.append(ant)
        return drowned


def build_tunnels(
    queen: Place,
    num_tunnels: int,
    tunnel_length: int,
    moat_frequency: int = 0,
) -> tuple[list[list[Place]], list[Place]]:
    """Lay out the tunnel grid behind ``queen``.

    Every tunnel starts at the queen's place.  Each ``moat_frequency``-th
    section of a tunnel (counting from 1) is water; 0 disables water.

    Args:
        queen: The shared leftmost sink.
        num_tunnels: Number of rows.
        tunnel_length: Number of sections per row.
        moat_frequency: Water spacing, or 0 for no water.

    Returns:
        ``(places, entrances)`` where ``places[row][col]`` is the grid
        and ``entrances`` holds the rightmost place of every tunnel.
    """
    places: list[list[Place]] = []
    entrances: list[Place] = []
    for row in range(num_tunnels):
        previous = queen
        tunnel: list[Place] = []
        for col in range(tunnel_length):
            water = moat_frequency != 0 and (col + 1) % moat_frequency == 0
            kind = "water" if water else "tunnel"
            current = Place(f"{kind}[{row},{col}]", is_water=water, exit=previous)
            previous.entrance = current
            tunnel.append(current)
            previous = current
        places.append(tunnel)
        entrances.append(previous)
    return places, entrances
