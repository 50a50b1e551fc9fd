"""Insects — the ants that defend the colony and the bees that attack it.

Ants come in a closed set of kinds (see ``AntKind``).  A single ``Ant``
class carries the state every kind needs and dispatches its turn on the
kind with ``match``:

- **Grower**: rolls once per turn for food or a boost.
- **Thrower** / **Scuba**: throw a leaf at the closest bee in range;
  boosts widen the range, stick or chill the target, or turn the throw
  into a bug-spray blast.  Scubas also survive water.
- **Eater**: swallows a bee in its own place and digests it over
  several turns; damage can make it cough the bee back up.
- **Guard**: shares a place with a regular ant and takes the stings
  meant for it.  It has no action of its own.

Bees sting whatever ant blocks them, otherwise fly one place toward the
queen.  A bee's status (stuck or cold) lasts for exactly one action.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from antsiege.simulation.events import EventKind
from antsiege.world.place import Place

if TYPE_CHECKING:
    from antsiege.colony.colony import AntColony
    from antsiege.simulation.events import EventSink

# -- Constants ---------------------------------------------------------------

FLYING_LEAF = "FlyingLeaf"
STICKY_LEAF = "StickyLeaf"
ICY_LEAF = "IcyLeaf"
BUG_SPRAY = "BugSpray"

_THROW_RANGE = 3
_FLYING_LEAF_RANGE = 5
_BUG_SPRAY_DAMAGE = 10
_DIGEST_TURNS = 3

# Cumulative upper bounds on a uniform [0, 1) roll.  None means +1 food;
# a roll at or above the last bound produces nothing.
_GROWER_OUTCOMES: tuple[tuple[float, str | None], ...] = (
    (0.60, None),
    (0.70, FLYING_LEAF),
    (0.80, STICKY_LEAF),
    (0.90, ICY_LEAF),
    (0.95, BUG_SPRAY),
)


class AntKind(Enum):
    """The five ant variants, valued by display name."""

    GROWER = "Grower"
    THROWER = "Thrower"
    EATER = "Eater"
    SCUBA = "Scuba"
    GUARD = "Guard"

    @property
    def armor(self) -> int:
        return _ANT_STATS[self][0]

    @property
    def food_cost(self) -> int:
        return _ANT_STATS[self][1]

    @classmethod
    def from_name(cls, name: str) -> AntKind | None:
        """Look up a kind by case-insensitive name, or None if unknown."""
        wanted = name.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        return None


# (armor, food cost)
_ANT_STATS: dict[AntKind, tuple[int, int]] = {
    AntKind.GROWER: (1, 1),
    AntKind.THROWER: (1, 4),
    AntKind.EATER: (2, 4),
    AntKind.SCUBA: (1, 5),
    AntKind.GUARD: (2, 4),
}


class BeeStatus(Enum):
    """One-action status a leaf can leave on a bee."""

    STUCK = "stuck"
    COLD = "cold"


@dataclass(eq=False)
class Insect:
    """Shared state of ants and bees.

    Attributes:
        armor: Remaining hit points; the insect leaves the board at 0.
        place: Where the insect currently is (None when off the board).
    """

    armor: int
    place: Place | None = field(default=None, kw_only=True, repr=False)

    is_ant = False

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def is_alive(self) -> bool:
        return self.armor > 0

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"

    def take_damage(self, amount: int, sink: EventSink | None = None) -> bool:
        """Reduce armor by ``amount``; remove the insect if it runs out.

        Args:
            amount: Positive damage to apply.
            sink: Optional event sink to narrate the death.

        Returns:
            True if the insect died.
        """
        self.armor -= amount
        if self.armor > 0:
            return False
        if sink is not None:
            sink.emit(
                EventKind.EXPIRE,
                f"{self} ran out of armor and expired",
                insect=self.name,
            )
        if self.place is not None:
            self.place.remove_insect(self)
        return True


@dataclass(eq=False)
class Bee(Insect):
    """An attacker flying down a tunnel toward the queen.

    Attributes:
        damage: Armor removed from an ant per sting.
        status: Effect applied to the next action only.
    """

    damage: int = 1
    status: BeeStatus | None = None

    def is_blocked(self) -> bool:
        return self.place is not None and self.place.front_ant() is not None

    def sting(self, ant: Ant, sink: EventSink | None = None) -> bool:
        """Sting ``ant`` for this bee's damage; return True if it died."""
        if sink is not None:
            sink.emit(EventKind.STING, f"{self} stings {ant}!", damage=self.damage)
        return ant.take_damage(self.damage, sink)

    def act(self, colony: AntColony) -> None:
        """Sting the blocking ant unless cold, else advance unless stuck."""
        if self.place is None:
            return
        blocker = self.place.front_ant()
        if blocker is not None:
            if self.status is not BeeStatus.COLD:
                self.sting(blocker, colony.sink)
        elif self.is_alive and self.status is not BeeStatus.STUCK:
            origin = self.place
            origin.advance_attacker(self)
            colony.sink.emit(
                EventKind.ADVANCE,
                f"Bee moves from {origin} to {self.place}",
            )
        self.status = None


@dataclass(eq=False)
class Ant(Insect):
    """A stationary defender.

    Build ants with ``Ant.create(kind)`` so armor and cost match the kind.

    Attributes:
        kind: Which variant this ant is.
        food_cost: Food spent to deploy it.
        boost: Name of the boost currently held, if any.
        damage: Leaf damage for throwing kinds.
        turns_eating: Eater digestion counter (0 = empty stomach).
        stomach: Eater's private place holding a swallowed bee.
    """

    kind: AntKind = AntKind.THROWER
    food_cost: int = 0
    boost: str | None = None
    damage: int = 1
    turns_eating: int = 0
    stomach: Place = field(init=False, repr=False)

    is_ant = True

    def __post_init__(self) -> None:
        self.stomach = Place("stomach")

    @classmethod
    def create(cls, kind: AntKind) -> Ant:
        return cls(kind.armor, kind=kind, food_cost=kind.food_cost)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def is_guard(self) -> bool:
        return self.kind is AntKind.GUARD

    @property
    def is_watersafe(self) -> bool:
        return self.kind is AntKind.SCUBA

    @property
    def is_full(self) -> bool:
        """True while an Eater has a bee in its stomach."""
        return bool(self.stomach.bees)

    def set_boost(self, boost: str, sink: EventSink | None = None) -> None:
        self.boost = boost
        if sink is not None:
            sink.emit(EventKind.BOOST, f"{self} is given a {boost}", boost=boost)

    def guarded(self) -> Ant | None:
        """The ant a Guard is shielding, or None."""
        if not self.is_guard or self.place is None:
            return None
        return self.place.guarded_ant()

    # -- Turn dispatch ---------------------------------------------------------

    def act(self, colony: AntColony) -> None:
        """Perform this ant's action for one turn."""
        match self.kind:
            case AntKind.GROWER:
                self._grow(colony)
            case AntKind.THROWER | AntKind.SCUBA:
                self._throw(colony)
            case AntKind.EATER:
                self._eat(colony)
            case AntKind.GUARD:
                pass

    def take_damage(self, amount: int, sink: EventSink | None = None) -> bool:
        if self.kind is AntKind.EATER:
            return self._eater_take_damage(amount, sink)
        return super().take_damage(amount, sink)

    # -- Private behaviour methods --

    def _grow(self, colony: AntColony) -> None:
        """Produce 1 food (60%) or a boost (35%), or nothing (5%)."""
        roll = float(colony.rng.random())
        for bound, boost in _GROWER_OUTCOMES:
            if roll < bound:
                if boost is None:
                    colony.increase_food(1)
                else:
                    colony.add_boost(boost)
                return

    def _throw(self, colony: AntColony) -> None:
        """Throw a leaf, or empty a bug spray over this place.

        Any non-spray boost is spent only when a target is hit; with no
        bee in range it is kept for a later turn.  BugSpray is never
        cleared, it costs the thrower 10 armor instead.
        """
        if self.place is None:
            return
        sink = colony.sink
        if self.boost == BUG_SPRAY:
            sink.emit(EventKind.SPRAY, f"{self} sprays bug repellant everywhere!")
            target = self.place.closest_attacker(0)
            while target is not None:
                target.take_damage(_BUG_SPRAY_DAMAGE, sink)
                target = self.place.closest_attacker(0)
            self.take_damage(_BUG_SPRAY_DAMAGE, sink)
            return

        reach = _FLYING_LEAF_RANGE if self.boost == FLYING_LEAF else _THROW_RANGE
        target = self.place.closest_attacker(reach)
        if target is None:
            return
        sink.emit(EventKind.THROW, f"{self} throws a leaf at {target}")
        target.take_damage(self.damage, sink)
        if self.boost == STICKY_LEAF:
            target.status = BeeStatus.STUCK
            sink.emit(EventKind.THROW, f"{target} is stuck!", status="stuck")
        if self.boost == ICY_LEAF:
            target.status = BeeStatus.COLD
            sink.emit(EventKind.THROW, f"{target} is cold!", status="cold")
        self.boost = None

    def _eat(self, colony: AntColony) -> None:
        """Swallow a bee from this place, or keep digesting."""
        if self.place is None:
            return
        if self.turns_eating == 0:
            target = self.place.closest_attacker(0)
            if target is None:
                return
            colony.sink.emit(EventKind.EAT, f"{self} eats {target}!")
            self.place.remove_bee(target)
            self.stomach.add_bee(target)
            self.turns_eating = 1
        elif self.turns_eating > _DIGEST_TURNS:
            # Empty after a cough; the counter still resets.
            self.turns_eating = 0
            if self.stomach.bees:
                self.stomach.remove_bee(self.stomach.bees[0])
                colony.sink.emit(EventKind.DIGEST, f"{self} finished digesting")
        else:
            self.turns_eating += 1

    def _eater_take_damage(self, amount: int, sink: EventSink | None) -> bool:
        """Eater damage: a fresh meal gets coughed back up.

        Surviving a hit on the first digestion turn returns the bee to
        this place and sets the counter to 3.  Dying within the first two
        digestion turns also returns the bee before the Eater leaves.
        """
        self.armor -= amount
        if self.armor > 0:
            if self.turns_eating == 1:
                self._cough(sink)
                self.turns_eating = _DIGEST_TURNS
            return False
        if 0 < self.turns_eating <= 2:
            self._cough(sink)
            self.turns_eating = 0
        return super().take_damage(0, sink)

    def _cough(self, sink: EventSink | None) -> None:
        if not self.stomach.bees or self.place is None:
            return
        eaten = self.stomach.bees[0]
        self.stomach.remove_bee(eaten)
        self.place.add_bee(eaten)
        if sink is not None:
            sink.emit(EventKind.COUGH, f"{self} coughs up {eaten}!")
