"""Config — load game parameters from YAML files.

Board shape, starting food, bee stats and the wave table live in YAML
and are parsed into typed dataclasses here.  ``GameConfig.build_game``
turns a config into a ready-to-play ``AntGame``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import yaml

from antsiege.colony.colony import AntColony
from antsiege.simulation.events import EventSink
from antsiege.simulation.game import AntGame
from antsiege.world.hive import Hive

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaveSpec:
    """One row of the wave table.

    Attributes:
        turn: Turn on which the bees leave the hive.
        count: Number of bees in the wave.
    """

    turn: int
    count: int


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        starting_food: Food available before the first turn.
        num_tunnels: Number of tunnels (rows).
        tunnel_length: Sections per tunnel (columns).
        moat_frequency: Every n-th section is water; 0 for none.
        bee_armor: Armor of every bee.
        bee_damage: Sting damage of every bee.
        guard_double_action: Whether an ant shielded by a Guard acts a
            second time in the regular ant pass.
        waves: The attack schedule, scheduled in list order.
    """

    seed: int = 42
    starting_food: int = 10
    num_tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0
    bee_armor: int = 3
    bee_damage: int = 1
    guard_double_action: bool = True
    waves: list[WaveSpec] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.num_tunnels < 1 or self.tunnel_length < 1:
            msg = (
                "board needs at least one tunnel of length one, got "
                f"{self.num_tunnels}x{self.tunnel_length}"
            )
            raise ValueError(msg)
        if self.moat_frequency < 0:
            msg = f"moat_frequency must be >= 0, got {self.moat_frequency}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the board shape is invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        logger.info("Loaded game config from %s", path)
        return cls(
            seed=data.get("seed", cls.seed),
            starting_food=data.get("starting_food", cls.starting_food),
            num_tunnels=data.get("num_tunnels", cls.num_tunnels),
            tunnel_length=data.get("tunnel_length", cls.tunnel_length),
            moat_frequency=data.get("moat_frequency", cls.moat_frequency),
            bee_armor=data.get("bee_armor", cls.bee_armor),
            bee_damage=data.get("bee_damage", cls.bee_damage),
            guard_double_action=data.get(
                "guard_double_action",
                cls.guard_double_action,
            ),
            waves=_parse_waves(data.get("waves") or []),
        )

    def build_game(self, sink: EventSink | None = None) -> AntGame:
        """Create a seeded game with every configured wave scheduled.

        Args:
            sink: Event sink to narrate into; a silent one by default.

        Returns:
            A fresh AntGame on turn 0.
        """
        colony = AntColony(
            food=self.starting_food,
            num_tunnels=self.num_tunnels,
            tunnel_length=self.tunnel_length,
            moat_frequency=self.moat_frequency,
            rng=np.random.default_rng(self.seed),
            sink=sink if sink is not None else EventSink(),
            guard_double_action=self.guard_double_action,
        )
        hive = Hive(bee_armor=self.bee_armor, bee_damage=self.bee_damage)
        for wave in self.waves:
            hive.schedule_wave(wave.turn, wave.count)
        return AntGame(colony=colony, hive=hive)


def _parse_waves(rows: Iterable[dict[str, int]]) -> list[WaveSpec]:
    """Turn ``[{turn: 2, count: 1}, ...]`` into WaveSpecs."""
    return [WaveSpec(turn=int(row["turn"]), count=int(row["count"])) for row in rows]
