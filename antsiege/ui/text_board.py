"""Text board — renders an AntGame as a plain-text map.

Reads only the game's query interface (places, food, turn, boosts,
hive count), so it never changes game state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from antsiege.colony.insects import AntKind

if TYPE_CHECKING:
    from antsiege.colony.insects import Ant
    from antsiege.simulation.game import AntGame

_ICONS: dict[AntKind, str] = {
    AntKind.GROWER: "G",
    AntKind.THROWER: "T",
    AntKind.EATER: "E",
    AntKind.SCUBA: "S",
}
_FULL_EATER = "e"
_LONE_GUARD = "x"
_BEE = "B"


def icon_for(ant: Ant | None) -> str:
    """Single-character icon for an ant, bracketed when a Guard shields it.

    Args:
        ant: The front ant of a place, or None.

    Returns:
        ``" "`` for no ant, ``"x"`` for a Guard alone, ``"[T]"`` style for
        a shielded ant, otherwise the kind's letter (``"e"`` for a full
        Eater).
    """
    if ant is None:
        return " "
    if ant.is_guard:
        guarded = ant.guarded()
        if guarded is None:
            return _LONE_GUARD
        return f"[{icon_for(guarded)}]"
    if ant.kind is AntKind.EATER and ant.is_full:
        return _FULL_EATER
    return _ICONS.get(ant.kind, "?")


def _bee_cell(count: int) -> str:
    if count == 0:
        return "  "
    return _BEE + (str(count) if count > 1 else " ")


def render_board(game: AntGame) -> str:
    """Return the full board as a multi-line string."""
    places = game.places
    length = len(places[0])
    numbers = "    ".join(str(col) for col in range(length))
    lines = [
        "The Colony is under attack!",
        f"Turn: {game.turn}, Food: {game.food}, "
        f"Boosts available: [{','.join(game.boost_names())}]",
        f"     {numbers}      Hive",
    ]
    for row, tunnel in enumerate(places):
        ruler = "    " + "=====" * length
        if row == 0 and game.hive_bee_count > 0:
            ruler += "    " + _bee_cell(game.hive_bee_count)
        lines.append(ruler)

        cells = [
            f"{icon_for(place.front_ant()):>3}{_bee_cell(len(place.bees))}"
            for place in tunnel
        ]
        lines.append(f"{row})" + "".join(cells))
        lines.append(
            "    " + " ".join("~~~~" if place.is_water else "====" for place in tunnel),
        )
    lines.append(f"     {numbers}")
    return "\n".join(lines)
