"""Tests for the text board and the interactive shell (no terminal needed)."""

from __future__ import annotations

import io

from antsiege.colony.insects import Ant, AntKind, Bee
from antsiege.simulation.game import AntGame, Outcome
from antsiege.ui.shell import AntShell
from antsiege.ui.text_board import icon_for, render_board


class TestIcons:
    """Tests for per-ant icons."""

    def test_plain_kinds(self) -> None:
        assert icon_for(None) == " "
        assert icon_for(Ant.create(AntKind.GROWER)) == "G"
        assert icon_for(Ant.create(AntKind.THROWER)) == "T"
        assert icon_for(Ant.create(AntKind.SCUBA)) == "S"
        assert icon_for(Ant.create(AntKind.EATER)) == "E"

    def test_full_eater(self) -> None:
        eater = Ant.create(AntKind.EATER)
        eater.stomach.add_bee(Bee(1))
        assert icon_for(eater) == "e"

    def test_guards(self, small_game: AntGame) -> None:
        small_game.deploy_by_name("guard", "0,0")
        place = small_game.places[0][0]
        assert icon_for(place.front_ant()) == "x"
        small_game.deploy_by_name("thrower", "0,0")
        assert icon_for(place.front_ant()) == "[T]"


class TestRenderBoard:
    """Tests for the board text."""

    def test_header(self, small_game: AntGame) -> None:
        text = render_board(small_game)
        assert "Turn: 0, Food: 10" in text
        assert "Boosts available: [FlyingLeaf,StickyLeaf,IcyLeaf]" in text
        assert "Hive" in text

    def test_shows_ants_bees_and_hive(self, small_game: AntGame) -> None:
        small_game.hive.schedule_wave(3, 2)
        small_game.deploy_by_name("thrower", "0,1")
        small_game.places[0][3].add_bee(Bee(2))
        text = render_board(small_game)
        tunnel_row = next(line for line in text.splitlines() if line.startswith("0)"))
        assert "T" in tunnel_row
        assert "B" in tunnel_row
        assert "B2" in text

    def test_water_row(self, rng) -> None:
        from antsiege.colony.colony import AntColony
        from antsiege.world.hive import Hive

        colony = AntColony(food=0, num_tunnels=1, tunnel_length=4, moat_frequency=2, rng=rng)
        text = render_board(AntGame(colony=colony, hive=Hive()))
        assert "==== ~~~~ ==== ~~~~" in text


class TestShell:
    """Tests for scripted shell sessions."""

    def _run(self, game: AntGame, script: str) -> tuple[AntShell, str]:
        out = io.StringIO()
        shell = AntShell(game, stdin=io.StringIO(script), stdout=out)
        shell.cmdloop()
        return shell, out.getvalue()

    def test_deploy_and_quit(self, small_game: AntGame) -> None:
        _, output = self._run(small_game, "deploy Thrower 0,3\nquit\n")
        assert small_game.food == 6
        assert "Food: 6" in output

    def test_reports_errors(self, small_game: AntGame) -> None:
        _, output = self._run(small_game, "d Ninja 0,0\nrm 7,7\nb Nope 0,0\n")
        assert "Invalid deployment: unknown ant type." in output
        assert "Invalid removal: illegal location." in output
        assert "Invalid boost: no such boost" in output

    def test_turn_until_win(self, small_game: AntGame) -> None:
        small_game.hive.schedule_wave(0, 1)
        shell, output = self._run(small_game, "add thrower 0,3\nt\nt\nt\nt\n")
        assert shell.outcome is Outcome.WON
        assert small_game.turn == 3
        assert "You win!" in output

    def test_completion(self, small_game: AntGame) -> None:
        shell = AntShell(small_game, stdin=io.StringIO(""), stdout=io.StringIO())
        assert shell.complete_deploy("th", "deploy th", 7, 9) == ["Thrower"]
        assert shell.complete_boost("", "boost ", 6, 6) == [
            "FlyingLeaf",
            "StickyLeaf",
            "IcyLeaf",
        ]


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from antsiege.__main__ import main

    assert callable(main)
