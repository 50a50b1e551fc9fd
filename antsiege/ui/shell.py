"""Interactive shell for playing a game from the terminal.

Commands mirror the game's mutating interface::

    deploy <type> <row,col>   (aliases: add, d)
    remove <row,col>          (alias: rm)
    boost <name> <row,col>    (alias: b)
    turn                      (alias: t)
    show
    quit

The shell only parses input and prints results; every rule lives in
``AntGame``.
"""

from __future__ import annotations

import cmd
from typing import IO, TYPE_CHECKING

from antsiege.colony.insects import AntKind
from antsiege.simulation.game import Outcome
from antsiege.ui.text_board import render_board

if TYPE_CHECKING:
    from antsiege.simulation.game import AntGame

_WIN_BANNER = "Yaaaay---\nAll bees are vanquished. You win!\n"
_LOSS_BANNER = "Bzzzzz---\nThe ant queen has perished! Please try again.\n"


class AntShell(cmd.Cmd):
    """Line-oriented front end for an AntGame."""

    prompt = "AvB $ "
    intro = "Ants vs. SomeBees. Type 'help' for commands."

    def __init__(
        self,
        game: AntGame,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.game = game
        self.outcome = Outcome.UNDECIDED

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _show(self) -> None:
        self._say(render_board(self.game))

    def preloop(self) -> None:
        self._show()

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        self._say(f"Unknown command: {line}")
        return False

    # -- Commands -------------------------------------------------------------

    def do_deploy(self, arg: str) -> bool:
        """deploy <type> <row,col>: deploy an ant, e.g. 'deploy Thrower 0,6'."""
        parts = arg.split()
        if len(parts) != 2:
            self._say("Usage: deploy <type> <row,col>")
            return False
        error = self.game.deploy_by_name(parts[0], parts[1])
        if error is not None:
            self._say(f"Invalid deployment: {error}.")
        else:
            self._show()
        return False

    def do_remove(self, arg: str) -> bool:
        """remove <row,col>: remove the ant from a tunnel section."""
        error = self.game.remove_at(arg.strip())
        if error is not None:
            self._say(f"Invalid removal: {error}.")
        else:
            self._show()
        return False

    def do_boost(self, arg: str) -> bool:
        """boost <name> <row,col>: give a boost to the ant at a section."""
        parts = arg.split()
        if len(parts) != 2:
            self._say("Usage: boost <name> <row,col>")
            return False
        error = self.game.boost_at(parts[0], parts[1])
        if error is not None:
            self._say(f"Invalid boost: {error}")
        return False

    def do_turn(self, arg: str) -> bool:
        """turn: end the current turn; ants and bees act."""
        self.game.advance_turn()
        self._show()
        self.outcome = self.game.outcome()
        if self.outcome is Outcome.WON:
            self._say(_WIN_BANNER)
            return True
        if self.outcome is Outcome.LOST:
            self._say(_LOSS_BANNER)
            return True
        return False

    def do_show(self, arg: str) -> bool:
        """show: print the board."""
        self._show()
        return False

    def do_quit(self, arg: str) -> bool:
        """quit: leave the game."""
        return True

    do_EOF = do_quit
    do_add = do_d = do_deploy
    do_rm = do_remove
    do_b = do_boost
    do_t = do_turn

    # -- Completion -----------------------------------------------------------

    def complete_deploy(self, text: str, line: str, begidx: int, endidx: int) -> list[str]:
        return [
            kind.value
            for kind in AntKind
            if kind.value.lower().startswith(text.lower())
        ]

    def complete_boost(self, text: str, line: str, begidx: int, endidx: int) -> list[str]:
        return [name for name in self.game.boost_names() if name.startswith(text)]

    complete_add = complete_d = complete_deploy
    complete_b = complete_boost
