"""Entry point for ``python -m antsiege``.

Loads the default YAML config, builds a seeded game, and starts the
interactive shell.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from antsiege.simulation.config import GameConfig
from antsiege.ui.shell import AntShell

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the game, run the shell."""
    parser = argparse.ArgumentParser(
        prog="antsiege",
        description="Antsiege - Ants vs. SomeBees tower defense",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config's RNG seed",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level; DEBUG narrates every event (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig.from_yaml(args.config)
    if args.seed is not None:
        config.seed = args.seed
    game = config.build_game()

    AntShell(game).cmdloop()


if __name__ == "__main__":
    main()
