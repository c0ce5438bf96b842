#!/usr/bin/env python3
"""Robot Grid: reach the target with eight single-use moves.

Usage::

    python main.py                          # Rich terminal, A1 -> C3
    python main.py --start B2 --end D4      # pick the endpoints
    python main.py --seed 7                 # random endpoints
    python main.py --start A1 --end C2 --plan   # print the planner's moves
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator.generator import DEFAULT_END, DEFAULT_START  # noqa: E402
from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.models.errors import NoSolution, RobotGridError  # noqa: E402
from backend.models.grid import Heading  # noqa: E402

_RUNNER = "frontend.cli.rich.app"


class HeadingChoice(StrEnum):
    east = "east"
    north = "north"
    west = "west"
    south = "south"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _build_game(
    start: Optional[str],
    end: Optional[str],
    heading: Heading,
    seed: Optional[int],
) -> GamePlay:
    if (start is None) != (end is None):
        raise typer.BadParameter("--start and --end must be given together.")
    try:
        if start is not None and end is not None:
            return GamePlay.configure(start, end, heading)
        if seed is not None:
            return GamePlay.random(seed=seed, heading=heading)
        return GamePlay.configure(DEFAULT_START, DEFAULT_END, heading)
    except RobotGridError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_plan(game: GamePlay) -> None:
    state = game.state
    print(
        f"\n  {state.start.label} -> {state.end.label}, "
        f"facing {state.heading.name.title()}"
    )
    try:
        plan = game.solve()
    except NoSolution as exc:
        print(f"  {exc}\n")
        raise typer.Exit(code=1)

    if not plan:
        print("  Already at the target.\n")
        return

    for i, _ in enumerate(game.play(plan), 1):
        print(f"  {i:>2}. {game.state.log[-1]}")
    print(f"\n  Reached {game.state.end.label} in {len(plan)} moves.\n")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    start: Optional[str] = typer.Option(
        None, "--start",
        help="Start cell, e.g. A1.",
    ),
    end: Optional[str] = typer.Option(
        None, "--end",
        help="Target cell, e.g. C3.",
    ),
    heading: HeadingChoice = typer.Option(
        HeadingChoice.north, "--heading",
        case_sensitive=False,
        help="Initial heading.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Pick random start/target cells from this seed.",
    ),
    plan: bool = typer.Option(
        False, "--plan",
        help="Print the planned moves and the resulting walk, then exit.",
    ),
    delay: float = typer.Option(
        0.6, "--delay",
        min=0.0, envvar="ROBOT_GRID_DELAY",
        help="Seconds between moves when auto-solving.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False, envvar="ROBOT_GRID_LOG_LEVEL",
        help="Engine log verbosity.",
    ),
) -> None:
    """Robot Grid."""
    _setup_logging(log_level)
    game = _build_game(start, end, Heading[heading.upper()], seed)

    if plan:
        _print_plan(game)
        return

    mod = importlib.import_module(_RUNNER)
    mod.run(game, delay=delay)


if __name__ == "__main__":
    app()
