"""Rich terminal frontend: grid, move list, log and goal banner.

Uses the ``rich`` library for styled output and the shared single-key
input handler.  All game rules live in the backend; this module only
draws the session and forwards key presses to it.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.models.errors import NoSolution, RobotGridError
from backend.models.grid import GRID_SIZE, Heading, Position
from backend.models.moves import MoveKind
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

BANNER_SECONDS = 3.0

_MOVE_KEYS: dict[str, MoveKind] = {str(i): kind for i, kind in enumerate(MoveKind, 1)}

_ARROW_MOVES: dict[str, MoveKind] = {
    "up": MoveKind.FORWARD_1,
    "down": MoveKind.BACKWARD_1,
    "left": MoveKind.ROTATE_90_CCW,
    "right": MoveKind.ROTATE_90_CW,
}

_ROBOT: dict[Heading, str] = {
    Heading.EAST: "→",
    Heading.NORTH: "↑",
    Heading.WEST: "←",
    Heading.SOUTH: "↓",
}


class _QuitRequested(Exception):
    """Quit pressed somewhere below the main loop."""


class _Banner:
    """Goal banner that dismisses itself after ``BANNER_SECONDS``."""

    def __init__(self) -> None:
        self._until = 0.0

    def show(self, _state: GameState | None = None) -> None:
        self._until = time.monotonic() + BANNER_SECONDS

    def hide(self) -> None:
        self._until = 0.0

    @property
    def remaining(self) -> float:
        return max(0.0, self._until - time.monotonic())


# -- rendering ----------------------------------------------------------------


def _render_grid(state: GameState) -> Table:
    """Return a Rich Table of the grid, row 4 on top like a chess board."""
    table = Table(
        show_header=True,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for x in range(GRID_SIZE):
        table.add_column(chr(ord("A") + x), justify="center", width=3)

    for y in reversed(range(GRID_SIZE)):
        cells: list[str] = [str(y + 1)]
        for x in range(GRID_SIZE):
            cell = Position(x, y)
            if cell == state.position:
                cells.append(f"[bold white on blue]{_ROBOT[state.heading]}[/]")
            elif cell == state.end:
                cells.append("[bold red]◎[/]")
            elif cell == state.start:
                cells.append("[green]·[/]")
            else:
                cells.append("[dim]·[/]")
        table.add_row(*cells)

    return table


def _render_moves(state: GameState) -> Table:
    table = Table(box=rich.box.SIMPLE, show_header=False, padding=(0, 1))
    table.add_column(justify="right", style="bold cyan")
    table.add_column()
    for key, kind in _MOVE_KEYS.items():
        if state.is_used(kind):
            table.add_row(f"[dim]{key}[/dim]", f"[dim strike]{kind.label}[/]")
        else:
            table.add_row(key, kind.label)
    return table


def _render_log(state: GameState) -> Text:
    text = Text()
    if not state.log:
        text.append("No moves yet.", style="dim")
    for i, entry in enumerate(state.log, 1):
        if i > 1:
            text.append("\n")
        text.append(f"{i}. ", style="dim")
        text.append(entry)
    return text


def _draw(game: GamePlay, status: str = "", banner: bool = False) -> None:
    console.clear()
    state = game.state

    info = Text()
    info.append("  Start ", style="dim")
    info.append(state.start.label, style="bold green")
    info.append("   Target ", style="dim")
    info.append(state.end.label, style="bold red")
    info.append("   Facing ", style="dim")
    info.append(state.heading.name.title(), style="bold yellow")

    board = Panel(
        Group(Align.center(_render_grid(state)), Align.center(info)),
        title="[bold cyan]Robot Grid[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    moves = Panel(_render_moves(state), title="Moves", border_style="cyan")
    log = Panel(_render_log(state), title="Log", border_style="dim", width=36)

    controls = Text()
    for key, label in (
        ("1-8", "move"),
        ("↑↓←→", "step/turn"),
        ("U", "undo"),
        ("R", "reset"),
        ("G", "random"),
        ("C", "heading"),
        ("E", "edit"),
        ("N", "hint"),
        ("V", "solve"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")

    console.print()
    console.print(Align.center(Columns([board, moves, log])))
    if banner:
        console.print(
            Align.center(
                Panel(
                    Text("★ Destination reached! ★", style="bold white"),
                    style="on green",
                    border_style="bold green",
                )
            )
        )
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- actions ------------------------------------------------------------------


def _apply(game: GamePlay, kind: MoveKind) -> str:
    game.move(kind)
    return f"[cyan]{game.state.log[-1]}[/cyan]"


def _apply_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already at the target![/green]"
    hint = game.hint()
    if hint is None:
        return "[yellow]No plan reaches the target with the moves left.[/yellow]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] {game.state.log[-1]}"


def _edit_endpoints(game: GamePlay) -> str:
    console.print()
    start = console.input("  [bold green]Start[/bold green] cell (e.g. A1): ")
    end = console.input("  [bold red]Target[/bold red] cell (e.g. C3): ")
    game.reconfigure(start.strip(), end.strip())
    return f"[yellow]New game {game.state.start.label} → {game.state.end.label}[/yellow]"


def _auto_solve(game: GamePlay, banner: _Banner, delay: float) -> str:
    """Animate the planner's moves.  Any key interrupts playback; Q also quits."""
    if game.is_won:
        return "[green]Already at the target![/green]"
    try:
        plan = game.solve()
    except NoSolution as exc:
        return f"[red]{exc}[/red]"

    playback = game.play(plan)
    while not playback.done:
        _draw(game, f"[cyan]Solving…[/cyan] {len(playback.remaining)} moves left")
        key = get_key_timeout(delay)
        if key is not None:
            playback.cancel()
            if key == "quit":
                raise _QuitRequested
            status = "" if key == "solve" else _handle_key(game, key, banner, delay)
            return status or "[yellow]Playback interrupted.[/yellow]"
        playback.step()

    return f"[bold green]Reached {game.state.end.label} in {len(plan)} moves![/bold green]"


def _handle_key(game: GamePlay, key: str, banner: _Banner, delay: float) -> str:
    """Dispatch one key press; returns a status line (may be empty)."""
    try:
        if key in _MOVE_KEYS:
            return _apply(game, _MOVE_KEYS[key])
        if key in _ARROW_MOVES:
            return _apply(game, _ARROW_MOVES[key])
        if key == "undo":
            game.undo()
            return "[yellow]Undone.[/yellow]"
        if key == "reset":
            banner.hide()
            game.reset()
            return "[yellow]Reset.[/yellow]"
        if key == "random":
            banner.hide()
            game.randomize()
            return f"[yellow]New game {game.state.start.label} → {game.state.end.label}[/yellow]"
        if key == "heading":
            game.turn_start_heading()
            return f"Facing {game.state.heading.name.title()}"
        if key == "edit":
            banner.hide()
            return _edit_endpoints(game)
        if key == "hint":
            return _apply_hint(game)
        if key == "solve":
            return _auto_solve(game, banner, delay)
    except RobotGridError as exc:
        return f"[red]{exc}[/red]"
    return ""


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay, delay: float) -> None:
    banner = _Banner()
    game.on_goal(banner.show)
    status = ""

    while True:
        _draw(game, status, banner=banner.remaining > 0)
        if banner.remaining > 0:
            key = get_key_timeout(banner.remaining)
            if key is None:
                # Banner timed out: redraw without it, keep the status.
                continue
        else:
            key = get_key()

        if key == "quit":
            break
        try:
            status = _handle_key(game, key, banner, delay)
        except _QuitRequested:
            break

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


# -- public entry point -------------------------------------------------------


def run(game: GamePlay, delay: float = 0.6) -> None:
    """Launch the Rich UI on *game*."""
    _play(game, delay)
