"""Rich terminal output — boards, results, and step-by-step playback.

Uses the ``rich`` library for styled output of whatever the engine
returns; it contains no search logic of its own.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesearch.engine.gameplay import GamePlay
from tilesearch.models.board import GRID_SIZE, Board
from tilesearch.models.node import SearchOutcome, SearchStatus, SolverResult
from tilesearch.models.presets import PRESETS

console = Console()

_STATUS_STYLE = {
    SearchStatus.SOLVED: "bold green",
    SearchStatus.UNSOLVABLE: "bold red",
    SearchStatus.EXHAUSTED: "yellow",
    SearchStatus.ITERATION_LIMIT: "yellow",
    SearchStatus.TIMEOUT: "yellow",
    SearchStatus.CANCELLED: "dim",
}

_STATUS_ADVICE = {
    SearchStatus.UNSOLVABLE: "This board can never reach the goal.",
    SearchStatus.EXHAUSTED: "The search space ran out without reaching the goal.",
    SearchStatus.ITERATION_LIMIT: "Expansion cap reached; try another algorithm.",
    SearchStatus.TIMEOUT: "Time budget ran out; try a faster algorithm.",
    SearchStatus.CANCELLED: "The search was cancelled.",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board | None = None, highlight: int | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles already in their *goal* cell are green; *highlight* marks the
    cell the blank just left.
    """
    width = 2
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_SIZE):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            idx = r * GRID_SIZE + c
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif idx == highlight:
                cells.append(f"[bold yellow]{val:>{width}}[/bold yellow]")
            elif goal is not None and board.is_tile_correct(idx, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_outcome(outcome: SearchOutcome) -> Panel:
    """Summary panel for a finished search."""
    stats = Table.grid(padding=(0, 2))
    stats.add_column(style="dim")
    stats.add_column(style="bold")
    stats.add_row("Algorithm", outcome.algorithm_name)
    stats.add_row(
        "Status",
        Text(outcome.status.value, style=_STATUS_STYLE[outcome.status]),
    )
    if outcome.result is not None:
        stats.add_row("Steps", str(outcome.result.steps))
    stats.add_row("Nodes explored", f"{outcome.nodes_explored:,}")
    stats.add_row("Time", _format_time(outcome.time_taken))

    body: list = [stats]
    advice = _STATUS_ADVICE.get(outcome.status)
    if advice:
        body.extend([Text(""), Text(advice, style="italic")])

    return Panel(
        Group(*body),
        title="[bold cyan]Search Result[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )


def render_moves(result: SolverResult) -> Text:
    """One line listing the blank's moves, e.g. ``up up left``."""
    text = Text()
    for i, direction in enumerate(result.moves):
        if i:
            text.append(" ")
        text.append(direction.value, style="cyan" if i % 2 == 0 else "bright_cyan")
    if not result.moves:
        text.append("(already at the goal)", style="dim")
    return text


def render_presets() -> Table:
    table = Table(title="Preset goals", box=rich.box.SIMPLE_HEAVY)
    table.add_column("Slug", style="bold cyan")
    table.add_column("Name")
    table.add_column("Tiles", style="dim")
    for preset in PRESETS:
        table.add_row(preset.slug, preset.name, str(preset.goal))
    return table


# -- screens ------------------------------------------------------------------


def show_boards(start: Board, goal: Board) -> None:
    grid = Table.grid(padding=(0, 4))
    grid.add_row(Text("Start", style="bold"), Text("Goal", style="bold"))
    grid.add_row(render_board(start, goal), render_board(goal, goal))
    console.print(Align.center(grid))


def show_outcome(outcome: SearchOutcome) -> None:
    console.print(Align.center(render_outcome(outcome)))
    if outcome.result is not None:
        console.print(Align.center(render_moves(outcome.result)))


def animate(result: SolverResult, goal: Board, delay: float = 0.15) -> None:
    """Replay the path one move at a time."""
    start = result.path[0].board
    game = GamePlay(start, goal)
    total = result.steps
    for i, node in enumerate(result.path[1:], 1):
        prev_blank = game.board.blank_index
        if not game.move(node.direction):
            raise RuntimeError(f"Move {i} ({node.direction.value}) is not legal.")
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i}/{total} ", style="bold cyan")
        progress.append(f"({node.direction.value})", style="dim")

        panel = Panel(
            Align.center(render_board(game.board, goal, highlight=prev_blank)),
            title=f"[bold cyan]{result.algorithm_name}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        time.sleep(delay)

    if game.is_won:
        console.print(Align.center(Text(f"Solved in {total} moves!", style="bold green")))
