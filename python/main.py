#!/usr/bin/env python3
"""Sliding puzzle solver.

Usage::

    python main.py solve "5,1,2,3 9,6,7,4 13,10,11,8 0,14,15,12"
    python main.py solve BOARD -a bidirectional --preset spiral
    python main.py check BOARD --goal "1,2,3,...,0"
    python main.py shuffle --moves 40 --seed 7
    python main.py presets
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilesearch.config import DEFAULT_SETTINGS, SolverSettings  # noqa: E402
from tilesearch.engine.gamegenerator import GameGenerator  # noqa: E402
from tilesearch.engine.gamesolver import Solver  # noqa: E402
from tilesearch.frontend.cli.input_handler import parse_board, resolve_goal  # noqa: E402
from tilesearch.frontend.cli.rich import app as rich_app  # noqa: E402
from tilesearch.models import Algorithm, Board  # noqa: E402

console = rich_app.console


# -- helpers ------------------------------------------------------------------


def _fail(message: str) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {message}")
    return typer.Exit(code=2)


def _boards(board: str, goal: Optional[str], preset: Optional[str]) -> tuple[Board, Board]:
    try:
        return parse_board(board), resolve_goal(goal, preset)
    except (ValueError, KeyError) as exc:
        raise _fail(exc.args[0] if exc.args else str(exc)) from exc


def _goal_only(goal: Optional[str], preset: Optional[str]) -> Board:
    try:
        return resolve_goal(goal, preset)
    except (ValueError, KeyError) as exc:
        raise _fail(exc.args[0] if exc.args else str(exc)) from exc


def _settings(config: Optional[Path]) -> SolverSettings:
    if config is None:
        return DEFAULT_SETTINGS
    try:
        return SolverSettings.from_file(config)
    except (OSError, ValueError, TypeError) as exc:
        raise _fail(f"could not load {config}: {exc}") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)

GOAL_OPTION = typer.Option(
    None, "-g", "--goal", help="Goal board (16 numbers). Defaults to classic order."
)
PRESET_OPTION = typer.Option(
    None, "-p", "--preset", help="Use a preset goal by slug (see `presets`)."
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log search progress."),
) -> None:
    """Sliding Puzzle Solver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def solve(
    board: str = typer.Argument(..., help="Start board, 16 numbers, 0 = blank."),
    algorithm: Algorithm = typer.Option(
        Algorithm.ITERATIVE_DEEPENING, "-a", "--algorithm", help="Search strategy."
    ),
    goal: Optional[str] = GOAL_OPTION,
    preset: Optional[str] = PRESET_OPTION,
    timeout: Optional[float] = typer.Option(
        None, "-t", "--timeout", min=0.0, help="Stop after this many seconds."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="JSON file with solver tuning overrides."
    ),
    animate: bool = typer.Option(False, "--animate", help="Play the solution back."),
) -> None:
    """Find a move sequence from BOARD to the goal."""
    start, target = _boards(board, goal, preset)
    settings = _settings(config)

    rich_app.show_boards(start, target)
    outcome = Solver.run(start, algorithm, target, settings=settings, timeout=timeout)
    if animate and outcome.result is not None:
        rich_app.animate(outcome.result, target)
    rich_app.show_outcome(outcome)

    if not outcome.solved:
        raise typer.Exit(code=1)


@app.command()
def check(
    board: str = typer.Argument(..., help="Board to rate, 16 numbers, 0 = blank."),
    goal: Optional[str] = GOAL_OPTION,
    preset: Optional[str] = PRESET_OPTION,
) -> None:
    """Report solvability and the complexity score of BOARD."""
    start, target = _boards(board, goal, preset)
    solvable = Solver.is_solvable(start, target)
    score = Solver.complexity_score(start, target)

    rich_app.show_boards(start, target)
    verdict = "[bold green]solvable[/bold green]" if solvable else "[bold red]unsolvable[/bold red]"
    console.print(f"  Verdict: {verdict}")
    console.print(f"  Complexity score: [bold yellow]{score}[/bold yellow]")
    if not solvable:
        raise typer.Exit(code=1)


@app.command()
def shuffle(
    goal: Optional[str] = GOAL_OPTION,
    preset: Optional[str] = PRESET_OPTION,
    moves: int = typer.Option(80, "-m", "--moves", min=1, help="Random blank moves."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print a random board that is solvable toward the goal."""
    target = _goal_only(goal, preset)
    board = GameGenerator.generate(target, moves=moves, seed=seed)
    console.print(rich_app.render_board(board, target))
    console.print(str(board))


@app.command()
def presets() -> None:
    """List the preset goal patterns."""
    console.print(rich_app.render_presets())


if __name__ == "__main__":
    app()
