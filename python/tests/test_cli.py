"""Command-line front end."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from main import app

runner = CliRunner()

ONE_AWAY = "1,2,3,4,5,6,7,8,9,10,11,12,13,14,0,15"
UNSOLVABLE = "1 2 3 4 5 6 7 8 9 10 11 12 13 15 14 0"


def test_solve_prints_result() -> None:
    result = runner.invoke(app, ["solve", ONE_AWAY])
    assert result.exit_code == 0, result.output
    assert "solved" in result.output
    assert "right" in result.output


def test_solve_with_algorithm_and_preset() -> None:
    result = runner.invoke(
        app, ["solve", "1,2,3,4,5,6,7,8,9,10,11,12,13,14,0,15", "-a", "bidirectional"]
    )
    assert result.exit_code == 0, result.output
    assert "Bidirectional A*" in result.output

    spiral = "1,2,3,4,12,13,14,5,11,15,0,6,10,9,8,7"
    result = runner.invoke(app, ["solve", spiral, "--preset", "spiral", "-a", "greedy"])
    assert result.exit_code == 0, result.output
    assert "left" in result.output


def test_solve_unsolvable_exits_non_zero() -> None:
    result = runner.invoke(app, ["solve", UNSOLVABLE])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_solve_timeout_exits_non_zero() -> None:
    board = "5,1,2,3,9,6,7,4,13,10,11,8,0,14,15,12"
    result = runner.invoke(app, ["solve", board, "--timeout", "0"])
    assert result.exit_code == 1
    assert "timeout" in result.output


def test_solve_reads_config(tmp_path: Path) -> None:
    config = tmp_path / "solver.json"
    config.write_text(json.dumps({"greedy_iteration_cap": 1}))
    board = "5,1,2,3,9,6,7,4,13,10,11,8,0,14,15,12"
    result = runner.invoke(app, ["solve", board, "-a", "greedy", "-c", str(config)])
    assert result.exit_code == 1
    assert "iteration-limit" in result.output


def test_bad_board_is_an_error() -> None:
    result = runner.invoke(app, ["solve", "1,2,3"])
    assert result.exit_code == 2
    assert "Error" in result.output

    result = runner.invoke(app, ["check", "1,2,x"])
    assert result.exit_code == 2


def test_goal_and_preset_are_exclusive() -> None:
    result = runner.invoke(app, ["check", ONE_AWAY, "--goal", ONE_AWAY, "--preset", "spiral"])
    assert result.exit_code == 2


def test_unknown_preset_is_an_error() -> None:
    result = runner.invoke(app, ["shuffle", "--preset", "nope"])
    assert result.exit_code == 2
    assert "Unknown preset" in result.output


def test_check_reports_verdict_and_score() -> None:
    result = runner.invoke(app, ["check", ONE_AWAY])
    assert result.exit_code == 0
    assert "solvable" in result.output
    assert "Complexity score: 1" in result.output

    result = runner.invoke(app, ["check", UNSOLVABLE])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_shuffle_prints_a_board() -> None:
    result = runner.invoke(app, ["shuffle", "--moves", "10", "--seed", "3"])
    assert result.exit_code == 0
    last = result.output.strip().splitlines()[-1]
    assert sorted(int(v) for v in last.split(",")) == list(range(16))


def test_presets_lists_slugs() -> None:
    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    for slug in ("classic", "spiral", "inverted"):
        assert slug in result.output
