"""Launcher options, key mapping and terminal rendering."""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from typer.testing import CliRunner

import main
from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.config import GameConfig
from frontend.cli import actions
from frontend.cli.input_handler import resolve, tile_from_key

runner = CliRunner()


# -- launcher -----------------------------------------------------------------


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, GameConfig]]:
    """Replace frontend modules with a stub that records its config."""
    calls: list[tuple[str, GameConfig]] = []

    def fake_loader(frontend: main.Frontend):
        module = main._RUNNERS[frontend]
        return lambda config: calls.append((module, config))

    monkeypatch.setattr(main, "_load_runner", fake_loader)
    return calls


def test_launch_passes_config(launched: list) -> None:
    result = runner.invoke(
        main.app, ["-f", "rich", "-n", "40", "-i", "0", "--seed", "3"]
    )

    assert result.exit_code == 0, result.output
    assert launched == [
        (
            "frontend.cli.rich.app",
            GameConfig(shuffle_steps=40, step_interval_ms=0, seed=3),
        )
    ]


def test_launch_defaults(launched: list) -> None:
    result = runner.invoke(main.app, ["--frontend", "pyqt"])

    assert result.exit_code == 0, result.output
    assert launched == [("frontend.gui.pyqt.app", GameConfig())]


def test_negative_steps_rejected(launched: list) -> None:
    result = runner.invoke(main.app, ["-f", "vanilla", "-n", "-1"])
    assert result.exit_code != 0
    assert launched == []


def test_unknown_frontend_rejected(launched: list) -> None:
    result = runner.invoke(main.app, ["-f", "curses"])
    assert result.exit_code != 0
    assert launched == []


def test_menu_launches_choice_then_quits(launched: list) -> None:
    result = runner.invoke(main.app, [], input="2\n0\n")

    assert result.exit_code == 0, result.output
    assert [name for name, _ in launched] == ["frontend.cli.rich.app"]
    assert "Goodbye" in result.output


# -- key mapping --------------------------------------------------------------


@pytest.mark.parametrize(
    "ch, action",
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("x", "shuffle"),
        ("R", "shuffle"),
        ("h", "hint"),
        ("?", "hint"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("\r", "enter"),
        ("5", "5"),
        ("\x07", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action


def test_tile_from_key() -> None:
    assert tile_from_key("3") == 3
    assert tile_from_key("9") is None
    assert tile_from_key("0") is None
    assert tile_from_key("up") is None


def test_digit_key_moves_that_tile() -> None:
    game = GamePlay()
    assert actions.apply_move_key(game, "6")
    assert game.state.grid == ((1, 2, 3), (4, 5, 0), (7, 8, 6))
    assert not actions.apply_move_key(game, "1")


def test_arrow_key_moves_tile() -> None:
    game = GamePlay()
    assert actions.apply_move_key(game, "right")
    assert game.state.empty_pos == (2, 1)


@pytest.mark.parametrize(
    "percent, bar",
    [
        (100, "[####################] 100%"),
        (50, "[##########----------] 50%"),
        (0, "[--------------------] 0%"),
        (-25, "[--------------------] -25%"),
    ],
)
def test_format_progress(percent: int, bar: str) -> None:
    assert actions.format_progress(percent) == bar


# -- rendering ----------------------------------------------------------------


def test_vanilla_board_rendering() -> None:
    from frontend.cli.vanilla.app import _render_board

    text = _render_board(Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]))
    lines = text.splitlines()

    assert len(lines) == 7
    assert "·" in lines[5]
    assert "8" in lines[5]


def test_rich_board_rendering() -> None:
    from frontend.cli.rich.app import _render_board, _render_progress

    buf = io.StringIO()
    console = Console(file=buf, width=60, color_system=None)
    table = _render_board(Board.solved())
    console.print(table)
    console.print(_render_progress(-25))

    assert table.row_count == 3
    out = buf.getvalue()
    for digit in "12345678":
        assert digit in out
    assert "-25%" in out
