"""GamePlay sessions: clicks, keyboard moves, shuffles and win detection."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import HINT_TEXT, Solver
from backend.models.board import Board, Direction
from backend.models.config import GameConfig

SOLVED = ((1, 2, 3), (4, 5, 6), (7, 8, 0))


def _one_move_from_solved() -> GamePlay:
    return GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]))


# -- clicks -------------------------------------------------------------------


def test_click_on_adjacent_tile_moves_it() -> None:
    game = GamePlay()
    assert game.move_tile(1, 2)
    assert game.state.grid == ((1, 2, 3), (4, 5, 0), (7, 8, 6))
    assert game.moves == 1


def test_click_on_distant_tile_is_ignored() -> None:
    game = GamePlay()
    assert not game.move_tile(0, 0)
    assert game.state.grid == SOLVED
    assert game.moves == 0


def test_solving_move_wins() -> None:
    game = _one_move_from_solved()
    assert not game.is_won
    assert game.move_tile(2, 2)
    assert game.is_won
    assert game.progress == 100


def test_from_board_does_not_alias() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    game = GamePlay.from_board(board)
    game.move_tile(2, 2)
    assert board.tiles[2] == [7, 0, 8]


# -- keyboard -----------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, grid",
    [
        (Direction.DOWN, ((1, 2, 3), (4, 5, 0), (7, 8, 6))),
        (Direction.RIGHT, ((1, 2, 3), (4, 5, 6), (7, 0, 8))),
    ],
)
def test_direction_names_where_tile_slides(direction: Direction, grid: tuple) -> None:
    game = GamePlay()
    assert game.move(direction)
    assert game.state.grid == grid


@pytest.mark.parametrize("direction", [Direction.UP, Direction.LEFT])
def test_direction_with_no_tile_behind_blank(direction: Direction) -> None:
    game = GamePlay()
    assert not game.move(direction)
    assert game.state.grid == SOLVED


# -- shuffling ----------------------------------------------------------------


def test_shuffle_now_scrambles_with_config_length() -> None:
    game = GamePlay(GameConfig(shuffle_steps=30, seed=5))
    game.shuffle_now()

    assert not game.is_shuffling
    assert Solver.is_solvable(game.state.board)
    assert game.moves == 0


def test_shuffle_length_override() -> None:
    game = GamePlay(GameConfig(seed=1))
    game.shuffle_now(0)
    assert game.state.grid == SOLVED


def test_shuffle_resets_move_counter() -> None:
    game = GamePlay(GameConfig(seed=2))
    game.move_tile(1, 2)
    game.start_shuffle(4)
    assert game.moves == 0
    assert game.state.grid == SOLVED


def test_clicks_ignored_while_shuffling() -> None:
    game = GamePlay(GameConfig(seed=9))
    game.start_shuffle(10)
    er, ec = game.state.empty_pos

    assert not game.move_tile(er - 1, ec)
    assert not game.is_won


def test_animated_shuffle_drains_step_by_step() -> None:
    game = GamePlay(GameConfig(shuffle_steps=12, seed=4))
    game.start_shuffle()
    applied = 0
    while game.is_shuffling:
        applied += game.step_shuffle()
    assert applied == 12


def test_cancel_shuffle_allows_play() -> None:
    game = GamePlay(GameConfig(seed=11))
    game.start_shuffle(20)
    game.step_shuffle()
    game.cancel_shuffle()

    assert not game.is_shuffling
    er, ec = game.state.empty_pos
    target = (er - 1, ec) if er > 0 else (er + 1, ec)
    assert game.move_tile(*target)


def test_same_seed_same_session() -> None:
    config = GameConfig(seed=123)
    a, b = GamePlay(config), GamePlay(config)
    a.shuffle_now()
    b.shuffle_now()
    assert a.state.grid == b.state.grid


# -- queries ------------------------------------------------------------------


def test_hint_text() -> None:
    game = _one_move_from_solved()
    assert game.hint() == HINT_TEXT


def test_distance_and_progress() -> None:
    game = _one_move_from_solved()
    assert game.distance == 1
    assert game.progress == 94
