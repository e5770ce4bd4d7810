"""Board model and configuration."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Direction, goal_position
from backend.models.config import GameConfig


def test_solved_layout() -> None:
    board = Board.solved()
    assert board.tiles == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert board.blank_pos == (2, 2)
    assert board.is_solved()


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat([1, 2, 3, 0, 4, 5, 6, 7, 8])
    assert board.blank_pos == (1, 0)
    assert not board.is_solved()


def test_from_rows_matches_from_flat() -> None:
    board = Board.from_rows([[4, 1, 3], [7, 2, 6], [0, 5, 8]])
    assert board == Board.from_flat([4, 1, 3, 7, 2, 6, 0, 5, 8])


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
    ids=["short", "long", "duplicate", "no-blank"],
)
def test_from_flat_rejects_bad_layouts(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(flat)


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        Board.from_rows([[1, 2, 3], [4, 5], [6, 7, 8, 0]])


def test_snapshot_is_immutable_copy() -> None:
    board = Board.solved()
    snap = board.snapshot()
    board.tiles[0][0] = 9
    assert snap[0][0] == 1
    assert isinstance(snap, tuple) and isinstance(snap[0], tuple)


def test_copy_is_independent() -> None:
    board = Board.solved()
    clone = board.copy()
    clone.tiles[2][1], clone.tiles[2][2] = 0, 8
    assert board.is_solved()


def test_tile_correctness() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(2, 2)
    assert not board.is_tile_correct(2, 1)


@pytest.mark.parametrize(
    "value, pos", [(1, (0, 0)), (3, (0, 2)), (4, (1, 0)), (8, (2, 1))]
)
def test_goal_position(value: int, pos: tuple[int, int]) -> None:
    assert goal_position(value) == pos


def test_direction_order_and_offsets() -> None:
    assert list(Direction) == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]
    for d in Direction:
        dr, dc = d.offset
        odr, odc = d.opposite.offset
        assert (dr + odr, dc + odc) == (0, 0)


# -- config -------------------------------------------------------------------


def test_config_defaults() -> None:
    config = GameConfig()
    assert config.shuffle_steps == 100
    assert config.step_interval_ms == 50
    assert config.seed is None


@pytest.mark.parametrize(
    "kwargs", [{"shuffle_steps": -1}, {"step_interval_ms": -5}]
)
def test_config_rejects_negative_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_seeded_rng_is_reproducible() -> None:
    config = GameConfig(seed=7)
    a, b = config.make_rng(), config.make_rng()
    assert [a.randrange(4) for _ in range(20)] == [b.randrange(4) for _ in range(20)]
