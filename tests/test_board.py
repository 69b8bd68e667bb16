import random

import pytest

from atelier.game2048.board import (
    BOARD_SIZE,
    BOARD_TILES,
    Board,
    Direction,
    add_tile,
    can_slide,
    new_board,
    slide,
)

BLOCKED = [[1, 2, 1, 2], [2, 1, 2, 1], [1, 2, 1, 2], [2, 1, 2, 1]]


def _random_board(rng):
    return Board([[rng.choice([0, 0, 1, 1, 2, 3]) for _ in range(4)] for _ in range(4)])


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


def _mirror(grid):
    return [row[::-1] for row in grid]


def test_slide_left_merges_pair():
    board = Board([[1, 1, 0, 0], [0] * 4, [0] * 4, [0] * 4])
    result = slide(board, Direction.LEFT)
    assert result.board.tiles[0] == [2, 0, 0, 0]
    assert result.points == 4
    assert result.moves.tiles[0] == [0, 1, 0, 0]


def test_each_tile_merges_once_per_slide():
    board = Board([[1, 1, 1, 1], [0] * 4, [0] * 4, [0] * 4])
    result = slide(board, Direction.LEFT)
    assert result.board.tiles[0] == [2, 2, 0, 0]
    assert result.board.tiles[1:] == [[0] * 4] * 3


def test_blocked_board_cannot_slide():
    board = Board([row[:] for row in BLOCKED])
    for direction in Direction:
        assert slide(board, direction) is None
    assert can_slide(board) is False


def test_slide_does_not_modify_input():
    rng = random.Random(3)
    board = _random_board(rng)
    before = board.copy()
    for direction in Direction:
        slide(board, direction)
    assert board == before


@pytest.mark.parametrize("seed", range(20))
def test_slide_conserves_tile_sum(seed):
    rng = random.Random(seed)
    board = _random_board(rng)
    total = sum(1 << v for row in board.tiles for v in row if v)
    for direction in Direction:
        result = slide(board, direction)
        if result is None:
            continue
        after = sum(1 << v for row in result.board.tiles for v in row if v)
        assert after == total
        assert any(v for row in result.moves.tiles for v in row) or result.points > 0


@pytest.mark.parametrize("seed", range(20))
def test_directions_are_mirrors_and_transposes(seed):
    board = _random_board(random.Random(seed))
    left = slide(Board(_mirror(board.tiles)), Direction.LEFT)
    right = slide(board, Direction.RIGHT)
    assert (left is None) == (right is None)
    if right is not None:
        assert right.board.tiles == _mirror(left.board.tiles)
        assert right.moves.tiles == _mirror(left.moves.tiles)
        assert right.points == left.points

    across = slide(Board(_transpose(board.tiles)), Direction.LEFT)
    up = slide(board, Direction.UP)
    assert (across is None) == (up is None)
    if up is not None:
        assert up.board.tiles == _transpose(across.board.tiles)
        assert up.points == across.points

    across_right = slide(Board(_transpose(board.tiles)), Direction.RIGHT)
    down = slide(board, Direction.DOWN)
    assert (across_right is None) == (down is None)
    if down is not None:
        assert down.board.tiles == _transpose(across_right.board.tiles)


@pytest.mark.parametrize("seed", range(10))
def test_new_board_has_two_twos(seed):
    board = new_board(random.Random(seed))
    values = [v for row in board.tiles for v in row]
    assert sorted(values) == [0] * (BOARD_TILES - 2) + [1, 1]
    assert can_slide(board)


def test_add_tile_on_full_board_changes_nothing():
    board = Board([row[:] for row in BLOCKED])
    assert add_tile(board, random.Random(1), False) is None
    assert board.tiles == BLOCKED


def test_add_tile_fills_an_empty_cell():
    rng = random.Random(5)
    board = Board()
    for _ in range(BOARD_TILES):
        x, y = add_tile(board, rng, False)
        assert board.tiles[y][x] in (1, 2)
    assert board.empty_cells() == []


def test_add_tile_only_two():
    rng = random.Random(9)
    board = Board()
    while board.empty_cells():
        add_tile(board, rng, True)
    assert all(v == 1 for row in board.tiles for v in row)


def test_empty_cells_row_major():
    tiles = [[1] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    tiles[0][2] = 0
    tiles[3][1] = 0
    assert Board(tiles).empty_cells() == [(2, 0), (1, 3)]


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.tiles[0][0] = 5
    assert board.tiles[0][0] == 0


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Board([[0, 0], [0, 0]])