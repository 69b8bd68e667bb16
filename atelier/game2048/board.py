"""The 2048 board: tiles stored as powers of two, sliding and merging rules."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "BOARD_SIZE",
    "BOARD_TILES",
    "Direction",
    "Board",
    "Stats",
    "SlideResult",
    "new_board",
    "add_tile",
    "slide",
    "can_slide",
]

BOARD_SIZE = 4
BOARD_TILES = BOARD_SIZE * BOARD_SIZE

Grid = list[list[int]]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def _empty_grid() -> Grid:
    return [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """A 4x4 grid; each cell holds the tile's power of two, 0 when empty."""

    tiles: Grid = field(default_factory=_empty_grid)

    def __post_init__(self) -> None:
        if len(self.tiles) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.tiles):
            raise ValueError(f"a board has {BOARD_SIZE}x{BOARD_SIZE} tiles")

    def copy(self) -> Board:
        return Board([row[:] for row in self.tiles])

    def empty_cells(self) -> list[tuple[int, int]]:
        """Coordinates ``(x, y)`` of the empty cells, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.tiles)
            for x, value in enumerate(row)
            if value == 0
        ]


@dataclass
class Stats:
    """Scores and flags shown next to the board."""

    score: int = 0
    points: int = 0
    max_score: int = 0
    game_over: bool = False
    auto_save: bool = False


@dataclass(frozen=True)
class SlideResult:
    """Outcome of a slide: the new board, each moving tile's distance, points won."""

    board: Board
    moves: Board
    points: int


def new_board(rng: random.Random | None = None) -> Board:
    """An empty board with two '2' tiles placed at random."""
    rng = rng or random.Random()
    board = Board()
    add_tile(board, rng, True)
    add_tile(board, rng, True)
    return board


def add_tile(
    board: Board, rng: random.Random | None = None, only_two: bool = False
) -> tuple[int, int] | None:
    """Put a tile on a random empty cell; return its ``(x, y)`` or None if full.

    The tile is a '2', or when ``only_two`` is false a '4' one time in ten.
    """
    rng = rng or random.Random()
    value = 1 if only_two else (2 if rng.randrange(10) == 1 else 1)
    empty = board.empty_cells()
    if not empty:
        return None
    x, y = empty[rng.randrange(len(empty))]
    board.tiles[y][x] = value
    return x, y


def _rotate_left(grid: Grid) -> Grid:
    n = BOARD_SIZE
    return [[grid[c][n - 1 - r] for c in range(n)] for r in range(n)]


def _rotate_right(grid: Grid) -> Grid:
    n = BOARD_SIZE
    return [[grid[n - 1 - c][r] for c in range(n)] for r in range(n)]


def _mirror(grid: Grid) -> Grid:
    return [row[::-1] for row in grid]


_TO_LEFT = {
    Direction.LEFT: (lambda g: g, lambda g: g),
    Direction.RIGHT: (_mirror, _mirror),
    Direction.UP: (_rotate_left, _rotate_right),
    Direction.DOWN: (_rotate_right, _rotate_left),
}


def _next_any(row: list[int], start: int) -> int | None:
    return next((i for i in range(start, BOARD_SIZE) if row[i] > 0), None)


def _next_same(row: list[int], start: int) -> int | None:
    value = row[start - 1]
    for i in range(start, BOARD_SIZE):
        if row[i] == value:
            return i
        if row[i] != 0:
            return None
    return None


def _slide_left(grid: Grid) -> tuple[int, Grid] | None:
    """Slide every row left in place; return points and moves, or None."""
    moves = _empty_grid()
    points = 0
    slid = False
    for y, row in enumerate(grid):
        for x in range(BOARD_SIZE - 1):
            if row[x] == 0:
                source = _next_any(row, x + 1)
                if source is None:
                    break
                slid = True
                row[x], row[source] = row[source], 0
                moves[y][source] = source - x
            partner = _next_same(row, x + 1)
            if partner is None:
                continue
            slid = True
            row[x] += 1
            row[partner] = 0
            points += 1 << row[x]
            moves[y][partner] = partner - x
    return (points, moves) if slid else None


def slide(board: Board, direction: Direction) -> SlideResult | None:
    """Slide ``board`` toward ``direction``; None if no tile can move."""
    forward, back = _TO_LEFT[direction]
    grid = forward([row[:] for row in board.tiles])
    outcome = _slide_left(grid)
    if outcome is None:
        return None
    points, moves = outcome
    return SlideResult(Board(back(grid)), Board(back(moves)), points)


def can_slide(board: Board) -> bool:
    """Whether any direction still moves a tile."""
    return any(slide(board, direction) is not None for direction in Direction)