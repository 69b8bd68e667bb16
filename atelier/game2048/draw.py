"""Curses drawing of the 2048 board, the score panel and sliding animations."""

from __future__ import annotations

import curses
import time

from atelier.game2048.board import BOARD_SIZE, Board, Direction, Stats

__all__ = [
    "TILE_WIDTH",
    "TILE_HEIGHT",
    "Screen",
    "tile_label",
    "sliding_tiles",
]

TILE_WIDTH = 10
TILE_HEIGHT = 5

BOARD_WIDTH = TILE_WIDTH * BOARD_SIZE + 2
BOARD_HEIGHT = TILE_HEIGHT * BOARD_SIZE + 2
STATS_WIDTH = 13
STATS_HEIGHT = BOARD_HEIGHT - 2

TOO_SMALL = "TERMINAL TOO SMALL"

_TILE_LABELS = (
    "        ",
    "   2    ", "   4    ", "   8    ", "   16   ",
    "   32   ", "   64   ", "  128   ", "  256   ",
    "  512   ", "  1024  ", "  2048  ", "  4096  ",
    "  8192  ", " 16384  ", " 32768  ", " 65536  ",
    " 131072 ",
)
_EMPTY_TILE = " " * TILE_WIDTH

# (color pair, bold) for each tile value
_TILE_STYLE = (
    (1, False), (1, False),
    (2, False), (3, False), (4, False),
    (5, False), (6, False), (7, False),
    (1, True), (2, True),
    (3, True), (4, True),
    (5, True), (6, True),
    (7, True),
    (1, True),
    (2, True),
    (3, True),
)

_COLORS = (
    curses.COLOR_WHITE,
    curses.COLOR_YELLOW,
    curses.COLOR_GREEN,
    curses.COLOR_BLUE,
    curses.COLOR_MAGENTA,
    curses.COLOR_CYAN,
    curses.COLOR_RED,
)

TICK_TIME = 0.03
END_MOVE_TIME = 0.006
ANIMATION_TICKS = 5


def tile_label(value: int) -> str:
    """The eight-character label shown inside a tile of power ``value``."""
    if not 0 <= value < len(_TILE_LABELS):
        raise ValueError(f"no tile for power {value}")
    return _TILE_LABELS[value]


_STEP = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-2, 0),
    Direction.RIGHT: (2, 0),
}

_ORDER = {
    Direction.LEFT: (lambda t: t[0], False),
    Direction.RIGHT: (lambda t: t[0], True),
    Direction.UP: (lambda t: t[1], False),
    Direction.DOWN: (lambda t: t[1], True),
}


def sliding_tiles(
    board: Board, moves: Board, direction: Direction
) -> list[tuple[int, int, int, int, int]]:
    """Tiles that move, as ``(x, y, dx, dy, value)`` in window coordinates.

    ``dx`` and ``dy`` are the offsets per animation tick. Tiles are ordered
    so that the one leading in ``direction`` comes first.
    """
    sx, sy = _STEP[direction]
    tiles = [
        (x * TILE_WIDTH + 1, y * TILE_HEIGHT + 1, sx * step, sy * step, board.tiles[y][x])
        for y, row in enumerate(moves.tiles)
        for x, step in enumerate(row)
        if step
    ]
    key, reverse = _ORDER[direction]
    return sorted(tiles, key=key, reverse=reverse)


def _layout(height: int, width: int) -> tuple[tuple[int, int], tuple[int, int]] | None:
    """Top-left corners of the board and stats windows, or None if too small."""
    if BOARD_HEIGHT > height or BOARD_WIDTH > width:
        return None
    board_top = (height - BOARD_HEIGHT) // 2
    if BOARD_WIDTH + STATS_WIDTH < width:
        board_left = (width - BOARD_WIDTH - STATS_WIDTH) // 2
    else:
        board_left = 0
    return (board_top, board_left), (board_top + 1, board_left + BOARD_WIDTH + 1)


class Screen:
    """The game's windows on a curses screen."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        self.board_win = None
        self.stats_win = None
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.set_escdelay(0)
        stdscr.keypad(True)
        if curses.has_colors():
            for pair, color in enumerate(_COLORS, start=1):
                curses.init_pair(pair, color, curses.COLOR_BLACK)
        self._tile_attrs = [
            curses.color_pair(pair) | (curses.A_BOLD if bold else 0)
            for pair, bold in _TILE_STYLE
        ]

    def init_windows(self) -> bool:
        """(Re)create the windows; False when the terminal is too small."""
        self.board_win = None
        self.stats_win = None
        self.stdscr.clear()
        self.stdscr.refresh()
        height, width = self.stdscr.getmaxyx()
        layout = _layout(height, width)
        if layout is None:
            return False
        (board_top, board_left), (stats_top, stats_left) = layout
        self.board_win = curses.newwin(BOARD_HEIGHT, BOARD_WIDTH, board_top, board_left)
        self.stats_win = curses.newwin(STATS_HEIGHT, STATS_WIDTH, stats_top, stats_left)
        self.board_win.attrset(curses.color_pair(1))
        self.board_win.border()
        return True

    def print_too_small(self) -> None:
        height, width = self.stdscr.getmaxyx()
        x = max((width - len(TOO_SMALL)) // 2, 0)
        try:
            self.stdscr.addstr(height // 2, x, TOO_SMALL)
        except curses.error:
            pass
        self.stdscr.refresh()

    def draw(self, board: Board | None, stats: Stats | None) -> None:
        """Draw the board, the stats, or both; either may be None."""
        if board is not None:
            self._draw_board(board)
            if stats is not None and stats.game_over:
                self.board_win.attron(curses.A_BOLD | curses.color_pair(1))
                self.board_win.addstr(
                    TILE_HEIGHT * 2, (TILE_WIDTH * BOARD_SIZE - 8) // 2, "GAME OVER"
                )
                self.board_win.attroff(curses.A_BOLD)
            self.board_win.refresh()
        if stats is not None:
            self._draw_stats(stats)
            self.stats_win.refresh()

    def draw_slide(self, board: Board, moves: Board, direction: Direction) -> None:
        """Animate the tiles of ``board`` moving by the distances in ``moves``."""
        tiles = sliding_tiles(board, moves, direction)
        time.sleep(TICK_TIME)
        for tick in range(1, ANIMATION_TICKS + 1):
            for x, y, dx, dy, value in tiles:
                self._draw_tile(y + dy * (tick - 1), x + dx * (tick - 1), 0)
                self._draw_tile(y + dy * tick, x + dx * tick, value)
            self.board_win.refresh()
            time.sleep(TICK_TIME)
        time.sleep(END_MOVE_TIME)

    def _draw_board(self, board: Board) -> None:
        for y, row in enumerate(board.tiles):
            for x, value in enumerate(row):
                self._draw_tile(TILE_HEIGHT * y + 1, TILE_WIDTH * x + 1, value)

    def _draw_stats(self, stats: Stats) -> None:
        win = self.stats_win
        pair = curses.color_pair
        win.attron(pair(2))
        win.addstr(1, 1, "Score")
        win.addstr(4, 1, "Best Score")
        if stats.points > 0:
            win.attron(pair(3))
            win.addstr(1, 7, f"{stats.points:+6d}")
        else:
            win.addstr(1, 7, "       ")
        if not stats.auto_save:
            win.attron(pair(1))
            win.addstr(8, 1, "Autosave is")
            win.attron(pair(7))
            win.addstr(9, 9, "OFF")
        win.attron(pair(1))
        win.addstr(2, 1, f"{stats.score:8d}")
        win.addstr(5, 1, f"{stats.max_score:8d}")
        win.addstr(14, 2, "nimations")
        win.addstr(15, 2, "estart")
        win.addstr(16, 2, "uit")
        win.attron(pair(5))
        win.addch(14, 1, "A")
        win.attron(pair(3))
        win.addch(15, 1, "R")
        win.attron(pair(7))
        win.addch(16, 1, "Q")

    def _draw_tile(self, top: int, left: int, value: int) -> None:
        win = self.board_win
        right = left + TILE_WIDTH - 1
        bottom = top + TILE_HEIGHT - 1
        center = (top + bottom) // 2

        if value == 0:
            for y in range(top, bottom + 1):
                win.addstr(y, left, _EMPTY_TILE)
            return

        win.attrset(self._tile_attrs[value])
        for y in range(top + 1, bottom):
            win.addstr(y, left + 1, _TILE_LABELS[0])
        win.addch(top, left, curses.ACS_ULCORNER)
        win.addch(top, right, curses.ACS_URCORNER)
        win.addch(bottom, left, curses.ACS_LLCORNER)
        win.addch(bottom, right, curses.ACS_LRCORNER)
        win.hline(top, left + 1, curses.ACS_HLINE, TILE_WIDTH - 2)
        win.hline(bottom, left + 1, curses.ACS_HLINE, TILE_WIDTH - 2)
        win.vline(top + 1, left, curses.ACS_VLINE, TILE_HEIGHT - 2)
        win.vline(top + 1, right, curses.ACS_VLINE, TILE_HEIGHT - 2)
        win.addstr(center, left + 1, _TILE_LABELS[value])