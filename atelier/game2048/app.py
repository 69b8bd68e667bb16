"""The 2048 game loop: keys, scoring, saving on exit and on termination signals."""

from __future__ import annotations

import argparse
import curses
import random
import signal
import sys
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from atelier.game2048.board import Board, Direction, Stats, add_tile, can_slide, new_board, slide
from atelier.game2048.draw import Screen
from atelier.game2048.save import SaveFile, default_path

__all__ = ["key_direction", "run", "main"]

ADD_TILE_DELAY = 0.1

_HANDLED_SIGNALS = (signal.SIGINT, signal.SIGABRT, signal.SIGTERM, signal.SIGHUP)

_DIRECTION_KEYS = {
    curses.KEY_UP: Direction.UP,
    ord("k"): Direction.UP,
    ord("K"): Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    ord("j"): Direction.DOWN,
    ord("J"): Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    ord("h"): Direction.LEFT,
    ord("H"): Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord("l"): Direction.RIGHT,
    ord("L"): Direction.RIGHT,
}
_QUIT_KEYS = (ord("q"), ord("Q"))
_RESTART_KEYS = (ord("r"), ord("R"))
_ANIMATION_KEYS = (ord("a"), ord("A"))


class _Terminated(Exception):
    """Raised by the signal handler to end the game and save it."""


def key_direction(key: int) -> Direction | None:
    """The slide direction bound to ``key`` (arrows or h/j/k/l), if any."""
    return _DIRECTION_KEYS.get(key)


@contextmanager
def _signals_blocked() -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _HANDLED_SIGNALS)
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _show(screen: Screen, board: Board, stats: Stats) -> bool:
    """Lay out the windows and draw; return whether the terminal is too small."""
    if screen.init_windows():
        screen.draw(board, stats)
        return False
    screen.print_too_small()
    return True


def _save(save_file: SaveFile | None, board: Board, stats: Stats) -> None:
    if save_file is not None:
        save_file.save(board, stats)


def run(stdscr, save_file: SaveFile | None) -> Stats:
    """Play until the player quits or a termination signal arrives; return the stats."""
    rng = random.Random()
    stats = Stats()
    board: Board | None = None
    try:
        with _signals_blocked():
            loaded = save_file.load(stats) if save_file is not None else None
            if loaded is None:
                loaded = new_board(rng)
                stats.score = 0
                stats.max_score = 0
            board = loaded
            screen = Screen(stdscr)
            too_small = _show(screen, board, stats)

        animations = True
        while (key := stdscr.getch()) not in _QUIT_KEYS:
            with _signals_blocked():
                if too_small and key != curses.KEY_RESIZE:
                    continue
                direction = key_direction(key)
                if direction is None:
                    if key in _RESTART_KEYS:
                        stats.score = 0
                        stats.game_over = False
                        board = new_board(rng)
                        screen.draw(board, stats)
                    elif key in _ANIMATION_KEYS:
                        animations = not animations
                    elif key == curses.KEY_RESIZE:
                        too_small = _show(screen, board, stats)
                    continue
                if stats.game_over:
                    continue

                result = slide(board, direction)
                if result is not None:
                    stats.points = result.points
                    screen.draw(None, stats)
                    if animations:
                        screen.draw_slide(board, result.moves, direction)
                    board = result.board
                    stats.score += stats.points
                    stats.max_score = max(stats.max_score, stats.score)
                    screen.draw(board, stats)
                    time.sleep(ADD_TILE_DELAY)
                    add_tile(board, rng, False)
                    screen.draw(board, None)
                else:
                    stats.points = 0
                    if not can_slide(board):
                        stats.game_over = True
                        screen.draw(board, stats)
                curses.flushinp()
    except (_Terminated, KeyboardInterrupt):
        with _signals_blocked():
            if board is not None:
                _save(save_file, board, stats)
        return stats

    with _signals_blocked():
        if stats.game_over:
            board = new_board(rng)
            stats.score = 0
        _save(save_file, board, stats)
    return stats


def _terminate(signum, frame) -> None:
    raise _Terminated(signum)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--save", default=None, help="save file (default: ~/.2048)")
    args = parser.parse_args(argv)

    if not (sys.stdout.isatty() and sys.stdin.isatty()):
        return 1

    path = args.save or default_path()
    save_file: SaveFile | None = None
    if path is not None:
        try:
            save_file = SaveFile(path)
        except OSError:
            save_file = None

    previous = {signum: signal.signal(signum, _terminate) for signum in _HANDLED_SIGNALS}
    try:
        curses.wrapper(run, save_file)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
        if save_file is not None:
            save_file.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())