"""A large seven-line digital clock drawn with curses."""

from __future__ import annotations

import argparse
import curses
import time
from collections.abc import Sequence
from datetime import datetime

__all__ = ["DIGITS", "digit_rows", "clock_positions", "render_time", "draw_clock", "main"]

DIGIT_WIDTH = 9
DIGIT_HEIGHT = 7

DIGITS: tuple[tuple[str, ...], ...] = (
    (" _______ ", "|  _    |", "| | |   |", "| | |   |", "| |_|   |", "|       |", "|_______|"),
    ("  ____   ", " |    |  ", "   |  |  ", "   |  |  ", "   |  |  ", "   |  |  ", "   |__|  "),
    (" _______ ", "|       |", "|____   |", " ____|  |", "| ______|", "| |_____ ", "|_______|"),
    (" _______ ", "|       |", "|___    |", " ___|   |", "|___    |", " ___|   |", "|_______|"),
    (" _   ___ ", "| | |   |", "| |_|   |", "|       |", "|___    |", "    |   |", "    |___|"),
    (" _______ ", "|       |", "|   ____|", "|  |____ ", "|_____  |", " _____| |", "|_______|"),
    (" ___     ", "|   |    ", "|   |___ ", "|    _  |", "|   | | |", "|   |_| |", "|_______|"),
    (" _______ ", "|       |", "|___    |", "    |   |", "    |   |", "    |   |", "    |___|"),
    ("  _____  ", " |  _  | ", " | |_| | ", "|   _   |", "|  | |  |", "|  |_|  |", "|_______|"),
    (" _______ ", "|  _    |", "| | |   |", "| |_|   |", "|___    |", "    |   |", "    |___|"),
)

# Column offsets from the screen centre: hour tens, hour, minute tens, minute, second tens, second.
_OFFSETS = (-30, -21, -9, 0, 12, 21)


def digit_rows(digit: int) -> tuple[str, ...]:
    """The seven lines that draw ``digit``."""
    if not 0 <= digit <= 9:
        raise ValueError(f"not a digit: {digit}")
    return DIGITS[digit]


def clock_positions(rows: int, cols: int) -> list[tuple[int, int]]:
    """Top-left ``(y, x)`` of the six digits on a ``rows`` x ``cols`` screen."""
    top = rows // 2 - 4
    return [(top, cols // 2 + offset) for offset in _OFFSETS]


def _digits(hour: int, minute: int, second: int) -> list[int]:
    return [hour // 10, hour % 10, minute // 10, minute % 10, second // 10, second % 10]


def render_time(hour: int, minute: int, second: int) -> list[str]:
    """The clock face for a time, as seven lines of equal width."""
    width = _OFFSETS[-1] - _OFFSETS[0] + DIGIT_WIDTH
    lines = [[" "] * width for _ in range(DIGIT_HEIGHT)]
    for offset, digit in zip(_OFFSETS, _digits(hour, minute, second)):
        left = offset - _OFFSETS[0]
        for line, text in zip(lines, digit_rows(digit)):
            line[left:left + DIGIT_WIDTH] = text
    return ["".join(line) for line in lines]


def draw_clock(stdscr, now: datetime) -> None:
    """Draw ``now`` centred on the screen."""
    stdscr.clear()
    rows, cols = stdscr.getmaxyx()
    digits = _digits(now.hour, now.minute, now.second)
    for (y, x), digit in zip(clock_positions(rows, cols), digits):
        for dy, text in enumerate(digit_rows(digit)):
            try:
                stdscr.addstr(y + dy, x, text)
            except curses.error:
                pass
    stdscr.move(0, 0)
    stdscr.refresh()


def _run(stdscr) -> None:
    stdscr.attron(curses.A_BOLD)
    while True:
        draw_clock(stdscr, datetime.now())
        time.sleep(1)


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Show a big clock.").parse_args(argv)
    try:
        curses.wrapper(_run)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())