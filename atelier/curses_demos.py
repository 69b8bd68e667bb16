"""Small curses demonstrations: text, colours, reverse video and a block banner."""

from __future__ import annotations

import argparse
import curses
from collections.abc import Sequence

__all__ = [
    "TITLE",
    "HELLO",
    "title_cells",
    "hello",
    "colored_hello",
    "reverse_char",
    "title_banner",
    "main",
]

HELLO = "Hello World !!!"
TITLE = (
    "11  11  222222  33\n"
    "11  11  22      33\n"
    "111111  22222   33\n"
    "11  11  22      33\n"
    "11  11  222222  33\n"
)


def title_cells(text: str = TITLE) -> list[tuple[str, int | None]]:
    """Characters to draw: blanks and newlines as is, digits as a block in that colour pair."""
    return [(ch, None) if ch in "\n " else (" ", ord(ch) - ord("0")) for ch in text]


def hello(stdscr) -> None:
    stdscr.addstr(4, 4, HELLO)
    stdscr.getch()


def colored_hello(stdscr) -> None:
    curses.start_color()
    curses.init_pair(1, curses.COLOR_RED, curses.COLOR_BLACK)
    stdscr.attron(curses.color_pair(1))
    stdscr.addstr(4, 4, HELLO)
    stdscr.attroff(curses.color_pair(1))
    stdscr.getch()


def reverse_char(stdscr) -> int:
    """Read one key and show it in reverse video; return the key."""
    curses.noecho()
    stdscr.addstr("Scrieti un caracter si va fi afisat in culori inversate\n")
    key = stdscr.getch()
    stdscr.addstr("Caracterul introdus este ")
    stdscr.addstr(chr(key) if 0 <= key < 0x110000 else "?", curses.A_REVERSE)
    stdscr.getch()
    return key


def title_banner(stdscr) -> None:
    curses.start_color()
    curses.init_pair(1, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(2, curses.COLOR_YELLOW, curses.COLOR_BLACK)
    curses.init_pair(3, curses.COLOR_BLUE, curses.COLOR_BLACK)
    win = curses.newwin(5, 44, 2, 10)
    for ch, pair in title_cells():
        try:
            if pair is None:
                win.addch(ch)
            else:
                win.addch(ch, curses.color_pair(pair) | curses.A_REVERSE)
        except curses.error:
            pass
    win.getch()


_DEMOS = {
    "hello": hello,
    "color": colored_hello,
    "reverse": reverse_char,
    "banner": title_banner,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a curses demonstration.")
    parser.add_argument("demo", choices=sorted(_DEMOS), nargs="?", default="hello")
    args = parser.parse_args(argv)
    curses.wrapper(_DEMOS[args.demo])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())