import curses
from unittest import mock

from atelier.curses_demos import HELLO, TITLE, hello, reverse_char, title_cells


def test_title_cells_keep_layout_characters():
    cells = title_cells("1 \n3")
    assert cells == [(" ", 1), (" ", None), ("\n", None), (" ", 3)]


def test_title_cells_cover_the_whole_title():
    cells = title_cells()
    assert len(cells) == len(TITLE)
    assert {pair for _, pair in cells} == {None, 1, 2, 3}
    assert sum(1 for ch, _ in cells if ch == "\n") == 5


class _FakeScreen:
    def __init__(self, keys):
        self.keys = list(keys)
        self.calls = []

    def addstr(self, *args):
        self.calls.append(args)

    def getch(self):
        return self.keys.pop(0)


def test_hello_writes_greeting():
    screen = _FakeScreen([0])
    hello(screen)
    assert screen.calls == [(4, 4, HELLO)]
    assert screen.keys == []


def test_reverse_char_shows_key_reversed():
    screen = _FakeScreen([ord("x"), 0])
    with mock.patch("curses.noecho"):
        key = reverse_char(screen)
    assert key == ord("x")
    assert screen.calls[-1] == ("x", curses.A_REVERSE)