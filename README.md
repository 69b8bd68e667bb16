# atelier

A collection of small, self-contained programs for learning and tinkering:
a singly linked list with an interactive menu, date arithmetic, a digit-sum
exercise, CRC checksums, TCP socket examples, a minimal static web server, a
terminal 2048 game, a big curses clock and a few curses demonstrations.

The package uses only the Python standard library. The curses programs, the
2048 save file and the web server need a POSIX system.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `atelier-list [--seed N]` | Interactive menu for building and editing a linked list: create a random list, add, insert, delete, truncate, reverse, sort, remove duplicates, statistics. |
| `atelier-calendar christmas` | Days remaining until the next Christmas. |
| `atelier-calendar year-end` | Minutes remaining until the end of the current year. |
| `atelier-calendar wednesdays START END` | Years in the range whose January 15th is a Wednesday. |
| `atelier-digit-sum [PATH]` | For each word in a text file (default `input1.txt`), takes the first and last digit as a two-digit number and prints the total. |
| `atelier-crc [--standard NAME]` | Prints the check value of a CRC standard (`CRC-CCITT`, `CRC-16` or `CRC-32`; default `CRC-CCITT`) and the CRC of `"123456789"` computed bit by bit and with a lookup table. |
| `atelier-hello-server [--port P]` / `atelier-hello-client [--host H] [--port P]` | A one-message TCP greeting exchange, port 8080 by default. |
| `atelier-transfer-server` / `atelier-transfer-client` | Sends a text file over TCP (`--file`, default `send.txt`) and writes it out on the receiving side (`--output`, default `recv.txt`); both take `--host` and `--port`. |
| `atelier-2048 [--save PATH]` | The 2048 sliding-tile game in the terminal. |
| `atelier-web PORT DIRECTORY` | A minimal static HTTP server for a directory. |
| `atelier-clock` | A large digital clock drawn with curses. |
| `atelier-curses-demos [hello\|color\|reverse\|banner]` | Small curses examples: plain text, coloured text, a key echoed in reverse video, a coloured block banner. |

In the digit-sum exercise a word without any digit counts as -11.

### Playing 2048

```
atelier-2048
```

Move tiles with the arrow keys or `h`, `j`, `k`, `l`. Press `a` to toggle
animations, `r` to restart and `q` to quit. The score, best score and board
are kept in `~/.2048` (or the file given with `--save`); when several games
run at once only the first one, which holds the file's lock, saves. The game
only starts when both standard input and output are terminals.

### Web server

```
atelier-web PORT DIRECTORY
```

Serves files from `DIRECTORY` for simple `GET` requests; `/` means
`index.html`. Only known file extensions are served, paths containing `..`
are refused, and `/`, `/etc`, `/bin`, `/lib`, `/tmp`, `/usr`, `/dev` and
`/sbin` are rejected as the top directory. Ports above 60000 are refused.
Requests are recorded in `server.log` inside the served directory. Run with
wrong arguments or `-?` to see the usage text.

## Using the library

The modules can also be imported directly.

```python
from atelier.linked_list import LinkedList

linked = LinkedList([5, 3, 5, 1])
linked.remove_duplicates()
linked.sort()
print(list(linked))      # [1, 3, 5]
print(linked.render())   # [0]1 -> [1]3 -> [2]5 -> NULL
```

```python
from atelier.crc import Crc, STANDARDS

for name, standard in STANDARDS.items():
    crc = Crc(standard)
    print(name, hex(crc.slow(b"123456789")), hex(crc.fast(b"123456789")))
```

The 2048 rules live in `atelier.game2048.board` (`new_board`, `add_tile`,
`slide`, `can_slide`) and can be used without a terminal; `slide` returns a
`SlideResult` with the new board, the moves and the points won, or `None`
when nothing moves.

Other useful functions: `atelier.calendar_tools.years_with_wednesday_fifteenth`,
`atelier.webserver.parse_request` and `content_type`, and
`atelier.big_clock.render_time`, which returns the clock face as text lines.

## What is not included

The package has no sorting-algorithm routines or sorting benchmark, no
multi-user chat, no system-log or background-daemon tools, and no spinning
ASCII torus animation.