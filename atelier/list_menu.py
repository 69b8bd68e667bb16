"""Interactive menu for editing a linked list."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from atelier.linked_list import LinkedList

__all__ = ["menu_text", "run_menu", "main"]

_INT = re.compile(r"[+-]?\d+")


class _Scanner:
    """Reads single characters and integers from a text stream, scanf-style."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def next_char(self) -> str:
        self._skip_space()
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def next_int(self) -> int:
        self._skip_space()
        match = _INT.match(self._buffer)
        if match is None:
            bad, *rest = self._buffer.split(maxsplit=1)
            self._buffer = rest[0] if rest else ""
            raise ValueError(f"Invalid number: {bad}")
        self._buffer = self._buffer[match.end():]
        return int(match.group())


def menu_text(linked: LinkedList) -> str:
    """The menu shown before each choice, including the current list."""
    lines = ["", f"Current Linked List: {linked.render()}", "", "Menu:", "A - Create new list"]
    if not linked.is_empty():
        lines += [
            "B - Add a node to the end of the list",
            "C - Add a node to the beginning of the list",
            "D - Add a node after a certain node index",
            "E - Add a given number of nodes",
            "F - Delete a node by index",
            "G - Delete all nodes after a certain node index",
            "H - Reverse the list",
            "I - Print statistics",
            "J - Sort the list",
            "K - Remove duplicates",
        ]
    lines.append("Q - Quit")
    return "\n".join(lines) + "\nEnter your choice: "


_Handler = Callable[[LinkedList, _Scanner, TextIO, random.Random], None]


def _ask(scanner: _Scanner, out: TextIO, prompt: str) -> int:
    out.write(prompt)
    out.flush()
    return scanner.next_int()


def _create(linked, scanner, out, rng):
    count = _ask(scanner, out, "Enter the number of nodes for the new list: ")
    linked.fill_random(count, rng)
    print(f"{count} nodes added to the list.", file=out)


def _append(linked, scanner, out, rng):
    linked.append(_ask(scanner, out, "Enter the data for the new node: "))
    print("Node added to the end of the list.", file=out)


def _prepend(linked, scanner, out, rng):
    linked.prepend(_ask(scanner, out, "Enter the data for the new node: "))
    print("Node added to the beginning of the list.", file=out)


def _insert(linked, scanner, out, rng):
    index = _ask(scanner, out, "Enter the index after which to add the node: ")
    data = _ask(scanner, out, "Enter the data for the new node: ")
    linked.insert_after(index, data)
    print(f"Node added after index {index}.", file=out)


def _append_several(linked, scanner, out, rng):
    count = _ask(scanner, out, "Enter the number of nodes to add: ")
    out.write("Enter the data for the new nodes separated by spaces: ")
    out.flush()
    values = [scanner.next_int() for _ in range(count)]
    for value in values:
        linked.append(value)
    print(f"{count} nodes added to the list.", file=out)


def _delete(linked, scanner, out, rng):
    index = _ask(scanner, out, "Enter the index of the node to delete: ")
    linked.delete_at(index)
    print(f"Node at index {index} deleted.", file=out)


def _truncate(linked, scanner, out, rng):
    index = _ask(scanner, out, "Enter the index after which to delete all nodes: ")
    linked.truncate_after(index)
    print(f"All nodes after index {index} deleted.", file=out)


def _reverse(linked, scanner, out, rng):
    linked.reverse()
    print("List reversed.", file=out)


def _statistics(linked, scanner, out, rng):
    stats = linked.statistics()
    print("Statistics:", file=out)
    print(f"Number of nodes: {stats.count}", file=out)
    print(f"Sum of values: {stats.total}", file=out)
    print(f"Average of values: {stats.average:.2f}", file=out)


def _sort(linked, scanner, out, rng):
    if linked.is_empty():
        print("The list is empty. Nothing to sort.", file=out)
        return
    linked.sort()
    print("List sorted in ascending order.", file=out)


def _dedupe(linked, scanner, out, rng):
    if linked.is_empty():
        print("The list is empty. No duplicates to remove.", file=out)
        return
    linked.remove_duplicates()
    print("Duplicates removed from the list.", file=out)


_HANDLERS: dict[str, _Handler] = {
    "a": _create,
    "b": _append,
    "c": _prepend,
    "d": _insert,
    "e": _append_several,
    "f": _delete,
    "g": _truncate,
    "h": _reverse,
    "i": _statistics,
    "j": _sort,
    "k": _dedupe,
}


def run_menu(stdin: TextIO, stdout: TextIO, rng: random.Random | None = None) -> list[int]:
    """Run the menu until Q or end of input; return the final list contents."""
    rng = rng or random.Random()
    scanner = _Scanner(stdin)
    linked = LinkedList()
    while True:
        stdout.write(menu_text(linked))
        stdout.flush()
        try:
            choice = scanner.next_char().lower()
            if choice == "q":
                print("Quitting the program.", file=stdout)
                break
            handler = _HANDLERS.get(choice)
            if handler is None:
                print("Invalid choice. Please try again.", file=stdout)
                continue
            handler(linked, scanner, stdout, rng)
        except EOFError:
            print(file=stdout)
            break
        except (ValueError, IndexError) as exc:
            print(exc, file=stdout)
    values = list(linked)
    linked.clear()
    return values


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Edit a linked list from a menu.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())