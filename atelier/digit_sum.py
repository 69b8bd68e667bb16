"""Sum of two-digit numbers built from the first and last digit of each word."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

__all__ = ["token_value", "total", "main"]


def token_value(token: str) -> int:
    """Ten times the first digit plus the last digit of ``token``.

    A token with no digits counts as -11, both digits being taken as -1.
    """
    digits = [int(ch) for ch in token if ch.isdigit()]
    first, last = (digits[0], digits[-1]) if digits else (-1, -1)
    return first * 10 + last


def total(tokens: Iterable[str]) -> int:
    """Sum of :func:`token_value` over all tokens."""
    return sum(token_value(token) for token in tokens)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum first/last digit pairs of words.")
    parser.add_argument("path", nargs="?", default="input1.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            result = total(word for line in handle for word in line.split())
    except FileNotFoundError:
        sys.stderr.write("Fisierul nu a fost gasit.")
        return 1
    print(f"Totalul este: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())