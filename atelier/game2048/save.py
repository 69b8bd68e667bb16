"""Save file holding the score, best score and board of an unfinished game."""

from __future__ import annotations

import fcntl
import os
import struct
from pathlib import Path
from typing import Union

from atelier.game2048.board import BOARD_SIZE, Board, Stats

__all__ = ["SaveFile", "default_path", "is_sane", "MAX_POSSIBLE_SCORE", "MAX_POSSIBLE_TILE"]

MAX_POSSIBLE_SCORE = 3932156
MAX_POSSIBLE_TILE = 17

_RECORD = struct.Struct(f"={2 + BOARD_SIZE * BOARD_SIZE}i")

PathLike = Union[str, "os.PathLike[str]"]


def default_path() -> Path | None:
    """``$HOME/.2048``, or None when HOME is not set."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / ".2048"


def is_sane(board: Board, stats: Stats) -> bool:
    """Whether the scores and tiles could come from a real game."""
    if (
        stats.score < 0
        or stats.max_score < 0
        or stats.max_score > MAX_POSSIBLE_SCORE
        or stats.score > stats.max_score
    ):
        return False
    return all(0 <= tile <= MAX_POSSIBLE_TILE for row in board.tiles for tile in row)


class SaveFile:
    """An open save file; only the instance that holds its lock writes to it."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        self._fd: int | None = os.open(self.path, os.O_RDWR | os.O_CREAT, 0o600)
        try:
            fcntl.flock(self._fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError:
            self.locked = False
        else:
            self.locked = True

    @property
    def closed(self) -> bool:
        return self._fd is None

    def load(self, stats: Stats) -> Board | None:
        """Read the saved game into ``stats`` and return its board.

        Sets ``stats.auto_save`` to whether this instance may save. Returns
        None when the file is short or its contents are not sane.
        """
        stats.auto_save = self.locked
        if self._fd is None:
            return None
        data = os.pread(self._fd, _RECORD.size, 0)
        if len(data) == _RECORD.size:
            score, max_score, *tiles = _RECORD.unpack(data)
            board = Board(
                [list(tiles[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]) for row in range(BOARD_SIZE)]
            )
            if is_sane(board, Stats(score=score, max_score=max_score)):
                stats.score = score
                stats.max_score = max_score
                return board
        if not self.locked:
            self.close()
        return None

    def save(self, board: Board, stats: Stats) -> bool:
        """Write the game and close the file; False if not allowed or it failed."""
        if self._fd is None or not stats.auto_save:
            return False
        tiles = [tile for row in board.tiles for tile in row]
        try:
            os.pwrite(self._fd, _RECORD.pack(stats.score, stats.max_score, *tiles), 0)
        except OSError:
            return False
        finally:
            self.close()
        return True

    def close(self) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> SaveFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()