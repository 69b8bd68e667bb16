from pathlib import Path

import pytest

from atelier.game2048.board import Board, Stats
from atelier.game2048.save import (
    MAX_POSSIBLE_SCORE,
    MAX_POSSIBLE_TILE,
    SaveFile,
    default_path,
    is_sane,
)


def _board():
    return Board([[1, 2, 3, 4], [0, 0, 5, 6], [7, 0, 0, 0], [0, 0, 0, 11]])


def test_round_trip(tmp_path):
    path = tmp_path / "game"
    writer = SaveFile(path)
    stats = Stats()
    assert writer.load(stats) is None
    assert stats.auto_save is True
    stats.score, stats.max_score = 120, 300
    assert writer.save(_board(), stats) is True
    assert writer.closed

    loaded_stats = Stats()
    with SaveFile(path) as reader:
        board = reader.load(loaded_stats)
    assert board == _board()
    assert (loaded_stats.score, loaded_stats.max_score) == (120, 300)


def test_second_instance_does_not_autosave(tmp_path):
    path = tmp_path / "game"
    with SaveFile(path) as first:
        first_stats = Stats()
        first.load(first_stats)
        second = SaveFile(path)
        second_stats = Stats()
        assert second.load(second_stats) is None
        assert second_stats.auto_save is False
        assert second.closed
        assert second.save(_board(), second_stats) is False
        assert first_stats.auto_save is True


def test_save_refused_without_autosave(tmp_path):
    with SaveFile(tmp_path / "game") as save_file:
        assert save_file.save(_board(), Stats(auto_save=False)) is False
        assert not save_file.closed


def test_short_file_is_rejected(tmp_path):
    path = tmp_path / "game"
    path.write_bytes(b"\x01" * 10)
    with SaveFile(path) as save_file:
        stats = Stats()
        assert save_file.load(stats) is None
        assert stats.score == 0


def test_insane_contents_rejected(tmp_path):
    path = tmp_path / "game"
    writer = SaveFile(path)
    stats = Stats(score=50, max_score=10, auto_save=True)
    writer.save(_board(), stats)
    with SaveFile(path) as reader:
        assert reader.load(Stats()) is None


def test_is_sane_limits():
    board = _board()
    assert is_sane(board, Stats(score=0, max_score=MAX_POSSIBLE_SCORE))
    assert not is_sane(board, Stats(score=0, max_score=MAX_POSSIBLE_SCORE + 1))
    assert not is_sane(board, Stats(score=5, max_score=4))
    assert not is_sane(board, Stats(score=-1, max_score=4))
    high = board.copy()
    high.tiles[0][0] = MAX_POSSIBLE_TILE
    assert is_sane(high, Stats())
    high.tiles[0][0] = MAX_POSSIBLE_TILE + 1
    assert not is_sane(high, Stats())
    high.tiles[0][0] = -1
    assert not is_sane(high, Stats())


def test_default_path(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_path() == Path(tmp_path) / ".2048"
    monkeypatch.delenv("HOME")
    assert default_path() is None


def test_file_created_private(tmp_path):
    path = tmp_path / "game"
    with SaveFile(path):
        pass
    assert path.exists()
    assert path.stat().st_mode & 0o077 == 0


def test_close_is_idempotent(tmp_path):
    save_file = SaveFile(tmp_path / "game")
    save_file.close()
    save_file.close()
    assert save_file.closed
    with pytest.raises(AttributeError):
        save_file.load(None)