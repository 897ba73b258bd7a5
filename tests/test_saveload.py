import pytest

from mahasiswa_ambis.saveload import HighscoreStore


@pytest.fixture
def path(tmp_path):
    return tmp_path / "savedata.txt"


def test_missing_file_loads_zero(path):
    assert HighscoreStore(path).load() == 0


def test_save_then_load_round_trip(path):
    HighscoreStore(path).save(42)
    assert HighscoreStore(path).load() == 42


def test_lower_score_keeps_the_highscore(path):
    store = HighscoreStore(path)
    store.save(42)
    assert store.save(7) == 42
    assert HighscoreStore(path).load() == 42


def test_higher_score_replaces_the_highscore(path):
    store = HighscoreStore(path)
    store.save(7)
    store.save(42)
    assert HighscoreStore(path).load() == 42


def test_fractional_score_is_truncated(path):
    assert HighscoreStore(path).save(12.9) == 12
    assert path.read_text() == "12"


def test_file_written_by_hand_is_read(path):
    path.write_text("  35\n")
    assert HighscoreStore(path).load() == 35


def test_unreadable_content_loads_zero(path):
    path.write_text("not a number")
    assert HighscoreStore(path).load() == 0