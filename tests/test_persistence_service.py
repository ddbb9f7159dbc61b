"""Tests for saving and loading matches."""

import json
import os
import tempfile

import pytest

from scorebug.models import Card, MatchState, Period
from scorebug.services import PersistenceService


def _sample_state() -> MatchState:
    state = MatchState(seconds_elapsed=1250, period=Period.FIRST_HALF, is_penalty_corner=True)
    state.teams["home"].score = 3
    state.teams["home"].cards.append(Card.issue("YELLOW", 5))
    state.teams["away"].name = "Montrouge"
    return state


def test_save_and_load_match_file():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = os.path.join(tmp_dir, "nested", "match.json")
        PersistenceService.save_match_to_file(_sample_state(), path)

        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        assert raw["seconds_elapsed"] == 1250
        assert raw["saved_at"] is not None

        loaded = PersistenceService.load_match_from_file(path)

    assert loaded.seconds_elapsed == 1250
    assert loaded.is_penalty_corner is True
    assert loaded.teams["home"].score == 3
    assert loaded.teams["home"].cards[0].time_left == 300
    assert loaded.teams["away"].name == "Montrouge"


def test_load_missing_file():
    with tempfile.TemporaryDirectory() as tmp_dir:
        with pytest.raises(FileNotFoundError):
            PersistenceService.load_match_from_file(os.path.join(tmp_dir, "nope.json"))


def test_deserialize_rejects_bad_payloads():
    with pytest.raises(ValueError):
        PersistenceService.deserialize_match_state(["not", "a", "dict"])
    with pytest.raises(ValueError):
        PersistenceService.deserialize_match_state({"period": "OT"})
    with pytest.raises(ValueError):
        PersistenceService.deserialize_match_state({"teams": {"home": {"cards": [{}]}}})


def test_auto_save_writes_timestamped_file():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = PersistenceService.auto_save(_sample_state(), tmp_dir)

        assert path is not None
        assert os.path.dirname(path) == tmp_dir
        assert os.path.basename(path).startswith("match_autosave_")
        assert os.path.exists(path)


def test_auto_save_failure_returns_none():
    with tempfile.NamedTemporaryFile(suffix=".txt") as not_a_dir:
        assert PersistenceService.auto_save(_sample_state(), not_a_dir.name) is None
