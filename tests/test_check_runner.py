"""Tests for the comparison cycle."""

import pytest

from db.db_utils import load_baseline_blob, save_baseline_blob
from tracker.check_runner import run_check, format_report
from tracker.codec import decode_collection, encode_collection
from tracker.errors import DecodeError, EncodeError


class TestRunCheck:
    def test_first_run_saves_baseline(self, session_factory):
        result = run_check(session_factory, "me", ["alice", "bob"])
        assert result["first_run"] is True
        assert result["unfollowers"] == []
        assert result["followers_count"] == 2
        with session_factory() as db:
            assert decode_collection(load_baseline_blob(db, "me")) == ["alice", "bob"]

    def test_second_run_finds_unfollowers(self, session_factory):
        run_check(session_factory, "me", ["alice", "bob", "carol"])
        result = run_check(session_factory, "me", ["bob", "carol", "dave"])
        assert result["first_run"] is False
        assert result["unfollowers"] == ["alice"]
        assert result["new_followers"] == ["dave"]
        assert result["followers_count_change"] == 0
        with session_factory() as db:
            assert decode_collection(load_baseline_blob(db, "me")) == ["bob", "carol", "dave"]

    def test_baseline_of_empty_list_is_not_first_run(self, session_factory):
        with session_factory() as db:
            save_baseline_blob(db, "me", encode_collection([]), 0)
        result = run_check(session_factory, "me", ["alice"])
        assert result["first_run"] is False
        assert result["unfollowers"] == []
        assert result["new_followers"] == ["alice"]

    def test_empty_current_list_keeps_baseline(self, session_factory):
        run_check(session_factory, "me", ["alice"])
        assert run_check(session_factory, "me", []) is None
        with session_factory() as db:
            assert decode_collection(load_baseline_blob(db, "me")) == ["alice"]

    def test_corrupt_baseline_raises(self, session_factory):
        with session_factory() as db:
            save_baseline_blob(db, "me", b"\xc1\xc1", 0)
        with pytest.raises(DecodeError):
            run_check(session_factory, "me", ["alice"], reset_corrupt_baseline=False)
        with session_factory() as db:
            assert load_baseline_blob(db, "me") == b"\xc1\xc1"

    def test_corrupt_baseline_can_be_reset(self, session_factory):
        with session_factory() as db:
            save_baseline_blob(db, "me", b"\xc1\xc1", 0)
        result = run_check(session_factory, "me", ["alice"], reset_corrupt_baseline=True)
        assert result["first_run"] is True
        with session_factory() as db:
            assert decode_collection(load_baseline_blob(db, "me")) == ["alice"]

    def test_encode_failure_leaves_baseline(self, session_factory):
        run_check(session_factory, "me", ["alice"])
        with pytest.raises(EncodeError):
            run_check(session_factory, "me", ["bob", 3])
        with session_factory() as db:
            assert decode_collection(load_baseline_blob(db, "me")) == ["alice"]


class TestFormatReport:
    def test_no_result(self):
        assert format_report(None) == ["Error: Could not read current followers."]

    def test_first_run(self):
        lines = format_report({"first_run": True, "unfollowers": [], "new_followers": [], "followers_count": 3})
        assert lines[-1] == "Saved 3 followers. Run again later to compare."

    def test_lists_unfollowers(self):
        lines = format_report({"first_run": False, "unfollowers": ["alice", "bob"], "new_followers": [],
                               "followers_count": 5, "followers_count_change": -2})
        assert "alice" in lines and "bob" in lines
        assert lines[-1] == "Process finished. Found 2 unfollower(s)."

    def test_no_unfollowers(self):
        lines = format_report({"first_run": False, "unfollowers": [], "new_followers": ["carol"],
                               "followers_count": 5, "followers_count_change": 1})
        assert "No new unfollowers found." in lines
