"""Tests for the debug trace and its configuration."""

from movie_ticket.config import DEBUG_LOG_ENV, DEFAULT_DEBUG_LOG_PATH, debug_log_path
from movie_ticket.debug_log import log_debug


def test_env_override(debug_log_file):
    assert debug_log_path() == str(debug_log_file)


def test_default_path(monkeypatch):
    monkeypatch.setenv(DEBUG_LOG_ENV, "  ")
    assert debug_log_path() == DEFAULT_DEBUG_LOG_PATH


def test_appends_timestamped_lines(debug_log_file):
    log_debug("first")
    log_debug("second")
    lines = debug_log_file.read_text(encoding="utf-8").splitlines()
    assert [line.split(" ", 1)[1] for line in lines] == ["first", "second"]


def test_unwritable_path_is_ignored(tmp_path, monkeypatch):
    """A trace that cannot be written never raises."""
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv(DEBUG_LOG_ENV, str(blocker / "nested" / "debug.log"))
    log_debug("ignored")
