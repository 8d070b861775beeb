import io
import sys

import pytest

from textprint.demo import main


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return feed


def test_missing_log_path_fails(monkeypatch, stdin, capsys):
    monkeypatch.delenv("LOG_PATH", raising=False)
    stdin("hello\n")
    assert main([]) == 1
    assert "undefined environment variable: LOG_PATH" in capsys.readouterr().err


def test_words_are_written_one_per_line(monkeypatch, stdin, tmp_path):
    log = tmp_path / "log.txt"
    monkeypatch.setenv("LOG_PATH", str(log))
    stdin("alpha beta\n  gamma\t\n")
    assert main([]) == 0
    assert log.read_text().splitlines() == ["alpha", "beta", "gamma"]


def test_existing_content_is_kept(monkeypatch, stdin, tmp_path):
    log = tmp_path / "log.txt"
    log.write_text("earlier\n")
    monkeypatch.setenv("LOG_PATH", str(log))
    stdin("later")
    assert main([]) == 0
    assert log.read_text().splitlines() == ["earlier", "later"]


def test_empty_input_creates_no_file(monkeypatch, stdin, tmp_path):
    log = tmp_path / "log.txt"
    monkeypatch.setenv("LOG_PATH", str(log))
    stdin("   \n\n")
    assert main([]) == 0
    assert not log.exists()