"""
Tests for the command-line entry points
"""

import io
import logging
import random

import pytest

from lessons import cli
from lessons.core.config import MESSAGES, SWAP_HEADING, LOG_LEVEL_ENV, log_level
from lessons.utils.log import LessonsHandler, setup_logging


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


def test_guess_wins(monkeypatch, capsys):
    secret = random.Random(3).randint(1, 100)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"abc\n{secret}\n"))

    assert cli.main(["guess", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert MESSAGES["retry"] in out
    assert out.rstrip().endswith(MESSAGES["won"])


def test_guess_main_reports_read_failure(monkeypatch, capsys):
    """End of input exits with status 1 and an error on stderr"""
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert cli.guess_main(["--seed", "1"]) == 1

    captured = capsys.readouterr()
    assert f"✗ Error: {MESSAGES['read_failed']}" in captured.err
    assert captured.out.splitlines() == [MESSAGES["banner"], MESSAGES["prompt"]]


def test_swap(capsys):
    assert cli.main(["swap"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == SWAP_HEADING


def test_swap_main(capsys):
    assert cli.swap_main([]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "a = 10, b = 8"


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_log_level_from_environment(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert log_level() == "WARNING"

    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert log_level() == "debug"


def test_setup_logging_adds_one_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("info")
        setup_logging("debug")
        ours = [h for h in root.handlers if isinstance(h, LessonsHandler)]
        assert len(ours) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_guess_reports_undecodable_input(monkeypatch, capsys):
    """Bytes that are not UTF-8 end the game as a read failure"""
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n42\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)

    assert cli.main(["guess", "--seed", "1"]) == 1
    assert f"✗ Error: {MESSAGES['read_failed']}" in capsys.readouterr().err
