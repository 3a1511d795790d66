"""Tests for the interactive prompts."""

import io
import sys

import pytest
from unittest.mock import patch

from briefdeploy.prompt import (
    DEPLOY_QUESTION,
    EDIT_QUESTION,
    ask,
    confirm_deploy,
    is_affirmative,
)


class TestIsAffirmative:
    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", "  Yes  "])
    def test_yes(self, answer):
        assert is_affirmative(answer)

    @pytest.mark.parametrize("answer", ["", "n", "no", "yeah", "yes please", "ye"])
    def test_no(self, answer):
        assert not is_affirmative(answer)

    def test_eof(self):
        assert not is_affirmative(None)


def answers(*replies):
    """Patch the stdin reader to return ``replies`` in order."""
    asked: list[str] = []
    it = iter(replies)

    def fake_read(question):
        asked.append(question)
        return next(it)

    return patch("briefdeploy.prompt._read_input", side_effect=fake_read), asked


class TestAsk:
    def test_reads_stdin(self, monkeypatch, capsys):
        fake_stdin = io.TextIOWrapper(io.BytesIO(b"yes\n"))
        monkeypatch.setattr(sys, "stdin", fake_stdin)

        assert ask("Continue? ")
        assert "Continue? " in capsys.readouterr().out

    def test_eof_is_no(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))
        assert not ask("Continue? ")

    def test_crlf_answer(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"y\r\n")))
        assert ask("Continue? ")


class TestConfirmDeploy:
    def test_edit_aborts(self, capsys):
        patcher, asked = answers("yes")
        with patcher:
            assert not confirm_deploy()
        assert asked == [EDIT_QUESTION]
        assert "Please edit root.txt" in capsys.readouterr().out

    def test_deploy_confirmed(self):
        patcher, asked = answers("no", "y")
        with patcher:
            assert confirm_deploy()
        assert asked == [EDIT_QUESTION, DEPLOY_QUESTION]

    def test_deploy_declined(self):
        patcher, _ = answers("", "nope")
        with patcher:
            assert not confirm_deploy()

    def test_eof_declines(self):
        patcher, _ = answers(None, None)
        with patcher:
            assert not confirm_deploy()
