import pytest

from rustdrill import ui


@pytest.fixture(autouse=True)
def _plain_env(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("CLICOLOR", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_bold_plain_without_terminal():
    assert ui.bold("hello") == "hello"


def test_bold_forced_colours(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    assert ui.bold("hello") == "\x1b[1mhello\x1b[0m"


def test_clicolor_zero_disables(monkeypatch):
    monkeypatch.setenv("CLICOLOR", "0")
    assert ui.bold("x") == "x"


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Compilation failed")
    assert capsys.readouterr().out == "! Compilation failed\n"


def test_warn_with_emoji(capsys):
    ui.warn("Compilation failed")
    out = capsys.readouterr().out
    assert out.startswith("⚠️ ")
    assert out.rstrip("\n").endswith("Compilation failed")


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran it")
    assert capsys.readouterr().out == "✓ Successfully ran it\n"


def test_success_with_emoji(capsys):
    ui.success("Successfully ran it")
    assert capsys.readouterr().out == "✅ Successfully ran it\n"