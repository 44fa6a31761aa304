"""Coloured status lines for the terminal."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    stream = sys.stdout
    return bool(getattr(stream, "isatty", None) and stream.isatty())


def _style(text: object, *codes: str) -> str:
    text = str(text)
    if not codes or not _colors_enabled():
        return text
    return "".join(codes) + text + _RESET


def bold(text: object) -> str:
    """Render text in bold when the terminal shows colours."""
    return _style(text, _BOLD)


def blue_bold(text: object) -> str:
    return _style(text, "\x1b[34m", _BOLD)


def blue(text: object) -> str:
    return _style(text, "\x1b[34m")


def warn(message: str) -> None:
    """Print a red warning line."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{_style(marker, _RED)} {_style(message, _RED)}")


def success(message: str) -> None:
    """Print a green success line."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{_style(marker, _GREEN)} {_style(message, _GREEN)}")