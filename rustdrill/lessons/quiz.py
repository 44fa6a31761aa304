"""Quizzes: apple prices, a string machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple for orders of more than 40."""
    return apples if apples > 40 else apples * 2


class _Action(Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """What the string machine does to a string."""

    action: _Action
    times: int = 0

    @classmethod
    def append(cls, times: int) -> Command:
        """Append "bar" the given number of times."""
        if times < 0:
            raise ValueError("times must not be negative")
        return cls(_Action.APPEND, times)

    def apply(self, text: str) -> str:
        if self.action is _Action.UPPERCASE:
            return text.upper()
        if self.action is _Action.TRIM:
            return text.strip()
        return text + "bar" * self.times


Command.UPPERCASE = Command(_Action.UPPERCASE)  # type: ignore[attr-defined]
Command.TRIM = Command(_Action.TRIM)  # type: ignore[attr-defined]


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in items]


G = TypeVar("G")


def _format_grade(grade: object) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard(Generic[G]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: G
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )