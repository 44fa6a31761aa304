"""Basics: functions, conditionals, vectors, strings and optional values."""

from __future__ import annotations

from collections.abc import Iterable


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers; b when they are equal."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    growable = [10, 20, 30, 40]
    return fixed, growable


def vec_loop(v: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    for index, value in enumerate(v):
        v[index] = value * 2
    return v


def vec_map(v: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [num * 2 for num in v]


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Add " world!" to the end."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """The longer of two strings by UTF-8 byte length; y on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour; None for hours past 23."""
    if time_of_day > 23:
        return None
    if time_of_day >= 22:
        return 0
    return 5