"""Structs, enums, generics and recursive data."""

from __future__ import annotations

import dataclasses
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar, Union


@dataclass
class ColorClassicStruct:
    """A colour with named channels."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour with positional channels."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int

    def replace(self, **changes: object) -> Order:
        """A copy of the order with some fields changed."""
        return dataclasses.replace(self, **changes)


def create_order_template() -> Order:
    """The template that new orders start from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to ship; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[ChangeColor, Echo, Move, Quit]


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = Point(0, 0)
    quit: bool = False

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                print(text)
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; None marks the end."""

    value: int
    next: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A cons list holding 1 and 2."""
    return Cons(1, Cons(2, None))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every number non-negative.

    A mutable sequence is changed in place and returned. An immutable one is
    returned unchanged when nothing is negative, and copied into a new list
    otherwise.
    """
    if isinstance(values, MutableSequence):
        for index, value in enumerate(values):
            if value < 0:
                values[index] = -value
        return values
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]