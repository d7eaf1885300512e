"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

# Largest value a 32-bit integer column (ids, prices, capacity) can hold.
INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class EventId:
    """Identifier assigned to an Event by the store on first save."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not (value.isascii() and value.isdigit()) or int(value) > INT32_MAX:
            raise ValueError(f"Invalid event id: {value!r}")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Price:
    """Non-negative whole-unit price."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Price cannot be negative")

    @property
    def is_zero(self) -> bool:
        return self.amount == 0


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
