"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not value.isdigit():
            raise ValueError(f"Not a numeric id: {value!r}")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


# Largest offset/limit a signed 64-bit SQL integer can hold.
MAX_ROWS = 2**63 - 1


@dataclass(frozen=True)
class Page:
    """Optional offset/limit window over an ordered result."""

    start: int | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.start is not None and not 0 <= self.start <= MAX_ROWS:
            raise ValueError(f"start must be between 0 and {MAX_ROWS}")
        if self.limit is not None and not 0 <= self.limit <= MAX_ROWS:
            raise ValueError(f"limit must be between 0 and {MAX_ROWS}")
        if (self.start or 0) + (self.limit or 0) > MAX_ROWS:
            raise ValueError("start + limit is out of range")

    @classmethod
    def from_params(cls, start: str | None, limit: str | None) -> Self:
        return cls(start=_parse_int(start), limit=_parse_int(limit))

    def apply(self, items):
        """Slice anything that supports slicing (lists, querysets)."""
        begin = self.start or 0
        if self.limit is None:
            return items[begin:]
        return items[begin : begin + self.limit]


def _parse_int(raw: str | None) -> int | None:
    if raw is None or raw == "":
        return None
    return int(raw)
