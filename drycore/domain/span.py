"""Source-position types: LineColumn and the end-inclusive Span.

Lines are 1-indexed, columns 0-indexed. A Span's end is inclusive, so a
one-character token has start == end.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["LineColumn", "Span", "SpanError"]

_U32_MAX = 2**32 - 1


def _check_u32(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must fit in 32 unsigned bits, got {value}")
    return value


def _field(data: Mapping[str, Any], key: str, owner: str) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"{owner} must be an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{owner} is missing field {key!r}") from None


class SpanError(ValueError):
    """Raised when a span's start lies after its end."""

    def __init__(self, start: LineColumn, end: LineColumn) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"span start {start!r} is greater than end {end!r} "
            "(Span is end-inclusive; start must be <= end)"
        )


@dataclass(frozen=True, order=True)
class LineColumn:
    """A 1-indexed line and 0-indexed column position."""

    line: int
    column: int

    def __post_init__(self) -> None:
        _check_u32("line", self.line)
        _check_u32("column", self.column)

    def to_dict(self) -> dict[str, int]:
        """Wire form."""
        return {"line": self.line, "column": self.column}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LineColumn:
        """Build from the wire form."""
        return cls(_field(data, "line", "LineColumn"), _field(data, "column", "LineColumn"))


@dataclass(frozen=True, order=True)
class Span:
    """An end-inclusive source range; raises SpanError when start > end."""

    start: LineColumn
    end: LineColumn

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise SpanError(self.start, self.end)

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Wire form."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Span:
        """Build from the wire form."""
        return cls(
            LineColumn.from_dict(_field(data, "start", "Span")),
            LineColumn.from_dict(_field(data, "end", "Span")),
        )