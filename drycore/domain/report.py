"""Top-level analysis result: Report.

A Report holds every match, the aggregated summary and the gate verdict.
View-side reshaping never changes it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from drycore.domain.match import Match
from drycore.domain.summary import Summary

__all__ = ["Report"]


@dataclass
class Report:
    """All matches, their summary, and whether the gate passed.

    A default Report is empty and passing.
    """

    matches: list[Match] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)
    passed: bool = True

    def __post_init__(self) -> None:
        self.matches = list(self.matches)
        for item in self.matches:
            if not isinstance(item, Match):
                raise TypeError(f"matches must hold Match values, got {item!r}")
        if not isinstance(self.summary, Summary):
            raise TypeError(f"summary must be a Summary, got {self.summary!r}")
        if not isinstance(self.passed, bool):
            raise TypeError(f"passed must be a bool, got {self.passed!r}")

    @classmethod
    def empty_passed(cls) -> Report:
        """An empty, passing report: no matches, empty summary."""
        return cls(matches=[], summary=Summary(), passed=True)

    def to_dict(self) -> dict[str, Any]:
        """Wire form."""
        return {
            "matches": [item.to_dict() for item in self.matches],
            "summary": self.summary.to_dict(),
            "passed": self.passed,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Report:
        """Build from the wire form."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Report must be an object, got {type(data).__name__}")
        for key in ("matches", "summary", "passed"):
            if key not in data:
                raise ValueError(f"Report is missing field {key!r}")
        matches = data["matches"]
        if not isinstance(matches, (list, tuple)):
            raise TypeError("matches must be an array")
        return cls(
            matches=[Match.from_dict(item) for item in matches],
            summary=Summary.from_dict(data["summary"]),
            passed=data["passed"],
        )