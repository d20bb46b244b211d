"""Aggregated counters across all matches: Summary.

The per-tier and per-kind counters are emitted in enum declaration order so
the wire form is byte-stable across runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from drycore.domain.enums import FormKind, Tier

__all__ = ["Summary"]

_U32_MAX = 2**32 - 1

_E = TypeVar("_E", bound=Enum)


def _count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _counter(name: str, data: Mapping[Any, Any], enum_type: type[_E]) -> dict[_E, int]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{name} must be an object, got {type(data).__name__}")
    return {enum_type(key): _count(name, value) for key, value in data.items()}


@dataclass
class Summary:
    """Counters over the reported matches: total forms, by tier and by kind."""

    total_forms: int = 0
    by_tier: dict[Tier, int] = field(default_factory=dict)
    by_kind: dict[FormKind, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _count("total_forms", self.total_forms)
        self.by_tier = _counter("by_tier", self.by_tier, Tier)
        self.by_kind = _counter("by_kind", self.by_kind, FormKind)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, with counter keys in declaration order."""
        return {
            "total_forms": self.total_forms,
            "by_tier": {tier.value: self.by_tier[tier] for tier in sorted(self.by_tier)},
            "by_kind": {kind.value: self.by_kind[kind] for kind in sorted(self.by_kind)},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Summary:
        """Build from the wire form."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Summary must be an object, got {type(data).__name__}")
        for key in ("total_forms", "by_tier", "by_kind"):
            if key not in data:
                raise ValueError(f"Summary is missing field {key!r}")
        return cls(
            total_forms=data["total_forms"],
            by_tier=data["by_tier"],
            by_kind=data["by_kind"],
        )