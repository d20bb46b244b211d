"""The Match envelope: a cluster of similar forms with its scores and tier.

``score`` is the plain Jaccard similarity. The three reserved slots
(``structural_score``, ``rename_count``, ``rename_density``) always appear in
the wire form, as ``null`` when unset.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from drycore.domain.enums import Tier
from drycore.domain.form import FormRef

__all__ = ["Match"]

_U32_MAX = 2**32 - 1


def _require(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"Match must be an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"Match is missing field {key!r}") from None


def _number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {value!r}")
    return float(value)


def _optional_number(name: str, value: object) -> float | None:
    return None if value is None else _number(name, value)


def _optional_count(name: str, value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


@dataclass
class Match:
    """A cluster of structurally similar forms reported by the comparison engine."""

    forms: list[FormRef]
    score: float
    tier: Tier
    structural_score: float | None = None
    rename_count: int | None = None
    rename_density: float | None = None
    _: None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.forms = list(self.forms)
        for form in self.forms:
            if not isinstance(form, FormRef):
                raise TypeError(f"forms must hold FormRef values, got {form!r}")
        self.score = _number("score", self.score)
        if not isinstance(self.tier, Tier):
            raise TypeError(f"tier must be a Tier, got {self.tier!r}")
        self.structural_score = _optional_number("structural_score", self.structural_score)
        self.rename_count = _optional_count("rename_count", self.rename_count)
        self.rename_density = _optional_number("rename_density", self.rename_density)

    def to_dict(self) -> dict[str, Any]:
        """Wire form; reserved slots are always present."""
        return {
            "forms": [form.to_dict() for form in self.forms],
            "score": self.score,
            "structural_score": self.structural_score,
            "rename_count": self.rename_count,
            "rename_density": self.rename_density,
            "tier": self.tier.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Match:
        """Build from the wire form; missing reserved slots become None."""
        forms = _require(data, "forms")
        if not isinstance(forms, (list, tuple)):
            raise TypeError("forms must be an array")
        return cls(
            forms=[FormRef.from_dict(item) for item in forms],
            score=_require(data, "score"),
            tier=Tier(_require(data, "tier")),
            structural_score=data.get("structural_score"),
            rename_count=data.get("rename_count"),
            rename_density=data.get("rename_density"),
        )