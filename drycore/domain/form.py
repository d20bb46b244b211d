"""Cross-language form representation: NormalizedForm and FormRef."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from drycore.domain.enums import FormKind
from drycore.domain.identity import FilePath
from drycore.domain.span import Span

__all__ = ["NormalizedForm", "FormRef"]

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _check_uint(name: str, value: object, limit: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _require(data: Mapping[str, Any], key: str, owner: str) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"{owner} must be an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{owner} is missing field {key!r}") from None


def _string_list(name: str, values: Iterable[object]) -> list[str]:
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{name} must be a sequence of strings, not a single string")
    items = list(values)
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"{name} must hold strings, got {item!r}")
    return items


@dataclass
class NormalizedForm:
    """Language-agnostic normalized form: the unit the comparison engine works on.

    ``identifier_set`` keeps emission order and duplicates; ``qualified_name``
    holds path components rather than a joined string.
    """

    kind: FormKind
    fingerprint_set: frozenset[int]
    span: Span
    node_count: int
    line_count: int
    identifier_set: list[str] = field(default_factory=list)
    qualified_name: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FormKind):
            raise TypeError(f"kind must be a FormKind, got {self.kind!r}")
        if not isinstance(self.span, Span):
            raise TypeError(f"span must be a Span, got {self.span!r}")
        self.fingerprint_set = frozenset(
            _check_uint("fingerprint", fp, _U64_MAX) for fp in self.fingerprint_set
        )
        _check_uint("node_count", self.node_count, _U32_MAX)
        _check_uint("line_count", self.line_count, _U32_MAX)
        self.identifier_set = _string_list("identifier_set", self.identifier_set)
        self.qualified_name = _string_list("qualified_name", self.qualified_name)

    def to_dict(self) -> dict[str, Any]:
        """Wire form."""
        return {
            "kind": self.kind.value,
            "fingerprint_set": sorted(self.fingerprint_set),
            "identifier_set": list(self.identifier_set),
            "qualified_name": list(self.qualified_name),
            "span": self.span.to_dict(),
            "node_count": self.node_count,
            "line_count": self.line_count,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NormalizedForm:
        """Build from the wire form; the two context lists default to empty."""
        owner = "NormalizedForm"
        fingerprints = _require(data, "fingerprint_set", owner)
        if not isinstance(fingerprints, (list, tuple, set, frozenset)):
            raise TypeError("fingerprint_set must be an array of integers")
        return cls(
            kind=FormKind(_require(data, "kind", owner)),
            fingerprint_set=frozenset(fingerprints),
            span=Span.from_dict(_require(data, "span", owner)),
            node_count=_require(data, "node_count", owner),
            line_count=_require(data, "line_count", owner),
            identifier_set=data.get("identifier_set", []),
            qualified_name=data.get("qualified_name", []),
        )


@dataclass(frozen=True)
class FormRef:
    """Reference to a form inside a match: file, span and kind only."""

    file: FilePath
    span: Span
    kind: FormKind

    def __post_init__(self) -> None:
        if not isinstance(self.file, FilePath):
            object.__setattr__(self, "file", FilePath(self.file))
        if not isinstance(self.span, Span):
            raise TypeError(f"span must be a Span, got {self.span!r}")
        if not isinstance(self.kind, FormKind):
            raise TypeError(f"kind must be a FormKind, got {self.kind!r}")

    def to_dict(self) -> dict[str, Any]:
        """Wire form."""
        return {
            "file": self.file.to_json(),
            "span": self.span.to_dict(),
            "kind": self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FormRef:
        """Build from the wire form."""
        owner = "FormRef"
        return cls(
            file=FilePath.from_json(_require(data, "file", owner)),
            span=Span.from_dict(_require(data, "span", owner)),
            kind=FormKind(_require(data, "kind", owner)),
        )