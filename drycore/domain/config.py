"""Plain config types read from a tool's TOML config file.

Each table rejects unknown keys, so a typo fails loudly. Every knob is
optional: ``None`` means "not set here", which lets a caller tell an unset
value from an explicit one. The wire form leaves out unset knobs and empty
tables.

``[gate]``, ``[output]`` and ``[walk]`` hold shared knobs. ``[rust]`` and
``[typescript]`` hold per-language overrides that replace the shared value
for one adapter only.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, TypeVar

__all__ = [
    "Format",
    "ThresholdMode",
    "UnknownConfigKeyError",
    "GateConfig",
    "OutputConfig",
    "WalkConfig",
    "LanguageConfig",
    "Config",
]

_E = TypeVar("_E", bound=Enum)
_T = TypeVar("_T")


class Format(Enum):
    """Output format selector."""

    TEXT = "text"
    JSON = "json"

    def __str__(self) -> str:
        return self.value


class ThresholdMode(Enum):
    """Threshold-mode preset."""

    STRICT = "strict"
    DEFAULT = "default"
    LENIENT = "lenient"

    def __str__(self) -> str:
        return self.value


class UnknownConfigKeyError(ValueError):
    """Raised when a config table holds a key it does not define."""

    def __init__(self, table: str, key: str) -> None:
        self.table = table
        self.key = key
        where = f"in table [{table}]" if table else "at top level"
        super().__init__(f"unknown field `{key}` {where}")


def _threshold(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"threshold must be a number, got {value!r}")
    number = float(value)
    if math.isnan(number):
        raise ValueError("threshold must not be NaN")
    return number


def _enum(enum_type: type[_E]) -> Callable[[object], _E]:
    def convert(value: object) -> _E:
        if isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            raise ValueError(
                f"unknown {enum_type.__name__} {value!r}; expected one of: {allowed}"
            ) from None

    return convert


def _string(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _flag(value: object) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _extensions(value: object) -> list[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise TypeError(f"extensions must be an array of strings, got {value!r}")
    return [_string(item) for item in value]


_CONVERTERS: dict[str, Callable[[object], Any]] = {
    "threshold": _threshold,
    "threshold_mode": _enum(ThresholdMode),
    "format": _enum(Format),
    "title": _string,
    "subtitle": _string,
    "include_ignored": _flag,
    "extensions": _extensions,
}


def _normalize_knobs(obj: object) -> None:
    """Validate and coerce every set knob of a table in place."""
    for item in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, item.name)
        if value is not None:
            object.__setattr__(obj, item.name, _CONVERTERS[item.name](value))


def _dump_knobs(obj: object) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for item in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, item.name)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, list):
            value = list(value)
        out[item.name] = value
    return out


def _checked_keys(cls: type, data: object, table: str) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        where = f"[{table}]" if table else "config"
        raise TypeError(f"{where} must be a table, got {type(data).__name__}")
    known = {item.name for item in fields(cls)}
    for key in data:
        if key not in known:
            raise UnknownConfigKeyError(table, str(key))
    return dict(data)


def _all_unset(obj: object) -> bool:
    return all(getattr(obj, item.name) is None for item in fields(obj))  # type: ignore[arg-type]


@dataclass
class GateConfig:
    """``[gate]`` table: similarity threshold and threshold-mode preset."""

    threshold: float | None = None
    threshold_mode: ThresholdMode | None = None

    def __post_init__(self) -> None:
        _normalize_knobs(self)

    def is_default(self) -> bool:
        """True when no knob is set."""
        return _all_unset(self)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, leaving out unset knobs."""
        return _dump_knobs(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GateConfig:
        """Build from a parsed table; unknown keys raise UnknownConfigKeyError."""
        return cls(**_checked_keys(cls, data, "gate"))


@dataclass
class OutputConfig:
    """``[output]`` table: format selector and scorecard title / subtitle."""

    format: Format | None = None
    title: str | None = None
    subtitle: str | None = None

    def __post_init__(self) -> None:
        _normalize_knobs(self)

    def is_default(self) -> bool:
        """True when no knob is set."""
        return _all_unset(self)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, leaving out unset knobs."""
        return _dump_knobs(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OutputConfig:
        """Build from a parsed table; unknown keys raise UnknownConfigKeyError."""
        return cls(**_checked_keys(cls, data, "output"))


@dataclass
class WalkConfig:
    """``[walk]`` table: file-walker tuning.

    ``extensions = None`` falls back to the adapter default; an explicit
    empty list disables the extension filter.
    """

    include_ignored: bool | None = None
    extensions: list[str] | None = None

    def __post_init__(self) -> None:
        _normalize_knobs(self)

    def is_default(self) -> bool:
        """True when no knob is set."""
        return _all_unset(self)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, leaving out unset knobs."""
        return _dump_knobs(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WalkConfig:
        """Build from a parsed table; unknown keys raise UnknownConfigKeyError."""
        return cls(**_checked_keys(cls, data, "walk"))


@dataclass
class LanguageConfig:
    """Per-language override table (``[rust]``, ``[typescript]``).

    Each knob mirrors one in ``[gate]``, ``[output]`` or ``[walk]``; a set
    value replaces the shared one for that language only.
    """

    threshold: float | None = None
    threshold_mode: ThresholdMode | None = None
    format: Format | None = None
    title: str | None = None
    subtitle: str | None = None
    include_ignored: bool | None = None
    extensions: list[str] | None = None

    def __post_init__(self) -> None:
        _normalize_knobs(self)

    def is_default(self) -> bool:
        """True when no knob is set."""
        return _all_unset(self)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, leaving out unset knobs."""
        return _dump_knobs(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LanguageConfig:
        """Build from a parsed table; unknown keys raise UnknownConfigKeyError."""
        return _language_table(data, "language")


def _language_table(data: Mapping[str, Any], table: str) -> LanguageConfig:
    return LanguageConfig(**_checked_keys(LanguageConfig, data, table))


def _table(value: object, expected: type[_T], name: str) -> _T:
    if not isinstance(value, expected):
        raise TypeError(f"{name} must be a {expected.__name__}, got {value!r}")
    return value


@dataclass
class Config:
    """Top-level config tree: shared tables plus per-language overrides."""

    gate: GateConfig = field(default_factory=GateConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)
    rust: LanguageConfig = field(default_factory=LanguageConfig)
    typescript: LanguageConfig = field(default_factory=LanguageConfig)

    def __post_init__(self) -> None:
        _table(self.gate, GateConfig, "gate")
        _table(self.output, OutputConfig, "output")
        _table(self.walk, WalkConfig, "walk")
        _table(self.rust, LanguageConfig, "rust")
        _table(self.typescript, LanguageConfig, "typescript")

    def to_dict(self) -> dict[str, Any]:
        """Wire form, leaving out tables with nothing set."""
        return {
            item.name: getattr(self, item.name).to_dict()
            for item in fields(self)
            if not getattr(self, item.name).is_default()
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build from a parsed document; unknown keys raise UnknownConfigKeyError."""
        raw = _checked_keys(cls, data, "")
        tables: dict[str, Any] = {}
        if "gate" in raw:
            tables["gate"] = GateConfig.from_dict(raw["gate"])
        if "output" in raw:
            tables["output"] = OutputConfig.from_dict(raw["output"])
        if "walk" in raw:
            tables["walk"] = WalkConfig.from_dict(raw["walk"])
        for language in ("rust", "typescript"):
            if language in raw:
                tables[language] = _language_table(raw[language], language)
        return cls(**tables)