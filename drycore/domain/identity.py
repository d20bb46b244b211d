"""Identity value types: FilePath and Fingerprint."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["FilePath", "Fingerprint"]

_U64_MAX = 2**64 - 1


@dataclass(frozen=True, order=True)
class FilePath:
    """A workspace- or file-relative path; carries no I/O semantics."""

    path: Path

    def __init__(self, path: str | os.PathLike[str]) -> None:
        object.__setattr__(self, "path", Path(path))

    def as_path(self) -> Path:
        """The underlying path."""
        return self.path

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def to_json(self) -> str:
        """Wire form: the path as a string."""
        return str(self.path)

    @classmethod
    def from_json(cls, value: object) -> FilePath:
        """Build from the wire form; the value must be a string."""
        if not isinstance(value, str):
            raise TypeError(f"file path must be a string, got {type(value).__name__}")
        return cls(value)


@dataclass(frozen=True, order=True)
class Fingerprint:
    """An opaque 64-bit hashed subform value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"fingerprint must be an integer, got {self.value!r}")
        if not 0 <= self.value <= _U64_MAX:
            raise ValueError(f"fingerprint must fit in 64 unsigned bits, got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:016x}"

    def to_json(self) -> int:
        """Wire form: the plain integer."""
        return self.value

    @classmethod
    def from_json(cls, value: object) -> Fingerprint:
        """Build from the wire integer."""
        return cls(value)  # type: ignore[arg-type]