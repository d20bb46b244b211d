"""The normalizer port: turns one source file into normalized forms.

Each source language supplies one adapter implementing ``NormalizerPort``.
The adapter parses text it is handed and never opens files itself; the
caller that read the file ties the returned forms and errors to its path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

from drycore.domain.form import NormalizedForm
from drycore.domain.identity import FilePath
from drycore.domain.span import Span

__all__ = [
    "NormalizerPort",
    "NormalizeError",
    "ParseError",
    "UnsupportedConstructError",
    "PlaceholderPolicy",
]

_FALLBACK_VERSION = "0.1.0"


def _core_version() -> str:
    try:
        return version("drycore")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


class NormalizeError(Exception):
    """Base class for errors raised by normalizer adapters.

    I/O failures are not part of this family; they belong to whoever read
    the source before handing it to the adapter.
    """

    def __init__(self, message: str, span: Span | None = None) -> None:
        super().__init__(message)
        self.span = span


class ParseError(NormalizeError):
    """The adapter could not parse the source into any usable form.

    ``span`` locates the failure when the parser recovers a position.
    """

    def __init__(self, message: str, span: Span | None = None) -> None:
        self.message = message
        super().__init__(f"normalize error: {message}", span)


class UnsupportedConstructError(NormalizeError):
    """The adapter met a language construct it cannot yet normalize.

    ``construct`` names the offending shape; ``span`` locates it when known.
    The message deliberately leaves the span out.
    """

    def __init__(self, construct: str, span: Span | None = None) -> None:
        self.construct = construct
        super().__init__(f"unsupported construct: {construct}", span)


@dataclass(frozen=True)
class PlaceholderPolicy:
    """Per-language identifier-handling policy; currently an opaque value."""

    @classmethod
    def v0_1_default(cls) -> PlaceholderPolicy:
        """The initial default policy, equal to ``PlaceholderPolicy()``."""
        return cls()


class NormalizerPort(ABC):
    """Parse a single source file into language-agnostic normalized forms."""

    @abstractmethod
    def extensions(self) -> tuple[str, ...]:
        """File extensions this adapter handles, with the leading dot."""

    @abstractmethod
    def normalize(self, source: str, path: FilePath) -> list[NormalizedForm]:
        """Normalize ``source`` (read from ``path``) into forms.

        Raises ParseError when nothing usable can be recovered and
        UnsupportedConstructError for constructs the adapter cannot handle.
        ``path`` is only consulted for naming; it is never opened.
        """

    @abstractmethod
    def placeholder_policy(self) -> PlaceholderPolicy:
        """The identifier-handling policy this adapter applies."""

    def tool_name(self) -> str:
        """Tool name for the report envelope; adapters should override."""
        return "dry"

    def tool_version(self) -> str:
        """Tool version for the report envelope; defaults to this package's."""
        return _core_version()

    def language(self) -> str:
        """Source-language identifier; adapters should override."""
        return "unknown"