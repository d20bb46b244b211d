"""Closed enums for form classification and routing: FormKind, Tier, Severity.

Wire labels are snake_case strings. Members compare by declaration order.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["FormKind", "Tier", "Severity"]


class _DeclarationOrderedEnum(Enum):
    """Enum whose members order by their position in the class body."""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() >= other._rank()

    def __str__(self) -> str:
        return self.value


class FormKind(_DeclarationOrderedEnum):
    """What kind of form was normalized."""

    PRODUCTION = "production"
    TEST = "test"
    DOCTEST = "doctest"

    def as_str(self) -> str:
        """Stable label, identical to the wire rendering."""
        return self.value


class Tier(_DeclarationOrderedEnum):
    """Routing tier derived from a match's score.

    AUTO_REFACTOR for scores of at least 0.95, REVIEW_FIRST for at least
    0.85, ADVISORY for anything above the threshold but below 0.85.
    """

    AUTO_REFACTOR = "auto_refactor"
    REVIEW_FIRST = "review_first"
    ADVISORY = "advisory"

    def as_str(self) -> str:
        """Stable label, identical to the wire rendering."""
        return self.value


class Severity(_DeclarationOrderedEnum):
    """Display severity shared with the high / medium / low vocabulary."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"