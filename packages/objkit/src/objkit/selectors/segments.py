"""Selector segment categories, combinators and detection modes."""

from __future__ import annotations

from enum import Enum


class SegmentKind(int, Enum):
    """Compound selector segment categories, in the order CSS requires them."""

    TAG = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def wrap(self, value: str) -> str:
        """Return ``value`` with this category's delimiters applied."""
        prefix, suffix = _DELIMITERS[self]
        return f"{prefix}{value}{suffix}"

    @property
    def marker(self) -> str:
        """Text that reveals this category when searching rendered selectors."""
        return _DELIMITERS[self][0]

    def later(self) -> frozenset[SegmentKind]:
        """Categories that must not precede this one."""
        return frozenset(kind for kind in SegmentKind if kind > self)


_DELIMITERS: dict[SegmentKind, tuple[str, str]] = {
    SegmentKind.TAG: ("", ""),
    SegmentKind.ID: ("#", ""),
    SegmentKind.CLASS: (".", ""),
    SegmentKind.ATTRIBUTE: ("[", "]"),
    SegmentKind.PSEUDO_CLASS: (":", ""),
    SegmentKind.PSEUDO_ELEMENT: ("::", ""),
}

# Segments allowed at most once per compound selector
UNIQUE_KINDS = frozenset({SegmentKind.TAG, SegmentKind.ID, SegmentKind.PSEUDO_ELEMENT})


class Combinator(str, Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


def parse_combinator(value: str | Combinator) -> Combinator:
    try:
        return Combinator(value)
    except ValueError:
        raise ValueError(f"Unsupported combinator: {value!r}") from None


class DetectionMode(str, Enum):
    """How a fragment decides which segment categories it already holds."""

    STRUCTURED = "structured"
    SUBSTRING = "substring"
