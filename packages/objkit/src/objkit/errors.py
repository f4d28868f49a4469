"""Error hierarchy for objkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selectors.segments import SegmentKind


class ObjkitError(Exception):
    """Base error for all objkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


# --- Selector errors ---


class SelectorError(ObjkitError):
    """A selector segment was appended where CSS does not allow it."""

    def __init__(
        self,
        message: str,
        *,
        kind: SegmentKind,
        selector: str = "",
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.kind = kind
        self.selector = selector


class DuplicateSegmentError(SelectorError):
    """Element, id or pseudo-element appended twice."""

    def __init__(self, kind: SegmentKind, selector: str = ""):
        super().__init__(
            "Element, id and pseudo-element should not occur more than once "
            "inside the selector",
            kind=kind,
            selector=selector,
        )


class SegmentOrderError(SelectorError):
    """Segment appended after a later-category segment."""

    def __init__(self, kind: SegmentKind, selector: str = ""):
        super().__init__(
            "Selector parts should be arranged in the following order: element, id, "
            "class, attribute, pseudo-class, pseudo-element",
            kind=kind,
            selector=selector,
        )


# --- Data errors ---


class ParseError(ObjkitError):
    """Text is not valid JSON."""


class ShapeMismatchError(ParseError):
    """Parsed data does not have the attributes a capability set expects."""

    def __init__(
        self,
        message: str,
        *,
        missing: list[str] | None = None,
        unexpected: list[str] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.missing = missing or []
        self.unexpected = unexpected or []


class SerializationError(ObjkitError):
    """Value cannot be encoded as JSON."""
