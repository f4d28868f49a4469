"""CSS selector building and JSON helpers for plain Python objects."""

from objkit.errors import (
    DuplicateSegmentError,
    ObjkitError,
    ParseError,
    SegmentOrderError,
    SelectorError,
    SerializationError,
    ShapeMismatchError,
)
from objkit.selectors import (
    Combinator,
    DetectionMode,
    SegmentKind,
    SelectorBuilder,
    SelectorConfig,
    SelectorFragment,
    css_selector_builder,
)
from objkit.serialization import capability_fields, deserialize, serialize
from objkit.shapes import Circle, Rectangle

__all__ = [
    "Circle",
    "Combinator",
    "DetectionMode",
    "DuplicateSegmentError",
    "ObjkitError",
    "ParseError",
    "Rectangle",
    "SegmentKind",
    "SegmentOrderError",
    "SelectorBuilder",
    "SelectorConfig",
    "SelectorError",
    "SelectorFragment",
    "SerializationError",
    "ShapeMismatchError",
    "capability_fields",
    "css_selector_builder",
    "deserialize",
    "serialize",
]
