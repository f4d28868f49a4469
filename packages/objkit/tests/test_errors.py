"""Tests for the error hierarchy."""

from objkit.errors import (
    DuplicateSegmentError,
    ObjkitError,
    ParseError,
    SegmentOrderError,
    SelectorError,
    SerializationError,
    ShapeMismatchError,
)
from objkit.selectors.segments import SegmentKind


class TestObjkitError:
    def test_basic(self):
        err = ObjkitError("something broke")
        assert str(err) == "something broke"
        assert err.cause is None

    def test_with_cause(self):
        cause = ValueError("bad value")
        err = ParseError("wrapper", cause=cause)
        assert err.cause is cause


class TestSelectorErrors:
    def test_duplicate(self):
        err = DuplicateSegmentError(SegmentKind.ID, "#main")
        assert err.kind is SegmentKind.ID
        assert err.selector == "#main"
        assert "more than once" in str(err)

    def test_order(self):
        err = SegmentOrderError(SegmentKind.CLASS, ":hover")
        assert err.kind is SegmentKind.CLASS
        assert "element, id, class, attribute, pseudo-class, pseudo-element" in str(err)

    def test_inheritance(self):
        for err in (
            DuplicateSegmentError(SegmentKind.TAG),
            SegmentOrderError(SegmentKind.TAG),
        ):
            assert isinstance(err, SelectorError)
            assert isinstance(err, ObjkitError)
            assert err.selector == ""

    def test_selector_error_with_cause(self):
        cause = ValueError("bad segment")
        err = SelectorError("rejected", kind=SegmentKind.ATTRIBUTE, cause=cause)
        assert err.cause is cause
        assert err.kind is SegmentKind.ATTRIBUTE


class TestDataErrors:
    def test_shape_mismatch_details(self):
        err = ShapeMismatchError("mismatch", missing=["height"])
        assert isinstance(err, ParseError)
        assert err.missing == ["height"]
        assert err.unexpected == []

    def test_shape_mismatch_with_cause(self):
        cause = KeyError("height")
        err = ShapeMismatchError("mismatch", missing=["height"], cause=cause)
        assert err.cause is cause

    def test_serialization_error(self):
        err = SerializationError("cannot encode")
        assert isinstance(err, ObjkitError)
        assert not isinstance(err, ParseError)
