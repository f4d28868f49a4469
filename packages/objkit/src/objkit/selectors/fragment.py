"""Immutable CSS selector fragments.

A fragment holds the selector text built so far and enough state to reject
segments that CSS does not allow at that point of a compound selector::

    element#id.class[attr]:pseudo-class::pseudo-element

Every chaining method returns a new fragment; the receiver is never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from objkit.errors import DuplicateSegmentError, SegmentOrderError
from objkit.selectors.segments import UNIQUE_KINDS, DetectionMode, SegmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectorFragment:
    text: str = ""
    has_tag_or_pseudo_element: bool = False
    kinds: frozenset[SegmentKind] = field(default_factory=frozenset)
    detection: DetectionMode = DetectionMode.STRUCTURED

    @classmethod
    def start(
        cls,
        kind: SegmentKind,
        value: str,
        detection: DetectionMode = DetectionMode.STRUCTURED,
    ) -> SelectorFragment:
        """Create a one-segment fragment."""
        return cls(detection=detection)._append(kind, value)

    def tag(self, name: str) -> SelectorFragment:
        return self._append(SegmentKind.TAG, name)

    def id(self, value: str) -> SelectorFragment:
        return self._append(SegmentKind.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return self._append(SegmentKind.CLASS, value)

    def attribute(self, spec: str) -> SelectorFragment:
        return self._append(SegmentKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorFragment:
        return self._append(SegmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorFragment:
        return self._append(SegmentKind.PSEUDO_ELEMENT, name)

    def render(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def present_kinds(self) -> frozenset[SegmentKind]:
        """Segment categories already present in the current compound selector."""
        if self.detection is DetectionMode.STRUCTURED:
            return self.kinds

        # Legacy detection: search the rendered text for each category's marker.
        found = {
            kind
            for kind in SegmentKind
            if kind is not SegmentKind.TAG and kind.marker in self.text
        }
        if self.text:
            found.add(SegmentKind.TAG)
        return frozenset(found)

    def _append(self, kind: SegmentKind, value: str) -> SelectorFragment:
        present = self.present_kinds()

        if self._is_duplicate(kind, present):
            logger.debug("Rejected duplicate %s segment %r after %r", kind.label, value, self.text)
            raise DuplicateSegmentError(kind, self.text)

        if kind is SegmentKind.TAG:
            out_of_order = bool(present)
        else:
            out_of_order = bool(present & kind.later())
        if out_of_order:
            logger.debug("Rejected out-of-order %s segment %r after %r", kind.label, value, self.text)
            raise SegmentOrderError(kind, self.text)

        return replace(
            self,
            text=self.text + kind.wrap(value),
            has_tag_or_pseudo_element=self.has_tag_or_pseudo_element or kind is SegmentKind.TAG,
            kinds=self.kinds | {kind},
        )

    def _is_duplicate(self, kind: SegmentKind, present: frozenset[SegmentKind]) -> bool:
        if kind not in UNIQUE_KINDS:
            return False
        if kind is SegmentKind.TAG:
            return self.has_tag_or_pseudo_element
        return kind in present
