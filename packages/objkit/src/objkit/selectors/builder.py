from dataclasses import dataclass

from objkit.selectors.fragment import SelectorFragment
from objkit.selectors.segments import Combinator, DetectionMode, SegmentKind, parse_combinator


@dataclass(frozen=True, slots=True)
class SelectorConfig:
    detection: DetectionMode = DetectionMode.STRUCTURED


class SelectorBuilder:
    """Facade that starts selector fragments and combines them.

    Example::

        builder = SelectorBuilder()
        builder.by_id("main").class_("container").class_("editable").render()
        # '#main.container.editable'
    """

    def __init__(self, config: SelectorConfig | None = None):
        self._config = config or SelectorConfig()

    @property
    def config(self) -> SelectorConfig:
        return self._config

    def by_tag(self, name: str) -> SelectorFragment:
        return self._start(SegmentKind.TAG, name)

    def by_id(self, value: str) -> SelectorFragment:
        return self._start(SegmentKind.ID, value)

    def by_class(self, value: str) -> SelectorFragment:
        return self._start(SegmentKind.CLASS, value)

    def by_attribute(self, spec: str) -> SelectorFragment:
        return self._start(SegmentKind.ATTRIBUTE, spec)

    def by_pseudo_class(self, name: str) -> SelectorFragment:
        return self._start(SegmentKind.PSEUDO_CLASS, name)

    def by_pseudo_element(self, name: str) -> SelectorFragment:
        return self._start(SegmentKind.PSEUDO_ELEMENT, name)

    def combine(
        self,
        left: SelectorFragment,
        operator: str | Combinator,
        right: SelectorFragment,
    ) -> SelectorFragment:
        """Join two fragments with a combinator.

        The operator is always padded with one space on each side, so the
        descendant combinator produces three spaces in a row. The result keeps
        the right fragment's state: further segments extend its compound
        selector. Substring detection starts the result without a tag.
        """
        combinator = parse_combinator(operator)
        structured = self._config.detection is DetectionMode.STRUCTURED
        return SelectorFragment(
            text=f"{left.render()} {combinator.value} {right.render()}",
            has_tag_or_pseudo_element=structured and right.has_tag_or_pseudo_element,
            kinds=right.kinds,
            detection=self._config.detection,
        )

    def _start(self, kind: SegmentKind, value: str) -> SelectorFragment:
        return SelectorFragment.start(kind, value, detection=self._config.detection)


css_selector_builder = SelectorBuilder()
