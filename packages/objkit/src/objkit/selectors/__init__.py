from objkit.selectors.builder import SelectorBuilder, SelectorConfig, css_selector_builder
from objkit.selectors.fragment import SelectorFragment
from objkit.selectors.segments import Combinator, DetectionMode, SegmentKind

__all__ = [
    "Combinator",
    "DetectionMode",
    "SegmentKind",
    "SelectorBuilder",
    "SelectorConfig",
    "SelectorFragment",
    "css_selector_builder",
]
