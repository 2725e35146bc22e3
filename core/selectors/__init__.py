"""CSS selector building: fragments, builders and combinators."""

from core.selectors.base import BaseSelector, InvalidCombinatorError
from core.selectors.builder import SelectorBuilder
from core.selectors.combined import CombinedSelector
from core.selectors.facade import CssSelectorBuilder, css_selector_builder
from core.selectors.parts import SelectorParts

__all__ = [
    "BaseSelector",
    "InvalidCombinatorError",
    "SelectorBuilder",
    "CombinedSelector",
    "CssSelectorBuilder",
    "css_selector_builder",
    "SelectorParts",
]
