"""Entry point for building selectors without managing builder instances.

Each fragment method starts a fresh SelectorBuilder, so independent
selectors built through the shared facade never see each other's
fragments:

    from core.selectors import css_selector_builder as builder

    builder.combine(
        builder.element("div").with_id("main").with_class("container"),
        "+",
        builder.element("table").with_id("data"),
    ).render()
    # => 'div#main.container + table#data'
"""

from core.selectors.base import BaseSelector
from core.selectors.builder import SelectorBuilder
from core.selectors.combined import CombinedSelector


class CssSelectorBuilder:
    """Stateless facade over SelectorBuilder."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_attribute(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_pseudo_element(value)

    def combine(
        self,
        left: BaseSelector,
        combinator: str,
        right: BaseSelector,
    ) -> CombinedSelector:
        """Join two selectors, e.g. combine(a, ">", b) => 'a > b'."""
        return left.combine(right, combinator)


css_selector_builder = CssSelectorBuilder()
