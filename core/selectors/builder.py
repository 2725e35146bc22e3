"""Fluent builder for compound CSS selectors."""

from dataclasses import replace

from core.selectors.base import BaseSelector
from core.selectors.parts import SelectorParts
from utils.logger import log_selector


class SelectorBuilder(BaseSelector):
    """
    Accumulate selector fragments and render them into a string.

    Every mutator returns the builder so calls can be chained.
    render() clears the accumulated fragments, so the same builder
    can be reused for the next selector:

        builder = SelectorBuilder()
        builder.with_id("main").with_class("container").render()
        # => '#main.container'
        builder.render()
        # => ''
    """

    def __init__(self):
        self._parts = SelectorParts()

    def with_element(self, value: str) -> "SelectorBuilder":
        """Set the element (type) selector, replacing any previous one."""
        self._parts.element = value
        return self

    def with_id(self, value: str) -> "SelectorBuilder":
        """Set the id selector, replacing any previous one."""
        self._parts.id = value
        return self

    def with_class(self, value: str) -> "SelectorBuilder":
        """Append a class selector."""
        self._parts.classes.append(value)
        return self

    def with_attribute(self, value: str) -> "SelectorBuilder":
        """Set the attribute selector body, e.g. 'href$=".png"'."""
        self._parts.attribute = value
        return self

    def with_pseudo_class(self, value: str) -> "SelectorBuilder":
        """Append a pseudo-class, e.g. 'nth-of-type(even)'."""
        self._parts.pseudo_classes.append(value)
        return self

    def with_pseudo_element(self, value: str) -> "SelectorBuilder":
        """Set the pseudo-element, replacing any previous one."""
        self._parts.pseudo_element = value
        return self

    def snapshot(self) -> SelectorParts:
        """Copy of the accumulated fragments. Does not reset the builder."""
        return replace(
            self._parts,
            classes=list(self._parts.classes),
            pseudo_classes=list(self._parts.pseudo_classes),
        )

    def render(self) -> str:
        """
        Render the accumulated fragments and reset the builder.

        Returns:
            The selector string, or "" if nothing was accumulated
        """
        text = self._parts.render()
        self._parts = SelectorParts()
        log_selector("compound", text)
        return text

    @classmethod
    def from_parts(cls, parts: SelectorParts) -> "SelectorBuilder":
        """Create a builder pre-loaded with the given fragments."""
        builder = cls()
        builder._parts = replace(
            parts,
            classes=list(parts.classes),
            pseudo_classes=list(parts.pseudo_classes),
        )
        return builder

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._parts.render()!r})"
