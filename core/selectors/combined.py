"""Selector expressions joined by combinators."""

from core.selectors.base import BaseSelector
from utils.logger import log_selector


class CombinedSelector(BaseSelector):
    """
    Immutable selector expression produced by combine().

    Unlike a builder, rendering does not consume anything, so the same
    combined selector can be rendered or combined again any number of
    times.
    """

    def __init__(self, text: str):
        self._text = text

    def render(self) -> str:
        log_selector("combined", self._text)
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CombinedSelector({self._text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, CombinedSelector):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)
