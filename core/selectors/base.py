"""Abstract base class for renderable selectors.

Both a builder in progress and an already combined selector expression
can be rendered to text and joined to another selector with a
combinator, which is what makes nested combination possible.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from core.config import SelectorConfig, get_config

if TYPE_CHECKING:
    from core.selectors.combined import CombinedSelector


class InvalidCombinatorError(ValueError):
    """Combinator token is not one of the allowed tokens."""

    def __init__(self, combinator: str, allowed: tuple):
        super().__init__(
            f"Unknown combinator {combinator!r}, expected one of {list(allowed)!r}"
        )
        self.combinator = combinator
        self.allowed = allowed


class BaseSelector(ABC):
    """
    Abstract base class for all selectors.

    Subclasses must implement:
    - render(): Produce the selector string
    """

    @abstractmethod
    def render(self) -> str:
        """
        Produce the selector string.

        Returns:
            The selector text
        """
        pass

    def combine(
        self,
        other: "BaseSelector",
        combinator: str,
        selector_config: Optional[SelectorConfig] = None,
    ) -> "CombinedSelector":
        """
        Join this selector and another one with a combinator.

        Both sides are rendered immediately, so a builder on either side
        is reset by the call.

        Args:
            other: Selector placed after the combinator
            combinator: One of " ", "+", "~", ">"
            selector_config: Overrides the configured combinator set

        Returns:
            A new CombinedSelector wrapping the joined text

        Raises:
            InvalidCombinatorError: If the combinator is not allowed
        """
        from core.selectors.combined import CombinedSelector

        selector_config = selector_config or get_config().selectors
        if not selector_config.is_allowed(combinator):
            raise InvalidCombinatorError(combinator, selector_config.combinators)

        left = self.render()
        right = other.render()
        return CombinedSelector(f"{left} {combinator} {right}")
