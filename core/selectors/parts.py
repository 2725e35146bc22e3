"""Selector fragments and their rendering order."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SelectorParts:
    """
    Fragments of a compound selector.

    Rendered as element#id.class[attribute]:pseudo-class::pseudo-element.
    Classes and pseudo-classes may occur several times and keep the order
    they were added in. Empty strings count as absent.
    """

    element: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = field(default_factory=list)
    attribute: Optional[str] = None
    pseudo_classes: List[str] = field(default_factory=list)
    pseudo_element: Optional[str] = None

    def render(self) -> str:
        """Concatenate the fragments in CSS order."""
        text = self.element or ""
        if self.id:
            text += f"#{self.id}"
        text += "".join(f".{name}" for name in self.classes)
        if self.attribute:
            text += f"[{self.attribute}]"
        text += "".join(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element:
            text += f"::{self.pseudo_element}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Convert parts to dictionary for serialization."""
        return {
            "element": self.element,
            "id": self.id,
            "classes": list(self.classes),
            "attribute": self.attribute,
            "pseudo_classes": list(self.pseudo_classes),
            "pseudo_element": self.pseudo_element,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectorParts":
        """Create parts from a dictionary, ignoring unknown keys."""
        return cls(
            element=data.get("element"),
            id=data.get("id"),
            classes=list(data.get("classes") or []),
            attribute=data.get("attribute"),
            pseudo_classes=list(data.get("pseudo_classes") or []),
            pseudo_element=data.get("pseudo_element"),
        )
