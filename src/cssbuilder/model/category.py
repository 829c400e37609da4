"""Part categories of a compound selector, in the order CSS requires."""

from __future__ import annotations

from enum import Enum


class PartCategory(Enum):
    """Kind of a selector part.

    Declaration order is the required order inside a compound selector:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Render *value* as a fragment of this category."""
        prefix, suffix = _MARKERS[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[PartCategory, int] = {
    category: position for position, category in enumerate(PartCategory)
}

_SINGLETONS = frozenset(
    {PartCategory.ELEMENT, PartCategory.ID, PartCategory.PSEUDO_ELEMENT}
)

_MARKERS: dict[PartCategory, tuple[str, str]] = {
    PartCategory.ELEMENT: ("", ""),
    PartCategory.ID: ("#", ""),
    PartCategory.CLASS: (".", ""),
    PartCategory.ATTRIBUTE: ("[", "]"),
    PartCategory.PSEUDO_CLASS: (":", ""),
    PartCategory.PSEUDO_ELEMENT: ("::", ""),
}
