"""Selector construction error types."""

from __future__ import annotations

from cssbuilder.model.category import PartCategory

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(ValueError):
    """Raised when a selector part cannot be appended to a builder."""


class OrderError(SelectorError):
    """Raised when a part is appended after a part of a later category."""

    def __init__(self, category: PartCategory, previous: PartCategory):
        self.category = category
        self.previous = previous
        super().__init__(ORDER_MESSAGE)


class DuplicateError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, category: PartCategory):
        self.category = category
        super().__init__(DUPLICATE_MESSAGE)
