"""SelectorBuilder: chainable assembly of CSS selector strings.

Each compound selector can consist of element, id, class, attribute,
pseudo-class and pseudo-element parts:

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may occur several times

Compound selectors are joined with combinators (' ', '+', '~', '>') via
:meth:`SelectorBuilder.combine`.
"""

from __future__ import annotations

import logging

from cssbuilder.errors import DuplicateError, OrderError
from cssbuilder.model.category import PartCategory

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments and renders them with :meth:`stringify`.

    Part methods validate ordering and uniqueness, append one fragment and
    return ``self`` so calls can be chained.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._last: PartCategory | None = None
        self._used: set[PartCategory] = set()

    # --- parts ----------------------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._append(PartCategory.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        return self._append(PartCategory.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._append(PartCategory.CLASS, name)

    def attr(self, text: str) -> SelectorBuilder:
        """Append ``[text]``; *text* is passed through without escaping."""
        return self._append(PartCategory.ATTRIBUTE, text)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._append(PartCategory.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._append(PartCategory.PSEUDO_ELEMENT, name)

    def _append(self, category: PartCategory, value: str) -> SelectorBuilder:
        """Validate *category* against the parts so far, then append it.

        Ordering is checked before uniqueness. The builder is left untouched
        when either check fails.
        """
        if self._last is not None and category.rank < self._last.rank:
            logger.debug(
                "Rejected %s %r after %s", category.value, value, self._last.value
            )
            raise OrderError(category, self._last)
        if category.singleton and category in self._used:
            logger.debug("Rejected duplicate %s %r", category.value, value)
            raise DuplicateError(category)

        self._fragments.append(category.render(value))
        self._last = category
        if category.singleton:
            self._used.add(category)
        return self

    # --- composition ----------------------------------------------------------

    def combine(self, other: SelectorBuilder, combinator: str) -> SelectorBuilder:
        """Return a new builder joining ``self`` and *other* with *combinator*.

        Neither operand is modified, and the two fragment sequences are not
        validated against each other: each side is its own compound selector.
        The result remembers any id or pseudo-element already present, so
        later parts cannot add a second one; a later element is accepted.
        """
        combined = SelectorBuilder()
        combined._fragments = [*self._fragments, f" {combinator} ", *other._fragments]
        combined._used = (self._used | other._used) - {PartCategory.ELEMENT}
        return combined

    # --- rendering ------------------------------------------------------------

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    def stringify(self) -> str:
        """Render the selector. Safe to call any number of times."""
        return "".join(self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
