"""Entry-point facade: seeds a fresh SelectorBuilder with one part."""

from __future__ import annotations

from cssbuilder.builder import SelectorBuilder

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
]


class CssSelectorBuilder:
    """Creates selector builders and combines them.

    Example:
        builder = css_selector_builder
        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        # => 'div#main + table#data'
    """

    def element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().element(name)

    def id(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().id(name)

    def class_(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().class_(name)

    def attr(self, text: str) -> SelectorBuilder:
        return SelectorBuilder().attr(text)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(name)

    def combine(
        self, selector1: SelectorBuilder, combinator: str, selector2: SelectorBuilder
    ) -> SelectorBuilder:
        return selector1.combine(selector2, combinator)

    def stringify(self, selector: SelectorBuilder) -> str:
        return selector.stringify()


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id  # noqa: A001
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
stringify = css_selector_builder.stringify
