"""cssbuilder -- assemble CSS selector strings from ordered, validated parts."""

__version__ = "0.1.0"

from cssbuilder.builder import SelectorBuilder
from cssbuilder.errors import DuplicateError, OrderError, SelectorError
from cssbuilder.facade import (
    CssSelectorBuilder,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
    stringify,
)
from cssbuilder.model import PartCategory, Rectangle
from cssbuilder.serialization import decode_as, encode

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "PartCategory",
    # facade
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
    # errors
    "SelectorError",
    "OrderError",
    "DuplicateError",
    # collaborators
    "Rectangle",
    "encode",
    "decode_as",
]
