"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.category import PartCategory
from cssbuilder.model.rectangle import Rectangle

__all__ = [
    "PartCategory",
    "Rectangle",
]
