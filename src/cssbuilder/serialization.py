"""JSON encoding and prototype-style decoding helpers."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["encode", "decode_as"]

T = TypeVar("T")


def _to_jsonable(value: Any) -> Any:
    if not isinstance(value, type):
        # Instance attributes first so keys copied on by decode_as survive.
        if hasattr(value, "__dict__"):
            return dict(vars(value))
        if dataclasses.is_dataclass(value):
            return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any, indent: int | None = None) -> str:
    """Serialise *value* to JSON.

    Output is compact (``[1,2,3]``, ``{"width":10,"height":20}``) unless
    *indent* is given. Dataclasses and plain objects are encoded from their
    fields in declaration/insertion order.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(value, default=_to_jsonable, indent=indent, separators=separators)


def decode_as(cls: type[T], text: str) -> T:
    """Parse *text* and copy every top-level key onto a new *cls* instance.

    ``__init__`` is not called, so keys need not match the constructor and
    frozen dataclasses are filled as well. The copy is shallow.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object to decode into {cls.__name__}, "
            f"got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in data.items():
        object.__setattr__(obj, key, value)
    return obj
