"""Slot content types.

Every object stored in a slot is an instance of a *slot content class*: a
class that satisfies the ``Slot`` capability. Subclassing ``Slot`` is the
usual way in; an unrelated class can opt in explicitly with
``Slot.register(cls)`` as long as it accepts a ``content`` attribute.

Slot content classes define their own constructor to carry structured data
next to the rendered content:

>>> class Item(Slot):
...     def __init__(self, title, *, class_names=""):
...         self.title = title
...         self.class_names = class_names
>>> item = Item("red", class_names="stop-light")
>>> item.content is None
True
"""

from __future__ import annotations

from abc import ABC
from typing import Any


class Slot(ABC):
    """Base slot content type.

    Attributes
    ----------
    content : Any
        Directly supplied content or text captured from a deferred block.
        ``None`` until the owning component assigns it.
    """

    content: Any = None

    def __str__(self) -> str:
        return "" if self.content is None else str(self.content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(content={self.content!r})"


def is_slot_class(obj: Any) -> bool:
    """Return True if ``obj`` is a class with the slot-content capability."""
    return isinstance(obj, type) and issubclass(obj, Slot)


__all__ = ["Slot", "is_slot_class"]
