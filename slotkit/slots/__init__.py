"""Slot registry, instance store and slot content types.

- `content.py`: the ``Slot`` content base class and capability check.
- `registry.py`: ``SlotConfig``, declaration, accessor synthesis and lazy
  content-class resolution.
- `store.py`: per-instance ``SlotStore``.
- `slotable.py`: the ``Slotable`` mixin tying them together.
"""

from .content import Slot, is_slot_class
from .registry import (
    SlotConfig,
    SlotDeclaration,
    declare_slot,
    resolve_content_class,
    slot,
)
from .slotable import Slotable
from .store import SlotStore

__all__ = [
    "Slot",
    "SlotConfig",
    "SlotDeclaration",
    "SlotStore",
    "Slotable",
    "declare_slot",
    "is_slot_class",
    "resolve_content_class",
    "slot",
]
