"""slotkit: declared slots for composable UI components.

A component type declares named slots, singular or collection, and callers
fill them with content and structured data before the component renders.

Package Structure
-----------------
- `slots/`: slot registry, accessor synthesis, per-instance store and the
  ``Slotable`` mixin.
- `view/`: content capture (``ViewContext``), placeholder templating, HTML
  cleanup and Markdown slot content.
- `component.py`: minimal host ``Component`` with a render lifecycle.
- `config.py`: configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: project exception hierarchy.
- `cli.py`: the ``slotkit`` inspection command.

Examples
--------
>>> from slotkit import Component, Slotable, slot
>>> class Card(Slotable, Component):
...     title = slot()
...     tab = slot(collection=True)
"""

from slotkit.component import Component
from slotkit.exceptions import (
    AppError,
    ConflictingContentError,
    DuplicateSlotError,
    InvalidContentClassError,
    ReservedNameError,
    SlotDeclarationError,
    SlotError,
    UnknownSlotError,
)
from slotkit.slots import Slot, SlotConfig, Slotable, slot
from slotkit.view import ViewContext

__all__ = [
    "AppError",
    "Component",
    "ConflictingContentError",
    "DuplicateSlotError",
    "InvalidContentClassError",
    "ReservedNameError",
    "Slot",
    "SlotConfig",
    "SlotDeclarationError",
    "SlotError",
    "Slotable",
    "UnknownSlotError",
    "ViewContext",
    "slot",
]
