"""Per-instance storage of slot content.

A ``SlotStore`` belongs to exactly one component instance. Entries are keyed
by the slot's storage key and created on first write only: reading a slot
that was never written returns ``None`` (singular) or an empty list
(collection) and leaves the store untouched.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from slotkit.config import SLOT_STORAGE_KEY_PREFIX
from slotkit.slots.registry import SlotConfig


class SlotStore:
    """Mapping of storage key to a content object or an append-only list."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def __contains__(self, config: object) -> bool:
        """Match a ``SlotConfig``, a slot name or a storage key."""
        if isinstance(config, SlotConfig):
            return config.storage_key in self._entries
        if not isinstance(config, str):
            return False
        return (
            config in self._entries
            or f"{SLOT_STORAGE_KEY_PREFIX}{config}" in self._entries
        )

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, config: SlotConfig) -> Any:
        """Return the stored value, or the empty value for an unset slot.

        Collection reads return a new list so callers cannot mutate the
        stored sequence.
        """
        if config.storage_key not in self._entries:
            return [] if config.collection else None
        value = self._entries[config.storage_key]
        if config.collection:
            return list(value)
        return value

    def put(self, config: SlotConfig, value: Any) -> None:
        """Store one content object: append for collections, else replace."""
        if config.collection:
            self._entries.setdefault(config.storage_key, []).append(value)
        else:
            self._entries[config.storage_key] = value

    def extend(self, config: SlotConfig, values: Iterable[Any]) -> None:
        """Append several content objects to a collection slot, in order."""
        for value in values:
            self.put(config, value)


__all__ = ["SlotStore"]
