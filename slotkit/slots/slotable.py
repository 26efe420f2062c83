"""Slotable mixin: per-type slot registry and per-instance slot access.

Mixing ``Slotable`` into a component type gives it a ``registered_slots``
registry, the ``with_slot`` declaration API and the ``get_slot``/``set_slot``
instance API that every generated accessor routes through.

Registry inheritance
--------------------
Each subclass receives a fresh copy of its parents' registries when it is
created, so slots declared on a subclass never appear on the parent type or
on sibling subclasses.

Read or write
-------------
A generated accessor called with no positional arguments, no keyword
arguments and no ``block`` reads the slot. Any argument makes it a write.
Collection slots also get a singular setter that always writes, which is the
way to append an entry with no arguments at all.

Examples
--------
>>> from slotkit import Slotable, slot
>>> class Card(Slotable):
...     title = slot()
...     tab = slot(collection=True)
>>> card = Card()
>>> card.title(content="Hello")
>>> card.title().content
'Hello'
>>> card.tab(block=lambda: "A")
>>> [t.content for t in card.tabs()]
['A']
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from slotkit.config import CONTENT_KEYWORD
from slotkit.exceptions import (
    ConflictingContentError,
    SlotDeclarationError,
    UnknownSlotError,
)
from slotkit.inflection import pluralize
from slotkit.slots.content import Slot
from slotkit.slots.registry import (
    SlotConfig,
    SlotDeclaration,
    declare_slot,
    resolve_content_class,
)
from slotkit.slots.store import SlotStore
from slotkit.view.context import ViewContext

logger = logging.getLogger(__name__)


class Slotable:
    """Mixin adding declared slots to a component type."""

    registered_slots: dict[str, SlotConfig] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        inherited: dict[str, SlotConfig] = {}
        for base in reversed(cls.__mro__[1:]):
            inherited.update(vars(base).get("registered_slots", {}))
        cls.registered_slots = inherited
        logger.debug(
            "Copied %d inherited slot(s) into %s", len(inherited), cls.__qualname__
        )

        declarations = [
            (attr, value)
            for attr, value in vars(cls).items()
            if isinstance(value, SlotDeclaration)
        ]
        for attr, declaration in declarations:
            delattr(cls, attr)
            declare_slot(
                cls,
                attr,
                collection=declaration.collection,
                class_name=declaration.class_name,
                body=declaration.body,
            )

    @classmethod
    def with_slot(
        cls,
        slot_name: str,
        *,
        collection: bool = False,
        class_name: type | str | None = None,
        body: Any = None,
    ) -> None:
        """Register a slot on this component type.

        Parameters
        ----------
        slot_name : str
            Name of the slot. Templates read it through an accessor with the
            same name, pluralized for collection slots.
        collection : bool, optional
            Whether the slot holds an ordered list of entries.
        class_name : type or str, optional
            Slot content class, or its name relative to this type. Resolved
            on first write. Defaults to :class:`slotkit.Slot`.
        body : type or Mapping, optional
            Inline body for an anonymous :class:`slotkit.Slot` subclass.

        Raises
        ------
        DuplicateSlotError
            If the slot is already declared.
        ReservedNameError
            If the slot is named ``content`` or would shadow an existing
            attribute of this type.

        Examples
        --------
        >>> class Tabs(Slotable):
        ...     pass
        >>> Tabs.with_slot("item", collection=True, class_name="Item")
        >>> class Item(Slot):
        ...     def __init__(self, title):
        ...         self.title = title
        >>> Tabs.Item = Item
        """
        if cls is Slotable:
            raise SlotDeclarationError(
                "Slots must be declared on a subclass of Slotable",
                context={"slot": slot_name},
            )
        declare_slot(
            cls, slot_name, collection=collection, class_name=class_name, body=body
        )

    @classmethod
    def pluralize_slot_name(cls, slot_name: str) -> str:
        """Return the accessor name of a collection slot."""
        return pluralize(slot_name)

    @classmethod
    def validate_slots(cls) -> dict[str, type]:
        """Resolve every slot's content class now instead of on first write.

        Returns
        -------
        dict[str, type]
            Slot name to resolved content class.

        Raises
        ------
        InvalidContentClassError
            For the first slot whose class is invalid.
        """
        return {
            name: resolve_content_class(config, cls)
            for name, config in cls.registered_slots.items()
        }

    @property
    def slot_store(self) -> SlotStore:
        """This instance's slot store, created on first access."""
        store = self.__dict__.get("_slot_store")
        if store is None:
            store = self.__dict__["_slot_store"] = SlotStore()
        return store

    def _slot_config(self, slot_name: str) -> SlotConfig:
        registry = type(self).registered_slots
        config = registry.get(slot_name)
        if config is None:
            raise UnknownSlotError(slot_name, registry.keys())
        return config

    def get_slot(self, slot_name: str) -> Any:
        """Return the content of ``slot_name``.

        Returns
        -------
        Any
            The stored content object, ``None`` for an unset singular slot,
            or a list (possibly empty) for a collection slot.

        Raises
        ------
        UnknownSlotError
            If the slot is not registered on this type.
        """
        config = self._slot_config(slot_name)
        store = self.__dict__.get("_slot_store")
        if store is None:
            return [] if config.collection else None
        return store.get(config)

    def set_slot(
        self,
        slot_name: str,
        *args: Any,
        block: Callable[[], Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Build one content object for ``slot_name`` and store it.

        Positional and keyword arguments go to the slot content class, except
        ``content``, which is assigned to the new object's ``content``
        attribute. A ``block`` is captured through the view context instead.

        Raises
        ------
        UnknownSlotError
            If the slot is not registered on this type.
        ConflictingContentError
            If both ``content`` and ``block`` are given.
        InvalidContentClassError
            If the slot's content class is not a slot content class.
        """
        config = self._slot_config(slot_name)
        instance = self._build_slot_content(config, args, kwargs, block)
        self.slot_store.put(config, instance)
        logger.debug("Set slot %s on %s", slot_name, type(self).__qualname__)

    def _set_slot_many(
        self,
        slot_name: str,
        seeds: Iterable[Any],
        kwargs: dict[str, Any],
        block: Callable[[], Any] | None,
    ) -> None:
        config = self._slot_config(slot_name)
        instances = [
            self._build_slot_content(config, (seed,), dict(kwargs), block)
            for seed in seeds
        ]
        self.slot_store.extend(config, instances)
        logger.debug(
            "Set %d entries of slot %s on %s",
            len(instances),
            slot_name,
            type(self).__qualname__,
        )

    def _build_slot_content(
        self,
        config: SlotConfig,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        block: Callable[[], Any] | None,
    ) -> Slot:
        has_content = CONTENT_KEYWORD in kwargs
        explicit_content = kwargs.pop(CONTENT_KEYWORD, None)
        if has_content and block is not None:
            raise ConflictingContentError(
                f"Slot {config.name!r} can not be passed both a content argument "
                "and a block",
                context={"slot": config.name},
            )

        slot_class = resolve_content_class(config, type(self))
        instance = slot_class(*args, **kwargs)
        if block is not None:
            instance.content = self.capture_slot_content(block)
        elif has_content:
            instance.content = explicit_content
        return instance

    def capture_slot_content(self, block: Callable[[], Any]) -> Any:
        """Realize a deferred content block through the view context."""
        view_context = getattr(self, "view_context", None)
        if view_context is None:
            view_context = ViewContext()
            self.view_context = view_context
        return view_context.capture(block)


__all__ = ["Slotable"]
