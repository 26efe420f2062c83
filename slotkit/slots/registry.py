"""Slot registry: declaration, accessor synthesis and content-class resolution.

Each slotable component type owns a ``registered_slots`` mapping from slot
name to :class:`SlotConfig`. Declaring a slot validates the name, computes
the accessor name, records the config and installs the generated accessors
on the type:

- the combined get/set accessor, named after the slot (or its plural for
  collection slots);
- for collection slots, an append-only setter named after the singular slot.

Content classes referenced by name are resolved lazily, on first write or on
explicit validation, because the class may be defined after the declaration
(for example a nested class further down the same class body).

Examples
--------
>>> from slotkit import Slotable
>>> class Card(Slotable):
...     pass
>>> Card.with_slot("tab", collection=True)
>>> Card.registered_slots["tab"].accessor_name
'tabs'
"""

from __future__ import annotations

import importlib
import logging
import types
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping

from slotkit.config import (
    RESERVED_API_NAMES,
    RESERVED_SLOT_NAME,
    SLOT_STORAGE_KEY_PREFIX,
)
from slotkit.exceptions import (
    DuplicateSlotError,
    InvalidContentClassError,
    ReservedNameError,
    SlotDeclarationError,
)
from slotkit.slots.content import Slot, is_slot_class

if TYPE_CHECKING:
    from slotkit.slots.slotable import Slotable

logger = logging.getLogger(__name__)


@dataclass
class SlotConfig:
    """Type-level configuration of one registered slot.

    Attributes
    ----------
    name : str
        Slot name, unique within the owning type's registry.
    owner : type
        Component type that declared the slot.
    class_ref : type | str
        Content class, or a dotted name resolved on first use.
    collection : bool
        Whether the slot holds an ordered sequence.
    accessor_name : str
        Name of the combined get/set accessor.
    storage_key : str
        Key of the slot's entry in each instance's store.
    resolved : dict
        Resolved content class per component type. String references resolve
        against the type being written, so a subclass that redefines a nested
        content class gets its own entry.
    """

    name: str
    owner: type
    class_ref: type | str
    collection: bool = False
    accessor_name: str = ""
    storage_key: str = ""
    resolved: dict[type, type] = field(
        default_factory=dict, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.accessor_name:
            self.accessor_name = self.name
        if not self.storage_key:
            self.storage_key = f"{SLOT_STORAGE_KEY_PREFIX}{self.name}"

    @property
    def class_name(self) -> str:
        """Display name of the content class reference."""
        if isinstance(self.class_ref, str):
            return self.class_ref
        return getattr(self.class_ref, "__qualname__", repr(self.class_ref))

    @property
    def is_resolved(self) -> bool:
        return self.owner in self.resolved


class SlotDeclaration:
    """Class-body slot declaration, consumed when the class is created.

    Created by :func:`slot`. It can be assigned to a class attribute or used
    as a class decorator, in which case the decorated class becomes the
    inline body of the slot content class::

        class Card(Slotable, Component):
            title = slot()

            @slot(collection=True)
            class item:
                def __init__(self, highlighted=False):
                    self.highlighted = highlighted
    """

    def __init__(
        self,
        *,
        collection: bool = False,
        class_name: type | str | None = None,
        body: Any = None,
    ) -> None:
        self.collection = collection
        self.class_name = class_name
        self.body = body

    def __call__(self, body: type) -> "SlotDeclaration":
        if self.body is not None or self.class_name is not None:
            raise SlotDeclarationError(
                "slot() used as a decorator cannot also take class_name or body",
                context={"body": getattr(body, "__name__", repr(body))},
            )
        self.body = body
        return self

    def __repr__(self) -> str:
        return (
            f"slot(collection={self.collection!r}, class_name={self.class_name!r})"
        )


def slot(
    *,
    collection: bool = False,
    class_name: type | str | None = None,
    body: Any = None,
) -> SlotDeclaration:
    """Declare a slot inside a class body.

    The slot name is the attribute name the declaration is bound to.
    Arguments are those of :func:`declare_slot`.
    """
    return SlotDeclaration(collection=collection, class_name=class_name, body=body)


def _inline_bases(body: Any) -> tuple[tuple[type, ...], dict[str, Any]]:
    if isinstance(body, Mapping):
        return (Slot,), dict(body)
    if isinstance(body, type):
        # zero-argument super() in body methods needs the body in the MRO
        if issubclass(body, Slot):
            return (body,), {}
        return (body, Slot), {}
    raise SlotDeclarationError(
        f"Slot body must be a class or a mapping, got {type(body).__name__}",
        context={"body": repr(body)},
    )


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_") if part)


def build_inline_slot_class(owner: type, slot_name: str, body: Any) -> type:
    """Synthesize an anonymous ``Slot`` subclass from an inline body.

    Parameters
    ----------
    owner : type
        Component type declaring the slot; used for naming only.
    slot_name : str
        Slot name; the class is named ``<CamelName>Slot``.
    body : type or Mapping
        A plain class, which becomes a base of the new subclass, or a mapping
        whose items are copied into its namespace.

    Returns
    -------
    type
        New subclass of :class:`Slot`.

    Raises
    ------
    SlotDeclarationError
        If ``body`` is neither a class nor a mapping, or cannot be combined
        with :class:`Slot`.
    """
    bases, namespace = _inline_bases(body)
    class_name = f"{_camel(slot_name)}Slot"
    try:
        slot_class = types.new_class(
            class_name, bases, exec_body=lambda ns: ns.update(namespace)
        )
    except TypeError as exc:
        raise SlotDeclarationError(
            f"Slot body for {slot_name!r} cannot be combined with slotkit.Slot: "
            f"{exc}",
            context={"slot": slot_name, "owner": owner.__qualname__},
        ) from exc
    slot_class.__module__ = owner.__module__
    slot_class.__qualname__ = f"{owner.__qualname__}.{class_name}"
    return slot_class


def _make_accessor(slot_name: str, accessor_name: str, bulk: bool) -> Callable:
    def accessor(
        self: "Slotable", *args: Any, block: Callable | None = None, **kwargs: Any
    ) -> Any:
        if not args and not kwargs and block is None:
            return self.get_slot(slot_name)
        if bulk and _is_seed_sequence(args):
            self._set_slot_many(slot_name, args[0], kwargs, block)
            return None
        return self.set_slot(slot_name, *args, block=block, **kwargs)

    accessor.__name__ = accessor_name
    accessor.__doc__ = (
        f"Read the '{slot_name}' slot when called without arguments, "
        "otherwise write it."
    )
    return accessor


def _make_setter(slot_name: str) -> Callable:
    def setter(
        self: "Slotable", *args: Any, block: Callable | None = None, **kwargs: Any
    ) -> None:
        return self.set_slot(slot_name, *args, block=block, **kwargs)

    setter.__name__ = slot_name
    setter.__doc__ = f"Append one entry to the '{slot_name}' collection slot."
    return setter


def _is_seed_sequence(args: tuple[Any, ...]) -> bool:
    return (
        len(args) == 1 and isinstance(args[0], (list, tuple)) and len(args[0]) > 0
    )


def _install(cls: type, name: str, func: Callable) -> None:
    func.__qualname__ = f"{cls.__qualname__}.{name}"
    func.__module__ = cls.__module__
    setattr(cls, name, func)


def declare_slot(
    cls: type["Slotable"],
    name: str,
    *,
    collection: bool = False,
    class_name: type | str | None = None,
    body: Any = None,
) -> SlotConfig:
    """Register a slot on ``cls`` and install its generated accessors.

    Parameters
    ----------
    cls : type
        Slotable component type receiving the slot.
    name : str
        Slot name. ``content`` and the slot API names are reserved.
    collection : bool, optional
        Declare a collection slot. The combined accessor is then named after
        the plural of ``name`` and ``name`` itself becomes an append setter.
    class_name : type or str, optional
        Content class or a dotted name, resolved lazily against the component
        type being written (``cls`` or a subclass).
        Defaults to :class:`Slot`.
    body : type or Mapping, optional
        Inline body for an anonymous content class. Exclusive with
        ``class_name``.

    Returns
    -------
    SlotConfig
        The registered configuration.

    Raises
    ------
    DuplicateSlotError
        If ``name`` is already registered or its accessors collide with
        another slot's accessors.
    ReservedNameError
        If ``name`` is ``content`` or a slot API name, or if an accessor would
        shadow an existing attribute of ``cls``.
    SlotDeclarationError
        If both ``class_name`` and ``body`` are given.
    """
    if not isinstance(name, str) or not name.isidentifier():
        raise SlotDeclarationError(
            f"Slot name {name!r} is not a valid identifier",
            context={"slot": repr(name), "owner": cls.__qualname__},
        )
    registry = cls.registered_slots
    if name in registry:
        raise DuplicateSlotError(
            f"{name} slot declared multiple times",
            context={"slot": name, "owner": cls.__qualname__},
        )
    if name == RESERVED_SLOT_NAME:
        raise ReservedNameError(
            f"{name!r} is a reserved slot name. "
            "Please use another name, such as 'body'",
            context={"slot": name, "owner": cls.__qualname__},
        )
    if name in RESERVED_API_NAMES:
        raise ReservedNameError(
            f"{name!r} would shadow the slot API of {cls.__qualname__}",
            context={"slot": name, "owner": cls.__qualname__},
        )
    if class_name is not None and body is not None:
        raise SlotDeclarationError(
            f"Slot {name!r} takes either class_name or body, not both",
            context={"slot": name, "owner": cls.__qualname__},
        )

    accessor_name = cls.pluralize_slot_name(name) if collection else name
    if collection and accessor_name == name:
        raise DuplicateSlotError(
            f"Collection slot {name!r} pluralizes to itself; its accessor would "
            "collide with its setter",
            context={"slot": name, "owner": cls.__qualname__},
        )
    new_names = {name, accessor_name}
    for other in registry.values():
        taken = new_names & {other.name, other.accessor_name}
        if taken:
            raise DuplicateSlotError(
                f"{name} slot accessor {sorted(taken)} collides with slot "
                f"{other.name}",
                context={
                    "slot": name,
                    "owner": cls.__qualname__,
                    "other": other.name,
                },
            )
    for attr in sorted(new_names):
        if hasattr(cls, attr):
            raise ReservedNameError(
                f"{name} slot accessor {attr!r} would shadow "
                f"{cls.__qualname__}.{attr}",
                context={"slot": name, "owner": cls.__qualname__, "attribute": attr},
            )

    if body is not None:
        class_ref: type | str = build_inline_slot_class(cls, name, body)
    else:
        class_ref = class_name if class_name is not None else Slot

    config = SlotConfig(
        name=name,
        owner=cls,
        class_ref=class_ref,
        collection=collection,
        accessor_name=accessor_name,
    )

    _install(cls, accessor_name, _make_accessor(name, accessor_name, collection))
    if collection:
        _install(cls, name, _make_setter(name))
    registry[name] = config
    logger.debug(
        "Declared slot %s on %s (collection=%s, accessor=%s, class=%s)",
        name,
        cls.__qualname__,
        collection,
        accessor_name,
        config.class_name,
    )
    return config


def _lookup_attribute_path(root: Any, path: str) -> Any:
    target = root
    for part in path.split("."):
        target = getattr(target, part)
    return target


def _lookup_class_name(component: type, owner: type, class_name: str) -> Any:
    try:
        return _lookup_attribute_path(component, class_name)
    except AttributeError:
        pass

    for module_name in dict.fromkeys((component.__module__, owner.__module__)):
        module = importlib.import_module(module_name)
        try:
            return _lookup_attribute_path(module, class_name)
        except AttributeError:
            pass

    if ":" in class_name:
        module_name, _, attr_path = class_name.partition(":")
    else:
        module_name, _, attr_path = class_name.rpartition(".")
    if not module_name:
        raise LookupError(class_name)
    try:
        imported = importlib.import_module(module_name)
        return _lookup_attribute_path(imported, attr_path)
    except (ImportError, AttributeError) as exc:
        raise LookupError(class_name) from exc


def resolve_content_class(config: SlotConfig, component: type | None = None) -> type:
    """Resolve and validate the content class of ``config``.

    Parameters
    ----------
    config : SlotConfig
        Slot whose content class is resolved.
    component : type, optional
        Component type being written; defaults to the declaring type. String
        references are looked up on this type first, so a subclass that
        redefines a nested content class uses its own definition.

    Returns
    -------
    type
        The validated content class, cached on the config per component type.

    Raises
    ------
    InvalidContentClassError
        If the reference cannot be resolved, or resolves to something that is
        not a slot content class.
    """
    component = config.owner if component is None else component
    cached = config.resolved.get(component)
    if cached is not None:
        return cached

    ref = config.class_ref
    if isinstance(ref, str):
        try:
            resolved = _lookup_class_name(component, config.owner, ref)
        except LookupError as exc:
            raise InvalidContentClassError(
                f"{ref} could not be resolved from {component.__qualname__}",
                context={"slot": config.name, "class_name": ref},
            ) from exc
    else:
        resolved = ref

    if not is_slot_class(resolved):
        raise InvalidContentClassError(
            f"{config.class_name} must inherit from slotkit.Slot",
            context={"slot": config.name, "class_name": config.class_name},
        )

    config.resolved[component] = resolved
    logger.debug(
        "Resolved content class for slot %s on %s: %s",
        config.name,
        component.__qualname__,
        resolved.__qualname__,
    )
    return resolved


__all__ = [
    "SlotConfig",
    "SlotDeclaration",
    "build_inline_slot_class",
    "declare_slot",
    "resolve_content_class",
    "slot",
]
