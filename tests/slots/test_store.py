"""Tests for the per-instance slot store."""

from slotkit import Slot
from slotkit.slots.registry import SlotConfig
from slotkit.slots.store import SlotStore


def _config(name, collection=False):
    return SlotConfig(name=name, owner=object, class_ref=Slot, collection=collection)


def test_unset_entries_return_empty_values():
    store = SlotStore()
    assert store.get(_config("title")) is None
    assert store.get(_config("tab", collection=True)) == []
    assert len(store) == 0


def test_put_replaces_singular_and_appends_collection():
    store = SlotStore()
    title, tab = _config("title"), _config("tab", collection=True)
    first, second = Slot(), Slot()
    store.put(title, first)
    store.put(title, second)
    store.put(tab, first)
    store.put(tab, second)
    assert store.get(title) is second
    assert store.get(tab) == [first, second]
    assert title in store and "_slot_tab" in store


def test_extend_keeps_order():
    store = SlotStore()
    tab = _config("tab", collection=True)
    entries = [Slot() for _ in range(3)]
    store.extend(tab, entries)
    assert store.get(tab) == entries
    assert list(store.keys()) == ["_slot_tab"]


def test_extend_with_nothing_creates_no_entry():
    store = SlotStore()
    tab = _config("tab", collection=True)
    store.extend(tab, [])
    assert tab not in store


def test_contains_accepts_slot_names():
    store = SlotStore()
    store.put(_config("title"), Slot())
    assert "title" in store
    assert "_slot_title" in store
    assert "subtitle" not in store
    assert 42 not in store
