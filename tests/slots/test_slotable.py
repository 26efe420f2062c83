"""Tests for slot reads and writes through generated accessors."""

import pytest

from slotkit import Slot, Slotable, slot
from slotkit.exceptions import ConflictingContentError, UnknownSlotError
from tests._components import SlotsComponent, SlotsWithPosArgComponent


class Tagged(Slot):
    def __init__(self, label, *, tone="plain"):
        if label == "bad":
            raise ValueError("bad label")
        self.label = label
        self.tone = tone


class Board(Slotable):
    title = slot()
    tab = slot(collection=True)
    tag = slot(collection=True, class_name=Tagged)


def test_read_before_write_returns_empty_values():
    board = Board()
    assert board.title() is None
    assert board.tabs() == []
    assert board.get_slot("tag") == []


def test_read_before_write_creates_no_entries():
    board = Board()
    board.title()
    board.tabs()
    assert "_slot_store" not in vars(board)
    assert board.tabs() == []
    assert board.title() is None
    assert "_slot_tab" not in board.slot_store
    assert len(board.slot_store) == 0


def test_write_content_then_read():
    board = Board()
    assert board.title(content="Hello") is None
    title = board.title()
    assert isinstance(title, Slot)
    assert title.content == "Hello"


def test_singular_write_overwrites():
    board = Board()
    board.title(content="first")
    board.title(content="second")
    assert board.title().content == "second"


def test_collection_appends_in_write_order():
    board = Board()
    for text in ["A", "B", "C", "D"]:
        board.tab(content=text)
    assert [tab.content for tab in board.tabs()] == ["A", "B", "C", "D"]


def test_collection_read_returns_copy():
    board = Board()
    board.tab(content="A")
    tabs = board.tabs()
    tabs.clear()
    assert len(board.tabs()) == 1


def test_block_is_captured_into_content():
    board = Board()
    board.title(block=lambda: "Captured")
    assert board.title().content == "Captured"


def test_block_output_written_to_view_context(view_context):
    board = Board()
    board.view_context = view_context
    board.tab(block=lambda: view_context.concat("<p>One</p>"))
    assert board.tabs()[0].content == "<p>One</p>"


def test_content_and_block_conflict_without_mutation():
    board = Board()
    with pytest.raises(ConflictingContentError) as excinfo:
        board.title(content="x", block=lambda: "y")
    assert "can not be passed both a content argument and a block" in str(
        excinfo.value
    )
    assert board.title() is None
    assert len(board.slot_store) == 0


def test_content_and_block_conflict_on_collection_setter():
    board = Board()
    board.tab(content="kept")
    with pytest.raises(ConflictingContentError):
        board.tab(content="x", block=lambda: "y")
    assert [tab.content for tab in board.tabs()] == ["kept"]


def test_unknown_slot_lists_registered_names():
    board = Board()
    with pytest.raises(UnknownSlotError) as excinfo:
        board.get_slot("footer")
    assert "Unknown slot 'footer'" in excinfo.value.message
    assert excinfo.value.context["registered_slots"] == ["title", "tab", "tag"]
    with pytest.raises(UnknownSlotError):
        board.set_slot("footer", content="x")


def test_unknown_accessor_is_attribute_error():
    board = Board()
    with pytest.raises(AttributeError):
        board.footer(content="x")


def test_arguments_forwarded_to_content_class():
    board = Board()
    board.tag("urgent", tone="loud", content="Fix it")
    tag = board.tags()[0]
    assert (tag.label, tag.tone, tag.content) == ("urgent", "loud", "Fix it")


def test_constructor_failure_leaves_store_untouched():
    board = Board()
    with pytest.raises(ValueError):
        board.tag("bad")
    with pytest.raises(TypeError):
        board.title("unexpected")
    assert board.tags() == []
    assert board.title() is None


def test_collection_setter_without_arguments_appends_empty_entry():
    board = Board()
    assert board.tab() is None
    tabs = board.tabs()
    assert len(tabs) == 1
    assert tabs[0].content is None


def test_singular_accessor_without_arguments_reads():
    board = Board()
    board.title()
    assert board.title() is None
    board.set_slot("title")
    assert isinstance(board.title(), Slot)
    assert board.title().content is None


def test_plural_accessor_with_block_appends():
    board = Board()
    board.tabs(block=lambda: "A")
    board.tabs(content="B")
    assert [tab.content for tab in board.tabs()] == ["A", "B"]


def test_bulk_seed_equivalent_to_sequential_writes():
    bulk = Board()
    bulk.tags(["red", "yellow", "green"], tone="stop-light", block=lambda: "light")

    sequential = Board()
    for seed in ["red", "yellow", "green"]:
        sequential.tag(seed, tone="stop-light", block=lambda: "light")

    def snapshot(board):
        return [(t.label, t.tone, t.content) for t in board.tags()]

    assert snapshot(bulk) == snapshot(sequential)
    assert snapshot(bulk) == [
        ("red", "stop-light", "light"),
        ("yellow", "stop-light", "light"),
        ("green", "stop-light", "light"),
    ]


def test_bulk_seed_accepts_tuple_and_content():
    board = Board()
    board.tags(("a", "b"), content="shared")
    assert [(t.label, t.content) for t in board.tags()] == [
        ("a", "shared"),
        ("b", "shared"),
    ]


def test_bulk_seed_appends_after_existing_entries():
    board = Board()
    board.tag("first")
    board.tags(["second", "third"])
    assert [t.label for t in board.tags()] == ["first", "second", "third"]


def test_bulk_seed_failure_commits_nothing():
    board = Board()
    with pytest.raises(ValueError):
        board.tags(["ok", "bad", "also-ok"])
    assert board.tags() == []


def test_bulk_seed_conflict_commits_nothing():
    board = Board()
    with pytest.raises(ConflictingContentError):
        board.tags(["a", "b"], content="x", block=lambda: "y")
    assert board.tags() == []


def test_singular_setter_does_not_bulk_seed():
    board = Board()
    board.tag(["a", "b"])
    tags = board.tags()
    assert len(tags) == 1
    assert tags[0].label == ["a", "b"]


def test_empty_sequence_is_a_single_positional_argument():
    board = Board()
    board.tags([])
    tags = board.tags()
    assert len(tags) == 1
    assert tags[0].label == []


def test_block_runs_once_per_bulk_seed():
    calls = []

    def block():
        calls.append(len(calls))
        return f"call {len(calls)}"

    board = Board()
    board.tags(["a", "b", "c"], block=block)
    assert [t.content for t in board.tags()] == ["call 1", "call 2", "call 3"]


def test_instances_do_not_share_stores():
    first, second = Board(), Board()
    first.title(content="one")
    first.tab(content="A")
    assert second.title() is None
    assert second.tabs() == []


def test_positional_arg_component_item():
    component = SlotsWithPosArgComponent()
    component.item("my item", class_names="hello", block=lambda: "My rad item")
    item = component.items()[0]
    assert item.title == "my item"
    assert item.class_names == "hello"
    assert item.content == "My rad item"


def test_inline_body_slot_arguments():
    component = SlotsComponent()
    component.item(highlighted=True, block=lambda: "Item B")
    component.footer(class_names="text-blue", content="Footer")
    assert component.items()[0].class_names == "highlighted"
    assert component.footer().class_names == "text-blue"
    assert component.footer().content == "Footer"


def test_storage_keys_are_used_by_store():
    board = Board()
    board.title(content="x")
    board.tab(content="y")
    assert sorted(board.slot_store.keys()) == ["_slot_tab", "_slot_title"]


def test_slot_store_membership_by_slot_name():
    board = Board()
    board.title(content="x")
    assert "title" in board.slot_store
    assert "tab" not in board.slot_store
