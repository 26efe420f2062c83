"""Tests for collection accessor pluralization."""

import pytest

from slotkit.inflection import pluralize


@pytest.mark.parametrize(
    ("singular", "plural"),
    [
        ("tab", "tabs"),
        ("item", "items"),
        ("box", "boxes"),
        ("match", "matches"),
        ("entry", "entries"),
        ("day", "days"),
        ("leaf", "leaves"),
        ("knife", "knives"),
        ("person", "people"),
        ("child", "children"),
        ("nav_item", "nav_items"),
        ("nav_entry", "nav_entries"),
        ("news", "news"),
        ("sheep", "sheep"),
        ("quiz", "quizzes"),
        ("fez", "fezzes"),
        ("buzz", "buzzes"),
        ("waltz", "waltzes"),
        ("topaz", "topazes"),
        ("pop_quiz", "pop_quizzes"),
    ],
)
def test_pluralize(singular, plural):
    assert pluralize(singular) == plural


def test_pluralize_keeps_leading_capital_of_irregulars():
    assert pluralize("Person") == "People"
