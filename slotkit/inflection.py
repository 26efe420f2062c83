"""Default pluralizer for collection slot accessor names.

Collection slots expose a plural accessor (``tabs``) next to their singular
setter (``tab``). The plural form is computed here with a small set of
English rules. Components needing other rules override
``Slotable.pluralize_slot_name``.

Examples
--------
>>> from slotkit.inflection import pluralize
>>> pluralize("tab")
'tabs'
>>> pluralize("nav_entry")
'nav_entries'
"""

from __future__ import annotations

import re

from slotkit.config import F_TO_VES_WORDS, IRREGULAR_PLURALS, UNCOUNTABLE_WORDS

_SIBILANT_RE = re.compile(r"(s|x|z|ch|sh)$")
_CONSONANT_Y_RE = re.compile(r"[^aeiou]y$")
_SHORT_Z_RE = re.compile(r"^(qu|[^aeiou]*)[aeiou]z$")


def _pluralize_word(word: str) -> str:
    lower = word.lower()
    if not lower or lower in UNCOUNTABLE_WORDS:
        return word
    if lower in IRREGULAR_PLURALS:
        plural = IRREGULAR_PLURALS[lower]
        return plural.capitalize() if word[0].isupper() else plural
    if lower in F_TO_VES_WORDS:
        stem = word[:-2] if lower.endswith("fe") else word[:-1]
        return stem + "ves"
    if _SHORT_Z_RE.search(lower):
        return word + "zes"
    if _SIBILANT_RE.search(lower):
        return word + "es"
    if _CONSONANT_Y_RE.search(lower):
        return word[:-1] + "ies"
    return word + "s"


def pluralize(identifier: str) -> str:
    """Return the plural form of a snake_case identifier.

    Only the last underscore-separated segment is inflected, so
    ``"nav_item"`` becomes ``"nav_items"``.

    Parameters
    ----------
    identifier : str
        Slot name to pluralize.

    Returns
    -------
    str
        Plural identifier. Uncountable words are returned unchanged.
    """
    head, sep, last = identifier.rpartition("_")
    return f"{head}{sep}{_pluralize_word(last)}"


__all__ = ["pluralize"]
