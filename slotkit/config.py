"""Global configuration constants for slotkit.

Defines reserved names, storage conventions, logging defaults and the
pluralization tables used across the slot engine and its tooling.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Slot declaration
RESERVED_SLOT_NAME: str = "content"
RESERVED_API_NAMES: frozenset[str] = frozenset(
    {
        "capture_slot_content",
        "get_slot",
        "pluralize_slot_name",
        "registered_slots",
        "set_slot",
        "slot_store",
        "validate_slots",
        "view_context",
        "with_slot",
    }
)
SLOT_STORAGE_KEY_PREFIX: str = "_slot_"

# Keyword extracted from accessor calls before construction
CONTENT_KEYWORD: str = "content"

# Templating defaults
MISSING_DATA_PLACEHOLDER: str = ""

# CLI defaults and logging
LOG_FILENAME_CLI: str = "slotkit.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "INFO"

# Pluralization
UNCOUNTABLE_WORDS: frozenset[str] = frozenset(
    {
        "data",
        "equipment",
        "information",
        "metadata",
        "news",
        "series",
        "sheep",
        "species",
    }
)
IRREGULAR_PLURALS: dict[str, str] = {
    "child": "children",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "mouse": "mice",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}
# Words ending in -f/-fe that take -ves
F_TO_VES_WORDS: frozenset[str] = frozenset(
    {"half", "knife", "leaf", "life", "loaf", "self", "shelf", "wife", "wolf"}
)
