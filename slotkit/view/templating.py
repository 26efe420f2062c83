"""Placeholder templating for component output.

Components may describe their markup as a template string with ``{name}``
placeholders instead of overriding ``call()``. This module loads such
templates, lists their placeholders and renders them from a context mapping.

Boundaries
----------
- No template language: no loops, conditionals or escaping.
- Only string and file Path handling; deterministic given inputs.

Examples
--------
>>> render_template("<h1>{title}</h1>", {"title": "Hello"})
'<h1>Hello</h1>'
>>> extract_placeholders_from_template("{b} {a} {b}")
['a', 'b']
"""

import re
from pathlib import Path
from typing import Any, Mapping

from slotkit.config import MISSING_DATA_PLACEHOLDER

_PLACEHOLDER_RE = re.compile(r"\{([a-zA-Z0-9_]+)\}")


def load_template(path: Path) -> str:
    """Read the contents of a template file as a string.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    with path.open("r", encoding="utf-8") as fh:
        return fh.read()


def extract_placeholders_from_template(content: str) -> list[str]:
    """Return a sorted list of unique placeholders found in the template."""
    return sorted(set(_PLACEHOLDER_RE.findall(content)))


def render_template(template_content: str, context: Mapping[str, Any]) -> str:
    """Render the template by replacing placeholders using the provided context.

    Parameters
    ----------
    template_content : str
        The template text containing ``{placeholders}``.
    context : Mapping[str, Any]
        Placeholder names to values. Values are converted with ``str``;
        ``None`` and missing keys render as ``MISSING_DATA_PLACEHOLDER``.

    Returns
    -------
    str
        The rendered template.
    """

    def replace_func(match: re.Match[str]) -> str:
        value = context.get(match.group(1))
        if value is None:
            return MISSING_DATA_PLACEHOLDER
        return str(value)

    return _PLACEHOLDER_RE.sub(replace_func, template_content)


__all__ = ["extract_placeholders_from_template", "load_template", "render_template"]
