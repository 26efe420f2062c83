"""Markdown-backed slot content.

``MarkdownSlot`` is a slot content class for slots whose content is written
in Markdown. Templates read ``slot.html`` to get the converted markup.

Examples
--------
>>> from slotkit import Slotable, slot
>>> class Article(Slotable):
...     body = slot(class_name=MarkdownSlot)
>>> article = Article()
>>> article.body(content="# Welcome")
>>> article.body().html
'<h1>Welcome</h1>'
"""

from __future__ import annotations

import logging

import markdown2

from slotkit.slots.content import Slot
from slotkit.view.html import clean_html_output

logger = logging.getLogger(__name__)

MARKDOWN_EXTRAS: list[str] = ["tables", "fenced-code-blocks"]


class MarkdownSlot(Slot):
    """Slot content rendered from Markdown with ``markdown2``."""

    def __init__(self, *, extras: list[str] | None = None) -> None:
        self.extras = list(MARKDOWN_EXTRAS if extras is None else extras)

    @property
    def html(self) -> str:
        """The content converted to cleaned HTML (``""`` when unset)."""
        if self.content is None:
            return ""
        converted = markdown2.markdown(str(self.content), extras=self.extras)
        logger.debug("Converted %d chars of markdown", len(str(self.content)))
        return clean_html_output(str(converted))


__all__ = ["MARKDOWN_EXTRAS", "MarkdownSlot"]
