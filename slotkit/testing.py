"""Test helpers for rendering components outside a host application."""

from __future__ import annotations

from typing import Any, Callable

from slotkit.component import Component
from slotkit.view.context import ViewContext
from slotkit.view.html import clean_html_output


def render_inline(
    component: Component,
    block: Callable[[Any], Any] | None = None,
    view_context: ViewContext | None = None,
) -> str:
    """Render ``component`` with a fresh view context and return clean HTML.

    Parameters
    ----------
    component : Component
        Component instance to render.
    block : Callable, optional
        Called with the component before rendering; fills its slots.
    view_context : ViewContext, optional
        Context to render in. A new one is created by default.

    Returns
    -------
    str
        Rendered markup normalized by ``clean_html_output``.

    Examples
    --------
    >>> html = render_inline(card, lambda c: c.title(content="Hello"))  # doctest: +SKIP
    """
    html = component.render_in(view_context or ViewContext(), block)
    return clean_html_output(html)


__all__ = ["render_inline"]
