"""Minimal host component with a render lifecycle.

``Component`` supplies the lifecycle a slotable type needs to be rendered:
a view context, the captured content of the caller's block, a
``before_render`` hook and a ``call()`` producing markup. Slot declaration and
access come from mixing in :class:`slotkit.Slotable`.

Lifecycle of ``render_in(view_context, block)``:

1. the view context is attached to the component;
2. ``block(component)`` runs through ``view_context.capture``; this is where
   callers fill slots, and anything it outputs becomes ``component.content``;
3. ``before_render()``;
4. ``call()`` returns the rendered string.

Examples
--------
>>> from slotkit import Component, Slotable, slot
>>> class Greeting(Slotable, Component):
...     template = "<h1>{title}</h1>"
...     title = slot()
...     def template_context(self):
...         return {"title": self.title()}
>>> Greeting().render_in(block=lambda c: c.title(content="Hi"))
'<h1>Hi</h1>'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from slotkit.view.context import ViewContext
from slotkit.view.templating import load_template, render_template

logger = logging.getLogger(__name__)


class Component:
    """Base class for renderable components.

    Attributes
    ----------
    template : str or None
        Placeholder template rendered by the default ``call()``.
    template_path : Path or None
        File holding the template; used when ``template`` is not set.
    view_context : ViewContext or None
        Set by ``render_in``.
    content : Any
        Output captured from the block passed to ``render_in``.
    """

    template: str | None = None
    template_path: Path | None = None
    view_context: ViewContext | None = None
    content: Any = None

    def render_in(
        self,
        view_context: ViewContext | None = None,
        block: Callable[[Any], Any] | None = None,
    ) -> str:
        """Render the component and return its markup."""
        self.view_context = view_context if view_context is not None else ViewContext()
        if block is not None:
            self.content = self.view_context.capture(block, self)
        self.before_render()
        output = self.call()
        logger.debug("Rendered %s (%d chars)", type(self).__qualname__, len(output))
        return output

    def before_render(self) -> None:
        """Hook called after the block ran and before ``call()``."""

    def template_context(self) -> dict[str, Any]:
        """Placeholder values for the default ``call()``."""
        return {"content": self.content}

    def call(self) -> str:
        """Return the component's markup.

        Renders ``template`` (or the file at ``template_path``) with
        ``template_context()``. Subclasses without a template override this.

        Raises
        ------
        NotImplementedError
            If the component has neither a template nor a ``call()`` override.
        """
        template = self.template
        if template is None and self.template_path is not None:
            template = load_template(Path(self.template_path))
        if template is None:
            raise NotImplementedError(
                f"{type(self).__qualname__} must define a template or override call()"
            )
        return render_template(template, self.template_context())


__all__ = ["Component"]
