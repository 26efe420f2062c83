"""Content capture for deferred slot blocks.

A ``ViewContext`` is the collaborator that turns a deferred content block
into realized text. Blocks either return their content or write it into the
context's current output buffer with :meth:`ViewContext.concat`; buffered
output wins over the return value, mirroring how template engines capture
nested output.

Examples
--------
>>> ctx = ViewContext()
>>> ctx.capture(lambda: "Tab A")
'Tab A'
>>> ctx.capture(lambda: ctx.concat("<p>One</p>"))
'<p>One</p>'
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ViewContext:
    """Output-buffer stack used to capture deferred content blocks."""

    def __init__(self) -> None:
        self._buffers: list[list[str]] = [[]]

    @property
    def output(self) -> str:
        """Text written to the outermost buffer so far."""
        return "".join(self._buffers[0])

    def concat(self, text: Any) -> None:
        """Append ``text`` to the current output buffer."""
        if text is None:
            return
        self._buffers[-1].append(str(text))

    def capture(self, block: Callable[..., Any], *args: Any) -> str:
        """Run ``block`` with a fresh buffer and return what it produced.

        Parameters
        ----------
        block : Callable
            Deferred content block. Called synchronously with ``*args``.
        *args : Any
            Positional arguments forwarded to the block.

        Returns
        -------
        str
            The buffered output if the block wrote any, otherwise the block's
            return value as ``str`` (``""`` for ``None``).
        """
        self._buffers.append([])
        try:
            result = block(*args)
        finally:
            buffered = self._buffers.pop()
        if buffered:
            return "".join(buffered)
        if result is None:
            return ""
        return str(result)


__all__ = ["ViewContext"]
