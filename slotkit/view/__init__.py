"""View-side collaborators: content capture, templating and HTML cleanup."""

from .context import ViewContext
from .html import clean_html_output
from .templating import (
    extract_placeholders_from_template,
    load_template,
    render_template,
)

__all__ = [
    "ViewContext",
    "clean_html_output",
    "extract_placeholders_from_template",
    "load_template",
    "render_template",
]
