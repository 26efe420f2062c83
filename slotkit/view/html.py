"""HTML normalization for rendered component output.

Rendered component markup is assembled from template fragments and captured
slot content, which leaves empty paragraphs and stray whitespace between
tags. ``clean_html_output`` normalizes that so output can be compared and
inspected reliably.
"""

import re


def clean_html_output(html_content: str) -> str:
    r"""Perform lightweight normalization and cleaning of generated HTML strings.

    Removes empty paragraphs, redundant breaks and whitespace between tags.

    Parameters
    ----------
    html_content : str
        Raw HTML string.

    Returns
    -------
    str
        Cleaned HTML string.

    Raises
    ------
    TypeError
        If input is not str.

    Examples
    --------
    >>> clean_html_output("<p></p><h1>Hi</h1><p>&nbsp;</p><br><br>")
    '<h1>Hi</h1><br>'
    """
    if not isinstance(html_content, str):
        raise TypeError("Input must be a string.")
    html_content = re.sub(r"<p>\s*</p>", "", html_content)
    html_content = re.sub(r"<p>&nbsp;</p>", "", html_content)
    html_content = re.sub(r"<p><br\s*/?>\s*</p>", "", html_content)
    html_content = re.sub(r"(<br\s*/?>\s*){2,}", "<br>", html_content)
    html_content = re.sub(r">\s+<", "><", html_content)
    return html_content.strip()


__all__ = ["clean_html_output"]
