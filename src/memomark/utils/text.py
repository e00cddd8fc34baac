"""Text helpers shared by the renderers and serializers.

Example:
    >>> from memomark.utils.text import class_names
    >>> class_names("list-inside", "", "list-disc", "list-inside")
    'list-inside list-disc'
"""

from __future__ import annotations

import html as html_module


def class_names(*parts: str | None) -> str:
    """Join CSS class names into one ``class`` attribute value.

    Empty and ``None`` parts are skipped. A part may hold several
    space-separated names. Duplicates keep their first position.

    Examples:
        >>> class_names("a b", None, "b c")
        'a b c'
        >>> class_names()
        ''
    """
    seen: dict[str, None] = {}
    for part in parts:
        if not part:
            continue
        for name in part.split():
            seen.setdefault(name, None)
    return " ".join(seen)


def escape_html(text: str) -> str:
    """Escape text content.

    Escapes <, >, & and ". Single quotes are left alone since text nodes
    never sit inside single-quoted attributes.

    Examples:
        >>> escape_html("a < b & c")
        'a &lt; b &amp; c'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def escape_attr(text: str) -> str:
    """Escape a value for use inside a double-quoted attribute.

    Examples:
        >>> escape_attr("it's \\"quoted\\"")
        'it&#x27;s &quot;quoted&quot;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)
