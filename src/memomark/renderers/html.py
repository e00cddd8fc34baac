"""HTML serializer for Element trees.

Walks an ``Element`` tree once, appending fragments to a list and joining at
the end. Container roles become their markup tag (``ol``, ``ul``, ``dl``,
``div``); fragments emit only their children.

Thread Safety:
The output buffer is local to each ``serialize()`` call. A single
HtmlSerializer can be shared across threads.

"""

from collections.abc import Iterable

from memomark.elements import ContainerRole, Element
from memomark.utils.text import class_names, escape_attr, escape_html

# Elements that never have children or a closing tag
VOID_TAGS = frozenset({"br", "hr", "img", "input"})

# Block-level tags followed by a newline to keep output readable
_BLOCK_TAGS = frozenset(
    {
        "blockquote",
        "dl",
        "div",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "li",
        "ol",
        "p",
        "pre",
        "ul",
    }
)

_ROLE_VALUES = {role.value: role for role in ContainerRole}


class HtmlSerializer:
    """Serialize Element trees to HTML.

    Usage:
        >>> HtmlSerializer().serialize(Element("p", children=("a < b",)))
        '<p>a &lt; b</p>\\n'

    """

    __slots__ = ("_newlines",)

    def __init__(self, *, newlines: bool = True) -> None:
        """Initialize serializer.

        Args:
            newlines: Emit a newline after block-level closing tags
        """
        self._newlines = newlines

    def serialize(self, elements: Element | Iterable[Element]) -> str:
        """Serialize one element or a sequence of sibling elements."""
        parts: list[str] = []
        if isinstance(elements, Element):
            elements = (elements,)
        for element in elements:
            self._write(element, parts)
        return "".join(parts)

    def _write(self, node: Element | str, parts: list[str]) -> None:
        if isinstance(node, str):
            parts.append(escape_html(node))
            return

        if node.is_fragment:
            for child in node.children:
                self._write(child, parts)
            return

        tag = _tag_for(node.tag)
        parts.append(f"<{tag}{_attributes(node)}")
        if tag in VOID_TAGS:
            parts.append(" />")
        else:
            parts.append(">")
            if self._newlines and tag in _BLOCK_TAGS and _has_block_child(node):
                parts.append("\n")
            for child in node.children:
                self._write(child, parts)
            parts.append(f"</{tag}>")
        if self._newlines and tag in _BLOCK_TAGS | {"br"}:
            parts.append("\n")


def _tag_for(tag: str) -> str:
    role = _ROLE_VALUES.get(tag)
    return role.html_tag if role is not None else tag


def _has_block_child(node: Element) -> bool:
    return any(
        isinstance(child, Element) and _tag_for(child.tag) in _BLOCK_TAGS
        for child in node.children
    )


def _attributes(node: Element) -> str:
    """Render class, style and remaining attributes in a stable order."""
    out: list[str] = []
    classes = class_names(*node.classes)
    if classes:
        out.append(f' class="{escape_attr(classes)}"')
    if node.style:
        style = "; ".join(f"{prop}: {value}" for prop, value in node.style.items())
        out.append(f' style="{escape_attr(style)}"')
    for name, value in node.attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            out.append(f" {name}")
        else:
            out.append(f' {name}="{escape_attr(str(value))}"')
    return "".join(out)


def to_html(elements: Element | Iterable[Element], *, newlines: bool = True) -> str:
    """Serialize Element trees to an HTML string.

    Args:
        elements: One element or a sequence of sibling elements.
        newlines: Emit a newline after block-level elements.

    Returns:
        HTML string.
    """
    return HtmlSerializer(newlines=newlines).serialize(elements)
