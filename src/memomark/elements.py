"""Output tree produced by memomark renderers.

An ``Element`` is a framework-neutral description of one output node: a tag
(either a concrete markup tag or an abstract container role), a stable
positional key, attributes, CSS classes, inline style and ordered children.
Serializers (see ``memomark.renderers.html``) turn element trees into text.

Thread Safety:
Elements are frozen and never mutated after construction.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# Tag of an element that contributes only its children to the output.
FRAGMENT = "fragment"


class ContainerRole(StrEnum):
    """Structural category of a list, independent of markup."""

    ORDERED = "ordered-list-container"
    UNORDERED = "unordered-list-container"
    DESCRIPTION = "description-list-container"
    GENERIC = "generic-container"

    @property
    def html_tag(self) -> str:
        """Markup tag serializers emit for this role."""
        return _ROLE_TAGS[self]


_ROLE_TAGS: dict[ContainerRole, str] = {
    ContainerRole.ORDERED: "ol",
    ContainerRole.UNORDERED: "ul",
    ContainerRole.DESCRIPTION: "dl",
    ContainerRole.GENERIC: "div",
}


@dataclass(frozen=True, slots=True)
class Element:
    """One node of the rendered output tree.

    Attributes:
        tag: Markup tag, container role value, or ``FRAGMENT``
        key: Positional key, stable across re-renders of the same input
        attrs: Extra attributes (``start``, ``href``, ``checked``...)
        classes: CSS classes in order
        style: CSS declarations, property -> value
        children: Child elements and text, in document order

    """

    tag: str
    key: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict)
    classes: tuple[str, ...] = ()
    style: dict[str, str] = field(default_factory=dict)
    children: tuple[Element | str, ...] = ()

    @property
    def is_fragment(self) -> bool:
        return self.tag == FRAGMENT

    def text(self) -> str:
        """Concatenated text content of this subtree."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            else:
                parts.append(child.text())
        return "".join(parts)
