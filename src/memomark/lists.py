"""List rendering.

Maps a list node's kind and children to a container element:

1. Container resolution: kind -> container role, list-style classes and,
   for ordered lists, a start number taken from the first item.
2. Indentation: nesting depth -> left padding, linear in depth.
3. Child processing: one forward pass over the children that delegates each
   child to a NodeRenderer and drops the line break that directly follows a
   rendered non-break child.

The parser appends a LINE_BREAK after each list item. The item already ends
its own line, so that break would render as an empty line between items.
Only one break is consumed per rendered child, and a break that follows
another break is always kept.

Thread Safety:
All rolling state lives in local variables of ``process_children``. Calls
share nothing and may run concurrently.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from memomark.config import get_render_config
from memomark.elements import ContainerRole, Element
from memomark.nodes import DocumentNode, ListKind, NodeType
from memomark.utils.logger import get_logger

if TYPE_CHECKING:
    from memomark.renderers.protocol import NodeRenderer

logger = get_logger(__name__)

_ROLES: dict[ListKind, ContainerRole] = {
    ListKind.ORDERED: ContainerRole.ORDERED,
    ListKind.UNORDERED: ContainerRole.UNORDERED,
    ListKind.DESCRIPTION: ContainerRole.DESCRIPTION,
}

_LIST_STYLES: dict[ListKind, str] = {
    ListKind.ORDERED: "list-decimal",
    ListKind.UNORDERED: "list-disc",
}


@dataclass(frozen=True, slots=True)
class ContainerSpec:
    """Resolved container of one list.

    Attributes:
        role: Container role for the list kind
        classes: Base classes followed by the list-style class
        start: Start number override, or None for default numbering

    """

    role: ContainerRole
    classes: tuple[str, ...]
    start: int | None = None


def resolve_container(kind: ListKind | object, children: Sequence[DocumentNode]) -> ContainerSpec:
    """Resolve the container role, classes and start override of a list.

    Unrecognized kinds fall back to the generic container with no list
    style.

    Example:
        >>> spec = resolve_container(ListKind.ORDERED, (OrderedListItem((), number=5),))
        >>> spec.role, spec.start
        (<ContainerRole.ORDERED: 'ordered-list-container'>, 5)
    """
    role = _ROLES.get(kind, ContainerRole.GENERIC)  # type: ignore[arg-type]
    style = _LIST_STYLES.get(kind, "list-none")  # type: ignore[arg-type]
    classes = (*get_render_config().list_base_classes, style)
    return ContainerSpec(role=role, classes=classes, start=_start_override(kind, children))


def _start_override(kind: ListKind | object, children: Sequence[DocumentNode]) -> int | None:
    if kind is not ListKind.ORDERED or not children:
        return None
    first = children[0]
    if first.type is not NodeType.ORDERED_LIST_ITEM:
        return None
    number = getattr(first, "number", None)
    if number is None:
        logger.debug("Ordered list starts with an item without a number; using default start")
    return number


def spacing(indent: int) -> int:
    """Left spacing for a list nested ``indent`` levels deep.

    Linear in ``indent`` with the configured unit per level.

    Example:
        >>> spacing(0), spacing(1), spacing(2)
        (0, 6, 12)
    """
    return indent * get_render_config().indent_unit


def spacing_style(indent: int) -> dict[str, str]:
    """Inline style carrying ``spacing(indent)`` as left padding."""
    config = get_render_config()
    return {"padding-left": f"{spacing(indent)}{config.indent_css_unit}"}


def process_children(
    children: Sequence[DocumentNode], renderer: NodeRenderer
) -> list[Element | None]:
    """Render children in order, omitting redundant line breaks.

    A LINE_BREAK is omitted when the child before it was rendered and is not
    itself a LINE_BREAK. An omitted break does not become the "previous"
    node and disarms the rule until the next rendered child.

    Args:
        children: List children in document order
        renderer: Renderer each kept child is delegated to

    Returns:
        One entry per child: the rendered element, or None if omitted.
        Keys are ``"{TYPE}-{index}"`` with the child's original position.

    """
    results: list[Element | None] = []
    previous: DocumentNode | None = None
    skip_next_break = False

    for index, child in enumerate(children):
        previous_is_break = previous is not None and previous.type is NodeType.LINE_BREAK
        if not previous_is_break and child.type is NodeType.LINE_BREAK and skip_next_break:
            skip_next_break = False
            results.append(None)
            continue

        results.append(renderer.render(child, f"{child.type.name}-{index}"))
        previous = child
        skip_next_break = True

    return results


def render_list(
    kind: ListKind | object,
    indent: int,
    children: Sequence[DocumentNode],
    renderer: NodeRenderer,
    *,
    key: str | None = None,
) -> Element:
    """Render a list node into its container element.

    Args:
        kind: List kind; unrecognized values render as a generic container
        indent: Nesting depth supplied by the caller (0 for top level)
        children: List children in document order
        renderer: Renderer for each child, including nested lists
        key: Key of the container itself

    Returns:
        Container element whose tag is the container role value.

    Example:
        >>> from memomark.renderers.element import ElementRenderer
        >>> el = render_list(ListKind.UNORDERED, 1, children, ElementRenderer())
        >>> el.tag, el.style
        ('unordered-list-container', {'padding-left': '6px'})
    """
    spec = resolve_container(kind, children)
    attrs = {"start": spec.start} if spec.start is not None else {}
    rendered = tuple(el for el in process_children(children, renderer) if el is not None)
    return Element(
        tag=spec.role.value,
        key=key,
        attrs=attrs,
        classes=spec.classes,
        style=spacing_style(indent),
        children=rendered,
    )


__all__ = [
    "ContainerSpec",
    "process_children",
    "render_list",
    "resolve_container",
    "spacing",
    "spacing_style",
]
