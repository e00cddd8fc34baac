"""
memomark: Structured rendering for parsed memo markdown

Turns the typed node tree a markdown parser produces into a framework-neutral
Element tree, and Element trees into HTML. The list renderer owns container
semantics, nesting indentation, ordered-list start numbers and the removal of
the redundant line breaks the parser places after list items.

Quick Start:
    >>> from memomark import List, ListKind, LineBreak, Text, UnorderedListItem, render_html
    >>> nodes = [
    ...     List(
    ...         kind=ListKind.UNORDERED,
    ...         children=(
    ...             UnorderedListItem((Text("a"),)),
    ...             LineBreak(),
    ...             UnorderedListItem((Text("b"),)),
    ...         ),
    ...     )
    ... ]
    >>> print(render_html(nodes))
    <ul class="list-inside break-all list-disc" style="padding-left: 0px">
    <li>a</li>
    <li>b</li>
    </ul>

From parser JSON:
    >>> from memomark import nodes_from_json, render_html
    >>> html = render_html(nodes_from_json(payload))

"""

from collections.abc import Sequence

from memomark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from memomark.elements import FRAGMENT, ContainerRole, Element
from memomark.errors import MemomarkError, NodeFormatError, RenderError
from memomark.lists import (
    ContainerSpec,
    process_children,
    render_list,
    resolve_container,
    spacing,
    spacing_style,
)
from memomark.nodes import (
    AutoLink,
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    DocumentNode,
    EscapingCharacter,
    Heading,
    Highlight,
    HorizontalRule,
    Inline,
    Italic,
    LineBreak,
    Link,
    List,
    ListKind,
    Math,
    MathBlock,
    Node,
    NodeType,
    OrderedListItem,
    Paragraph,
    Strikethrough,
    Tag,
    TaskListItem,
    Text,
    UnknownNode,
    UnorderedListItem,
)
from memomark.renderers.element import ElementRenderer
from memomark.renderers.html import HtmlSerializer, to_html
from memomark.renderers.protocol import NodeRenderer
from memomark.serialization import (
    element_from_dict,
    element_to_dict,
    elements_to_json,
    node_from_dict,
    node_to_dict,
    nodes_from_json,
    nodes_to_json,
)

__version__ = "0.1.0"


def render(
    nodes: Sequence[DocumentNode], *, config: RenderConfig | None = None
) -> tuple[Element, ...]:
    """Render top-level document nodes to Element trees.

    Args:
        nodes: Parsed top-level nodes in document order
        config: Render configuration for this call (active config if None)

    Returns:
        One element per node, keyed by position.
    """
    renderer = ElementRenderer()
    if config is None:
        return renderer.render_document(nodes)
    with render_config_context(config):
        return renderer.render_document(nodes)


def render_html(nodes: Sequence[DocumentNode], *, config: RenderConfig | None = None) -> str:
    """Render top-level document nodes straight to HTML.

    Example:
        >>> render_html([Paragraph((Text("Hello"),))])
        '<p>Hello</p>\\n'
    """
    return to_html(render(nodes, config=config))


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "render",
    "render_html",
    "render_list",
    # List rendering
    "ContainerSpec",
    "process_children",
    "resolve_container",
    "spacing",
    "spacing_style",
    # Node model
    "Node",
    "NodeType",
    "ListKind",
    "Block",
    "Inline",
    "DocumentNode",
    "Blockquote",
    "CodeBlock",
    "Heading",
    "HorizontalRule",
    "LineBreak",
    "List",
    "MathBlock",
    "OrderedListItem",
    "Paragraph",
    "TaskListItem",
    "UnorderedListItem",
    "AutoLink",
    "Bold",
    "Code",
    "EscapingCharacter",
    "Highlight",
    "Italic",
    "Link",
    "Math",
    "Strikethrough",
    "Tag",
    "Text",
    "UnknownNode",
    # Output model
    "ContainerRole",
    "Element",
    "FRAGMENT",
    # Renderers
    "ElementRenderer",
    "HtmlSerializer",
    "NodeRenderer",
    "to_html",
    # Serialization
    "element_from_dict",
    "element_to_dict",
    "elements_to_json",
    "node_from_dict",
    "node_to_dict",
    "nodes_from_json",
    "nodes_to_json",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "MemomarkError",
    "NodeFormatError",
    "RenderError",
]
