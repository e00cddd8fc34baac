"""Serialization for document nodes and rendered elements.

Document nodes use the parser's JSON shape: a ``type`` tag plus one payload
object named after the type in camelCase::

    {"type": "ORDERED_LIST_ITEM",
     "orderedListItemNode": {"number": "5", "indent": 0, "children": [...]}}

List item numbers travel as strings. A number that does not parse degrades
to ``None`` (no start override) rather than failing. Types this package does
not model become ``UnknownNode`` and keep their payload.

Elements serialize to plain dicts with deterministic (sorted-key) JSON output
so rendered trees can be cached and diffed.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Callable, Sequence
from dataclasses import fields
from typing import Any

from memomark.elements import Element
from memomark.errors import NodeFormatError
from memomark.nodes import (
    AutoLink,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    DocumentNode,
    EscapingCharacter,
    Heading,
    Highlight,
    HorizontalRule,
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
from memomark.utils.logger import get_logger

logger = get_logger(__name__)

# Wire order of ListKind values in numeric encodings
_LIST_KINDS_BY_NUMBER = tuple(ListKind)


def payload_key(type_name: str) -> str:
    """Payload field name for a node type: ``LINE_BREAK`` -> ``lineBreakNode``."""
    head, *rest = type_name.lower().split("_")
    return head + "".join(part.title() for part in rest) + "Node"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


# =============================================================================
# Nodes: dict -> node
# =============================================================================


def node_from_dict(data: dict[str, Any]) -> DocumentNode:
    """Build a document node from its parser JSON dict.

    Raises:
        NodeFormatError: If the dict has no ``type`` or a malformed payload.
    """
    if not isinstance(data, dict):
        raise NodeFormatError(f"expected a node object, got {type(data).__name__}")
    type_name = data.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise NodeFormatError("node has no type tag")

    payload = data.get(payload_key(type_name), {})
    if not isinstance(payload, dict):
        raise NodeFormatError("payload must be an object", type_name)

    try:
        node_type = NodeType[type_name]
    except KeyError:
        return UnknownNode(type_name=type_name, payload=payload)

    builder = _BUILDERS.get(node_type)
    if builder is None:
        return UnknownNode(type_name=type_name, payload=payload)
    try:
        return builder(payload)
    except (TypeError, ValueError) as exc:
        raise NodeFormatError(str(exc), type_name) from exc


def nodes_from_list(items: list[dict[str, Any]]) -> tuple[DocumentNode, ...]:
    """Build a node sequence from a list of node dicts."""
    if not isinstance(items, list):
        raise NodeFormatError(f"expected a list of nodes, got {type(items).__name__}")
    return tuple(node_from_dict(item) for item in items)


def nodes_from_json(json_str: str) -> tuple[DocumentNode, ...]:
    """Parse a JSON array of nodes (or an object with a ``nodes`` array)."""
    data = json.loads(json_str)
    if isinstance(data, dict) and "nodes" in data:
        data = data["nodes"]
    return nodes_from_list(data)


def _children(payload: dict[str, Any]) -> tuple[DocumentNode, ...]:
    return nodes_from_list(payload.get("children", []))


def _inline_children(payload: dict[str, Any]) -> tuple[DocumentNode, ...]:
    """Children of an inline container; older payloads carry plain ``content``."""
    if "children" in payload:
        return _children(payload)
    content = payload.get("content")
    if isinstance(content, list):
        return nodes_from_list(content)
    if content:
        return (Text(content=str(content)),)
    return ()


def _parse_number(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring unparsable list item number %r", value)
        return None


def _parse_kind(value: Any) -> ListKind:
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < len(_LIST_KINDS_BY_NUMBER):
            return _LIST_KINDS_BY_NUMBER[value]
        return ListKind.KIND_UNSPECIFIED
    try:
        return ListKind[str(value)]
    except KeyError:
        return ListKind.KIND_UNSPECIFIED


_BUILDERS: dict[NodeType, Callable[[dict[str, Any]], DocumentNode]] = {
    NodeType.LINE_BREAK: lambda p: LineBreak(),
    NodeType.PARAGRAPH: lambda p: Paragraph(children=_children(p)),
    NodeType.CODE_BLOCK: lambda p: CodeBlock(
        content=p.get("content", ""), language=p.get("language", "")
    ),
    NodeType.HEADING: lambda p: Heading(level=int(p.get("level", 1)), children=_children(p)),
    NodeType.HORIZONTAL_RULE: lambda p: HorizontalRule(symbol=p.get("symbol", "-")),
    NodeType.BLOCKQUOTE: lambda p: Blockquote(children=_children(p)),
    NodeType.LIST: lambda p: List(
        kind=_parse_kind(p.get("kind")),
        indent=int(p.get("indent", 0)),
        children=_children(p),
    ),
    NodeType.ORDERED_LIST_ITEM: lambda p: OrderedListItem(
        children=_children(p),
        number=_parse_number(p.get("number")),
        indent=int(p.get("indent", 0)),
    ),
    NodeType.UNORDERED_LIST_ITEM: lambda p: UnorderedListItem(
        children=_children(p),
        symbol=p.get("symbol", "-"),
        indent=int(p.get("indent", 0)),
    ),
    NodeType.TASK_LIST_ITEM: lambda p: TaskListItem(
        children=_children(p),
        complete=bool(p.get("complete", False)),
        symbol=p.get("symbol", "-"),
        indent=int(p.get("indent", 0)),
    ),
    NodeType.MATH_BLOCK: lambda p: MathBlock(content=p.get("content", "")),
    NodeType.TEXT: lambda p: Text(content=p.get("content", "")),
    NodeType.BOLD: lambda p: Bold(children=_inline_children(p), symbol=p.get("symbol", "*")),
    NodeType.ITALIC: lambda p: Italic(children=_inline_children(p), symbol=p.get("symbol", "*")),
    NodeType.STRIKETHROUGH: lambda p: Strikethrough(children=_inline_children(p)),
    NodeType.HIGHLIGHT: lambda p: Highlight(children=_inline_children(p)),
    NodeType.CODE: lambda p: Code(content=p.get("content", "")),
    NodeType.LINK: lambda p: Link(
        url=p.get("url", ""), children=_inline_children(p), title=p.get("title") or None
    ),
    NodeType.AUTO_LINK: lambda p: AutoLink(
        url=p.get("url", ""), is_raw_text=bool(p.get("isRawText", False))
    ),
    NodeType.TAG: lambda p: Tag(content=p.get("content", "")),
    NodeType.ESCAPING_CHARACTER: lambda p: EscapingCharacter(symbol=p.get("symbol", "")),
    NodeType.MATH: lambda p: Math(content=p.get("content", "")),
}


# =============================================================================
# Nodes: node -> dict
# =============================================================================


def node_to_dict(node: DocumentNode) -> dict[str, Any]:
    """Convert a document node to its parser JSON dict."""
    if isinstance(node, UnknownNode):
        return {"type": node.type_name, payload_key(node.type_name): dict(node.payload)}

    payload: dict[str, Any] = {}
    for f in fields(node):
        payload[_camel(f.name)] = _serialize_node_value(getattr(node, f.name), f.name)
    return {"type": node.type.name, payload_key(node.type.name): payload}


def _serialize_node_value(value: Any, field_name: str) -> Any:
    if isinstance(value, Node):
        return node_to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_node_value(v, field_name) for v in value]
    if isinstance(value, ListKind):
        return value.name
    if field_name == "number":
        return "" if value is None else str(value)
    return value


def nodes_to_json(nodes: Sequence[DocumentNode], *, indent: int | None = None) -> str:
    """Serialize a node sequence to a JSON array."""
    return json.dumps([node_to_dict(n) for n in nodes], indent=indent, sort_keys=True)


# =============================================================================
# Elements
# =============================================================================


def element_to_dict(element: Element) -> dict[str, Any]:
    """Convert an element tree to a JSON-compatible dict."""
    return {
        "tag": element.tag,
        "key": element.key,
        "attrs": dict(element.attrs),
        "classes": list(element.classes),
        "style": dict(element.style),
        "children": [
            child if isinstance(child, str) else element_to_dict(child)
            for child in element.children
        ],
    }


def element_from_dict(data: dict[str, Any]) -> Element:
    """Rebuild an element tree from ``element_to_dict`` output."""
    return Element(
        tag=data["tag"],
        key=data.get("key"),
        attrs=dict(data.get("attrs", {})),
        classes=tuple(data.get("classes", ())),
        style=dict(data.get("style", {})),
        children=tuple(
            child if isinstance(child, str) else element_from_dict(child)
            for child in data.get("children", ())
        ),
    )


def elements_to_json(
    elements: Element | tuple[Element, ...] | list[Element], *, indent: int | None = None
) -> str:
    """Serialize one element or a sequence of elements to deterministic JSON."""
    if isinstance(elements, Element):
        return json.dumps(element_to_dict(elements), indent=indent, sort_keys=True)
    return json.dumps([element_to_dict(e) for e in elements], indent=indent, sort_keys=True)
