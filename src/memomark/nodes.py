"""Typed document nodes consumed by memomark renderers.

Nodes mirror the parser's output: every node has a ``type`` tag (NodeType)
and a type-specific payload. All nodes are frozen dataclasses with slots:
- Immutability: safe to share across threads and renders
- Pattern matching: ``match`` statements work naturally
- Memory efficiency: __slots__ reduces memory footprint

Node Hierarchy:
Node (base)
├── Block
│   ├── LineBreak
│   ├── Paragraph
│   ├── CodeBlock
│   ├── Heading
│   ├── HorizontalRule
│   ├── Blockquote
│   ├── List
│   ├── OrderedListItem
│   ├── UnorderedListItem
│   ├── TaskListItem
│   └── MathBlock
├── Inline
│   ├── Text
│   ├── Bold / Italic / Strikethrough / Highlight
│   ├── Code
│   ├── Link / AutoLink
│   ├── Tag
│   ├── EscapingCharacter
│   └── Math
└── UnknownNode (any type this package does not model)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class NodeType(Enum):
    """Tag identifying what a parsed node represents."""

    NODE_UNSPECIFIED = "NODE_UNSPECIFIED"
    # Block nodes
    LINE_BREAK = "LINE_BREAK"
    PARAGRAPH = "PARAGRAPH"
    CODE_BLOCK = "CODE_BLOCK"
    HEADING = "HEADING"
    HORIZONTAL_RULE = "HORIZONTAL_RULE"
    BLOCKQUOTE = "BLOCKQUOTE"
    LIST = "LIST"
    ORDERED_LIST_ITEM = "ORDERED_LIST_ITEM"
    UNORDERED_LIST_ITEM = "UNORDERED_LIST_ITEM"
    TASK_LIST_ITEM = "TASK_LIST_ITEM"
    MATH_BLOCK = "MATH_BLOCK"
    # Inline nodes
    TEXT = "TEXT"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    STRIKETHROUGH = "STRIKETHROUGH"
    HIGHLIGHT = "HIGHLIGHT"
    CODE = "CODE"
    LINK = "LINK"
    AUTO_LINK = "AUTO_LINK"
    TAG = "TAG"
    ESCAPING_CHARACTER = "ESCAPING_CHARACTER"
    MATH = "MATH"


class ListKind(Enum):
    """Kind of a list node. Anything but the three named kinds is generic."""

    KIND_UNSPECIFIED = "KIND_UNSPECIFIED"
    ORDERED = "ORDERED"
    UNORDERED = "UNORDERED"
    DESCRIPTION = "DESCRIPTION"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes.

    Subclasses pin their tag in the ``type`` class attribute.

    """

    type: ClassVar[NodeType] = NodeType.NODE_UNSPECIFIED


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text run."""

    type: ClassVar[NodeType] = NodeType.TEXT

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text. Markdown: **text** or __text__"""

    type: ClassVar[NodeType] = NodeType.BOLD

    children: tuple[Inline, ...]
    symbol: str = "*"


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text. Markdown: *text* or _text_"""

    type: ClassVar[NodeType] = NodeType.ITALIC

    children: tuple[Inline, ...]
    symbol: str = "*"


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Deleted text. Markdown: ~~text~~"""

    type: ClassVar[NodeType] = NodeType.STRIKETHROUGH

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Highlight(Node):
    """Highlighted text. Markdown: ==text=="""

    type: ClassVar[NodeType] = NodeType.HIGHLIGHT

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code. Markdown: `code`"""

    type: ClassVar[NodeType] = NodeType.CODE

    content: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink. Markdown: [text](url)"""

    type: ClassVar[NodeType] = NodeType.LINK

    url: str
    children: tuple[Inline, ...] = ()
    title: str | None = None


@dataclass(frozen=True, slots=True)
class AutoLink(Node):
    """Bare or angle-bracketed URL. Markdown: <https://...>"""

    type: ClassVar[NodeType] = NodeType.AUTO_LINK

    url: str
    is_raw_text: bool = False


@dataclass(frozen=True, slots=True)
class Tag(Node):
    """Hashtag. Markdown: #tag"""

    type: ClassVar[NodeType] = NodeType.TAG

    content: str


@dataclass(frozen=True, slots=True)
class EscapingCharacter(Node):
    """Backslash-escaped character. Markdown: \\*"""

    type: ClassVar[NodeType] = NodeType.ESCAPING_CHARACTER

    symbol: str


@dataclass(frozen=True, slots=True)
class Math(Node):
    """Inline math. Markdown: $E = mc^2$"""

    type: ClassVar[NodeType] = NodeType.MATH

    content: str


type Inline = (
    Text
    | Bold
    | Italic
    | Strikethrough
    | Highlight
    | Code
    | Link
    | AutoLink
    | Tag
    | EscapingCharacter
    | Math
    | LineBreak
    | UnknownNode
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Line break the parser emits between blocks and list items."""

    type: ClassVar[NodeType] = NodeType.LINE_BREAK


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of inline content."""

    type: ClassVar[NodeType] = NodeType.PARAGRAPH

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown: ```lang\\ncode\\n```

    """

    type: ClassVar[NodeType] = NodeType.CODE_BLOCK

    content: str
    language: str = ""


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading. Markdown: ## Heading"""

    type: ClassVar[NodeType] = NodeType.HEADING

    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Thematic break. Markdown: ---"""

    type: ClassVar[NodeType] = NodeType.HORIZONTAL_RULE

    symbol: str = "-"


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """Block quote. Markdown: > quoted"""

    type: ClassVar[NodeType] = NodeType.BLOCKQUOTE

    children: tuple[DocumentNode, ...]


@dataclass(frozen=True, slots=True)
class OrderedListItem(Node):
    """Numbered list item.

    ``number`` is the marker the author wrote (``5.`` -> 5). ``None`` when the
    parser could not supply one; renderers then fall back to default
    numbering.

    """

    type: ClassVar[NodeType] = NodeType.ORDERED_LIST_ITEM

    children: tuple[Inline, ...]
    number: int | None = None
    indent: int = 0


@dataclass(frozen=True, slots=True)
class UnorderedListItem(Node):
    """Bulleted list item. Markdown: - item"""

    type: ClassVar[NodeType] = NodeType.UNORDERED_LIST_ITEM

    children: tuple[Inline, ...]
    symbol: str = "-"
    indent: int = 0


@dataclass(frozen=True, slots=True)
class TaskListItem(Node):
    """Checkbox list item. Markdown: - [x] done"""

    type: ClassVar[NodeType] = NodeType.TASK_LIST_ITEM

    children: tuple[Inline, ...]
    complete: bool = False
    symbol: str = "-"
    indent: int = 0


@dataclass(frozen=True, slots=True)
class List(Node):
    """A run of list items, possibly interleaved with line breaks.

    ``children`` is in document order and may contain nested ``List``
    nodes whose ``indent`` is one deeper.

    """

    type: ClassVar[NodeType] = NodeType.LIST

    kind: ListKind
    children: tuple[DocumentNode, ...]
    indent: int = 0


@dataclass(frozen=True, slots=True)
class MathBlock(Node):
    """Display math. Markdown: $$\\n...\\n$$"""

    type: ClassVar[NodeType] = NodeType.MATH_BLOCK

    content: str


@dataclass(frozen=True, slots=True)
class UnknownNode(Node):
    """Node of a type this package does not model.

    Keeps the parser's type name and raw payload so nothing is lost when a
    tree round-trips through memomark.

    """

    type_name: str
    payload: dict[str, Any] = field(default_factory=dict)


type Block = (
    LineBreak
    | Paragraph
    | CodeBlock
    | Heading
    | HorizontalRule
    | Blockquote
    | List
    | OrderedListItem
    | UnorderedListItem
    | TaskListItem
    | MathBlock
)

type DocumentNode = Block | Inline
