"""Element renderer: document nodes to an Element tree.

The reference ``NodeRenderer``. Dispatches on node class with ``match`` and
hands ``List`` nodes to ``memomark.lists.render_list``, which calls back into
this renderer for every list child. Nesting depth is carried by each
``List`` node's own ``indent``.

Thread Safety:
The renderer holds no per-render state. A single instance can be shared
across threads.

"""

from collections.abc import Callable, Sequence

from memomark.elements import FRAGMENT, Element
from memomark.errors import RenderError
from memomark.lists import render_list
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
    Math,
    MathBlock,
    Node,
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


class ElementRenderer:
    """Render document nodes to ``Element`` trees.

    Usage:
        >>> renderer = ElementRenderer()
        >>> el = renderer.render(Paragraph((Text("hi"),)), "PARAGRAPH-0")
        >>> el.tag, el.text()
        ('p', 'hi')

    """

    __slots__ = ("_text_transformer",)

    def __init__(self, *, text_transformer: Callable[[str], str] | None = None) -> None:
        """Initialize renderer.

        Args:
            text_transformer: Optional callback applied to every text run
        """
        self._text_transformer = text_transformer

    def render(self, node: DocumentNode, key: str) -> Element:
        """Render one node to an element keyed ``key``.

        Raises:
            RenderError: If ``node`` is not a document node.
        """
        match node:
            case List():
                return render_list(node.kind, node.indent, node.children, self, key=key)
            case LineBreak():
                return Element("br", key=key)
            case Paragraph():
                return Element("p", key=key, children=self._render_children(node.children))
            case Heading():
                level = min(max(node.level, 1), 6)
                return Element(f"h{level}", key=key, children=self._render_children(node.children))
            case CodeBlock():
                lang_classes = (f"language-{node.language}",) if node.language else ()
                code = Element("code", classes=lang_classes, children=(node.content,))
                return Element("pre", key=key, children=(code,))
            case HorizontalRule():
                return Element("hr", key=key)
            case Blockquote():
                return Element(
                    "blockquote", key=key, children=self._render_children(node.children)
                )
            case OrderedListItem() | UnorderedListItem():
                return Element("li", key=key, children=self._render_children(node.children))
            case TaskListItem():
                return self._render_task_item(node, key)
            case MathBlock():
                return Element("div", key=key, classes=("math-block",), children=(node.content,))
            case Text():
                return Element(FRAGMENT, key=key, children=(self._transform(node.content),))
            case Bold():
                return Element("strong", key=key, children=self._render_children(node.children))
            case Italic():
                return Element("em", key=key, children=self._render_children(node.children))
            case Strikethrough():
                return Element("del", key=key, children=self._render_children(node.children))
            case Highlight():
                return Element("mark", key=key, children=self._render_children(node.children))
            case Code():
                return Element("code", key=key, children=(node.content,))
            case Link():
                return self._render_link(node, key)
            case AutoLink():
                if node.is_raw_text:
                    return Element(FRAGMENT, key=key, children=(node.url,))
                return Element("a", key=key, attrs={"href": node.url}, children=(node.url,))
            case Tag():
                return Element("span", key=key, classes=("tag",), children=(f"#{node.content}",))
            case EscapingCharacter():
                return Element(FRAGMENT, key=key, children=(node.symbol,))
            case Math():
                return Element("span", key=key, classes=("math",), children=(node.content,))
            case UnknownNode():
                logger.debug("No renderer for node type %r; rendering nothing", node.type_name)
                return Element(FRAGMENT, key=key)
            case Node():
                logger.debug("No renderer for %s; rendering nothing", type(node).__name__)
                return Element(FRAGMENT, key=key)
            case _:
                raise RenderError(f"Cannot render {type(node).__name__}: not a document node")

    def render_document(self, nodes: Sequence[DocumentNode]) -> tuple[Element, ...]:
        """Render top-level nodes with positional keys."""
        return self._render_children(nodes)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _render_children(self, nodes: Sequence[DocumentNode]) -> tuple[Element, ...]:
        return tuple(
            self.render(child, f"{child.type.name}-{index}")
            for index, child in enumerate(nodes)
        )

    def _render_task_item(self, item: TaskListItem, key: str) -> Element:
        checkbox = Element(
            "input",
            attrs={"type": "checkbox", "checked": item.complete, "disabled": True},
        )
        return Element(
            "li",
            key=key,
            classes=("task-list-item",),
            children=(checkbox, *self._render_children(item.children)),
        )

    def _render_link(self, link: Link, key: str) -> Element:
        attrs: dict[str, str] = {"href": link.url}
        if link.title:
            attrs["title"] = link.title
        children: tuple[Element | str, ...] = self._render_children(link.children)
        if not children:
            children = (link.url,)
        return Element("a", key=key, attrs=attrs, children=children)

    def _transform(self, text: str) -> str:
        if self._text_transformer:
            return self._text_transformer(text)
        return text
