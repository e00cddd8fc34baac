"""NodeRenderer protocol: the per-node rendering interface.

The list core never renders a child itself: it hands every child to a
``NodeRenderer`` together with a positional key. The built-in
``ElementRenderer`` is the reference implementation.

Example:
    from memomark.renderers.protocol import NodeRenderer

    def render_all(renderer: NodeRenderer, nodes) -> list[Element]:
        return [renderer.render(n, f"{n.type.name}-{i}") for i, n in enumerate(nodes)]

"""

from typing import Protocol

from memomark.elements import Element
from memomark.nodes import DocumentNode


class NodeRenderer(Protocol):
    """Protocol for per-node renderers.

    Implementations must be total over every document node variant,
    including nested lists, which recurse back into ``render_list``.

    """

    def render(self, node: DocumentNode, key: str) -> Element:
        """Render a single node.

        Args:
            node: The node to render.
            key: Positional key to attach to the produced element.

        Returns:
            The rendered element.

        """
        ...
