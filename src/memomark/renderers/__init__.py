"""memomark renderers.

Renderers turn document nodes into Element trees; serializers turn Element
trees into text.

Available:
- ElementRenderer: Reference per-node renderer (NodeRenderer protocol)
- HtmlSerializer / to_html: Element trees to HTML

Thread Safety:
Neither keeps per-call state on the instance. Safe for concurrent use.

"""

from memomark.renderers.element import ElementRenderer
from memomark.renderers.html import HtmlSerializer, to_html
from memomark.renderers.protocol import NodeRenderer

__all__ = ["ElementRenderer", "HtmlSerializer", "NodeRenderer", "to_html"]
