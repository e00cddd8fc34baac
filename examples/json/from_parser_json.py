"""Render parser JSON with a custom indent unit.

The parser ships nodes as JSON with list numbers as strings. The first
item's number becomes the ordered list's ``start``.
"""

from memomark import RenderConfig, elements_to_json, nodes_from_json, render, render_html

PAYLOAD = """
[{"type": "LIST", "listNode": {"kind": "ORDERED", "indent": 0, "children": [
  {"type": "ORDERED_LIST_ITEM", "orderedListItemNode": {"number": "7", "children": [
    {"type": "TEXT", "textNode": {"content": "seventh"}}]}},
  {"type": "LINE_BREAK", "lineBreakNode": {}},
  {"type": "ORDERED_LIST_ITEM", "orderedListItemNode": {"number": "8", "children": [
    {"type": "TEXT", "textNode": {"content": "eighth"}}]}}
]}}]
"""

nodes = nodes_from_json(PAYLOAD)
config = RenderConfig(indent_unit=1, indent_css_unit="rem")

print(render_html(nodes, config=config))
print(elements_to_json(render(nodes, config=config), indent=2))
