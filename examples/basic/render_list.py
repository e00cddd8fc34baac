"""Render a bulleted list with the parser's trailing breaks. Zero config, zero deps."""

from memomark import LineBreak, List, ListKind, Text, UnorderedListItem, render_html

nodes = [
    List(
        kind=ListKind.UNORDERED,
        children=(
            UnorderedListItem((Text("milk"),)),
            LineBreak(),
            UnorderedListItem((Text("eggs"),)),
            LineBreak(),
        ),
    )
]
print(render_html(nodes))
