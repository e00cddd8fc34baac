"""Tests for list rendering: container resolution, spacing, break omission."""

from __future__ import annotations

import pytest

from memomark.config import RenderConfig, render_config_context
from memomark.elements import ContainerRole, Element
from memomark.lists import (
    process_children,
    render_list,
    resolve_container,
    spacing,
    spacing_style,
)
from memomark.nodes import (
    DocumentNode,
    LineBreak,
    List,
    ListKind,
    OrderedListItem,
    Paragraph,
    Text,
    UnknownNode,
    UnorderedListItem,
)
from memomark.renderers.element import ElementRenderer

TEXT = Text("x")
BR = LineBreak()


class RecordingRenderer:
    """NodeRenderer that records each call and renders a marker element."""

    def __init__(self) -> None:
        self.calls: list[tuple[DocumentNode, str]] = []

    def render(self, node: DocumentNode, key: str) -> Element:
        self.calls.append((node, key))
        return Element(node.type.name, key=key)


def _pattern(results: list[Element | None]) -> list[str | None]:
    return [None if r is None else r.tag for r in results]


class TestResolveContainer:
    """Container role, classes and start override."""

    @pytest.mark.parametrize(
        ("kind", "role", "style"),
        [
            (ListKind.ORDERED, ContainerRole.ORDERED, "list-decimal"),
            (ListKind.UNORDERED, ContainerRole.UNORDERED, "list-disc"),
            (ListKind.DESCRIPTION, ContainerRole.DESCRIPTION, "list-none"),
            (ListKind.KIND_UNSPECIFIED, ContainerRole.GENERIC, "list-none"),
        ],
    )
    def test_role_and_style_per_kind(
        self, kind: ListKind, role: ContainerRole, style: str
    ) -> None:
        """Each kind maps to its role and list-style class."""
        spec = resolve_container(kind, ())
        assert spec.role is role
        assert spec.classes == ("list-inside", "break-all", style)

    def test_unrecognized_kind_falls_back_to_generic(self) -> None:
        """Values outside ListKind render as a generic container."""
        spec = resolve_container(42, ())
        assert spec.role is ContainerRole.GENERIC
        assert spec.classes[-1] == "list-none"
        assert spec.start is None

    def test_start_from_first_ordered_item(self) -> None:
        """Ordered list takes its start from the first item's number."""
        children = (OrderedListItem((TEXT,), number=5), BR, OrderedListItem((TEXT,), number=6))
        assert resolve_container(ListKind.ORDERED, children).start == 5

    def test_no_start_when_first_child_is_not_ordered_item(self) -> None:
        """Any other first child yields no override."""
        children = (BR, OrderedListItem((TEXT,), number=5))
        assert resolve_container(ListKind.ORDERED, children).start is None

    def test_no_start_for_unordered_list(self) -> None:
        """Only ordered lists carry a start."""
        children = (OrderedListItem((TEXT,), number=5),)
        assert resolve_container(ListKind.UNORDERED, children).start is None

    def test_no_start_without_children(self) -> None:
        """Empty ordered list has no override."""
        assert resolve_container(ListKind.ORDERED, ()).start is None

    def test_missing_number_degrades_to_no_start(self) -> None:
        """An item without a number gives no override instead of failing."""
        children = (OrderedListItem((TEXT,), number=None),)
        assert resolve_container(ListKind.ORDERED, children).start is None

    def test_base_classes_follow_config(self) -> None:
        """Configured base classes precede the list-style class."""
        with render_config_context(RenderConfig(list_base_classes=("pl",))):
            spec = resolve_container(ListKind.UNORDERED, ())
        assert spec.classes == ("pl", "list-disc")


class TestSpacing:
    """Indentation spacing."""

    def test_strictly_increasing(self) -> None:
        """Deeper nesting always gets more spacing."""
        values = [spacing(i) for i in range(4)]
        assert values == sorted(set(values))
        assert values == [0, 6, 12, 18]

    def test_unit_from_config(self) -> None:
        """Spacing scales with the configured unit."""
        with render_config_context(RenderConfig(indent_unit=10, indent_css_unit="rem")):
            assert spacing(3) == 30
            assert spacing_style(3) == {"padding-left": "30rem"}

    def test_style(self) -> None:
        """Default style is pixel left padding."""
        assert spacing_style(2) == {"padding-left": "12px"}


class TestProcessChildren:
    """Line-break omission over child sequences."""

    def test_break_after_text_is_omitted_second_break_kept(self) -> None:
        """[TEXT, BR, BR]: first break omitted, second rendered."""
        results = process_children((TEXT, BR, BR), RecordingRenderer())
        assert _pattern(results) == ["TEXT", None, "LINE_BREAK"]

    def test_leading_breaks_both_render(self) -> None:
        """[BR, BR]: the rule starts disarmed and a break after a break is kept."""
        results = process_children((BR, BR), RecordingRenderer())
        assert _pattern(results) == ["LINE_BREAK", "LINE_BREAK"]

    def test_break_after_second_text_is_omitted(self) -> None:
        """[TEXT, TEXT, BR]: the rule re-arms after every rendered child."""
        results = process_children((TEXT, TEXT, BR), RecordingRenderer())
        assert _pattern(results) == ["TEXT", "TEXT", None]

    def test_three_breaks_after_text(self) -> None:
        """[TEXT, BR, BR, BR]: only the first break is consumed."""
        results = process_children((TEXT, BR, BR, BR), RecordingRenderer())
        assert _pattern(results) == ["TEXT", None, "LINE_BREAK", "LINE_BREAK"]

    def test_break_first_then_text_then_break(self) -> None:
        """[BR, TEXT, BR]: leading break kept, trailing break omitted."""
        results = process_children((BR, TEXT, BR), RecordingRenderer())
        assert _pattern(results) == ["LINE_BREAK", "TEXT", None]

    def test_items_separated_by_breaks(self) -> None:
        """Typical parser output: each item's trailing break is dropped."""
        item = UnorderedListItem((TEXT,))
        results = process_children((item, BR, item, BR, item), RecordingRenderer())
        assert _pattern(results) == [
            "UNORDERED_LIST_ITEM",
            None,
            "UNORDERED_LIST_ITEM",
            None,
            "UNORDERED_LIST_ITEM",
        ]

    def test_unknown_node_arms_the_rule(self) -> None:
        """Generic nodes render and arm the rule like any other child."""
        results = process_children((UnknownNode("TABLE"), BR), RecordingRenderer())
        assert _pattern(results) == ["NODE_UNSPECIFIED", None]

    def test_keys_use_original_positions(self) -> None:
        """Keys come from type and original index, omissions included."""
        renderer = RecordingRenderer()
        process_children((TEXT, BR, TEXT, BR, BR), renderer)
        assert [key for _, key in renderer.calls] == ["TEXT-0", "TEXT-2", "LINE_BREAK-4"]

    def test_omitted_breaks_are_not_delegated(self) -> None:
        """The renderer never sees an omitted child."""
        renderer = RecordingRenderer()
        process_children((TEXT, BR), renderer)
        assert [node for node, _ in renderer.calls] == [TEXT]

    def test_empty(self) -> None:
        """No children, no results."""
        assert process_children((), RecordingRenderer()) == []

    def test_state_does_not_leak_between_calls(self) -> None:
        """A call ending armed does not affect the next call."""
        renderer = RecordingRenderer()
        process_children((TEXT,), renderer)
        assert _pattern(process_children((BR,), renderer)) == ["LINE_BREAK"]


class TestRenderList:
    """End-to-end list rendering."""

    def test_unordered_end_to_end(self) -> None:
        """UNORDERED at indent 1 with [TEXT a, BR, TEXT b]."""
        el = render_list(
            ListKind.UNORDERED, 1, (Text("a"), BR, Text("b")), ElementRenderer()
        )
        assert el.tag == "unordered-list-container"
        assert el.style == {"padding-left": "6px"}
        assert el.classes == ("list-inside", "break-all", "list-disc")
        assert el.attrs == {}
        assert [child.key for child in el.children] == ["TEXT-0", "TEXT-2"]
        assert el.text() == "ab"

    def test_ordered_start_attribute(self) -> None:
        """Start override lands in the container attributes."""
        children = (OrderedListItem((Text("five"),), number=5), BR)
        el = render_list(ListKind.ORDERED, 0, children, ElementRenderer(), key="LIST-3")
        assert el.tag == ContainerRole.ORDERED.value
        assert el.key == "LIST-3"
        assert el.attrs == {"start": 5}
        assert len(el.children) == 1

    def test_nested_list_uses_its_own_indent(self) -> None:
        """Nested lists recurse through the renderer with their own depth."""
        inner = List(
            kind=ListKind.UNORDERED,
            indent=1,
            children=(UnorderedListItem((Text("inner"),)),),
        )
        outer_children = (UnorderedListItem((Text("outer"),)), BR, inner)
        el = render_list(ListKind.UNORDERED, 0, outer_children, ElementRenderer())

        assert el.style == {"padding-left": "0px"}
        nested = el.children[1]
        assert isinstance(nested, Element)
        assert nested.tag == "unordered-list-container"
        assert nested.key == "LIST-2"
        assert nested.style == {"padding-left": "6px"}

    def test_idempotent(self) -> None:
        """Rendering the same input twice gives identical output."""
        children = (
            OrderedListItem((Paragraph((Text("a"),)),), number=2),
            BR,
            BR,
            OrderedListItem((Text("b"),), number=3),
        )
        renderer = ElementRenderer()
        first = render_list(ListKind.ORDERED, 2, children, renderer)
        second = render_list(ListKind.ORDERED, 2, children, renderer)
        assert first == second

    def test_description_list(self) -> None:
        """Description lists get the description role and no list style."""
        el = render_list(ListKind.DESCRIPTION, 0, (Text("term"),), ElementRenderer())
        assert el.tag == "description-list-container"
        assert "list-none" in el.classes
