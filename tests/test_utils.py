"""Tests for memomark.utils."""

import logging

from memomark.utils import class_names, escape_attr, escape_html, get_logger


class TestGetLogger:
    """Logger namespacing."""

    def test_prefixes_name(self) -> None:
        assert get_logger("lists").name == "memomark.lists"

    def test_keeps_package_names(self) -> None:
        assert get_logger("memomark").name == "memomark"
        assert get_logger("memomark.serialization").name == "memomark.serialization"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestClassNames:
    """Class attribute joining."""

    def test_skips_empty_and_none(self) -> None:
        assert class_names("a", "", None, "b") == "a b"

    def test_splits_and_dedupes(self) -> None:
        assert class_names("a b", "b c", "a") == "a b c"

    def test_empty(self) -> None:
        assert class_names() == ""


class TestEscaping:
    """Text and attribute escaping."""

    def test_escape_html(self) -> None:
        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
        assert escape_html("it's") == "it's"
        assert escape_html("") == ""

    def test_escape_attr(self) -> None:
        assert escape_attr("it's \"q\"") == "it&#x27;s &quot;q&quot;"
        assert escape_attr("") == ""
