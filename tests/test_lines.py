"""Tests for newline-only indentation helpers."""

from __future__ import annotations

import textwrap

import pytest

from kiln.utils.lines import dedent, indent


class TestDedent:
    def test_common_margin_removed(self) -> None:
        assert dedent("    a\n      b\n    c") == "a\n  b\nc"

    def test_blank_lines_ignored_and_emptied(self) -> None:
        assert dedent("    a\n  \n\t\n    b") == "a\n\n\nb"

    def test_mixed_tabs_and_spaces_share_no_margin(self) -> None:
        assert dedent("\ta\n    b") == "\ta\n    b"

    def test_unindented_text_unchanged(self) -> None:
        assert dedent("a\n    b") == "a\n    b"

    @pytest.mark.parametrize("char", ["\u2028", "\u2029", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85"])
    def test_only_newline_splits(self, char: str) -> None:
        assert dedent(f"    x = 'a{char}    b'\n    y") == f"x = 'a{char}    b'\ny"

    @pytest.mark.parametrize(
        "text",
        ["", "a", "  a\n  b", "\n    if x:\n        y\n\n    z\n", "a\n\n  b\n"],
    )
    def test_matches_textwrap_on_plain_text(self, text: str) -> None:
        assert dedent(text) == textwrap.dedent(text)


class TestIndent:
    def test_non_blank_lines_prefixed(self) -> None:
        assert indent("a\n\n  b", "    ") == "    a\n\n      b"

    def test_whitespace_only_lines_untouched(self) -> None:
        assert indent("a\n  \nb", ">") == ">a\n  \n>b"

    @pytest.mark.parametrize("char", ["\u2028", "\u2029", "\x0b", "\x0c", "\x1c", "\x85"])
    def test_only_newline_splits(self, char: str) -> None:
        assert indent(f"x = 'a{char}b'", "    ") == f"    x = 'a{char}b'"
