"""Tests for error codes, messages and terminal formatting."""

from __future__ import annotations

import pytest

from kiln import (
    BlockNotFoundError,
    DuplicateBlockError,
    ErrorCode,
    GeneratorError,
    InvalidUnitNameError,
    TemplateError,
    TemplateRuntimeError,
)
from kiln.utils import terminal


@pytest.fixture
def no_colors(monkeypatch):
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.INVALID_UNIT_NAME, "generator"),
            (ErrorCode.DUPLICATE_BLOCK, "generator"),
            (ErrorCode.BLOCK_NOT_FOUND, "runtime"),
            (ErrorCode.RUNTIME_ERROR, "runtime"),
        ],
    )
    def test_category(self, code: ErrorCode, category: str) -> None:
        assert code.category == category

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidUnitNameError, GeneratorError)
        assert issubclass(DuplicateBlockError, GeneratorError)
        assert issubclass(BlockNotFoundError, TemplateRuntimeError)
        assert issubclass(GeneratorError, TemplateError)
        assert issubclass(TemplateRuntimeError, TemplateError)


class TestMessages:
    def test_invalid_unit_name(self, no_colors) -> None:
        error = InvalidUnitNameError("")
        assert str(error) == "Invalid unit name ''"
        assert error.code is ErrorCode.INVALID_UNIT_NAME
        assert error.suggestion is not None
        assert error.format_compact().startswith("K-GEN-001: Invalid unit name ''")

    def test_invalid_keyword_name_hint(self) -> None:
        error = InvalidUnitNameError("class")
        assert "keyword" in (error.suggestion or "")

    def test_duplicate_block_compact(self, no_colors) -> None:
        error = DuplicateBlockError("content", 0, "{block content} on line 12")
        assert error.format_compact() == (
            "K-GEN-002: Block 'content' is defined twice in layer 0\n"
            "  Location: {block content} on line 12\n"
            "  Hint: Rename one of the blocks or move it to its own layer"
        )

    def test_runtime_error_message(self, no_colors) -> None:
        error = TemplateRuntimeError("boom", template_name="Template_x", suggestion="fix it")
        assert str(error) == (
            "Runtime Error: boom\n"
            "  Location: Template_x\n"
            "  Suggestion: fix it"
        )
        assert error.format_compact().startswith("K-RUN-002: boom\n")

    def test_block_not_found_close_match(self, no_colors) -> None:
        error = BlockNotFoundError("contnet", 0, available=frozenset({"content", "title"}))
        assert error.suggestion == "Did you mean 'content'?"

    def test_block_not_found_lists_available(self, no_colors) -> None:
        error = BlockNotFoundError("zzz", "snippet", available=frozenset({"b", "a"}))
        assert error.suggestion == "Available blocks: a, b"
        assert "not found in layer 'snippet'" in str(error)

    def test_block_not_found_without_candidates(self) -> None:
        assert BlockNotFoundError("x", 0).suggestion is None


class TestTerminal:
    def test_colorize_plain_when_disabled(self, no_colors) -> None:
        assert terminal.colorize("Error", "bright_red", "bold") == "Error"
        assert not terminal.supports_color()

    def test_colorize_adds_codes_when_enabled(self, monkeypatch) -> None:
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.error_code("K-RUN-001")
        assert "\033[91m" in result
        assert "\033[1m" in result
        assert result.endswith("\033[0m")
        assert terminal.strip_colors(result) == "K-RUN-001"

    def test_compact_format_strips_to_plain(self, monkeypatch) -> None:
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        error = DuplicateBlockError("content", 0)
        assert terminal.strip_colors(error.format_compact()).startswith(
            "K-GEN-002: Block 'content'"
        )
