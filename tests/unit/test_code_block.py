"""Tests for CodeBlock."""

import pytest

from syntax_sleuth.models.code_block import CodeBlock, is_balanced
from syntax_sleuth.models.code_line import CodeLine


class TestConstruction:
    """Tests for CodeBlock invariants."""

    def test_empty_block_rejected(self) -> None:
        """Test that a block needs at least one line."""
        with pytest.raises(ValueError, match="at least one line"):
            CodeBlock(lines=())

    def test_non_contiguous_block_rejected(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that gaps in the line indices are rejected."""
        with pytest.raises(ValueError, match="contiguous"):
            CodeBlock(lines=(nested_lines[2], nested_lines[4]))

    def test_bounds(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test starts_at and ends_at."""
        block = CodeBlock(lines=nested_lines[5:8])
        assert block.starts_at == 5
        assert block.ends_at == 7
        assert len(block) == 3


class TestVisibility:
    """Tests for hidden and visible lines."""

    def test_all_visible_by_default(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that nothing is hidden unless asked."""
        block = CodeBlock(lines=nested_lines[5:8])
        assert block.visible_lines == block.lines

    def test_hidden_lines_not_visible(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that hidden indices drop out of visible_lines."""
        block = CodeBlock(lines=nested_lines[5:8], hidden=frozenset({6}))
        assert [line.index for line in block.visible_lines] == [5, 7]

    def test_to_source_blanks_hidden_lines(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that hidden lines render empty."""
        block = CodeBlock(lines=nested_lines[5:8], hidden=frozenset({6}))
        assert block.to_source() == "  def b\n\n  def c"

    def test_current_indent_ignores_blank_lines(
        self, nested_lines: tuple[CodeLine, ...]
    ) -> None:
        """Test that blank lines do not pull the indent to zero."""
        block = CodeBlock(lines=nested_lines[1:5])
        assert block.current_indent == 0
        block = CodeBlock(lines=nested_lines[3:5])
        assert block.current_indent == 2

    def test_current_indent_uses_visible_lines(
        self, nested_lines: tuple[CodeLine, ...]
    ) -> None:
        """Test that hidden lines do not count toward the indent."""
        block = CodeBlock(lines=nested_lines[5:8], hidden=frozenset({5, 7}))
        assert block.current_indent == 4


class TestValidity:
    """Tests for keyword balance."""

    def test_balanced_block(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that def/end pairs are valid."""
        assert CodeBlock(lines=nested_lines[3:5]).is_valid

    def test_open_block(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that a missing end is invalid."""
        block = CodeBlock(lines=nested_lines[5:8])
        assert not block.is_valid
        assert block.keyword_count == 2
        assert block.terminator_count == 0

    def test_hidden_lines_ignored(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test that hiding the opener makes its lone end invalid."""
        block = CodeBlock(lines=nested_lines[3:5], hidden=frozenset({3}))
        assert not block.is_valid

    def test_end_before_keyword_is_unbalanced(self) -> None:
        """Test that order matters, not only counts."""
        lines = CodeLine.from_source("end\ndef x")
        assert not is_balanced(lines)

    def test_contains(self, nested_lines: tuple[CodeLine, ...]) -> None:
        """Test range containment."""
        outer = CodeBlock(lines=nested_lines[2:10])
        inner = CodeBlock(lines=nested_lines[5:8])
        assert outer.contains(inner)
        assert not inner.contains(outer)
