"""Tests for the line model."""

import pytest

from syntax_sleuth.config.schema import LanguageConfig
from syntax_sleuth.models.code_line import CodeLine


class TestClassification:
    """Tests for CodeLine.from_text classification."""

    def test_block_keyword(self) -> None:
        """Test that an opener keyword marks a block keyword."""
        line = CodeLine.from_text(0, "  def bark")
        assert line.is_block_keyword
        assert not line.is_block_terminator
        assert line.indent == 2

    def test_terminator(self) -> None:
        """Test that `end` marks a terminator."""
        line = CodeLine.from_text(3, "end")
        assert line.is_block_terminator
        assert not line.is_block_keyword
        assert line.indent == 0

    def test_terminator_with_method_call(self) -> None:
        """Test that `end.map` is still a terminator."""
        assert CodeLine.from_text(0, "  end.compact").is_block_terminator

    def test_word_starting_with_end_is_not_terminator(self) -> None:
        """Test that identifiers beginning with `end` are plain code."""
        line = CodeLine.from_text(0, "ending = 1")
        assert not line.is_block_terminator
        assert not line.is_block_keyword

    @pytest.mark.parametrize(
        "text",
        [
            "items.each do |item|",
            "loop do # forever",
            "foo.map do",
        ],
    )
    def test_trailing_do(self, text: str) -> None:
        """Test that a trailing `do` opens a block."""
        assert CodeLine.from_text(0, text).is_block_keyword

    @pytest.mark.parametrize(
        "text",
        [
            "puts 'do'",
            "return if done",
            "x = 1 # if y",
            'puts "def"',
        ],
    )
    def test_plain_code(self, text: str) -> None:
        """Test lines that only mention keywords in strings, comments or modifiers."""
        line = CodeLine.from_text(0, text)
        assert not line.is_block_keyword
        assert not line.is_block_terminator

    @pytest.mark.parametrize(
        "text",
        [
            "x = if y",
            "kind = case shape",
            "value = begin",
            "x = while busy",
            "@cache ||= begin",
            "total += if bonus",
            "mask <<= unless flag",
            "return case x",
            "return begin",
        ],
    )
    def test_assigned_or_returned_block(self, text: str) -> None:
        """Test that a block whose value is assigned or returned opens a block."""
        line = CodeLine.from_text(0, text)
        assert line.is_block_keyword
        assert not line.is_block_terminator

    @pytest.mark.parametrize(
        "text",
        [
            "x = 5 if y",
            "x == if_count",
            "ready = x != y",
            "total >= limit",
            "opts = { mode => case_insensitive }",
            "label = 'if'",
            "return unless valid",
        ],
    )
    def test_assignment_without_block(self, text: str) -> None:
        """Test that comparisons, modifiers and strings after `=` stay plain code."""
        assert not CodeLine.from_text(0, text).is_block_keyword

    def test_assigned_inline_block_is_neutral(self) -> None:
        """Test that an assigned block closed on the same line counts as neither."""
        line = CodeLine.from_text(0, "x = if a then b end")
        assert not line.is_block_keyword
        assert not line.is_block_terminator

    def test_inline_block_is_neutral(self) -> None:
        """Test that a block opened and closed on one line counts as neither."""
        line = CodeLine.from_text(0, "def foo; end")
        assert not line.is_block_keyword
        assert not line.is_block_terminator

    def test_blank_line(self) -> None:
        """Test that whitespace only lines are blank."""
        line = CodeLine.from_text(0, "    ")
        assert line.is_blank
        assert line.indent == 0
        assert not line.is_code

    def test_comment_line(self) -> None:
        """Test that comment only lines are comments."""
        line = CodeLine.from_text(0, "  # def nothing")
        assert line.is_comment
        assert not line.is_block_keyword
        assert line.indent == 2

    def test_tab_width(self) -> None:
        """Test that tabs count as tab_width units."""
        language = LanguageConfig(tab_width=4)
        assert CodeLine.from_text(0, "\tdef x", language).indent == 4

    def test_custom_keywords(self) -> None:
        """Test classification with another keyword set."""
        language = LanguageConfig(
            block_keywords=["function", "if"],
            trailing_keywords=["then"],
            terminator_keywords=["end"],
            comment_prefix="--",
        )
        assert CodeLine.from_text(0, "function go()", language).is_block_keyword
        assert CodeLine.from_text(0, "-- end", language).is_comment
        assert not CodeLine.from_text(0, "def go", language).is_block_keyword

    def test_trailing_newline_is_stripped(self) -> None:
        """Test that line endings are not part of the text."""
        assert CodeLine.from_text(0, "end\r\n").text == "end"


class TestIdentity:
    """Tests for CodeLine equality and ordering."""

    def test_equality_by_index(self) -> None:
        """Test that lines compare equal by index alone."""
        assert CodeLine(index=1, text="a", indent=0) == CodeLine(index=1, text="b", indent=4)
        assert CodeLine(index=1, text="a", indent=0) != CodeLine(index=2, text="a", indent=0)

    def test_hash_by_index(self) -> None:
        """Test that lines with the same index collapse in a set."""
        lines = {CodeLine(index=1, text="a", indent=0), CodeLine(index=1, text="b", indent=2)}
        assert len(lines) == 1

    def test_ordering_by_index(self) -> None:
        """Test that sorting follows index."""
        lines = [CodeLine(index=i, text="", indent=0) for i in (3, 1, 2)]
        assert [line.index for line in sorted(lines)] == [1, 2, 3]

    def test_number_is_one_based(self) -> None:
        """Test display numbering."""
        assert CodeLine(index=0, text="", indent=0).number == 1


class TestFromSource:
    """Tests for CodeLine.from_source."""

    def test_builds_ordered_model(self) -> None:
        """Test that every physical line gets a consecutive index."""
        lines = CodeLine.from_source("class A\n\n  # note\nend\n")
        assert [line.index for line in lines] == [0, 1, 2, 3]
        assert lines[0].is_block_keyword
        assert lines[1].is_blank
        assert lines[2].is_comment
        assert lines[3].is_block_terminator

    def test_empty_source(self) -> None:
        """Test that empty text has no lines."""
        assert CodeLine.from_source("") == ()
