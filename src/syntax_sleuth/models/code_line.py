"""Data model for a single physical source line."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache

from ..config.schema import LanguageConfig

_STRING_LITERAL = re.compile(r'"(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\'')
_FIRST_WORD = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)")

# After `return` these words are statement modifiers ("return if done"), not openers
_MODIFIER_KEYWORDS = frozenset({"if", "unless", "while", "until", "rescue"})


@dataclass(frozen=True, order=True)
class CodeLine:
    """One line of a source file.

    Equality, hashing and ordering only look at ``index``.
    """

    index: int
    text: str = field(compare=False)
    indent: int = field(compare=False)
    is_blank: bool = field(compare=False, default=False)
    is_comment: bool = field(compare=False, default=False)
    is_block_keyword: bool = field(compare=False, default=False)
    is_block_terminator: bool = field(compare=False, default=False)

    @property
    def number(self) -> int:
        """1-based line number for display."""
        return self.index + 1

    @property
    def is_code(self) -> bool:
        """Neither blank nor comment-only."""
        return not self.is_blank and not self.is_comment

    @classmethod
    def from_text(
        cls,
        index: int,
        text: str,
        language: LanguageConfig | None = None,
    ) -> CodeLine:
        """Classify a single line of text."""
        language = language or LanguageConfig()
        text = text.rstrip("\r\n")
        stripped = text.strip()

        if not stripped:
            return cls(index=index, text=text, indent=0, is_blank=True)

        indent = _measure_indent(text, language.tab_width)

        if stripped.startswith(language.comment_prefix):
            return cls(index=index, text=text, indent=indent, is_comment=True)

        code = _strip_code(stripped, language.comment_prefix)
        first_word = _first_word(code)
        patterns = _keyword_patterns(
            tuple(language.block_keywords),
            tuple(language.trailing_keywords),
            tuple(language.terminator_keywords),
        )

        is_terminator = first_word in language.terminator_keywords
        is_keyword = first_word in language.block_keywords
        if not is_keyword:
            # "x = if y", "total += case kind", "return begin"
            is_keyword = any(
                pattern is not None and pattern.search(code) is not None
                for pattern in (patterns.assigned, patterns.returned, patterns.trailing)
            )

        # "def foo; end" and "items.each do |i| puts i end" open and close in place
        if is_keyword and not is_terminator and patterns.inline_close.search(code):
            is_keyword = False

        return cls(
            index=index,
            text=text,
            indent=indent,
            is_block_keyword=is_keyword,
            is_block_terminator=is_terminator,
        )

    @classmethod
    def from_source(
        cls,
        source: str,
        language: LanguageConfig | None = None,
    ) -> tuple[CodeLine, ...]:
        """Build the complete, index-ordered line model for a source text."""
        language = language or LanguageConfig()
        return tuple(
            cls.from_text(index, text, language)
            for index, text in enumerate(source.splitlines())
        )


@dataclass(frozen=True)
class _KeywordPatterns:
    assigned: re.Pattern[str]
    returned: re.Pattern[str] | None
    trailing: re.Pattern[str] | None
    inline_close: re.Pattern[str]


@lru_cache(maxsize=32)
def _keyword_patterns(
    block_keywords: tuple[str, ...],
    trailing_keywords: tuple[str, ...],
    terminator_keywords: tuple[str, ...],
) -> _KeywordPatterns:
    openers = "|".join(re.escape(word) for word in block_keywords)
    # "=", "+=", "||=", "<<=" ... but not "==", "!=", "<=", "=>" or "=~"
    assigned = re.compile(
        rf"(?<![=!<>])(?:\|\||&&|\*\*|<<|>>|[-+*/%|&^])?=(?![=~>])\s*(?:{openers})\b"
    )
    returnable = [word for word in block_keywords if word not in _MODIFIER_KEYWORDS]
    returned = None
    if returnable:
        words = "|".join(re.escape(word) for word in returnable)
        returned = re.compile(rf"\breturn\s+(?:{words})\b")

    trailing = None
    if trailing_keywords:
        words = "|".join(re.escape(word) for word in trailing_keywords)
        # "do" or "do |a, b|" at the end of the line
        trailing = re.compile(rf"\b(?:{words})\b\s*(?:\|[^|]*\|)?\s*$")
    ends = "|".join(re.escape(word) for word in terminator_keywords)
    inline_close = re.compile(rf"(?:;|\s)(?:{ends})\b[\w.!?()]*\s*$")
    return _KeywordPatterns(
        assigned=assigned,
        returned=returned,
        trailing=trailing,
        inline_close=inline_close,
    )


def _measure_indent(text: str, tab_width: int) -> int:
    indent = 0
    for char in text:
        if char == " ":
            indent += 1
        elif char == "\t":
            indent += tab_width
        else:
            break
    return indent


def _strip_code(stripped: str, comment_prefix: str) -> str:
    """Remove string literals and a trailing comment."""
    code = _STRING_LITERAL.sub('""', stripped)
    comment_at = code.find(comment_prefix)
    if comment_at != -1:
        code = code[:comment_at]
    return code.rstrip()


def _first_word(code: str) -> str | None:
    match = _FIRST_WORD.match(code)
    return match.group(1) if match else None
