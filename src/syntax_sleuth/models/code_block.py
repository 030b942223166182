"""Data model for a contiguous run of source lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .code_line import CodeLine


def is_balanced(lines: Iterable[CodeLine]) -> bool:
    """Check that every block keyword is closed by a terminator, in order."""
    depth = 0
    for line in lines:
        if line.is_block_keyword:
            depth += 1
        if line.is_block_terminator:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


@dataclass(frozen=True)
class CodeBlock:
    """A contiguous candidate region of the source.

    ``hidden`` holds indices the search has already resolved as valid;
    those lines stay part of ``lines`` but not of ``visible_lines``.
    """

    lines: tuple[CodeLine, ...]
    hidden: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("CodeBlock requires at least one line")
        first = self.lines[0].index
        for offset, line in enumerate(self.lines):
            if line.index != first + offset:
                raise ValueError(
                    f"CodeBlock lines must be contiguous: expected index {first + offset}, "
                    f"got {line.index}"
                )

    @property
    def visible_lines(self) -> tuple[CodeLine, ...]:
        """Lines still considered unresolved."""
        return tuple(line for line in self.lines if line.index not in self.hidden)

    @property
    def current_indent(self) -> int:
        """Smallest indent among the visible lines that hold code."""
        indents = [line.indent for line in self.visible_lines if not line.is_blank]
        return min(indents, default=0)

    @property
    def starts_at(self) -> int:
        return self.lines[0].index

    @property
    def ends_at(self) -> int:
        return self.lines[-1].index

    @property
    def is_valid(self) -> bool:
        """Visible keywords and terminators pair up."""
        return is_balanced(self.visible_lines)

    @property
    def keyword_count(self) -> int:
        return sum(1 for line in self.visible_lines if line.is_block_keyword)

    @property
    def terminator_count(self) -> int:
        return sum(1 for line in self.visible_lines if line.is_block_terminator)

    def contains(self, other: CodeBlock) -> bool:
        """Check whether this block's range engulfs ``other``."""
        return self.starts_at <= other.starts_at and other.ends_at <= self.ends_at

    def to_source(self) -> str:
        """Visible text, one line per entry; hidden lines render empty."""
        return "\n".join(
            "" if line.index in self.hidden else line.text for line in self.lines
        )

    def __len__(self) -> int:
        return len(self.lines)
