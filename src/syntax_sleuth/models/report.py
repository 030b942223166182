"""Data models for search results."""

from dataclasses import dataclass
from enum import StrEnum

from .code_block import CodeBlock
from .code_line import CodeLine


class Explanation(StrEnum):
    """Why the suspect blocks are invalid."""

    MISSING_END = "missing_end"
    UNMATCHED_END = "unmatched_end"
    UNKNOWN = "unknown"

    @property
    def message(self) -> str:
        """Human readable hint shown above the context."""
        return _MESSAGES[self]


_MESSAGES = {
    Explanation.MISSING_END: "Unmatched keyword, missing `end` ?",
    Explanation.UNMATCHED_END: (
        "Unmatched `end`, missing keyword (`do`, `def`, `if`, etc.) ?"
    ),
    Explanation.UNKNOWN: "Syntax error detected",
}


@dataclass(frozen=True)
class SyntaxReport:
    """Outcome of searching one source text."""

    lines: tuple[CodeLine, ...]
    blocks: tuple[CodeBlock, ...]
    context: tuple[CodeLine, ...]
    explanation: Explanation | None = None

    @property
    def is_valid(self) -> bool:
        """No suspect block was found."""
        return not self.blocks

    @property
    def highlighted_indices(self) -> frozenset[int]:
        """Indices of the unresolved lines of every suspect block."""
        return frozenset(
            line.index for block in self.blocks for line in block.visible_lines
        )
