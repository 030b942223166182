"""Frontier of unresolved blocks for the search.

The frontier tracks three things:
- Invalid candidate blocks, deepest indent first
- Lines already resolved as part of a valid block (hidden)
- Code lines not yet claimed by any block (unvisited)

The search is finished once hiding the frontier's blocks leaves a
balanced document.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from itertools import combinations

from syntax_sleuth.config.schema import SearchConfig
from syntax_sleuth.models.code_block import CodeBlock, is_balanced
from syntax_sleuth.models.code_line import CodeLine
from syntax_sleuth.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


class CodeFrontier:
    """Working state of one search. Not shared between searches."""

    def __init__(
        self,
        code_lines: Sequence[CodeLine],
        config: SearchConfig | None = None,
    ) -> None:
        self._code_lines = tuple(code_lines)
        self._config = config or SearchConfig()
        self._blocks: list[CodeBlock] = []
        self._hidden: set[int] = set()
        self._unvisited: set[int] = {line.index for line in self._code_lines if line.is_code}

    @property
    def hidden(self) -> frozenset[int]:
        return frozenset(self._hidden)

    @property
    def blocks(self) -> tuple[CodeBlock, ...]:
        return tuple(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def next_indent_line(self) -> CodeLine | None:
        """Deepest unvisited code line; the later one wins a tie."""
        if not self._unvisited:
            return None
        index = max(self._unvisited, key=lambda i: (self._code_lines[i].indent, i))
        return self._code_lines[index]

    def expand(self) -> bool:
        """Whether to grow a frontier block rather than start a new one."""
        if not self._blocks:
            return False
        next_line = self.next_indent_line()
        if next_line is None:
            return True
        return self._peek().current_indent >= next_line.indent

    def pop(self) -> CodeBlock | None:
        """Remove and return the deepest frontier block."""
        if not self._blocks:
            return None
        block = self._peek()
        self._blocks.remove(block)
        return block

    def push(self, block: CodeBlock) -> None:
        """Record a block; valid ones are hidden, invalid ones kept."""
        block = dataclasses.replace(block, hidden=self._hidden_within(block))
        claimed = {line.index for line in block.lines}
        self._unvisited -= claimed

        self._blocks = [b for b in self._blocks if not block.contains(b)]

        if block.is_valid:
            self._hidden.update(claimed)
            self._refresh()
        else:
            self._blocks.append(block)

    def holds_all_syntax_errors(self, blocks: Sequence[CodeBlock] | None = None) -> bool:
        """Check that hiding ``blocks`` (default: all) balances the document."""
        if blocks is None:
            blocks = self._blocks
        without = {line.index for block in blocks for line in block.lines}
        remaining = (
            line
            for line in self._code_lines
            if line.index not in self._hidden and line.index not in without
        )
        return is_balanced(remaining)

    def detect_invalid_blocks(self) -> list[CodeBlock]:
        """Smallest group of frontier blocks that holds every error."""
        invalid = [block for block in self._blocks if not block.is_valid]
        largest = min(len(invalid), self._config.max_combination_size)
        for size in range(1, largest + 1):
            for group in combinations(invalid, size):
                if self.holds_all_syntax_errors(group):
                    return list(group)
        if invalid:
            log.debug(LogEventNames.BLOCK_GROUP_UNRESOLVED, candidates=len(invalid))
        return invalid

    def _peek(self) -> CodeBlock:
        # Deepest indent first; the later block wins a tie
        return max(self._blocks, key=lambda b: (b.current_indent, b.starts_at))

    def _hidden_within(self, block: CodeBlock) -> frozenset[int]:
        return frozenset(i for i in self._hidden if block.starts_at <= i <= block.ends_at)

    def _refresh(self) -> None:
        self._blocks = [
            dataclasses.replace(block, hidden=self._hidden_within(block))
            for block in self._blocks
        ]
