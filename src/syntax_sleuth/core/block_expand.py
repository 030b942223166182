"""Growing a suspect block outward.

A block first takes its neighbors at the same indent or deeper,
along with any blank or already-resolved lines touching them. When
that adds nothing, it steps out to the indent of the adjacent lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from syntax_sleuth.core.around_block_scan import AroundBlockScan
from syntax_sleuth.models.code_block import CodeBlock
from syntax_sleuth.models.code_line import CodeLine


class BlockExpand:
    """Expands blocks for the search.

    Example:
        expand = BlockExpand(code_lines)
        bigger = expand.call(block, hidden=frozenset())
    """

    def __init__(self, code_lines: Sequence[CodeLine]) -> None:
        self._code_lines = tuple(code_lines)

    def call(self, block: CodeBlock, hidden: frozenset[int]) -> CodeBlock:
        """Return the next larger block around ``block``."""
        expanded = self.expand_neighbors(block, hidden)
        if expanded is not None:
            return expanded
        return self.expand_indent(block, hidden)

    def expand_indent(self, block: CodeBlock, hidden: frozenset[int]) -> CodeBlock:
        """Step out to the shallower indent of the adjacent lines."""
        return (
            self._scan(block, hidden)
            .skip(lambda line: line.index in hidden)
            .stop_after_kw()
            .scan_adjacent_indent()
            .code_block()
        )

    def expand_neighbors(
        self,
        block: CodeBlock,
        hidden: frozenset[int],
        grab_empty: bool = True,
    ) -> CodeBlock | None:
        """Take same-indent neighbors; None when nothing was added."""
        scan = (
            self._scan(block, hidden)
            .skip(lambda line: line.index in hidden)
            .stop_after_kw()
            .scan_neighbors()
        )

        if grab_empty:
            scan = self._scan(scan.code_block(), hidden).scan_while(
                lambda line: line.is_blank or line.index in hidden
            )

        new_block = scan.code_block()
        if new_block.lines == block.lines:
            return None
        return new_block

    def _scan(self, block: CodeBlock, hidden: frozenset[int]) -> AroundBlockScan:
        return AroundBlockScan(code_lines=self._code_lines, block=block, hidden=hidden)
