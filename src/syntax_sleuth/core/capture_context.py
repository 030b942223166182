"""Capture the code surrounding suspect blocks.

Given one or more blocks that fail to balance, this module picks the
surrounding lines a reader needs to see why:
- Lines at the block's indent that open or close blocks
- Same-level neighbors just outside the block
- Enclosing lines where indentation falls (the block's parents)

Surrounding code is captured regardless of whether the search hid it.

Example:
    # block.to_source() == "  def bark"
    context = CaptureCodeContext(blocks=block, code_lines=lines).call()
    # [class Dog, def bark, end]
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from syntax_sleuth.core.around_block_scan import AroundBlockScan
from syntax_sleuth.interfaces.scanner import NeighborScannerFactory
from syntax_sleuth.models.code_block import CodeBlock
from syntax_sleuth.models.code_line import CodeLine
from syntax_sleuth.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


class _LineAccumulator:
    """Working set of captured lines keyed by index."""

    def __init__(self, seed: Iterable[CodeLine] = ()) -> None:
        self._lines: dict[int, CodeLine] = {}
        self.extend(seed)

    def extend(self, lines: Iterable[CodeLine]) -> int:
        """Add lines, returning how many were offered."""
        count = 0
        for line in lines:
            self._lines.setdefault(line.index, line)
            count += 1
        return count

    def reduce(self) -> list[CodeLine]:
        """Drop blank and comment lines, then order by index."""
        kept = [line for line in self._lines.values() if not line.is_blank]
        kept = [line for line in kept if not line.is_comment]
        return sorted(kept, key=lambda line: line.index)


def same_indent_keywords(block: CodeBlock, code_lines: Sequence[CodeLine]) -> list[CodeLine]:
    """Keyword and terminator lines at the block's indent.

    The range runs from the first visible line to the block's last line.
    """
    visible = block.visible_lines
    if not visible:
        return []
    start_index = visible[0].index
    lines = code_lines[start_index : block.ends_at + 1]
    return [
        line
        for line in lines
        if line.indent == block.current_indent
        and (line.is_block_terminator or line.is_block_keyword)
    ]


def neighbor_context(
    block: CodeBlock,
    code_lines: Sequence[CodeLine],
    scanner_factory: NeighborScannerFactory = AroundBlockScan,
) -> list[CodeLine]:
    """Same-level neighbors of the block, excluding the block's own lines."""
    around_lines = (
        scanner_factory(code_lines=tuple(code_lines), block=block)
        .start_at_next_line()
        .capture_neighbor_context()
    )
    own = {line.index for line in block.lines}
    return [line for line in around_lines if line.index not in own]


def falling_indent(
    block: CodeBlock,
    code_lines: Sequence[CodeLine],
    scanner_factory: NeighborScannerFactory = AroundBlockScan,
) -> list[CodeLine]:
    """Enclosing lines found where indentation falls around the block."""
    scanner = scanner_factory(code_lines=tuple(code_lines), block=block)
    return list(scanner.on_falling_indent())


class CaptureCodeContext:
    """Builds the ordered set of lines to show for suspect blocks.

    Responsibilities:
    - Seed the output with every block's visible lines
    - Run the same-indent, neighbor and falling-indent heuristics
    - Reduce to non-blank, non-comment lines in file order, once

    Inputs are never mutated; each call owns its own working set.
    """

    def __init__(
        self,
        blocks: CodeBlock | Sequence[CodeBlock],
        code_lines: Sequence[CodeLine],
        scanner_factory: NeighborScannerFactory = AroundBlockScan,
    ) -> None:
        """Initialize the capture.

        Args:
            blocks: One suspect block or a sequence of them
            code_lines: Complete line model the blocks came from
            scanner_factory: Builds the neighbor scanner for a block
        """
        self._blocks: tuple[CodeBlock, ...] = (
            (blocks,) if isinstance(blocks, CodeBlock) else tuple(blocks)
        )
        self._code_lines = tuple(code_lines)
        self._scanner_factory = scanner_factory

    @property
    def code_lines(self) -> tuple[CodeLine, ...]:
        return self._code_lines

    def call(self) -> list[CodeLine]:
        """Compute the context lines.

        Returns:
            Ascending, duplicate free lines with no blanks or comments
        """
        output = _LineAccumulator(
            line for block in self._blocks for line in block.visible_lines
        )

        for block in self._blocks:
            same_indent = output.extend(same_indent_keywords(block, self._code_lines))
            neighbors = output.extend(
                neighbor_context(block, self._code_lines, self._scanner_factory)
            )
            parents = output.extend(
                falling_indent(block, self._code_lines, self._scanner_factory)
            )
            log.debug(
                LogEventNames.CONTEXT_CAPTURED,
                starts_at=block.starts_at,
                ends_at=block.ends_at,
                same_indent=same_indent,
                neighbors=neighbors,
                falling_indent=parents,
            )

        return output.reduce()


def capture_code_context(
    blocks: CodeBlock | Sequence[CodeBlock],
    code_lines: Sequence[CodeLine],
    scanner_factory: NeighborScannerFactory = AroundBlockScan,
) -> list[CodeLine]:
    """Capture the context for ``blocks``; see CaptureCodeContext."""
    return CaptureCodeContext(blocks, code_lines, scanner_factory).call()
