"""Scanning outward from a block through the line model.

AroundBlockScan serves two callers:
- Context capture, through the NeighborScanner protocol
  (falling indent and neighbor context)
- Block search, which grows blocks with scan_while and its helpers

The scanned region starts as the block's own range. Lines before and
after the region are the ones examined; scan_while widens the region.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from syntax_sleuth.models.code_block import CodeBlock
from syntax_sleuth.models.code_line import CodeLine

LinePredicate = Callable[[CodeLine], bool]


class AroundBlockScan:
    """Walks the lines surrounding a block.

    Example:
        scan = AroundBlockScan(code_lines=lines, block=block)
        parents = list(scan.on_falling_indent())
        neighbors = scan.start_at_next_line().capture_neighbor_context()
    """

    def __init__(
        self,
        *,
        code_lines: Sequence[CodeLine],
        block: CodeBlock,
        hidden: frozenset[int] | None = None,
    ) -> None:
        """Initialize the scan.

        Args:
            code_lines: Complete, index-ordered line model
            block: Block to scan around
            hidden: Indices already resolved by the search (defaults to
                the block's own hidden set)
        """
        self._code_lines = tuple(code_lines)
        self._block = block
        self._hidden = block.hidden if hidden is None else hidden
        self._orig_before_index = block.starts_at
        self._orig_after_index = block.ends_at
        self._orig_indent = block.current_indent
        self._before_index = self._orig_before_index
        self._after_index = self._orig_after_index
        self._skips: list[LinePredicate] = []
        self._stop_after_kw = False

    @property
    def before_index(self) -> int:
        return self._before_index

    @property
    def after_index(self) -> int:
        return self._after_index

    @property
    def before_lines(self) -> tuple[CodeLine, ...]:
        """Lines preceding the scanned region, in file order."""
        return self._code_lines[: self._before_index]

    @property
    def after_lines(self) -> tuple[CodeLine, ...]:
        """Lines following the scanned region, in file order."""
        return self._code_lines[self._after_index + 1 :]

    def skip(self, predicate: LinePredicate) -> AroundBlockScan:
        """Step over lines matching ``predicate`` during scan_while."""
        self._skips.append(predicate)
        return self

    def stop_after_kw(self) -> AroundBlockScan:
        """Stop scan_while one line after keywords outnumber terminators."""
        self._stop_after_kw = True
        return self

    def start_at_next_line(self) -> AroundBlockScan:
        """Restart from the block so scans begin at its adjacent lines."""
        self._before_index = self._orig_before_index
        self._after_index = self._orig_after_index
        return self

    def scan_while(self, predicate: LinePredicate) -> AroundBlockScan:
        """Widen the region in both directions while ``predicate`` holds."""
        stop_next = False
        kw_count = 0
        end_count = 0
        for line in reversed(self.before_lines):
            if stop_next:
                break
            if self._is_skipped(line):
                self._before_index = line.index
                continue
            kw_count += line.is_block_keyword
            end_count += line.is_block_terminator
            if self._stop_after_kw and kw_count > end_count:
                stop_next = True
            if not predicate(line):
                break
            self._before_index = line.index

        stop_next = False
        kw_count = 0
        end_count = 0
        for line in self.after_lines:
            if stop_next:
                break
            if self._is_skipped(line):
                self._after_index = line.index
                continue
            kw_count += line.is_block_keyword
            end_count += line.is_block_terminator
            if self._stop_after_kw and end_count > kw_count:
                stop_next = True
            if not predicate(line):
                break
            self._after_index = line.index

        return self

    def scan_neighbors(self) -> AroundBlockScan:
        """Take neighbors at the block's indent or deeper."""
        indent = self._orig_indent
        return self.scan_while(lambda line: not line.is_blank and line.indent >= indent)

    def scan_adjacent_indent(self) -> AroundBlockScan:
        """Take neighbors down to the shallower of the two adjacent lines."""
        above = self.next_up()
        below = self.next_down()
        indent = min(
            above.indent if above is not None else 0,
            below.indent if below is not None else 0,
        )
        return self.scan_while(lambda line: not line.is_blank and line.indent >= indent)

    def next_up(self) -> CodeLine | None:
        """Line just before the region, if any."""
        if self._before_index == 0:
            return None
        return self._code_lines[self._before_index - 1]

    def next_down(self) -> CodeLine | None:
        """Line just after the region, if any."""
        if self._after_index + 1 >= len(self._code_lines):
            return None
        return self._code_lines[self._after_index + 1]

    def capture_neighbor_context(self) -> list[CodeLine]:
        """Collect same-indent lines next to the block.

        Each direction stops at a shallower indent, or right after the
        line that balances the keywords and terminators seen so far.
        """
        before = self._take_same_indent(reversed(self.before_lines))
        before.reverse()
        after = self._take_same_indent(iter(self.after_lines))
        return before + after

    def on_falling_indent(self) -> Iterator[CodeLine]:
        """Yield enclosing lines, backward then forward."""
        yield from self._falling(reversed(self.before_lines))
        yield from self._falling(iter(self.after_lines))

    def code_block(self) -> CodeBlock:
        """Block covering the scanned region."""
        lines = self._code_lines[self._before_index : self._after_index + 1]
        hidden = frozenset(
            index for index in self._hidden if self._before_index <= index <= self._after_index
        )
        return CodeBlock(lines=lines, hidden=hidden)

    def _is_skipped(self, line: CodeLine) -> bool:
        return any(predicate(line) for predicate in self._skips)

    def _take_same_indent(self, lines: Iterator[CodeLine]) -> list[CodeLine]:
        taken: list[CodeLine] = []
        kw_count = 0
        end_count = 0
        for line in lines:
            if not line.is_code:
                continue
            if line.indent < self._orig_indent:
                break
            if line.indent != self._orig_indent:
                continue
            kw_count += line.is_block_keyword
            end_count += line.is_block_terminator
            taken.append(line)
            if kw_count != 0 and kw_count == end_count:
                break
        return taken

    def _falling(self, lines: Iterator[CodeLine]) -> Iterator[CodeLine]:
        last_indent = self._orig_indent
        for line in lines:
            if not line.is_code:
                continue
            if line.indent < last_indent:
                yield line
                last_indent = line.indent
