"""Search for the blocks that unbalance a document.

The search starts from the deepest indented lines and works outward:
- Unclaimed lines at the deepest indent become new blocks
- Blocks that balance are hidden, so outer blocks see through them
- Blocks that don't balance stay on the frontier and keep growing

It stops as soon as hiding the frontier leaves a balanced document,
then narrows the frontier to the smallest group of blocks that still
accounts for every error.
"""

from __future__ import annotations

from collections.abc import Sequence

from syntax_sleuth.config.schema import SearchConfig
from syntax_sleuth.core.around_block_scan import AroundBlockScan
from syntax_sleuth.core.block_expand import BlockExpand
from syntax_sleuth.core.code_frontier import CodeFrontier
from syntax_sleuth.exceptions import SearchError
from syntax_sleuth.models.code_block import CodeBlock
from syntax_sleuth.models.code_line import CodeLine
from syntax_sleuth.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


class CodeSearch:
    """Finds suspect blocks in a line model.

    Example:
        search = CodeSearch(lines).call()
        for block in search.invalid_blocks:
            print(block.to_source())
    """

    def __init__(
        self,
        code_lines: Sequence[CodeLine],
        config: SearchConfig | None = None,
    ) -> None:
        """Initialize the search.

        Args:
            code_lines: Complete, index-ordered line model
            config: Search bounds
        """
        self._code_lines = tuple(code_lines)
        self._config = config or SearchConfig()
        self._frontier = CodeFrontier(self._code_lines, self._config)
        self._block_expand = BlockExpand(self._code_lines)
        self.invalid_blocks: list[CodeBlock] = []
        self.tick = 0
        self.exhausted = False

    @property
    def frontier(self) -> CodeFrontier:
        return self._frontier

    def call(self) -> CodeSearch:
        """Run the search to completion.

        Returns:
            The search itself, with invalid_blocks in file order

        Raises:
            SearchError: If the frontier stops making progress
        """
        log.debug(LogEventNames.SEARCH_STARTED, lines=len(self._code_lines))

        while not self._frontier.holds_all_syntax_errors():
            self.tick += 1
            if self.tick > self._config.max_iterations:
                log.warning(
                    LogEventNames.SEARCH_EXHAUSTED,
                    max_iterations=self._config.max_iterations,
                    frontier=len(self._frontier),
                )
                self.exhausted = True
                break

            if self._frontier.expand():
                self._expand_invalid_block()
            else:
                self._add_invalid_blocks()

        invalid_blocks = self._frontier.detect_invalid_blocks()
        if not invalid_blocks and self.exhausted:
            # Out of ticks before any block was isolated; blame the whole document
            invalid_blocks = [CodeBlock(lines=self._code_lines, hidden=self._frontier.hidden)]
        self.invalid_blocks = sorted(invalid_blocks, key=lambda block: block.starts_at)

        log.debug(
            LogEventNames.SEARCH_COMPLETE,
            ticks=self.tick,
            invalid_blocks=len(self.invalid_blocks),
        )
        return self

    def _expand_invalid_block(self) -> None:
        block = self._frontier.pop()
        if block is None:
            return
        expanded = self._block_expand.call(block, self._frontier.hidden)
        self._frontier.push(expanded)

    def _add_invalid_blocks(self) -> None:
        first = self._frontier.next_indent_line()
        if first is None:
            # Nothing left to claim and nothing to grow, yet still unbalanced
            raise SearchError("Search frontier is empty but the document is unbalanced")

        max_indent = first.indent
        line: CodeLine | None = first
        while line is not None and line.indent == max_indent:
            hidden = self._frontier.hidden
            block = (
                AroundBlockScan(
                    code_lines=self._code_lines,
                    block=CodeBlock(lines=(line,)),
                    hidden=hidden,
                )
                .skip(lambda candidate: candidate.index in hidden)
                .stop_after_kw()
                .scan_neighbors()
                .code_block()
            )
            self._frontier.push(block)
            line = self._frontier.next_indent_line()


def search(code_lines: Sequence[CodeLine], config: SearchConfig | None = None) -> list[CodeBlock]:
    """Find the suspect blocks of a line model, in file order."""
    return CodeSearch(code_lines, config).call().invalid_blocks
