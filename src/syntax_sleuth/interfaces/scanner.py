"""Abstract interface for scanning the lines around a block."""

from collections.abc import Iterator
from typing import Protocol

from ..models.code_block import CodeBlock
from ..models.code_line import CodeLine


class NeighborScanner(Protocol):
    """Searches outward from a block through the line model.

    This protocol is the only view context capture has of the
    surrounding file, so block detection can change how it walks
    lines without touching the capture heuristics.
    """

    def on_falling_indent(self) -> Iterator[CodeLine]:
        """
        Yield each line where indentation falls below the block's depth.

        Walks backward from the block, then forward. Within a direction a
        line is produced every time its indent is lower than the lowest
        indent produced so far. Every call starts a fresh walk.

        Returns:
            Lazy iterator of enclosing lines
        """
        ...

    def start_at_next_line(self) -> "NeighborScanner":
        """
        Position the scan on the lines immediately around the block.

        Returns:
            The scanner itself, for chaining
        """
        ...

    def capture_neighbor_context(self) -> list[CodeLine]:
        """
        Collect adjacent lines continuing the block's structural level.

        Returns:
            Lines before the block followed by lines after it, each side
            in file order
        """
        ...


class NeighborScannerFactory(Protocol):
    """Builds a scanner for one block of one line model."""

    def __call__(
        self,
        *,
        code_lines: tuple[CodeLine, ...],
        block: CodeBlock,
    ) -> NeighborScanner: ...
