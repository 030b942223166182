"""Core search, capture and display components.

- CodeSearch: Finds the blocks that unbalance a document
- CaptureCodeContext: Picks the lines worth showing around them
- AroundBlockScan: Walks the lines surrounding a block
- DisplayInvalidBlocks: Renders a report for a terminal
"""

from syntax_sleuth.core.around_block_scan import AroundBlockScan
from syntax_sleuth.core.block_expand import BlockExpand
from syntax_sleuth.core.capture_context import CaptureCodeContext, capture_code_context
from syntax_sleuth.core.code_frontier import CodeFrontier
from syntax_sleuth.core.code_search import CodeSearch, search
from syntax_sleuth.core.display import DisplayCodeWithLineNumbers, DisplayInvalidBlocks, explain
from syntax_sleuth.core.sleuth import find_syntax_errors, find_syntax_errors_in_file

__all__ = [
    "AroundBlockScan",
    "BlockExpand",
    "CaptureCodeContext",
    "CodeFrontier",
    "CodeSearch",
    "DisplayCodeWithLineNumbers",
    "DisplayInvalidBlocks",
    "capture_code_context",
    "explain",
    "find_syntax_errors",
    "find_syntax_errors_in_file",
    "search",
]
