"""Data models and transfer objects."""

from .code_block import CodeBlock, is_balanced
from .code_line import CodeLine
from .report import Explanation, SyntaxReport

__all__ = [
    # Line model
    "CodeLine",
    # Blocks
    "CodeBlock",
    "is_balanced",
    # Results
    "Explanation",
    "SyntaxReport",
]
