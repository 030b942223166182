"""Locate and explain unbalanced keyword/end blocks in source files."""

from syntax_sleuth._version import __version__
from syntax_sleuth.core import (
    CaptureCodeContext,
    CodeSearch,
    capture_code_context,
    find_syntax_errors,
    find_syntax_errors_in_file,
)
from syntax_sleuth.models import CodeBlock, CodeLine, SyntaxReport

__all__ = [
    "CaptureCodeContext",
    "CodeBlock",
    "CodeLine",
    "CodeSearch",
    "SyntaxReport",
    "__version__",
    "capture_code_context",
    "find_syntax_errors",
    "find_syntax_errors_in_file",
]
