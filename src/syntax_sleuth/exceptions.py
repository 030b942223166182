"""Exception hierarchy for syntax-sleuth."""

from pathlib import Path


class SyntaxSleuthError(Exception):
    """Base exception for syntax-sleuth errors."""


class SourceReadError(SyntaxSleuthError):
    """Failed to read a source file."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read {self.path}: {reason}")


class SearchError(SyntaxSleuthError):
    """The block search reached an inconsistent state."""
