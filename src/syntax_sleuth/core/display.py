"""Explain and render suspect blocks for a terminal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from syntax_sleuth.config.schema import DisplayConfig
from syntax_sleuth.models.code_block import CodeBlock
from syntax_sleuth.models.code_line import CodeLine
from syntax_sleuth.models.report import Explanation, SyntaxReport


def explain(blocks: Iterable[CodeBlock]) -> Explanation:
    """Guess what is missing from the visible lines of ``blocks``."""
    keywords = 0
    terminators = 0
    for block in blocks:
        keywords += block.keyword_count
        terminators += block.terminator_count

    if keywords > terminators:
        return Explanation.MISSING_END
    if terminators > keywords:
        return Explanation.UNMATCHED_END
    return Explanation.UNKNOWN


class DisplayCodeWithLineNumbers:
    """Formats lines with a right-aligned, 1-based line number gutter.

    Highlighted lines are prefixed with the marker; the rest get
    matching padding so the numbers stay aligned.
    """

    def __init__(
        self,
        lines: Sequence[CodeLine],
        highlight_indices: Iterable[int] = (),
        marker: str = "❯ ",
    ) -> None:
        self._lines = lines
        self._highlight = frozenset(highlight_indices)
        self._marker = marker

    def call(self) -> str:
        if not self._lines:
            return ""
        width = max(len(str(line.number)) for line in self._lines)
        return "".join(self._format(line, width) for line in self._lines)

    def _format(self, line: CodeLine, width: int) -> str:
        prefix = self._marker if line.index in self._highlight else " " * len(self._marker)
        number = str(line.number).rjust(width)
        if line.is_blank:
            return f"{prefix}{number}\n"
        return f"{prefix}{number}  {line.text}\n"


class DisplayInvalidBlocks:
    """Renders a SyntaxReport.

    Example:
        print(DisplayInvalidBlocks(report, filename="dog.rb").call())
    """

    def __init__(
        self,
        report: SyntaxReport,
        filename: str | None = None,
        config: DisplayConfig | None = None,
    ) -> None:
        self._report = report
        self._filename = filename
        self._config = config or DisplayConfig()

    def call(self) -> str:
        if self._report.is_valid:
            return "Syntax OK\n"

        explanation = self._report.explanation or explain(self._report.blocks)
        parts = ["", explanation.message, ""]
        if self._filename and self._config.show_filename:
            parts.append(f"file: {self._filename}")
        parts.append("simplified:")
        parts.append("")

        code = DisplayCodeWithLineNumbers(
            lines=self._report.context,
            highlight_indices=self._report.highlighted_indices,
            marker=self._config.highlight_marker,
        ).call()
        return "\n".join(parts) + "\n" + code
