"""End-to-end pipeline: source text in, SyntaxReport out.

Steps:
- Build the line model
- Search for suspect blocks
- Capture the context around them
- Explain what is likely missing
"""

from __future__ import annotations

from pathlib import Path

from syntax_sleuth.config.schema import SleuthConfig
from syntax_sleuth.core.capture_context import capture_code_context
from syntax_sleuth.core.code_search import CodeSearch
from syntax_sleuth.core.display import explain
from syntax_sleuth.exceptions import SourceReadError
from syntax_sleuth.models.code_line import CodeLine
from syntax_sleuth.models.report import SyntaxReport
from syntax_sleuth.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


def find_syntax_errors(source: str, config: SleuthConfig | None = None) -> SyntaxReport:
    """Locate unbalanced blocks in ``source`` and capture their context.

    Args:
        source: Full text of one source file
        config: Settings (defaults when omitted)

    Returns:
        SyntaxReport; ``report.is_valid`` when nothing was found
    """
    config = config or SleuthConfig()
    lines = CodeLine.from_source(source, config.language)

    blocks = CodeSearch(lines, config.search).call().invalid_blocks
    if not blocks:
        log.info(LogEventNames.SYNTAX_OK, lines=len(lines))
        return SyntaxReport(lines=lines, blocks=(), context=())

    context = capture_code_context(blocks, lines)
    explanation = explain(blocks)

    log.info(
        LogEventNames.SYNTAX_ERROR_FOUND,
        blocks=len(blocks),
        context_lines=len(context),
        explanation=explanation.value,
    )
    return SyntaxReport(
        lines=lines,
        blocks=tuple(blocks),
        context=tuple(context),
        explanation=explanation,
    )


def read_source(path: Path) -> str:
    """Read a source file as UTF-8.

    Raises:
        SourceReadError: If the file is missing, unreadable or not UTF-8
    """
    log.debug(LogEventNames.SOURCE_LOADING, path=str(path))
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    log.debug(LogEventNames.SOURCE_LOADED, path=str(path), chars=len(source))
    return source


def find_syntax_errors_in_file(path: Path, config: SleuthConfig | None = None) -> SyntaxReport:
    """Read ``path`` and run find_syntax_errors on its text.

    Raises:
        SourceReadError: If the file cannot be read
    """
    return find_syntax_errors(read_source(path), config)
