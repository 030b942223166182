"""Shared test fixtures for syntax-sleuth."""

from pathlib import Path

import pytest

from syntax_sleuth.models.code_line import CodeLine

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
SOURCES_DIR = FIXTURES_DIR / "sources"

# Block at indices 5..7 (indent 2) inside "class Foo" (index 2)
# with the class terminator at index 9.
NESTED_SOURCE = """\
# Foo lives here

class Foo
  def a
  end
  def b
    puts 1
  def c
  end
end
"""


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sources_dir() -> Path:
    """Return the path to the sample sources."""
    return SOURCES_DIR


@pytest.fixture
def missing_end_source() -> str:
    """A method that is never closed."""
    return (SOURCES_DIR / "missing_end.rb").read_text()


@pytest.fixture
def unmatched_end_source() -> str:
    """One `end` too many."""
    return (SOURCES_DIR / "unmatched_end.rb").read_text()


@pytest.fixture
def valid_source() -> str:
    """A balanced file."""
    return (SOURCES_DIR / "valid.rb").read_text()


@pytest.fixture
def missing_end_in_method_source() -> str:
    """An `if` left open between two valid methods."""
    return (SOURCES_DIR / "missing_end_in_method.rb").read_text()


@pytest.fixture
def nested_lines() -> tuple[CodeLine, ...]:
    """Line model for NESTED_SOURCE."""
    return CodeLine.from_source(NESTED_SOURCE)
