"""Entry point for running syntax-sleuth.

This module provides the command line interface. It handles:
- Configuration loading
- Logging setup
- Searching one file and rendering the report
- Mapping outcomes to exit codes
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from syntax_sleuth._version import __version__
from syntax_sleuth.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)

EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_USAGE_ERROR = 2


def setup_logging(
    debug: bool = False,
    log_format: str = "console",
    file_path: Path | None = None,
    file_enabled: bool = False,
) -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging
    """
    from syntax_sleuth.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    fmt = LogFormat(log_format.lower())

    configure_logging(
        level=level,
        log_format=fmt,
        file_path=file_path,
        file_enabled=file_enabled,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="syntax-sleuth",
        description="Find the block that breaks a keyword/end source file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "file",
        type=Path,
        help="Source file to check",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    return parser.parse_args(argv)


def run(file_path: Path, config_path: Path | None = None, debug: bool = False) -> int:
    """Check one file and print the report.

    Args:
        file_path: Source file to check
        config_path: Optional YAML configuration
        debug: Keep debug logging even if the config asks for less

    Returns:
        Exit code (0 clean, 1 syntax error found, 2 unusable input)
    """
    from syntax_sleuth.config.loader import load_config
    from syntax_sleuth.config.schema import LoggingConfig
    from syntax_sleuth.core.display import DisplayInvalidBlocks
    from syntax_sleuth.core.sleuth import find_syntax_errors_in_file
    from syntax_sleuth.exceptions import SourceReadError
    from syntax_sleuth.utils.logging import bind_context, clear_context, configure_logging

    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        log.error(LogEventNames.CONFIGURATION_INVALID, path=str(config_path), error=str(e))
        return EXIT_USAGE_ERROR
    except (ValueError, ValidationError) as e:
        log.error(LogEventNames.CONFIGURATION_INVALID, error=str(e))
        return EXIT_USAGE_ERROR

    # A config file or SYNTAX_SLEUTH_LOGGING__* variables override the flags
    if config_path is not None or config.logging != LoggingConfig():
        configure_logging(
            level="DEBUG" if debug else config.logging.level,
            log_format=config.logging.format,
            file_path=config.logging.file.path if config.logging.file.enabled else None,
            file_enabled=config.logging.file.enabled,
        )
        log.debug(LogEventNames.CONFIGURATION_LOADED, path=str(config_path))

    bind_context(file=str(file_path))
    try:
        report = find_syntax_errors_in_file(file_path, config)
    except SourceReadError as e:
        log.error(LogEventNames.SOURCE_READ_ERROR, error=str(e))
        return EXIT_USAGE_ERROR
    finally:
        clear_context()

    output = DisplayInvalidBlocks(report, filename=str(file_path), config=config.display).call()
    sys.stdout.write(output)

    return EXIT_OK if report.is_valid else EXIT_SYNTAX_ERROR


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(
        debug=args.debug,
        log_format=args.format,
    )

    return run(args.file, args.config, args.debug)


if __name__ == "__main__":
    sys.exit(main())
