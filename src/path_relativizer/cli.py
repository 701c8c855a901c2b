"""Command line interface for computing relative paths."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from .config import APP_NAME, ConfigLoader
from .config_utils import expand_path_variables
from .errors import ConfigurationError, InputFormatError
from .logging import LogContext, setup_logging
from .relative import relative, resolve
from .schema import RelativizerConfig

logger = logging.getLogger(__package__ or __name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_USAGE = 2


def parse_pair(line: str, separator: str) -> tuple[str, str]:
    """Split one batch input line into source and target.

    Raises:
        InputFormatError: If the line does not hold exactly two fields
    """
    fields = line.rstrip("\r\n").split(separator)
    if len(fields) != 2:
        raise InputFormatError(
            f"Expected source and target separated by {separator!r}, got {len(fields)} field(s)",
            line=line.rstrip("\r\n"),
        )
    return fields[0], fields[1]


def render(source: str, target: str, result: str, output_format: str) -> str:
    """Render one result line in the configured output format."""
    if output_format == "json":
        return json.dumps({"source": source, "target": target, "result": result})
    return result


def run_batch(
    lines: Iterable[str],
    operation: Callable[[str, str], str],
    output_format: str,
    separator: str,
    out: TextIO,
) -> int:
    """Apply ``operation`` to every pair in ``lines``.

    Empty lines are skipped; a line holding only the separator is the
    pair of two empty paths. Malformed lines are logged and counted but do
    not stop processing.

    Returns:
        Exit code (1 if any line was malformed)
    """
    processed = 0
    failed = 0

    for line_number, line in enumerate(lines, start=1):
        if not line.rstrip("\r\n"):
            continue
        try:
            source, target = parse_pair(line, separator)
        except InputFormatError as e:
            failed += 1
            logger.error(
                f"Line {line_number}: {e.message}",
                extra={"extra_fields": {**e.context, "line_number": line_number}},
            )
            continue

        print(render(source, target, operation(source, target), output_format), file=out)
        processed += 1

    logger.info(f"Batch complete: {processed} processed, {failed} malformed")
    return EXIT_BAD_INPUT if failed else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="path-relativize",
        description="Compute the relative path from the directory of SOURCE to TARGET"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="SOURCE and TARGET (omit with --batch)"
    )
    parser.add_argument(
        "--batch",
        nargs="?",
        const="-",
        metavar="FILE",
        help="Read separator-delimited SOURCE/TARGET pairs from FILE (default: stdin)"
    )
    parser.add_argument(
        "--resolve",
        action="store_true",
        help="Resolve TARGET as a relative path against the directory of SOURCE"
    )
    parser.add_argument(
        "--format",
        choices=["plain", "json"],
        help="Output format (overrides config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )
    return parser


def configure_logging(config: RelativizerConfig, level_override: Optional[str] = None) -> None:
    """Set up logging from the logging section of ``config``."""
    log_file = None
    if config.logging.file:
        log_file = Path(expand_path_variables(config.logging.file, APP_NAME))
    setup_logging(
        level=level_override or config.logging.level,
        format=config.logging.format,
        log_file=log_file,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the path-relativize command."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.batch is None and len(args.paths) != 2:
        parser.error("expected SOURCE and TARGET, or --batch")
    if args.batch is not None and args.paths:
        parser.error("positional paths cannot be combined with --batch")

    try:
        config = ConfigLoader(app_name=APP_NAME, config_class=RelativizerConfig).load(
            defaults_path=args.config
        )
    except ConfigurationError as e:
        setup_logging(level=args.log_level or "WARNING")
        logger.error(e.message, extra={"extra_fields": e.context})
        return EXIT_USAGE

    configure_logging(config, args.log_level)

    output_format = args.format or config.output.format
    operation = resolve if args.resolve else relative

    if args.batch is None:
        source, target = args.paths
        print(render(source, target, operation(source, target), output_format))
        return EXIT_OK

    with LogContext(logger, batch_input=args.batch, operation=operation.__name__):
        if args.batch == "-":
            return run_batch(sys.stdin, operation, output_format, config.output.separator, sys.stdout)

        batch_path = Path(args.batch)
        try:
            with open(batch_path, "r", encoding="utf-8") as f:
                return run_batch(f, operation, output_format, config.output.separator, sys.stdout)
        except OSError as e:
            logger.error(f"Cannot read batch input {batch_path}: {e}")
            return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
