"""Command line entry point: extract text from a single document."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .dispatcher import Parser
from .errors import ParseKitError
from .logging_config import get_logger, setup_logging
from .settings import settings

logger = get_logger("parsekit.cli")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="parsekit",
        description="Detect a document's format and print its extracted text.",
    )
    p.add_argument("file", type=Path, help="Document to parse.")
    p.add_argument("--strict", action="store_true", help="Enable strict mode.")
    p.add_argument(
        "--max-size",
        type=int,
        default=settings.DEFAULT_MAX_SIZE,
        help="Maximum input size in bytes.",
    )
    p.add_argument(
        "--detect-only",
        action="store_true",
        help="Print the detected format tag instead of the text.",
    )
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default from settings).")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    # stdout занят извлечённым текстом
    setup_logging(args.log_level, stream=sys.stderr)

    parser = Parser(strict_mode=args.strict, max_size=args.max_size)

    try:
        if args.detect_only:
            print(parser.detect_path(args.file))
            return 0

        print(parser.parse_path(args.file))
    except ParseKitError as e:
        logger.error(f"Parsing failed | file={args.file} kind={e.kind.value} error={e}")
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
