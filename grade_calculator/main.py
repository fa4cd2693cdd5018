"""
Application entry point.

Parses the command line, sets up logging, picks the presenter once and
runs a single calculator session.
"""
import argparse
import logging
import sys
from typing import List, Optional

from grade_calculator.io_prompts import (
    PRESENTER_MODES,
    DisplayUnavailableError,
    select_presenter,
)
from grade_calculator.logging_config import setup_logging
from grade_calculator.session import GradeCalculator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grade-calculator",
        description="Track grades and see your running average & letter grade.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        choices=PRESENTER_MODES,
        default="auto",
        help="Dialogs, console text, or dialogs with console fallback.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (logs go to stderr).",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Optional path to also write logs to.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        presenter = select_presenter(args.mode)
    except DisplayUnavailableError as e:
        logger.error("Cannot start in %s mode: %s", args.mode, e)
        print(f"grade-calculator: graphical mode unavailable: {e}", file=sys.stderr)
        return 2

    GradeCalculator(presenter).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
