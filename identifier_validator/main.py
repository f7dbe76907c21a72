"""Command-line entry point.

With no identifiers, starts the interactive shell. With identifiers,
validates each one under a single category and exits non-zero if any is
invalid.

Examples:
    identifier-validator
    identifier-validator --category class MyClass my_class
    identifier-validator -c package com.example.util --json
"""

import argparse
import sys
from typing import Optional, Sequence

import structlog
from rich.console import Console

from identifier_validator import __version__
from identifier_validator.config import get_settings
from identifier_validator.logging_config import configure_logging
from identifier_validator.shell import IdentifierShell, render_result
from identifier_validator.validators import Category, validation_engine

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="identifier-validator",
        description="Check whether strings are legal Java identifiers and flag naming-convention issues.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        "identifiers",
        nargs="*",
        help="Identifiers to validate. Omit to start the interactive shell.",
    )
    parser.add_argument(
        "-c",
        "--category",
        choices=[c.value for c in Category],
        default=settings.DEFAULT_CATEGORY,
        help="Language element the identifiers name (default: %(default)s)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON array instead of text",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Minimum log level written to stderr (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_once(
    category: str,
    identifiers: Sequence[str],
    as_json: bool = False,
    console: Optional[Console] = None,
) -> int:
    """Validate `identifiers` under `category` and print the results.

    Returns:
        0 if every identifier is valid, 1 otherwise
    """
    console = console or Console()
    results = validation_engine.validate_many(category, identifiers)

    if as_json:
        console.print_json(data=[r.model_dump(mode="json") for r in results])
    else:
        for result in results:
            render_result(console, result)

    invalid = sum(1 for r in results if not r.valid)
    logger.info("batch_complete", category=category, total=len(results), invalid=invalid)
    return 0 if invalid == 0 else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    try:
        category = Category.parse(args.category)
    except ValueError as e:
        parser.error(f"{e} (from IDENTIFIER_VALIDATOR_DEFAULT_CATEGORY)")

    configure_logging(args.log_level, json_output=settings.LOG_JSON)

    if args.identifiers:
        return run_once(category.value, args.identifiers, as_json=args.json)
    return IdentifierShell(settings=settings).run()


if __name__ == "__main__":
    sys.exit(main())
