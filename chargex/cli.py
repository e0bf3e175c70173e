"""
Command-line interface for chargex.
"""

import argparse
import json
import sys
from typing import Optional

from chargex.allocator import generate_unique_number
from chargex.config import Config, load_config
from chargex.db.mongo import BOOKING, CITATION, allocate_number
from chargex.formatter import classify_charges, join_entries
from chargex.log import configure_logging, get_logger
from chargex.violations import format_cit_violations
from chargex.writers import write_outputs

logger = get_logger(__name__)


def read_text(args: argparse.Namespace) -> str:
    """
    Get the input text from the positional argument, the --in file or stdin.

    Args:
        args: Command-line arguments

    Returns:
        Input text
    """
    if args.text is not None:
        return args.text
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def number_length(kind: str, config: Config) -> int:
    """
    Get the configured length of a citation or booking number.
    """
    if kind == BOOKING:
        return config.allocator.booking_length
    return config.allocator.citation_length


def process_command(args: argparse.Namespace) -> int:
    """
    Process command-line arguments.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    # Load configuration
    config = load_config(args.config)
    configure_logging(config, args.log_level)

    if args.command == "format":
        if args.json:
            config.output.json_path = args.json
        if args.csv:
            config.output.csv_path = args.csv

        entries = classify_charges(
            read_text(args),
            strict=config.formatting.strict_title_case and not args.loose,
            numbered=config.formatting.numbered and not args.unnumbered,
        )
        if not entries:
            logger.error("No charges found in input")
            return 1

        print(join_entries([entry.render() for entry in entries]))
        write_outputs(entries, config)

        matched = sum(1 for entry in entries if entry.statute)
        logger.info(f"Classified {matched} of {len(entries)} charges")
        return 0
    elif args.command == "violations":
        violations = format_cit_violations(read_text(args))
        if not violations:
            logger.error("No violations found in input")
            return 1

        print(json.dumps(violations, indent=2, ensure_ascii=False))
        return 0
    elif args.command == "number":
        length = number_length(args.kind, config)
        if args.guild:
            number = allocate_number(args.guild, args.kind, length, config)
        else:
            excluded = [value.zfill(length) for value in args.exclude or []]
            number = int(
                generate_unique_number(
                    length,
                    config.allocator.charset,
                    excluded,
                    max_attempts=config.allocator.max_attempts,
                )
            )

        print(number)
        return 0
    else:
        logger.error("No command given")
        return 1


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(description="Charge formatting and statute lookup")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Format command
    format_parser = subparsers.add_parser("format", help="Format arrest charges and add statutes")
    format_parser.add_argument("text", nargs="?", help="Charges text (reads --in or stdin if omitted)")
    format_parser.add_argument("--in", dest="input", help="Input text file")
    format_parser.add_argument("--json", help="JSON output file")
    format_parser.add_argument("--csv", help="CSV output file")
    format_parser.add_argument("--loose", action="store_true", help="Capitalize every word")
    format_parser.add_argument("--unnumbered", action="store_true", help="Do not number the charges")

    # Violations command
    violations_parser = subparsers.add_parser("violations", help="Format traffic citation violations")
    violations_parser.add_argument("text", nargs="?", help="Violations text (reads --in or stdin if omitted)")
    violations_parser.add_argument("--in", dest="input", help="Input text file")

    # Number command
    number_parser = subparsers.add_parser("number", help="Generate an unused citation or booking number")
    number_parser.add_argument("--kind", choices=[CITATION, BOOKING], default=CITATION, help="Kind of number")
    number_parser.add_argument("--guild", help="Guild whose used numbers are excluded (requires MongoDB)")
    number_parser.add_argument("--exclude", nargs="+", help="Numbers to exclude")

    args = parser.parse_args(argv)

    try:
        return process_command(args)
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
