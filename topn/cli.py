"""
Top-N Command-Line Interface (CLI)

Reads a file of newline-delimited non-negative integers and prints the N
largest distinct values, largest first. Malformed lines are reported and
skipped.

Usage examples:
    python -m topn.cli --file numbers.txt --top 10
    topn -f numbers.txt -t 3 --verbose
"""

import argparse
import sys

from .config import (
    ConfigurationError,
    MissingOptionsError,
    ParsedOptions,
    positive_int,
    validate_options,
)
from .logger import configure, logger
from .reader import InvalidLine, read_integers
from .selector import TopNSelector

RESULT_HEADER = "\n-= RESULT =-"


# -------------------------------------------------------------------
# Output helpers
# -------------------------------------------------------------------
def print_invalid_line(invalid: InvalidLine):
    """Report a malformed input line on stdout."""
    print(f"Invalid line: '{invalid.text.strip()}'")


def print_results(values):
    """Print the result header followed by one value per line."""
    print(RESULT_HEADER)
    for v in values:
        print(v)


# -------------------------------------------------------------------
# Command handler
# -------------------------------------------------------------------
def run(config):
    """Stream the configured file through a selector and print the top values."""
    log = logger()
    invalid = []

    def on_invalid(line):
        invalid.append(line.number)
        print_invalid_line(line)

    log.info(f"Reading {config.file} (top {config.top})")
    selector = TopNSelector(config.top)
    selector.offer_all(read_integers(config.file, on_invalid=on_invalid))
    retained = len(selector)
    log.info(
        f"offered={selector.offered} evicted={selector.evicted} "
        f"retained={retained} invalid_lines={len(invalid)}"
    )

    values = selector.largest()
    print_results(values)
    return values


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser."""
    p = argparse.ArgumentParser(
        prog="python -m topn.cli",
        description="Show the largest distinct integers in a file",
    )
    p.add_argument("-f", "--file", metavar="FILE",
                   help="Absolute path to the file that will be read")
    p.add_argument("-t", "--top", metavar="NUMBER", type=positive_int,
                   help="Show top [NUMBER] largest integers in the file")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log a run summary to stderr")
    return p


def parse_options(parser, argv):
    """Parse argv into a ParsedOptions value (no validation beyond types)."""
    args = parser.parse_args(argv)
    return ParsedOptions(
        file=args.file,
        top=args.top,
        verbose=args.verbose,
        usage=parser.format_help(),
    )


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m topn.cli` or `topn`."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    parsed = parse_options(parser, argv)
    try:
        config = validate_options(parsed)
    except MissingOptionsError as e:
        print(e)
        print(e.usage)
        return 1
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    configure(config.verbose)
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
