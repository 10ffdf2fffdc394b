"""
Product Pricing Report — Main Entry Point

Pipeline: acquire lines -> classify each line -> sort + format the report.

Usage:
    python main.py products.txt              # Read a file
    cat products.txt | python main.py        # Read piped stdin
    python main.py products.txt --json       # Emit the JSON payload instead
"""

import sys

from category_data import STDIN_TIMEOUT_SECONDS
from classifier import build_report
from reader import NoInputError, resolve_source, open_source
from report import display_report

USAGE = "Usage: python main.py [FILE] [--json]"


def generate_report(args: list[str], stdin=None, stdout=None,
                    timeout: float = STDIN_TIMEOUT_SECONDS) -> int:
    """Run the full pipeline for the given CLI arguments. Returns an exit code."""
    if "-h" in args or "--help" in args:
        print(__doc__.strip(), file=stdout or sys.stdout)
        return 0

    as_json = "--json" in args
    positional = [a for a in args if a != "--json"]

    try:
        source = resolve_source(positional, stdin)
        report = build_report(open_source(source, stdin, timeout))
    except NoInputError as e:
        print(e, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    display_report(report, as_json=as_json, stream=stdout)
    return 0


def main():
    try:
        sys.exit(generate_report(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
