"""
Command line entry point.

Examples:
    # Print both tests and the legend
    python -m benfordstats data/first_digits.csv

    # Scale statistics by the sample size and export to CSV
    python -m benfordstats data/first_digits.csv --sample-size 500 --output results/benfords.csv
"""

import argparse
import sys
from typing import List, Optional

from .data_loader import load_frequencies
from .report import print_benfords, write_benfords


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benfordstats",
        description="Cho-Gains's d and Leemis's m tests for Benford's Law",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("file",
                        help="CSV with a 'digit' column and 'frequency' or 'count' column")
    parser.add_argument("--sample-size", "-n", type=float, default=None,
                        help="Scale statistics by sqrt(N) (default: counts total, else unscaled)")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Write the report table to this CSV file")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Do not print the report")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        frequencies, counted = load_frequencies(args.file, verbose=args.verbose)
        sample_size = args.sample_size if args.sample_size is not None else counted

        if not args.quiet:
            print_benfords(frequencies, echo=True, sample_size=sample_size)

        if args.output:
            path = write_benfords(frequencies, args.output, sample_size=sample_size)
            if args.verbose:
                print(f"Report written to {path}")
    except ValueError as e:
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
