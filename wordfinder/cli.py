import argparse
import logging
import sys

from wordfinder.app import DEFAULT_MIN_LENGTH, run


def main(argv=None) -> int:
    """Command-line interface for the Word Finder."""
    parser = argparse.ArgumentParser(description="Find every word that can be made from a set of letters")

    parser.add_argument("characters", help="Letters available to build words from.")

    # Original two-argument form: the second argument is a length if numeric, else a pattern
    parser.add_argument(
        "length_or_pattern", nargs="?", default=None,
        help="Minimum word length, or a pattern such as '_o_' to match."
    )

    parser.add_argument(
        "--min-length", type=int, default=None,
        help=f"Minimum word length (default: {DEFAULT_MIN_LENGTH})."
    )
    parser.add_argument(
        "--pattern", type=str, default=None,
        help="Fixed-length pattern; '_', '.' or '?' match any letter."
    )

    # Strategy Selection
    parser.add_argument(
        "--strategy", choices=["scan", "generate"], default="scan",
        help="Scan the dictionary, or generate candidates from the letters."
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help="Give up a 'generate' search after this many seconds."
    )

    # File Inputs
    parser.add_argument(
        "--words-file", type=str, default=None,
        help="Word list with one word per line (default: NLTK words corpus)."
    )

    # Paging
    parser.add_argument("--offset", type=int, default=0, help="Index of the first word to show.")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of words to show.")

    parser.add_argument("--visualize", action="store_true", help="Chart matches by word length")
    parser.add_argument("--verbose", action="store_true", help="Log search progress")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    min_length, pattern = args.min_length, args.pattern
    if args.length_or_pattern is not None:
        try:
            min_length = int(args.length_or_pattern)
        except ValueError:
            pattern = args.length_or_pattern
    if min_length is None:
        min_length = DEFAULT_MIN_LENGTH

    return run(args.characters, min_length, pattern, strategy=args.strategy,
               words_file=args.words_file, offset=args.offset, limit=args.limit,
               timeout=args.timeout, visualise=args.visualize)


if __name__ == "__main__":
    sys.exit(main())
