"""Command-line entry point for fretpick.

Resolves each chord symbol given on the command line and prints a report
with the chosen fingering, its metrics and any alternatives.
"""

import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional, TextIO

from fretpick.base import ChordError
from fretpick.config import init_config
from fretpick.midi import fingering_messages
from fretpick.parser import suggest_chords
from fretpick.resolver import Resolver


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(prog="fretpick", description="Find guitar fingerings for chords")
    parser.add_argument("symbols", nargs="*", help="chord symbols, e.g. C Am7 Bb")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--max-candidates", type=int)
    parser.add_argument("--max-fret-span", type=int)
    parser.add_argument("--count", type=int, dest="candidate_count")
    parser.add_argument("--midi", action="store_true", help="also print MIDI messages")
    parser.add_argument("--suggest", metavar="QUERY", help="list chord symbols matching QUERY")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def run(
    symbols: List[str],
    resolver: Resolver,
    midi: bool = False,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Resolve and print each symbol.

    Returns:
        0 if every symbol resolved, 1 otherwise.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    status = 0
    for i, symbol in enumerate(symbols):
        if i > 0:
            print(file=out)
        try:
            resolution = resolver.resolve(symbol)
        except ChordError as e:
            print(f"error: {e}", file=err)
            status = 1
            continue
        print(resolver.describe(resolution), file=out)
        if midi:
            for msg in fingering_messages(resolution.fingering):
                print(msg, file=out)
    return status


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the fretpick command.

    Parses command-line arguments, configures logging, and resolves every
    symbol given.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if args.suggest is not None:
        for symbol in suggest_chords(args.suggest):
            print(symbol)
        return 0
    if not args.symbols:
        parser.error("no chord symbols given")
    config = init_config(
        max_candidates=args.max_candidates,
        max_fret_span=args.max_fret_span,
        candidate_count=args.candidate_count,
    )
    status = run(args.symbols, Resolver(config), midi=args.midi)
    logging.info("done")
    return status


if __name__ == "__main__":
    sys.exit(main())
