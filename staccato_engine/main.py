"""
Main entry point for staccato_engine.

Usage:
    staccato-engine "V0 I[PIANO] KEY:Gmaj TIME:3/4"
    staccato-engine --file song.staccato --music21
    staccato-engine --intervals "1 b3 5" --root C
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from staccato_engine.config import get_config
from staccato_engine.export.stream_builder import StreamBuilder
from staccato_engine.parser.listener import EventCollector, ListenerGroup
from staccato_engine.parser.staccato_parser import StaccatoParser
from staccato_engine.parser.subparser import ParserError
from staccato_engine.theory.intervals import Intervals

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="staccato-engine",
        description="Parse Staccato music text and work with interval patterns.",
    )
    parser.add_argument("music", nargs="?", help="Staccato text to parse")
    parser.add_argument("--file", type=Path, help="Read Staccato text from a file")
    parser.add_argument("--music21", action="store_true", help="Print the music21 stream")
    parser.add_argument("--intervals", help='Interval pattern, e.g. "1 b3 5"')
    parser.add_argument("--root", default="C", help="Root note for --intervals (default C)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_intervals(pattern: str, root: str) -> None:
    intervals = Intervals(pattern).set_root(root)
    print(f"Half-steps: {intervals.to_halfstep_array()}")
    print(f"Notes:      {' '.join(str(n) for n in intervals.get_notes())}")


def run_parse(music: str, show_stream: bool) -> None:
    collector = EventCollector()
    builder = StreamBuilder()
    parser = StaccatoParser(ListenerGroup(collector, builder), get_config().parser)
    context = parser.parse(music)

    for event in collector.events:
        print(event)
    print(f"Key: {context.key}  Time: {context.time_signature}")

    if show_stream:
        builder.score.show("text")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = build_arg_parser().parse_args(argv)

    config = get_config()
    level = logging.DEBUG if args.verbose else config.logging_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.intervals:
            run_intervals(args.intervals, args.root)
            return 0

        if args.file:
            music = args.file.read_text()
        elif args.music:
            music = args.music
        else:
            music = sys.stdin.read()
        run_parse(music, args.music21)

    except (ParserError, ValueError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
