"""
Staccato Parser - Dispatch Staccato text to token subparsers.

The parser walks the input, offering the remaining text to each subparser
in order. The first subparser whose matches() accepts the text consumes
one token, updates the ParserContext and fires events on the listener.

Syntax Examples:
    V0 I[PIANO] KEY:Gmaj TIME:3/4
    V[PERCUSSION] L1
    KEY:K## TIME:6/8
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from staccato_engine.config import ParserConfig
from staccato_engine.parser.context import ParserContext
from staccato_engine.parser.ivl import IVLSubparser
from staccato_engine.parser.listener import EventCollector, ParseEvent, ParserListener
from staccato_engine.parser.signature import SignatureSubparser
from staccato_engine.parser.subparser import (
    ParserError,
    Subparser,
    TokenType,
    find_next_or_end,
)

logger = logging.getLogger(__name__)


def default_subparsers() -> list[Subparser]:
    """Subparsers in dispatch order."""
    return [IVLSubparser(), SignatureSubparser()]


class StaccatoParser:
    """
    Parser for Staccato music text.

    Subparsers hold no per-parse state and may be shared between parsers.
    Each call to parse() gets a fresh ParserContext.
    """

    def __init__(
        self,
        listener: Optional[ParserListener] = None,
        config: Optional[ParserConfig] = None,
        subparsers: Optional[Sequence[Subparser]] = None,
    ):
        self.listener: ParserListener = listener or ParserListener()
        self.config: ParserConfig = config or ParserConfig()
        self.subparsers: list[Subparser] = list(subparsers or default_subparsers())

    def parse(self, music: str) -> ParserContext:
        """
        Parse Staccato text, firing events on the listener.

        Args:
            music: Staccato text

        Returns:
            The context as it stands after the last token

        Raises:
            ParserError: On malformed tokens, unknown identifiers, or unknown
                tokens when throw_on_unknown_token is set
        """
        context = ParserContext(self.listener, self.config)

        self.listener.before_parsing_starts()
        pos = 0
        length = len(music)
        while pos < length:
            if music[pos].isspace():
                pos += 1
                continue

            try:
                consumed = self._parse_token(music[pos:], context)
            except ParserError as e:
                e.position = pos
                raise

            # Consumption counts one past the separator, even at end of input
            pos = min(pos + max(consumed, 1), length)
        self.listener.after_parsing_finished()

        return context

    def _parse_token(self, remaining: str, context: ParserContext) -> int:
        for subparser in self.subparsers:
            if subparser.matches(remaining):
                logger.debug(f"{type(subparser).__name__} claims {remaining[:16]!r}")
                return subparser.parse(remaining, context)

        end = find_next_or_end(remaining)
        token = remaining[:end]
        if self.config.throw_on_unknown_token:
            raise ParserError(f"Unknown token: {token}", token=token)
        logger.warning(f"Unknown token: {token}")
        return end + 1

    def token_type(self, token: str) -> TokenType:
        """Classify a token using the first subparser that matches it."""
        for subparser in self.subparsers:
            if subparser.matches(token):
                return subparser.token_type(token)
        return TokenType.UNKNOWN_TOKEN


def parse_events(music: str, config: Optional[ParserConfig] = None) -> list[ParseEvent]:
    """Parse Staccato text and return the recorded events."""
    collector = EventCollector()
    StaccatoParser(collector, config).parse(music)
    return collector.events
