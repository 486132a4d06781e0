"""
Instrument, voice and layer tokens.

Syntax:
    I40          # Instrument by program number
    I[VIOLIN]    # Instrument by name
    V9           # Voice (track)
    V[PERCUSSION]
    L2           # Layer

Values are narrowed to a signed byte with two's-complement wraparound, so
"I200" reports -56. Out-of-range values are not an error.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, MutableMapping

from staccato_engine.parser.subparser import (
    Subparser,
    TokenType,
    ParserError,
    UnknownIdentifierError,
    find_next_or_end,
)
from staccato_engine.theory.instrument import Instrument

if TYPE_CHECKING:
    from staccato_engine.parser.context import ParserContext

logger = logging.getLogger(__name__)


INSTRUMENT_CHAR = "I"
LAYER_CHAR = "L"
VOICE_CHAR = "V"

PERCUSSION_VOICE = 9


def to_signed_byte(value: int) -> int:
    """Narrow an integer to -128..127, wrapping like an unchecked 8-bit cast."""
    return ((value + 128) % 256) - 128


class IVLSubparser(Subparser):
    """Parses instrument (I), voice (V) and layer (L) tokens."""

    NUMBER_PATTERN = re.compile(r"[0-9]+")

    TOKEN_TYPES = {
        INSTRUMENT_CHAR: TokenType.INSTRUMENT,
        VOICE_CHAR: TokenType.VOICE,
        LAYER_CHAR: TokenType.LAYER,
    }

    def matches(self, music: str) -> bool:
        return bool(music) and music[0] in self.TOKEN_TYPES

    def token_type(self, token: str) -> TokenType:
        if not token:
            return TokenType.UNKNOWN_TOKEN
        return self.TOKEN_TYPES.get(token[0], TokenType.UNKNOWN_TOKEN)

    def parse(self, music: str, context: "ParserContext") -> int:
        if not self.matches(music):
            return 0

        pos_next_space = find_next_or_end(music)
        # A bare marker reports -1
        value = -1
        if pos_next_space > 1:
            value = to_signed_byte(self._resolve_value(music[1:pos_next_space], context))

        marker = music[0]
        if marker == INSTRUMENT_CHAR:
            context.listener.on_instrument_parsed(value)
        elif marker == LAYER_CHAR:
            context.listener.on_layer_changed(value)
        elif marker == VOICE_CHAR:
            context.listener.on_track_changed(value)

        return pos_next_space + 1

    def _resolve_value(self, identifier: str, context: "ParserContext") -> int:
        """Read a literal number or look the identifier up in the context dictionary."""
        if self.NUMBER_PATTERN.fullmatch(identifier):
            return int(identifier)

        name = identifier
        if name.startswith("["):
            name = name[1:-1] if name.endswith("]") else name[1:]

        try:
            raw = context.dictionary[name]
        except KeyError:
            raise UnknownIdentifierError(
                f"Unknown identifier: {name}", token=identifier
            ) from None

        try:
            return int(raw)
        except (TypeError, ValueError) as e:
            raise ParserError(
                f"Identifier {name} does not name a number: {raw!r}", token=identifier
            ) from e

    @staticmethod
    def populate_dictionary(dictionary: MutableMapping[str, int]) -> None:
        """Seed a dictionary with voice and instrument names."""
        dictionary["PERCUSSION"] = PERCUSSION_VOICE
        dictionary.update(Instrument.names())
        logger.debug(f"Seeded {len(dictionary)} identifiers")
