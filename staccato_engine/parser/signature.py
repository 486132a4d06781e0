"""
Key and time signature tokens.

Syntax:
    KEY:Cmaj     # Chord-style key name (root + maj/min)
    KEY:Amin
    KEY:K###     # Accidental count: three sharps, A major
    KEY:Kbb      # Two flats, Bb major
    TIME:3/4     # Time signature

Key signatures written as accidental counts are always major.

Also converts between key signatures and accidental counts: positive
counts are sharps, negative counts are flats, and 0 is C major / A minor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from staccato_engine.parser.subparser import (
    Subparser,
    TokenType,
    ParserError,
    find_next_or_end,
)
from staccato_engine.theory.key import Key
from staccato_engine.theory.note import Note, NOTE_NAMES_COMMON
from staccato_engine.theory.scale import ScaleType
from staccato_engine.theory.time_signature import TimeSignature

if TYPE_CHECKING:
    from staccato_engine.parser.context import ParserContext

logger = logging.getLogger(__name__)


KEY_SIGNATURE_STRING = "KEY:"
TIME_SIGNATURE_STRING = "TIME:"
SEPARATOR_STRING = "/"

# C major and A minor sit at the midpoint; flat keys to the left, sharp keys to the right
MAJOR_KEY_SIGNATURES = (
    "Cb", "Gb", "Db", "Ab", "Eb", "Bb", "F", "C", "G", "D", "A", "E", "B", "F#", "C#",
)
MINOR_KEY_SIGNATURES = (
    "Ab", "Eb", "Bb", "F", "C", "G", "D", "A", "E", "B", "F#", "C#", "G#", "D#", "A#",
)
KEY_SIG_MIDPOINT = 7

MAJOR_ABBREVIATION = "maj"
MINOR_ABBREVIATION = "min"

SHARP_CHAR = "#"
FLAT_CHAR = "B"


class SignatureSubparser(Subparser):
    """Parses KEY: and TIME: tokens."""

    def matches(self, music: str) -> bool:
        return self.matches_key_signature(music) or self.matches_time_signature(music)

    def matches_key_signature(self, music: str) -> bool:
        return music.startswith(KEY_SIGNATURE_STRING)

    def matches_time_signature(self, music: str) -> bool:
        return music.startswith(TIME_SIGNATURE_STRING)

    def token_type(self, token: str) -> TokenType:
        if self.matches_key_signature(token):
            return TokenType.KEY_SIGNATURE
        if self.matches_time_signature(token):
            return TokenType.TIME_SIGNATURE
        return TokenType.UNKNOWN_TOKEN

    def parse(self, music: str, context: "ParserContext") -> int:
        if self.matches_key_signature(music):
            return self._parse_key_signature(music, context)
        if self.matches_time_signature(music):
            return self._parse_time_signature(music, context)
        return 0

    def _parse_key_signature(self, music: str, context: "ParserContext") -> int:
        pos_next_space = find_next_or_end(music)
        key_string = music[len(KEY_SIGNATURE_STRING):pos_next_space]

        key = self.create_key(key_string)
        context.key = key
        context.listener.on_key_signature_parsed(
            key.root.position_in_octave, int(key.scale.type)
        )
        return pos_next_space + 1

    def _parse_time_signature(self, music: str, context: "ParserContext") -> int:
        pos_next_space = find_next_or_end(music)
        time_string = music[len(TIME_SIGNATURE_STRING):pos_next_space]

        numerator, separator, denominator = time_string.partition(SEPARATOR_STRING)
        if not separator:
            raise ParserError(
                f"Time signature is missing the '{SEPARATOR_STRING}' separator: {time_string}",
                token=music[:pos_next_space],
            )

        try:
            time_signature = TimeSignature(int(numerator), int(denominator))
        except ValueError as e:
            raise ParserError(
                f"Malformed time signature: {time_string}", token=music[:pos_next_space]
            ) from e

        context.time_signature = time_signature
        context.listener.on_time_signature_parsed(
            time_signature.numerator, time_signature.denominator
        )
        return pos_next_space + 1

    def create_key(self, key_signature: str) -> Key:
        """
        Create a key from the text after "KEY:".

        "K" followed by sharps or flats is read as an accidental count and
        gives a major key. Anything else is a chord-style name like "Cmaj".

        Raises:
            ParserError: If the key text cannot be read
        """
        if not key_signature:
            raise ParserError("Key signature is empty", token=KEY_SIGNATURE_STRING)

        if (
            key_signature[0] == "K"
            and len(key_signature) > 1
            and key_signature[1].upper() in (SHARP_CHAR, FLAT_CHAR)
        ):
            return self._create_key_from_accidentals(key_signature)

        try:
            return Key.from_name(key_signature)
        except ValueError as e:
            raise ParserError(
                f"Malformed key signature: {key_signature}", token=key_signature
            ) from e

    def _create_key_from_accidentals(self, key_signature: str) -> Key:
        count = self.count_accidentals(key_signature)
        if abs(count) > KEY_SIG_MIDPOINT:
            raise ParserError(
                f"Too many accidentals in key signature ({count}): {key_signature}",
                token=key_signature,
            )
        root = MAJOR_KEY_SIGNATURES[KEY_SIG_MIDPOINT + count]
        logger.debug(f"Key signature {key_signature} has {count} accidentals: {root} major")
        return Key.from_name(root + MAJOR_ABBREVIATION)

    @staticmethod
    def count_accidentals(key_signature: str) -> int:
        """Net accidental count: +1 per sharp, -1 per flat (b or B)."""
        count = 0
        for char in key_signature.upper():
            if char == FLAT_CHAR:
                count -= 1
            elif char == SHARP_CHAR:
                count += 1
        return count

    @staticmethod
    def create_key_string(note_position_in_octave: int, scale: Union[int, ScaleType]) -> str:
        """Render a key as a chord-style name, e.g. (7, MAJOR) -> "Gmaj"."""
        suffix = MAJOR_ABBREVIATION if scale == ScaleType.MAJOR else MINOR_ABBREVIATION
        return NOTE_NAMES_COMMON[note_position_in_octave % 12] + suffix

    @staticmethod
    def accidental_count_to_root_position(
        accidental_count: int, scale: Union[int, ScaleType]
    ) -> int:
        """
        Root position in octave (0-11) of the key with this many accidentals.

        Raises:
            ValueError: If the count is outside -7..7
        """
        if abs(accidental_count) > KEY_SIG_MIDPOINT:
            raise ValueError(f"Accidental count out of range (-7..7): {accidental_count}")
        table = MAJOR_KEY_SIGNATURES if scale == ScaleType.MAJOR else MINOR_KEY_SIGNATURES
        return Note.from_string(table[KEY_SIG_MIDPOINT + accidental_count]).position_in_octave

    @staticmethod
    def root_position_to_accidental_count(
        note_position_in_octave: int, scale: Union[int, ScaleType]
    ) -> int:
        """
        Smallest accidental count whose key has this root, e.g. (8, MAJOR) -> -4.

        Enharmonic roots resolve to the simpler signature, so Ab major wins
        over G# major. Raises ValueError if no key has the root.
        """
        table = MAJOR_KEY_SIGNATURES if scale == ScaleType.MAJOR else MINOR_KEY_SIGNATURES
        position = note_position_in_octave % 12
        for offset in sorted(range(-KEY_SIG_MIDPOINT, KEY_SIG_MIDPOINT + 1), key=abs):
            if Note.from_string(table[KEY_SIG_MIDPOINT + offset]).position_in_octave == position:
                return offset
        raise ValueError(f"No key signature with root position {note_position_in_octave}")

    @staticmethod
    def key_to_accidental_count(key: Key) -> int:
        """
        Number of sharps (positive) or flats (negative) in a key's signature.

        The key's spelled root is looked up first; otherwise the first
        enharmonic match wins, scanning from seven flats upward. Returns 0
        when the root cannot be found.
        """
        tone = key.root.tone_string_without_octave()
        table = MAJOR_KEY_SIGNATURES if key.is_major else MINOR_KEY_SIGNATURES
        offsets = range(-KEY_SIG_MIDPOINT, KEY_SIG_MIDPOINT + 1)
        for offset in offsets:
            if table[KEY_SIG_MIDPOINT + offset] == tone:
                return offset
        for offset in offsets:
            if Note.is_same_note(tone, table[KEY_SIG_MIDPOINT + offset]):
                return offset
        return 0
