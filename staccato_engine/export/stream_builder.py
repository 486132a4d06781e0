"""
Stream Builder - Build a music21 Score from Staccato parse events.

Bridges the gap between the StaccatoParser events and music21, placing
each voice in its own Part with its instrument, key and time signature
objects.
"""

from __future__ import annotations

import logging
from typing import Optional

from music21 import exceptions21, instrument, key, meter, stream

from staccato_engine.parser.listener import ParserListener
from staccato_engine.parser.signature import SignatureSubparser
from staccato_engine.parser.staccato_parser import StaccatoParser
from staccato_engine.theory.scale import ScaleType

logger = logging.getLogger(__name__)


class StreamBuilder(ParserListener):
    """
    Listener that collects parse events into a music21 Score.

    Voices (V tokens) map to Parts, created on first use. Instrument, key and
    time signature events are inserted at offset 0 of the current Part.
    """

    def __init__(self):
        self.score: stream.Score = stream.Score()
        self._parts: dict[int, stream.Part] = {}
        self._current_track: int = 0
        self.current_layer: int = 0

    def before_parsing_starts(self) -> None:
        self.score = stream.Score()
        self._parts = {}
        self._current_track = 0
        self.current_layer = 0

    def current_part(self) -> stream.Part:
        """Part for the current voice, created if needed."""
        part = self._parts.get(self._current_track)
        if part is None:
            part = stream.Part()
            part.id = f"Voice {self._current_track}"
            part.partName = part.id
            self.score.insert(0, part)
            self._parts[self._current_track] = part
            logger.debug(f"Created part for voice {self._current_track}")
        return part

    def get_part(self, track: int) -> Optional[stream.Part]:
        return self._parts.get(track)

    def on_track_changed(self, track: int) -> None:
        self._current_track = track
        self.current_part()

    def on_layer_changed(self, layer: int) -> None:
        self.current_layer = layer

    def on_instrument_parsed(self, program: int) -> None:
        try:
            inst = instrument.instrumentFromMidiProgram(program)
        except exceptions21.Music21Exception as e:
            logger.warning(f"No music21 instrument for program {program}: {e}")
            return
        self.current_part().insert(0, inst)

    def on_key_signature_parsed(self, key_position: int, scale: int) -> None:
        sharps = SignatureSubparser.root_position_to_accidental_count(key_position, scale)
        mode = "major" if scale == ScaleType.MAJOR else "minor"
        m21_key: key.Key = key.KeySignature(sharps).asKey(mode)
        self.current_part().insert(0, m21_key)

    def on_time_signature_parsed(self, numerator: int, denominator: int) -> None:
        try:
            ts = meter.TimeSignature(f"{numerator}/{denominator}")
        except exceptions21.Music21Exception as e:
            logger.warning(f"music21 rejected time signature {numerator}/{denominator}: {e}")
            return
        self.current_part().insert(0, ts)


def build_stream(music: str) -> stream.Score:
    """Parse Staccato text straight into a music21 Score."""
    builder = StreamBuilder()
    StaccatoParser(builder).parse(music)
    return builder.score
