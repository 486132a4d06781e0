"""
Note model - Pitch values and note-name spelling.

Note values follow the MIDI numbering with octave 5 as the default octave,
so "C" and "C5" are both 60. Note-name parsing is delegated to music21,
which understands multiple accidentals and enharmonic spellings.
"""

from __future__ import annotations

import re
from typing import Optional

from music21 import exceptions21, pitch


NOTE_NAMES_COMMON = ["C", "C#", "D", "Eb", "E", "F", "F#", "G", "G#", "A", "Bb", "B"]
NOTE_NAMES_SHARP = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
NOTE_NAMES_FLAT = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

DEFAULT_OCTAVE = 5


class Note:
    """
    A single pitch.

    Attributes:
        value: MIDI-style note number (C5 = 60)
        name: Spelled tone name without octave when the note was created
            from text (e.g. "Bb", "C#"), otherwise None
    """

    NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b]*)([0-9]{1,2})?$")

    def __init__(self, value: int, name: Optional[str] = None):
        self.value = value
        self.name = name

    @classmethod
    def from_string(cls, text: str) -> "Note":
        """
        Create a note from text such as "C", "Bb4", "F##" or "Ebb6".

        Raises:
            ValueError: If the text is not a note name
        """
        match = cls.NOTE_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid note: {text!r}")

        step, accidentals, octave = match.groups()
        step = step.upper()
        octave = int(octave) if octave else DEFAULT_OCTAVE

        # music21 spells flats with "-" and puts middle C in octave 4
        try:
            p = pitch.Pitch(step + accidentals.replace("b", "-"))
        except exceptions21.Music21Exception as e:
            raise ValueError(f"Invalid note: {text!r}") from e
        p.octave = octave - 1
        return cls(p.midi, step + accidentals)

    @property
    def position_in_octave(self) -> int:
        return self.value % 12

    @property
    def octave(self) -> int:
        return self.value // 12

    def tone_string_without_octave(self) -> str:
        """Return the spelled name if known, else the common name for the pitch class."""
        if self.name is not None:
            return self.name
        return NOTE_NAMES_COMMON[self.position_in_octave]

    @staticmethod
    def dispositioned_tone_string(disposition: int, value: int) -> str:
        """
        Spell a pitch class with sharps (disposition 1) or flats (disposition -1).
        """
        names = NOTE_NAMES_FLAT if disposition == -1 else NOTE_NAMES_SHARP
        return names[value % 12]

    @staticmethod
    def is_same_note(first: str, second: str) -> bool:
        """Check whether two note names are enharmonically equal."""
        return Note.from_string(first).position_in_octave == Note.from_string(second).position_in_octave

    def to_music21(self) -> pitch.Pitch:
        """Convert to a music21 Pitch, keeping the original spelling if known."""
        if self.name is None:
            return pitch.Pitch(midi=self.value)
        p = pitch.Pitch(self.name.replace("b", "-"))
        p.octave = self.octave - 1
        # Cb and B# sit across the octave boundary from their pitch class
        p.octave += (self.value - p.midi) // 12
        return p

    def __str__(self) -> str:
        return f"{self.tone_string_without_octave()}{self.octave}"

    def __repr__(self) -> str:
        return f"Note({self.value}, {self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
