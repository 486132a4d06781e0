"""
Key model - A root note with a major or minor scale.
"""

from __future__ import annotations

from music21 import key

from staccato_engine.theory.chord import Chord, create_chord
from staccato_engine.theory.note import Note
from staccato_engine.theory.scale import Scale, ScaleType


class Key:
    """A key: root note plus scale."""

    def __init__(self, root: Note, scale: Scale):
        self.root = root
        self.scale = scale

    @classmethod
    def from_chord(cls, chord: Chord) -> "Key":
        """
        Derive a key from a chord: a flat third makes it minor, anything
        else is major.
        """
        scale = Scale.MINOR if chord.is_minor() else Scale.MAJOR
        return cls(chord.root, scale)

    @classmethod
    def from_name(cls, name: str) -> "Key":
        """Create a key from a chord-style name such as "Gmaj" or "F#min"."""
        return cls.from_chord(create_chord(name))

    @property
    def is_major(self) -> bool:
        return self.scale.type == ScaleType.MAJOR

    def to_music21(self) -> key.Key:
        tonic = self.root.tone_string_without_octave().replace("b", "-")
        return key.Key(tonic, "major" if self.is_major else "minor")

    def __str__(self) -> str:
        suffix = "maj" if self.is_major else "min"
        return f"{self.root.tone_string_without_octave()}{suffix}"

    def __repr__(self) -> str:
        return f"Key({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return (
            self.root.position_in_octave == other.root.position_in_octave
            and self.scale.type == other.scale.type
        )

    def __hash__(self) -> int:
        return hash((self.root.position_in_octave, self.scale.type))
