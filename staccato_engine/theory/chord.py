"""
Chord model and chord-name provider.

Chord names are a root note, an optional octave and a quality
abbreviation, e.g. "Cmaj", "F#min7", "Bb4dom7". Quality matching is
case-insensitive.
"""

from __future__ import annotations

import re

from staccato_engine.theory.intervals import Intervals
from staccato_engine.theory.note import Note


CHORD_INTERVALS = {
    "MAJ": "1 3 5",
    "MAJ6": "1 3 5 6",
    "MAJ7": "1 3 5 7",
    "MAJ9": "1 3 5 7 9",
    "ADD9": "1 3 5 9",
    "MAJ6%9": "1 3 5 6 9",
    "MAJ7%6": "1 3 5 6 7",
    "MAJ13": "1 3 5 7 9 13",
    "MIN": "1 b3 5",
    "MIN6": "1 b3 5 6",
    "MIN7": "1 b3 5 b7",
    "MIN9": "1 b3 5 b7 9",
    "MIN11": "1 b3 5 b7 9 11",
    "MIN7%11": "1 b3 5 b7 11",
    "MINADD9": "1 b3 5 9",
    "MIN6%9": "1 b3 5 6 9",
    "MINMAJ7": "1 b3 5 7",
    "MINMAJ9": "1 b3 5 7 9",
    "DOM7": "1 3 5 b7",
    "DOM7%6": "1 3 5 6 b7",
    "DOM7%11": "1 3 5 b7 11",
    "DOM7SUS": "1 4 5 b7",
    "DOM7%6SUS": "1 4 5 6 b7",
    "DOM9": "1 3 5 b7 9",
    "DOM11": "1 3 5 b7 9 11",
    "DOM13": "1 3 5 b7 9 13",
    "DOM13SUS": "1 3 5 b7 11 13",
    "DOM7<5": "1 3 b5 b7",
    "DOM7>5": "1 3 #5 b7",
    "DOM7<9": "1 3 5 b7 b9",
    "DOM7>9": "1 3 5 b7 #9",
    "AUG": "1 3 #5",
    "AUG7": "1 3 #5 b7",
    "DIM": "1 b3 b5",
    "DIM7": "1 b3 b5 6",
    "SUS2": "1 2 5",
    "SUS4": "1 4 5",
}


class Chord:
    """A root note with an interval pattern."""

    def __init__(self, root: Note, intervals: Intervals):
        self.root = root
        self.intervals = intervals
        self.intervals.set_root(root)

    def get_notes(self) -> list[Note]:
        return self.intervals.get_notes()

    def is_major(self) -> bool:
        return "3" in self._degrees()

    def is_minor(self) -> bool:
        return "b3" in self._degrees()

    def _degrees(self) -> list[str]:
        return str(self.intervals).split()

    def __repr__(self) -> str:
        return f"Chord({self.root!s}, {str(self.intervals)!r})"


class ChordProvider:
    """Creates chords from chord names."""

    NAME_PATTERN = re.compile(r"^([A-Ga-g][#b]*)(\d{1,2})?(.+)$")

    def create_chord(self, name: str) -> Chord:
        """
        Create a chord from a name such as "Cmaj" or "Ebmin7".

        Raises:
            ValueError: If the root or the quality is not recognised
        """
        match = self.NAME_PATTERN.match(name.strip())
        if not match:
            raise ValueError(f"Invalid chord name: {name!r}")

        root_text, octave, quality = match.groups()
        quality = quality.upper()
        if quality not in CHORD_INTERVALS:
            raise ValueError(f"Unknown chord quality {quality!r} in {name!r}")

        root = Note.from_string(root_text + (octave or ""))
        return Chord(root, Intervals(CHORD_INTERVALS[quality]))

    @staticmethod
    def known_qualities() -> list[str]:
        return sorted(CHORD_INTERVALS)


_provider = ChordProvider()


def create_chord(name: str) -> Chord:
    """Create a chord using the default provider."""
    return _provider.create_chord(name)
