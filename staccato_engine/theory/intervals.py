"""
Intervals - Interval patterns and half-step arithmetic.

An interval pattern is a space-separated list of scale degrees, each with
optional flat (b) or sharp (#) markers, for example "1 b3 5" for a minor
triad. Degrees 1 through 15 (two octaves) are supported.

Examples:
    Intervals("1 3 5").to_halfstep_array()        # [0, 4, 7]
    Intervals("1 b3 5").set_root("C").get_notes() # C, Eb, G
    Intervals("1 2 3").rotate(1)                  # "2 3 1"
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Optional, Sequence, Union

from staccato_engine.theory.note import Note


class IntervalError(ValueError):
    """Raised when an interval degree is outside the supported range."""


WHOLE_NUMBER_DEGREE_TO_HALFSTEPS = MappingProxyType({
    1: 0,
    2: 2,
    3: 4,
    4: 5,
    5: 7,
    6: 9,
    7: 11,
    8: 12,
    9: 14,
    10: 16,
    11: 17,
    12: 19,
    13: 21,
    14: 23,
    15: 24,
})

HALFSTEPS_TO_WHOLE_NUMBER_DEGREE = MappingProxyType({
    halfsteps: degree for degree, halfsteps in WHOLE_NUMBER_DEGREE_TO_HALFSTEPS.items()
})

FLAT_CHAR = "b"
SHARP_CHAR = "#"


class Intervals:
    """
    An ordered interval pattern with an optional root.

    The pattern is stored as a list of degree tokens. Rotation mutates the
    pattern in place; everything else is read-only.
    """

    NUMBER_PATTERN = re.compile(r"\d+")

    def __init__(self, interval_pattern: str):
        self._intervals: list[str] = interval_pattern.split()
        self.root: Optional[Note] = None

    def set_root(self, root: Union[Note, str]) -> "Intervals":
        """Set the root note used by get_notes(). Accepts a Note or note text."""
        self.root = root if isinstance(root, Note) else Note.from_string(root)
        return self

    @property
    def size(self) -> int:
        return len(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def get_nth_interval(self, n: int) -> str:
        return self._intervals[n]

    @staticmethod
    def get_halfsteps(interval: str) -> int:
        """
        Get the half-step offset of a single interval token.

        Args:
            interval: Degree token such as "5", "b3", "#11" or "bb7"

        Returns:
            Table offset for the degree plus one half-step per sharp and
            minus one per flat

        Raises:
            IntervalError: If the degree is missing or outside 1-15
        """
        degree = Intervals._number_portion(interval)
        if degree not in WHOLE_NUMBER_DEGREE_TO_HALFSTEPS:
            raise IntervalError(f"Interval degree out of range (1-15): {interval!r}")
        return WHOLE_NUMBER_DEGREE_TO_HALFSTEPS[degree] + Intervals._accidental_delta(interval)

    def to_halfstep_array(self) -> list[int]:
        return [self.get_halfsteps(interval) for interval in self._intervals]

    def resolve_against_root(self, root: Note) -> list[Note]:
        """
        Build concrete notes by adding each interval's half-steps to the root.

        The root's octave carries through unchanged; values past the MIDI
        range are not wrapped.
        """
        return [Note(root.value + self.get_halfsteps(interval)) for interval in self._intervals]

    def get_notes(self) -> list[Note]:
        """Resolve the pattern against the root set with set_root()."""
        if self.root is None:
            raise ValueError("Intervals have no root; call set_root() first")
        return self.resolve_against_root(self.root)

    def rotate(self, n: int) -> "Intervals":
        """
        Rotate the pattern left by n positions (negative n rotates right).

        Returns:
            self, for chaining
        """
        if not self._intervals:
            return self
        n %= len(self._intervals)
        self._intervals = self._intervals[n:] + self._intervals[:n]
        return self

    @classmethod
    def from_notes(cls, notes: Union[str, Sequence[Note]]) -> "Intervals":
        """
        Derive an interval pattern from concrete notes.

        The first note is degree 1. Each later note is measured upward from
        the first within one octave; gaps with no whole-number degree are
        written as the flattened next degree ("b3", never "#2").

        Args:
            notes: Notes, or a space-separated string of note names

        Returns:
            New Intervals instance
        """
        if isinstance(notes, str):
            notes = [Note.from_string(text) for text in notes.split()]
        if not notes:
            return cls("")

        first = notes[0].position_in_octave
        tokens = ["1"]
        for current in notes[1:]:
            diff = (current.position_in_octave - first) % 12
            prefix = ""
            if diff not in HALFSTEPS_TO_WHOLE_NUMBER_DEGREE:
                diff += 1
                prefix = FLAT_CHAR
            tokens.append(f"{prefix}{HALFSTEPS_TO_WHOLE_NUMBER_DEGREE[diff]}")
        return cls(" ".join(tokens))

    @classmethod
    def _number_portion(cls, interval: str) -> int:
        match = cls.NUMBER_PATTERN.search(interval)
        return int(match.group(0)) if match else 0

    @staticmethod
    def _accidental_delta(interval: str) -> int:
        delta = 0
        for char in interval.upper():
            if char == "B":
                delta -= 1
            elif char == SHARP_CHAR:
                delta += 1
        return delta

    def __str__(self) -> str:
        return " ".join(self._intervals)

    def __repr__(self) -> str:
        return f"Intervals({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intervals):
            return NotImplemented
        return self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash(str(self))
