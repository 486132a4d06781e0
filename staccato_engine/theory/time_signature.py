"""
Time signature value type.
"""

from __future__ import annotations

from dataclasses import dataclass

from music21 import meter


@dataclass(frozen=True)
class TimeSignature:
    """Beats per measure over beat unit. The denominator need not be a power of two."""
    numerator: int
    denominator: int

    def __post_init__(self):
        if self.numerator <= 0 or self.denominator <= 0:
            raise ValueError(
                f"Time signature parts must be positive: {self.numerator}/{self.denominator}"
            )

    @classmethod
    def from_string(cls, text: str) -> "TimeSignature":
        """Parse "3/4" style text."""
        numerator, _, denominator = text.partition("/")
        return cls(int(numerator), int(denominator))

    def to_music21(self) -> meter.TimeSignature:
        return meter.TimeSignature(str(self))

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
