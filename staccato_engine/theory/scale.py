"""
Scale model - Major and minor scales.
"""

from __future__ import annotations

from enum import IntEnum

from staccato_engine.theory.intervals import Intervals


class ScaleType(IntEnum):
    """Scale type codes. The sign doubles as the spelling disposition."""
    MAJOR = 1
    MINOR = -1


class Scale:
    """A scale type together with its interval pattern."""

    MAJOR: "Scale"
    MINOR: "Scale"

    def __init__(self, intervals: Intervals, scale_type: ScaleType):
        self.intervals = intervals
        self.type = scale_type

    @property
    def disposition(self) -> int:
        """1 for sharp-leaning spelling, -1 for flat-leaning spelling."""
        return int(self.type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self.type == other.type and self.intervals == other.intervals

    def __hash__(self) -> int:
        return hash((self.type, str(self.intervals)))

    def __repr__(self) -> str:
        return f"Scale({str(self.intervals)!r}, {self.type.name})"


Scale.MAJOR = Scale(Intervals("1 2 3 4 5 6 7"), ScaleType.MAJOR)
Scale.MINOR = Scale(Intervals("1 2 b3 4 5 b6 b7"), ScaleType.MINOR)
