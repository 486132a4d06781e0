"""
Theory module for staccato_engine.

Contains the note, interval, scale, chord, key and time signature models.
"""

from staccato_engine.theory.note import Note
from staccato_engine.theory.intervals import (
    Intervals,
    IntervalError,
    WHOLE_NUMBER_DEGREE_TO_HALFSTEPS,
    HALFSTEPS_TO_WHOLE_NUMBER_DEGREE,
)
from staccato_engine.theory.scale import Scale, ScaleType
from staccato_engine.theory.chord import Chord, ChordProvider, create_chord
from staccato_engine.theory.key import Key
from staccato_engine.theory.time_signature import TimeSignature
from staccato_engine.theory.instrument import Instrument

__all__ = [
    "Note",
    "Intervals",
    "IntervalError",
    "WHOLE_NUMBER_DEGREE_TO_HALFSTEPS",
    "HALFSTEPS_TO_WHOLE_NUMBER_DEGREE",
    "Scale",
    "ScaleType",
    "Chord",
    "ChordProvider",
    "create_chord",
    "Key",
    "TimeSignature",
    "Instrument",
]
