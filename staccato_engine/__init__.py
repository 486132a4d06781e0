"""
staccato_engine - Staccato music notation parser and music theory engine

Parses instrument, voice, layer, key signature and time signature tokens
of the Staccato notation into events, and converts between interval
patterns, notes and key signatures.
"""

__version__ = "1.0.0"

from staccato_engine.parser.staccato_parser import StaccatoParser, parse_events
from staccato_engine.theory.intervals import Intervals
from staccato_engine.config import Config

__all__ = ["StaccatoParser", "parse_events", "Intervals", "Config", "__version__"]
