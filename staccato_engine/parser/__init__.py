"""
Parser module for staccato_engine.

Contains the Staccato tokenizer, its subparsers, the parse context and
the event listeners.
"""

from staccato_engine.parser.subparser import (
    Subparser,
    TokenType,
    ParserError,
    UnknownIdentifierError,
)
from staccato_engine.parser.listener import (
    ParserListener,
    ListenerGroup,
    EventCollector,
    InstrumentParsed,
    LayerChanged,
    TrackChanged,
    KeySignatureParsed,
    TimeSignatureParsed,
)
from staccato_engine.parser.context import ParserContext
from staccato_engine.parser.ivl import IVLSubparser
from staccato_engine.parser.signature import SignatureSubparser
from staccato_engine.parser.staccato_parser import StaccatoParser, parse_events

__all__ = [
    "Subparser",
    "TokenType",
    "ParserError",
    "UnknownIdentifierError",
    "ParserListener",
    "ListenerGroup",
    "EventCollector",
    "InstrumentParsed",
    "LayerChanged",
    "TrackChanged",
    "KeySignatureParsed",
    "TimeSignatureParsed",
    "ParserContext",
    "IVLSubparser",
    "SignatureSubparser",
    "StaccatoParser",
    "parse_events",
]
