"""
Parser listeners - Receivers of parse events.

ParserListener is the event sink handed to the parser. Its methods are
no-ops; subclasses override the events they care about.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class ParserListener:
    """Event sink for Staccato parse events."""

    def before_parsing_starts(self) -> None:
        pass

    def after_parsing_finished(self) -> None:
        pass

    def on_instrument_parsed(self, instrument: int) -> None:
        pass

    def on_layer_changed(self, layer: int) -> None:
        pass

    def on_track_changed(self, track: int) -> None:
        pass

    def on_key_signature_parsed(self, key: int, scale: int) -> None:
        pass

    def on_time_signature_parsed(self, numerator: int, denominator: int) -> None:
        pass


class ListenerGroup(ParserListener):
    """Forwards every event to several listeners, in registration order."""

    def __init__(self, *listeners: ParserListener):
        self.listeners: list[ParserListener] = list(listeners)

    def add(self, listener: ParserListener) -> None:
        self.listeners.append(listener)

    def remove(self, listener: ParserListener) -> None:
        self.listeners.remove(listener)

    def before_parsing_starts(self) -> None:
        for listener in self.listeners:
            listener.before_parsing_starts()

    def after_parsing_finished(self) -> None:
        for listener in self.listeners:
            listener.after_parsing_finished()

    def on_instrument_parsed(self, instrument: int) -> None:
        for listener in self.listeners:
            listener.on_instrument_parsed(instrument)

    def on_layer_changed(self, layer: int) -> None:
        for listener in self.listeners:
            listener.on_layer_changed(layer)

    def on_track_changed(self, track: int) -> None:
        for listener in self.listeners:
            listener.on_track_changed(track)

    def on_key_signature_parsed(self, key: int, scale: int) -> None:
        for listener in self.listeners:
            listener.on_key_signature_parsed(key, scale)

    def on_time_signature_parsed(self, numerator: int, denominator: int) -> None:
        for listener in self.listeners:
            listener.on_time_signature_parsed(numerator, denominator)


@dataclass(frozen=True)
class InstrumentParsed:
    instrument: int


@dataclass(frozen=True)
class LayerChanged:
    layer: int


@dataclass(frozen=True)
class TrackChanged:
    track: int


@dataclass(frozen=True)
class KeySignatureParsed:
    """Root position in octave (0-11) and scale type code (1 major, -1 minor)."""
    key: int
    scale: int


@dataclass(frozen=True)
class TimeSignatureParsed:
    numerator: int
    denominator: int


# Type alias for recorded events
ParseEvent = Union[
    InstrumentParsed, LayerChanged, TrackChanged, KeySignatureParsed, TimeSignatureParsed
]


class EventCollector(ParserListener):
    """Records parse events in the order they arrive."""

    def __init__(self):
        self.events: list[ParseEvent] = []

    def before_parsing_starts(self) -> None:
        self.events = []

    def on_instrument_parsed(self, instrument: int) -> None:
        self.events.append(InstrumentParsed(instrument))

    def on_layer_changed(self, layer: int) -> None:
        self.events.append(LayerChanged(layer))

    def on_track_changed(self, track: int) -> None:
        self.events.append(TrackChanged(track))

    def on_key_signature_parsed(self, key: int, scale: int) -> None:
        self.events.append(KeySignatureParsed(key, scale))

    def on_time_signature_parsed(self, numerator: int, denominator: int) -> None:
        self.events.append(TimeSignatureParsed(numerator, denominator))
