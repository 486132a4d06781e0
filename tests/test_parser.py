"""
Tests for the Staccato parser, its subparsers and the parse context.
"""

import logging

import pytest
from staccato_engine.config import ParserConfig
from staccato_engine.parser.context import ParserContext, default_dictionary
from staccato_engine.parser.ivl import IVLSubparser, to_signed_byte
from staccato_engine.parser.listener import (
    EventCollector, ListenerGroup, ParserListener,
    InstrumentParsed, LayerChanged, TrackChanged,
    KeySignatureParsed, TimeSignatureParsed,
)
from staccato_engine.parser.signature import SignatureSubparser
from staccato_engine.parser.staccato_parser import StaccatoParser, parse_events
from staccato_engine.parser.subparser import (
    ParserError, TokenType, UnknownIdentifierError, find_next_or_end,
)
from staccato_engine.theory.key import Key
from staccato_engine.theory.note import Note
from staccato_engine.theory.scale import Scale, ScaleType
from staccato_engine.theory.time_signature import TimeSignature


@pytest.fixture
def collector():
    return EventCollector()


@pytest.fixture
def context(collector):
    return ParserContext(collector)


class TestFindNextOrEnd:
    """Tests for the token boundary helper."""

    def test_finds_space(self):
        assert find_next_or_end("I10 V2") == 3

    def test_end_of_input(self):
        assert find_next_or_end("I10") == 3


class TestParserContext:
    """Tests for ParserContext."""

    def test_seeded_dictionary(self, context):
        """Test that voices and instruments are seeded."""
        assert context.dictionary["PERCUSSION"] == 9
        assert context.dictionary["PIANO"] == 0
        assert context.dictionary["VIOLIN"] == 40
        assert context.dictionary["GUNSHOT"] == 127

    def test_seed_is_shared_and_read_only(self):
        """Test that the seed is built once and cannot be modified."""
        assert default_dictionary() is default_dictionary()
        with pytest.raises(TypeError):
            default_dictionary()["PIANO"] = 1

    def test_local_definitions_do_not_leak(self):
        """Test that per-context definitions stay in their context."""
        first = ParserContext()
        second = ParserContext()
        first.dictionary["BASSLINE"] = 33
        assert first.dictionary["BASSLINE"] == 33
        assert "BASSLINE" not in second.dictionary
        assert "BASSLINE" not in default_dictionary()

    def test_defaults(self, context):
        """Test the default key and time signature."""
        assert context.key == Key.from_name("Cmaj")
        assert context.time_signature == TimeSignature(4, 4)

    def test_defaults_from_config(self):
        """Test that defaults come from the parser config."""
        config = ParserConfig(default_key="Dmin", default_time_signature="6/8")
        context = ParserContext(config=config)
        assert context.key == Key.from_name("Dmin")
        assert context.time_signature == TimeSignature(6, 8)


class TestIVLSubparser:
    """Tests for instrument, voice and layer tokens."""

    def test_matches(self):
        """Test the marker check."""
        subparser = IVLSubparser()
        assert subparser.matches("I10")
        assert subparser.matches("V[PERCUSSION]")
        assert subparser.matches("L1")
        assert not subparser.matches("KEY:Cmaj")
        assert not subparser.matches("")

    def test_token_type(self):
        """Test token classification."""
        subparser = IVLSubparser()
        assert subparser.token_type("I10") == TokenType.INSTRUMENT
        assert subparser.token_type("V1") == TokenType.VOICE
        assert subparser.token_type("L1") == TokenType.LAYER
        assert subparser.token_type("X1") == TokenType.UNKNOWN_TOKEN

    def test_instrument_number(self, context, collector):
        """Test "I10 " fires one instrument event and consumes four characters."""
        consumed = IVLSubparser().parse("I10 ", context)
        assert consumed == 4
        assert collector.events == [InstrumentParsed(10)]

    def test_percussion_voice(self, context, collector):
        """Test a bracketed voice name."""
        consumed = IVLSubparser().parse("V[PERCUSSION] ", context)
        assert consumed == 14
        assert collector.events == [TrackChanged(9)]

    def test_layer_at_end_of_input(self, context, collector):
        """Test consumption runs one past the end without a separator."""
        consumed = IVLSubparser().parse("L3", context)
        assert consumed == 3
        assert collector.events == [LayerChanged(3)]

    def test_instrument_names(self, context, collector):
        """Test instrument names with and without brackets."""
        parser = IVLSubparser()
        parser.parse("I[VIOLIN] ", context)
        parser.parse("IFLUTE", context)
        assert collector.events == [InstrumentParsed(40), InstrumentParsed(73)]

    def test_lookup_is_case_sensitive(self, context):
        """Test that names must match exactly."""
        with pytest.raises(UnknownIdentifierError):
            IVLSubparser().parse("I[violin]", context)

    def test_unknown_identifier(self, context):
        """Test that unknown names fail as lookup errors."""
        with pytest.raises(UnknownIdentifierError) as exc_info:
            IVLSubparser().parse("I[NOPE] ", context)
        assert isinstance(exc_info.value, KeyError)
        assert isinstance(exc_info.value, ParserError)
        assert "NOPE" in str(exc_info.value)

    def test_value_narrowed_to_signed_byte(self, context, collector):
        """Test that values past 127 wrap around."""
        IVLSubparser().parse("I200", context)
        assert collector.events == [InstrumentParsed(-56)]

    def test_non_ascii_digits_are_identifiers(self, context):
        """Test that only ASCII digits form a literal value."""
        with pytest.raises(UnknownIdentifierError):
            IVLSubparser().parse("I\u0663 ", context)

    def test_to_signed_byte(self):
        """Test the narrowing helper."""
        assert to_signed_byte(127) == 127
        assert to_signed_byte(128) == -128
        assert to_signed_byte(255) == -1
        assert to_signed_byte(256) == 0
        assert to_signed_byte(-129) == 127

    def test_bare_marker(self, context, collector):
        """Test that a marker without a value reports -1."""
        assert IVLSubparser().parse("V ", context) == 2
        assert collector.events == [TrackChanged(-1)]

    def test_no_match_is_noop(self, context, collector):
        """Test that parse returns 0 for input it does not claim."""
        assert IVLSubparser().parse("X10", context) == 0
        assert collector.events == []

    def test_context_definitions(self, context, collector):
        """Test that per-context definitions resolve like seeded names."""
        context.dictionary["LEAD"] = 81
        IVLSubparser().parse("I[LEAD]", context)
        assert collector.events == [InstrumentParsed(81)]


class TestSignatureSubparser:
    """Tests for key and time signature tokens."""

    def test_matches(self):
        """Test the prefix check."""
        subparser = SignatureSubparser()
        assert subparser.matches("KEY:Cmaj")
        assert subparser.matches("TIME:3/4")
        assert not subparser.matches("KE")
        assert not subparser.matches("I10")

    def test_token_type(self):
        """Test token classification."""
        subparser = SignatureSubparser()
        assert subparser.token_type("KEY:Cmaj") == TokenType.KEY_SIGNATURE
        assert subparser.token_type("TIME:3/4") == TokenType.TIME_SIGNATURE
        assert subparser.token_type("I10") == TokenType.UNKNOWN_TOKEN

    def test_time_signature(self, context, collector):
        """Test "TIME:3/4 " fires one event and updates the context."""
        consumed = SignatureSubparser().parse("TIME:3/4 ", context)
        assert consumed == 9
        assert collector.events == [TimeSignatureParsed(3, 4)]
        assert context.time_signature == TimeSignature(3, 4)

    def test_time_signature_missing_slash(self, context, collector):
        """Test that a missing separator is a parse error naming the text."""
        with pytest.raises(ParserError) as exc_info:
            SignatureSubparser().parse("TIME:34 ", context)
        assert "34" in str(exc_info.value)
        assert collector.events == []

    def test_time_signature_not_numbers(self, context):
        """Test that non-numeric and zero parts are parse errors."""
        with pytest.raises(ParserError):
            SignatureSubparser().parse("TIME:a/b", context)
        with pytest.raises(ParserError):
            SignatureSubparser().parse("TIME:0/4", context)

    def test_key_from_name(self, context, collector):
        """Test chord-style key names."""
        subparser = SignatureSubparser()
        consumed = subparser.parse("KEY:Gmaj ", context)
        assert consumed == 9
        subparser.parse("KEY:Amin", context)
        assert collector.events == [
            KeySignatureParsed(7, ScaleType.MAJOR),
            KeySignatureParsed(9, ScaleType.MINOR),
        ]
        assert context.key == Key.from_name("Amin")

    def test_key_from_sharps(self, context, collector):
        """Test that three sharps give A major."""
        SignatureSubparser().parse("KEY:K###", context)
        assert collector.events == [KeySignatureParsed(9, 1)]

    def test_key_from_flats(self, context, collector):
        """Test that flats may be upper or lower case."""
        subparser = SignatureSubparser()
        subparser.parse("KEY:Kbb", context)
        subparser.parse("KEY:KBBB", context)
        assert collector.events == [KeySignatureParsed(10, 1), KeySignatureParsed(3, 1)]

    def test_mixed_accidentals_sum(self, context, collector):
        """Test that mixed runs add up instead of failing."""
        SignatureSubparser().parse("KEY:K#b#", context)
        assert collector.events == [KeySignatureParsed(7, 1)]

    def test_accidental_keys_are_major(self, context):
        """Test that the accidental form always yields a major key."""
        SignatureSubparser().parse("KEY:Kbbb", context)
        assert context.key.scale is Scale.MAJOR

    def test_too_many_accidentals(self, context):
        """Test that more than seven accidentals is a parse error."""
        with pytest.raises(ParserError):
            SignatureSubparser().parse("KEY:K########", context)

    def test_malformed_key(self, context):
        """Test unknown key names."""
        with pytest.raises(ParserError):
            SignatureSubparser().parse("KEY:Hmaj", context)
        with pytest.raises(ParserError):
            SignatureSubparser().parse("KEY:Cfoo", context)
        with pytest.raises(ParserError):
            SignatureSubparser().parse("KEY: ", context)
        with pytest.raises(ParserError):
            SignatureSubparser().parse("KEY:C#####maj", context)

    def test_no_match_is_noop(self, context):
        """Test that parse returns 0 for input it does not claim."""
        assert SignatureSubparser().parse("I10", context) == 0

    def test_create_key_string(self):
        """Test rendering keys from root position and scale."""
        assert SignatureSubparser.create_key_string(7, ScaleType.MAJOR) == "Gmaj"
        assert SignatureSubparser.create_key_string(9, -1) == "Amin"
        assert SignatureSubparser.create_key_string(10, 1) == "Bbmaj"

    def test_accidental_count_to_root_position(self):
        """Test table lookups in both directions from the midpoint."""
        lookup = SignatureSubparser.accidental_count_to_root_position
        assert lookup(0, ScaleType.MAJOR) == 0
        assert lookup(2, ScaleType.MAJOR) == 2
        assert lookup(-1, ScaleType.MAJOR) == 5
        assert lookup(0, ScaleType.MINOR) == 9
        assert lookup(-3, ScaleType.MINOR) == 0
        with pytest.raises(ValueError):
            lookup(8, ScaleType.MAJOR)

    def test_root_position_to_accidental_count(self):
        """Test that enharmonic roots pick the signature with fewer accidentals."""
        count = SignatureSubparser.root_position_to_accidental_count
        assert count(0, ScaleType.MAJOR) == 0
        assert count(8, ScaleType.MAJOR) == -4
        assert count(1, ScaleType.MAJOR) == -5
        assert count(11, ScaleType.MAJOR) == 5
        assert count(9, ScaleType.MINOR) == 0
        assert count(8, ScaleType.MINOR) == 5
        assert count(3, ScaleType.MINOR) == -6

    def test_key_to_accidental_count(self):
        """Test counting accidentals of named keys."""
        count = SignatureSubparser.key_to_accidental_count
        assert count(Key.from_name("Cmaj")) == 0
        assert count(Key.from_name("Gmaj")) == 1
        assert count(Key.from_name("Ebmaj")) == -3
        assert count(Key.from_name("C#maj")) == 7
        assert count(Key.from_name("Dbmaj")) == -5
        assert count(Key.from_name("Amin")) == 0
        assert count(Key.from_name("Dmin")) == -1
        assert count(Key.from_name("F#min")) == 3

    def test_accidental_count_round_trip(self):
        """Test count -> root -> count lands on the same table position."""
        subparser = SignatureSubparser()
        for scale in (Scale.MAJOR, Scale.MINOR):
            for count in range(-7, 8):
                position = subparser.accidental_count_to_root_position(count, scale.type)
                key = Key(Note(60 + position), scale)
                recovered = subparser.key_to_accidental_count(key)
                assert subparser.accidental_count_to_root_position(
                    recovered, scale.type
                ) == position


class RecordingListener(ParserListener):
    def __init__(self):
        self.calls = []

    def before_parsing_starts(self):
        self.calls.append("start")

    def after_parsing_finished(self):
        self.calls.append("finish")

    def on_instrument_parsed(self, instrument):
        self.calls.append(("instrument", instrument))


class TestStaccatoParser:
    """Tests for the top-level dispatch loop."""

    def test_parse_sequence(self):
        """Test events fire in input order."""
        events = parse_events("V0 I[PIANO] KEY:Gmaj TIME:3/4")
        assert events == [
            TrackChanged(0),
            InstrumentParsed(0),
            KeySignatureParsed(7, 1),
            TimeSignatureParsed(3, 4),
        ]

    def test_extra_whitespace(self):
        """Test that runs of whitespace are skipped."""
        events = parse_events("  I10   L2 \n V1  ")
        assert events == [InstrumentParsed(10), LayerChanged(2), TrackChanged(1)]

    def test_empty_input(self):
        """Test that empty input fires no events."""
        assert parse_events("") == []

    def test_context_after_parse(self):
        """Test the returned context reflects the last signatures."""
        context = StaccatoParser().parse("KEY:Dmin TIME:6/8 KEY:K#")
        assert context.key == Key.from_name("Gmaj")
        assert context.time_signature == TimeSignature(6, 8)

    def test_unknown_token_skipped(self, caplog):
        """Test that unknown tokens are logged and skipped by default."""
        with caplog.at_level(logging.WARNING):
            events = parse_events("X99 I10")
        assert events == [InstrumentParsed(10)]
        assert "Unknown token: X99" in caplog.text

    def test_unknown_token_raises(self):
        """Test that unknown tokens raise when configured to."""
        config = ParserConfig(throw_on_unknown_token=True)
        with pytest.raises(ParserError) as exc_info:
            parse_events("I10 X99", config)
        assert exc_info.value.token == "X99"
        assert exc_info.value.position == 4

    def test_error_position(self):
        """Test that errors carry the position of the failing token."""
        with pytest.raises(ParserError) as exc_info:
            parse_events("I10 TIME:34")
        assert exc_info.value.position == 4

    def test_error_aborts_parse(self):
        """Test that events after a failing token are not fired."""
        collector = EventCollector()
        with pytest.raises(UnknownIdentifierError):
            StaccatoParser(collector).parse("I10 I[NOPE] I20")
        assert collector.events == [InstrumentParsed(10)]

    def test_lifecycle_events(self):
        """Test that start and finish bracket the token events."""
        listener = RecordingListener()
        StaccatoParser(listener).parse("I5")
        assert listener.calls == ["start", ("instrument", 5), "finish"]

    def test_listener_group(self):
        """Test fan-out to several listeners."""
        first, second = EventCollector(), EventCollector()
        StaccatoParser(ListenerGroup(first, second)).parse("L1 TIME:2/2")
        assert first.events == second.events == [LayerChanged(1), TimeSignatureParsed(2, 2)]

    def test_first_match_wins(self):
        """Test dispatch follows subparser order."""
        class ClaimEverything(IVLSubparser):
            def matches(self, music):
                return True

            def parse(self, music, context):
                context.listener.on_layer_changed(0)
                return len(music) + 1

        collector = EventCollector()
        StaccatoParser(collector, subparsers=[ClaimEverything(), SignatureSubparser()]).parse(
            "TIME:3/4"
        )
        assert collector.events == [LayerChanged(0)]

    def test_shared_subparsers(self):
        """Test that subparsers can serve several parsers with separate contexts."""
        subparsers = [IVLSubparser(), SignatureSubparser()]
        first = StaccatoParser(subparsers=subparsers).parse("KEY:Amin")
        second = StaccatoParser(subparsers=subparsers).parse("TIME:5/4")
        assert first is not second
        assert first.key == Key.from_name("Amin")
        assert second.key == Key.from_name("Cmaj")
        assert second.time_signature == TimeSignature(5, 4)

    def test_token_type(self):
        """Test classifying tokens through the parser."""
        parser = StaccatoParser()
        assert parser.token_type("KEY:Cmaj") == TokenType.KEY_SIGNATURE
        assert parser.token_type("V3") == TokenType.VOICE
        assert parser.token_type("Q") == TokenType.UNKNOWN_TOKEN


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
