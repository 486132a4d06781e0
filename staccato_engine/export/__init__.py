"""
Export module for staccato_engine.

Provides conversion of parse events to music21 streams.
"""

from staccato_engine.export.stream_builder import StreamBuilder, build_stream

__all__ = ["StreamBuilder", "build_stream"]
