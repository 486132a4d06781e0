"""
Parser context - Mutable state for a single parse run.

A ParserContext is created when parsing starts and dropped when it ends.
It must not be shared between concurrent parses. The identifier
dictionary layers per-parse definitions over a seed mapping that is built
once per process and never modified.
"""

from __future__ import annotations

from collections import ChainMap
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from staccato_engine.config import ParserConfig
from staccato_engine.parser.ivl import IVLSubparser
from staccato_engine.parser.listener import ParserListener
from staccato_engine.theory.key import Key
from staccato_engine.theory.time_signature import TimeSignature


@lru_cache(maxsize=None)
def default_dictionary() -> Mapping[str, int]:
    """Identifier seed shared by all contexts: voice names and instrument names."""
    dictionary: dict[str, int] = {}
    IVLSubparser.populate_dictionary(dictionary)
    return MappingProxyType(dictionary)


class ParserContext:
    """
    State shared by all subparsers during one parse.

    Attributes:
        listener: Event sink (borrowed, not owned)
        dictionary: Identifier to value mapping
        key: Current key signature
        time_signature: Current time signature
    """

    def __init__(
        self,
        listener: Optional[ParserListener] = None,
        config: Optional[ParserConfig] = None,
    ):
        config = config or ParserConfig()
        self.listener: ParserListener = listener or ParserListener()
        self.dictionary: ChainMap = ChainMap({}, default_dictionary())
        self.key: Key = Key.from_name(config.default_key)
        self.time_signature: TimeSignature = TimeSignature.from_string(
            config.default_time_signature
        )
