"""
Subparser contract shared by every Staccato token recognizer.

A subparser is a stateless strategy object. The tokenizer offers it the
remaining input; if matches() is true, parse() consumes exactly one token,
updates the ParserContext and fires events on the context's listener.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staccato_engine.parser.context import ParserContext


class TokenType(Enum):
    """Kinds of Staccato tokens."""
    INSTRUMENT = "instrument"
    VOICE = "voice"
    LAYER = "layer"
    KEY_SIGNATURE = "key_signature"
    TIME_SIGNATURE = "time_signature"
    UNKNOWN_TOKEN = "unknown_token"


class ParserError(Exception):
    """Error while parsing a Staccato token."""
    def __init__(self, message: str, token: str = "", position: int = 0):
        super().__init__(message)
        self.token = token
        self.position = position


class UnknownIdentifierError(ParserError, KeyError):
    """An identifier was not found in the context dictionary."""

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]


def find_next_or_end(music: str, char: str = " ", start: int = 0) -> int:
    """Index of the next occurrence of char at or after start, or len(music)."""
    pos = music.find(char, start)
    return len(music) if pos == -1 else pos


class Subparser(ABC):
    """Base class for token recognizers."""

    @abstractmethod
    def matches(self, music: str) -> bool:
        """Cheap prefix test: does the remaining input start with this token kind?"""

    @abstractmethod
    def token_type(self, token: str) -> TokenType:
        """Classify an already matched token without side effects."""

    @abstractmethod
    def parse(self, music: str, context: "ParserContext") -> int:
        """
        Consume one token from the start of music.

        Returns:
            Characters consumed including the trailing separator, or 0 when
            the input does not match
        """
