"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class TokenKind(str, Enum):
    """Which grammar produced an entity."""
    HASHTAG = "hashtag"
    MENTION = "mention"
    REPLY = "reply"


@dataclass(frozen=True, slots=True)
class Entity:
    """A single extracted token.

    ``start``/``end`` delimit the body without its marker, as ``str`` indices
    (code points) into the original text, so ``text[start:end] == value``.
    """
    start: int
    end: int
    value: str
    kind: TokenKind = TokenKind.HASHTAG


@dataclass(slots=True)
class ExtractedMessage:
    """Result of running every enabled extractor over one text."""
    text: str
    hashtags: list[str] = field(default_factory=list)
    mentions: list[str] = field(default_factory=list)
    reply: str = ""
    entities: list[Entity] = field(default_factory=list)   # sorted by start
