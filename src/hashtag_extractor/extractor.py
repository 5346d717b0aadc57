"""Extractor: the main API.

Usage:
    from hashtag_extractor import extract_hashtags, extract_mentions, Extractor

    extract_hashtags("text #hashtag1 #hashtag2")   # ["hashtag1", "hashtag2"]
    extract_mentions("RT @alice: hi @bob")         # ["alice", "bob"]
    extract_reply("  @carol thanks!")              # "carol"

    extractor = Extractor()          # reusable, thread-safe after init
    result = extractor.extract("@dave see #release notes")
    result.mentions, result.hashtags, result.entities

Offsets on ``Entity`` are ``str`` indices (code points) into the input.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable

from .patterns import scan
from .types import Entity, ExtractedMessage, TokenKind

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Module-level API
# ------------------------------------------------------------------

def extract_hashtags_with_indices(text: str) -> list[Entity]:
    """Hashtags without their hash markers, with body positions."""
    return scan(TokenKind.HASHTAG, text)


def extract_hashtags(text: str) -> list[str]:
    """Hashtags without their hash markers, in order of appearance."""
    return [e.value for e in extract_hashtags_with_indices(text)]


def extract_mentions_with_indices(text: str) -> list[Entity]:
    """Mentioned screen names without the @ markers, with positions."""
    return scan(TokenKind.MENTION, text)


def extract_mentions(text: str) -> list[str]:
    """Mentioned screen names without the @ markers."""
    return [e.value for e in extract_mentions_with_indices(text)]


def extract_reply(text: str) -> str:
    """Screen name the text replies to, or "" when it is not a reply.

    A reply is an @name at the very start of the text, optionally after
    whitespace.
    """
    for entity in scan(TokenKind.REPLY, text):
        return entity.value
    return ""


def extract_entities_with_indices(text: str) -> list[Entity]:
    """Hashtags and mentions together, ordered by start offset."""
    entities = extract_hashtags_with_indices(text) + extract_mentions_with_indices(text)
    return sorted(entities, key=lambda e: e.start)


# twitter-text names
extract_mentioned_screen_names = extract_mentions
extract_mentioned_screen_names_with_indices = extract_mentions_with_indices
extract_reply_screen_name = extract_reply


# ------------------------------------------------------------------
# Configurable facade
# ------------------------------------------------------------------

@dataclass
class ExtractorConfig:
    """Configuration for the Extractor."""
    hashtags: bool = True
    mentions: bool = True
    reply: bool = True
    # Values never reported, compared case-insensitively
    ignore: set[str] = field(default_factory=set)
    custom_scanners: list[Callable[[str], list[Entity]]] = field(default_factory=list)


class Extractor:
    """Runs every enabled token grammar over a text in one call."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()
        self._ignore = frozenset(v.casefold() for v in self.config.ignore)

    def extract(self, text: str) -> ExtractedMessage:
        """Extract all enabled token kinds from text."""
        cfg = self.config
        all_entities: list[Entity] = []

        if cfg.hashtags:
            all_entities.extend(extract_hashtags_with_indices(text))
        if cfg.mentions:
            all_entities.extend(extract_mentions_with_indices(text))
        for scanner in cfg.custom_scanners:
            all_entities.extend(scanner(text))

        reply = extract_reply(text) if cfg.reply else ""
        if reply and reply.casefold() in self._ignore:
            reply = ""

        entities = sorted(
            (e for e in all_entities if e.value.casefold() not in self._ignore),
            key=lambda e: e.start,
        )
        return ExtractedMessage(
            text=text,
            hashtags=[e.value for e in entities if e.kind is TokenKind.HASHTAG],
            mentions=[e.value for e in entities if e.kind is TokenKind.MENTION],
            reply=reply,
            entities=entities,
        )

    def extract_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Annotate chat-format messages with their hashtags, mentions and reply.

        Returns new message dicts.  Does NOT mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                result = self.extract(content)
                out.append({
                    **msg,
                    "hashtags": result.hashtags,
                    "mentions": result.mentions,
                    "reply": result.reply,
                })
            else:
                out.append(msg)
        logger.debug("annotated %d messages", len(out))
        return out
