"""Compiled twitter-text patterns: candidate scan plus end-of-match check.

Each grammar is a ``(pattern, invalid_end, markers, body_group)`` entry:
``pattern`` finds candidates in one non-overlapping left-to-right pass,
``invalid_end`` is matched at the candidate's end offset and rejects it when
the following text would continue the token, ``markers`` feeds the fast path
and ``body_group`` is the group holding the token body (marker excluded).

Patterns are built once at import; a malformed one raises ``regex.error``
there and the package fails to import.
"""

from __future__ import annotations
import logging
from typing import NamedTuple

import regex

from .charclasses import (
    AT_SIGNS,
    AT_SIGNS_CHARS,
    HASH_SIGNS,
    HASH_SIGNS_CHARS,
    HASHTAG_LETTERS_CHARS,
    HASHTAG_LETTERS_NUMERALS_CHARS,
    LATIN_ACCENTS_CHARS,
    MENTION_PRECEDING_EXCLUDED_CHARS,
    SCREEN_NAME_CHARS,
    SCREEN_NAME_MAX_LEN,
    UNICODE_SPACES_CHARS,
)
from .types import Entity, TokenKind

logger = logging.getLogger(__name__)

_LETTERS_NUMERALS_SET = "[" + HASHTAG_LETTERS_NUMERALS_CHARS + "]"
_LETTERS_SET = "[" + HASHTAG_LETTERS_CHARS + "]"
_AT_SIGNS = "[" + AT_SIGNS_CHARS + "]"
_SCREEN_NAME = "([" + SCREEN_NAME_CHARS + "]{1," + str(SCREEN_NAME_MAX_LEN) + "})"

# The hash must open a line or follow something that is neither a body
# character nor "&" (keeps "&#39;"-style entities and compound words out).
VALID_HASHTAG = regex.compile(
    r"(?:^|[^&" + HASHTAG_LETTERS_NUMERALS_CHARS + r"])"
    r"[" + HASH_SIGNS_CHARS + r"]"
    r"(" + _LETTERS_NUMERALS_SET + r"*" + _LETTERS_SET + _LETTERS_NUMERALS_SET + r"*)",
    regex.MULTILINE,
)
INVALID_HASHTAG_MATCH_END = regex.compile(r"[" + HASH_SIGNS_CHARS + r"]|://")

VALID_MENTION = regex.compile(
    r"([^" + MENTION_PRECEDING_EXCLUDED_CHARS + r"]|^|[Rr][Tt]:?)"
    r"(" + _AT_SIGNS + r"+)"
    + _SCREEN_NAME
)
INVALID_MENTION_MATCH_END = regex.compile(
    r"[" + AT_SIGNS_CHARS + LATIN_ACCENTS_CHARS + r"]|://"
)

# No MULTILINE: "^" is the start of the whole text, so at most one candidate.
VALID_REPLY = regex.compile(
    r"^(?:[" + UNICODE_SPACES_CHARS + r"])*" + _AT_SIGNS + _SCREEN_NAME
)


class Grammar(NamedTuple):
    pattern: regex.Pattern
    invalid_end: regex.Pattern
    markers: str
    body_group: int


GRAMMARS: dict[TokenKind, Grammar] = {
    TokenKind.HASHTAG: Grammar(VALID_HASHTAG, INVALID_HASHTAG_MATCH_END, HASH_SIGNS, 1),
    TokenKind.MENTION: Grammar(VALID_MENTION, INVALID_MENTION_MATCH_END, AT_SIGNS, 3),
    TokenKind.REPLY: Grammar(VALID_REPLY, INVALID_MENTION_MATCH_END, AT_SIGNS, 1),
}


def has_markers(text: str, markers: str) -> bool:
    """True if any marker character occurs in text."""
    return any(marker in text for marker in markers)


def is_valid_end(grammar: Grammar, text: str, pos: int) -> bool:
    """Lookahead at ``pos``: False if the remainder would continue the token."""
    return grammar.invalid_end.match(text, pos) is None


def scan(kind: TokenKind, text: str) -> list[Entity]:
    """Find every accepted token of one kind, left to right.

    Candidates are never re-scanned: a rejected match still consumes its
    characters, exactly like a global non-overlapping search.
    """
    grammar = GRAMMARS[kind]
    if not text or not has_markers(text, grammar.markers):
        return []

    entities: list[Entity] = []
    for m in grammar.pattern.finditer(text):
        if not is_valid_end(grammar, text, m.end()):
            logger.debug(
                "rejected %s %r at %d: followed by %r",
                kind.value, m.group(grammar.body_group), m.start(grammar.body_group),
                text[m.end():m.end() + 3],
            )
            continue
        start, end = m.span(grammar.body_group)
        entities.append(Entity(start=start, end=end, value=text[start:end], kind=kind))
    return entities
