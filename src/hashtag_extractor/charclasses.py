"""Character-class tables for the twitter-text hashtag/mention grammar.

Every ``*_CHARS`` constant is a fragment meant to be dropped inside a
``[...]`` class of a ``regex`` pattern.  The ``\\p{...}`` Unicode properties
need the third-party ``regex`` engine; the stdlib ``re`` module has none.
"""

from __future__ import annotations

UNICODE_SPACES_CHARS = (
    r"\u0009-\u000d"                                # White_Space # Cc   [5] <control-0009>..<control-000D>
    r"\u0020"                                       # White_Space # Zs       SPACE
    r"\u0085"                                       # White_Space # Cc       <control-0085>
    r"\u00a0"                                       # White_Space # Zs       NO-BREAK SPACE
    r"\u1680"                                       # White_Space # Zs       OGHAM SPACE MARK
    r"\u180e"                                       # White_Space # Zs       MONGOLIAN VOWEL SEPARATOR
    r"\u2000-\u200a"                                # White_Space # Zs  [11] EN QUAD..HAIR SPACE
    r"\u2028"                                       # White_Space # Zl       LINE SEPARATOR
    r"\u2029"                                       # White_Space # Zp       PARAGRAPH SEPARATOR
    r"\u202f"                                       # White_Space # Zs       NARROW NO-BREAK SPACE
    r"\u205f"                                       # White_Space # Zs       MEDIUM MATHEMATICAL SPACE
    r"\u3000"                                       # White_Space # Zs       IDEOGRAPHIC SPACE
)

HASHTAG_LETTERS_CHARS = r"\p{L}\p{M}"
HASHTAG_NUMERALS_CHARS = r"\p{Nd}"
HASHTAG_SPECIAL_CHARS = (
    r"_"                                            # underscore
    r"\u200c"                                       # ZERO WIDTH NON-JOINER (ZWNJ)
    r"\u200d"                                       # ZERO WIDTH JOINER (ZWJ)
    r"\ua67e"                                       # CYRILLIC KAVYKA
    r"\u05be"                                       # HEBREW PUNCTUATION MAQAF
    r"\u05f3"                                       # HEBREW PUNCTUATION GERESH
    r"\u05f4"                                       # HEBREW PUNCTUATION GERSHAYIM
    r"\u309b"                                       # KATAKANA-HIRAGANA VOICED SOUND MARK
    r"\u309c"                                       # KATAKANA-HIRAGANA SEMI-VOICED SOUND MARK
    r"\u30a0"                                       # KATAKANA-HIRAGANA DOUBLE HYPHEN
    r"\u30fb"                                       # KATAKANA MIDDLE DOT
    r"\u3003"                                       # DITTO MARK
    r"\u0f0b"                                       # TIBETAN MARK INTERSYLLABIC TSHEG
    r"\u0f0c"                                       # TIBETAN MARK DELIMITER TSHEG BSTAR
    r"\u0f0d"                                       # TIBETAN MARK SHAD
)
HASHTAG_LETTERS_NUMERALS_CHARS = (
    HASHTAG_LETTERS_CHARS + HASHTAG_NUMERALS_CHARS + HASHTAG_SPECIAL_CHARS
)

HASH_SIGNS_CHARS = r"#\uff03"
AT_SIGNS_CHARS = r"@\uff20"

LATIN_ACCENTS_CHARS = (
    r"\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u00ff"      # Latin-1
    r"\u0100-\u024f"                                # Latin Extended A and B
    r"\u0253\u0254\u0256\u0257\u0259\u025b"         # IPA Extensions
    r"\u0263\u0268\u026f\u0272\u0289\u028b"
    r"\u02bb"                                       # Hawaiian
    r"\u0300-\u036f"                                # Combining diacritics
    r"\u1e00-\u1eff"                                # Latin Extended Additional
)

# Characters that stop an @ from starting a mention when directly before it.
MENTION_PRECEDING_EXCLUDED_CHARS = r"A-Za-z0-9_!#$%&*" + AT_SIGNS_CHARS
SCREEN_NAME_CHARS = r"A-Za-z0-9_"
SCREEN_NAME_MAX_LEN = 20

# Plain strings (not pattern fragments) for the marker fast path.
HASH_SIGNS = "#\N{FULLWIDTH NUMBER SIGN}"
AT_SIGNS = "@\N{FULLWIDTH COMMERCIAL AT}"
