"""hashtag-extractor: twitter-text style hashtag, mention and reply extraction."""

from .extractor import (
    Extractor, ExtractorConfig,
    extract_hashtags, extract_hashtags_with_indices,
    extract_mentions, extract_mentions_with_indices,
    extract_mentioned_screen_names, extract_mentioned_screen_names_with_indices,
    extract_reply, extract_reply_screen_name,
    extract_entities_with_indices,
)
from .config import create_extractor, load_config, load_from_yaml
from .types import Entity, ExtractedMessage, TokenKind

__all__ = [
    "Extractor", "ExtractorConfig",
    "extract_hashtags", "extract_hashtags_with_indices",
    "extract_mentions", "extract_mentions_with_indices",
    "extract_mentioned_screen_names", "extract_mentioned_screen_names_with_indices",
    "extract_reply", "extract_reply_screen_name",
    "extract_entities_with_indices",
    "create_extractor", "load_config", "load_from_yaml",
    "Entity", "ExtractedMessage", "TokenKind",
]
__version__ = "0.1.0"
