"""YAML/dict config loader for hashtag-extractor.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    hashtag_extractor:
      enabled: true
      kinds:
        - hashtag
        - mention
      ignore:
        - nsfw
        - spambot
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

from .extractor import Extractor, ExtractorConfig
from .types import ExtractedMessage, TokenKind

logger = logging.getLogger(__name__)

_KIND_FLAGS = {
    TokenKind.HASHTAG: "hashtags",
    TokenKind.MENTION: "mentions",
    TokenKind.REPLY: "reply",
}


class _NoopExtractor:
    """Pass-through extractor when extraction is disabled."""
    def extract(self, text: str) -> ExtractedMessage:
        return ExtractedMessage(text=text)
    def extract_messages(self, messages: list[dict], *, content_key: str = "content") -> list[dict]:
        return messages


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "hashtag_extractor" key or flat
    if "hashtag_extractor" in data:
        data = data["hashtag_extractor"] or {}

    cfg: dict[str, Any] = {
        "enabled": data.get("enabled", True),
        "hashtags": data.get("hashtags", True),
        "mentions": data.get("mentions", True),
        "reply": data.get("reply", True),
        "ignore": set(data.get("ignore") or []),
    }

    kinds = data.get("kinds")
    if kinds is not None:
        try:
            selected = {TokenKind(k) for k in kinds}
        except ValueError:
            valid = ", ".join(k.value for k in TokenKind)
            raise ValueError(f"unknown token kind in {kinds!r} (expected: {valid})") from None
        for kind, flag in _KIND_FLAGS.items():
            cfg[flag] = kind in selected

    logger.debug("loaded extractor config: %s", cfg)
    return cfg


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_extractor(config: dict[str, Any]) -> Extractor | _NoopExtractor:
    """Create a fully configured extractor from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return _NoopExtractor()

    return Extractor(ExtractorConfig(
        hashtags=cfg["hashtags"],
        mentions=cfg["mentions"],
        reply=cfg["reply"],
        ignore=set(cfg["ignore"]),
    ))
