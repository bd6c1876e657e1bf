"""Token normalization ahead of analysis."""

from __future__ import annotations

import regex as re

_EDGE_RE = re.compile(r"^[^\p{L}\p{N}]+|[^\p{L}\p{N}]+$")
# ASCII quote and apostrophe, Hebrew geresh and gershayim.
_QUOTES_RE = re.compile("[\"'׳״]")
_SPACES_RE = re.compile(r"\s+")


def strip_edge_punctuation(raw: str) -> str:
    """Trim leading and trailing characters that are neither letters nor digits."""
    return _EDGE_RE.sub("", raw)


def normalize(raw: str) -> str:
    """Clean a raw token; ``ק"ג`` and ``ק״ג`` both become ``קג``.

    An empty result means the token held no letters or digits.
    """
    return _QUOTES_RE.sub("", strip_edge_punctuation(raw))


def split_tokens(sentence: str | None) -> list[str]:
    """Split on runs of whitespace without producing empty tokens."""
    if not sentence:
        return []
    return [token for token in _SPACES_RE.split(sentence) if token]
