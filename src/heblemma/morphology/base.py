"""Morphological analyzer interfaces and shared types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class PartOfSpeech(Enum):
    """Closed part-of-speech tag set reported by analyzers."""

    ADJECTIVE = "ADJECTIVE"
    NOUN = "NOUN"
    VERB = "VERB"
    PROPER_NOUN = "PROPER_NOUN"
    ADVERB = "ADVERB"
    PRONOUN = "PRONOUN"
    ADPOSITION = "ADPOSITION"
    DETERMINER = "DETERMINER"
    CONJUNCTION = "CONJUNCTION"
    NUMERAL = "NUMERAL"
    PARTICLE = "PARTICLE"
    PUNCTUATION = "PUNCTUATION"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Candidate:
    """One proposed analysis of a surface word."""

    lemma: str | None
    score: float
    part_of_speech: PartOfSpeech | None = None
    prefix_length: int = 0


@dataclass(frozen=True)
class MorphDictionary:
    """Loaded dictionary data, shared read-only for the process lifetime."""

    source: str
    language: str
    handle: Any


class Analyzer(Protocol):
    """Protocol implemented by concrete morphological analyzers."""

    name: str

    def analyze(self, word: str) -> list[Candidate]:
        """Return candidate analyses for a single surface word."""
