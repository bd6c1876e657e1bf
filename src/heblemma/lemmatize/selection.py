"""Deterministic selection of one lemma per word.

Analyzers frequently return several plausible analyses for a Hebrew word.
The canonical selector ranks them by analyzer score, then by part of speech
(taking the word's ending into account), then by how close the lemma is to
the surface form. Lemmas of a single character are treated as noise.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from heblemma.lemmatize.normalize import normalize
from heblemma.morphology.base import Analyzer, Candidate, PartOfSpeech

LemmaStrategy = Literal["canonical", "first"]

_YOD = "י"
_YOD_TAV = "ית"
_HEH = "ה"

_GENERAL_PRIORITY: dict[PartOfSpeech, int] = {
    PartOfSpeech.ADJECTIVE: 3,
    PartOfSpeech.NOUN: 2,
    PartOfSpeech.VERB: 1,
}
# Feminine nouns commonly end in heh, so nouns outrank adjectives there.
_HEH_PRIORITY: dict[PartOfSpeech, int] = {
    PartOfSpeech.ADJECTIVE: 2,
    PartOfSpeech.NOUN: 3,
    PartOfSpeech.VERB: 1,
}
_YOD_PRIORITY: dict[PartOfSpeech, int] = {
    PartOfSpeech.ADJECTIVE: 3,
    PartOfSpeech.NOUN: 2,
    PartOfSpeech.VERB: 1,
}


def general_priority(tag: PartOfSpeech | None) -> int:
    """Tie-break weight of a tag regardless of the word."""
    if tag is None:
        return 0
    return _GENERAL_PRIORITY.get(tag, 0)


def contextual_priority(normalized: str, tag: PartOfSpeech | None) -> int:
    """Tie-break weight of a tag given the surface ending of the word."""
    if tag is None:
        return 0
    if normalized.endswith(_YOD) or normalized.endswith(_YOD_TAV):
        return _YOD_PRIORITY.get(tag, 0)
    if normalized.endswith(_HEH):
        return _HEH_PRIORITY.get(tag, 0)
    return _GENERAL_PRIORITY.get(tag, 0)


def _usable_lemma(candidate: Candidate) -> str | None:
    lemma = candidate.lemma
    if lemma is None or len(lemma) <= 1:
        return None
    return lemma


def _score_key(score: float) -> tuple[bool, float]:
    # NaN ranks above every number, infinity included.
    if math.isnan(score):
        return (False, 0.0)
    return (True, -score)


def _rank_key(
    normalized: str, candidate: Candidate
) -> tuple[tuple[bool, float], int, int, bool, int, str]:
    lemma = candidate.lemma or ""
    return (
        _score_key(candidate.score),
        -contextual_priority(normalized, candidate.part_of_speech),
        -general_priority(candidate.part_of_speech),
        lemma != normalized,
        len(lemma),
        lemma,
    )


def rank_candidates(normalized: str, candidates: Sequence[Candidate] | None) -> list[Candidate]:
    """Return usable candidates (lemma longer than one character), best first."""
    usable = [candidate for candidate in candidates or () if _usable_lemma(candidate)]
    return sorted(usable, key=lambda candidate: _rank_key(normalized, candidate))


def best_candidate(normalized: str, candidates: Sequence[Candidate] | None) -> Candidate | None:
    """Pick the top-ranked usable candidate, if any."""
    ranked = rank_candidates(normalized, candidates)
    return ranked[0] if ranked else None


def choose_lemma(normalized: str, candidates: Sequence[Candidate] | None) -> str | None:
    """Resolve the lemma for an already-normalized word from its candidates."""
    if not normalized:
        return None
    best = best_candidate(normalized, candidates)
    lemma = best.lemma if best is not None and best.lemma is not None else normalized
    if len(lemma) <= 1:
        return None
    return lemma


def select_lemma(raw_word: str, analyzer: Analyzer) -> str | None:
    """Canonical lemma for a raw token, or ``None`` when it should be dropped."""
    normalized = normalize(raw_word)
    if not normalized:
        return None
    return choose_lemma(normalized, analyzer.analyze(normalized))


def choose_first_lemma(raw_word: str, candidates: Sequence[Candidate] | None) -> str:
    """First candidate lemma longer than one character, else the raw word."""
    for candidate in candidates or ():
        lemma = _usable_lemma(candidate)
        if lemma is not None:
            return lemma
    return raw_word


def select_first_lemma(raw_word: str, analyzer: Analyzer) -> str:
    """Analyzer-order lemma for a raw token, without ranking or normalization."""
    return choose_first_lemma(raw_word, analyzer.analyze(raw_word))
