"""Sentence-level lemmatization."""

from __future__ import annotations

from heblemma.lemmatize.normalize import split_tokens
from heblemma.lemmatize.selection import LemmaStrategy, select_first_lemma, select_lemma
from heblemma.models import CandidateView
from heblemma.morphology.base import Analyzer, Candidate


def canonicalize(
    sentence: str,
    analyzer: Analyzer,
    strategy: LemmaStrategy = "canonical",
) -> list[str]:
    """Lemmatize each whitespace-delimited token, dropping tokens with no lemma."""
    lemmas: list[str] = []
    for token in split_tokens(sentence):
        if strategy == "first":
            lemma: str | None = select_first_lemma(token, analyzer)
        else:
            lemma = select_lemma(token, analyzer)
        if lemma is not None:
            lemmas.append(lemma)
    return lemmas


def canonicalize_all(
    sentences: list[str],
    analyzer: Analyzer,
    strategy: LemmaStrategy = "canonical",
) -> list[list[str]]:
    """Lemmatize a batch of sentences, preserving their order."""
    return [canonicalize(sentence, analyzer, strategy) for sentence in sentences]


def list_candidates(sentence: str | None, analyzer: Analyzer) -> list[list[CandidateView]]:
    """Expose the analyzer's unfiltered output for every raw token."""
    return [
        [to_candidate_view(candidate) for candidate in analyzer.analyze(token)]
        for token in split_tokens(sentence)
    ]


def to_candidate_view(candidate: Candidate) -> CandidateView:
    """Project an analyzer candidate onto its wire representation."""
    tag = candidate.part_of_speech
    return CandidateView(
        lemma=candidate.lemma,
        score=candidate.score,
        mask=tag.name if tag is not None else None,
        prefix_length=candidate.prefix_length,
    )
