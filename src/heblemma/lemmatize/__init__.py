"""Normalization, lemma selection and sentence lemmatization."""

from heblemma.lemmatize.normalize import normalize, split_tokens
from heblemma.lemmatize.pipeline import canonicalize, canonicalize_all, list_candidates
from heblemma.lemmatize.selection import (
    LemmaStrategy,
    contextual_priority,
    general_priority,
    select_first_lemma,
    select_lemma,
)

__all__ = [
    "LemmaStrategy",
    "canonicalize",
    "canonicalize_all",
    "contextual_priority",
    "general_priority",
    "list_candidates",
    "normalize",
    "select_first_lemma",
    "select_lemma",
    "split_tokens",
]
