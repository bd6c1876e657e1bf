"""Morphological analyzers and dictionary loading."""

from heblemma.morphology.base import Analyzer, Candidate, MorphDictionary, PartOfSpeech
from heblemma.morphology.dictionary import (
    load_dictionary,
    load_from_default_location,
    load_from_path,
)
from heblemma.morphology.registry import load_analyzer, resolve_analyzer

__all__ = [
    "Analyzer",
    "Candidate",
    "MorphDictionary",
    "PartOfSpeech",
    "load_analyzer",
    "load_dictionary",
    "load_from_default_location",
    "load_from_path",
    "resolve_analyzer",
]
