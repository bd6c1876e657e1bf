"""Analyzer registry."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Literal

from heblemma.morphology.base import Analyzer, MorphDictionary
from heblemma.morphology.dictionary import load_dictionary
from heblemma.morphology.stanza_analyzer import StanzaAnalyzer

AnalyzerName = Literal["stanza"]

_ANALYZERS: dict[AnalyzerName, Callable[[MorphDictionary], Analyzer]] = {
    "stanza": StanzaAnalyzer,
}


def resolve_analyzer(name: AnalyzerName, dictionary: MorphDictionary) -> Analyzer:
    """Bind a loaded dictionary to the named analyzer implementation."""
    return _ANALYZERS[name](dictionary)


def load_analyzer(
    dictionary_path: str | Path | None = None,
    *,
    name: AnalyzerName = "stanza",
    use_gpu: bool = False,
) -> Analyzer:
    """Load the dictionary once and return an analyzer bound to it."""
    dictionary = load_dictionary(dictionary_path, use_gpu=use_gpu)
    return resolve_analyzer(name, dictionary)
