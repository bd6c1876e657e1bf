"""Analyzer backed by the stanza Hebrew pipeline."""

from __future__ import annotations

import threading

from heblemma.morphology.base import Candidate, MorphDictionary, PartOfSpeech

_UPOS_TAGS: dict[str, PartOfSpeech] = {
    "ADJ": PartOfSpeech.ADJECTIVE,
    "NOUN": PartOfSpeech.NOUN,
    "VERB": PartOfSpeech.VERB,
    "AUX": PartOfSpeech.VERB,
    "PROPN": PartOfSpeech.PROPER_NOUN,
    "ADV": PartOfSpeech.ADVERB,
    "PRON": PartOfSpeech.PRONOUN,
    "ADP": PartOfSpeech.ADPOSITION,
    "DET": PartOfSpeech.DETERMINER,
    "CCONJ": PartOfSpeech.CONJUNCTION,
    "SCONJ": PartOfSpeech.CONJUNCTION,
    "NUM": PartOfSpeech.NUMERAL,
    "PART": PartOfSpeech.PARTICLE,
    "PUNCT": PartOfSpeech.PUNCTUATION,
}
_SCORE = 1.0


class StanzaAnalyzer:
    """Expose each syntactic word of a token as a lemma candidate.

    Hebrew prefixes (ו, ה, ב, ...) are split off by the multi-word-token
    processor; every candidate records how many surface characters precede it.
    """

    name = "stanza"

    def __init__(self, dictionary: MorphDictionary) -> None:
        self.dictionary = dictionary
        self._pipeline = dictionary.handle
        self._lock = threading.Lock()

    def analyze(self, word: str) -> list[Candidate]:
        if not word or word.isspace():
            return []

        with self._lock:
            document = self._pipeline(word)

        candidates: list[Candidate] = []
        for sentence in document.sentences:
            for token in sentence.tokens:
                offset = 0
                for part in token.words:
                    candidates.append(
                        Candidate(
                            lemma=part.lemma,
                            score=_SCORE,
                            part_of_speech=to_part_of_speech(part.upos),
                            prefix_length=offset,
                        )
                    )
                    offset += len(part.text or "")
        return candidates


def to_part_of_speech(upos: str | None) -> PartOfSpeech | None:
    """Map a Universal Dependencies tag onto the closed tag set."""
    if upos is None:
        return None
    return _UPOS_TAGS.get(upos, PartOfSpeech.OTHER)
