from __future__ import annotations

import pytest

from heblemma.morphology import Candidate, MorphDictionary, PartOfSpeech

ENV_VARS = (
    "HEBLEMMA_ENV",
    "HEBLEMMA_LOG_LEVEL",
    "HEBLEMMA_API_HOST",
    "HEBLEMMA_API_PORT",
    "HEBLEMMA_DICTIONARY_PATH",
    "HEBLEMMA_USE_GPU",
)


class FakeAnalyzer:
    """In-memory analyzer returning fixed candidates per word."""

    name = "fake"

    def __init__(self, table: dict[str, list[Candidate]] | None = None) -> None:
        self.table = table or {}
        self.dictionary = MorphDictionary(source="memory", language="he", handle=None)
        self.calls: list[str] = []

    def analyze(self, word: str) -> list[Candidate]:
        self.calls.append(word)
        return list(self.table.get(word, []))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def empty_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()


@pytest.fixture
def hebrew_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer(
        {
            "הילדים": [
                Candidate("ילד", 0.8, PartOfSpeech.NOUN, 1),
                Candidate("ילדים", 0.8, PartOfSpeech.NOUN, 1),
            ],
            "הלכו": [Candidate("הלך", 1.0, PartOfSpeech.VERB, 0)],
            "לבית": [
                Candidate("ל", 1.0, PartOfSpeech.ADPOSITION, 0),
                Candidate("בית", 1.0, PartOfSpeech.NOUN, 1),
            ],
            "ו": [Candidate("ו", 1.0, PartOfSpeech.CONJUNCTION, 0)],
            "שמחה": [
                Candidate("שמח", 0.9, PartOfSpeech.ADJECTIVE, 0),
                Candidate("שמחה", 0.9, PartOfSpeech.NOUN, 0),
            ],
            "ספר": [Candidate(None, 0.5, None, 0)],
        }
    )


@pytest.fixture
def make_analyzer():
    return FakeAnalyzer
