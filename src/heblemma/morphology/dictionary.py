"""Locate and load the Hebrew morphology dictionary.

The dictionary is a stanza resources directory holding ``resources.json``
and the Hebrew ``he/`` model folder. It is loaded once at startup and handed
to the analyzer as an immutable :class:`MorphDictionary`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from heblemma.errors import DictionaryLoadError
from heblemma.morphology.base import MorphDictionary

logger = logging.getLogger(__name__)

LANGUAGE = "he"
PROCESSORS = "tokenize,mwt,pos,lemma"
RESOURCES_FILE = "resources.json"
SYSTEM_DICTIONARY_DIR = Path("/var/lib/stanza_resources")


def possible_paths(*base_paths: str | Path) -> list[Path]:
    """List directories searched for a dictionary, most specific first."""
    paths: list[Path] = [Path(base).expanduser().resolve() for base in base_paths if base]
    paths.append(_stanza_default_dir())
    paths.append(SYSTEM_DICTIONARY_DIR)

    unique: list[Path] = []
    for path in paths:
        if path not in unique:
            unique.append(path)
    return unique


def load_from_path(path: str | Path, *, use_gpu: bool = False) -> MorphDictionary:
    """Load the dictionary from an explicit directory."""
    directory = Path(path).expanduser()
    if not directory.exists():
        raise DictionaryLoadError(f"Dictionary directory does not exist: {directory}")
    if not directory.is_dir():
        raise DictionaryLoadError(
            f"Expected a folder, cannot load dictionary from file: {directory}"
        )
    _check_resources(directory)
    return _build_pipeline(directory, use_gpu=use_gpu)


def load_from_default_location(
    base_paths: Sequence[str | Path] = (),
    *,
    use_gpu: bool = False,
) -> MorphDictionary:
    """Load the dictionary from the first existing default directory."""
    searched = possible_paths(*base_paths)
    for candidate in searched:
        if candidate.is_dir():
            return load_from_path(candidate, use_gpu=use_gpu)

    joined = ", ".join(str(path) for path in searched)
    raise DictionaryLoadError(f"Could not find a dictionary directory; searched: {joined}")


def load_dictionary(path: str | Path | None = None, *, use_gpu: bool = False) -> MorphDictionary:
    """Load from ``path`` when given, otherwise from the default location."""
    if path:
        return load_from_path(path, use_gpu=use_gpu)
    return load_from_default_location(use_gpu=use_gpu)


def download_dictionary(path: str | Path | None = None) -> Path:
    """Fetch the Hebrew models into ``path`` (or stanza's default directory)."""
    stanza = _import_stanza()
    directory = Path(path).expanduser() if path else _stanza_default_dir()
    directory.mkdir(parents=True, exist_ok=True)
    logger.info("Downloading Hebrew models into %s", directory)
    try:
        stanza.download(LANGUAGE, model_dir=str(directory), processors=PROCESSORS)
    except Exception as exc:
        raise DictionaryLoadError(f"Failed to download dictionary into {directory}: {exc}") from exc
    return directory


def _check_resources(directory: Path) -> None:
    resources = directory / RESOURCES_FILE
    if not resources.is_file():
        raise DictionaryLoadError(f"Could not find {RESOURCES_FILE} in {directory}")
    models = directory / LANGUAGE
    if not models.is_dir():
        raise DictionaryLoadError(f"Could not find Hebrew models folder {models}")


def _build_pipeline(directory: Path, *, use_gpu: bool) -> MorphDictionary:
    stanza = _import_stanza()
    logger.info("Loading Hebrew dictionary from %s", directory)
    try:
        pipeline = stanza.Pipeline(
            LANGUAGE,
            dir=str(directory),
            processors=PROCESSORS,
            tokenize_no_ssplit=True,
            download_method=None,
            use_gpu=use_gpu,
            logging_level="WARN",
        )
    except Exception as exc:
        raise DictionaryLoadError(f"Failed to load dictionary from {directory}: {exc}") from exc

    logger.info("Dictionary loaded successfully")
    return MorphDictionary(source=str(directory), language=LANGUAGE, handle=pipeline)


def _stanza_default_dir() -> Path:
    configured = os.getenv("STANZA_RESOURCES_DIR")
    if configured:
        return Path(configured).expanduser().resolve()
    return Path.home() / "stanza_resources"


def _import_stanza():
    try:
        import stanza
    except ModuleNotFoundError as exc:
        raise DictionaryLoadError(
            "The stanza package is required to load the dictionary. "
            "Install project dependencies first."
        ) from exc
    return stanza
