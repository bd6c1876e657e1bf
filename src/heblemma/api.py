"""HTTP API for heblemma.

Run with ``heblemma serve`` or ``uvicorn --factory heblemma.api:create_app``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from heblemma import __version__
from heblemma.config import load_config
from heblemma.lemmatize import canonicalize_all, list_candidates
from heblemma.logconfig import setup_logging
from heblemma.models import (
    HealthResponse,
    LemmatizeRawRequest,
    LemmatizeRawResponse,
    LemmatizeRequest,
    LemmatizeResponse,
)
from heblemma.morphology import Analyzer, load_analyzer

logger = logging.getLogger(__name__)


def create_app(analyzer: Analyzer | None = None) -> FastAPI:
    """Build the FastAPI application.

    The dictionary is loaded here, before any request is accepted, unless an
    analyzer is supplied. Load failures propagate as ``DictionaryLoadError``.
    """
    config = load_config()
    setup_logging(config.log_level)
    if analyzer is None:
        analyzer = load_analyzer(config.dictionary_path, use_gpu=config.use_gpu)
    dictionary = getattr(analyzer, "dictionary", None)
    dictionary_source = getattr(dictionary, "source", None)

    app = FastAPI(
        title="heblemma",
        version=__version__,
        description="Hebrew lemmatization service.",
    )

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            version=__version__,
            env=config.env,
            dictionary=dictionary_source,
        )

    @app.post("/lemmatize", response_model=LemmatizeResponse, tags=["lemmatize"])
    def lemmatize(request: LemmatizeRequest) -> LemmatizeResponse:
        results = canonicalize_all(request.sentences, analyzer, request.strategy)
        logger.debug("Lemmatized %d sentences (%s)", len(results), request.strategy)
        return LemmatizeResponse(results=results)

    @app.post("/lemmatize-raw", response_model=LemmatizeRawResponse, tags=["lemmatize"])
    def lemmatize_raw(request: LemmatizeRawRequest) -> LemmatizeRawResponse:
        results = list_candidates(request.sentence or "", analyzer)
        logger.debug("Listed candidates for %d tokens", len(results))
        return LemmatizeRawResponse(results=results)

    return app
