"""Shared data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str
    dictionary: str | None = None


class LemmatizeRequest(BaseModel):
    """Batch of sentences to lemmatize."""

    sentences: list[str]
    strategy: Literal["canonical", "first"] = "canonical"


class LemmatizeResponse(BaseModel):
    """One lemma sequence per input sentence."""

    results: list[list[str]]


class LemmatizeRawRequest(BaseModel):
    """Single sentence whose raw analyzer output is requested."""

    sentence: str | None = None


class CandidateView(BaseModel):
    """Analyzer candidate as exposed on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    lemma: str | None
    score: float
    mask: str | None = None
    prefix_length: int = Field(default=0, ge=0, alias="prefixLength")


class LemmatizeRawResponse(BaseModel):
    """Unfiltered candidates, one list per whitespace-delimited token."""

    results: list[list[CandidateView]]
