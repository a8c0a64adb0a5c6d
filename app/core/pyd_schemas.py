from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SearchSource(str, Enum):
    twitter = "Twitter"
    facebook = "Facebook"
    google_news = "Google News"


class SearchResult(BaseModel):
    title: str
    snippet: str
    link: str
    source: SearchSource
    date: Optional[str] = None
    author: Optional[str] = None


class SearchResponse(BaseModel):
    results: List[SearchResult] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    status: Optional[int] = None


class ProviderOutcome(BaseModel):
    """Result of one fan-out task; failures are carried as values."""

    source: SearchSource
    results: List[SearchResult] = Field(default_factory=list)
    error: Optional[str] = None
    status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class InsightsResult(BaseModel):
    keywords: List[str] = Field(default_factory=list)
    query: str = ""
    twitter: List[SearchResult] = Field(default_factory=list)
    facebook: List[SearchResult] = Field(default_factory=list)
    google_news: List[SearchResult] = Field(default_factory=list)
    error: Optional[str] = None
