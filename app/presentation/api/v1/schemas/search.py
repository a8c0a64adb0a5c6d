from typing import List, Optional

from pydantic import BaseModel, model_validator

from app.core.pyd_schemas import InsightsResult, SearchResponse

__all__ = [
    "KeywordsRequest",
    "KeywordsResponse",
    "InsightsRequest",
    "InsightsResult",
    "SearchResponse",
]


class KeywordsRequest(BaseModel):
    text: str


class KeywordsResponse(BaseModel):
    keywords: List[str]


class InsightsRequest(BaseModel):
    """Either free text to extract from, or an edited keyword set."""

    text: Optional[str] = None
    keywords: Optional[List[str]] = None

    @model_validator(mode="after")
    def require_text_or_keywords(self):
        if self.text is None and self.keywords is None:
            raise ValueError("Either 'text' or 'keywords' is required")
        return self
