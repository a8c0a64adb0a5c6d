"""
Application configuration using Pydantic Settings
"""

from dataclasses import dataclass
from typing import List, Literal, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Settings
    api_title: str = "Social Insights API"
    api_description: str = (
        "Keyword extraction with Twitter, Facebook and Google News search"
    )
    api_version: str = "1.0.0"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS Settings
    cors_origins: Union[List[str], str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list = [
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
    ]

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string to list.

        Args:
            v: Can be either a list of origins or a comma-separated string.
               If "*" is provided, allows all origins.

        Returns:
            List[str]: List of allowed origins

        Example:
            >>> parse_cors_origins("http://localhost:3000,http://localhost:8080")
            ['http://localhost:3000', 'http://localhost:8080']
            >>> parse_cors_origins("*")
            ['*']
        """
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: str = "data/app.log"

    # Provider Credentials
    twitter_bearer_token: str = ""
    facebook_api_key: str = ""
    google_api_key: str = ""
    google_search_engine_id: str = ""

    # Provider Endpoints
    twitter_search_url: str = "https://api.twitter.com/2/tweets/search/recent"
    facebook_graph_url: str = "https://graph.facebook.com"
    facebook_graph_version: str = "v19.0"
    google_search_url: str = "https://www.googleapis.com/customsearch/v1"

    # Provider Behaviour
    # "placeholder" never calls Facebook; "graph" queries the Graph page search
    facebook_search_mode: Literal["placeholder", "graph"] = "placeholder"
    provider_max_results: int = 10
    provider_timeout: float = 10.0  # seconds

    # Aggregator Settings
    # When set, the aggregator reaches providers through this service's own
    # HTTP endpoints (e.g. "http://localhost:8000/api/v1"); otherwise in-process.
    search_api_base_url: str = ""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def facebook_pages_search_url(self) -> str:
        """Graph API page search endpoint for the configured version."""
        base = self.facebook_graph_url.rstrip("/")
        return f"{base}/{self.facebook_graph_version}/pages/search"


@dataclass(frozen=True, slots=True)
class ProviderCredentials:
    """Credentials handed to provider adapters at construction.

    Adapters never read the environment themselves; tests build this directly.
    """

    twitter_bearer_token: str = ""
    facebook_api_key: str = ""
    google_api_key: str = ""
    google_search_engine_id: str = ""

    @classmethod
    def from_settings(cls, cfg: "Settings") -> "ProviderCredentials":
        return cls(
            twitter_bearer_token=cfg.twitter_bearer_token,
            facebook_api_key=cfg.facebook_api_key,
            google_api_key=cfg.google_api_key,
            google_search_engine_id=cfg.google_search_engine_id,
        )


# Global settings instance
settings = Settings()
