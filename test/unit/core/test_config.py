import pytest

from app.core.config import ProviderCredentials, Settings
from app.infrastructure.adapters import (
    FacebookGraphSearch,
    FacebookPlaceholderSearch,
    GoogleNewsSearch,
    HttpSearchGateway,
    LocalSearchGateway,
    TwitterRecentSearch,
)
from app.infrastructure.adapters.bundles.search import (
    get_search_adapter_bundle,
    get_search_gateway,
)
from app.core.pyd_schemas import SearchSource


def test_settings_read_credentials_from_env(monkeypatch):
    monkeypatch.setenv("TWITTER_BEARER_TOKEN", "tw")
    monkeypatch.setenv("GOOGLE_API_KEY", "gk")
    monkeypatch.setenv("GOOGLE_SEARCH_ENGINE_ID", "cx")
    cfg = Settings(_env_file=None)

    creds = ProviderCredentials.from_settings(cfg)

    assert creds.twitter_bearer_token == "tw"
    assert creds.google_api_key == "gk"
    assert creds.google_search_engine_id == "cx"
    assert creds.facebook_api_key == ""


def test_cors_origins_parsed_from_string():
    assert Settings(_env_file=None, cors_origins="*").cors_origins == ["*"]
    cfg = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
    assert cfg.cors_origins == ["http://a.test", "http://b.test"]


def test_facebook_pages_search_url():
    cfg = Settings(_env_file=None, facebook_graph_version="v20.0")
    assert cfg.facebook_pages_search_url == "https://graph.facebook.com/v20.0/pages/search"


def test_bundle_uses_placeholder_facebook_by_default():
    bundle = get_search_adapter_bundle(Settings(_env_file=None))

    assert isinstance(bundle.twitter, TwitterRecentSearch)
    assert isinstance(bundle.facebook, FacebookPlaceholderSearch)
    assert isinstance(bundle.google_news, GoogleNewsSearch)


def test_bundle_graph_mode_selects_graph_adapter():
    cfg = Settings(_env_file=None, facebook_search_mode="graph")
    bundle = get_search_adapter_bundle(cfg)

    assert isinstance(bundle.facebook, FacebookGraphSearch)
    assert bundle.facebook.base_url.endswith("/pages/search")


def test_bundle_injects_credentials_without_env():
    creds = ProviderCredentials(twitter_bearer_token="injected")
    bundle = get_search_adapter_bundle(Settings(_env_file=None), credentials=creds)

    assert bundle.twitter.is_configured()
    assert not bundle.facebook.is_configured()
    assert bundle.google_news.missing_credentials() == [
        "google_api_key",
        "google_search_engine_id",
    ]


def test_gateway_selection():
    local = get_search_gateway(Settings(_env_file=None))
    assert isinstance(local, LocalSearchGateway)
    assert isinstance(local.provider(SearchSource.facebook), FacebookPlaceholderSearch)

    remote = get_search_gateway(
        Settings(_env_file=None, search_api_base_url="http://localhost:8000/api/v1")
    )
    assert isinstance(remote, HttpSearchGateway)
    assert remote.url_for(SearchSource.google_news) == (
        "http://localhost:8000/api/v1/search/google-news"
    )


def test_invalid_facebook_mode_rejected():
    with pytest.raises(ValueError):
        Settings(_env_file=None, facebook_search_mode="scrape")


def test_keyword_limits_are_not_settings(monkeypatch):
    monkeypatch.setenv("MAX_KEYWORDS", "8")
    monkeypatch.setenv("MIN_KEYWORD_LENGTH", "2")
    cfg = Settings(_env_file=None)

    assert not hasattr(cfg, "max_keywords")
    assert not hasattr(cfg, "min_keyword_length")
