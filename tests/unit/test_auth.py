"""
Unit tests -- auth headers and HTTP client configuration.
"""
import pytest

from weaviate_gql.core.config import Settings
from weaviate_gql.transport.auth import ApiKey, AuthSecret, build_auth_headers
from weaviate_gql.transport.connection import auth_from_settings, create_http_client


# ── Header values ────────────────────────────────────────

def test_api_key_header():
    assert AuthSecret.api_key("secret").header_value() == "ApiKey secret"


def test_bearer_header():
    assert AuthSecret.bearer_token("tok").header_value() == "Bearer tok"


def test_repr_hides_secret():
    assert "hunter2" not in repr(AuthSecret.api_key("hunter2"))
    assert "abc" not in repr(ApiKey("X-OpenAI-Api-Key", "abc"))


def test_build_auth_headers():
    headers = build_auth_headers(
        AuthSecret.bearer_token("tok"),
        [ApiKey("X-OpenAI-Api-Key", "sk-1"), ApiKey("X-Cohere-Api-Key", "co-2")],
    )
    assert headers == {
        "Authorization": "Bearer tok",
        "X-OpenAI-Api-Key": "sk-1",
        "X-Cohere-Api-Key": "co-2",
    }


def test_no_auth_no_headers():
    assert build_auth_headers() == {}


def test_invalid_header_name():
    with pytest.raises(ValueError, match="Invalid header name"):
        build_auth_headers(api_keys=[ApiKey("Bad Header", "x")])


def test_invalid_header_value():
    with pytest.raises(ValueError, match="Invalid header value"):
        AuthSecret.api_key("line\nbreak").header_value()


# ── Settings → client ────────────────────────────────────

def test_api_key_wins_over_bearer():
    settings = Settings(weaviate_api_key="k", weaviate_bearer_token="t")
    assert auth_from_settings(settings) == AuthSecret.api_key("k")


def test_bearer_from_settings():
    settings = Settings(weaviate_api_key="", weaviate_bearer_token="t")
    assert auth_from_settings(settings) == AuthSecret.bearer_token("t")


def test_no_auth_from_settings():
    settings = Settings(weaviate_api_key="", weaviate_bearer_token="")
    assert auth_from_settings(settings) is None


def test_create_http_client_headers_and_base_url():
    settings = Settings(weaviate_url="http://weaviate:8080", weaviate_api_key="", weaviate_bearer_token="")
    client = create_http_client(
        auth=AuthSecret.api_key("k"),
        api_keys=[ApiKey("X-OpenAI-Api-Key", "sk")],
        timeout=5.0,
        settings=settings,
    )
    try:
        assert str(client.base_url).rstrip("/") == "http://weaviate:8080"
        assert client.headers["Authorization"] == "ApiKey k"
        assert client.headers["X-OpenAI-Api-Key"] == "sk"
        assert client.timeout.read == 5.0
    finally:
        client.close()
