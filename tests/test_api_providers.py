"""Tests for Provider catalog API endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from llmbridge.exceptions import TransportError
from llmbridge.server.api.providers import get_server_env
from llmbridge.server.main import app
from llmbridge.server.providers import get_provider
from llmbridge.server.providers.base import ModelDescriptor

LIVE_MODEL = ModelDescriptor(
    name="o3-mini",
    label="o3-mini (32k context)",
    provider="NVIDIA",
    max_token_allowed=32000,
    max_completion_tokens=100000,
)


@pytest.fixture
def client() -> TestClient:
    """Create test client with an empty server environment."""
    app.dependency_overrides[get_server_env] = lambda: {}
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_providers(client):
    response = client.get("/api/v1/providers")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["items"][0] == {
        "name": "NVIDIA",
        "get_api_key_link": "https://build.nvidia.com/",
        "api_token_key": "NVIDIA_API_KEY",
        "base_url_key": "NVIDIA_BASE_URL",
        "base_url": "https://integrate.api.nvidia.com/v1",
    }


def test_static_models_only(client):
    response = client.get("/api/v1/providers/nvidia/models", params={"dynamic": "false"})

    assert response.status_code == 200
    data = response.json()
    assert data["provider"] == "NVIDIA"
    assert data["error"] is None
    assert len(data["models"]) == 7
    assert data["models"][0] == {
        "name": "gpt-4o",
        "label": "GPT-4o",
        "provider": "NVIDIA",
        "max_token_allowed": 128000,
        "max_completion_tokens": 4096,
    }


def test_missing_key_falls_back_to_static(client):
    response = client.get("/api/v1/providers/NVIDIA/models")

    assert response.status_code == 200
    data = response.json()
    assert len(data["models"]) == 7
    assert data["error"] == "Missing API Key configuration for NVIDIA API"


def test_request_headers_used_for_live_listing(client):
    provider = get_provider("NVIDIA")
    with patch.object(
        provider, "get_dynamic_models", new_callable=AsyncMock
    ) as mock_dynamic:
        mock_dynamic.return_value = [LIVE_MODEL]

        response = client.get(
            "/api/v1/providers/NVIDIA/models",
            headers={
                "X-Provider-Api-Key": "nvapi-header",
                "X-Provider-Base-Url": "https://nim.internal/v1",
            },
        )

    assert response.status_code == 200
    data = response.json()
    assert len(data["models"]) == 8
    assert data["models"][-1]["name"] == "o3-mini"

    api_keys, settings, server_env = mock_dynamic.call_args.args
    assert api_keys == {"NVIDIA": "nvapi-header"}
    assert settings.base_url == "https://nim.internal/v1"
    assert server_env == {}


def test_server_env_dependency(client):
    app.dependency_overrides[get_server_env] = lambda: {"NVIDIA_API_KEY": "nvapi-server"}
    provider = get_provider("NVIDIA")
    with patch.object(
        provider, "get_dynamic_models", new_callable=AsyncMock
    ) as mock_dynamic:
        mock_dynamic.return_value = []
        response = client.get("/api/v1/providers/NVIDIA/models")

    assert response.status_code == 200
    assert mock_dynamic.call_args.args[2] == {"NVIDIA_API_KEY": "nvapi-server"}


def test_transport_error_reported(client):
    provider = get_provider("NVIDIA")
    with patch.object(
        provider, "get_dynamic_models", new_callable=AsyncMock
    ) as mock_dynamic:
        mock_dynamic.side_effect = TransportError(
            "HTTP 401 from NVIDIA API", provider="NVIDIA", status_code=401
        )
        response = client.get(
            "/api/v1/providers/NVIDIA/models", headers={"X-Provider-Api-Key": "bad"}
        )

    assert response.status_code == 200
    assert response.json()["error"] == "HTTP 401 from NVIDIA API"
    assert len(response.json()["models"]) == 7


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_invalid_base_url_header_falls_back_to_static(client):
    response = client.get(
        "/api/v1/providers/NVIDIA/models",
        headers={"X-Provider-Api-Key": "nvapi-header", "X-Provider-Base-Url": "http://[::1"},
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["models"]) == 7
    assert data["error"] == "Invalid request to NVIDIA API: InvalidURL"


def test_non_ascii_key_header_falls_back_to_static(client):
    response = client.get(
        "/api/v1/providers/NVIDIA/models",
        headers={"X-Provider-Api-Key": "k\u00e9y".encode("latin-1")},
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["models"]) == 7
    assert data["error"] == "Invalid request to NVIDIA API: UnicodeEncodeError"


def test_unknown_provider(client):
    response = client.get("/api/v1/providers/nope/models")

    assert response.status_code == 404
    assert "Unknown provider" in response.json()["detail"]
