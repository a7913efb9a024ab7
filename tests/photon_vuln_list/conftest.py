"""tests/photon_vuln_list/conftest.py

Common fixtures for the entire test suite.
"""

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner


BASE_URL = "https://photon.test/photon_cve_metadata/"


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """
    Points the vuln-list tree at a temporary directory and removes any
    PHOTON_VULN_LIST_* overrides from the caller's environment.
    """
    import os

    for key in list(os.environ):
        if key.upper().startswith("PHOTON_VULN_LIST_"):
            monkeypatch.delenv(key)

    vuln_list_dir = tmp_path / "vuln-list"
    monkeypatch.setenv("PHOTON_VULN_LIST_VULN_LIST_DIR", str(vuln_list_dir))
    monkeypatch.setenv("PHOTON_VULN_LIST_URL", BASE_URL)
    monkeypatch.setenv("PHOTON_VULN_LIST_RETRY_WAIT_SECONDS", "0")
    monkeypatch.setenv("PHOTON_VULN_LIST_PROGRESS", "false")
    yield vuln_list_dir


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a handler function that tests can use to register mock responses.
    """
    responses = {}
    calls_log: list[tuple[str, str]] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json_payload: dict | list | None = None,
        content: bytes | None = None,
    ):
        """Register a mock response for a given URL and method."""
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        method = request.method
        url = str(request.url)
        key = (method, url)
        calls_log.append((method, url))
        if key in responses:
            status, body = responses[key]
            headers = {"Content-Length": str(len(body))}
            return httpx.Response(status, content=body, headers=headers)

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    # Patch httpx.Client to always use our mock transport
    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    # expose call log on the returned function
    add_response.calls = calls_log  # type: ignore[attr-defined]
    return add_response


@pytest.fixture
def photon_feed(mock_httpx_client):
    """Factory fixture registering a manifest and per-branch advisory payloads."""

    def _register(branches: list[str], advisories: dict[str, list[dict]]):
        mock_httpx_client(f"{BASE_URL}photon_versions.json", json_payload={"branches": branches})
        for version, entries in advisories.items():
            mock_httpx_client(f"{BASE_URL}cve_data_photon{version}.json", json_payload=entries)
        return mock_httpx_client.calls

    return _register
