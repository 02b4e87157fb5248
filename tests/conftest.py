"""Pytest configuration and fixtures for growthos tests."""

import base64
import json
from typing import Callable, Dict, Optional

import httpx
import pytest


@pytest.fixture(autouse=True)
def no_github_token(monkeypatch):
    """Keep the developer's token out of request headers."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def manifest_response():
    """Encode a manifest the way the GitHub contents API returns it."""
    def _encode(manifest: dict) -> dict:
        encoded = base64.b64encode(json.dumps(manifest).encode("utf-8")).decode("ascii")
        # contents API wraps at 60 columns
        wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60))
        return {"name": "package.json", "encoding": "base64", "content": wrapped}
    return _encode


@pytest.fixture
def github_client(manifest_response) -> Callable[..., httpx.Client]:
    """Build an httpx.Client backed by a fake GitHub API.

    ``hits`` maps search queries to ``total_count``; a value of ``None``
    makes that search fail with HTTP 403. Requests are recorded on
    ``client.requests``.
    """
    def _make(
        manifest: Optional[dict] = None,
        hits: Optional[Dict[str, Optional[int]]] = None,
        manifest_status: int = 200,
    ) -> httpx.Client:
        hits = hits or {}
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path.endswith("/contents/package.json"):
                if manifest_status != 200:
                    return httpx.Response(manifest_status, json={"message": "Not Found"})
                return httpx.Response(200, json=manifest_response(manifest or {}))
            if request.url.path == "/search/code":
                query = request.url.params["q"].rsplit(" repo:", 1)[0]
                count = hits.get(query, 0)
                if count is None:
                    return httpx.Response(403, json={"message": "rate limited"})
                return httpx.Response(200, json={"total_count": count, "items": []})
            return httpx.Response(500)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.requests = seen
        return client
    return _make
