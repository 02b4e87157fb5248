"""GitHub API access for repository audits."""

import base64
import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx

from growthos.config import GitHubConfig
from growthos.exceptions import InvalidRepositoryError, RepositoryNotFoundError

logger = logging.getLogger(__name__)

# Code-search queries that indicate event tracking calls
SEARCH_QUERIES: Tuple[str, ...] = (
    "track(",
    "capture(",
    "analytics.",
    "gtag(",
    "_gaq.push",
)


def parse_repo(repo_path: str) -> Tuple[str, str]:
    """Split ``owner/repo`` into its two parts.

    Extra path segments are ignored.

    Raises:
        InvalidRepositoryError: If owner or repo is empty
    """
    parts = repo_path.split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise InvalidRepositoryError(f"Expected owner/repo, got {repo_path!r}")
    return parts[0], parts[1]


class RepositoryFetcher:
    """Reads the manifest and code-search evidence for one repository.

    The fetcher owns an ``httpx.Client`` unless one is passed in; use it as a
    context manager so the client is closed after the audit.
    """

    def __init__(self, config: Optional[GitHubConfig] = None, client: Optional[httpx.Client] = None):
        self.config = config or GitHubConfig()
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=self.config.timeout)
        self.headers = self._build_headers()

    def _build_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/vnd.github+json",
        }
        token = self.config.resolved_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        else:
            logger.warning("No GitHub token configured; public rate limits apply")
        return headers

    def _url(self, path: str) -> str:
        return f"{self.config.api_base.rstrip('/')}{path}"

    def fetch_manifest(self, owner: str, repo: str) -> Dict[str, Any]:
        """Fetch and decode ``package.json`` from the repository root.

        Returns:
            The parsed manifest

        Raises:
            RepositoryNotFoundError: If GitHub answers 404
            httpx.HTTPError: For any other request failure
            KeyError: If the response carries no ``content`` field
            ValueError: If the content is not valid base64-encoded JSON
        """
        url = self._url(f"/repos/{owner}/{repo}/contents/package.json")
        logger.debug("GET %s", url)
        response = self.client.get(url, headers=self.headers)
        if response.status_code == 404:
            raise RepositoryNotFoundError()
        response.raise_for_status()

        # GitHub wraps the base64 payload at 60 columns; b64decode drops the newlines
        raw = base64.b64decode(response.json()["content"])
        return json.loads(raw.decode("utf-8"))

    def search_code(self, owner: str, repo: str, query: str) -> int:
        """Return the code-search hit count for *query* within the repository.

        A body without an integer ``total_count`` counts as zero hits.
        """
        url = self._url("/search/code")
        params = {"q": f"{query} repo:{owner}/{repo}"}
        logger.debug("GET %s q=%s", url, params["q"])
        response = self.client.get(url, params=params, headers=self.headers)
        response.raise_for_status()
        data = response.json()
        count = data.get("total_count") if isinstance(data, dict) else None
        if not isinstance(count, int) or isinstance(count, bool):
            logger.debug("Search for %r returned no usable total_count: %r", query, data)
            return 0
        return count

    def scan_for_events(self, owner: str, repo: str, queries: Sequence[str] = SEARCH_QUERIES) -> List[str]:
        """Run each search query in turn and keep the ones with hits.

        A failing query is skipped; the remaining queries still run.
        """
        found: List[str] = []
        for query in queries:
            try:
                count = self.search_code(owner, repo, query)
            except (httpx.HTTPError, ValueError) as e:
                logger.debug("Search for %r failed, skipping: %s", query, e)
                continue
            if count > 0:
                found.append(query)
        return found

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "RepositoryFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
