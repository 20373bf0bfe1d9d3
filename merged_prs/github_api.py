"""GitHub REST API client for the issue search endpoint."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

import requests

from . import __version__

logger = logging.getLogger(__name__)

BASE_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 100
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = f"merged-prs/{__version__}"
# GitHub never serves more than this many results for one search query.
SEARCH_RESULT_CEILING = 1000
RATE_LIMIT_WARNING = 10


class GitHubAPIError(Exception):
    pass


class AuthenticationError(GitHubAPIError):
    pass


class RateLimitExceeded(GitHubAPIError):
    pass


class GitHubClient:
    """Handles the two calls this tool needs: who am I, and what did I author."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        if not token:
            raise AuthenticationError("No GitHub token given.")
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": user_agent,
        })
        self._requests_remaining: Optional[int] = None
        self._reset_time: Optional[int] = None

    def _update_rate_limit(self, response: requests.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        reset = response.headers.get("X-RateLimit-Reset")
        if remaining is not None:
            self._requests_remaining = int(remaining)
        if reset is not None:
            self._reset_time = int(reset)
        if self._requests_remaining is not None and self._requests_remaining < RATE_LIMIT_WARNING:
            logger.warning(
                "Rate limit low (%d remaining, reset at epoch=%s).",
                self._requests_remaining, self._reset_time,
            )

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{endpoint}" if endpoint.startswith("/") else endpoint
        try:
            response = self.session.request(method, url, timeout=self.timeout_seconds, **kwargs)
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"Request to {url} failed: {e}") from e

        self._update_rate_limit(response)

        if response.status_code == 401:
            raise AuthenticationError("GitHub rejected the token (401 Unauthorized).")
        if response.status_code in (403, 429) and response.headers.get("X-RateLimit-Remaining") == "0":
            raise RateLimitExceeded(f"GitHub rate limit exceeded. Reset at epoch={self._reset_time}.")
        if response.status_code >= 400:
            raise GitHubAPIError(f"GitHub API error {response.status_code}: {response.text[:500]}")
        return response

    def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        response = self._request("GET", endpoint, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON from {endpoint}: {response.text[:200]!r}") from e

    def authenticated_user(self) -> str:
        """Return the login of the user the token belongs to."""
        data = self.get("/user")
        login = data.get("login") if isinstance(data, dict) else None
        if not login:
            raise GitHubAPIError("GitHub /user response has no login.")
        return login

    def search_issues(
        self,
        query: str,
        *,
        sort: str = "updated",
        order: str = "desc",
        per_page: int = DEFAULT_PER_PAGE,
    ) -> Iterator[dict[str, Any]]:
        """Lazily yield raw search items, one page request at a time."""
        fetched = 0
        page = 1
        while True:
            params = {"q": query, "sort": sort, "order": order, "per_page": per_page, "page": page}
            logger.debug("Searching issues: %s (page %d)", query, page)
            payload = self.get("/search/issues", params=params)
            if not isinstance(payload, dict):
                raise GitHubAPIError(f"Expected object from /search/issues, got {type(payload).__name__}")
            items = payload.get("items") or []
            total = min(payload.get("total_count", 0), SEARCH_RESULT_CEILING)

            yield from items
            fetched += len(items)

            if len(items) < per_page or fetched >= total:
                return
            page += 1
