from __future__ import annotations

import logging
from itertools import islice
from typing import Iterator, Optional

from .config import FetchConfig
from .filters import is_merged_pull_request, parse_issue_item
from .github_api import GitHubClient
from .models import IssueItem, PullRequest

logger = logging.getLogger(__name__)


def build_client(config: FetchConfig) -> GitHubClient:
    return GitHubClient(
        config.token,
        base_url=config.base_url,
        user_agent=config.user_agent,
        timeout_seconds=config.timeout_seconds,
    )


def author_query(username: str) -> str:
    return f"author:{username}"


def iter_merged_pull_requests(
    client: GitHubClient,
    username: str,
    config: FetchConfig,
) -> Iterator[IssueItem]:
    """Stream accepted items in the API's most-recently-updated-first order."""
    for payload in client.search_issues(
        author_query(username),
        sort=config.sort,
        order=config.order,
        per_page=config.per_page,
    ):
        issue = IssueItem.from_api(payload)
        if is_merged_pull_request(issue, username):
            yield issue


def fetch(config: FetchConfig, client: Optional[GitHubClient] = None) -> list[PullRequest]:
    """Fetch up to ``config.limit`` merged pull requests authored by the token owner.

    Pages are only requested until enough items pass the filter. Nothing is
    returned unless every accepted item parses.
    """
    client = client or build_client(config)
    username = client.authenticated_user()
    logger.info("Authenticated as %s", username)

    accepted = list(islice(iter_merged_pull_requests(client, username, config), config.limit))
    pull_requests = [parse_issue_item(issue) for issue in accepted]
    logger.info("Collected %d merged pull requests (limit %d)", len(pull_requests), config.limit)
    return pull_requests
