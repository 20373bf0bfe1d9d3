"""Filtering and normalization of issue search results."""

from __future__ import annotations

import logging

from .models import IssueItem, IssueParseError, PullRequest, State, UnknownStateError

logger = logging.getLogger(__name__)

__all__ = [
    "IssueParseError",
    "ProjectNameError",
    "UnknownStateError",
    "is_merged_pull_request",
    "parse_issue_item",
    "project_name_from_url",
]

# https: / "" / host / owner / project / ...
PROJECT_SEGMENT_INDEX = 4


class ProjectNameError(IssueParseError):
    def __init__(self, url: str):
        super().__init__(f"Unable to find 'project' part of the URL: {url!r}")
        self.url = url


def is_merged_pull_request(issue: IssueItem, username: str) -> bool:
    """True for a non-open pull request whose URL does not mention ``username``.

    The username check is a plain substring match on the HTML URL, so it also
    drops any URL that merely happens to contain the login.
    """
    if username in issue.html_url:
        logger.debug("Skipping %s: URL contains %r", issue.html_url, username)
        return False
    if not issue.is_pull_request:
        logger.debug("Skipping %s: not a pull request", issue.html_url)
        return False
    if issue.state == State.OPEN.value:
        logger.debug("Skipping %s: still open", issue.html_url)
        return False
    return True


def project_name_from_url(url: str) -> str:
    parts = url.split("/")
    if len(parts) <= PROJECT_SEGMENT_INDEX:
        raise ProjectNameError(url)
    return parts[PROJECT_SEGMENT_INDEX]


def parse_issue_item(issue: IssueItem) -> PullRequest:
    state = State.from_api(issue.state)
    project = project_name_from_url(issue.html_url)

    return PullRequest(
        title=issue.title,
        body=issue.body or "",
        project=project,
        html_url=issue.html_url,
        state=state,
        closed_at=issue.closed_at or "",
    )
