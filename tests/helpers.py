"""Builders for GitHub search items used across the test suite."""

from __future__ import annotations

from merged_prs.models import IssueItem

PR_MARKER = {"url": "https://api.github.com/repos/softprops/hubcaps/pulls/245"}


def build_issue_payload(
    html_url: str = "https://github.com/softprops/hubcaps/pull/245",
    state: str = "closed",
    is_pull_request: bool = True,
    **overrides,
) -> dict:
    payload = {
        "url": html_url.replace("https://github.com/", "https://api.github.com/repos/"),
        "html_url": html_url,
        "title": "",
        "body": None,
        "state": state,
        "closed_at": None,
        "updated_at": "2019-01-05T10:00:00Z",
    }
    if is_pull_request:
        payload["pull_request"] = dict(PR_MARKER)
    payload.update(overrides)
    return payload


def build_issue_item(
    html_url: str = "https://github.com/softprops/hubcaps/pull/245",
    state: str = "closed",
    is_pull_request: bool = True,
    **overrides,
) -> IssueItem:
    return IssueItem.from_api(build_issue_payload(html_url, state, is_pull_request, **overrides))
