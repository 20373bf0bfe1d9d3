from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IssueParseError(ValueError):
    pass


class UnknownStateError(IssueParseError):
    def __init__(self, state: str):
        super().__init__(f"Unknown state '{state}'")
        self.state = state


class State(str, Enum):
    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_api(cls, text: str) -> "State":
        try:
            return cls(text)
        except ValueError:
            raise UnknownStateError(text) from None

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class IssueItem:
    """One record of the ``/search/issues`` response."""

    url: str
    html_url: str
    title: str
    state: str
    body: str | None = None
    closed_at: str | None = None
    pull_request: dict[str, Any] | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "IssueItem":
        return cls(
            url=payload.get("url", ""),
            html_url=payload.get("html_url", ""),
            title=payload.get("title", ""),
            state=payload.get("state", ""),
            body=payload.get("body"),
            closed_at=payload.get("closed_at"),
            pull_request=payload.get("pull_request"),
        )

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


@dataclass(frozen=True)
class PullRequest:
    title: str
    body: str
    project: str
    html_url: str
    state: State
    closed_at: str
