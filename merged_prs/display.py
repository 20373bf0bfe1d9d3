"""Rich terminal output for fetched pull requests."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from .models import PullRequest, State

console = Console(highlight=False, soft_wrap=True)

DIVIDER = "---------"


def escape_field(value: str) -> str:
    """Escape newlines and other control characters so each field stays on one line."""
    return "".join(ch if ch.isprintable() else ch.encode("unicode_escape").decode() for ch in value)


def state_color(state: State) -> str:
    return "green" if state is State.CLOSED else "yellow"


def format_pull_request(pr: PullRequest) -> Text:
    text = Text()
    text.append("Title:     ", style="bold")
    text.append(escape_field(pr.title), style="bold cyan")
    text.append("\nBody:      ", style="bold")
    text.append(escape_field(pr.body))
    text.append("\nHTML URL:  ", style="bold")
    text.append(escape_field(pr.html_url))
    text.append("\nState:     ", style="bold")
    text.append(pr.state.label, style=state_color(pr.state))
    text.append("\nClosed at: ", style="bold")
    text.append(escape_field(pr.closed_at))
    text.append(f"\n{DIVIDER}")
    return text


def print_pull_requests(pull_requests: Iterable[PullRequest], out: Optional[Console] = None) -> None:
    out = out or console
    printed = 0
    for pr in pull_requests:
        out.print(format_pull_request(pr), soft_wrap=True)
        printed += 1
    if not printed:
        out.print("No merged pull requests found.", style="yellow")


def print_error(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(Text(f"Error: {message}", style="bold red"), soft_wrap=True)
