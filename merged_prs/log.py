"""Logging setup for the command line.

Logs go to stderr through rich so the report on stdout stays clean.
- WARNING by default
- DEBUG with --verbose (page requests and every rejected search item)
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_FORMAT = "%(name)s: %(message)s"


def resolve_level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=resolve_level(verbose),
        format=DEFAULT_FORMAT,
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # urllib3 connection chatter is noise even at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
