"""Configuration for a fetch run."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from .github_api import (
    BASE_URL,
    DEFAULT_PER_PAGE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

DEFAULT_LIMIT = 20
TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
LIMIT_ENV_VAR = "LIMIT"
# ASCII digits with an optional leading "+", nothing else.
LIMIT_PATTERN = re.compile(r"\+?[0-9]+")


class ConfigError(Exception):
    pass


class MissingTokenError(ConfigError):
    pass


def parse_limit(raw: Optional[str]) -> int:
    """Parse a result limit, falling back to DEFAULT_LIMIT on anything but a non-negative int."""
    if raw is None or not LIMIT_PATTERN.fullmatch(raw):
        return DEFAULT_LIMIT
    return int(raw)


@dataclass(frozen=True)
class FetchConfig:
    token: str
    limit: int = DEFAULT_LIMIT
    per_page: int = DEFAULT_PER_PAGE
    sort: str = "updated"
    order: str = "desc"
    base_url: str = BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        token: Optional[str] = None,
        limit: Optional[int] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "FetchConfig":
        env = os.environ if environ is None else environ
        tok = token or next((env[name] for name in TOKEN_ENV_VARS if env.get(name)), None)
        if not tok:
            raise MissingTokenError(
                "Missing GitHub token. Provide --token or set GH_TOKEN (or GITHUB_TOKEN)."
            )
        if limit is None or limit < 0:
            limit = parse_limit(env.get(LIMIT_ENV_VAR))
        return cls(token=tok, limit=limit, timeout_seconds=timeout_seconds)
