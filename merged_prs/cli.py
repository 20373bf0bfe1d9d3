from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from . import __version__
from .config import ConfigError, FetchConfig
from .display import print_error, print_pull_requests
from .fetcher import fetch
from .github_api import DEFAULT_TIMEOUT_SECONDS, GitHubAPIError
from .log import setup_logging
from .models import IssueParseError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merged-prs",
        description=(
            "List your recently closed pull requests in other people's repositories,"
            " most recently updated first."
        ),
    )
    parser.add_argument(
        "--token",
        default=None,
        help="GitHub token. Defaults to GH_TOKEN, then GITHUB_TOKEN.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum pull requests to print. Defaults to LIMIT env var, or 20.",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="Timeout per GitHub API call.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = FetchConfig.from_env(
            token=args.token,
            limit=args.limit,
            timeout_seconds=args.timeout_seconds,
        )
        pull_requests = fetch(config)
    except (ConfigError, GitHubAPIError, IssueParseError) as error:
        logger.debug("Fetch failed", exc_info=True)
        print_error(str(error))
        return 1

    print_pull_requests(pull_requests)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
