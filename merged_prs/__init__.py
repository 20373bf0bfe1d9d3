"""Merged PRs - list the pull requests you authored elsewhere that got closed.

Queries the GitHub search API for everything the authenticated user authored and
keeps only pull requests that:
- live outside the user's own repositories (coarse username-in-URL check)
- are no longer open
"""

__version__ = "1.0.0"
