"""Builds the commit log included in the body of a new release."""

from datetime import datetime
from typing import Any

import structlog

from release_tag_manager.github.abc import GitHubClientBase
from release_tag_manager.utils.constants import CHANGELOG_MAX_COMMITS, CHANGELOG_MAX_TITLE_LENGTH

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def commit_title(message: str, max_length: int = CHANGELOG_MAX_TITLE_LENGTH) -> str:
    """Return the first line of a commit message, shortened to max_length characters."""
    lines = message.strip().splitlines()
    title = lines[0].strip() if lines else ""
    if len(title) > max_length:
        return f"{title[:max_length]}..."
    return title


def commit_author(commit: dict[str, Any]) -> str:
    """Return '@login' for commits linked to a GitHub user, otherwise the git author name."""
    author = commit.get("author") or {}
    login = author.get("login")
    if login:
        return f"@{login}"
    git_author = (commit.get("commit") or {}).get("author") or {}
    return git_author.get("name") or "unknown"


def format_commit_line(commit: dict[str, Any]) -> str:
    """Render one commit as a markdown list item."""
    sha = commit.get("sha", "")[:7]
    message = (commit.get("commit") or {}).get("message", "")
    return f" * {sha} by {commit_author(commit)}: {commit_title(message)}"


class CommitsLog:
    """Generates the markdown list of commits made between two releases."""

    def __init__(self, client: GitHubClientBase, max_commits: int = CHANGELOG_MAX_COMMITS) -> None:
        """Initialize with the repository client and the maximum number of commits listed."""
        self.client = client
        self.max_commits = max_commits

    async def build(self, since: datetime, until: datetime | None) -> str:
        """Build the commit log for the time range [since, until)."""
        commits = await self.client.list_commits(since=since, until=until)
        if not commits:
            return " * no commits"
        lines = [format_commit_line(commit) for commit in commits[: self.max_commits]]
        remaining = len(commits) - self.max_commits
        if remaining > 0:
            lines.append(f" * and {remaining} more...")
        logger.debug("Built commits log", commit_count=len(commits), listed=min(len(commits), self.max_commits))
        return "\n".join(lines)
