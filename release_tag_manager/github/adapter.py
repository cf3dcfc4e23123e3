"""GitHub client adapter for the PyGithub library.

PyGithub is blocking, so every call runs in a worker thread through
asyncio.to_thread. Calls are still awaited one after another.
"""

import asyncio
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from github import Github, GithubException, UnknownObjectException
from github.Commit import Commit
from github.GitRelease import GitRelease
from github.Repository import Repository

from release_tag_manager.configuration.models import GitHubAuthenticationType
from release_tag_manager.release.models import ReleaseRecord
from release_tag_manager.utils.github import split_repository_in_configuration
from release_tag_manager.utils.retry import retry_on_rate_limit

from .abc import GitHubClientBase
from .client import get_github_client

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except GithubException as exc:
            if exc.status != 422:
                raise
            error_data = exc.data if isinstance(exc.data, dict) else {}
            message = error_data.get("message", "Unprocessable Entity")
            errors = error_data.get("errors", [])
            logger.error("GitHub 422 Unprocessable Entity", function=func.__name__, message=message, errors=errors)
            raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc

    return wrapper  # type: ignore


def _isoformat(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    return moment.isoformat()


def _commit_to_dict(commit: Commit) -> dict[str, Any]:
    """Flatten a commit into the shape of the REST API's commit JSON.

    Only fields already present in the list response are read, so no
    additional request is made per commit.
    """
    git_author = commit.commit.author
    return {
        "sha": commit.sha,
        "commit": {
            "message": commit.commit.message,
            "author": {"name": git_author.name if git_author is not None else None},
        },
        "author": {"login": commit.author.login} if commit.author is not None else None,
    }


class PyGithubAdapter(GitHubClientBase):
    """GitHub client adapter for the PyGithub library."""

    def __init__(self, client: Github, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self.repository: Repository = client.get_repo(f"{owner}/{repo_name}", lazy=True)

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (PAT or APP)
            github_pat_token: Personal access token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured PyGithubAdapter instance
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info("Creating client for GitHub instance and repository", github_api_url=github_api_url, owner=owner, repo_name=repo_name)
        client = await get_github_client(
            repo=repo,
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    # Release Operations
    def _find_release(self, tag_name: str) -> GitRelease | None:
        """Scan every release, drafts included, for the one carrying the tag.

        The releases/tags endpoint answers 404 for drafts, so it cannot tell
        whether a tag is already taken.
        """
        for release in self.repository.get_releases():
            if release.tag_name == tag_name:
                return release
        return None

    @retry_on_rate_limit()
    async def release_exists(self, tag_name: str) -> bool:
        """Check whether a release, draft or published, carries the given tag."""
        return await asyncio.to_thread(self._find_release, tag_name) is not None

    @handle_github_422
    @retry_on_rate_limit()
    async def get_release(self, tag_name: str) -> ReleaseRecord:
        """Get the release carrying the given tag, drafts included.

        Raises:
            UnknownObjectException: If no release carries the tag.
        """
        release = await asyncio.to_thread(self._find_release, tag_name)
        if release is None:
            raise UnknownObjectException(404, {"message": f"No release carries tag {tag_name}"}, {})
        return ReleaseRecord.from_github(release)

    @handle_github_422
    @retry_on_rate_limit()
    async def create_release(self, tag_name: str) -> ReleaseRecord:
        """Create and publish a release for a tag."""
        created = await asyncio.to_thread(self.repository.create_git_release, tag_name, tag_name, "")
        release = ReleaseRecord.from_github(created)
        logger.info("Created release", tag_name=tag_name, release_id=release.id, published_at=_isoformat(release.published_at))
        return release

    @handle_github_422
    @retry_on_rate_limit()
    async def update_release(self, release: ReleaseRecord) -> ReleaseRecord:
        """Write the title, body, and pre-release flag of a release back to the repository."""

        def _update() -> Any:
            remote = self.repository.get_release(release.id)
            return remote.update_release(
                name=release.name or "",
                message=release.body,
                draft=release.draft,
                prerelease=release.prerelease,
            )

        updated = await asyncio.to_thread(_update)
        logger.info("Updated release", tag_name=release.tag_name, release_id=release.id)
        return ReleaseRecord.from_github(updated)

    @retry_on_rate_limit()
    async def list_releases(self, per_page: int = 100) -> list[ReleaseRecord]:
        """List all releases for a repository, following pagination."""

        def _fetch() -> list[ReleaseRecord]:
            self.client.per_page = per_page
            return [ReleaseRecord.from_github(release) for release in self.repository.get_releases()]

        all_releases = await asyncio.to_thread(_fetch)
        logger.info("Fetched all releases", owner=self.owner, repo=self.repo_name, total_releases=len(all_releases))
        return all_releases

    # Issue Operations
    @handle_github_422
    @retry_on_rate_limit()
    async def create_issue_comment(self, issue_number: int, body: str) -> None:
        """Post a comment on an issue."""

        def _comment() -> None:
            self.repository.get_issue(issue_number).create_comment(body)

        await asyncio.to_thread(_comment)
        logger.info("Posted issue comment", issue_number=issue_number)

    @retry_on_rate_limit()
    async def get_issue_title(self, issue_number: int) -> str:
        """Get the title of an issue."""
        issue = await asyncio.to_thread(self.repository.get_issue, issue_number)
        return issue.title

    # Commit Operations
    @retry_on_rate_limit()
    async def list_commits(self, since: datetime | None = None, until: datetime | None = None, per_page: int = 100) -> list[dict[str, Any]]:
        """List commits of the default branch made within a time range, following pagination."""
        params: dict[str, Any] = {}
        if since is not None:
            params["since"] = since
        if until is not None:
            params["until"] = until

        def _fetch() -> list[dict[str, Any]]:
            self.client.per_page = per_page
            return [_commit_to_dict(commit) for commit in self.repository.get_commits(**params)]

        all_commits = await asyncio.to_thread(_fetch)
        logger.info(
            "Fetched all commits",
            owner=self.owner,
            repo=self.repo_name,
            since=_isoformat(since),
            until=_isoformat(until),
            total_commits=len(all_commits),
        )
        return all_commits
