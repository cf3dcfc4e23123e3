"""Base ABC for repository clients."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from release_tag_manager.release.models import ReleaseRecord


class GitHubClientBase(ABC):
    """Base ABC for the repository operations needed to reconcile releases."""

    # Release Operations
    @abstractmethod
    async def release_exists(self, tag_name: str) -> bool:
        """Check whether a release with the given tag exists."""
        pass

    @abstractmethod
    async def get_release(self, tag_name: str) -> ReleaseRecord:
        """Get a specific release by tag name."""
        pass

    @abstractmethod
    async def create_release(self, tag_name: str) -> ReleaseRecord:
        """Create and publish a release for a tag."""
        pass

    @abstractmethod
    async def update_release(self, release: ReleaseRecord) -> ReleaseRecord:
        """Write the title, body, and pre-release flag of a release back to the repository."""
        pass

    @abstractmethod
    async def list_releases(self, per_page: int = 100) -> list[ReleaseRecord]:
        """List all releases of the repository, drafts included."""
        pass

    # Issue Operations
    @abstractmethod
    async def create_issue_comment(self, issue_number: int, body: str) -> None:
        """Post a comment on an issue."""
        pass

    @abstractmethod
    async def get_issue_title(self, issue_number: int) -> str:
        """Get the title of an issue."""
        pass

    # Commit Operations
    @abstractmethod
    async def list_commits(self, since: datetime | None = None, until: datetime | None = None, per_page: int = 100) -> list[dict[str, Any]]:
        """List commits of the default branch made within a time range."""
        pass
