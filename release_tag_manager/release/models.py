"""Data models for release reconciliation."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from release_tag_manager.utils.constants import DEFAULT_TOOL_NAME, DISTRIBUTION_NAME, RELEASE_REQUEST_TYPE


class RunEvent(BaseModel):
    """A triggering occurrence handed over by the scheduler. Never mutated."""

    model_config = ConfigDict(frozen=True)

    repo: str
    issue_number: int
    request_id: str
    request_type: str = RELEASE_REQUEST_TYPE
    success: bool = True
    args: dict[str, str] = {}

    def arg(self, name: str) -> str | None:
        """Return the named request argument, or None if it was not supplied."""
        return self.args.get(name)


class ReleaseRecord(BaseModel):
    """A release of the remote repository as seen during one reconciliation."""

    id: int
    tag_name: str
    name: str | None = None
    body: str = ""
    prerelease: bool = False
    draft: bool = False
    published_at: datetime | None = None

    @field_validator("published_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        """Treat naive timestamps as UTC so that they compare with the epoch."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_github(cls, release: Any) -> "ReleaseRecord":
        """Build a record from a PyGithub GitRelease."""
        body = release.body if isinstance(release.body, str) else ""
        name = release.title if isinstance(release.title, str) else None
        return cls(
            id=release.id,
            tag_name=release.tag_name,
            name=name,
            body=body,
            prerelease=bool(release.prerelease),
            draft=bool(release.draft),
            published_at=release.published_at,
        )


class ReleaseDecision(BaseModel):
    """The outcome of a single reconciliation, discarded once side effects are issued."""

    model_config = ConfigDict(frozen=True)

    existing: bool
    tag: str
    title: str | None
    prerelease: bool
    body: str


def _installed_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


@dataclass(frozen=True)
class BuildMetadata:
    """Identifies the tool that writes releases, injected into the reconciler."""

    tool: str = DEFAULT_TOOL_NAME
    version: str = field(default_factory=_installed_version)
