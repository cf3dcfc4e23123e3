"""Unit tests for the release reconciliation workflow driver."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from release_tag_manager.configuration.models import GitHubAuthenticationType
from release_tag_manager.profiles.profile import EmptyProfile, YamlProfile
from release_tag_manager.release import driver
from release_tag_manager.release.models import BuildMetadata, RunEvent
from tests.unit.fakes import FakeGitHubClient


def _run(event: RunEvent, **kwargs: object):
    return driver.run_reconcile_release_workflow(
        event,
        github_auth_type=GitHubAuthenticationType.PAT,
        github_pat_token="test-token",
        github_app_id=None,
        github_app_private_key_path=None,
        github_api_url="https://api.github.com",
        home_base_url="https://builds.example.com",
        metadata=BuildMetadata(version="1.2.3"),
        **kwargs,
    )


@pytest.fixture
def create_adapter(monkeypatch: pytest.MonkeyPatch, fake_client: FakeGitHubClient) -> AsyncMock:
    """Make the driver reconcile against the in-memory repository."""
    create = AsyncMock(return_value=fake_client)
    monkeypatch.setattr(driver.PyGithubAdapter, "create", create)
    return create


def test_load_profile_without_path() -> None:
    """Test that no configured path yields an empty profile."""
    assert isinstance(driver.load_profile(None), EmptyProfile)


def test_load_profile_with_path(tmp_path: Path) -> None:
    """Test that a configured path yields a YAML profile reading that file."""
    profile_file = tmp_path / ".rultor.yml"
    profile_file.write_text("release:\n  pre: 'false'\n", encoding="utf-8")
    profile = driver.load_profile(profile_file)
    assert isinstance(profile, YamlProfile)
    assert profile.lookup("release.pre") == "false"


@pytest.mark.asyncio
async def test_workflow_skips_non_release_events(create_adapter: AsyncMock, release_event: RunEvent) -> None:
    """Test that events the guard rejects never reach the repository."""
    event = release_event.model_copy(update={"request_type": "merge"})
    assert await _run(event) is None
    create_adapter.assert_not_awaited()


@pytest.mark.asyncio
async def test_workflow_skips_failed_builds(create_adapter: AsyncMock, release_event: RunEvent) -> None:
    """Test that failed release builds are ignored."""
    assert await _run(release_event.model_copy(update={"success": False})) is None
    create_adapter.assert_not_awaited()


@pytest.mark.asyncio
async def test_workflow_reconciles_release(create_adapter: AsyncMock, fake_client: FakeGitHubClient, release_event: RunEvent) -> None:
    """Test that a release request creates the release with the configured home and metadata."""
    decision = await _run(release_event)

    create_adapter.assert_awaited_once_with(
        repo="octocat/Hello-World",
        github_auth_type=GitHubAuthenticationType.PAT,
        github_pat_token="test-token",
        github_app_id=None,
        github_app_private_key_path=None,
        github_api_url="https://api.github.com",
    )
    assert decision is not None
    assert decision.existing is False
    assert decision.tag == "v1.0"
    assert "Released by Rultor 1.2.3, see [build log](https://builds.example.com/t/42-a1b2c3)" in decision.body
    assert fake_client.releases["v1.0"].body == decision.body


@pytest.mark.asyncio
async def test_workflow_reads_profile(create_adapter: AsyncMock, fake_client: FakeGitHubClient, tmp_path: Path) -> None:
    """Test that the profile at the configured path decides the pre-release flag."""
    profile_file = tmp_path / ".rultor.yml"
    profile_file.write_text("release:\n  pre: 'false'\n", encoding="utf-8")
    event = RunEvent(repo="octocat/Hello-World", issue_number=7, request_id="r7", args={"tag": "v2.0"})

    decision = await _run(event, profile_path=profile_file)

    assert decision is not None
    assert decision.prerelease is False
    assert decision.title == "Release v2.0"
