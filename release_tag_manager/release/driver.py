"""Orchestrates the reconciliation of a release for one run event."""

import time
from pathlib import Path

import structlog

from release_tag_manager.configuration.models import GitHubAuthenticationType
from release_tag_manager.github.adapter import PyGithubAdapter
from release_tag_manager.profiles.profile import EmptyProfile, Profile, YamlProfile
from release_tag_manager.release.guard import RunEventGuard
from release_tag_manager.release.home import Home
from release_tag_manager.release.models import BuildMetadata, ReleaseDecision, RunEvent
from release_tag_manager.release.reconciler import ReleaseReconciler

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_profile(profile_path: Path | None) -> Profile:
    """Return the profile stored at profile_path, or an empty profile when no path is configured."""
    if profile_path is None:
        return EmptyProfile()
    return YamlProfile(path=profile_path)


async def run_reconcile_release_workflow(
    event: RunEvent,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_api_url: str,
    home_base_url: str,
    profile_path: Path | None = None,
    metadata: BuildMetadata | None = None,
) -> ReleaseDecision | None:
    """Reconcile the release requested by a run event.

    Returns None without touching the repository when the event is not a
    successful release request carrying a tag.
    """
    if not RunEventGuard().applies(event):
        logger.info("Run event does not request a release", request_id=event.request_id, request_type=event.request_type)
        return None

    github_adapter = await PyGithubAdapter.create(
        repo=event.repo,
        github_auth_type=github_auth_type,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_api_url=github_api_url,
    )
    reconciler = ReleaseReconciler(
        github_adapter,
        profile=load_profile(profile_path),
        home=Home(home_base_url),
        metadata=metadata,
    )

    start_time = time.time()
    logger.info("Reconciling release", repo=event.repo, issue_number=event.issue_number, request_id=event.request_id)
    decision = await reconciler.reconcile(event)
    logger.info(
        "Reconciled release",
        repo=event.repo,
        tag=decision.tag,
        existing=decision.existing,
        duration=round(time.time() - start_time, 2),
    )
    return decision
