"""Sets up the authenticated PyGithub client."""

from pathlib import Path

import structlog
from github import Auth, Github, GithubIntegration

from release_tag_manager.configuration.models import GitHubAuthenticationType
from release_tag_manager.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def get_github_app_client(
    repo: str,
    github_app_id: int,
    github_app_private_key_path: Path,
    github_api_url: str,
) -> Github:
    """Returns a client authenticated as the GitHub App installation of the repository."""
    private_key = github_app_private_key_path.read_text(encoding="utf-8")
    app_auth = Auth.AppAuth(github_app_id, private_key)
    owner, repository = await split_repository_in_configuration(repo=repo)
    integration = GithubIntegration(auth=app_auth, base_url=github_api_url)
    installation = integration.get_repo_installation(owner, repository)
    logger.debug("Resolved GitHub App installation", owner=owner, repo=repository, installation_id=installation.id)
    return Github(auth=app_auth.get_installation_auth(installation.id), base_url=github_api_url)


async def get_github_pat_client(github_pat_token: str, github_api_url: str) -> Github:
    """Returns a client authenticated with a personal access token."""
    return Github(auth=Auth.Token(github_pat_token), base_url=github_api_url)


async def get_github_client(
    repo: str,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_api_url: str,
) -> Github:
    """Returns an authenticated GitHub client using either GitHub App or PAT credentials.

    Supports a custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if the credentials for the chosen authentication type are missing.
    """
    if github_auth_type == GitHubAuthenticationType.APP:
        if not (github_app_id and github_app_private_key_path):
            raise RuntimeError("GitHub App authentication requires app_id and private_key_path in config.")
        return await get_github_app_client(repo, github_app_id, github_app_private_key_path, github_api_url)
    if not github_pat_token:
        raise RuntimeError("GitHub PAT authentication requires github_pat_token in config.")
    return await get_github_pat_client(github_pat_token, github_api_url)
