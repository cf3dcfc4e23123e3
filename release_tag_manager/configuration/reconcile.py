"""Reconcile GitHub authentication configuration."""

from pathlib import Path

from release_tag_manager.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError, RequiredConfigurationElementError
from release_tag_manager.configuration.models import GitHubAuthenticationType


def require_repository(repo: str | None) -> str:
    """Return the configured repository or raise if none was given."""
    if not repo:
        raise RequiredConfigurationElementError(name="Repository", cli_name="repo", env_name="REPO")
    return repo


def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_pat_token (str | None): The GitHub PAT token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If no configuration, an incomplete App
            configuration, or both PAT and App configurations are defined.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_configured = bool(github_app_id or github_app_private_key_path)
    if github_pat_token and app_configured:
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if github_app_id and github_app_private_key_path:
        return GitHubAuthenticationType.APP

    if app_configured:
        missing = "GitHub App ID (command line option github_app_id, environment variable GITHUB_APP_ID)"
        if not github_app_private_key_path:
            missing = (
                "GitHub App private key path (command line option github_app_private_key_path, environment variable GITHUB_APP_PRIVATE_KEY_PATH)"
            )
        raise GitHubAuthenticationConfigurationUndefinedError(f"Incomplete GitHub App configuration - missing settings include {missing}")

    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either a PAT or a GitHub App configuration."
    )
