"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from github import GithubException
from typer import Argument, Option
from typing_extensions import Annotated

from release_tag_manager.configuration.env import Settings
from release_tag_manager.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError, RequiredConfigurationElementError
from release_tag_manager.configuration.logging_config import configure_logging
from release_tag_manager.configuration.reconcile import require_repository, validate_github_authentication_configuration
from release_tag_manager.profiles.exceptions import ProfileError
from release_tag_manager.release.driver import run_reconcile_release_workflow
from release_tag_manager.release.models import RunEvent
from release_tag_manager.utils.constants import RELEASE_REQUEST_TYPE

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


def _request_args(tag: str, title: str | None, pre: str | None) -> dict[str, str]:
    args = {"tag": tag}
    if title is not None:
        args["title"] = title
    if pre is not None:
        args["pre"] = pre
    return args


@typer_app.command(name="reconcile-release")
def reconcile_release_cli(
    issue_number: Annotated[int, Argument(help="Number of the issue that requested the release.")],
    request_id: Annotated[str, Argument(help="Identifier of the release request.")],
    tag: Annotated[str, Option("--tag", help="Tag to release.")],
    repo: Annotated[str | None, Option(envvar="REPO", help="Repository name (owner/repo).")] = None,
    title: Annotated[str | None, Option("--title", help="Release title; defaults to the issue title.")] = None,
    pre: Annotated[str | None, Option("--pre", help="Pre-release flag; only 'true' enables it.")] = None,
    request_type: Annotated[str, Option("--type", help="Type of the request.")] = RELEASE_REQUEST_TYPE,
    success: Annotated[bool, Option("--success/--failure", help="Whether the build behind the request succeeded.")] = True,
    profile_path: Annotated[Path | None, Option("--profile", envvar="PROFILE_PATH", help="Path to the repository profile YAML file.")] = None,
    home_base_url: Annotated[str | None, Option(envvar="HOME_BASE_URL", help="Base URL of the build log front end.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")] = None,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Create the release for a tag, or annotate the existing one and comment on the issue."""
    settings = Settings()
    configure_logging(debug or settings.DEBUG)

    try:
        repository = require_repository(repo or settings.REPO)
        github_auth_type = validate_github_authentication_configuration(
            github_pat_token=github_pat_token or settings.GITHUB_PAT_TOKEN,
            github_app_id=github_app_id or settings.GITHUB_APP_ID,
            github_app_private_key_path=github_app_private_key_path or settings.GITHUB_APP_PRIVATE_KEY_PATH,
        )
    except (RequiredConfigurationElementError, GitHubAuthenticationConfigurationUndefinedError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(2) from exc

    event = RunEvent(
        repo=repository,
        issue_number=issue_number,
        request_id=request_id,
        request_type=request_type,
        success=success,
        args=_request_args(tag, title, pre),
    )

    try:
        decision = asyncio.run(
            run_reconcile_release_workflow(
                event,
                github_auth_type=github_auth_type,
                github_pat_token=github_pat_token or settings.GITHUB_PAT_TOKEN,
                github_app_id=github_app_id or settings.GITHUB_APP_ID,
                github_app_private_key_path=github_app_private_key_path or settings.GITHUB_APP_PRIVATE_KEY_PATH,
                github_api_url=github_api_url or settings.GITHUB_API_URL,
                home_base_url=home_base_url or settings.HOME_BASE_URL,
                profile_path=profile_path or settings.PROFILE_PATH,
            )
        )
    except ProfileError as exc:
        typer.echo(f"Profile error: {exc}", err=True)
        raise typer.Exit(1) from exc
    except GithubException as exc:
        typer.echo(f"GitHub request failed: {exc}", err=True)
        raise typer.Exit(1) from exc

    if decision is None:
        typer.echo("Run event does not request a release, nothing to do.")
        return
    if decision.existing:
        typer.echo(f"Release {decision.tag} already exists, added a reference to issue #{issue_number}.")
    else:
        kind = "pre-release" if decision.prerelease else "release"
        typer.echo(f"Created {kind} {decision.tag} titled '{decision.title}'.")


@typer_app.callback()
def main() -> None:
    """Reconcile GitHub releases requested through release builds."""


if __name__ == "__main__":
    typer_app()
