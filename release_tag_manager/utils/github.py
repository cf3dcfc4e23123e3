"""Contains utility functions for GitHub interactions."""


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Split an 'owner/repo' repository name, tolerating surrounding slashes.

    Raises ValueError when the name is missing or does not have exactly two non-empty parts.
    """
    if repo is None:
        raise ValueError("A repository in 'owner/repo' format is required.")
    owner, _, name = repo.strip("/").partition("/")
    if not owner or not name or "/" in name:
        raise ValueError(f"Repository must be in the format 'owner/repo', got '{repo}'.")
    return owner, name
