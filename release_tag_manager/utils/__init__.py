"""Utility modules for shared functionality."""

from .constants import (
    CHANGELOG_MAX_COMMITS,
    CHANGELOG_MAX_TITLE_LENGTH,
    DEFAULT_HOME_BASE_URL,
    EPOCH,
    PRERELEASE_PROFILE_PATH,
)
from .retry import retry_on_rate_limit

__all__ = [
    "CHANGELOG_MAX_COMMITS",
    "CHANGELOG_MAX_TITLE_LENGTH",
    "DEFAULT_HOME_BASE_URL",
    "EPOCH",
    "PRERELEASE_PROFILE_PATH",
    "retry_on_rate_limit",
]
