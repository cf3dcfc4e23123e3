"""Shared constants used across the application."""

from datetime import datetime, timezone

# Release Constants
# -----------------

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""Earliest instant used as the prior-release timestamp when no release was ever published."""

RELEASE_REQUEST_TYPE = "release"
"""Request type of run events that this application acts upon."""

PRERELEASE_PROFILE_PATH = "release.pre"
"""Profile path holding the repository-wide pre-release flag."""

PRERELEASE_DEFAULT = True
"""Pre-release flag used when neither the request nor the profile specify one."""

TRUE_LITERAL = "true"
"""The only text value accepted as an enabled boolean flag."""

# Changelog Constants
# -------------------

CHANGELOG_MAX_COMMITS = 20
"""Maximum number of commits listed in a generated release log."""

CHANGELOG_MAX_TITLE_LENGTH = 50
"""Maximum number of characters of a commit title shown in a release log line."""

# Home Constants
# --------------

DEFAULT_HOME_BASE_URL = "https://www.rultor.com"
"""Base URL of the web front end that serves build logs."""

# Build Metadata Constants
# ------------------------

DEFAULT_TOOL_NAME = "Rultor"
"""Tool name written into the body of every created release."""

DISTRIBUTION_NAME = "release-tag-manager"
"""Name of the installed distribution, used to look up the running version."""
