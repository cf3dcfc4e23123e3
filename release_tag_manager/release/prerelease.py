"""Resolves whether a new release is marked as a pre-release."""

from collections.abc import Mapping

import structlog

from release_tag_manager.profiles.profile import Profile
from release_tag_manager.utils.constants import PRERELEASE_DEFAULT, PRERELEASE_PROFILE_PATH, TRUE_LITERAL

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _is_true(text: str) -> bool:
    return text.strip() == TRUE_LITERAL


def resolve_prerelease(args: Mapping[str, str], profile: Profile) -> bool:
    """Resolve the pre-release flag for a new release.

    The ``pre`` request argument wins when it is present and non-empty. Otherwise
    the ``release.pre`` entry of the profile is used, and when that is absent or
    empty the release is a pre-release. Only the literal ``true`` enables the
    flag; any other text disables it.

    Raises:
        ProfileUnavailableError: If the profile has to be consulted and cannot be read.
    """
    requested = args.get("pre")
    if requested:
        logger.debug("Pre-release flag taken from request", value=requested)
        return _is_true(requested)

    configured = profile.lookup(PRERELEASE_PROFILE_PATH)
    if configured:
        logger.debug("Pre-release flag taken from profile", value=configured, profile=repr(profile))
        return _is_true(configured)

    return PRERELEASE_DEFAULT
