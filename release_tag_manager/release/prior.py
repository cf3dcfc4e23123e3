"""Locates the publication time of the most recent prior release."""

from datetime import datetime
from typing import Iterable

from release_tag_manager.release.models import ReleaseRecord
from release_tag_manager.utils.constants import EPOCH


def find_prior_published(releases: Iterable[ReleaseRecord]) -> datetime:
    """Return the latest publication time among releases, or the epoch if none was published.

    Unpublished releases (drafts) carry no publication time and are skipped.
    """
    prior = EPOCH
    for release in releases:
        if release.published_at is None:
            continue
        if release.published_at > prior:
            prior = release.published_at
    return prior
