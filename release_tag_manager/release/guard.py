"""Guard predicates deciding whether a run event triggers release reconciliation."""

from typing import Callable, Iterable

import structlog

from release_tag_manager.release.models import RunEvent
from release_tag_manager.utils.constants import RELEASE_REQUEST_TYPE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

Predicate = Callable[[RunEvent], bool]


def is_release_request(event: RunEvent) -> bool:
    """The request asks for a release."""
    return event.request_type == RELEASE_REQUEST_TYPE


def is_successful(event: RunEvent) -> bool:
    """The build behind the request succeeded."""
    return event.success


def has_tag(event: RunEvent) -> bool:
    """The request names the tag to release."""
    tag = event.arg("tag")
    return tag is not None and tag.strip() != ""


def has_issue(event: RunEvent) -> bool:
    """The request is tied to an issue of a repository."""
    return bool(event.repo) and event.issue_number > 0


RELEASE_PREDICATES: tuple[Predicate, ...] = (has_issue, is_release_request, is_successful, has_tag)


class RunEventGuard:
    """Applies only when every one of its predicates holds for an event."""

    def __init__(self, predicates: Iterable[Predicate] = RELEASE_PREDICATES) -> None:
        """Initialize with the predicates that must all hold."""
        self.predicates = tuple(predicates)

    def applies(self, event: RunEvent) -> bool:
        """Return True when every predicate holds for the event."""
        for predicate in self.predicates:
            if not predicate(event):
                logger.debug("Run event rejected by guard", predicate=predicate.__name__, request_id=event.request_id)
                return False
        return True
