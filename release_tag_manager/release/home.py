"""Resolves the location of the build log for a run event."""

from typing import Protocol

from release_tag_manager.release.models import RunEvent
from release_tag_manager.utils.constants import DEFAULT_HOME_BASE_URL


class HomeProvider(Protocol):
    """Protocol for anything that locates the build log of a run event."""

    def uri(self, event: RunEvent) -> str:
        """Return the build log URI for the event."""
        ...


class Home:
    """Build log location of a run event on the web front end."""

    def __init__(self, base_url: str = DEFAULT_HOME_BASE_URL) -> None:
        """Initialize with the base URL of the web front end."""
        self.base_url = base_url.rstrip("/")

    def uri(self, event: RunEvent) -> str:
        """Return the build log URI for the event."""
        return f"{self.base_url}/t/{event.issue_number}-{event.request_id}"
