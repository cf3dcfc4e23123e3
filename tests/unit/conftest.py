"""Fixtures for unit tests."""

from typing import Generator

import pytest
import structlog

from release_tag_manager.release.models import RunEvent
from tests.unit.fakes import FakeGitHubClient


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_client() -> FakeGitHubClient:
    """An empty in-memory repository."""
    return FakeGitHubClient(issue_titles={42: "Release the first version", 7: "Release v2.0"})


@pytest.fixture
def release_event() -> RunEvent:
    """A successful release request for tag v1.0 from issue #42."""
    return RunEvent(repo="octocat/Hello-World", issue_number=42, request_id="a1b2c3", args={"tag": "v1.0", "title": "First"})
