"""Creates a release for a requested tag, or annotates the release that already carries it."""

from datetime import datetime
from typing import Protocol

import structlog

from release_tag_manager.github.abc import GitHubClientBase
from release_tag_manager.profiles.profile import EmptyProfile, Profile
from release_tag_manager.release.changelog import CommitsLog
from release_tag_manager.release.home import Home, HomeProvider
from release_tag_manager.release.models import BuildMetadata, ReleaseDecision, ReleaseRecord, RunEvent
from release_tag_manager.release.phrases import Phrase, PhraseBook
from release_tag_manager.release.prerelease import resolve_prerelease
from release_tag_manager.release.prior import find_prior_published

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class ChangelogBuilder(Protocol):
    """Protocol for changelog generators."""

    async def build(self, since: datetime, until: datetime | None) -> str:
        """Build the changelog for the time range [since, until)."""
        ...


class ReleaseReconciler:
    """Reconciles the release of a tag requested by a successful release build.

    If a release for the tag already exists, its body gets a trailer pointing
    at the triggering issue and build log, and the issue gets a comment saying
    the tag is a duplicate. Otherwise a new release is created with a title,
    a pre-release flag, and a body listing the commits since the previously
    published release.

    Reconciliations of the same tag must not run concurrently: two of them may
    both see the tag as missing and both try to create it.
    """

    def __init__(
        self,
        client: GitHubClientBase,
        profile: Profile | None = None,
        home: HomeProvider | None = None,
        metadata: BuildMetadata | None = None,
        changelog: ChangelogBuilder | None = None,
        phrases: PhraseBook | None = None,
    ) -> None:
        """Initialize with the repository client and the collaborators used to compose text."""
        self.client = client
        self.profile = profile if profile is not None else EmptyProfile()
        self.home = home if home is not None else Home()
        self.metadata = metadata if metadata is not None else BuildMetadata()
        self.changelog = changelog if changelog is not None else CommitsLog(client)
        self.phrases = phrases if phrases is not None else PhraseBook()

    async def reconcile(self, event: RunEvent) -> ReleaseDecision:
        """Reconcile the release of the tag named by the event.

        Raises:
            ValueError: If the event carries no tag argument.
            ProfileUnavailableError: If the profile is needed and cannot be read.
        """
        raw_tag = event.arg("tag")
        if raw_tag is None or not raw_tag.strip():
            raise ValueError(f"Run event {event.request_id} has no tag argument")
        tag = raw_tag.strip()
        home = self.home.uri(event)

        if await self.client.release_exists(tag):
            return await self._annotate_existing(event, tag, home)
        return await self._create(event, tag, home)

    async def _annotate_existing(self, event: RunEvent, tag: str, home: str) -> ReleaseDecision:
        release = await self.client.get_release(tag)
        body = self.phrases.render(Phrase.DUPLICATE_TRAILER, body=release.body, issue_number=event.issue_number, home=home)
        await self.client.update_release(release.model_copy(update={"body": body}))
        await self.client.create_issue_comment(event.issue_number, self.phrases.render(Phrase.DUPLICATE_TAG, tag=tag))
        logger.info("Duplicate tag commented", repo=event.repo, issue_number=event.issue_number, tag=tag)
        return ReleaseDecision(existing=True, tag=tag, title=release.name, prerelease=release.prerelease, body=body)

    async def _create(self, event: RunEvent, tag: str, home: str) -> ReleaseDecision:
        prior = find_prior_published(await self.client.list_releases())
        title = await self._title(event)
        prerelease = resolve_prerelease(event.args, self.profile)

        release: ReleaseRecord = await self.client.create_release(tag)
        changelog = await self.changelog.build(prior, release.published_at)
        body = self.phrases.render(
            Phrase.RELEASE_BODY,
            issue_number=event.issue_number,
            changelog=changelog,
            tool=self.metadata.tool,
            version=self.metadata.version,
            home=home,
        )
        await self.client.update_release(release.model_copy(update={"name": title, "prerelease": prerelease, "body": body}))
        logger.info(
            "Tag created and commented",
            repo=event.repo,
            issue_number=event.issue_number,
            tag=tag,
            prerelease=prerelease,
            prior_published_at=prior.isoformat(),
        )
        return ReleaseDecision(existing=False, tag=tag, title=title, prerelease=prerelease, body=body)

    async def _title(self, event: RunEvent) -> str:
        """Use the title argument when given, falling back to the title of the triggering issue."""
        title = event.arg("title")
        if title:
            return title
        return await self.client.get_issue_title(event.issue_number)
