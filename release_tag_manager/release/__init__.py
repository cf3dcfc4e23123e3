"""Release reconciliation for tags requested through release builds."""

from .models import BuildMetadata, ReleaseDecision, ReleaseRecord, RunEvent
from .changelog import CommitsLog
from .guard import RunEventGuard
from .home import Home
from .phrases import Phrase, PhraseBook
from .prerelease import resolve_prerelease
from .prior import find_prior_published
from .reconciler import ReleaseReconciler

__all__ = [
    "BuildMetadata",
    "ReleaseDecision",
    "ReleaseRecord",
    "RunEvent",
    "CommitsLog",
    "RunEventGuard",
    "Home",
    "Phrase",
    "PhraseBook",
    "resolve_prerelease",
    "find_prior_published",
    "ReleaseReconciler",
]
