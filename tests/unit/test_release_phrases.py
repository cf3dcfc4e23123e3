"""Contains unit tests for the release phrases and home modules."""

import jinja2
import pytest

from release_tag_manager.release.home import Home
from release_tag_manager.release.models import RunEvent
from release_tag_manager.release.phrases import PHRASES, Phrase, PhraseBook


def test_duplicate_tag_mentions_tag() -> None:
    """Test that the duplicate-tag phrase is filled with the tag."""
    text = PhraseBook().render(Phrase.DUPLICATE_TAG, tag="v2.0")
    assert text.startswith("Release `v2.0` already exists!")


def test_duplicate_trailer_keeps_body_verbatim() -> None:
    """Test that the original body is kept as is, markup included."""
    body = "Line with {{ braces }} and <b>html</b>\n"
    text = PhraseBook().render(Phrase.DUPLICATE_TRAILER, body=body, issue_number=3, home="https://example.com/t/3-x")
    assert text == body + "\n\nSee also #3 and [build log](https://example.com/t/3-x)"


def test_missing_parameter_fails() -> None:
    """Test that rendering without a required parameter raises."""
    with pytest.raises(jinja2.UndefinedError):
        PhraseBook().render(Phrase.DUPLICATE_TAG)


def test_custom_table_must_cover_every_phrase() -> None:
    """Test that a phrase table missing an identifier is rejected."""
    table = {phrase: text for phrase, text in PHRASES.items() if phrase != Phrase.DUPLICATE_TAG}
    with pytest.raises(ValueError, match="duplicate_tag"):
        PhraseBook(table)


def test_custom_table_is_used() -> None:
    """Test that a localized table replaces the built-in phrases."""
    table = dict(PHRASES)
    table[Phrase.DUPLICATE_TAG] = "Le tag {{ tag }} existe déjà"
    assert PhraseBook(table).render(Phrase.DUPLICATE_TAG, tag="v1") == "Le tag v1 existe déjà"


@pytest.mark.parametrize(
    "base_url",
    [
        pytest.param("https://www.rultor.com", id="no trailing slash"),
        pytest.param("https://www.rultor.com/", id="trailing slash"),
    ],
)
def test_home_uri(base_url: str) -> None:
    """Test that the build log URI combines issue number and request id."""
    event = RunEvent(repo="octocat/Hello-World", issue_number=42, request_id="a1b2c3", args={"tag": "v1"})
    assert Home(base_url).uri(event) == "https://www.rultor.com/t/42-a1b2c3"
