"""Message templates used in comments and release bodies.

Every template is rendered with Jinja2 in strict mode, so a missing
parameter fails loudly instead of producing an incomplete message.

Parameters per phrase:

- ``DUPLICATE_TAG``: ``tag``
- ``DUPLICATE_TRAILER``: ``body``, ``issue_number``, ``home``
- ``RELEASE_BODY``: ``issue_number``, ``changelog``, ``tool``, ``version``, ``home``
"""

from enum import Enum
from typing import Any

import jinja2

from release_tag_manager.utils.templates import construct_jinja2_environment, construct_jinja2_template_from_string, render_template


class Phrase(str, Enum):
    """Closed set of message identifiers."""

    DUPLICATE_TAG = "duplicate_tag"
    DUPLICATE_TRAILER = "duplicate_trailer"
    RELEASE_BODY = "release_body"


PHRASES: dict[Phrase, str] = {
    Phrase.DUPLICATE_TAG: (
        "Release `{{ tag }}` already exists! I can't duplicate it, but I've added some information to the existing release"
    ),
    Phrase.DUPLICATE_TRAILER: "{{ body }}\n\nSee also #{{ issue_number }} and [build log]({{ home }})",
    Phrase.RELEASE_BODY: (
        "See #{{ issue_number }}, release log:\n\n{{ changelog }}\n\nReleased by {{ tool }} {{ version }}, see [build log]({{ home }})"
    ),
}


class PhraseBook:
    """Renders phrases from a template table."""

    def __init__(self, templates: dict[Phrase, str] | None = None) -> None:
        """Initialize with a template table, defaulting to the built-in phrases."""
        table = PHRASES if templates is None else templates
        missing = set(Phrase) - set(table)
        if missing:
            raise ValueError(f"Phrase table is missing templates for: {', '.join(sorted(p.value for p in missing))}")
        environment = construct_jinja2_environment()
        self._templates: dict[Phrase, jinja2.Template] = {
            phrase: construct_jinja2_template_from_string(text, environment) for phrase, text in table.items()
        }

    def render(self, phrase: Phrase, **parameters: Any) -> str:
        """Render a phrase with its parameters."""
        return render_template(self._templates[phrase], **parameters)
