"""Repository profiles queried by dotted path."""

from pathlib import Path
from typing import Any, Protocol

import structlog
from ruamel.yaml.error import YAMLError

from release_tag_manager.profiles.exceptions import ProfileFormatError, ProfileUnavailableError
from release_tag_manager.utils.yaml import load_yaml_text, scalar_to_text

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class Profile(Protocol):
    """Protocol for repository profiles."""

    def lookup(self, path: str) -> str | None:
        """Return the text stored at a dotted path, or None if the path is absent.

        Raises:
            ProfileUnavailableError: If the profile cannot be read.
        """
        ...


class EmptyProfile:
    """A profile with no entries."""

    def lookup(self, path: str) -> str | None:
        """Return None for every path."""
        return None

    def __repr__(self) -> str:
        """Return a readable representation."""
        return "EmptyProfile()"


class YamlProfile:
    """A profile backed by a YAML document, read lazily on first lookup."""

    def __init__(self, path: Path | None = None, text: str | None = None) -> None:
        """Initialize with either the path of a YAML file or the YAML text itself."""
        if (path is None) == (text is None):
            raise ValueError("Exactly one of path or text must be given.")
        self.path = path
        self._text = text
        self._tree: dict[str, Any] | None = None

    @classmethod
    def from_text(cls, text: str) -> "YamlProfile":
        """Create a profile from YAML text."""
        return cls(text=text)

    @property
    def location(self) -> str:
        """Where this profile is read from."""
        return str(self.path) if self.path is not None else "<inline>"

    def _read(self) -> str:
        if self.path is None:
            return self._text or ""
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.error("Profile is not valid UTF-8", location=self.location, error=str(exc))
            raise ProfileFormatError(self.location, str(exc)) from exc
        except OSError as exc:
            logger.error("Failed to read profile", location=self.location, error=str(exc))
            raise ProfileUnavailableError(self.location) from exc

    def tree(self) -> dict[str, Any]:
        """Parse the profile and return its root mapping."""
        if self._tree is not None:
            return self._tree
        try:
            tree = load_yaml_text(self._read())
        except YAMLError as exc:
            raise ProfileFormatError(self.location, str(exc)) from exc
        if tree is None:
            tree = {}
        if not isinstance(tree, dict):
            raise ProfileFormatError(self.location, f"root must be a mapping, got {type(tree).__name__}")
        self._tree = tree
        return tree

    def lookup(self, path: str) -> str | None:
        """Walk the dotted path through nested mappings and return the scalar found there."""
        node: Any = self.tree()
        for key in path.split("."):
            if not isinstance(node, dict) or key not in node:
                logger.debug("Profile path not found", location=self.location, path=path)
                return None
            node = node[key]
        return scalar_to_text(node)

    def __repr__(self) -> str:
        """Return a readable representation."""
        return f"YamlProfile(location={self.location!r})"
