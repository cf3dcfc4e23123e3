"""Contains utility functions for working with YAML documents."""

from typing import Any

from ruamel.yaml import YAML

yaml = YAML(typ="safe")


def load_yaml_text(text: str) -> Any:
    """Parses YAML text and returns the resulting tree."""
    return yaml.load(text)


def scalar_to_text(value: Any) -> str | None:
    """Renders a YAML scalar the way it is written in the document.

    Booleans become lower-case ``true``/``false`` and null becomes an empty
    string. Mappings and sequences are not scalars and yield None.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return None
    return str(value)
