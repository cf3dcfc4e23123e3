"""Contains utilities for rendering Jinja2 templates."""

from typing import Any

import jinja2
import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def construct_jinja2_environment() -> jinja2.Environment:
    """Construct a Jinja2 environment that fails on undefined variables and keeps text verbatim."""
    return jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=False, keep_trailing_newline=True)


def construct_jinja2_template_from_string(template_string: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Construct a Jinja2 template from a string."""
    if environment is None:
        environment = construct_jinja2_environment()
    return environment.from_string(template_string)


def render_template(template: jinja2.Template, **parameters: Any) -> str:
    """Render a Jinja2 template against keyword parameters."""
    try:
        return template.render(**parameters)
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render template", parameters=sorted(parameters), error=str(exc))
        raise
