"""Shared jinja2 environment for the page templates."""

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from swaydoc.render_error import RenderError

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=1)
def template_env() -> Environment:
    """Build the environment once; compiled templates are reused across threads."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_fragment(template_name: str, **context: Any) -> Markup:
    """Render a template into a markup fragment."""
    try:
        template = template_env().get_template(template_name)
        return Markup(template.render(**context))
    except TemplateError as e:
        msg = f"Template {template_name} failed: {e}"
        raise RenderError(msg) from e
