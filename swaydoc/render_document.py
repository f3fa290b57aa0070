"""Assembles rendered regions into a complete HTML document."""

from collections.abc import Sequence

from swaydoc.render_plan import RenderPlan
from swaydoc.renderable import Renderable
from swaydoc.template_env import render_fragment


def render_document(parts: Sequence[Renderable], render_plan: RenderPlan) -> str:
    """Render each part in order and wrap them in an ``<html>`` document.

    Either every part renders or the ``RenderError`` propagates and nothing
    is returned.
    """
    rendered = [part.render(render_plan) for part in parts]
    return str(render_fragment("page.html", parts=rendered))
