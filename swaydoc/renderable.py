"""The capability shared by every page component."""

from typing import Protocol

from markupsafe import Markup

from swaydoc.render_plan import RenderPlan


class Renderable(Protocol):
    """Anything that turns into a markup fragment, or raises ``RenderError``."""

    def render(self, render_plan: RenderPlan) -> Markup: ...
