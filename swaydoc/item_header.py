"""The ``<head>`` region of an item page."""

from dataclasses import dataclass

from markupsafe import Markup

from swaydoc.asset_names import (
    FAVICON,
    NORMALIZE_CSS,
    SYNTAX_THEME_CSS,
    SYNTAX_THEME_MIN_CSS,
    theme_stylesheet,
)
from swaydoc.module_info import ModuleInfo
from swaydoc.render_plan import RenderPlan
from swaydoc.template_env import render_fragment


@dataclass(frozen=True)
class ItemHeader:
    """All necessary components to render the header of an item page."""

    module_info: ModuleInfo
    friendly_name: str
    item_name: str

    def description(self, render_plan: RenderPlan) -> str:
        site, name = render_plan.site_name, self.item_name
        text = f"API documentation for the {site} `{name}` {self.friendly_name}"
        location = self.module_info.location()
        if location:
            text += f" in `{location}`"
        return text + "."

    def title(self, render_plan: RenderPlan) -> str:
        location = self.module_info.location()
        if location:
            return f"{self.item_name} in {location} - {render_plan.site_name}"
        return f"{self.item_name} - {render_plan.site_name}"

    def render(self, render_plan: RenderPlan) -> Markup:
        """Basic HTML header component."""
        module_info = self.module_info
        return render_fragment(
            "item_header.html",
            generator=render_plan.generator,
            description=self.description(render_plan),
            keywords=", ".join((*render_plan.keywords, self.item_name)),
            favicon=module_info.asset_path(FAVICON),
            title=self.title(render_plan),
            normalize=module_info.asset_path(NORMALIZE_CSS),
            theme=module_info.asset_path(theme_stylesheet(render_plan.theme)),
            syntax_theme=module_info.asset_path(SYNTAX_THEME_CSS),
            syntax_theme_min=module_info.asset_path(SYNTAX_THEME_MIN_CSS),
        )
