"""Per-page navigation: breadcrumbs, location heading and doc links."""

from dataclasses import dataclass, field

from markupsafe import Markup

from swaydoc.asset_names import FAVICON
from swaydoc.doc_link import DocLink, group_doc_links
from swaydoc.doc_style import DocStyle, ItemStyle
from swaydoc.module_info import INDEX_FILENAME, ModuleInfo
from swaydoc.render_plan import RenderPlan
from swaydoc.template_env import render_fragment


@dataclass(frozen=True)
class Sidebar:
    """Navigation tree for one page.

    Doc links are rendered in the order given; callers pass them in
    declaration order.
    """

    style: DocStyle
    module_info: ModuleInfo
    doc_links: list[DocLink] = field(default_factory=list)

    def location_title(self, render_plan: RenderPlan) -> str:
        """Heading naming the current page."""
        if isinstance(self.style, ItemStyle):
            return f"{self.style.title.item_title_str()} {self.style.name}"
        return self.style.title or render_plan.site_name

    def render(self, render_plan: RenderPlan) -> Markup:
        """Render the sidebar, including an empty link shell when needed."""
        return render_fragment(
            "sidebar.html",
            root_index=self.module_info.to_html_shorthand_path_string(INDEX_FILENAME),
            logo=self.module_info.asset_path(FAVICON),
            breadcrumbs=self.module_info.breadcrumb_anchors(),
            location=self.location_title(render_plan),
            sections=[
                (title.as_str(), links)
                for title, links in group_doc_links(self.doc_links)
            ],
        )
