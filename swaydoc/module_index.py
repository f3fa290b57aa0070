"""Landing pages for modules and for the site root."""

from dataclasses import dataclass, field

from markupsafe import Markup

from swaydoc.asset_names import HIGHLIGHT_JS
from swaydoc.block_title import BlockTitle
from swaydoc.doc_item import DocItem
from swaydoc.doc_link import DocLink, group_doc_links
from swaydoc.doc_style import IndexStyle
from swaydoc.item_header import ItemHeader
from swaydoc.module_info import INDEX_FILENAME, ModuleInfo
from swaydoc.render_plan import RenderPlan
from swaydoc.sidebar import Sidebar
from swaydoc.template_env import render_fragment

_TITLE_ORDER = {title: i for i, title in enumerate(BlockTitle)}


@dataclass(frozen=True)
class ModuleIndex:
    """Body of a module's ``index.html``: child modules and items by kind."""

    module_info: ModuleInfo
    items: tuple[DocItem, ...] = ()
    child_modules: tuple[ModuleInfo, ...] = ()
    attrs_opt: Markup | None = None

    def doc_links(self) -> list[DocLink]:
        """Links to child modules, then items grouped by kind and sorted by name."""
        links = [
            DocLink(
                name=child.module_name(),
                href=self.module_info.to_html_path(child, INDEX_FILENAME),
                title=BlockTitle.MODULES,
            )
            for child in sorted(self.child_modules, key=lambda m: m.location().lower())
        ]
        items = sorted(
            self.items,
            key=lambda it: (
                _TITLE_ORDER[it.decl_kind.as_block_title()],
                it.item_name.lower(),
            ),
        )
        links.extend(
            DocLink(
                name=it.item_name,
                href=self.module_info.to_html_path(it.module_info, it.html_filename),
                title=it.decl_kind.as_block_title(),
                preview=it.preview(),
            )
            for it in items
        )
        return links

    def sidebar(self) -> Sidebar:
        location = self.module_info.location() or None
        return Sidebar(IndexStyle(title=location), self.module_info, self.doc_links())

    def header(self, render_plan: RenderPlan) -> ItemHeader:
        return ItemHeader(
            module_info=self.module_info,
            friendly_name="module" if self.module_info.depth else "project",
            item_name=self.module_info.module_name() or render_plan.site_name,
        )

    def render(self, render_plan: RenderPlan) -> Markup:
        """HTML body of the index page."""
        is_root = self.module_info.depth == 0
        module_anchors = self.module_info.get_anchors()[:-1]
        return render_fragment(
            "module_body.html",
            sidebar=self.sidebar().render(render_plan),
            index_title="Project" if is_root else BlockTitle.MODULES.item_title_str(),
            module_anchors=module_anchors,
            module_name=self.module_info.module_name() or render_plan.site_name,
            description=None if self.attrs_opt is None else Markup(self.attrs_opt),
            sections=[
                (title.html_title_string(), title.as_str(), links)
                for title, links in group_doc_links(self.doc_links())
            ],
            highlight_js=self.module_info.asset_path(HIGHLIGHT_JS),
        )
