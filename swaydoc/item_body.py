"""The ``<body>`` region of an item page."""

from dataclasses import dataclass, field

from markupsafe import Markup

from swaydoc.asset_names import HIGHLIGHT_JS
from swaydoc.decl_kind import DeclKind
from swaydoc.doc_style import ItemStyle
from swaydoc.item_context import ItemContext
from swaydoc.module_info import ModuleInfo, is_path_segment
from swaydoc.render_error import PathResolutionError
from swaydoc.render_plan import RenderPlan
from swaydoc.sidebar import Sidebar
from swaydoc.template_env import render_fragment


@dataclass(frozen=True)
class ItemBody:
    """All necessary components to render the body of an item page.

    Most of the page structure is the same for every item; the sidebar links
    and the context region (struct fields, trait methods, ...) vary.
    """

    module_info: ModuleInfo
    decl_kind: DeclKind
    item_name: str
    code_str: str
    attrs_opt: Markup | None = None
    item_context: ItemContext = field(default_factory=ItemContext)

    def sidebar(self) -> Sidebar:
        """Item-style sidebar listing this page's context links."""
        style = ItemStyle(title=self.decl_kind.as_block_title(), name=self.item_name)
        return Sidebar(style, self.module_info, self.item_context.to_doclinks())

    def render(self, render_plan: RenderPlan) -> Markup:
        """HTML body component."""
        if not is_path_segment(self.item_name):
            msg = f"Cannot use item name {self.item_name!r} as a file name"
            raise PathResolutionError(msg)
        sidebar = self.sidebar().render(render_plan)
        item_context = None
        if self.item_context.has_content():
            item_context = self.item_context.render(render_plan)
        module_anchors = self.module_info.get_anchors()
        decl_ty = self.decl_kind.doc_name

        return render_fragment(
            "item_body.html",
            decl_ty=decl_ty,
            sidebar=sidebar,
            item_title=self.decl_kind.as_block_title().item_title_str(),
            module_anchors=module_anchors,
            item_name=self.item_name,
            code_str=self.code_str,
            description=None if self.attrs_opt is None else Markup(self.attrs_opt),
            item_context=item_context,
            highlight_js=self.module_info.asset_path(HIGHLIGHT_JS),
        )
