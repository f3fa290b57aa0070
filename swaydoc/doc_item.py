"""Data model for a documented item handed over by the extraction pass."""

from dataclasses import dataclass, field

from markupsafe import Markup

from swaydoc.decl_kind import DeclKind
from swaydoc.item_body import ItemBody
from swaydoc.item_context import ItemContext
from swaydoc.item_header import ItemHeader
from swaydoc.module_info import ModuleInfo


@dataclass(frozen=True)
class DocItem:
    """Represents a documented declaration and everything its page needs."""

    module_info: ModuleInfo
    decl_kind: DeclKind
    item_name: str
    code_str: str
    attrs_opt: Markup | None = None
    item_context: ItemContext = field(default_factory=ItemContext)

    @property
    def html_filename(self) -> str:
        """File name inside the module directory, e.g. ``struct.Point.html``."""
        return f"{self.decl_kind.doc_name}.{self.item_name}.html"

    @property
    def page_path(self) -> str:
        """Site-root-relative output path, e.g. ``mypkg/data/struct.Point.html``."""
        return self.module_info.file_path_at_location(self.html_filename)

    def preview(self) -> Markup | None:
        """First paragraph of the description, for module index listings."""
        if self.attrs_opt is None:
            return None
        first, end, _ = str(self.attrs_opt).partition("</p>")
        return Markup(first + end)

    def header(self) -> ItemHeader:
        return ItemHeader(
            module_info=self.module_info,
            friendly_name=self.decl_kind.friendly_name,
            item_name=self.item_name,
        )

    def body(self) -> ItemBody:
        return ItemBody(
            module_info=self.module_info,
            decl_kind=self.decl_kind,
            item_name=self.item_name,
            code_str=self.code_str,
            attrs_opt=self.attrs_opt,
            item_context=self.item_context,
        )
