"""Optional substructure of an item: fields, variants, methods."""

from dataclasses import dataclass, field
from enum import Enum

from markupsafe import Markup, escape

from swaydoc.block_title import BlockTitle
from swaydoc.doc_link import DocLink
from swaydoc.render_error import ContextInvariantError
from swaydoc.render_plan import RenderPlan
from swaydoc.template_env import render_fragment


class ContextKind(Enum):
    """Kind of substructure, which fixes its title and anchor prefix."""

    STRUCT_FIELDS = "fields"
    STORAGE_FIELDS = "storage_fields"
    ENUM_VARIANTS = "variants"
    REQUIRED_METHODS = "required_methods"
    ABI_METHODS = "abi_methods"

    @property
    def anchor_prefix(self) -> str:
        return _ANCHOR_PREFIXES[self]

    @property
    def block_title(self) -> BlockTitle:
        return _BLOCK_TITLES[self]


_ANCHOR_PREFIXES: dict[ContextKind, str] = {
    ContextKind.STRUCT_FIELDS: "structfield",
    ContextKind.STORAGE_FIELDS: "storagefield",
    ContextKind.ENUM_VARIANTS: "variant",
    ContextKind.REQUIRED_METHODS: "tymethod",
    ContextKind.ABI_METHODS: "tymethod",
}

_BLOCK_TITLES: dict[ContextKind, BlockTitle] = {
    ContextKind.STRUCT_FIELDS: BlockTitle.FIELDS,
    ContextKind.STORAGE_FIELDS: BlockTitle.FIELDS,
    ContextKind.ENUM_VARIANTS: BlockTitle.VARIANTS,
    ContextKind.REQUIRED_METHODS: BlockTitle.REQUIRED_METHODS,
    ContextKind.ABI_METHODS: BlockTitle.METHODS,
}


@dataclass(frozen=True)
class ContextEntry:
    """One field, variant or method signature."""

    name: str
    code_str: str  # e.g. "x: u64"
    description: Markup | None = None


@dataclass(frozen=True)
class Context:
    """Substructure entries, in declaration order."""

    kind: ContextKind
    entries: tuple[ContextEntry, ...] = field(default_factory=tuple)

    def anchor_for(self, entry: ContextEntry) -> str:
        return f"{self.kind.anchor_prefix}.{entry.name}"


@dataclass(frozen=True)
class ItemContext:
    """The substructure region of an item page, if the item has one."""

    context_opt: Context | None = None

    def has_content(self) -> bool:
        """True when there is at least one entry to show."""
        return self.context_opt is not None and bool(self.context_opt.entries)

    def to_doclinks(self) -> list[DocLink]:
        """In-page links to each entry, in the order ``render`` emits them."""
        if not self.has_content():
            return []
        context = self.context_opt
        return [
            DocLink(
                name=entry.name,
                href=f"#{context.anchor_for(entry)}",
                title=context.kind.block_title,
            )
            for entry in context.entries
        ]

    def render(self, render_plan: RenderPlan) -> Markup | None:
        """Render the substructure, or None when there is nothing to show."""
        if not self.has_content():
            return None
        context = self.context_opt
        title = context.kind.block_title
        fragment = render_fragment(
            "item_context.html",
            section_id=title.html_title_string(),
            section_title=title.as_str(),
            entry_class=context.kind.anchor_prefix,
            entries=[(context.anchor_for(e), e) for e in context.entries],
        )
        if render_plan.check_anchors:
            verify_doclink_anchors(fragment, self.to_doclinks())
        return fragment


def verify_doclink_anchors(fragment: Markup, doc_links: list[DocLink]) -> None:
    """Raise if any in-page link targets an id missing from ``fragment``."""
    for link in doc_links:
        if not link.href.startswith("#"):
            continue
        anchor_id = f'id="{escape(link.href[1:])}"'
        if anchor_id not in fragment:
            msg = f"Doc link {link.href!r} has no matching anchor on the page"
            raise ContextInvariantError(msg)
