"""Data model for sidebar and index links."""

from dataclasses import dataclass

from markupsafe import Markup

from swaydoc.block_title import BlockTitle


@dataclass(frozen=True)
class DocLink:
    """A named link, grouped under a block title."""

    name: str
    href: str  # "#structfield.x" in-page, or "struct.Point.html" across pages
    title: BlockTitle
    preview: Markup | None = None


def group_doc_links(
    doc_links: list[DocLink],
) -> list[tuple[BlockTitle, list[DocLink]]]:
    """Group links by title, keeping first-seen title order and link order."""
    groups: dict[BlockTitle, list[DocLink]] = {}
    for link in doc_links:
        groups.setdefault(link.title, []).append(link)
    return list(groups.items())
