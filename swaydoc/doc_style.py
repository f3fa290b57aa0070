"""What kind of page a sidebar belongs to."""

from dataclasses import dataclass

from swaydoc.block_title import BlockTitle


@dataclass(frozen=True)
class IndexStyle:
    """Landing page of a module, or of the whole site when ``title`` is None."""

    title: str | None = None


@dataclass(frozen=True)
class ItemStyle:
    """Page of a single declaration."""

    title: BlockTitle
    name: str


DocStyle = IndexStyle | ItemStyle
