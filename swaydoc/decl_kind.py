"""Classification of documented declarations."""

from enum import Enum

from swaydoc.block_title import BlockTitle


class DeclKind(Enum):
    """The kind of declaration a page documents.

    The value is the kind tag ("doc name") used in CSS classes and in item
    file names such as ``struct.Point.html``; it must never change.
    """

    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    ABI = "abi"
    STORAGE = "storage"
    FUNCTION = "fn"
    CONSTANT = "constant"
    TYPE_ALIAS = "type"

    @property
    def doc_name(self) -> str:
        """Short kind tag."""
        return self.value

    @property
    def friendly_name(self) -> str:
        """Human readable kind, used in prose such as meta descriptions."""
        return _FRIENDLY_NAMES[self]

    def as_block_title(self) -> BlockTitle:
        """Block title grouping declarations of this kind."""
        return _BLOCK_TITLES[self]

    @classmethod
    def from_doc_name(cls, tag: str) -> "DeclKind":
        """Look up a kind by its tag, accepting a few common spellings."""
        key = tag.strip().lower()
        key = _ALIASES.get(key, key)
        return cls(key)


_FRIENDLY_NAMES: dict[DeclKind, str] = {
    DeclKind.STRUCT: "struct",
    DeclKind.ENUM: "enum",
    DeclKind.TRAIT: "trait",
    DeclKind.ABI: "ABI",
    DeclKind.STORAGE: "contract storage",
    DeclKind.FUNCTION: "function",
    DeclKind.CONSTANT: "constant",
    DeclKind.TYPE_ALIAS: "type alias",
}

_BLOCK_TITLES: dict[DeclKind, BlockTitle] = {
    DeclKind.STRUCT: BlockTitle.STRUCTS,
    DeclKind.ENUM: BlockTitle.ENUMS,
    DeclKind.TRAIT: BlockTitle.TRAITS,
    DeclKind.ABI: BlockTitle.ABI,
    DeclKind.STORAGE: BlockTitle.CONTRACT_STORAGE,
    DeclKind.FUNCTION: BlockTitle.FUNCTIONS,
    DeclKind.CONSTANT: BlockTitle.CONSTANTS,
    DeclKind.TYPE_ALIAS: BlockTitle.TYPE_ALIASES,
}

_ALIASES = {
    "function": "fn",
    "const": "constant",
    "type_alias": "type",
    "type alias": "type",
}
