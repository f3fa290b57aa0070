"""Section titles used for sidebar groups and page headings."""

from enum import Enum


class BlockTitle(Enum):
    """A titled block of links on a page (e.g. "Structs", "Fields")."""

    MODULES = "Modules"
    STRUCTS = "Structs"
    ENUMS = "Enums"
    TRAITS = "Traits"
    ABI = "Abi"
    CONTRACT_STORAGE = "Contract Storage"
    CONSTANTS = "Constants"
    FUNCTIONS = "Functions"
    TYPE_ALIASES = "Type Aliases"
    FIELDS = "Fields"
    VARIANTS = "Variants"
    REQUIRED_METHODS = "Required Methods"
    METHODS = "Methods"

    def as_str(self) -> str:
        """Plural title, as shown above a group of links."""
        return self.value

    def item_title_str(self) -> str:
        """Singular title, as shown before a single item's name."""
        return _ITEM_TITLES[self]

    def html_title_string(self) -> str:
        """Lowercase, dash separated form used for ids and classes."""
        return self.value.lower().replace(" ", "-")


_ITEM_TITLES: dict[BlockTitle, str] = {
    BlockTitle.MODULES: "Module",
    BlockTitle.STRUCTS: "Struct",
    BlockTitle.ENUMS: "Enum",
    BlockTitle.TRAITS: "Trait",
    BlockTitle.ABI: "Abi",
    BlockTitle.CONTRACT_STORAGE: "Contract Storage",
    BlockTitle.CONSTANTS: "Constant",
    BlockTitle.FUNCTIONS: "Function",
    BlockTitle.TYPE_ALIASES: "Type Alias",
    BlockTitle.FIELDS: "Field",
    BlockTitle.VARIANTS: "Variant",
    BlockTitle.REQUIRED_METHODS: "Required Method",
    BlockTitle.METHODS: "Method",
}
