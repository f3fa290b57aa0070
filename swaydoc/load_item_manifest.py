"""Loading of the item manifest produced by the extraction pass."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from markupsafe import Markup

from swaydoc.decl_kind import DeclKind
from swaydoc.doc_item import DocItem
from swaydoc.item_context import Context, ContextEntry, ContextKind, ItemContext
from swaydoc.module_info import ModuleInfo
from swaydoc.render_error import ManifestError


@dataclass
class ItemManifest:
    """Items to document plus optional module-level descriptions."""

    items: list[DocItem] = field(default_factory=list)
    module_docs: dict[ModuleInfo, Markup] = field(default_factory=dict)


def load_item_manifest(path: Path) -> ItemManifest:
    """Load and parse a YAML item manifest."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping at the top level"
        raise ManifestError(msg)

    manifest = ItemManifest()
    for i, raw in enumerate(doc.get("items") or []):
        try:
            manifest.items.append(_parse_item(raw))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            msg = f"{path}: items[{i}] is invalid: {e}"
            raise ManifestError(msg) from e

    for raw in doc.get("modules") or []:
        if isinstance(raw, dict) and raw.get("description"):
            module_info = _parse_module(raw.get("path"))
            manifest.module_docs[module_info] = Markup(raw["description"])
    return manifest


def _parse_module(value: Any) -> ModuleInfo:
    if value is None:
        return ModuleInfo()
    if isinstance(value, list):
        return ModuleInfo(tuple(str(p) for p in value))
    return ModuleInfo.from_location(str(value))


def _optional_markup(value: Any) -> Markup | None:
    return Markup(value) if value else None


def _parse_item(raw: dict[str, Any]) -> DocItem:
    context_opt = None
    raw_context = raw.get("context")
    if raw_context:
        context_opt = Context(
            kind=ContextKind(raw_context["kind"]),
            entries=tuple(
                ContextEntry(
                    name=str(e["name"]),
                    code_str=str(e.get("code") or e["name"]),
                    description=_optional_markup(e.get("description")),
                )
                for e in raw_context.get("entries") or []
            ),
        )

    return DocItem(
        module_info=_parse_module(raw.get("module")),
        decl_kind=DeclKind.from_doc_name(str(raw["kind"])),
        item_name=str(raw["name"]),
        code_str=str(raw.get("code") or ""),
        attrs_opt=_optional_markup(raw.get("description")),
        item_context=ItemContext(context_opt),
    )
