"""Shared fixtures for rendering tests."""

import pytest
from markupsafe import Markup

from swaydoc.decl_kind import DeclKind
from swaydoc.doc_item import DocItem
from swaydoc.item_context import Context, ContextEntry, ContextKind, ItemContext
from swaydoc.module_info import ModuleInfo
from swaydoc.render_plan import RenderPlan


@pytest.fixture
def render_plan() -> RenderPlan:
    """Default render plan."""
    return RenderPlan()


@pytest.fixture
def point_item() -> DocItem:
    """A struct two modules deep, with two fields and a description."""
    return DocItem(
        module_info=ModuleInfo(("mypkg", "data")),
        decl_kind=DeclKind.STRUCT,
        item_name="Point",
        code_str="pub struct Point {\n    x: u64,\n    y: u64,\n}",
        attrs_opt=Markup("<p>A point in 2D space.</p><p>More detail.</p>"),
        item_context=ItemContext(
            Context(
                kind=ContextKind.STRUCT_FIELDS,
                entries=(
                    ContextEntry("x", "x: u64", Markup("<p>Horizontal.</p>")),
                    ContextEntry("y", "y: u64"),
                ),
            )
        ),
    )


@pytest.fixture
def main_fn_item() -> DocItem:
    """A function at the site root without a description."""
    return DocItem(
        module_info=ModuleInfo(),
        decl_kind=DeclKind.FUNCTION,
        item_name="main",
        code_str="fn main() -> u64",
    )
