"""Tests for concurrent batch rendering and writing."""

import posixpath
from pathlib import Path

import pytest
from html_probe import links

from swaydoc.asset_names import site_asset_paths
from swaydoc.decl_kind import DeclKind
from swaydoc.doc_item import DocItem
from swaydoc.module_info import ModuleInfo
from swaydoc.render_all_pages import render_all_pages
from swaydoc.render_plan import RenderPlan
from swaydoc.write_pages import output_file_for_page, write_pages


def test_renders_items_and_module_pages(
    point_item: DocItem, main_fn_item: DocItem, render_plan: RenderPlan
) -> None:
    """Verify item pages plus an index for every module and ancestor."""
    outcome = render_all_pages([point_item, main_fn_item], render_plan)

    assert outcome.failures == {}
    assert [p.page_path for p in outcome.pages] == [
        "fn.main.html",
        "index.html",
        "mypkg/data/index.html",
        "mypkg/data/struct.Point.html",
        "mypkg/index.html",
    ]


def test_failure_is_isolated_to_one_page(
    point_item: DocItem, main_fn_item: DocItem
) -> None:
    """Verify a broken item fails alone while the others still render."""
    broken = DocItem(ModuleInfo(("mypkg", "")), DeclKind.ENUM, "Bad", "enum Bad {}")
    plan = RenderPlan(module_pages=False, max_workers=4)
    outcome = render_all_pages([point_item, broken, main_fn_item], plan)

    assert list(outcome.failures) == ["mypkg//enum.Bad.html"]
    assert "Cannot resolve module path" in outcome.failures["mypkg//enum.Bad.html"]
    assert [p.page_path for p in outcome.pages] == [
        "fn.main.html",
        "mypkg/data/struct.Point.html",
    ]


def test_item_name_with_separator_fails_alone(point_item: DocItem) -> None:
    """Verify an item name that would nest its page is reported, not written."""
    nested = DocItem(ModuleInfo(("mypkg",)), DeclKind.STRUCT, "a/b", "struct a")
    plan = RenderPlan(module_pages=False)
    outcome = render_all_pages([point_item, nested], plan)

    assert list(outcome.failures) == ["mypkg/struct.a/b.html"]
    assert [p.page_path for p in outcome.pages] == ["mypkg/data/struct.Point.html"]


def test_duplicate_pages_keep_first(point_item: DocItem) -> None:
    """Verify two items mapping to one file do not both get written."""
    plan = RenderPlan(module_pages=False)
    outcome = render_all_pages([point_item, point_item], plan)
    assert len(outcome.pages) == 1


def test_duplicate_items_listed_once_in_module_index(
    point_item: DocItem, render_plan: RenderPlan
) -> None:
    """Verify a dropped duplicate does not reappear in its module listing."""
    single = render_all_pages([point_item], render_plan)
    doubled = render_all_pages([point_item, point_item], render_plan)

    assert doubled.pages == single.pages
    index = next(p for p in doubled.pages if p.page_path == "mypkg/data/index.html")
    # one sidebar link and one listing row
    assert index.html.count('<a href="struct.Point.html">Point</a>') == 2


def test_many_items_render_concurrently(render_plan: RenderPlan) -> None:
    """Verify a larger fan-out produces one page per item, deterministically."""
    items = [
        DocItem(ModuleInfo(("pkg", f"m{i % 5}")), DeclKind.FUNCTION, f"f{i}", "fn")
        for i in range(60)
    ]
    plan = RenderPlan(module_pages=False, max_workers=8)
    first = render_all_pages(items, plan)
    second = render_all_pages(items, plan)

    assert len(first.pages) == 60
    assert first.pages == second.pages


def test_written_site_has_no_broken_links(
    tmp_path: Path, point_item: DocItem, main_fn_item: DocItem, render_plan: RenderPlan
) -> None:
    """Verify every relative link in every written page lands on a real file."""
    outcome = render_all_pages([point_item, main_fn_item], render_plan)
    written = write_pages(tmp_path, outcome.pages)
    assert written == len(outcome.pages)

    site_files = {p.page_path for p in outcome.pages} | set(site_asset_paths())
    for page in outcome.pages:
        assert (tmp_path / page.page_path).read_text(encoding="utf-8") == page.html
        page_dir = posixpath.dirname(page.page_path)
        for href in links(page.html):
            if href.startswith("#"):
                continue
            target = posixpath.normpath(posixpath.join(page_dir, href))
            assert target in site_files, f"{page.page_path} -> {href}"


def test_output_file_stays_inside_site_root(tmp_path: Path) -> None:
    """Verify page paths cannot write outside the output directory."""
    assert output_file_for_page(tmp_path, "a/b/index.html") == (
        tmp_path.resolve() / "a" / "b" / "index.html"
    )
    assert (tmp_path / "a" / "b").is_dir()
    with pytest.raises(ValueError, match="escapes the site root"):
        output_file_for_page(tmp_path, "../outside.html")
