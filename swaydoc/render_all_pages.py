"""Renders every item and module page concurrently."""

import logging
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from functools import partial

from markupsafe import Markup

from swaydoc.build_module_graph import build_module_graph
from swaydoc.doc_item import DocItem
from swaydoc.module_index import ModuleIndex
from swaydoc.module_info import ModuleInfo
from swaydoc.render_document import render_document
from swaydoc.render_error import RenderError
from swaydoc.render_plan import RenderPlan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedPage:
    """A finished HTML document and where it belongs in the site."""

    page_path: str
    html: str


@dataclass
class RenderOutcome:
    """Pages that rendered, and the error message for each page that did not."""

    pages: list[RenderedPage] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)


def render_item_page(item: DocItem, render_plan: RenderPlan) -> str:
    """Render the full HTML document for one item."""
    return render_document([item.header(), item.body()], render_plan)


def render_module_page(index: ModuleIndex, render_plan: RenderPlan) -> str:
    """Render the full HTML document for one module landing page."""
    return render_document([index.header(render_plan), index], render_plan)


def render_all_pages(
    items: Iterable[DocItem],
    render_plan: RenderPlan,
    module_docs: Mapping[ModuleInfo, Markup] | None = None,
) -> RenderOutcome:
    """Render all pages on a thread pool.

    A page that raises ``RenderError`` is logged and reported in
    ``failures``; the remaining pages are unaffected.
    """
    unique: dict[str, DocItem] = {}
    for item in items:
        if item.page_path in unique:
            logger.warning("Duplicate page %s, keeping the first item", item.page_path)
            continue
        unique[item.page_path] = item

    jobs: dict[str, Callable[[], str]] = {
        page_path: partial(render_item_page, item, render_plan)
        for page_path, item in unique.items()
    }
    if render_plan.module_pages:
        for index in _module_indexes(list(unique.values()), module_docs or {}):
            jobs[index.module_info.index_path()] = partial(
                render_module_page, index, render_plan
            )

    outcome = RenderOutcome()
    logger.debug("Rendering %d pages", len(jobs))
    with ThreadPoolExecutor(max_workers=render_plan.max_workers) as executor:
        futures: dict[Future[str], str] = {
            executor.submit(job): page_path for page_path, job in jobs.items()
        }
        for future in as_completed(futures):
            page_path = futures[future]
            try:
                html = future.result()
            except RenderError as e:
                logger.error("Failed to render %s: %s", page_path, e)
                outcome.failures[page_path] = str(e)
                continue
            outcome.pages.append(RenderedPage(page_path, html))

    outcome.pages.sort(key=lambda p: p.page_path)
    return outcome


def _module_indexes(
    items: list[DocItem],
    module_docs: Mapping[ModuleInfo, Markup],
) -> list[ModuleIndex]:
    """Build an index page for every module that holds items, and its ancestors."""
    by_module: dict[ModuleInfo, list[DocItem]] = {}
    for item in items:
        by_module.setdefault(item.module_info, []).append(item)

    graph = build_module_graph([*by_module, *module_docs])
    return [
        ModuleIndex(
            module_info=module,
            items=tuple(by_module.get(module, [])),
            child_modules=tuple(children),
            attrs_opt=module_docs.get(module),
        )
        for module, children in graph.items()
    ]
