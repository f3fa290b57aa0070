"""Logic for writing rendered pages to disk."""

from collections.abc import Iterable
from pathlib import Path

from swaydoc.render_all_pages import RenderedPage


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Map a site-root-relative page path to a file below ``out_root``."""
    # mypkg/data/struct.Point.html -> out_root/mypkg/data/struct.Point.html
    root = out_root.resolve()
    target = (root / page_path.lstrip("/")).resolve()
    if not target.is_relative_to(root):
        msg = f"Page path {page_path!r} escapes the site root"
        raise ValueError(msg)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def write_pages(out_root: Path, pages: Iterable[RenderedPage]) -> int:
    """Write all rendered pages under ``out_root``."""
    written = 0
    for page in pages:
        out_file = output_file_for_page(out_root, page.page_path)
        out_file.write_text(page.html, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written} pages")
    return written
