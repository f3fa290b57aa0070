"""Render a Sway item manifest into a static HTML documentation site."""

import argparse
import logging
from pathlib import Path

from swaydoc.asset_names import site_asset_paths
from swaydoc.load_config import load_config
from swaydoc.load_item_manifest import load_item_manifest
from swaydoc.render_all_pages import render_all_pages
from swaydoc.render_plan import RenderPlan
from swaydoc.write_pages import write_pages

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """Execute the rendering pipeline."""
    if not args.manifest.exists():
        msg = f"Item manifest not found: {args.manifest}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.jobs is not None:
        config["render"]["max_workers"] = args.jobs
    if args.no_module_pages:
        config["render"]["module_pages"] = False
    try:
        render_plan = RenderPlan.from_config(config)
    except ValueError as e:
        msg = f"Invalid configuration: {e}"
        raise SystemExit(msg) from e

    manifest = load_item_manifest(args.manifest)
    print(f"Rendering {len(manifest.items)} items...")
    outcome = render_all_pages(manifest.items, render_plan, manifest.module_docs)

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_pages(out_root, outcome.pages)

    print(f"Generated {written} HTML pages into: {out_root}")
    assets = site_asset_paths(render_plan.theme)
    missing = [a for a in assets if not (out_root / a).exists()]
    if missing:
        logger.info("Assets still to be packaged: %s", ", ".join(missing))
    if outcome.failures:
        print(f"{len(outcome.failures)} pages failed to render:")
        for page_path, error in sorted(outcome.failures.items()):
            print(f"  {page_path}: {error}")
        return 1
    return 0


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        msg = f"expected a positive integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run."""
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument(
        "manifest",
        type=Path,
        help="YAML manifest of extracted items",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory (the documentation site root)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--jobs",
        type=_positive_int,
        default=None,
        help="Maximum number of pages rendered in parallel",
    )
    ap.add_argument(
        "--no-module-pages",
        action="store_true",
        help="Skip generating module index.html landing pages",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
