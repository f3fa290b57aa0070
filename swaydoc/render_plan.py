"""Site-wide options shared by every render call."""

from dataclasses import dataclass
from typing import Any

from swaydoc.asset_names import DEFAULT_THEME


@dataclass(frozen=True)
class RenderPlan:
    """Read-only configuration for one rendering pass."""

    site_name: str = "Sway"
    generator: str = "swaydoc"
    theme: str = DEFAULT_THEME
    keywords: tuple[str, ...] = ("sway", "swaylang", "sway-lang")
    check_anchors: bool = True
    module_pages: bool = True
    max_workers: int | None = None

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "RenderPlan":
        """Build a plan from a merged configuration dictionary."""
        site = config.get("site") or {}
        render = config.get("render") or {}
        defaults = cls()
        return cls(
            site_name=str(site.get("name", defaults.site_name)),
            generator=str(site.get("generator", defaults.generator)),
            theme=str(site.get("theme", defaults.theme)),
            keywords=tuple(site.get("keywords", defaults.keywords)),
            check_anchors=bool(render.get("check_anchors", defaults.check_anchors)),
            module_pages=bool(render.get("module_pages", defaults.module_pages)),
            max_workers=_max_workers(render.get("max_workers", defaults.max_workers)),
        )


def _max_workers(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"render.max_workers must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return value
