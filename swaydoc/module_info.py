"""A module's position in the documentation tree and the links it implies.

Every generated file lives in the directory named by its module path, so a
page in ``mypkg::data`` is written to ``mypkg/data/`` and needs two ``../``
hops to get back to the site root. All links leaving a page go through
``to_html_shorthand_path_string`` so the hop count is computed in one place.
"""

from dataclasses import dataclass

from markupsafe import Markup

from swaydoc.asset_names import ASSETS_DIR
from swaydoc.render_error import PathResolutionError

MODULE_SEPARATOR = "::"
INDEX_FILENAME = "index.html"

_ANCHOR_HTML = Markup('<a class="mod" href="{}">{}</a><span>::</span>')


def is_path_segment(name: str) -> bool:
    """Whether ``name`` can stand alone as one directory or file name."""
    return bool(name) and name not in {".", ".."} and not set(name) & {"/", "\\"}


@dataclass(frozen=True)
class ModuleInfo:
    """Path segments from the site root to the module holding an item."""

    module_prefixes: tuple[str, ...] = ()

    @classmethod
    def from_location(cls, location: str) -> "ModuleInfo":
        """Parse a display path such as ``mypkg::data``."""
        location = location.strip()
        if not location:
            return cls()
        return cls(tuple(p.strip() for p in location.split(MODULE_SEPARATOR)))

    @property
    def depth(self) -> int:
        """Number of directories between the site root and this module."""
        return len(self.module_prefixes)

    def location(self) -> str:
        """Display path, e.g. ``mypkg::data``; empty for the site root."""
        return MODULE_SEPARATOR.join(self.module_prefixes)

    def module_name(self) -> str:
        """Last path segment, empty for the site root."""
        return self.module_prefixes[-1] if self.module_prefixes else ""

    def parent(self) -> "ModuleInfo | None":
        """Enclosing module, or None at the site root."""
        if not self.module_prefixes:
            return None
        return ModuleInfo(self.module_prefixes[:-1])

    def child(self, name: str) -> "ModuleInfo":
        """Module nested directly below this one."""
        return ModuleInfo((*self.module_prefixes, name))

    def root_prefix(self) -> str:
        """Relative prefix from this module's directory to the site root."""
        return "../" * self.depth

    def to_html_shorthand_path_string(self, path: str) -> str:
        """Make a site-root-relative path usable from a page in this module."""
        return f"{self.root_prefix()}{path}"

    def asset_path(self, asset_name: str) -> str:
        """Link to a shared asset, e.g. ``../../assets/normalize.css``."""
        return self.to_html_shorthand_path_string(f"{ASSETS_DIR}/{asset_name}")

    def file_path_at_location(self, file_name: str) -> str:
        """Site-root-relative path of a file stored in this module."""
        return "/".join((*self.module_prefixes, file_name))

    def index_path(self) -> str:
        """Site-root-relative path of this module's index page."""
        return self.file_path_at_location(INDEX_FILENAME)

    def to_html_path(self, target: "ModuleInfo", file_name: str) -> str:
        """Link from a page in this module to ``file_name`` in ``target``.

        Targets in this module or below it get a direct downward path; any
        other target goes through the site root.
        """
        depth = self.depth
        if target.module_prefixes[:depth] == self.module_prefixes:
            return "/".join((*target.module_prefixes[depth:], file_name))
        return self.to_html_shorthand_path_string(
            target.file_path_at_location(file_name)
        )

    def breadcrumb_anchors(self) -> list[tuple[str, str]]:
        """One (label, href) per segment, each pointing at that module's index."""
        anchors = []
        for i, prefix in enumerate(self.module_prefixes, start=1):
            target = ModuleInfo(self.module_prefixes[:i])
            href = self.to_html_shorthand_path_string(target.index_path())
            anchors.append((prefix, href))
        return anchors

    def get_anchors(self) -> list[Markup]:
        """Render the breadcrumb anchors shown in a page's main heading."""
        for prefix in self.module_prefixes:
            if not is_path_segment(prefix):
                msg = f"Cannot resolve module path {self.module_prefixes!r}"
                raise PathResolutionError(msg)
        return [
            _ANCHOR_HTML.format(href, label)
            for label, href in self.breadcrumb_anchors()
        ]
