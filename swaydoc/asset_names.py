"""Canonical names of the static assets every generated page links to.

The packaging step writes these files under ``ASSETS_DIR`` at the site root;
pages reach them through ``ModuleInfo.asset_path``.
"""

ASSETS_DIR = "assets"

FAVICON = "sway-logo.svg"
NORMALIZE_CSS = "normalize.css"
SYNTAX_THEME_CSS = "ayu.css"
SYNTAX_THEME_MIN_CSS = "ayu.min.css"
HIGHLIGHT_JS = "highlight.js"

DEFAULT_THEME = "swaydoc"


def theme_stylesheet(theme: str = DEFAULT_THEME) -> str:
    """Return the stylesheet name for a site theme."""
    return f"{theme}.css"


def site_asset_paths(theme: str = DEFAULT_THEME) -> list[str]:
    """List every asset path (relative to the site root) a page references."""
    names = [
        FAVICON,
        NORMALIZE_CSS,
        theme_stylesheet(theme),
        SYNTAX_THEME_CSS,
        SYNTAX_THEME_MIN_CSS,
        HIGHLIGHT_JS,
    ]
    return [f"{ASSETS_DIR}/{n}" for n in names]
