"""Exceptions raised while rendering documentation pages."""


class RenderError(Exception):
    """A single page could not be rendered.

    Fatal for that page only; batch rendering logs it and carries on.
    """


class PathResolutionError(RenderError):
    """Module path segments cannot be turned into links."""


class ContextInvariantError(RenderError):
    """A sidebar doc link points at an anchor the page does not contain."""


class ManifestError(ValueError):
    """An item manifest entry is malformed."""
