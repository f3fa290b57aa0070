"""Minimal HTML inspection helpers for rendered pages."""

from dataclasses import dataclass, field
from html.parser import HTMLParser

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(eq=False)
class ProbedElement:
    """One start tag, its ancestors and the text it encloses."""

    tag: str
    attrs: dict[str, str | None]
    ancestors: tuple["ProbedElement", ...]
    chunks: list[str] = field(default_factory=list)

    @property
    def classes(self) -> set[str]:
        """Class names on the element."""
        return set((self.attrs.get("class") or "").split())

    @property
    def text(self) -> str:
        """All text inside the element, markup stripped."""
        return "".join(self.chunks)

    def inside(self, tag: str, cls: str | None = None) -> bool:
        """Whether an ancestor has ``tag`` (and ``cls``, when given)."""
        return any(
            a.tag == tag and (cls is None or cls in a.classes) for a in self.ancestors
        )


class _PageProbe(HTMLParser):
    """Records every element with the elements still open around it."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.elements: list[ProbedElement] = []
        self._open: list[ProbedElement] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        el = ProbedElement(tag, dict(attrs), tuple(self._open))
        self.elements.append(el)
        if tag not in VOID_ELEMENTS:
            self._open.append(el)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.elements.append(ProbedElement(tag, dict(attrs), tuple(self._open)))

    def handle_endtag(self, tag: str) -> None:
        for i in range(len(self._open) - 1, -1, -1):
            if self._open[i].tag == tag:
                del self._open[i:]
                return

    def handle_data(self, data: str) -> None:
        for el in self._open:
            el.chunks.append(data)


def probe(html: str) -> list[ProbedElement]:
    """Parse ``html`` into a flat list of elements in document order."""
    parser = _PageProbe()
    parser.feed(html)
    parser.close()
    return parser.elements


def find_all(
    elements: list[ProbedElement], tag: str, cls: str | None = None
) -> list[ProbedElement]:
    """Elements with ``tag`` (and ``cls``, when given)."""
    return [e for e in elements if e.tag == tag and (cls is None or cls in e.classes)]


def links(html: str) -> list[str]:
    """Every href/src value in document order."""
    out = []
    for el in probe(html):
        for key in ("href", "src"):
            value = el.attrs.get(key)
            if value is not None:
                out.append(value)
    return out


def sidebar_fragment_links(html: str) -> list[str]:
    """In-page (#...) link targets inside the sidebar navigation."""
    return [
        a.attrs["href"] or ""
        for a in find_all(probe(html), "a")
        if a.inside("nav", "sidebar") and (a.attrs.get("href") or "").startswith("#")
    ]
