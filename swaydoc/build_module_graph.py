"""Logic for building the module tree from documented items."""

from collections.abc import Iterable

from swaydoc.module_info import ModuleInfo


def build_module_graph(
    modules: Iterable[ModuleInfo],
) -> dict[ModuleInfo, set[ModuleInfo]]:
    """Build a mapping of every module (ancestors included) to its children."""
    module_children: dict[ModuleInfo, set[ModuleInfo]] = {ModuleInfo(): set()}
    for module in modules:
        current = module
        module_children.setdefault(current, set())
        parent = current.parent()
        while parent is not None:
            module_children.setdefault(parent, set()).add(current)
            current, parent = parent, parent.parent()
    return module_children
