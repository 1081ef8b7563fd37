# =============================================
# 📁 affectiq/core/build_graph/propagation.py
# =============================================
import logging
from collections import deque
from typing import AbstractSet, Dict, Iterable, Iterator, List, Mapping, Set

from .workspace_graph import WorkspaceGraph

logger = logging.getLogger(__name__)


def propagate(graph: WorkspaceGraph, initial: AbstractSet[str]) -> Set[str]:
    """
    Expands `initial` to every project that transitively depends on a member of it.

    Breadth-first over the reverse adjacency in `graph`; each project is enqueued at
    most once so the walk is linear in projects plus edges. Names in `initial` that
    are not part of the graph are carried through unchanged.
    """
    seen = [False] * len(graph)
    queue = deque()
    for i in sorted(graph.indices_of(initial)):
        seen[i] = True
        queue.append(i)

    while queue:
        current = queue.popleft()
        for dependent in graph.dependents[current]:
            if seen[dependent]:
                continue
            seen[dependent] = True
            queue.append(dependent)
            logger.debug(
                f"  -> Marking {graph.names[dependent]} dirty because it depends on {graph.names[current]}"
            )

    dirty = {graph.names[i] for i, flag in enumerate(seen) if flag}
    return dirty | set(initial)


def iter_passes(
    projects: Iterable[str],
    dependencies: Mapping[str, Iterable[str]],
    initial: AbstractSet[str],
) -> Iterator[Set[str]]:
    """
    Yields the dirty set after each full scan, stopping after the first pass that adds nothing.

    A pass visits every project not yet dirty and adds it when one of its direct
    dependencies is dirty. Projects added earlier in a pass are visible to later
    projects in the same pass.
    """
    order: List[str] = list(projects)
    deps: Dict[str, Set[str]] = {name: set(dependencies.get(name) or ()) for name in order}
    dirty = set(initial)

    while True:
        found = False
        for project in order:
            if project in dirty:
                continue
            if deps[project] & dirty:
                dirty.add(project)
                found = True
        yield set(dirty)
        if not found:
            return


def propagate_full_scan(
    projects: Iterable[str],
    dependencies: Mapping[str, Iterable[str]],
    initial: AbstractSet[str],
) -> Set[str]:
    """Reference fixed-point closure by repeated full scans. Same result as `propagate`."""
    dirty = set(initial)
    for dirty in iter_passes(projects, dependencies, initial):
        pass
    return dirty
