# ===========================================
# 📁 affectiq/core/build_graph/workspace_graph.py
# ===========================================
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Set

from ...interfaces.types.workspace import Workspace
from ..exceptions import DegenerateInputError

logger = logging.getLogger(__name__)

# Locations that would prefix-match every changed file.
_MATCH_ALL_LOCATIONS = {"", ".", "./", "/"}


def validate_locations(workspace: Workspace) -> None:
    """Rejects projects whose location would claim every file in the repository."""
    for name, project in workspace.items():
        location = (project.get("location") or "").strip()
        if location in _MATCH_ALL_LOCATIONS:
            raise DegenerateInputError(
                f"Project '{name}' has location {project.get('location')!r}, which matches every file.",
                project=name,
            )


def declared_dependencies(workspace: Workspace) -> Dict[str, Set[str]]:
    return {name: set(project.get("workspaceDependencies") or []) for name, project in workspace.items()}


class WorkspaceGraph:
    """
    Array-indexed view of a workspace.

    Projects are addressed by their position in workspace order. `dependents[i]`
    lists the indices of projects that directly depend on project i. Dependency
    names that are not workspace projects are dropped here.
    """

    def __init__(self, workspace: Workspace, dependencies: Optional[Mapping[str, Iterable[str]]] = None):
        self.names: List[str] = list(workspace.keys())
        self.locations: List[str] = [workspace[n]["location"] for n in self.names]
        self.index: Dict[str, int] = {name: i for i, name in enumerate(self.names)}

        if dependencies is None:
            dependencies = declared_dependencies(workspace)

        self.dependents: List[List[int]] = [[] for _ in self.names]
        for name, deps in dependencies.items():
            consumer = self.index.get(name)
            if consumer is None:
                continue
            for dep in set(deps):
                producer = self.index.get(dep)
                if producer is None or producer == consumer:
                    continue
                self.dependents[producer].append(consumer)

    def __len__(self) -> int:
        return len(self.names)

    def indices_of(self, names: Iterable[str]) -> Set[int]:
        return {self.index[n] for n in names if n in self.index}

    def names_of(self, indices: Iterable[int]) -> Set[str]:
        return {self.names[i] for i in indices}
