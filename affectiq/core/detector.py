# ================================
# 📁 affectiq/core/detector.py
# ================================
from typing import Dict, List, Optional, Sequence, Set

from pydantic import BaseModel, Field

from ..interfaces.types.workspace import DetectionOutput, Workspace
from ..providers.base import DependencyProvider
from ..shared.app_logger import get_app_logger
from ..shared.tracing import get_tracer
from .build_graph import (
    WorkspaceGraph,
    all_projects,
    always_dirty_files,
    assemble,
    declared_dependencies,
    propagate,
    resolve_with_leftovers,
    validate_locations,
)
from .config import DetectConfig
from .dependency_graph import build_dependency_graph

logger = get_app_logger(__name__)
_tracer = get_tracer(__name__)


class DetectionResult(BaseModel):
    projects: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    direct: List[str] = Field(default_factory=list)
    always_dirty_files: List[str] = Field(default_factory=list)
    unmatched_files: List[str] = Field(default_factory=list)

    def output(self) -> DetectionOutput:
        return {name: {"name": entry["name"], "path": entry["path"]} for name, entry in self.projects.items()}


async def detect(
    workspace: Workspace,
    changed_files: Sequence[str],
    config: Optional[DetectConfig] = None,
    dependency_provider: Optional[DependencyProvider] = None,
    root: Optional[str] = None,
) -> DetectionResult:
    """
    Computes the dirty projects for a changeset.

    With no dependency_provider the workspace-declared dependencies are used. Any
    collaborator failure propagates; no partial result is produced.
    """
    config = config or DetectConfig()
    validate_locations(workspace)

    with _tracer.start_as_current_span("affectiq.always_dirty_gate") as span:
        triggering = always_dirty_files(changed_files, config.compiled_patterns())
        span.set_attribute("affectiq.always_dirty_count", len(triggering))
    if triggering:
        listing = "\n".join(triggering)
        logger.info(f"Detected always build file changes, assuming whole workspace is dirty: \n{listing}")
        dirty_all = all_projects(workspace)
        return DetectionResult(
            projects=assemble(workspace, dirty_all),
            direct=sorted(dirty_all),
            always_dirty_files=triggering,
        )

    with _tracer.start_as_current_span("affectiq.resolve_changes") as span:
        direct, unmatched = resolve_with_leftovers(workspace, changed_files)
        span.set_attribute("affectiq.direct_count", len(direct))
    if unmatched:
        logger.debug(f"{len(unmatched)} changed file(s) outside every project: {', '.join(unmatched)}")

    if not direct:
        logger.info("No changed files belong to a workspace project.")
        return DetectionResult(unmatched_files=unmatched)

    logger.info(f"Dirty projects by default: {', '.join(sorted(direct))}")

    if not config.transitive:
        return DetectionResult(projects=assemble(workspace, direct), direct=sorted(direct), unmatched_files=unmatched)

    with _tracer.start_as_current_span("affectiq.dependency_graph") as span:
        if dependency_provider is None:
            dependencies = declared_dependencies(workspace)
        else:
            if root is None:
                root = config.root or "."
            dependencies = await build_dependency_graph(workspace, dependency_provider, root, config.parallelism)
        span.set_attribute("affectiq.project_count", len(dependencies))

    with _tracer.start_as_current_span("affectiq.propagate") as span:
        dirty: Set[str] = propagate(WorkspaceGraph(workspace, dependencies), direct)
        span.set_attribute("affectiq.dirty_count", len(dirty))
    logger.info(f"{len(dirty)} dirty project(s) after following dependents.")

    return DetectionResult(projects=assemble(workspace, dirty), direct=sorted(direct), unmatched_files=unmatched)
