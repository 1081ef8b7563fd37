from .workspace_graph import WorkspaceGraph, validate_locations, declared_dependencies
from .resolver import resolve, resolve_with_leftovers
from .gate import check as always_dirty_triggered, matching_files as always_dirty_files, all_projects
from .propagation import propagate, propagate_full_scan, iter_passes
from .assembler import assemble

__all__ = [
    "WorkspaceGraph",
    "validate_locations",
    "declared_dependencies",
    "resolve",
    "resolve_with_leftovers",
    "always_dirty_triggered",
    "always_dirty_files",
    "all_projects",
    "propagate",
    "propagate_full_scan",
    "iter_passes",
    "assemble",
]
