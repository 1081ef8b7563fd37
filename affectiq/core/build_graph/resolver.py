# ========================================
# 📁 affectiq/core/build_graph/resolver.py
# ========================================
import logging
from typing import List, Sequence, Set, Tuple

from ...interfaces.types.workspace import Workspace
from .workspace_graph import validate_locations

logger = logging.getLogger(__name__)


def resolve_with_leftovers(workspace: Workspace, changed_files: Sequence[str]) -> Tuple[Set[str], List[str]]:
    """
    Attributes changed files to the projects that own them.

    Projects are visited deepest location first and each file is consumed by the
    first project whose location prefixes it, so a file inside a nested project
    never also dirties its parent. Returns the dirty names and the files no
    project claimed.
    """
    validate_locations(workspace)

    ordered = sorted(workspace.items(), key=lambda item: len(item[1]["location"]), reverse=True)
    remaining = list(changed_files)
    dirty: Set[str] = set()

    logger.debug("File locations:")
    for name, project in ordered:
        location = project["location"]
        unconsumed: List[str] = []
        for changed_file in remaining:
            if changed_file.startswith(location):
                dirty.add(name)
                logger.debug(f"  -> {location}: {changed_file}")
            else:
                unconsumed.append(changed_file)
        remaining = unconsumed
        if not remaining:
            break

    return dirty, remaining


def resolve(workspace: Workspace, changed_files: Sequence[str]) -> Set[str]:
    """Returns the names of projects directly owning at least one changed file."""
    dirty, _ = resolve_with_leftovers(workspace, changed_files)
    return dirty
