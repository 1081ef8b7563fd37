# =================================
# 📁 affectiq/providers/yarn.py
# =================================
import json
import logging
from typing import Any, Dict, Optional

from ..core.exceptions import CollaboratorFailure
from ..interfaces.types.workspace import Project, Workspace
from .process import run

logger = logging.getLogger(__name__)


def parse_workspace_info(raw: str) -> Workspace:
    """
    Parses `yarn workspaces info --json` output.

    Yarn v1 wraps the mapping as a JSON string under "data"; a bare mapping is
    accepted too.
    """
    try:
        payload: Any = json.loads(raw)
        if isinstance(payload, dict) and isinstance(payload.get("data"), str):
            payload = json.loads(payload["data"])
    except json.JSONDecodeError as e:
        raise CollaboratorFailure(f"Unparseable workspace info: {e}", collaborator="yarn") from e

    if not isinstance(payload, dict):
        raise CollaboratorFailure("Workspace info is not a JSON object.", collaborator="yarn")

    workspace: Workspace = {}
    for name, info in payload.items():
        if not isinstance(info, dict) or not isinstance(info.get("location"), str):
            raise CollaboratorFailure(f"Workspace entry '{name}' has no location.", collaborator="yarn", project=name)
        workspace[name] = Project(
            location=info["location"],
            workspaceDependencies=list(info.get("workspaceDependencies") or []),
            mismatchedWorkspaceDependencies=list(info.get("mismatchedWorkspaceDependencies") or []),
        )
    return workspace


class YarnWorkspaceProvider:
    def __init__(self, root: Optional[str] = None):
        self.root = root

    def workspace(self) -> Workspace:
        raw = run(["yarn", "workspaces", "info", "--json"], cwd=self.root, collaborator="yarn")
        workspace = parse_workspace_info(raw)
        logger.info(f"Workspace has {len(workspace)} project(s).")
        return workspace


class StaticWorkspaceProvider:
    """Serves an already-known workspace mapping."""
    def __init__(self, workspace: Dict[str, Project]):
        self._workspace = workspace

    def workspace(self) -> Workspace:
        return dict(self._workspace)
