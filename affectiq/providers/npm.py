# ================================
# 📁 affectiq/providers/npm.py
# ================================
import json
import os
import logging
from typing import Any, Dict, Set

from ..core.exceptions import CollaboratorFailure
from ..interfaces.types.workspace import Workspace
from .process import run_async

logger = logging.getLogger(__name__)


def _load_payload(raw: str, location: str) -> Dict[str, Any]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CollaboratorFailure(f"Unparseable npm list output for {location}: {e}", collaborator="npm") from e
    if not isinstance(payload, dict):
        raise CollaboratorFailure(f"npm list output for {location} is not a JSON object.", collaborator="npm")
    if "error" in payload:
        # npm --json reports its own failures as {"error": {"code": ..., "summary": ...}}
        error = payload["error"]
        detail = (error.get("summary") or error.get("code")) if isinstance(error, dict) else error
        raise CollaboratorFailure(f"npm list reported an error for {location}: {detail}", collaborator="npm")
    return payload


def _dependency_names(payload: Dict[str, Any], location: str) -> Set[str]:
    dependencies = payload.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        raise CollaboratorFailure(f"npm list 'dependencies' for {location} is not an object.", collaborator="npm")
    return set(dependencies.keys())


def parse_npm_list(raw: str, location: str = "") -> Set[str]:
    """Direct dependency names from `npm list --json` output."""
    return _dependency_names(_load_payload(raw, location), location)


class NpmDependencyProvider:
    """
    Resolved dependencies via `npm list --json --silent` in the project directory.

    npm exits non-zero for peer or extraneous problems while still printing a
    usable tree, so a non-zero exit is tolerated only when a `dependencies`
    object came back with it.
    """

    async def dependencies(self, location: str) -> Set[str]:
        code, stdout, stderr = await run_async(["npm", "list", "--json", "--silent"], cwd=location, collaborator="npm")
        if not stdout.strip():
            raise CollaboratorFailure(
                f"npm list produced no output in {location} (exit {code}): {stderr.strip() or 'no stderr'}",
                collaborator="npm",
            )
        payload = _load_payload(stdout, location)
        if code != 0:
            if not isinstance(payload.get("dependencies"), dict):
                raise CollaboratorFailure(
                    f"npm list exited {code} in {location} without a dependency tree: {stderr.strip() or 'no stderr'}",
                    collaborator="npm",
                )
            logger.debug(f"npm list exited {code} in {location}; using its output anyway.")
        return _dependency_names(payload, location)


class DeclaredDependencyProvider:
    """Dependencies as declared in the workspace (`workspaceDependencies`), without spawning processes."""

    def __init__(self, workspace: Workspace, root: str):
        self._by_path = {
            os.path.join(root, project["location"]): set(project.get("workspaceDependencies") or [])
            for project in workspace.values()
        }

    async def dependencies(self, location: str) -> Set[str]:
        if location not in self._by_path:
            raise CollaboratorFailure(f"No workspace project at {location}.", collaborator="workspace")
        return set(self._by_path[location])
