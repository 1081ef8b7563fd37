# ==========================================
# 📁 affectiq/core/build_graph/assembler.py
# ==========================================
from typing import AbstractSet

from ...interfaces.types.workspace import DetectionOutput, DirtyEntry, Workspace


def assemble(workspace: Workspace, dirty: AbstractSet[str]) -> DetectionOutput:
    """Maps dirty project names to {name, path} records, in workspace order."""
    result: DetectionOutput = {}
    for name, project in workspace.items():
        if name in dirty:
            result[name] = DirtyEntry(name=name, path=project["location"])
    return result
