# =======================================
# 📁 affectiq/interfaces/types/workspace.py
# =======================================
from typing import TypedDict, List, Dict


class Project(TypedDict):
    location: str                              # Path prefix relative to the workspace root
    workspaceDependencies: List[str]           # Declared names of sibling projects
    mismatchedWorkspaceDependencies: List[str]


# project name -> Project, as reported by `yarn workspaces info`
Workspace = Dict[str, Project]


class DirtyEntry(TypedDict):
    name: str
    path: str


# project name -> DirtyEntry, the JSON document written to stdout
DetectionOutput = Dict[str, DirtyEntry]
