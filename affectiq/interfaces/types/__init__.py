from .workspace import Project, Workspace, DirtyEntry, DetectionOutput

__all__ = ["Project", "Workspace", "DirtyEntry", "DetectionOutput"]
