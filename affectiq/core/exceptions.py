# ==============================
# 📁 affectiq/core/exceptions.py
# ==============================
from typing import Optional


class AffectIQError(Exception):
    """Base exception for dirty-project detection errors."""
    def __init__(self, message: str, stage: str = ""):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self):
        context = f" [Stage: {self.stage}]" if self.stage else ""
        return f"{self.message}{context}"


class ConfigurationError(AffectIQError):
    """Raised when an optional config file is unreadable or malformed. Callers fall back to defaults."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, stage="config")
        self.path = path


class CollaboratorFailure(AffectIQError):
    """Raised when git, yarn, npm or a list command fails or returns unparseable output."""
    def __init__(self, message: str, collaborator: str, project: Optional[str] = None):
        super().__init__(message, stage=collaborator)
        self.collaborator = collaborator
        self.project = project

    def __str__(self):
        target = f" (project: {self.project})" if self.project else ""
        return f"{self.collaborator} failed{target}: {self.message}"


class DegenerateInputError(AffectIQError):
    """Raised for workspace data that cannot be processed safely, e.g. a location matching every file."""
    def __init__(self, message: str, project: Optional[str] = None):
        super().__init__(message, stage="workspace")
        self.project = project
