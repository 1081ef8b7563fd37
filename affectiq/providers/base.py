# ==================================
# 📁 affectiq/providers/base.py
# ==================================
from typing import List, Protocol, Set, runtime_checkable

from ..interfaces.types.workspace import Workspace


@runtime_checkable
class ChangedFilesProvider(Protocol):
    def changed_files(self) -> List[str]: ...


@runtime_checkable
class WorkspaceProvider(Protocol):
    def workspace(self) -> Workspace: ...


@runtime_checkable
class DependencyProvider(Protocol):
    async def dependencies(self, location: str) -> Set[str]:
        """Direct dependency names of the project checked out at `location`."""
        ...
