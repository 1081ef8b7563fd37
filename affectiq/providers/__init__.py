from .base import ChangedFilesProvider, WorkspaceProvider, DependencyProvider
from .git import GitDiffProvider, StagedFilesProvider, CurrentCommitProvider, CommandListProvider, git_root
from .yarn import YarnWorkspaceProvider, StaticWorkspaceProvider, parse_workspace_info
from .npm import NpmDependencyProvider, DeclaredDependencyProvider, parse_npm_list

__all__ = [
    "ChangedFilesProvider", "WorkspaceProvider", "DependencyProvider",
    "GitDiffProvider", "StagedFilesProvider", "CurrentCommitProvider", "CommandListProvider", "git_root",
    "YarnWorkspaceProvider", "StaticWorkspaceProvider", "parse_workspace_info",
    "NpmDependencyProvider", "DeclaredDependencyProvider", "parse_npm_list",
]
