# ================================
# 📁 affectiq/providers/git.py
# ================================
import logging
from typing import List, Optional

from .process import run, split_lines

logger = logging.getLogger(__name__)

DEFAULT_TAG = "master"


def git_root(cwd: Optional[str] = None) -> str:
    return run(["git", "rev-parse", "--show-toplevel"], cwd=cwd, collaborator="git")


class GitDiffProvider:
    """Files that differ between the working tree and `tag`."""
    def __init__(self, tag: str = DEFAULT_TAG, cwd: Optional[str] = None):
        self.tag = tag
        self.cwd = cwd

    def changed_files(self) -> List[str]:
        logger.info(f"Checking changed files from current to {self.tag}")
        return split_lines(run(["git", "diff", "--name-only", self.tag], cwd=self.cwd, collaborator="git"))


class StagedFilesProvider:
    """Files currently staged with `git add`."""
    def __init__(self, cwd: Optional[str] = None):
        self.cwd = cwd

    def changed_files(self) -> List[str]:
        logger.info("Checking staged files")
        return split_lines(run(["git", "diff", "--name-only", "--cached"], cwd=self.cwd, collaborator="git"))


class CurrentCommitProvider:
    """Files touched by the HEAD commit."""
    def __init__(self, cwd: Optional[str] = None):
        self.cwd = cwd

    def changed_files(self) -> List[str]:
        logger.info("Checking files in the current commit")
        return split_lines(
            run(["git", "diff-tree", "--no-commit-id", "--name-only", "-r", "HEAD"], cwd=self.cwd, collaborator="git")
        )


class CommandListProvider:
    """Each non-blank stdout line of an arbitrary command is a changed file."""
    def __init__(self, command: str, cwd: Optional[str] = None):
        self.command = command
        self.cwd = cwd

    def changed_files(self) -> List[str]:
        logger.info(f"Listing changed files with: {self.command}")
        return split_lines(run(self.command, cwd=self.cwd, collaborator="list-command"))
