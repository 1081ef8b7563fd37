# ====================================
# 📁 affectiq/core/build_graph/gate.py
# ====================================
import re
from typing import Iterable, List, Pattern, Sequence, Set, Union

from ...interfaces.types.workspace import Workspace

PatternLike = Union[str, Pattern[str]]


def _compile(patterns: Iterable[PatternLike]) -> List[Pattern[str]]:
    return [p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns]


def matching_files(changed_files: Sequence[str], patterns: Iterable[PatternLike]) -> List[str]:
    """Changed files that match at least one always-dirty pattern, in input order."""
    compiled = _compile(patterns)
    return [f for f in changed_files if any(p.search(f) for p in compiled)]


def check(changed_files: Sequence[str], patterns: Iterable[PatternLike]) -> bool:
    return bool(matching_files(changed_files, patterns))


def all_projects(workspace: Workspace) -> Set[str]:
    return set(workspace.keys())
