# ======================================
# 📁 tests/unit/test_detector.py
# ======================================
import pytest

from affectiq.core.config import DetectConfig
from affectiq.core.detector import detect
from affectiq.core.exceptions import CollaboratorFailure, DegenerateInputError
from tests.helpers import make_project


class StaticProvider:
    def __init__(self, by_suffix):
        self.by_suffix = by_suffix
        self.calls = 0

    async def dependencies(self, location):
        self.calls += 1
        for suffix, deps in self.by_suffix.items():
            if location.endswith(suffix):
                return set(deps)
        return set()


class FailingProvider:
    async def dependencies(self, location):
        raise CollaboratorFailure(f"cannot list {location}", collaborator="npm")


@pytest.mark.asyncio
async def test_transitive_chain_from_leaf(chain_workspace):
    result = await detect(chain_workspace, ["pkg/a/x.ts"])
    assert result.output() == {
        "A": {"name": "A", "path": "pkg/a"},
        "B": {"name": "B", "path": "pkg/b"},
        "C": {"name": "C", "path": "pkg/c"},
    }
    assert result.direct == ["A"]


@pytest.mark.asyncio
async def test_transitive_chain_from_middle(chain_workspace):
    result = await detect(chain_workspace, ["pkg/b/x.ts"])
    assert set(result.output()) == {"B", "C"}


@pytest.mark.asyncio
async def test_transitive_disabled_returns_direct_matches_only(chain_workspace):
    provider = StaticProvider({})
    result = await detect(chain_workspace, ["pkg/a/x.ts"], DetectConfig(transitive=False), provider, root="/repo")
    assert result.output() == {"A": {"name": "A", "path": "pkg/a"}}
    assert provider.calls == 0


@pytest.mark.asyncio
async def test_always_dirty_file_marks_whole_workspace(chain_workspace):
    provider = StaticProvider({})
    result = await detect(chain_workspace, ["yarn.lock"], DetectConfig(), provider, root="/repo")
    assert set(result.output()) == {"A", "B", "C"}
    assert result.always_dirty_files == ["yarn.lock"]
    assert provider.calls == 0


@pytest.mark.asyncio
async def test_custom_always_dirty_pattern(chain_workspace):
    config = DetectConfig(required_files=[r"^tsconfig\.base\.json$"])
    result = await detect(chain_workspace, ["pkg/b/x.ts", "tsconfig.base.json"], config)
    assert set(result.output()) == {"A", "B", "C"}
    result = await detect(chain_workspace, ["yarn.lock"], config)
    assert result.output() == {}


@pytest.mark.asyncio
async def test_file_outside_every_project_yields_empty_mapping(chain_workspace):
    result = await detect(chain_workspace, ["docs/README.md"])
    assert result.output() == {}
    assert result.unmatched_files == ["docs/README.md"]


@pytest.mark.asyncio
async def test_resolved_dependencies_override_declared(chain_workspace):
    # Resolved tree says nothing depends on A.
    provider = StaticProvider({"pkg/b": ["react"], "pkg/c": ["B"]})
    result = await detect(chain_workspace, ["pkg/a/x.ts"], DetectConfig(), provider, root="/repo")
    assert set(result.output()) == {"A"}


@pytest.mark.asyncio
async def test_nested_project_change_propagates_from_child_only(nested_workspace):
    result = await detect(nested_workspace, ["pkg/a/sub/x.ts"])
    assert set(result.output()) == {"child", "other"}


@pytest.mark.asyncio
async def test_lookup_failure_is_fatal(chain_workspace):
    with pytest.raises(CollaboratorFailure):
        await detect(chain_workspace, ["pkg/a/x.ts"], DetectConfig(), FailingProvider(), root="/repo")


@pytest.mark.asyncio
async def test_match_all_location_rejected_even_for_always_dirty_changes():
    ws = {"root": make_project("."), "a": make_project("pkg/a")}
    with pytest.raises(DegenerateInputError):
        await detect(ws, ["yarn.lock"])
