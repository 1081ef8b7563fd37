# ================================================
# 📁 tests/unit/test_dependency_graph.py
# ================================================
import asyncio
import os

import pytest

from affectiq.core.dependency_graph import build_dependency_graph
from affectiq.core.exceptions import CollaboratorFailure
from tests.helpers import make_project


class FakeProvider:
    def __init__(self, by_path, fail_on=None, delays=None):
        self.by_path = by_path
        self.fail_on = fail_on
        self.delays = delays or {}
        self.active = 0
        self.max_active = 0
        self.calls = []
        self.cancelled = 0

    async def dependencies(self, location):
        self.calls.append(location)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delays.get(location, 0.01))
            if location == self.fail_on:
                raise CollaboratorFailure("npm exploded", collaborator="npm")
            return set(self.by_path.get(location, ()))
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        finally:
            self.active -= 1


@pytest.mark.asyncio
async def test_builds_graph_from_provider(chain_workspace):
    provider = FakeProvider({
        os.path.join("/repo", "pkg/b"): {"A", "typescript"},
        os.path.join("/repo", "pkg/c"): {"B"},
    })
    graph = await build_dependency_graph(chain_workspace, provider, "/repo", parallelism=2)
    assert graph == {"A": set(), "B": {"A", "typescript"}, "C": {"B"}}


@pytest.mark.asyncio
async def test_concurrency_is_bounded():
    ws = {f"p{i}": make_project(f"pkg/p{i}") for i in range(12)}
    provider = FakeProvider({})
    await build_dependency_graph(ws, provider, "/repo", parallelism=3)
    assert len(provider.calls) == 12
    assert provider.max_active <= 3


@pytest.mark.asyncio
async def test_first_failure_aborts_and_names_project():
    ws = {"fast": make_project("pkg/fast"), "slow": make_project("pkg/slow")}

    provider = FakeProvider(
        {},
        fail_on=os.path.join("/repo", "pkg/fast"),
        delays={os.path.join("/repo", "pkg/slow"): 5},
    )
    with pytest.raises(CollaboratorFailure) as exc_info:
        await build_dependency_graph(ws, provider, "/repo", parallelism=2)
    assert exc_info.value.project == "fast"
    assert provider.cancelled == 1


@pytest.mark.asyncio
async def test_unexpected_exception_is_wrapped(chain_workspace):
    class Broken:
        async def dependencies(self, location):
            raise RuntimeError("boom")

    with pytest.raises(CollaboratorFailure) as exc_info:
        await build_dependency_graph(chain_workspace, Broken(), "/repo")
    assert exc_info.value.collaborator == "dependencies"
    assert "boom" in exc_info.value.message


@pytest.mark.asyncio
async def test_empty_workspace_yields_empty_graph():
    assert await build_dependency_graph({}, FakeProvider({}), "/repo") == {}


@pytest.mark.asyncio
async def test_rejects_zero_parallelism(chain_workspace):
    with pytest.raises(ValueError):
        await build_dependency_graph(chain_workspace, FakeProvider({}), "/repo", parallelism=0)
