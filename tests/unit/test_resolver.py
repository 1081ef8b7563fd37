# ==========================================
# 📁 tests/unit/test_resolver.py
# ==========================================
import pytest

from affectiq.core.build_graph import resolve, resolve_with_leftovers
from affectiq.core.exceptions import DegenerateInputError
from tests.helpers import make_project


def test_nested_file_goes_to_deepest_project(nested_workspace):
    assert resolve(nested_workspace, ["pkg/a/sub/x.ts"]) == {"child"}


def test_parent_and_child_both_dirty_when_each_owns_a_file(nested_workspace):
    assert resolve(nested_workspace, ["pkg/a/sub/x.ts", "pkg/a/index.ts"]) == {"child", "parent"}


def test_result_does_not_depend_on_workspace_order(nested_workspace):
    reversed_ws = dict(reversed(list(nested_workspace.items())))
    files = ["pkg/a/sub/x.ts", "pkg/other/y.ts"]
    assert resolve(reversed_ws, files) == resolve(nested_workspace, files) == {"child", "other"}


def test_prefix_match_is_literal_not_segment_aware():
    ws = {"a": make_project("pkg/a")}
    assert resolve(ws, ["pkg/abc/file.ts"]) == {"a"}


def test_unmatched_files_are_dropped_and_reported(chain_workspace):
    dirty, leftovers = resolve_with_leftovers(chain_workspace, ["README.md", "pkg/b/x.ts", "docs/guide.md"])
    assert dirty == {"B"}
    assert leftovers == ["README.md", "docs/guide.md"]


def test_duplicate_paths_are_harmless(chain_workspace):
    assert resolve(chain_workspace, ["pkg/a/x.ts", "pkg/a/x.ts"]) == {"A"}


def test_empty_changeset(chain_workspace):
    assert resolve(chain_workspace, []) == set()


@pytest.mark.parametrize("location", ["", ".", "./", "/"])
def test_match_all_location_is_rejected(location):
    ws = {"root": make_project(location), "a": make_project("pkg/a")}
    with pytest.raises(DegenerateInputError) as exc_info:
        resolve(ws, ["pkg/a/x.ts"])
    assert exc_info.value.project == "root"
