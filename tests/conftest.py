import pytest

from tests.helpers import make_project


@pytest.fixture
def chain_workspace():
    """A <- B <- C: B depends on A, C depends on B."""
    return {
        "A": make_project("pkg/a"),
        "B": make_project("pkg/b", ["A"]),
        "C": make_project("pkg/c", ["B"]),
    }


@pytest.fixture
def nested_workspace():
    return {
        "parent": make_project("pkg/a"),
        "child": make_project("pkg/a/sub"),
        "other": make_project("pkg/other", ["child"]),
    }
