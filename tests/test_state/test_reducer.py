"""Unit tests for the pure reducer (vulcangen.state.reducer)."""

from __future__ import annotations

import pytest

from vulcangen.state.actions import add_module, add_package, remove_module, remove_package
from vulcangen.state.models import Module, Package, ProjectState
from vulcangen.state.reducer import reduce


pytestmark = pytest.mark.unit


@pytest.fixture
def blog_state() -> ProjectState:
    return ProjectState(
        is_recognized_project=True,
        packages={
            "blog": Package(name="blog", modules={"comment": Module(name="comment")}),
        },
    )


class TestAddPackage:
    def test_inserts_empty_package(self):
        state = reduce(ProjectState(), add_package("blog"))
        assert state.packages == {"blog": Package(name="blog", modules={})}

    def test_existing_package_keeps_its_modules(self, blog_state: ProjectState):
        state = reduce(blog_state, add_package("blog"))
        assert "comment" in state.packages["blog"].modules


class TestAddModule:
    def test_inserts_module(self, blog_state: ProjectState):
        state = reduce(blog_state, add_module("blog", "post"))
        assert set(state.packages["blog"].modules) == {"comment", "post"}
        assert state.packages["blog"].modules["post"] == Module(name="post")

    def test_missing_package_is_identity(self, blog_state: ProjectState):
        state = reduce(blog_state, add_module("shop", "product"))
        assert state is blog_state
        assert "shop" not in state.packages


class TestRemove:
    def test_remove_package(self, blog_state: ProjectState):
        state = reduce(blog_state, remove_package("blog"))
        assert state.packages == {}

    def test_remove_missing_package_is_identity(self, blog_state: ProjectState):
        assert reduce(blog_state, remove_package("shop")) is blog_state

    def test_remove_module(self, blog_state: ProjectState):
        state = reduce(blog_state, remove_module("blog", "comment"))
        assert state.packages["blog"].modules == {}
        assert "blog" in state.packages

    def test_remove_missing_module_is_identity(self, blog_state: ProjectState):
        assert reduce(blog_state, remove_module("blog", "post")) is blog_state
        assert reduce(blog_state, remove_module("shop", "post")) is blog_state


class TestReducerProperties:
    def test_unknown_action_is_identity(self, blog_state: ProjectState):
        assert reduce(blog_state, {"type": "SOMETHING_ELSE"}) is blog_state
        assert reduce(blog_state, None) is blog_state

    def test_input_state_is_not_mutated(self, blog_state: ProjectState):
        before = blog_state.model_dump()
        reduce(blog_state, add_package("shop"))
        reduce(blog_state, add_module("blog", "post"))
        reduce(blog_state, remove_module("blog", "comment"))
        reduce(blog_state, remove_package("blog"))
        assert blog_state.model_dump() == before

    def test_deterministic(self, blog_state: ProjectState):
        first = reduce(blog_state, add_module("blog", "post"))
        second = reduce(blog_state, add_module("blog", "post"))
        assert first == second

    def test_recognized_flag_and_app_name_untouched(self):
        state = ProjectState(is_recognized_project=True, app_name="my-app")
        state = reduce(state, add_package("blog"))
        assert state.is_recognized_project is True
        assert state.app_name == "my-app"
