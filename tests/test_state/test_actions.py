"""Unit tests for action parsing (vulcangen.state.actions)."""

from __future__ import annotations

import pytest

from vulcangen.errors import ActionError
from vulcangen.state.actions import (
    ActionType,
    AddModule,
    AddPackage,
    RemoveModule,
    RemovePackage,
    add_module,
    add_package,
    parse_action,
    remove_module,
    remove_package,
)


pytestmark = pytest.mark.unit


class TestActionCreators:
    def test_creators_build_tagged_models(self):
        assert add_package("blog") == AddPackage(package_name="blog")
        assert add_package("blog").type == ActionType.ADD_PACKAGE.value
        assert add_module("blog", "comment").type == "ADD_MODULE"
        assert remove_package("blog").type == "REMOVE_PACKAGE"
        assert remove_module("blog", "comment").type == "REMOVE_MODULE"

    def test_actions_are_frozen(self):
        action = add_package("blog")
        with pytest.raises(Exception):
            action.package_name = "shop"


class TestParseAction:
    def test_models_pass_through(self):
        action = add_module("blog", "comment")
        assert parse_action(action) is action

    def test_mapping_with_manifest_style_keys(self):
        action = parse_action({"type": "ADD_MODULE", "packageName": "blog", "moduleName": "comment"})
        assert isinstance(action, AddModule)
        assert action.package_name == "blog"
        assert action.module_name == "comment"

    def test_mapping_with_snake_case_keys(self):
        action = parse_action({"type": "REMOVE_PACKAGE", "package_name": "blog"})
        assert isinstance(action, RemovePackage)

    def test_enum_type_is_accepted(self):
        action = parse_action({"type": ActionType.REMOVE_MODULE, "packageName": "b", "moduleName": "m"})
        assert isinstance(action, RemoveModule)

    def test_unknown_type_returns_none(self):
        assert parse_action({"type": "RENAME_PACKAGE", "packageName": "blog"}) is None
        assert parse_action({"packageName": "blog"}) is None
        assert parse_action("ADD_PACKAGE") is None
        assert parse_action(None) is None

    @pytest.mark.parametrize("action_type", [[], {}, 3, None])
    def test_non_string_type_returns_none(self, action_type):
        assert parse_action({"type": action_type, "packageName": "blog"}) is None

    def test_missing_payload_raises(self):
        with pytest.raises(ActionError) as exc_info:
            parse_action({"type": "ADD_MODULE", "packageName": "blog"})
        assert exc_info.value.action_type == "ADD_MODULE"
        assert "moduleName" in str(exc_info.value)

    def test_empty_name_raises(self):
        with pytest.raises(ActionError):
            parse_action({"type": "ADD_PACKAGE", "packageName": ""})

    def test_wrong_payload_type_raises(self):
        with pytest.raises(ActionError):
            parse_action({"type": "ADD_PACKAGE", "packageName": ["blog"]})
