"""``vulcangen module`` -- add a module (collection and friends) to a package.

When the target package does not exist yet the user is offered to create it
in the same run.
"""

from __future__ import annotations

from typing import Any

from vulcangen.filters import camel_case, pascal_case
from vulcangen.prompts import Choice, selection_to_set
from vulcangen.state.actions import add_module, add_package
from vulcangen.utils import print_success

from .base import BaseGenerator


MODULE_PARTS: tuple[str, ...] = (
    "collection",
    "fragments",
    "mutations",
    "parameters",
    "permissions",
    "resolvers",
    "schema",
)

DEFAULT_RESOLVERS: tuple[str, ...] = ("list", "single", "total")

MODULE_PART_CHOICES: tuple[Choice, ...] = (
    Choice("Collection", "collection", checked=True, disabled=True),
    Choice("Fragments", "fragments"),
    Choice("Mutations", "mutations"),
    Choice("Parameters", "parameters"),
    Choice("Permissions", "permissions"),
    Choice("Resolvers", "resolvers"),
    Choice("Schema", "schema"),
)

RESOLVER_CHOICES: tuple[Choice, ...] = (
    Choice("List", "list"),
    Choice("Single", "single"),
    Choice("Total", "total"),
)


class ModuleGenerator(BaseGenerator):
    """Adds a module to a package and renders one file per selected part."""

    def initializing(self) -> None:
        self.guards.assert_is_recognized_project()

    def prompting(self) -> None:
        package_name = self._ask_package_name()
        module_name = self._ask_module_name()
        if package_name is None or module_name is None:
            return

        module_parts = self._ask_module_parts()
        default_resolvers: dict[str, bool] = {}
        if module_parts["resolvers"]:
            default_resolvers = self._ask_default_resolvers()

        create_package = False
        if not self.store.package_exists(package_name):
            create_package = self.options.get("create_package")
            if create_package is None:
                create_package = self.prompter.confirm(
                    f"The package '{package_name}' does not exist. "
                    "Would you like to create it?"
                )
            if not create_package:
                self.guards.assert_package_exists(package_name)
                return

        self.guards.assert_module_not_exists(package_name, module_name)
        self.props = build_module_props(
            package_name, module_name, module_parts, default_resolvers
        )
        self.props["create_package"] = bool(create_package)

    def _ask_module_parts(self) -> dict[str, bool]:
        selected = self.options.get("module_parts")
        if selected is None:
            selected = self.prompter.checkbox("Create with", MODULE_PART_CHOICES)
        else:
            selected = selection_to_set(["collection", *selected])
        return {part: bool(selected.get(part)) for part in MODULE_PARTS}

    def _ask_default_resolvers(self) -> dict[str, bool]:
        selected = self.options.get("default_resolvers")
        if selected is None:
            selected = self.prompter.checkbox("Default resolvers", RESOLVER_CHOICES)
        else:
            selected = selection_to_set(selected)
        return {name: bool(selected.get(name)) for name in DEFAULT_RESOLVERS}

    def configuring(self) -> None:
        package_name = self.props["package_name"]
        if self.props["create_package"]:
            self.store.dispatch(add_package(package_name))
        self.store.dispatch(add_module(package_name, self.props["module_name"]))
        self.session.commit()

    def writing(self) -> None:
        package_name = self.props["package_name"]
        module_path = self.config.module_path(package_name, self.props["module_name"])

        if self.props["create_package"]:
            self.renderer.render_tree(
                "package",
                self.config.package_path(package_name),
                {
                    "package_name": package_name,
                    "module_names": self.store.list_module_names(package_name),
                },
            )
        else:
            self._write_modules_index(package_name)

        for part, selected in self.props["module_parts"].items():
            if selected:
                self.renderer.render_to_file(
                    f"module/{part}.js.j2", module_path / f"{part}.js", self.props
                )

    def end(self) -> int:
        if self.gate.has_no_errors():
            print_success(
                f"Created module '{self.props['module_name']}' "
                f"in package '{self.props['package_name']}'."
            )
        return super().end()


def build_module_props(
    package_name: str,
    module_name: str,
    module_parts: dict[str, bool],
    default_resolvers: dict[str, bool],
) -> dict[str, Any]:
    """Template context for a module: collection, mutation and resolver names."""
    camel = camel_case(module_name)
    pascal = pascal_case(module_name)
    return {
        "package_name": package_name,
        "module_name": module_name,
        "collection_name": pascal,
        "type_name": pascal,
        "new_mutation_name": f"{camel}New",
        "new_permission": f"{camel}.new",
        "edit_mutation_name": f"{camel}Edit",
        "edit_own_permission": f"{camel}.edit.own",
        "edit_all_permission": f"{camel}.edit.all",
        "remove_mutation_name": f"{camel}Remove",
        "remove_own_permission": f"{camel}.remove.own",
        "remove_all_permission": f"{camel}.remove.all",
        "parameters_name": f"{camel}.parameters",
        "list_resolver_name": f"{camel}List",
        "single_resolver_name": f"{camel}Single",
        "total_resolver_name": f"{camel}Total",
        "module_parts": dict(module_parts),
        "has_list_resolver": bool(default_resolvers.get("list")),
        "has_single_resolver": bool(default_resolvers.get("single")),
        "has_total_resolver": bool(default_resolvers.get("total")),
    }
