"""``vulcangen package`` -- create a new package in the current project."""

from __future__ import annotations

from vulcangen.state.actions import add_package
from vulcangen.utils import print_success

from .base import BaseGenerator


class PackageGenerator(BaseGenerator):
    """Adds a package to the store and renders its skeleton."""

    def initializing(self) -> None:
        self.guards.assert_is_recognized_project()

    def prompting(self) -> None:
        package_name = self._ask_package_name()
        if package_name is None:
            return
        self.guards.assert_package_not_exists(package_name)
        self.props = {"package_name": package_name}

    def configuring(self) -> None:
        self.store.dispatch(add_package(self.props["package_name"]))
        self.session.commit()

    def writing(self) -> None:
        package_name = self.props["package_name"]
        self.renderer.render_tree(
            "package",
            self.config.package_path(package_name),
            {
                "package_name": package_name,
                "module_names": self.store.list_module_names(package_name),
            },
        )

    def end(self) -> int:
        if self.gate.has_no_errors():
            print_success(f"Created package '{self.props['package_name']}'.")
        return super().end()
