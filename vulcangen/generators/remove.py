"""``vulcangen remove package|module`` -- drop a package or module.

Removes the entry from the store, commits the manifest and deletes the
generated files.
"""

from __future__ import annotations

import shutil

from vulcangen.state.actions import remove_module, remove_package
from vulcangen.utils import print_success, print_warning

from .base import BaseGenerator


REMOVABLE_KINDS: tuple[str, ...] = ("package", "module")


class RemoveGenerator(BaseGenerator):
    """Removes a package or a module.

    Args:
        kind: ``"package"`` or ``"module"``.
    """

    def __init__(self, session, kind: str, **kwargs) -> None:
        if kind not in REMOVABLE_KINDS:
            raise ValueError(f"Cannot remove a {kind!r}; expected one of {REMOVABLE_KINDS}")
        super().__init__(session, **kwargs)
        self.kind = kind

    def initializing(self) -> None:
        if self.guards.assert_is_recognized_project():
            return
        self.guards.assert_at_least_one_package()

    def prompting(self) -> None:
        package_name = self._choose_package_name()
        if package_name is None:
            return

        if self.kind == "package":
            if self.guards.assert_package_exists(package_name):
                return
            self.props = {"package_name": package_name}
            target = f"package '{package_name}'"
        else:
            if self.guards.assert_package_has_modules(package_name):
                return
            module_name = self._choose_module_name(package_name)
            if module_name is None:
                return
            if self.guards.assert_module_exists(package_name, module_name):
                return
            self.props = {"package_name": package_name, "module_name": module_name}
            target = f"module '{module_name}' from package '{package_name}'"

        confirmed = self.options.get("yes") or self.prompter.confirm(
            f"Remove {target} and delete its files?", default=False
        )
        self.props["confirmed"] = bool(confirmed)

    def configuring(self) -> None:
        if not self.props["confirmed"]:
            return
        package_name = self.props["package_name"]
        if self.kind == "package":
            self.store.dispatch(remove_package(package_name))
        else:
            self.store.dispatch(remove_module(package_name, self.props["module_name"]))
        self.session.commit()

    def writing(self) -> None:
        if not self.props["confirmed"]:
            return
        package_name = self.props["package_name"]
        if self.kind == "package":
            target = self.config.package_path(package_name)
        else:
            target = self.config.module_path(package_name, self.props["module_name"])

        if target.is_dir():
            shutil.rmtree(target)
        if self.kind == "module" and self.config.package_path(package_name).is_dir():
            self._write_modules_index(package_name)

    def end(self) -> int:
        if self.gate.has_no_errors():
            if self.props.get("confirmed"):
                name = self.props.get("module_name") or self.props["package_name"]
                print_success(f"Removed {self.kind} '{name}'.")
            else:
                print_warning("Nothing removed.")
        return super().end()
