"""``vulcangen list packages|modules`` -- show what the manifest tracks."""

from __future__ import annotations

from vulcangen.utils import print_name_table

from .base import BaseGenerator


LISTABLE_KINDS: tuple[str, ...] = ("packages", "modules")


class ListGenerator(BaseGenerator):
    """Prints package names, or the module names of one package.

    The table is this command's only output, so it is printed in the
    ``writing`` phase.
    """

    def __init__(self, session, kind: str = "packages", **kwargs) -> None:
        if kind not in LISTABLE_KINDS:
            raise ValueError(f"Cannot list {kind!r}; expected one of {LISTABLE_KINDS}")
        super().__init__(session, **kwargs)
        self.kind = kind

    def initializing(self) -> None:
        if self.guards.assert_is_recognized_project():
            return
        if self.kind == "modules":
            self.guards.assert_at_least_one_package()

    def prompting(self) -> None:
        if self.kind == "packages":
            return
        package_name = self._choose_package_name()
        if package_name is None:
            return
        self.guards.assert_package_exists(package_name)
        self.props = {"package_name": package_name}

    def writing(self) -> None:
        if self.kind == "packages":
            title = self.store.app_name or "Packages"
            print_name_table(self.store.list_package_names(), title=title, column="Package")
        else:
            package_name = self.props["package_name"]
            print_name_table(
                self.store.list_module_names(package_name),
                title=package_name,
                column="Module",
            )
