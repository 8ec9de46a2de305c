"""Guards: named preconditions that register errors instead of raising.

Each ``check_*`` function is pure: it inspects the store and returns a
``GuardError`` or ``None``.  The :class:`Guards` facade runs a check and
records any failure in the session's :class:`ErrorRegistry`, so that every
problem with a command is reported together at the end of the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.text import Text

from vulcangen.state.store import ProjectStore


class GuardKey(str, Enum):
    """Registry keys, one per guard."""
    NOT_RECOGNIZED_PROJECT = "not_recognized_project"
    IS_RECOGNIZED_PROJECT = "is_recognized_project"
    PACKAGE_NOT_FOUND = "package_not_found"
    PACKAGE_EXISTS = "package_exists"
    MODULE_NOT_FOUND = "module_not_found"
    MODULE_EXISTS = "module_exists"
    ZERO_PACKAGES = "zero_packages"
    ZERO_MODULES = "zero_modules"
    DIRECTORY_NOT_EMPTY = "directory_not_empty"


@dataclass(frozen=True)
class GuardError:
    """A failed precondition.

    ``message`` may contain Rich markup; :attr:`plain` strips it.
    """

    key: str
    message: str

    @property
    def plain(self) -> str:
        return Text.from_markup(self.message).plain


class ErrorRegistry:
    """Ordered collection of guard errors keyed by guard key.

    Registering the same key twice keeps the first position and the last
    message.  Entries are never removed.
    """

    def __init__(self) -> None:
        self._errors: dict[str, GuardError] = {}

    def register(self, error: GuardError) -> None:
        self._errors[error.key] = error

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def __len__(self) -> int:
        return len(self._errors)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, GuardKey):
            key = key.value
        return key in self._errors

    def keys(self) -> list[str]:
        return list(self._errors)

    def errors(self) -> list[GuardError]:
        return list(self._errors.values())

    def messages(self) -> list[str]:
        """Plain-text messages in registration order."""
        return [error.plain for error in self._errors.values()]


def _cmd(command: str) -> str:
    return f"[green]{command}[/green]"


# ---------------------------------------------------------------------------
# Pure checks
# ---------------------------------------------------------------------------


def check_is_recognized_project(store: ProjectStore) -> Optional[GuardError]:
    if store.is_recognized_project:
        return None
    return GuardError(
        GuardKey.NOT_RECOGNIZED_PROJECT.value,
        "This is not a vulcangen project directory. "
        "You cannot run vulcangen generators outside of a vulcangen project directory.",
    )


def check_is_not_recognized_project(store: ProjectStore) -> Optional[GuardError]:
    if not store.is_recognized_project:
        return None
    return GuardError(
        GuardKey.IS_RECOGNIZED_PROJECT.value,
        "You are already in a vulcangen project directory. "
        "You may not run this command inside a vulcangen project directory.",
    )


def check_package_exists(store: ProjectStore, package_name: str) -> Optional[GuardError]:
    if store.package_exists(package_name):
        return None
    return GuardError(
        GuardKey.PACKAGE_NOT_FOUND.value,
        f"The package '{escape(package_name)}' does not exist. "
        f"If you'd like to work on this package, create it first by running "
        f"{_cmd(f'vulcangen package -p {escape(package_name)}')}.",
    )


def check_package_not_exists(store: ProjectStore, package_name: str) -> Optional[GuardError]:
    if not store.package_exists(package_name):
        return None
    return GuardError(
        GuardKey.PACKAGE_EXISTS.value,
        f"A package with the name '{escape(package_name)}' already exists. "
        f"If you'd like to overwrite this package, first run "
        f"{_cmd(f'vulcangen remove package -p {escape(package_name)}')}.",
    )


def check_module_exists(
    store: ProjectStore, package_name: str, module_name: str
) -> Optional[GuardError]:
    if store.module_exists(package_name, module_name):
        return None
    return GuardError(
        GuardKey.MODULE_NOT_FOUND.value,
        f"A module with the name '{escape(module_name)}' under the package '{escape(package_name)}' "
        f"does not exist. If you'd like to work on this module, first run "
        f"{_cmd(f'vulcangen module -p {escape(package_name)} -m {escape(module_name)}')}.",
    )


def check_module_not_exists(
    store: ProjectStore, package_name: str, module_name: str
) -> Optional[GuardError]:
    if not store.module_exists(package_name, module_name):
        return None
    return GuardError(
        GuardKey.MODULE_EXISTS.value,
        f"A module with the name '{escape(module_name)}' under the package '{escape(package_name)}' "
        f"already exists. If you'd like to overwrite this module, first run "
        f"{_cmd(f'vulcangen remove module -p {escape(package_name)} -m {escape(module_name)}')}.",
    )


def check_at_least_one_package(store: ProjectStore) -> Optional[GuardError]:
    if store.list_package_names():
        return None
    return GuardError(
        GuardKey.ZERO_PACKAGES.value,
        "The command you just ran requires at least 1 custom package to be present "
        f"in your app. To create a package, run {_cmd('vulcangen package')}.",
    )


def check_package_has_modules(store: ProjectStore, package_name: str) -> Optional[GuardError]:
    if store.package_has_modules(package_name):
        return None
    return GuardError(
        GuardKey.ZERO_MODULES.value,
        "The command you just ran requires at least 1 module to be present in the "
        f"package '{escape(package_name)}'. To create a module in {escape(package_name)}, run "
        f"{_cmd(f'vulcangen module -p {escape(package_name)}')}.",
    )


def check_valid_name(kind: str, raw: str, filtered: str) -> Optional[GuardError]:
    if filtered:
        return None
    return GuardError(
        f"invalid_{kind}_name",
        f"'{escape(raw)}' is not a valid {kind} name. "
        "Names need at least one letter or digit.",
    )


def check_directory_available(path: Path) -> Optional[GuardError]:
    if not path.exists() or (path.is_dir() and not any(path.iterdir())):
        return None
    return GuardError(
        GuardKey.DIRECTORY_NOT_EMPTY.value,
        f"The directory '{escape(str(path))}' already exists and is not empty. "
        "Pick another name or remove the directory first.",
    )


# ---------------------------------------------------------------------------
# Registering facade
# ---------------------------------------------------------------------------


class Guards:
    """Runs checks against a store and registers failures.

    Every ``assert_*`` method returns the registered error, or ``None`` when
    the check passed.
    """

    def __init__(self, store: ProjectStore, registry: ErrorRegistry) -> None:
        self.store = store
        self.registry = registry

    def _record(self, error: Optional[GuardError]) -> Optional[GuardError]:
        if error is not None:
            self.registry.register(error)
        return error

    def assert_is_recognized_project(self) -> Optional[GuardError]:
        return self._record(check_is_recognized_project(self.store))

    def assert_is_not_recognized_project(self) -> Optional[GuardError]:
        return self._record(check_is_not_recognized_project(self.store))

    def assert_package_exists(self, package_name: str) -> Optional[GuardError]:
        return self._record(check_package_exists(self.store, package_name))

    def assert_package_not_exists(self, package_name: str) -> Optional[GuardError]:
        return self._record(check_package_not_exists(self.store, package_name))

    def assert_module_exists(self, package_name: str, module_name: str) -> Optional[GuardError]:
        return self._record(check_module_exists(self.store, package_name, module_name))

    def assert_module_not_exists(
        self, package_name: str, module_name: str
    ) -> Optional[GuardError]:
        return self._record(check_module_not_exists(self.store, package_name, module_name))

    def assert_at_least_one_package(self) -> Optional[GuardError]:
        return self._record(check_at_least_one_package(self.store))

    def assert_package_has_modules(self, package_name: str) -> Optional[GuardError]:
        """Require an existing package with at least one module.

        A missing package registers only the missing-package error; the
        module count does not apply to a package that is not there.
        """
        missing = self.assert_package_exists(package_name)
        if missing is not None:
            return missing
        return self._record(check_package_has_modules(self.store, package_name))

    def assert_valid_name(self, kind: str, raw: str, filtered: str) -> Optional[GuardError]:
        return self._record(check_valid_name(kind, raw, filtered))

    def assert_directory_available(self, path: Path) -> Optional[GuardError]:
        return self._record(check_directory_available(path))
