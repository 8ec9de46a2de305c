"""The project store: current ``ProjectState`` plus the single mutation funnel.

Every change to the state goes through :meth:`ProjectStore.dispatch`, which
runs the reducer and swaps in the result.  Nothing is persisted until
:meth:`ProjectStore.commit` is called.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from rich.console import Console
from rich.pretty import Pretty

from .actions import parse_action
from .models import Package, ProjectState
from .reducer import reduce


Persist = Callable[[str, Any], None]


def _sort_key(name: str) -> tuple[str, str]:
    return (name.lower(), name)


class ProjectStore:
    """Holds the project state for one session.

    Args:
        state: Initial state; defaults to an unrecognized, empty project.
        console: When given, every dispatch is logged to it with the action
            and the previous and next state.
    """

    def __init__(
        self,
        state: Optional[ProjectState] = None,
        console: Optional[Console] = None,
    ) -> None:
        self._state = state if state is not None else ProjectState()
        self._console = console

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def dispatch(self, action: Any) -> None:
        """Apply *action* to the current state.

        Raises:
            ActionError: If *action* names a known kind but its payload is
                malformed.
        """
        parsed = parse_action(action)
        previous = self._state
        self._state = reduce(previous, parsed)
        if self._console is not None:
            self._log(action, previous, self._state)

    def commit(self, persist: Persist) -> None:
        """Write every top-level state key through *persist*."""
        for key, value in self._state.to_manifest().items():
            persist(key, value)

    def get_state(self) -> ProjectState:
        """Return a snapshot of the current state."""
        return self._state.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_recognized_project(self) -> bool:
        return self._state.is_recognized_project

    @property
    def app_name(self) -> str:
        return self._state.app_name

    def package_exists(self, package_name: str) -> bool:
        return package_name in self._state.packages

    def module_exists(self, package_name: str, module_name: str) -> bool:
        if not self.package_exists(package_name):
            return False
        return module_name in self._state.packages[package_name].modules

    def package_has_modules(self, package_name: str) -> bool:
        if not self.package_exists(package_name):
            return False
        return len(self._state.packages[package_name].modules) > 0

    def get_package(self, package_name: str) -> Optional[Package]:
        package = self._state.packages.get(package_name)
        return package.model_copy(deep=True) if package is not None else None

    def list_package_names(self) -> list[str]:
        """Package names, sorted alphabetically ignoring case."""
        return sorted(self._state.packages, key=_sort_key)

    def list_module_names(self, package_name: str) -> list[str]:
        """Module names of *package_name*, sorted alphabetically ignoring case.

        Empty when the package does not exist.
        """
        package = self._state.packages.get(package_name)
        if package is None:
            return []
        return sorted(package.modules, key=_sort_key)

    # ------------------------------------------------------------------
    # Development log
    # ------------------------------------------------------------------

    def _log(self, action: Any, previous: ProjectState, current: ProjectState) -> None:
        assert self._console is not None
        label = getattr(action, "type", None)
        if label is None and isinstance(action, dict):
            label = action.get("type")
        self._console.print(f"[dim]action[/dim] [bold]{label}[/bold]")
        self._console.print("[dim]  prev state[/dim]", Pretty(previous.to_manifest()))
        self._console.print("[dim]  action    [/dim]", Pretty(action))
        self._console.print("[dim]  next state[/dim]", Pretty(current.to_manifest()))
