"""Pure state transitions for the project store.

``reduce`` never mutates the state it is given: it returns either the same
object (identity transition) or a new ``ProjectState``.
"""

from __future__ import annotations

from typing import Any

from .actions import AddModule, AddPackage, RemoveModule, RemovePackage
from .models import Module, Package, ProjectState


def reduce(state: ProjectState, action: Any) -> ProjectState:
    """Return the state that results from applying *action* to *state*.

    Actions whose preconditions do not hold (adding a module to a missing
    package, removing something that is not there, re-adding an existing
    package) and actions of unknown kinds leave the state unchanged.
    """
    if isinstance(action, AddPackage):
        return _add_package(state, action)
    if isinstance(action, AddModule):
        return _add_module(state, action)
    if isinstance(action, RemovePackage):
        return _remove_package(state, action)
    if isinstance(action, RemoveModule):
        return _remove_module(state, action)
    return state


def _add_package(state: ProjectState, action: AddPackage) -> ProjectState:
    if action.package_name in state.packages:
        return state
    packages = dict(state.packages)
    packages[action.package_name] = Package(name=action.package_name)
    return state.model_copy(update={"packages": packages}, deep=True)


def _add_module(state: ProjectState, action: AddModule) -> ProjectState:
    package = state.packages.get(action.package_name)
    if package is None or action.module_name in package.modules:
        return state
    modules = dict(package.modules)
    modules[action.module_name] = Module(name=action.module_name)
    packages = dict(state.packages)
    packages[action.package_name] = package.model_copy(update={"modules": modules})
    return state.model_copy(update={"packages": packages}, deep=True)


def _remove_package(state: ProjectState, action: RemovePackage) -> ProjectState:
    if action.package_name not in state.packages:
        return state
    packages = {
        name: package
        for name, package in state.packages.items()
        if name != action.package_name
    }
    return state.model_copy(update={"packages": packages}, deep=True)


def _remove_module(state: ProjectState, action: RemoveModule) -> ProjectState:
    package = state.packages.get(action.package_name)
    if package is None or action.module_name not in package.modules:
        return state
    modules = {
        name: module
        for name, module in package.modules.items()
        if name != action.module_name
    }
    packages = dict(state.packages)
    packages[action.package_name] = package.model_copy(update={"modules": modules})
    return state.model_copy(update={"packages": packages}, deep=True)
