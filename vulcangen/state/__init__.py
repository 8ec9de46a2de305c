"""Project state: models, actions, reducer, store and manifest persistence."""

from vulcangen.state.actions import (
    Action,
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
from vulcangen.state.manifest import Manifest
from vulcangen.state.models import Module, Package, ProjectState
from vulcangen.state.reducer import reduce
from vulcangen.state.store import ProjectStore

__all__ = [
    "Action",
    "ActionType",
    "AddModule",
    "AddPackage",
    "Manifest",
    "Module",
    "Package",
    "ProjectState",
    "ProjectStore",
    "RemoveModule",
    "RemovePackage",
    "add_module",
    "add_package",
    "parse_action",
    "reduce",
    "remove_module",
    "remove_package",
]
