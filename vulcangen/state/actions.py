"""Actions accepted by the project store.

Each action is a small Pydantic model tagged by a literal ``type`` field.
Plain mappings such as ``{"type": "ADD_PACKAGE", "packageName": "blog"}``
are accepted too and parsed by :func:`parse_action`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from vulcangen.errors import ActionError


class ActionType(str, Enum):
    """Every action kind the reducer understands."""
    ADD_PACKAGE = "ADD_PACKAGE"
    ADD_MODULE = "ADD_MODULE"
    REMOVE_PACKAGE = "REMOVE_PACKAGE"
    REMOVE_MODULE = "REMOVE_MODULE"


class _Action(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class AddPackage(_Action):
    type: Literal["ADD_PACKAGE"] = "ADD_PACKAGE"
    package_name: str = Field(..., min_length=1, alias="packageName")


class AddModule(_Action):
    type: Literal["ADD_MODULE"] = "ADD_MODULE"
    package_name: str = Field(..., min_length=1, alias="packageName")
    module_name: str = Field(..., min_length=1, alias="moduleName")


class RemovePackage(_Action):
    type: Literal["REMOVE_PACKAGE"] = "REMOVE_PACKAGE"
    package_name: str = Field(..., min_length=1, alias="packageName")


class RemoveModule(_Action):
    type: Literal["REMOVE_MODULE"] = "REMOVE_MODULE"
    package_name: str = Field(..., min_length=1, alias="packageName")
    module_name: str = Field(..., min_length=1, alias="moduleName")


Action = Annotated[
    Union[AddPackage, AddModule, RemovePackage, RemoveModule],
    Field(discriminator="type"),
]

_ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)
_ACTION_MODELS = (AddPackage, AddModule, RemovePackage, RemoveModule)
_KNOWN_TYPES = {member.value for member in ActionType}


def parse_action(raw: Any) -> Optional[Action]:
    """Turn *raw* into a typed action.

    Returns ``None`` for anything whose ``type`` is not a known action kind;
    the reducer treats those as identity transitions.

    Raises:
        ActionError: If the type is known but the payload is malformed.
    """
    if isinstance(raw, _ACTION_MODELS):
        return raw
    if not isinstance(raw, Mapping):
        return None

    action_type = raw.get("type")
    if isinstance(action_type, ActionType):
        action_type = action_type.value
    if not isinstance(action_type, str) or action_type not in _KNOWN_TYPES:
        return None

    try:
        return _ACTION_ADAPTER.validate_python({**raw, "type": action_type})
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'][1:]) or 'payload'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ActionError(action_type, details) from exc


def add_package(package_name: str) -> AddPackage:
    return AddPackage(package_name=package_name)


def add_module(package_name: str, module_name: str) -> AddModule:
    return AddModule(package_name=package_name, module_name=module_name)


def remove_package(package_name: str) -> RemovePackage:
    return RemovePackage(package_name=package_name)


def remove_module(package_name: str, module_name: str) -> RemoveModule:
    return RemoveModule(package_name=package_name, module_name=module_name)
