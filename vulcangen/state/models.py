"""Pydantic v2 models for the persisted project state.

The manifest on disk uses camel-case keys (``isRecognizedProject``,
``appName``); the models expose snake-case attributes and accept either form.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vulcangen.filters import filter_module_name, filter_package_name


class Module(BaseModel):
    """A generated module inside a package."""

    name: str = Field(..., min_length=1, description="Canonical camel-case module name")


class Package(BaseModel):
    """A package and the modules it contains."""

    name: str = Field(..., min_length=1, description="Canonical dash-case package name")
    modules: dict[str, Module] = Field(default_factory=dict)


class ProjectState(BaseModel):
    """Everything the store knows about the project.

    ``packages`` is keyed by canonical package name, and each package's
    ``modules`` by canonical module name.  Every key equals the ``name`` of
    its entry.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    is_recognized_project: bool = Field(default=False, alias="isRecognizedProject")
    app_name: str = Field(default="", alias="appName")
    packages: dict[str, Package] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_canonical_keys(self) -> "ProjectState":
        for key, package in self.packages.items():
            if key != filter_package_name(key):
                raise ValueError(f"package key {key!r} is not a canonical package name")
            if key != package.name:
                raise ValueError(f"package key {key!r} does not match its name {package.name!r}")
            for module_key, module in package.modules.items():
                if module_key != filter_module_name(module_key):
                    raise ValueError(
                        f"module key {module_key!r} in package {key!r} "
                        "is not a canonical module name"
                    )
                if module_key != module.name:
                    raise ValueError(
                        f"module key {module_key!r} in package {key!r} "
                        f"does not match its name {module.name!r}"
                    )
        return self

    def to_manifest(self) -> dict[str, object]:
        """Return the state as manifest keys with JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)
