"""vulcangen configuration.

Typed configuration for a single command run.  Settings use a Pydantic v2
model so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


DEFAULT_MANIFEST_NAME = ".vulcangen.json"


class Config(BaseModel):
    """Global vulcangen configuration.

    Holds the target project directory and every path derived from it.
    Instances are created once by the CLI entry point and then passed to the
    ``Session`` that owns the rest of the command's state.
    """

    cwd: Path = Field(default_factory=Path.cwd, description="Project root directory")
    manifest_name: str = Field(default=DEFAULT_MANIFEST_NAME, min_length=1)
    packages_dir: str = Field(default="packages", min_length=1)
    debug: bool = Field(default=False, description="Log every dispatched action")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def manifest_path(self) -> Path:
        """Path to the persisted project manifest."""
        return self.cwd / self.manifest_name

    @property
    def packages_path(self) -> Path:
        """Root of the ``packages/`` directory inside the project."""
        return self.cwd / self.packages_dir

    def package_path(self, package_name: str) -> Path:
        """Directory of a single package."""
        return self.packages_path / package_name

    def modules_path(self, package_name: str) -> Path:
        """The ``lib/modules`` directory of a package."""
        return self.package_path(package_name) / "lib" / "modules"

    def modules_index_path(self, package_name: str) -> Path:
        """The ``lib/modules/index.js`` file that imports every module."""
        return self.modules_path(package_name) / "index.js"

    def module_path(self, package_name: str, module_name: str) -> Path:
        """Directory of a single module inside a package."""
        return self.modules_path(package_name) / module_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def with_cwd(self, cwd: Path) -> "Config":
        """Return a copy of this configuration rooted at *cwd*."""
        return self.model_copy(update={"cwd": Path(cwd)})

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            VULCANGEN_CWD, VULCANGEN_MANIFEST, VULCANGEN_PACKAGES_DIR,
            VULCANGEN_ENV (``development`` turns on the action log).
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("VULCANGEN_CWD"):
            kwargs["cwd"] = Path(os.environ["VULCANGEN_CWD"])
        if os.environ.get("VULCANGEN_MANIFEST"):
            kwargs["manifest_name"] = os.environ["VULCANGEN_MANIFEST"]
        if os.environ.get("VULCANGEN_PACKAGES_DIR"):
            kwargs["packages_dir"] = os.environ["VULCANGEN_PACKAGES_DIR"]

        kwargs["debug"] = os.environ.get("VULCANGEN_ENV", "").lower() == "development"
        return cls(**kwargs)
