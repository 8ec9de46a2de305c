"""The persisted project manifest.

A flat JSON object stored in the project root (``.vulcangen.json`` by
default).  The whole file is read once when the manifest is opened.
:meth:`Manifest.set` only updates the in-memory copy; :meth:`Manifest.save`
writes the file, once per commit.  Keys the store does not know about are
kept as they are.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vulcangen.errors import ManifestError
from vulcangen.utils import load_json, save_json

from .models import ProjectState


class Manifest:
    """Key/value view over the project manifest file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] = self._read()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = load_json(self.path)
        except (OSError, json.JSONDecodeError) as exc:
            raise ManifestError(self.path, str(exc)) from exc
        if not isinstance(data, dict):
            raise ManifestError(self.path, "expected a JSON object at the top level")
        return data

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_all(self) -> dict[str, Any]:
        """Return a shallow copy of every key in the manifest."""
        return dict(self._data)

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*.  Nothing is written until :meth:`save`."""
        self._data[key] = value

    def save(self) -> None:
        """Write every key to the file in a single write."""
        try:
            save_json(self._data, self.path)
        except OSError as exc:
            raise ManifestError(self.path, str(exc)) from exc

    def load_state(self) -> ProjectState:
        """Validate the manifest into a ``ProjectState``.

        A missing manifest yields the default state (not a recognized
        project, no packages).

        Raises:
            ManifestError: If a known key has the wrong shape, or a package
                or module key is not its canonical name.
        """
        try:
            return ProjectState.model_validate(self._data)
        except ValidationError as exc:
            raise ManifestError(self.path, str(exc)) from exc
