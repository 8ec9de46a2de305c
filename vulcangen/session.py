"""Per-command session context.

A ``Session`` owns everything one command needs: the configuration, the
manifest, the project store, the error registry and the guards and gate
built on them.  Nothing lives at module level, so two sessions in the same
process never share state.
"""

from __future__ import annotations

from typing import Optional

from vulcangen.config import Config
from vulcangen.guards import ErrorRegistry, Guards
from vulcangen.phases import PhaseGate
from vulcangen.state.manifest import Manifest
from vulcangen.state.store import ProjectStore
from vulcangen.utils import console


class Session:
    """State shared by the phases of one generator run.

    The manifest and the store are loaded lazily on first access and then
    kept for the life of the session.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.errors = ErrorRegistry()
        self.gate = PhaseGate(self.errors)
        self._manifest: Optional[Manifest] = None
        self._store: Optional[ProjectStore] = None
        self._guards: Optional[Guards] = None

    @property
    def manifest(self) -> Manifest:
        if self._manifest is None:
            self._manifest = Manifest(self.config.manifest_path)
        return self._manifest

    @property
    def store(self) -> ProjectStore:
        if self._store is None:
            self._store = ProjectStore(
                self.manifest.load_state(),
                console=console if self.config.debug else None,
            )
        return self._store

    @property
    def guards(self) -> Guards:
        if self._guards is None:
            self._guards = Guards(self.store, self.errors)
        return self._guards

    def commit(self) -> None:
        """Flush the store to the manifest and write it once."""
        self.store.commit(self.manifest.set)
        self.manifest.save()
