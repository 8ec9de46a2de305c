"""Lifecycle runner shared by every generator.

A generator runs these phases in order:

1. ``initializing`` -- always runs; registers guard errors about the project.
2. ``prompting``    -- gated; gathers names and options.
3. ``configuring``  -- gated; dispatches actions and commits the store.
4. ``writing``      -- gated; renders templates into the project.
5. ``install``      -- gated; post-write steps.
6. ``end``          -- always runs; reports every registered error.

A gated phase is skipped entirely once any error has been registered.
"""

from __future__ import annotations

from typing import Any, Optional

from vulcangen.config import Config
from vulcangen.filters import filter_module_name, filter_package_name
from vulcangen.guards import Guards
from vulcangen.phases import GATED_PHASES, PhaseGate
from vulcangen.prompts import Prompter
from vulcangen.scaffolder.templates import TemplateRenderer
from vulcangen.session import Session
from vulcangen.state.store import ProjectStore
from vulcangen.utils import print_phase_header


class BaseGenerator:
    """Base class for all vulcangen commands.

    Attributes:
        session: The command's session (config, store, errors).
        options: Answers already given on the command line.  Keys use the
            prop names (``package_name``, ``module_name``, ...).
        props: Normalized answers collected during ``prompting``.
        phases_run: Gated phases that ran, in order.
        phases_skipped: Gated phases skipped by the gate.
    """

    def __init__(
        self,
        session: Session,
        options: Optional[dict[str, Any]] = None,
        prompter: Optional[Prompter] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.session = session
        self.options: dict[str, Any] = {k: v for k, v in (options or {}).items() if v is not None}
        self.prompter = prompter or Prompter()
        self.renderer = renderer or TemplateRenderer()
        self.props: dict[str, Any] = {}
        self.phases_run: list[str] = []
        self.phases_skipped: list[str] = []

    # ------------------------------------------------------------------
    # Session shortcuts
    # ------------------------------------------------------------------

    @property
    def config(self) -> Config:
        return self.session.config

    @property
    def store(self) -> ProjectStore:
        return self.session.store

    @property
    def guards(self) -> Guards:
        return self.session.guards

    @property
    def gate(self) -> PhaseGate:
        return self.session.gate

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Run every phase and return the exit status."""
        self.initializing()
        for phase in GATED_PHASES:
            if not self.gate.can_run(phase):
                self.phases_skipped.append(phase)
                continue
            if self.config.debug:
                print_phase_header(phase)
            getattr(self, phase)()
            self.phases_run.append(phase)
        return self.end()

    def initializing(self) -> None:
        pass

    def prompting(self) -> None:
        pass

    def configuring(self) -> None:
        pass

    def writing(self) -> None:
        pass

    def install(self) -> None:
        pass

    def end(self) -> int:
        return self.gate.report()

    # ------------------------------------------------------------------
    # Common questions
    # ------------------------------------------------------------------

    def _ask_package_name(self) -> Optional[str]:
        """Free-text package name, normalized; ``None`` if it is invalid."""
        raw = self.options.get("package_name") or self.prompter.text("Package name")
        package_name = filter_package_name(raw)
        if self.guards.assert_valid_name("package", raw, package_name):
            return None
        return package_name

    def _choose_package_name(self) -> Optional[str]:
        """Package picked from the store, or taken from the options."""
        raw = self.options.get("package_name")
        if not raw:
            raw = self.prompter.choice("Package name", self.store.list_package_names())
        package_name = filter_package_name(raw)
        if self.guards.assert_valid_name("package", raw, package_name):
            return None
        return package_name

    def _ask_module_name(self) -> Optional[str]:
        raw = self.options.get("module_name") or self.prompter.text("Module name")
        module_name = filter_module_name(raw)
        if self.guards.assert_valid_name("module", raw, module_name):
            return None
        return module_name

    def _choose_module_name(self, package_name: str) -> Optional[str]:
        raw = self.options.get("module_name")
        if not raw:
            raw = self.prompter.choice(
                "Module name", self.store.list_module_names(package_name)
            )
        module_name = filter_module_name(raw)
        if self.guards.assert_valid_name("module", raw, module_name):
            return None
        return module_name

    # ------------------------------------------------------------------
    # Common writers
    # ------------------------------------------------------------------

    def _write_modules_index(self, package_name: str) -> None:
        """Regenerate ``lib/modules/index.js`` from the store's module list."""
        self.renderer.render_to_file(
            "package/lib/modules/index.js.j2",
            self.config.modules_index_path(package_name),
            {
                "package_name": package_name,
                "module_names": self.store.list_module_names(package_name),
            },
        )
