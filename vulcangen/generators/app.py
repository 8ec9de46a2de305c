"""``vulcangen app`` -- create a new project directory.

The new directory gets a manifest that marks it as a recognized project, so
every other generator can run inside it.
"""

from __future__ import annotations

from rich.panel import Panel

from vulcangen.filters import filter_app_name
from vulcangen.state.manifest import Manifest
from vulcangen.state.models import ProjectState
from vulcangen.state.store import ProjectStore
from vulcangen.utils import console, print_success

from .base import BaseGenerator


class AppGenerator(BaseGenerator):
    """Creates ``<cwd>/<app-name>/`` with a fresh manifest and skeleton."""

    def initializing(self) -> None:
        self.guards.assert_is_not_recognized_project()

    def prompting(self) -> None:
        raw = self.options.get("app_name") or self.prompter.text("App name")
        app_name = filter_app_name(raw)
        if self.guards.assert_valid_name("app", raw, app_name):
            return
        app_path = self.config.cwd / app_name
        if self.guards.assert_directory_available(app_path):
            return
        self.props = {"app_name": app_name, "app_path": app_path}

    def configuring(self) -> None:
        app_config = self.config.with_cwd(self.props["app_path"])
        app_store = ProjectStore(
            ProjectState(is_recognized_project=True, app_name=self.props["app_name"])
        )
        manifest = Manifest(app_config.manifest_path)
        app_store.commit(manifest.set)
        manifest.save()

    def writing(self) -> None:
        self.renderer.render_tree(
            "app", self.props["app_path"], {"app_name": self.props["app_name"]}
        )

    def install(self) -> None:
        app_name = self.props["app_name"]
        console.print(
            Panel(
                f"cd {app_name}\n"
                "meteor npm install\n"
                "vulcangen package",
                title="[bold]Next steps[/bold]",
                border_style="bright_cyan",
            )
        )

    def end(self) -> int:
        if self.gate.has_no_errors():
            print_success(f"Created app '{self.props['app_name']}'.")
        return super().end()
