"""Shared pytest fixtures for the vulcangen test suite.

Provides reusable fixtures for:
- Temporary project directories with and without a manifest
- Sessions bound to those directories
- A scripted prompter that replays canned answers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

import pytest

from vulcangen.config import Config
from vulcangen.prompts import Choice, Prompter, selection_to_set
from vulcangen.session import Session


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter(Prompter):
    """Replays canned answers, one queue per question kind.

    Asking a question whose queue is empty fails the test, so every test
    states exactly which questions it expects.
    """

    def __init__(
        self,
        text: Sequence[str] = (),
        choice: Sequence[str] = (),
        confirm: Sequence[bool] = (),
        checkbox: Sequence[Sequence[str]] = (),
    ) -> None:
        super().__init__()
        self._answers: dict[str, list[Any]] = {
            "text": list(text),
            "choice": list(choice),
            "confirm": list(confirm),
            "checkbox": list(checkbox),
        }
        self.asked: list[tuple[str, str]] = []
        self.offered_choices: list[list[str]] = []

    def _next(self, kind: str, message: str) -> Any:
        self.asked.append((kind, message))
        queue = self._answers[kind]
        if not queue:
            raise AssertionError(f"Unexpected {kind} question: {message!r}")
        return queue.pop(0)

    def text(self, message: str, default: Optional[str] = None) -> str:
        return self._next("text", message)

    def choice(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str:
        self.offered_choices.append(list(choices))
        answer = self._next("choice", message)
        assert answer in choices, f"{answer!r} not offered in {list(choices)}"
        return answer

    def confirm(self, message: str, default: bool = True) -> bool:
        return self._next("confirm", message)

    def checkbox(self, message: str, choices: Sequence[Choice]) -> dict[str, bool]:
        forced = [c.value for c in choices if c.disabled and c.checked]
        return selection_to_set(forced + list(self._next("checkbox", message)))

    def unanswered(self) -> dict[str, list[Any]]:
        return {kind: queue for kind, queue in self._answers.items() if queue}


@pytest.fixture
def scripted_prompter() -> type[ScriptedPrompter]:
    """The ``ScriptedPrompter`` class, for tests that build their own."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Project directories
# ---------------------------------------------------------------------------


def write_manifest(project_dir: Path, data: dict[str, Any]) -> Path:
    path = project_dir / ".vulcangen.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Directory with no manifest (not a recognized project)."""
    directory = tmp_path / "outside"
    directory.mkdir()
    return directory


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Recognized project with no packages."""
    directory = tmp_path / "my-app"
    directory.mkdir()
    write_manifest(directory, {"isRecognizedProject": True, "appName": "my-app", "packages": {}})
    return directory


@pytest.fixture
def blog_project_dir(tmp_path: Path) -> Path:
    """Recognized project with a ``blog`` package holding ``comment`` and ``post``."""
    directory = tmp_path / "blog-app"
    directory.mkdir()
    write_manifest(
        directory,
        {
            "isRecognizedProject": True,
            "appName": "blog-app",
            "packages": {
                "blog": {
                    "name": "blog",
                    "modules": {
                        "post": {"name": "post"},
                        "comment": {"name": "comment"},
                    },
                },
                "shop": {"name": "shop", "modules": {}},
            },
        },
    )
    return directory


@pytest.fixture
def make_session() -> Callable[[Path], Session]:
    """Factory: a fresh ``Session`` rooted at the given directory."""

    def _make(directory: Path, debug: bool = False) -> Session:
        return Session(Config(cwd=directory, debug=debug))

    return _make


def read_manifest(project_dir: Path) -> dict[str, Any]:
    return json.loads((project_dir / ".vulcangen.json").read_text(encoding="utf-8"))


@pytest.fixture
def manifest_reader() -> Callable[[Path], dict[str, Any]]:
    return read_manifest
