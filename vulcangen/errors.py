"""Exceptions raised by vulcangen.

Validation problems caused by user input (a missing package, a name that is
already taken) are never raised: they are registered in the session's
``ErrorRegistry`` and reported at the end of the command.  The exceptions
below cover programming errors and unreadable files only.
"""

from __future__ import annotations

from pathlib import Path


class VulcanGenError(Exception):
    """Base class for every error raised by vulcangen."""


class ActionError(VulcanGenError):
    """Raised when an action dispatched to the store has a malformed payload."""

    def __init__(self, action_type: str, message: str) -> None:
        self.action_type = action_type
        super().__init__(f"Invalid {action_type} action: {message}")


class ManifestError(VulcanGenError):
    """Raised when the project manifest cannot be read or validated."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot load manifest {path}: {message}")
