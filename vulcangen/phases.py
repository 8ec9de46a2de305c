"""Phase gate: decides whether a lifecycle phase may run.

A generator runs ``initializing`` and ``end`` unconditionally.  Every phase in
between is gated: as soon as any guard error is registered, the remaining
gated phases are skipped, so a failed command never writes half a result.
"""

from __future__ import annotations

from vulcangen.guards import ErrorRegistry
from vulcangen.utils import console, print_error


GATED_PHASES: tuple[str, ...] = ("prompting", "configuring", "writing", "install")


class PhaseGate:
    """Pass/fail decisions for each gated phase, backed by an error registry."""

    def __init__(self, registry: ErrorRegistry) -> None:
        self.registry = registry

    def has_no_errors(self) -> bool:
        return not self.registry.has_errors()

    def can_prompt(self) -> bool:
        return self.has_no_errors()

    def can_configure(self) -> bool:
        return self.has_no_errors()

    def can_write(self) -> bool:
        return self.has_no_errors()

    def can_install(self) -> bool:
        return self.has_no_errors()

    def can_run(self, phase: str) -> bool:
        """Gate check by phase name.

        Raises:
            ValueError: If *phase* is not one of ``GATED_PHASES``.
        """
        checks = {
            "prompting": self.can_prompt,
            "configuring": self.can_configure,
            "writing": self.can_write,
            "install": self.can_install,
        }
        if phase not in checks:
            raise ValueError(f"Unknown lifecycle phase: {phase!r}")
        return checks[phase]()

    def format_errors(self) -> list[str]:
        """One line per registered error, prefixed with its index."""
        return [
            f"Error ({index}): {error.plain}"
            for index, error in enumerate(self.registry.errors())
        ]

    def report(self) -> int:
        """Print every registered error and return the exit status."""
        errors = self.registry.errors()
        for index, error in enumerate(errors):
            print_error(f"Error ({index}):")
            console.print(f"  {error.message}", style="red")
        return 1 if errors else 0
