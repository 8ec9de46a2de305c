"""Interactive questions, answered through ``rich.prompt``.

Generators only ask what the command line did not already answer.  The
``Prompter`` is passed to every generator so tests can swap in scripted
answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from vulcangen.utils import console as default_console


@dataclass(frozen=True)
class Choice:
    """One entry of a multi-select question."""

    name: str
    value: str
    checked: bool = True
    disabled: bool = False


def selection_to_set(values: Sequence[str]) -> dict[str, bool]:
    """``["list", "total"]`` -> ``{"list": True, "total": True}``."""
    return {value: True for value in values}


class Prompter:
    """Asks questions on the console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or default_console

    def text(self, message: str, default: Optional[str] = None) -> str:
        """Ask for a non-empty line of text."""
        while True:
            if default:
                answer = Prompt.ask(message, default=default, console=self.console)
            else:
                answer = Prompt.ask(message, console=self.console)
            if answer and answer.strip():
                return answer.strip()
            self.console.print("[prompt.invalid]Please enter a value")

    def choice(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str:
        """Ask the user to pick one of *choices*."""
        if default not in choices:
            default = choices[0] if choices else None
        return Prompt.ask(
            message,
            choices=list(choices),
            default=default,
            console=self.console,
        )

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def checkbox(self, message: str, choices: Sequence[Choice]) -> dict[str, bool]:
        """Ask for a comma-separated subset of *choices*.

        Disabled choices that are checked are always part of the answer.
        """
        forced = [c.value for c in choices if c.disabled and c.checked]
        selectable = [c for c in choices if not c.disabled]
        valid = {c.value for c in selectable}
        default = ",".join(c.value for c in selectable if c.checked)

        for c in choices:
            marker = escape("[x]" if c.checked else "[ ]")
            suffix = " [dim](always)[/dim]" if c.disabled else ""
            self.console.print(f"  {marker} {escape(c.name)} [dim]({c.value})[/dim]{suffix}")

        while True:
            answer = Prompt.ask(
                f"{message} (comma-separated, '-' for none)",
                default=default or "-",
                console=self.console,
            )
            picked = parse_selection(answer)
            unknown = [value for value in picked if value not in valid]
            if not unknown:
                return selection_to_set(forced + picked)
            self.console.print(
                f"[prompt.invalid]Unknown choice(s): {', '.join(unknown)}"
            )


def parse_selection(answer: str) -> list[str]:
    """Split a comma-separated selection; ``-`` or blank means nothing."""
    if answer.strip() in ("", "-"):
        return []
    seen: list[str] = []
    for item in answer.split(","):
        value = item.strip().lower()
        if value and value not in seen:
            seen.append(value)
    return seen
