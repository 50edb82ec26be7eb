"""
Kiln Prompts - Interactive questions asked before scaffolding

Text prompts loop until their validator accepts the answer.
"""

from __future__ import annotations

from typing import Callable, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

# Returns an error message for a rejected value, None for an accepted one
Validator = Callable[[str], "str | None"]


class Prompter(Protocol):
    def text(self, message: str, validator: Validator) -> str: ...

    def confirm(self, message: str, default: bool) -> bool: ...


class RichPrompter:
    """Prompter backed by rich.prompt."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def text(self, message: str, validator: Validator) -> str:
        while True:
            value = Prompt.ask(message, console=self.console).strip()
            error = validator(value)
            if error is None:
                return value
            self.console.print(f"[red]✗[/red] {error}")

    def confirm(self, message: str, default: bool) -> bool:
        return Confirm.ask(message, default=default, console=self.console)
