"""Stand-ins for the process runner and the interactive prompter."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self, fail_on: Sequence[str] = ()):
        self.fail_on = set(fail_on)
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, command: Sequence[str], cwd: Path) -> bool:
        self.calls.append((list(command), cwd))
        return command[0] not in self.fail_on


class ScriptedPrompter:
    """Answers prompts from a fixed script."""

    def __init__(self, texts: Sequence[str] = (), confirms: Sequence[bool] = ()):
        self.texts = list(texts)
        self.confirms = list(confirms)
        self.rejected: list[str] = []

    def text(self, message, validator):
        while True:
            value = self.texts.pop(0)
            if validator(value) is None:
                return value
            self.rejected.append(value)

    def confirm(self, message, default):
        return self.confirms.pop(0) if self.confirms else default
