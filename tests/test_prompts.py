from __future__ import annotations

import io

import pytest
from rich.console import Console

from kiln.naming import validate_component_name
from kiln.prompts import RichPrompter


def test_text_reprompts_until_valid(monkeypatch: pytest.MonkeyPatch):
    answers = iter(["My_Bad-Name", "  ", "my_widget"])
    monkeypatch.setattr("kiln.prompts.Prompt.ask", lambda *args, **kwargs: next(answers))
    output = io.StringIO()
    prompter = RichPrompter(Console(file=output))

    assert prompter.text("Component name", validate_component_name) == "my_widget"
    assert output.getvalue().count("UpperCamelCase") == 2


def test_confirm_passes_default(monkeypatch: pytest.MonkeyPatch):
    seen = {}

    def fake_ask(message, default, console):
        seen["default"] = default
        return default

    monkeypatch.setattr("kiln.prompts.Confirm.ask", fake_ask)
    assert RichPrompter(Console(file=io.StringIO())).confirm("Create a git repository?", True) is True
    assert seen["default"] is True
