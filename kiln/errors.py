"""
Kiln Errors - One exception class per failure kind

The CLI matches on these to pick the process exit code.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for failures that abort a scaffolding run."""

    exit_code: int = 2


class FolderAlreadyExists(ScaffoldError):
    exit_code = 1

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"A folder at {self.path} already exists")


class RepositoryInitFailed(ScaffoldError):
    exit_code = 1

    def __init__(self, cwd: str | Path, command: str = "git init"):
        self.cwd = Path(cwd)
        super().__init__(f"`{command}` command failed on: {self.cwd}")


class DependencyInstallFailed(ScaffoldError):
    def __init__(self, cwd: str | Path, command: str = "npm install"):
        self.cwd = Path(cwd)
        super().__init__(f"`{command}` command failed on: {self.cwd}")


class InvalidComponentName(ScaffoldError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"'{value}' is not a valid component name "
            "(expected snake_case, kebab-case or UpperCamelCase)"
        )


class TemplateNotFound(ScaffoldError):
    def __init__(self, name: str, templates_dir: str | Path):
        self.name = name
        super().__init__(f"Template '{name}' not found in {templates_dir}")
