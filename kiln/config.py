"""
Kiln Config - Pydantic model for kiln.yaml

Every setting has a default, so an empty file (or no file at all) yields a
working configuration.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "KILN_CONFIG"

_EXTENSION = re.compile(r"[A-Za-z0-9]+")


class KilnConfig(BaseModel):
    """Scaffolding settings"""

    source_extension: str = Field("ts", alias="sourceExtension")
    config_extension: str = Field("js", alias="configExtension")
    templates_dir: Path | None = Field(None, alias="templatesDir")
    git_command: list[str] = Field(["git", "init"], alias="gitCommand")
    install_command: list[str] = Field(["npm", "install"], alias="installCommand")

    # Defaults offered by the confirmation prompts
    init_repository: bool = Field(True, alias="initRepository")
    install_dependencies: bool = Field(True, alias="installDependencies")

    log_level: str = Field("WARNING", alias="logLevel")

    model_config = {"populate_by_name": True}

    @field_validator("source_extension", "config_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Extensions are given without the leading dot"""
        v = v.lstrip(".")
        if not _EXTENSION.fullmatch(v):
            raise ValueError(f"invalid file extension: {v!r}")
        return v

    @field_validator("git_command", "install_command")
    @classmethod
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v or not v[0].strip():
            raise ValueError("command must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "KilnConfig":
        """Parse YAML content into KilnConfig"""
        import yaml

        data = yaml.safe_load(yaml_content) or {}
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "KilnConfig":
        """Load config from YAML file"""
        content = Path(path).read_text(encoding="utf-8")
        return cls.from_yaml(content)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "KilnConfig":
        """
        Resolve the active configuration.

        Args:
            path: Explicit config file. Falls back to $KILN_CONFIG, then defaults.
        """
        if path is None:
            path = os.environ.get(CONFIG_ENV_VAR) or None
        if path is None:
            return cls()
        return cls.from_file(path)
