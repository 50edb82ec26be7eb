from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from kiln.config import KilnConfig


def test_defaults():
    config = KilnConfig()
    assert config.source_extension == "ts"
    assert config.config_extension == "js"
    assert config.templates_dir is None
    assert config.git_command == ["git", "init"]
    assert config.install_command == ["npm", "install"]
    assert config.init_repository is True
    assert config.install_dependencies is True


def test_from_yaml_uses_aliases():
    config = KilnConfig.from_yaml(
        "sourceExtension: .tsx\n"
        "installCommand: [pnpm, install]\n"
        "initRepository: false\n"
        "logLevel: info\n"
    )
    assert config.source_extension == "tsx"
    assert config.install_command == ["pnpm", "install"]
    assert config.init_repository is False
    assert config.log_level == "INFO"


def test_empty_yaml_gives_defaults():
    assert KilnConfig.from_yaml("") == KilnConfig()


@pytest.mark.parametrize(
    "content",
    [
        "sourceExtension: 'a/b'\n",
        "gitCommand: []\n",
        "logLevel: chatty\n",
    ],
)
def test_invalid_values_are_rejected(content):
    with pytest.raises(ValidationError):
        KilnConfig.from_yaml(content)


def test_load_reads_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "kiln.yaml"
    path.write_text("configExtension: mjs\n")
    monkeypatch.setenv("KILN_CONFIG", str(path))
    assert KilnConfig.load().config_extension == "mjs"


def test_load_without_file_gives_defaults():
    assert KilnConfig.load() == KilnConfig()
