from __future__ import annotations

import pytest

from tests.fakes import FakeRunner


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def failing_git() -> FakeRunner:
    return FakeRunner(fail_on=["git"])


@pytest.fixture()
def failing_npm() -> FakeRunner:
    return FakeRunner(fail_on=["npm"])


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's $KILN_CONFIG out of the tests."""

    monkeypatch.delenv("KILN_CONFIG", raising=False)
