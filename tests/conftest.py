"""Shared test fixtures for Pochade tests."""
import io
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from pochade.core.config import DEFAULT_TEMPLATE_DIR, PochadeConfig, set_config
from pochade.scaffold.installer import InstallResult


class ScriptedAnswerSource:
    """Answers questions from a script keyed by question text.

    A list of answers is consumed one per ask, which lets tests feed a
    rejected answer followed by a valid one.
    """

    def __init__(self, answers: Optional[Dict[str, object]] = None):
        self.answers = {key: list(value) if isinstance(value, list) else [value]
                        for key, value in (answers or {}).items()}
        self.asked: List[str] = []

    def ask(self, question: str, default: str = "") -> str:
        self.asked.append(question)
        queue = self.answers.get(question)
        if queue:
            return queue.pop(0) or default
        return default


class FakeInstaller:
    """Records install calls and returns a fixed exit code."""

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.directories: List[str] = []

    def install(self, directory: str) -> InstallResult:
        self.directories.append(directory)
        return InstallResult(exit_code=self.exit_code)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep the operator's defaults file and environment out of tests."""
    defaults_file = tmp_path_factory.mktemp("config") / "defaults.yml"
    monkeypatch.setenv("POCHADE_DEFAULTS_FILE", str(defaults_file))
    monkeypatch.delenv("POCHADE_TEMPLATE_DIR", raising=False)
    monkeypatch.delenv("POCHADE_PACKAGE_MANAGER", raising=False)
    monkeypatch.delenv("POCHADE_WARN_ORPHAN_TOKENS", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def pochade_config(tmp_path) -> PochadeConfig:
    """Config pointing at the bundled templates and a per-test defaults file."""
    return PochadeConfig(
        template_dir=DEFAULT_TEMPLATE_DIR,
        defaults_file=tmp_path / "defaults.yml",
    )


@pytest.fixture
def quiet_console() -> Console:
    """Console writing to a buffer (``console.file.getvalue()``)."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def workspace(tmp_path) -> Path:
    """Empty directory projects get created in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def answer_source():
    """Factory for scripted answer sources."""
    return ScriptedAnswerSource


@pytest.fixture
def installer() -> FakeInstaller:
    return FakeInstaller()


@pytest.fixture
def failing_installer() -> FakeInstaller:
    return FakeInstaller(exit_code=1)
