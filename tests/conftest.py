from __future__ import annotations

from pathlib import Path

import pytest

from repo2spec.config import Config
from repo2spec.parameters import ParameterSet


class FakeFetcher:
    """Stands in for MetadataFetcher; records the requested repository ids."""

    def __init__(self, params: ParameterSet) -> None:
        self.params = params
        self.calls: list[str] = []

    def fetch(self, repo_id: str) -> ParameterSet:
        self.calls.append(repo_id)
        return self.params


class ScriptedInput:
    """Replays answers for `input()`; raises EOFError when exhausted."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def fetched_parameters() -> ParameterSet:
    return ParameterSet(
        name="repo",
        summary="desc",
        type="golang",
        url="https://github.com/owner/repo",
        tag="v1.0.0",
        version="1.0.0",
    )


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    d = tmp_path / "templates"
    d.mkdir()
    for name in ("golang.spec", "golang-bin.spec", "python3.spec", "README"):
        (d / name).write_text("", encoding="utf-8")
    return d


@pytest.fixture
def config(templates_dir: Path) -> Config:
    return Config(templates_dir=templates_dir, api_base="https://api.test")
