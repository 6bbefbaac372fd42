from __future__ import annotations

import logging
from pathlib import Path

import pytest

from repo2spec.templates import list_types


def test_list_types_sorted_and_stripped(templates_dir: Path) -> None:
    assert list_types(templates_dir) == ["golang", "golang-bin", "python3"]


def test_list_types_other_suffix(tmp_path: Path) -> None:
    (tmp_path / "ruby.tmpl").write_text("", encoding="utf-8")
    (tmp_path / "ruby.spec").write_text("", encoding="utf-8")
    assert list_types(tmp_path, ".tmpl") == ["ruby"]


def test_missing_directory_is_not_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="repo2spec.templates"):
        assert list_types(tmp_path / "nope") == []
    assert "template directory" in caplog.text
