from __future__ import annotations

from unittest.mock import Mock

import pytest

from repo2spec.config import Config
from repo2spec.fetcher import (
    InvalidRepositoryURL,
    MetadataFetcher,
    language_to_type,
    parse_repo_id,
    version_from_tag,
)
from repo2spec.github_client import GitHubClient, RepoInfo


def _client(*, language: str | None = "Go", license: str | None = None, tags: list[str] | None = None) -> Mock:
    client = Mock(spec=GitHubClient)
    client.get_repo.return_value = RepoInfo(
        owner="owner",
        name="repo",
        html_url="https://github.com/owner/repo",
        description="desc",
        language=language,
    )
    client.get_license.return_value = license
    client.list_tags.return_value = tags or []
    return client


def test_version_from_tag() -> None:
    assert version_from_tag("v0.10.4") == "0.10.4"
    assert version_from_tag("1.2.3") == "1.2.3"
    assert version_from_tag("vv1") == "v1"


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/owner/repo",
        "https://github.com/owner/repo.git",
        "https://github.com/owner/repo/tree/main/src",
        "git@github.com:owner/repo.git",
        "owner/repo",
        "github.com/owner/repo",
        "github.com/owner/repo.git",
    ],
)
def test_parse_repo_id(url: str) -> None:
    assert parse_repo_id(url) == "owner/repo"


@pytest.mark.parametrize("url", ["https://github.com/owner", "github.com/owner", "repo", ""])
def test_parse_repo_id_rejects_incomplete(url: str) -> None:
    with pytest.raises(InvalidRepositoryURL):
        parse_repo_id(url)


def test_language_to_type() -> None:
    config = Config()
    assert language_to_type("Go", config) == "golang"
    assert language_to_type("Brainfuck", config) == "common"
    assert language_to_type(None, config) == "common"


def test_fetch_maps_repository_metadata() -> None:
    client = _client(license="MIT", tags=["v1.0.0", "v0.9.0"])

    params = MetadataFetcher(client, Config()).fetch("owner/repo")

    client.get_repo.assert_called_once_with("owner", "repo")
    assert params.name == "repo"
    assert params.summary == "desc"
    assert params.description is None
    assert params.type == "golang"
    assert params.license == "MIT"
    assert params.url == "https://github.com/owner/repo"
    assert params.tag == "v1.0.0"
    assert params.version == "1.0.0"


def test_fetch_without_tags_or_license() -> None:
    params = MetadataFetcher(_client(language=None), Config()).fetch("owner/repo")
    assert params.tag is None
    assert params.version is None
    assert params.license is None
    assert params.type == "common"


def test_fetch_prefers_homepage_for_url() -> None:
    client = _client()
    client.get_repo.return_value = RepoInfo(
        owner="owner",
        name="repo",
        html_url="https://github.com/owner/repo",
        homepage="https://repo.example.org",
    )
    assert MetadataFetcher(client, Config()).fetch("owner/repo").url == "https://repo.example.org"


def test_custom_language_table() -> None:
    config = Config(language_types={"Go": "go-module"}, fallback_type="generic")
    params = MetadataFetcher(_client(), config).fetch("owner/repo")
    assert params.type == "go-module"


def test_parse_repo_id_keeps_dotted_repository_name() -> None:
    assert parse_repo_id("owner/repo.js") == "owner/repo.js"
