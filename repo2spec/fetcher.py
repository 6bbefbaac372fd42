"""
fetcher.py

Responsibility: Turn a repository reference into fetched packaging parameters.

Terminology: GitHub's repository "description" becomes our `summary`. Our own
`description` parameter is a separate field that defaults to "%summary".
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

from repo2spec.config import Config
from repo2spec.github_client import GitHubClient
from repo2spec.parameters import ParameterSet

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")
_SCP_RE = re.compile(r"^[\w.-]+@[\w.-]+:(?P<path>.+)$")


class InvalidRepositoryURL(ValueError):
    pass


def parse_repo_id(url: str) -> str:
    """
    Extract the `owner/name` slug from a repository reference.

    Accepts https://github.com/owner/name[.git][/...], git@github.com:owner/name.git,
    github.com/owner/name and a bare owner/name.
    """
    text = url.strip()
    bare = False
    scp = _SCP_RE.match(text)
    if scp:
        path = scp.group("path")
    elif "://" in text:
        path = urlparse(text).path
    else:
        path = text
        bare = True

    parts = [p for p in path.split("/") if p]
    if bare and parts and "." in parts[0]:
        # host without a scheme; GitHub owners cannot contain dots
        parts = parts[1:]
    if len(parts) < 2:
        raise InvalidRepositoryURL(f"Cannot find owner/name in repository URL: {url!r}")
    owner, name = parts[0], parts[1]
    if name.endswith(".git"):
        name = name[: -len(".git")]

    slug = f"{owner}/{name}"
    if not _SLUG_RE.match(slug):
        raise InvalidRepositoryURL(f"Cannot find owner/name in repository URL: {url!r}")
    return slug


def version_from_tag(tag: str) -> str:
    """Strip a single leading `v` ("v0.10.4" -> "0.10.4")."""
    return tag[1:] if tag.startswith("v") else tag


def language_to_type(language: str | None, config: Config) -> str:
    if not language:
        return config.fallback_type
    return config.language_types.get(language, config.fallback_type)


class MetadataFetcher:
    def __init__(self, client: GitHubClient, config: Config) -> None:
        self._client = client
        self._config = config

    @classmethod
    def from_config(cls, config: Config) -> "MetadataFetcher":
        return cls(GitHubClient(config.token, api_base=config.api_base), config)

    def fetch(self, repo_id: str) -> ParameterSet:
        """
        Query repository info, license and tags for `repo_id` ("owner/name").

        Raises ConnectivityError / RepositoryNotFoundError from the client.
        """
        owner, name = repo_id.split("/", 1)

        repo = self._client.get_repo(owner, name)
        params: dict[str, str | None] = {
            "name": repo.name,
            "summary": repo.description,
            "type": language_to_type(repo.language, self._config),
            "url": repo.homepage or repo.html_url,
        }

        params["license"] = self._client.get_license(owner, name)
        if params["license"] is None:
            logger.info("No license detected for %s", repo_id)

        tags = self._client.list_tags(owner, name)
        if tags:
            params["tag"] = tags[0]
            params["version"] = version_from_tag(tags[0])
        else:
            logger.info("No tags found for %s", repo_id)

        fetched = ParameterSet.from_mapping(params)
        logger.debug("Fetched parameters for %s: %s", repo_id, fetched.defined())
        return fetched
