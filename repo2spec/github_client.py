"""
github_client.py

Responsibility: Isolate all direct GitHub REST API interaction.

This module must be the only place that:
- Constructs GitHub REST endpoints
- Sends HTTP requests to api.github.com
- Interprets GitHub API responses / error payloads

Mapping the responses onto packaging parameters is done in `fetcher.py`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from repo2spec import __version__

logger = logging.getLogger(__name__)


class GitHubError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConnectivityError(GitHubError):
    pass


class RepositoryNotFoundError(GitHubError):
    pass


@dataclass(frozen=True)
class RepoInfo:
    owner: str
    name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    homepage: str | None = None


class GitHubClient:
    def __init__(self, token: str | None = None, api_base: str = "https://api.github.com") -> None:
        self._token = (token or "").strip() or None
        self._api_base = api_base.rstrip("/")
        self._session = requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"repo2spec/{__version__}",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _request(self, method: str, path: str) -> Any:
        url = f"{self._api_base}{path}"
        logger.debug("%s %s", method, url)
        try:
            r = self._session.request(method, url, headers=self._headers(), timeout=30)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise ConnectivityError(f"Cannot reach {self._api_base}: no network connection") from e
        if r.status_code >= 400:
            try:
                payload = r.json()
            except ValueError:
                payload = {"message": r.text}
            message = payload.get("message", payload) if isinstance(payload, dict) else payload
            raise GitHubError(f"GitHub API error {r.status_code} {method} {path}: {message}", r.status_code)
        if r.status_code == 204:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise GitHubError(f"GitHub API returned a non-JSON body for {method} {path}", r.status_code) from e

    def get_repo(self, owner: str, name: str) -> RepoInfo:
        """
        Return RepoInfo for owner/name.

        Any API error on this lookup means the repository is missing or not
        accessible to us.
        """
        try:
            data = self._request("GET", f"/repos/{owner}/{name}")
        except ConnectivityError:
            raise
        except GitHubError as e:
            raise RepositoryNotFoundError(
                f"Repository {owner}/{name} not found or not accessible", e.status_code
            ) from e
        return RepoInfo(
            owner=owner,
            name=data.get("name") or name,
            html_url=data.get("html_url") or f"https://github.com/{owner}/{name}",
            description=data.get("description"),
            language=data.get("language"),
            homepage=data.get("homepage"),
        )

    def get_license(self, owner: str, name: str) -> str | None:
        """
        Return the SPDX id of the repository license; None if GitHub knows none.
        """
        try:
            data = self._request("GET", f"/repos/{owner}/{name}/license")
        except GitHubError as e:
            if e.status_code == 404:
                return None
            raise
        spdx_id = ((data or {}).get("license") or {}).get("spdx_id")
        if not spdx_id or spdx_id == "NOASSERTION":
            return None
        return str(spdx_id)

    def list_tags(self, owner: str, name: str) -> list[str]:
        """
        Return tag names in the order GitHub lists them (newest first in practice).
        """
        data = self._request("GET", f"/repos/{owner}/{name}/tags") or []
        return [str(item["name"]) for item in data if item.get("name")]
