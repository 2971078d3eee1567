"""GitHub REST v3 client wrapper (issue listing with Link-header pagination)."""

from __future__ import annotations

import hashlib
import json
import logging
import re
import time
from typing import Any

import requests

from .config import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    GITHUB_CACHE_TTL,
    GITHUB_PAGE_SIZE,
    GITHUB_REQUEST_TIMEOUT,
    GITHUB_WEB_URL,
)

logger = logging.getLogger(__name__)

_REPO_URL_RE = re.compile(r"github\.com/([^/]+)/([^/]+)")


def parse_repo_url(url: str) -> tuple[str, str]:
    """Extract ``(owner, repo)`` from a GitHub repository URL.

    >>> parse_repo_url("https://github.com/octo/hello.git")
    ('octo', 'hello')
    """
    match = _REPO_URL_RE.search(url or "")
    if not match:
        raise ValueError("Invalid GitHub URL")
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return owner, repo


def issue_url(repo_url: str, number: int | None) -> str:
    if number is None:
        return ""
    try:
        owner, repo = parse_repo_url(repo_url)
    except ValueError:
        return ""
    return f"{GITHUB_WEB_URL}/{owner}/{repo}/issues/{number}"


class GitHubAPI:
    def __init__(self, token: str | None = None, api_url: str = GITHUB_API_URL):
        self.api_url = api_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers["Accept"] = GITHUB_ACCEPT_HEADER
        if token:
            self.session.headers["Authorization"] = f"token {token}"
        # Simple in-memory cache: {(hash): (timestamp, data)}
        self._cache: dict[str, tuple[float, list]] = {}
        self._cache_ttl = GITHUB_CACHE_TTL

    def clear_cache(self) -> None:
        """Reset the in-memory issue cache."""
        cache = getattr(self, "_cache", None)
        if isinstance(cache, dict):
            cache.clear()

    def _cache_key(self, owner: str, repo: str, state: str, page_size: int) -> str:
        payload = {"owner": owner, "repo": repo, "state": state, "page_size": page_size}
        return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()

    def fetch_issues(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        page_size: int = GITHUB_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        """All issues (pull requests excluded) for ``owner/repo`` in ``state``."""
        key = self._cache_key(owner, repo, state, page_size)
        now = time.time()
        cached = self._cache.get(key)
        if cached and (now - cached[0]) < self._cache_ttl:
            return cached[1]

        url: str | None = f"{self.api_url}/repos/{owner}/{repo}/issues"
        params: dict[str, Any] | None = {"state": state, "per_page": page_size}
        out: list[dict[str, Any]] = []
        while url:
            resp = self.session.get(url, params=params, timeout=GITHUB_REQUEST_TIMEOUT)
            if resp.status_code >= 400:
                raise RuntimeError(f"GitHub issues request failed {resp.status_code}: {_error_message(resp)}")
            data = resp.json()
            if not isinstance(data, list):
                raise RuntimeError(f"Unexpected issues payload type for {owner}/{repo}: {type(data)!r}")
            out.extend(item for item in data if "pull_request" not in item)
            # The next-page URL already carries the query string
            url = (resp.links or {}).get("next", {}).get("url")
            params = None
        logger.debug("Fetched %s issues for %s/%s (state=%s)", len(out), owner, repo, state)
        self._cache[key] = (now, out)
        return out

    def fetch_repo_issues(self, repo_url: str, state: str = "open") -> list[dict[str, Any]]:
        owner, repo = parse_repo_url(repo_url)
        return self.fetch_issues(owner, repo, state=state)


def _error_message(resp: requests.Response) -> str:
    try:
        payload = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return resp.text[:200]
