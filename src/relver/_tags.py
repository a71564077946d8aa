"""Contains the TagSource Protocol and TagSource Implementations."""

from __future__ import annotations

import os
from pathlib import Path
import shutil
from typing import Dict, List, Optional, Protocol, runtime_checkable

from eris import ErisError, Err, Ok, Result
from logrus import Logger
import proctor
import requests
from typist import PathLike

from ._constants import (
    GITHUB_API_URL,
    GITHUB_PER_PAGE,
    GITHUB_TOKEN_ENV_VAR,
    REQUEST_TIMEOUT,
)


logger = Logger(__name__)


@runtime_checkable
class TagSource(Protocol):
    """Anything that can list the names of a repository's git tags.

    No ordering or de-duplication of the returned tag names is assumed.
    """

    def list_tags(self) -> Result[List[str], ErisError]:
        """Returns the name of every tag (e.g. 'v1.2.3')."""


class LocalGitTagSource:
    """TagSource that reads tags from a local git repository."""

    def __init__(
        self, directory: PathLike, *, fetch: bool = True, debug: bool = False
    ) -> None:
        self.directory = Path(directory)
        self.fetch = fetch
        self.debug = debug

    def list_tags(self) -> Result[List[str], ErisError]:
        log = logger.info if self.debug else logger.debug
        log("Getting tags from the local git repo.", directory=self.directory)

        if shutil.which("git") is None:
            return Err("Unable to find the 'git' executable on the PATH.")

        if self.fetch:
            fetch_r = proctor.safe_popen(
                ["git", "fetch", "--tags", "-v"], cwd=self.directory
            )
            if isinstance(fetch_r, Err):
                log(
                    "Ignoring error from `git fetch`.",
                    error=fetch_r.err().to_json(),
                )

        tag_r = proctor.safe_popen(
            ["git", "tag", "--list"], cwd=self.directory
        )
        if isinstance(tag_r, Err):
            err: Err[List[str], ErisError] = Err(
                f"Unable to list the tags of the {self.directory} git repo."
            )
            return err.chain(tag_r)

        out, _err = tag_r.ok()
        tags = [line.strip() for line in out.splitlines() if line.strip()]
        log("Found %d local git tags.", len(tags))
        return Ok(tags)


class GitHubTagSource:
    """TagSource that reads tags from a GitHub repository using its REST API.

    Requests are authenticated when a token is given (or the
    GITHUB_AUTH_TOKEN environment variable is set) and anonymous otherwise.
    """

    def __init__(
        self,
        owner: str,
        repository: str,
        *,
        token: Optional[str] = None,
        api_url: str = GITHUB_API_URL,
        debug: bool = False,
    ) -> None:
        self.owner = owner
        self.repository = repository
        self.token = token or os.environ.get(GITHUB_TOKEN_ENV_VAR)
        self.api_url = api_url.rstrip("/")
        self.debug = debug

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def list_tags(self) -> Result[List[str], ErisError]:
        log = logger.info if self.debug else logger.debug
        log(
            "Getting tags from github.com/%s/%s.", self.owner, self.repository
        )
        if not self.token:
            log(
                "No %s environment variable found, so using unauthenticated"
                " requests.",
                GITHUB_TOKEN_ENV_VAR,
            )

        tags: List[str] = []
        url: Optional[str] = (
            f"{self.api_url}/repos/{self.owner}/{self.repository}/tags"
        )
        params: Optional[Dict[str, int]] = {"per_page": GITHUB_PER_PAGE}
        while url:
            try:
                response = requests.get(
                    url,
                    headers=self._get_headers(),
                    params=params,
                    timeout=REQUEST_TIMEOUT,
                )
            except requests.RequestException as e:
                return Err(f"Error getting tags from {url}: {e}")

            if response.status_code != 200:
                return Err(
                    f"Error getting tags from {url}: HTTP"
                    f" {response.status_code} {response.reason}"
                )

            try:
                page = response.json()
            except ValueError as e:
                return Err(f"Invalid JSON returned by {url}: {e}")

            if not isinstance(page, list):
                return Err(f"Unexpected response returned by {url}: {page!r}")

            tags.extend(
                tag["name"]
                for tag in page
                if isinstance(tag, dict) and isinstance(tag.get("name"), str)
            )

            # The 'next' link already carries the query string.
            url = response.links.get("next", {}).get("url")
            params = None

        log("Found %d GitHub tags.", len(tags))
        return Ok(tags)
