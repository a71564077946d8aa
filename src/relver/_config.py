"""Prints the next release version of a project.

The new version is derived from the version found in the project's manifest
file (e.g. pom.xml, package.json, setup.py, Makefile) and the project's
existing git tags, so CI pipelines can release automatically without
committing a version bump back into the repository.

Examples:
    # Prints the next patch version of the git repo in the current directory.
    relver

    # Prints the next minor version of the project in the 'app' directory.
    relver --directory app --minor

    # Ignore releases newer than 1.4.X (e.g. when patching an old release).
    relver --base-version 1.4 --same-release

    # Use the tags of a GitHub repository instead of the local git repo.
    relver --gh-owner acme --gh-repository widget
"""

# NOTE: The above docstring is used by clack for the command-line --help
#   message. This module is used to define the clack configuration class and
#   the clack parser function.
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

import clack

from ._constants import GITHUB_API_URL
from ._resolver import ResolutionConfig


class Config(clack.Config):
    """relver's configuration class."""

    # --- OPTIONS
    base_version: Optional[str] = None
    debug: bool = False
    directory: Path = Path(".")
    gh_api_url: str = GITHUB_API_URL
    gh_owner: Optional[str] = None
    gh_repository: Optional[str] = None
    git_fetch: bool = True
    minor: bool = False
    same_release: bool = False
    show_version: bool = False

    def to_resolution_config(self) -> ResolutionConfig:
        """Returns the subset of this config used to resolve a version."""
        return ResolutionConfig(
            directory=self.directory,
            base_version=self.base_version,
            same_release=self.same_release,
            minor=self.minor,
            debug=self.debug,
        )


def clack_parser(argv: Sequence[str]) -> dict[str, Any]:
    """Parses relver's command-line arguments."""
    parser = clack.Parser()
    parser.add_argument(
        "--directory",
        type=Path,
        help="Directory of the git project. Defaults to '.'.",
    )
    parser.add_argument(
        "--base-version",
        help=(
            "Version to use instead of the version found in the project's"
            " manifest file."
        ),
    )
    parser.add_argument(
        "--same-release",
        action="store_true",
        help=(
            "Increment the latest release of the base version's MAJOR.MINOR"
            " release, ignoring any releases higher than it."
        ),
    )
    parser.add_argument(
        "--minor",
        action="store_true",
        help="Increment the minor version instead of the patch version.",
    )
    parser.add_argument(
        "--git-fetch",
        action=argparse.BooleanOptionalAction,
        help="Fetch tags from the remote before listing them (default).",
    )
    parser.add_argument(
        "--gh-owner",
        help=(
            "GitHub repository owner to fetch tags from instead of the local"
            " git repo."
        ),
    )
    parser.add_argument(
        "--gh-repository",
        help=(
            "GitHub repository to fetch tags from instead of the local git"
            " repo."
        ),
    )
    parser.add_argument(
        "--gh-api-url",
        help=(
            "Base URL of the GitHub REST API (useful for GitHub Enterprise)."
            f" Defaults to '{GITHUB_API_URL}'."
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debugging information while resolving the version.",
    )
    parser.add_argument(
        "--version",
        dest="show_version",
        action="store_true",
        help="Print this tool's version and exit.",
    )

    args = parser.parse_args(argv[1:])
    kwargs = clack.filter_cli_args(args)

    return kwargs
