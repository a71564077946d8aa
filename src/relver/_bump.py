"""Logic for bumping the project version on new releases."""

from __future__ import annotations

from typing import Literal

from ._version import SemanticVersion


BumpPart = Literal["minor", "patch"]


def bump(version: SemanticVersion, part: BumpPart) -> SemanticVersion:
    """Returns the release which follows `version`.

    Any pre-release label is dropped from the result.
    """
    if part == "minor":
        return version.bump_minor()
    else:
        return version.bump_patch()
