"""Logic for resolving a project's next release version.

The new version is computed from two sources of truth:

* The project's base version, which is either given explicitly or found in
  one of the project's manifest files (e.g. pom.xml or package.json).
* The project's existing release tags (e.g. 'v1.2.3').
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from eris import ErisError, Err, Ok, Result
from logrus import Logger
from pydantic.dataclasses import dataclass

from ._bump import BumpPart, bump
from ._helpers import DirectoryFileSource, FileSource
from ._manifest import (
    MANIFEST_RULES,
    ManifestVersionRule,
    extract_from_directory,
)
from ._tags import TagSource
from ._version import ZERO_VERSION, SemanticVersion, major_minor_equal


logger = Logger(__name__)

LatestAndBase = Tuple[Optional[SemanticVersion], SemanticVersion]


@dataclass(frozen=True)
class ResolutionConfig:
    """The (read-only) parameters of a single version resolution."""

    directory: Path = Path(".")
    base_version: Optional[str] = None
    same_release: bool = False
    minor: bool = False
    debug: bool = False

    @property
    def bump_part(self) -> BumpPart:
        return "minor" if self.minor else "patch"


class Resolver:
    """Computes the latest and next release versions of a project."""

    def __init__(
        self,
        config: ResolutionConfig,
        file_source: Optional[FileSource] = None,
        rules: Sequence[ManifestVersionRule] = MANIFEST_RULES,
    ) -> None:
        self.config = config
        self.file_source = (
            DirectoryFileSource(config.directory)
            if file_source is None
            else file_source
        )
        self.rules = rules

    def _log(self, msg: str, *args: object, **kwargs: object) -> None:
        if self.config.debug:
            logger.info(msg, *args, **kwargs)
        else:
            logger.debug(msg, *args, **kwargs)

    def get_base_version(self) -> Result[SemanticVersion, ErisError]:
        """Returns the project's base version.

        An explicitly configured base version takes precedence over any
        version found in the project's manifest files. A project with neither
        has a base version of 0.0.0.
        """
        if self.config.base_version:
            version_r = SemanticVersion.from_string(self.config.base_version)
            if isinstance(version_r, Err):
                err: Err[SemanticVersion, ErisError] = Err(
                    "The provided base version is not valid:"
                    f" {self.config.base_version!r}"
                )
                return err.chain(version_r)
            return version_r

        version_r = extract_from_directory(
            self.file_source, self.rules, debug=self.config.debug
        )
        if isinstance(version_r, Err):
            self._log(
                "No version file found.", directory=self.config.directory
            )
            return Ok(ZERO_VERSION)

        return version_r

    def get_latest_version(
        self, tag_source: TagSource
    ) -> Result[LatestAndBase, ErisError]:
        """Returns the project's latest released version and base version.

        The latest version is None when no release tag applies or when the
        base version is higher than every release tag.
        """
        base_r = self.get_base_version()
        if isinstance(base_r, Err):
            return Err("Unable to determine the base version.").chain(base_r)
        base = base_r.ok()

        tags_r = tag_source.list_tags()
        if isinstance(tags_r, Err):
            return Err("Unable to list the project's tags.").chain(tags_r)

        tags = tags_r.ok()
        self._log("Found tags: %s", tags)
        if not tags:
            return Ok((None, base))

        versions: List[SemanticVersion] = []
        for tag in tags:
            version_r = SemanticVersion.from_string(tag)
            if isinstance(version_r, Err):
                continue

            version = version_r.ok()
            if self.config.same_release and not major_minor_equal(
                base, version
            ):
                continue

            versions.append(version)

        self._log("Found versions: %s", [str(v) for v in versions])
        if not versions:
            return Ok((None, base))

        latest = sorted(versions, key=lambda v: v.key)[-1]
        if base.key > latest.key:
            self._log(
                "The base version (%s) is ahead of the latest tag (%s).",
                base,
                latest,
            )
            return Ok((None, base))

        return Ok((latest, base))

    def get_new_version(
        self, tag_source: TagSource
    ) -> Result[SemanticVersion, ErisError]:
        """Returns the project's next release version.

        Examples:
            * latest tag 1.2.0 => 1.2.1 (or 1.3.0 with the 'minor' option).
            * no tags but a base version of 1.0 => 1.0.0.
            * no tags and no base version => 0.0.1 (or 0.1.0).
        """
        latest_and_base_r = self.get_latest_version(tag_source)
        if isinstance(latest_and_base_r, Err):
            return Err("Unable to compute the new version.").chain(
                latest_and_base_r
            )

        latest, base = latest_and_base_r.ok()
        if latest is None:
            # A new base version has not been released yet, so it IS the
            # next release.
            if not base.is_zero():
                return Ok(base)
            latest = base

        new_version = bump(latest, self.config.bump_part)
        self._log("Bumped %s to %s.", latest, new_version)
        return Ok(new_version)
