"""Contains the SemanticVersion class definition.

Versions found in project manifests and git tags are rarely strict semantic
versions (e.g. Maven's '1.0-SNAPSHOT'), so parsing is lenient: missing minor
and patch parts default to zero and anything after the numeric part is kept
as a pre-release label.
"""

from __future__ import annotations

import re
from typing import Tuple, Type, TypeVar

from eris import ErisError, Err, Ok, Result
from pydantic.dataclasses import dataclass
import semantic_version


SemanticVersion_T = TypeVar("SemanticVersion_T", bound="SemanticVersion")

_NUMERIC_PREFIX = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def _prerelease_label(rest: str) -> str:
    """Returns the pre-release label found after a version's numeric part.

    The label is kept as written. Build metadata ('+...') and extra numeric
    components ('.4' in '1.2.3.4') are not part of the label.
    """
    rest = rest.split("+", 1)[0]
    if rest.startswith("."):
        return ""
    if rest.startswith("-"):
        rest = rest[1:]
    return rest


@dataclass(frozen=True)
class SemanticVersion:
    """A MAJOR.MINOR.PATCH version with an optional pre-release label.

    The pre-release label is informational only. It is rendered by str() but
    never takes part in ordering (see the `key` property).
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""

    @classmethod
    def from_string(
        cls: Type["SemanticVersion_T"], raw: str
    ) -> Result["SemanticVersion_T", ErisError]:
        """Parses a (possibly partial) version string.

        Examples:
            >>> str(SemanticVersion.from_string("1.0").unwrap())
            '1.0.0'
            >>> str(SemanticVersion.from_string("v1.0-SNAPSHOT").unwrap())
            '1.0.0-SNAPSHOT'
        """
        version_string = raw.strip()
        if version_string[:1] in ("v", "V"):
            version_string = version_string[1:]

        m = _NUMERIC_PREFIX.match(version_string)
        if m is None:
            return Err(
                f"Unable to parse version string {raw!r}: it lacks a"
                " numerical component."
            )

        try:
            version = semantic_version.Version.coerce(version_string)
        except ValueError:
            # The numeric part is fine but the label is not a strict SemVer
            # pre-release (e.g. '1.2.3-01').
            major, minor, patch = (int(part or 0) for part in m.groups())
        else:
            major, minor, patch = version.major, version.minor, version.patch

        return Ok(
            cls(
                major=major,
                minor=minor,
                patch=patch,
                prerelease=_prerelease_label(version_string[m.end() :]),
            )
        )

    @property
    def key(self) -> Tuple[int, int, int]:
        """The numeric (major, minor, patch) triple used for ordering."""
        return (self.major, self.minor, self.patch)

    def is_zero(self) -> bool:
        return self.key == (0, 0, 0)

    def bump_patch(self) -> "SemanticVersion":
        return SemanticVersion(self.major, self.minor, self.patch + 1)

    def bump_minor(self) -> "SemanticVersion":
        return SemanticVersion(self.major, self.minor + 1, 0)

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result += f"-{self.prerelease}"
        return result


ZERO_VERSION = SemanticVersion()


def compare(a: SemanticVersion, b: SemanticVersion) -> int:
    """Returns -1, 0, or 1 if `a` is less than, equal to, or greater than `b`.

    Only the numeric parts of each version are compared.
    """
    return (a.key > b.key) - (a.key < b.key)


def major_minor_equal(a: SemanticVersion, b: SemanticVersion) -> bool:
    """True iff `a` and `b` belong to the same MAJOR.MINOR release."""
    return a.major == b.major and a.minor == b.minor
