"""Computes the next release version of a project."""

from ._bump import BumpPart, bump
from ._helpers import DirectoryFileSource, FileSource
from ._manifest import (
    MANIFEST_RULES,
    ManifestVersionRule,
    extract_from_directory,
)
from ._resolver import ResolutionConfig, Resolver
from ._tags import GitHubTagSource, LocalGitTagSource, TagSource
from ._version import (
    ZERO_VERSION,
    SemanticVersion,
    compare,
    major_minor_equal,
)


__all__ = [
    "BumpPart",
    "DirectoryFileSource",
    "FileSource",
    "GitHubTagSource",
    "LocalGitTagSource",
    "MANIFEST_RULES",
    "ManifestVersionRule",
    "ResolutionConfig",
    "Resolver",
    "SemanticVersion",
    "TagSource",
    "ZERO_VERSION",
    "bump",
    "compare",
    "extract_from_directory",
    "major_minor_equal",
]
