"""Contains the rules used to find a project's version in its manifest files.

Each rule pairs a well-known manifest file name (e.g. 'package.json') with a
function which extracts the raw version string from that file's contents.
Rules are tried in order and the first one that yields a parseable version
wins, so a project with more than one supported manifest file gets the
version of whichever file comes first in MANIFEST_RULES.
"""

from __future__ import annotations

import json
import re
from typing import Callable, NamedTuple, Sequence
import xml.etree.ElementTree as ET

from eris import ErisError, Err, Ok, Result
from logrus import Logger

from ._constants import (
    BUILD_GRADLE_REGEX,
    CMAKE_LISTS_REGEX,
    GRADLE_PROPERTIES_REGEX,
    MAKEFILE_REGEX,
    SETUP_CFG_REGEX,
    SETUP_PY_REGEX,
    VERSION_NUMBER_REGEX,
    VERSIONS_GRADLE_REGEX,
)
from ._helpers import FileSource
from ._version import SemanticVersion


logger = Logger(__name__)

VersionExtractor = Callable[[bytes], Result[str, ErisError]]


class ManifestVersionRule(NamedTuple):
    """Tells us where (filename) and how (extract) to find a version."""

    filename: str
    extract: VersionExtractor


def version_matcher(pattern_template: str) -> VersionExtractor:
    """Returns an extractor which searches a file using a regular expression.

    Arguments:
        pattern_template: A regular expression containing a single '{}', which
            is replaced with a capture group that matches a version number.
    """
    pattern = re.compile(pattern_template.format(VERSION_NUMBER_REGEX))

    def extract(data: bytes) -> Result[str, ErisError]:
        if m := pattern.search(_decode(data)):
            return Ok(m.group(1).strip())
        else:
            return Err(
                "No version found using this regular expression:"
                f" {pattern.pattern!r}"
            )

    return extract


def extract_xml_version(data: bytes) -> Result[str, ErisError]:
    """Extracts the project version from a Maven pom.xml file.

    Only the <version> element directly beneath the root element is
    considered (a <parent><version> element is NOT the project's version).
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        return Err(f"Unable to parse XML document: {e}")

    for child in root:
        if not isinstance(child.tag, str):  # comments, processing instructions
            continue

        # Strip any XML namespace (e.g. '{http://maven.apache.org/POM/4.0.0}').
        if child.tag.rsplit("}", 1)[-1] == "version":
            version = (child.text or "").strip()
            if version:
                return Ok(version)

    return Err("No top-level <version> element found.")


def extract_json_version(data: bytes) -> Result[str, ErisError]:
    """Extracts the "version" field from a package.json file."""
    try:
        project = json.loads(_decode(data))
    except json.JSONDecodeError as e:
        return Err(f"Unable to parse JSON document: {e}")

    version = project.get("version") if isinstance(project, dict) else None
    if isinstance(version, str) and version.strip():
        return Ok(version.strip())

    return Err('No "version" field found.')


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


MANIFEST_RULES: Sequence[ManifestVersionRule] = (
    ManifestVersionRule(
        "versions.gradle", version_matcher(VERSIONS_GRADLE_REGEX)
    ),
    ManifestVersionRule("build.gradle", version_matcher(BUILD_GRADLE_REGEX)),
    ManifestVersionRule(
        "build.gradle.kts", version_matcher(BUILD_GRADLE_REGEX)
    ),
    ManifestVersionRule(
        "gradle.properties", version_matcher(GRADLE_PROPERTIES_REGEX)
    ),
    ManifestVersionRule("pom.xml", extract_xml_version),
    ManifestVersionRule("package.json", extract_json_version),
    ManifestVersionRule("setup.cfg", version_matcher(SETUP_CFG_REGEX)),
    ManifestVersionRule("setup.py", version_matcher(SETUP_PY_REGEX)),
    ManifestVersionRule("CMakeLists.txt", version_matcher(CMAKE_LISTS_REGEX)),
    ManifestVersionRule("Makefile", version_matcher(MAKEFILE_REGEX)),
)


def extract_from_directory(
    file_source: FileSource,
    rules: Sequence[ManifestVersionRule] = MANIFEST_RULES,
    *,
    debug: bool = False,
) -> Result[SemanticVersion, ErisError]:
    """Searches a project's manifest files for its version.

    Returns:
        Ok(version) using the first rule whose file exists and contains a
        parseable version.
            OR
        Err(ErisError), if no rule matched.
    """
    log = logger.info if debug else logger.debug

    for rule in rules:
        data_r = file_source.read_file(rule.filename)
        if isinstance(data_r, Err):
            continue

        log("Found the %s manifest file.", rule.filename)
        raw_version_r = rule.extract(data_r.ok())
        if isinstance(raw_version_r, Err):
            log(
                "Unable to extract a version from the %s file.",
                rule.filename,
                error=raw_version_r.err().to_json(),
            )
            continue

        raw_version = raw_version_r.ok()
        version_r = SemanticVersion.from_string(raw_version)
        if isinstance(version_r, Err):
            log(
                "The version found in the %s file is not valid: %r",
                rule.filename,
                raw_version,
            )
            continue

        version = version_r.ok()
        log("Using version %s from the %s file.", version, rule.filename)
        return Ok(version)

    return Err(
        "None of the following manifest files contain a version:"
        f" {[rule.filename for rule in rules]}"
    )
