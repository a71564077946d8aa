"""Contains constant variables."""

from __future__ import annotations

from typing import Final


PROJECT_NAME: Final = "relver"

# Environment variable which (optionally) holds a GitHub API token.
GITHUB_TOKEN_ENV_VAR: Final = "GITHUB_AUTH_TOKEN"
GITHUB_API_URL: Final = "https://api.github.com"
GITHUB_PER_PAGE: Final = 100
REQUEST_TIMEOUT: Final = 30

# Matches the version token found in project manifest files (e.g. '1.2.3' or
# '1.2.3-SNAPSHOT').
VERSION_NUMBER_REGEX: Final = r"[\.\d]+(?:-\w+)?"

# The '{}' in each of these patterns is replaced with VERSION_NUMBER_REGEX.
VERSIONS_GRADLE_REGEX: Final = r"(?m)project\.version\s*=\s*['\"]({})['\"]$"
BUILD_GRADLE_REGEX: Final = r"(?m)^version\s*=\s*['\"]({})['\"]$"
GRADLE_PROPERTIES_REGEX: Final = r"(?m)^version\s*=\s*({})\s*$"
SETUP_CFG_REGEX: Final = r"(?m)^version\s*=\s*({})$"
SETUP_PY_REGEX: Final = r"(?ms)setup\(.*\s+version\s*=\s*['\"]({})['\"].*\)$"
CMAKE_LISTS_REGEX: Final = r"(?ms)^project\s*\(.*\s+VERSION\s+({}).*\)$"
MAKEFILE_REGEX: Final = r"(?m)^VERSION\s*:=\s*({})$"
