""" Rules to increment a version number by a bump kind such as `major`, `minor` or `patch`. """

from __future__ import annotations

import re
import typing as t

from poetry.core.constraints.version import Version  # type: ignore[import]
from poetry.core.version.exceptions import InvalidVersion  # type: ignore[import]

IncrementingRule = t.Callable[[Version], Version]

#: The SemVer 2.0 grammar, with an optional leading `v`.
SEMVER_PATTERN = re.compile(
    r"^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class VersionIncrementError(ValueError):
    pass


def major(version: Version) -> Version:
    return version.next_major()


def premajor(version: Version) -> Version:
    return version.next_major().first_prerelease()


def minor(version: Version) -> Version:
    return version.next_minor()


def preminor(version: Version) -> Version:
    return version.next_minor().first_prerelease()


def patch(version: Version) -> Version:
    return version.next_patch()


def prepatch(version: Version) -> Version:
    return version.next_patch().first_prerelease()


def prerelease(version: Version) -> Version:
    if version.is_unstable() and version.pre:
        return version.next_prerelease()
    return version.next_patch().first_prerelease()


RULES: dict[str, IncrementingRule] = {
    "major": major,
    "premajor": premajor,
    "minor": minor,
    "preminor": preminor,
    "patch": patch,
    "prepatch": prepatch,
    "prerelease": prerelease,
}


def increment_version(version: str, bump: str) -> str:
    """Increments the *version* string according to the *bump* rule and returns the new version string.

    Raises:
      VersionIncrementError: If *version* is not a valid version number or *bump* is not a known rule.
    """

    rule = RULES.get(bump)
    if rule is None:
        raise VersionIncrementError(f"unknown version bump {bump!r}, expected one of {', '.join(RULES)}")

    if not SEMVER_PATTERN.fullmatch(version):
        raise VersionIncrementError(f"invalid version {version!r}")

    try:
        parsed = Version.parse(version)
    except InvalidVersion as exc:
        raise VersionIncrementError(f"invalid version {version!r}") from exc

    return rule(parsed).text
