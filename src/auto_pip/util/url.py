""" Tools for URL handling. """

from __future__ import annotations

import dataclasses
import re
import urllib.parse

#: Matches SCP-like Git remote addresses such as `git@github.com:owner/repo.git`.
SCP_LIKE_URL = re.compile(r"^(?:[\w\-\.]+@)?(?P<host>[\w\-\.]+):(?!//)(?P<path>.+)$")


@dataclasses.dataclass
class Url:
    """Helper to represent the components of a URL."""

    scheme: str = ""
    hostname: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
    port: int | None = None

    @property
    def segments(self) -> list[str]:
        """Returns the non-empty components of the URL path."""

        return [x for x in self.path.split("/") if x]

    @staticmethod
    def of(url: str) -> Url:
        """Parses the *url* string into its parts.

        Raises:
          ValueError: If an invalid URL is passed (for example if the port number cannot be parsed to an integer).
        """

        parsed = urllib.parse.urlparse(url)
        return Url(
            scheme=parsed.scheme,
            hostname=parsed.hostname or "",
            path=parsed.path,
            query=parsed.query,
            fragment=parsed.fragment,
            port=parsed.port,
        )


@dataclasses.dataclass(frozen=True)
class Repository:
    """The owner and name of a repository on a hosting service like GitHub."""

    owner: str
    repo: str


def parse_repository_url(url: str) -> Repository | None:
    """Extracts the owner and repository name from a repository URL. Supports web URLs
    (`https://github.com/owner/repo`), SCP-like Git remotes (`git@github.com:owner/repo.git`) and
    scheme-less addresses (`github.com/owner/repo`). Returns `None` if the URL does not point to a repository."""

    url = url.strip()
    match = SCP_LIKE_URL.match(url)
    if match:
        segments = [x for x in match.group("path").split("/") if x]
    else:
        try:
            parsed = Url.of(url)
        except ValueError:
            return None
        segments = parsed.segments
        if not parsed.scheme and segments and "." in segments[0]:
            segments = segments[1:]

    if len(segments) < 2:
        return None

    owner, repo = segments[0], segments[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo:
        return None

    return Repository(owner, repo)
