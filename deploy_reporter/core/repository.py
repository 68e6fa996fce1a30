"""Repository URL parsing.

Supported git remote forms:
- https://hostname/owner/repository.git
- git@hostname:owner/repository.git
"""

import re

from deploy_reporter.core.exceptions import RepositoryURLError
from deploy_reporter.models.deployment import RepositoryRef

_SEGMENT = r"[^/:]+"

_REPOSITORY_URL = re.compile(
    rf"""
    ^
    (?:
        https://{_SEGMENT}/        # https://host/
      | [^@/:]+@{_SEGMENT}:        # user@host:
    )
    (?P<owner>{_SEGMENT})
    /
    (?P<name>{_SEGMENT})
    /?
    $
    """,
    re.VERBOSE,
)


def parse_repository_url(url: str) -> RepositoryRef:
    """Extract owner and repository name from a git remote URL.

    Raises:
        RepositoryURLError: If the URL is not in one of the supported forms
    """
    match = _REPOSITORY_URL.match(url.strip())
    if not match:
        raise RepositoryURLError(url)

    name = match.group("name").removesuffix(".git")
    if not name:
        raise RepositoryURLError(url)

    return RepositoryRef(owner=match.group("owner"), name=name)
