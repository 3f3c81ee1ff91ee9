"""Semantic version resolution over release tag names."""
from collections.abc import Iterable

from semver.version import Version

from github_release_check.exceptions import NoReleasesError
from github_release_check.logging_setup import get_logger
from github_release_check.models import GithubReleaseResponse

logger = get_logger(__name__)

TAG_PREFIX = 'v'


def parse_tag_version(tag_name: str) -> Version | None:
    """Parse a release tag as a semantic version.

    Exactly one leading `v` is stripped before parsing, so `v1.2.3` and `1.2.3`
    are equivalent while `vv1.2.3` is rejected.

    Returns:
        The parsed version, or `None` when the tag is not a semantic version.
    """
    candidate = tag_name.removeprefix(TAG_PREFIX)
    try:
        return Version.parse(candidate)
    except ValueError:
        return None


def resolve_latest_version(releases: Iterable[GithubReleaseResponse], *, repository: str) -> Version:
    """Select the highest semantic version among the release tags.

    Tags that do not parse are skipped; they never fail the resolution.

    Raises:
        NoReleasesError: If no tag parses, including when there are no releases at all.
    """
    versions: list[Version] = []
    for release in releases:
        version = parse_tag_version(release.tag_name)
        if version is None:
            logger.debug('Skipping release tag %r of %s: not a semantic version', release.tag_name, repository)
            continue
        versions.append(version)

    if not versions:
        raise NoReleasesError(repository)

    return max(versions)
