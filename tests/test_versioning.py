"""Tests for semantic version resolution over release tags."""
import pytest
from semver.version import Version

from github_release_check.exceptions import NoReleasesError
from github_release_check.models import GithubReleaseResponse
from github_release_check.versioning import parse_tag_version, resolve_latest_version


def _releases(*tag_names: str) -> list[GithubReleaseResponse]:
    return [GithubReleaseResponse(tag_name=tag_name) for tag_name in tag_names]


@pytest.mark.parametrize(
    ('tag_name', 'expected'),
    [
        ('v1.2.3', Version(1, 2, 3)),
        ('1.2.3', Version(1, 2, 3)),
        ('v3.0.0-alpha', Version(3, 0, 0, prerelease='alpha')),
        ('v1.0.0+build.5', Version(1, 0, 0, build='build.5')),
        ('vv1.2.3', None),
        ('V1.2.3', None),
        ('uhhhh', None),
        ('1.2', None),
        ('', None),
    ],
)
def test_parse_tag_version(tag_name: str, expected: Version | None) -> None:
    assert parse_tag_version(tag_name) == expected


def test_prerelease_above_lower_release_wins() -> None:
    latest = resolve_latest_version(_releases('uhhhh', 'v3.0.0-alpha', 'v1.9.10'), repository='owner/repo')

    assert str(latest) == '3.0.0-alpha'


def test_numeric_not_lexical_ordering() -> None:
    latest = resolve_latest_version(_releases('v1.10.0', 'v1.9.10', 'v1.2.0'), repository='owner/repo')

    assert latest == Version(1, 10, 0)


def test_release_beats_its_own_prerelease() -> None:
    latest = resolve_latest_version(_releases('v2.0.0-rc.1', 'v2.0.0', 'v2.0.0-beta.11'), repository='owner/repo')

    assert latest == Version(2, 0, 0)


def test_prerelease_identifiers_compare_component_wise() -> None:
    latest = resolve_latest_version(_releases('v2.0.0-beta.2', 'v2.0.0-beta.11', 'v2.0.0-alpha'), repository='owner/repo')

    assert str(latest) == '2.0.0-beta.11'


def test_no_releases() -> None:
    with pytest.raises(NoReleasesError):
        resolve_latest_version([], repository='owner/repo')


def test_no_parseable_tag_is_reported_as_no_releases() -> None:
    with pytest.raises(NoReleasesError, match='owner/repo'):
        resolve_latest_version(_releases('nightly', 'latest', ''), repository='owner/repo')
