"""Check the latest GitHub release version of a repository.

Walks the paginated releases endpoint of a GitHub-compatible REST API and
resolves the newest release by semantic-version precedence.
"""

from github_release_check.config import ClientSettings
from github_release_check.constants.standalone import DEFAULT_API_ROOT
from github_release_check.exceptions import (
    AuthenticationError,
    ErrorHttpResponseError,
    HeaderDecodeError,
    HeaderValueError,
    HttpClientError,
    InvalidReleasePayloadError,
    MalformedLinkHeaderError,
    NoReleasesError,
    ReleaseLookupError,
    RepositoryNotFoundError,
)
from github_release_check.models import GithubReleaseResponse
from github_release_check.networking import GitHub, get_last_page
from github_release_check.versioning import parse_tag_version, resolve_latest_version

__all__ = [
    'DEFAULT_API_ROOT',
    'AuthenticationError',
    'ClientSettings',
    'ErrorHttpResponseError',
    'GitHub',
    'GithubReleaseResponse',
    'HeaderDecodeError',
    'HeaderValueError',
    'HttpClientError',
    'InvalidReleasePayloadError',
    'MalformedLinkHeaderError',
    'NoReleasesError',
    'ReleaseLookupError',
    'RepositoryNotFoundError',
    'get_last_page',
    'parse_tag_version',
    'resolve_latest_version',
]
