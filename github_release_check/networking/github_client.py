"""GitHub REST API client: paginated release listing + latest version lookup."""
from typing import Self

import requests
from pydantic import ValidationError

from github_release_check.config import ClientSettings
from github_release_check.constants.standalone import DEFAULT_API_ROOT, DEFAULT_TIMEOUT
from github_release_check.error_messages import format_type_error
from github_release_check.exceptions import (
    AuthenticationError,
    ErrorHttpResponseError,
    HttpClientError,
    InvalidReleasePayloadError,
    RepositoryNotFoundError,
)
from github_release_check.logging_setup import get_logger
from github_release_check.models import GithubReleaseListAdapter, GithubReleaseResponse
from github_release_check.networking.http_session import generate_headers
from github_release_check.networking.pagination import get_last_page
from github_release_check.versioning import resolve_latest_version

PAGINATION_REQUEST_AMOUNT = 100

logger = get_logger(__name__)


def _raise_for_status(response: requests.Response, *, repository: str) -> None:
    status_code = response.status_code
    if 200 <= status_code < 300:  # noqa: PLR2004
        return

    logger.debug('Got status %d from GitHub release check', status_code)
    if status_code == 404:  # noqa: PLR2004
        raise RepositoryNotFoundError(repository)
    if status_code in (401, 403):
        raise AuthenticationError(status_code)
    raise ErrorHttpResponseError(status_code)


def _decode_releases_page(response: requests.Response, *, url: str) -> list[GithubReleaseResponse]:
    try:
        data = response.json()
    except requests.exceptions.JSONDecodeError as e:
        raise HttpClientError(url, f'could not decode response body: {e}') from e

    if not isinstance(data, list):
        raise InvalidReleasePayloadError(url, format_type_error(data, list))

    try:
        return GithubReleaseListAdapter.validate_python(data)
    except ValidationError as e:
        raise InvalidReleasePayloadError(url, str(e)) from e


class GitHub:
    """Communicates with the GitHub REST API.

    Each query is independent: the pagination cursor and the accumulated
    releases live only for the duration of one call, so one instance can be
    reused for any number of repositories.
    """

    def __init__(
        self,
        *,
        api_root: str = DEFAULT_API_ROOT,
        access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_root: REST API root of the GitHub instance, ending in a trailing slash.
            access_token: Optional personal access token. Without it only public repositories are visible.
            timeout: Per-request timeout in seconds.
            session: Optional session to send requests with; the GitHub headers are added to it.

        Raises:
            HeaderValueError: If the access token cannot be used in an HTTP header.
        """
        self.api_root = api_root
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(generate_headers(access_token))

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if the client created it; an injected session is left to its owner."""
        if self._owns_session:
            self._session.close()

    @classmethod
    def new(cls) -> Self:
        """Create a client for public GitHub, without an access token."""
        return cls()

    @classmethod
    def from_custom(cls, api_endpoint: str, access_token: str) -> Self:
        """Create a client for a custom GitHub (enterprise) instance and/or private repositories.

        Args:
            api_endpoint: The REST API root, e.g. `https://github.example.com/api/v3/`.
                Note that this URL should end in a trailing slash.
            access_token: A personal access token able to view the repository on that instance.
        """
        return cls(api_root=api_endpoint, access_token=access_token)

    @classmethod
    def from_settings(cls, settings: ClientSettings, *, session: requests.Session | None = None) -> Self:
        """Create a client from `ClientSettings`."""
        return cls(
            api_root=settings.api_root,
            access_token=settings.access_token,
            timeout=settings.timeout,
            session=session,
        )

    def releases_url(self, repository: str) -> str:
        """Return the releases list URL for an `owner/repo` repository identifier."""
        return f'{self.api_root}repos/{repository}/releases'

    def get_all_releases(self, repository: str) -> list[GithubReleaseResponse]:
        """Get every release of the repository, walking all pages in order.

        Note that `repository` should be in the format "owner/repo"; it is not validated.

        Raises:
            ReleaseLookupError: Any subclass, on transport, HTTP status, header or payload failure.
        """
        url = self.releases_url(repository)
        page = 1
        last_page: int | None = None
        releases: list[GithubReleaseResponse] = []

        while True:
            logger.debug(
                'Querying GitHub at %s, page %d of %s',
                url,
                page,
                last_page if last_page is not None else '?',
            )
            try:
                response = self._session.get(
                    url,
                    params={'per_page': PAGINATION_REQUEST_AMOUNT, 'page': page},
                    timeout=self.timeout,
                )
            except requests.exceptions.RequestException as e:
                raise HttpClientError(url, str(e)) from e

            _raise_for_status(response, repository=repository)
            releases.extend(_decode_releases_page(response, url=url))

            # Only the first response is probed for the last page.
            if page == 1:
                last_page = get_last_page(response.headers)

            if last_page is None:
                logger.debug('No pagination header found (less than %d releases)', PAGINATION_REQUEST_AMOUNT)
                break

            logger.debug('Completed page %d of %d', page, last_page)
            if page >= last_page:
                break
            page += 1

        return releases

    def get_all_versions(self, repository: str) -> list[str]:
        """Get all release tag names from the repository, in the order GitHub returns them."""
        return [release.tag_name for release in self.get_all_releases(repository)]

    def get_latest_version(self, repository: str) -> str:
        """Get the latest release version from the repository.

        The tag is resolved by semantic-version precedence, with a leading `v` removed,
        so `v3.0.0-alpha` is returned as `3.0.0-alpha`.

        Raises:
            NoReleasesError: If the repository has no release with a semantic-version tag.
            ReleaseLookupError: Any other subclass, as for `get_all_releases`.
        """
        releases = self.get_all_releases(repository)
        return str(resolve_latest_version(releases, repository=repository))
