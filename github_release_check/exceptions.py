"""Release lookup exceptions.

Every error raised while querying releases derives from `ReleaseLookupError`,
so callers can handle the whole family with a single `except` clause.
"""

from github_release_check.error_messages import format_header_error, format_http_status_error


class ReleaseLookupError(Exception):
    """Base class for all errors raised by this package."""


class HttpClientError(ReleaseLookupError):
    """Raised when a request could not be sent or its response could not be read."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the failed URL.

        Args:
            url: The URL that was being requested.
            reason: Description of the underlying transport failure.
        """
        self.url = url
        super().__init__(f'HTTP client error while requesting {url}: {reason}')


class HeaderValueError(ReleaseLookupError):
    """Raised when a supplied value cannot be encoded into a valid request header."""

    def __init__(self, header_name: str, reason: str) -> None:
        """Initialize the exception with the offending header name."""
        self.header_name = header_name
        super().__init__(format_header_error(header_name, reason))


class HeaderDecodeError(ReleaseLookupError):
    """Raised when a response header value is not representable as text."""

    def __init__(self, header_name: str) -> None:
        """Initialize the exception with the offending header name."""
        self.header_name = header_name
        super().__init__(format_header_error(header_name, 'could not get header value as ASCII text'))


class MalformedLinkHeaderError(ReleaseLookupError):
    """Raised when the `Link` header has a `rel="last"` entry without a usable page number."""

    def __init__(self, entry: str) -> None:
        """Initialize the exception with the unparseable link entry.

        Args:
            entry: The raw `rel="last"` entry of the `Link` header.
        """
        self.entry = entry
        super().__init__(format_header_error('Link', f'no page number in last-page entry {entry.strip()!r}'))


class InvalidReleasePayloadError(ReleaseLookupError):
    """Raised when a releases page body does not have the expected shape."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the URL and validation details."""
        self.url = url
        super().__init__(f'Invalid releases payload from {url}: {reason}')


class NoReleasesError(ReleaseLookupError):
    """Raised when a repository has no release whose tag is a semantic version.

    This covers both a repository without any release and one where no tag parses.
    """

    def __init__(self, repository: str) -> None:
        """Initialize the exception with the repository identifier."""
        self.repository = repository
        super().__init__(f'No release found for repository "{repository}"')


class RepositoryNotFoundError(ReleaseLookupError):
    """Raised when the API answers 404, for a mis-supplied repository or missing access."""

    def __init__(self, repository: str) -> None:
        """Initialize the exception with the repository identifier."""
        self.repository = repository
        super().__init__(f'Repository "{repository}" not found')


class AuthenticationError(ReleaseLookupError):
    """Raised when the API answers 401 or 403 because of missing or incorrect authentication."""

    def __init__(self, status_code: int) -> None:
        """Initialize the exception with the original status code."""
        self.status_code = status_code
        super().__init__(format_http_status_error('Authentication error', status_code))


class ErrorHttpResponseError(ReleaseLookupError):
    """Raised when the API answers with any other non-success status code."""

    def __init__(self, status_code: int) -> None:
        """Initialize the exception with the original status code."""
        self.status_code = status_code
        super().__init__(format_http_status_error('Received error HTTP response code', status_code))
