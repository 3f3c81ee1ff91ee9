"""Request headers for the GitHub REST API."""
from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

from github_release_check.exceptions import HeaderValueError

DEFAULT_USER_AGENT = 'github.com/celeo/github_version_check'
DEFAULT_ACCEPT_HEADER = 'application/vnd.github.v3+json'

HEADERS = {
    'User-Agent': DEFAULT_USER_AGENT,
    'Accept': DEFAULT_ACCEPT_HEADER,
}


def _validated_header(name: str, value: str) -> tuple[str, str]:
    try:
        value.encode('latin-1')
    except UnicodeEncodeError as e:
        raise HeaderValueError(name, 'value is not Latin-1 encodable') from e

    try:
        check_header_validity((name, value))
    except InvalidHeader as e:
        raise HeaderValueError(name, str(e)) from e

    return name, value


def generate_headers(token: str | None = None) -> dict[str, str]:
    """Generate the headers required to send HTTP requests to GitHub.

    Args:
        token: Optional personal access token, sent as a bearer credential.

    Returns:
        The header mapping.

    Raises:
        HeaderValueError: If a value cannot be used in an HTTP header.
    """
    headers = dict(_validated_header(name, value) for name, value in HEADERS.items())

    if token is not None:
        name, value = _validated_header('Authorization', f'Bearer {token}')
        headers[name] = value

    return headers

