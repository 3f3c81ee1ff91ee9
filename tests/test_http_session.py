"""Tests for request header generation."""
import pytest

from github_release_check.exceptions import HeaderValueError
from github_release_check.networking.http_session import DEFAULT_ACCEPT_HEADER, DEFAULT_USER_AGENT, generate_headers


def test_unauthenticated_headers() -> None:
    assert generate_headers() == {
        'User-Agent': DEFAULT_USER_AGENT,
        'Accept': DEFAULT_ACCEPT_HEADER,
    }


def test_token_is_sent_as_bearer() -> None:
    assert generate_headers('ghp_abc123')['Authorization'] == 'Bearer ghp_abc123'


@pytest.mark.parametrize('token', ['abc\ndef', 'abc\r\nX-Injected: 1', 'tökén✓'])
def test_invalid_token_is_rejected(token: str) -> None:
    with pytest.raises(HeaderValueError, match='Authorization'):
        generate_headers(token)
