"""Tests for last-page detection from the `Link` header."""
import pytest
from requests.structures import CaseInsensitiveDict

from github_release_check.exceptions import HeaderDecodeError, MalformedLinkHeaderError
from github_release_check.networking.pagination import get_last_page

GITHUB_LINK_HEADER = (
    '<https://api.github.com/repositories/275449421/releases?per_page=1&page=2>; rel="next", '
    '<https://api.github.com/repositories/275449421/releases?per_page=1&page=10>; rel="last"'
)


def test_no_link_header_means_no_last_page() -> None:
    assert get_last_page({}) is None


def test_page_is_not_confused_with_per_page() -> None:
    assert get_last_page({'Link': GITHUB_LINK_HEADER}) == 10


def test_header_name_is_case_insensitive() -> None:
    assert get_last_page({'link': GITHUB_LINK_HEADER}) == 10
    assert get_last_page(CaseInsensitiveDict({'LINK': GITHUB_LINK_HEADER})) == 10


def test_page_before_per_page_in_query() -> None:
    header = '<https://api.github.com/repositories/1/releases?page=7&per_page=100>; rel="last"'

    assert get_last_page({'Link': header}) == 7


def test_only_last_relation_is_used() -> None:
    header = (
        '<https://api.github.com/repositories/1/releases?per_page=100&page=1>; rel="first", '
        '<https://api.github.com/repositories/1/releases?per_page=100&page=3>; rel="prev"'
    )

    assert get_last_page({'Link': header}) is None


def test_relation_name_must_match_exactly() -> None:
    header = '<https://api.github.com/repositories/1/releases?per_page=100&page=4>; rel="lastish"'

    assert get_last_page({'Link': header}) is None


def test_last_relation_without_page_number_is_malformed() -> None:
    header = '<https://api.github.com/repositories/1/releases?per_page=100>; rel="last"'

    with pytest.raises(MalformedLinkHeaderError):
        get_last_page({'Link': header})


def test_non_ascii_header_value_is_rejected() -> None:
    with pytest.raises(HeaderDecodeError):
        get_last_page({'Link': '<https://api.github.com/é?page=2>; rel="last"'})


def test_non_ascii_header_bytes_are_rejected() -> None:
    with pytest.raises(HeaderDecodeError):
        get_last_page({'Link': b'<https://api.github.com/\xff?page=2>; rel="last"'})


def test_ascii_header_bytes_are_decoded() -> None:
    assert get_last_page({'Link': GITHUB_LINK_HEADER.encode('ascii')}) == 10


@pytest.mark.parametrize(
    'relation',
    ['rel="last"', 'rel=last', 'rel = "last"', 'REL="last"', 'rel="prev last"'],
)
def test_relation_parameter_forms(relation: str) -> None:
    header = (
        '<https://api.github.com/repositories/1/releases?per_page=100&page=2>; rel="next", '
        f'<https://api.github.com/repositories/1/releases?per_page=100&page=6>; {relation}'
    )

    assert get_last_page({'Link': header}) == 6
