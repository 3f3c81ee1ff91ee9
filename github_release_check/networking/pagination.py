"""Continuation detection from the GitHub `Link` response header.

Example of a header value sent by GitHub:

    <https://api.github.com/repositories/275449421/releases?per_page=1&page=2>; rel="next",
    <https://api.github.com/repositories/275449421/releases?per_page=1&page=10>; rel="last"
"""
import re
from collections.abc import Mapping
from urllib.parse import urlsplit

from github_release_check.exceptions import HeaderDecodeError, MalformedLinkHeaderError

LINK_HEADER = 'Link'
LAST_RELATION = 'last'

RE_LINK_TARGET_PATTERN = re.compile(r'<(?P<url>[^>]*)>')
RE_LINK_REL_PATTERN = re.compile(r';\s*rel\s*=\s*(?:"(?P<quoted>[^"]*)"|(?P<token>[^\s,;"]+))', re.IGNORECASE)
# The prefix group lets `per_page=` (or any other `*page=` key) be told apart from `page=`.
RE_PAGE_PARAM_PATTERN = re.compile(r'(?P<prefix>\w*)page=(?P<page>\d+)')


def _get_header_text(headers: Mapping[str, str | bytes], name: str) -> str | None:
    """Return a header value as text, looking the name up case-insensitively."""
    lowered_name = name.lower()
    value = next((v for k, v in headers.items() if k.lower() == lowered_name), None)
    if value is None:
        return None

    if isinstance(value, bytes):
        try:
            return value.decode('ascii')
        except UnicodeDecodeError as e:
            raise HeaderDecodeError(name) from e

    if not value.isascii():
        raise HeaderDecodeError(name)
    return value


def _find_relation_entry(links: str, relation: str) -> str | None:
    for entry in links.split(','):
        for match in RE_LINK_REL_PATTERN.finditer(entry):
            # A quoted value may list several space-separated relation types.
            relations = (match['quoted'] or match['token'] or '').split()
            if relation in relations:
                return entry
    return None


def _extract_page_number(entry: str) -> int | None:
    target_match = RE_LINK_TARGET_PATTERN.search(entry)
    query = urlsplit(target_match['url']).query if target_match else entry

    for match in RE_PAGE_PARAM_PATTERN.finditer(query):
        if not match['prefix']:
            return int(match['page'])
    return None


def get_last_page(headers: Mapping[str, str | bytes]) -> int | None:
    """Determine the last page (if any) from the GitHub response headers.

    Args:
        headers: The response header collection.

    Returns:
        The page number carried by the `rel="last"` link, or `None` when the
        response has no `Link` header or no last-page relation.

    Raises:
        HeaderDecodeError: If the `Link` header value is not ASCII text.
        MalformedLinkHeaderError: If the last-page link carries no `page` parameter.
    """
    links = _get_header_text(headers, LINK_HEADER)
    if links is None:
        return None

    entry = _find_relation_entry(links, LAST_RELATION)
    if entry is None:
        return None

    last_page = _extract_page_number(entry)
    if last_page is None:
        raise MalformedLinkHeaderError(entry)
    return last_page
