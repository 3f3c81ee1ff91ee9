"""Networking module - HTTP session headers, pagination and the GitHub client."""

from github_release_check.networking.github_client import PAGINATION_REQUEST_AMOUNT, GitHub
from github_release_check.networking.http_session import generate_headers
from github_release_check.networking.pagination import get_last_page

__all__ = [
    'PAGINATION_REQUEST_AMOUNT',
    'GitHub',
    'generate_headers',
    'get_last_page',
]
