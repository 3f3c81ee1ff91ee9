"""Pydantic models for API response validation.

This module contains pydantic models for validating JSON responses from:
- GitHub Releases API (releases list endpoint)
"""

from .github_release import GithubReleaseListAdapter, GithubReleaseResponse

__all__ = [
    'GithubReleaseListAdapter',
    'GithubReleaseResponse',
]
