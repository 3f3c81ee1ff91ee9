"""Pydantic models for GitHub Release API responses.

This module provides validation for the entries of the
`GET /repos/{owner}/{repo}/releases` list endpoint.
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class GithubReleaseResponse(BaseModel):
    """Model for a single release entry of the GitHub releases list response.

    Timestamps and URLs are kept as opaque strings and passed through unmodified.
    The tag name may be empty or malformed; it is never assumed to be a version.
    """

    model_config = ConfigDict(frozen=True, extra='ignore')

    tag_name: str
    name: str | None = None
    draft: bool = False
    prerelease: bool = False

    # Timestamps
    created_at: str | None = None
    published_at: str | None = None

    # Free text
    body: str | None = None

    # Links
    url: str | None = None
    html_url: str | None = None
    assets_url: str | None = None
    upload_url: str | None = None
    tarball_url: str | None = None
    zipball_url: str | None = None


GithubReleaseListAdapter = TypeAdapter(list[GithubReleaseResponse])
"""Validates one page of the releases list endpoint."""
