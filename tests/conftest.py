"""Shared fixtures."""
from collections.abc import Callable
from typing import Any

import pytest
import requests

from github_release_check.networking import GitHub
from tests.fakes import API_ROOT, FakeSession


@pytest.fixture
def make_github() -> Callable[..., tuple[GitHub, FakeSession]]:
    """Return a factory building a client bound to a `FakeSession`."""

    def factory(pages: dict[int, requests.Response | Exception], **kwargs: Any) -> tuple[GitHub, FakeSession]:
        session = FakeSession(pages)
        return GitHub(api_root=API_ROOT, session=session, **kwargs), session

    return factory
