"""Client settings, optionally read from the environment."""
import os
from collections.abc import Mapping
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from github_release_check.constants.standalone import DEFAULT_API_ROOT, DEFAULT_TIMEOUT
from github_release_check.logging_setup import get_logger

logger = get_logger(__name__)

ENV_API_ROOT = 'GITHUB_API_ROOT'
ENV_TOKEN = 'GITHUB_TOKEN'  # noqa: S105
ENV_TIMEOUT = 'GITHUB_TIMEOUT'


class ClientSettings(BaseModel):
    """Settings used to construct a `GitHub` client.

    `api_root` is used verbatim as the prefix of request URLs and should end in a trailing slash,
    e.g. `https://api.github.com/` or `https://github.example.com/api/v3/`.
    """

    model_config = ConfigDict(frozen=True)

    api_root: str = DEFAULT_API_ROOT
    access_token: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator('api_root')
    @classmethod
    def warn_missing_trailing_slash(cls, value: str) -> str:
        if not value.endswith('/'):
            logger.warning('API root %r does not end in a trailing slash; request URLs may be wrong', value)
        return value

    @field_validator('access_token')
    @classmethod
    def empty_token_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from `GITHUB_API_ROOT`, `GITHUB_TOKEN` and `GITHUB_TIMEOUT`.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        values: dict[str, str] = {}
        if api_root := env.get(ENV_API_ROOT, '').strip():
            values['api_root'] = api_root
        if token := env.get(ENV_TOKEN, '').strip():
            values['access_token'] = token
        if timeout := env.get(ENV_TIMEOUT, '').strip():
            values['timeout'] = timeout

        return cls.model_validate(values)
