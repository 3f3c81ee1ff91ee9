"""Module for defining constants that don't require imports or functions, using only pure Python."""

DEFAULT_API_ROOT = 'https://api.github.com/'
DEFAULT_TIMEOUT = 10.0
