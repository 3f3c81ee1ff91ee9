"""Error message formatting functions.

This module contains functions for formatting the messages carried by the lookup exceptions.
"""


def format_type_error(obj: object, expected_type: type) -> str:
    """Generate a formatted error message for a type mismatch.

    Args:
        obj: The object whose type is being checked.
        expected_type: The expected type for the object.

    Returns:
        The formatted error message.
    """
    return f'Expected type {expected_type.__name__}, got {type(obj).__name__} instead.'


def format_http_status_error(prefix: str, status_code: int) -> str:
    """Format an error message for a non-success HTTP status.

    Args:
        prefix: Short description of the failure.
        status_code: The HTTP status code returned by the API.

    Returns:
        The formatted error message.
    """
    return f'{prefix} (HTTP {status_code})'


def format_header_error(header_name: str, reason: str) -> str:
    """Format the error message for a header that could not be encoded or decoded."""
    return f'Invalid "{header_name}" header value: {reason}'
