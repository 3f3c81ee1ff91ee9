"""Lightweight text helpers.

Keep this module dependency-free and safe to import from anywhere.
"""


def pluralize(count: int, singular: str = '', plural: str = 's') -> str:
    """Return the singular/plural suffix based on a count.

    Args:
        count: The count to decide plurality.
        singular: Suffix to use when count is exactly 1.
        plural: Suffix to use otherwise.

    Returns:
        The chosen suffix.
    """
    return singular if count == 1 else plural
