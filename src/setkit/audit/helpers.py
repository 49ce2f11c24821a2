"""Helper utilities for audit logging."""

import secrets

from setkit.utils import get_iso_timestamp

__all__ = ["generate_run_id", "describe_payload"]


def generate_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    suffix = secrets.token_hex(4)
    return f"{get_iso_timestamp()}__{suffix}"


def describe_payload(value: object, max_length: int = 80) -> str:
    """Render an arbitrary payload as a bounded JSON-safe string.

    Parameters
    ----------
    value : object
        Element or payload to describe.
    max_length : int, optional
        Maximum length of the returned text, by default 80.

    Returns
    -------
    str
        ``repr(value)``, truncated with an ellipsis when too long.
    """
    text = repr(value)
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text
