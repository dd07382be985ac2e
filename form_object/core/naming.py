"""Conventional naming helpers for form classes."""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """Convert a CamelCase class name to snake_case.

    Examples:
        >>> underscore("SignupForm")
        'signup_form'
        >>> underscore("HTTPRequestForm")
        'http_request_form'
    """
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def humanize(field: str) -> str:
    """Turn a field identifier into a human-readable label.

    Examples:
        >>> humanize("first_name")
        'First name'
        >>> humanize("author_id")
        'Author'
    """
    text = field
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip()
    if not text:
        return field
    return text[0].upper() + text[1:]
