"""
Field Validation Helpers

Small checks shared by the services. Failures raise the domain
ValidationError so the API answers 400 with the given message.
"""

import re

from bookstore.exceptions import ValidationError
from bookstore.models import ISBN_PATTERN

_isbn_re = re.compile(ISBN_PATTERN)


def is_blank(value: str | None) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


def require_text(value: str | None, message: str) -> str:
    """
    Return ``value`` stripped, or raise ValidationError(message) if blank.

    Example:
        name = require_text(data.name, "Name cannot be blank")
    """
    if is_blank(value):
        raise ValidationError(message)
    return value.strip()


def is_valid_isbn(isbn: str) -> bool:
    """Check the catalog ISBN layout: xx-xxx-xxx, digits only."""
    return _isbn_re.match(isbn) is not None
