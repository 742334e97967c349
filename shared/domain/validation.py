"""
Field validation helpers.

Each helper checks one constraint and raises ValidationError on failure.
Callers may pass ``message`` to replace the default wording.
"""
from typing import Any, Optional

from .exceptions import ValidationError


def not_null(value: Any, field_name: str, message: Optional[str] = None) -> None:
    """Fail when value is None."""
    if value is None:
        raise ValidationError(
            message=message or f"{field_name} should not be null",
            field=field_name,
        )


def not_null_or_empty(value: Optional[str], field_name: str, message: Optional[str] = None) -> None:
    """Fail when value is None, empty or whitespace-only."""
    if value is None or not value.strip():
        raise ValidationError(
            message=message or f"{field_name} should not be null or empty",
            field=field_name,
        )


def min_length(value: str, min_length: int, field_name: str, message: Optional[str] = None) -> None:
    """Fail when value is shorter than min_length."""
    if len(value) < min_length:
        raise ValidationError(
            message=message or f"{field_name} should not be less than {min_length} characters long",
            field=field_name,
        )


def max_length(value: str, max_length: int, field_name: str, message: Optional[str] = None) -> None:
    """Fail when value is longer than max_length."""
    if len(value) > max_length:
        raise ValidationError(
            message=message or f"{field_name} should not be greater than {max_length} characters long",
            field=field_name,
        )
