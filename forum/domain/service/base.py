"""Base service class for domain services."""

from forum.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def require_text(value: str, field: str, max_length: int) -> str:
    """Reject blank or oversized user content.

    Args:
        value: Submitted text
        field: Field name used in the error message
        max_length: Maximum accepted length

    Returns:
        The text unchanged

    Raises:
        ValidationError: If the text is blank or longer than ``max_length``
    """
    if not value or not value.strip():
        raise ValidationError(f"{field} is required")
    if len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return value
