"""Input validation for the action boundary."""

from __future__ import annotations

from .errors import ValidationError


def validate_text_input(value: object, name: str) -> str:
    """Return `value` unchanged when it is text, including the empty string.

    Raises:
        ValidationError: If the input is absent or not a string.
    """

    if value is None:
        raise ValidationError(
            name=name,
            detail=f"Input required and not supplied: `{name}`.",
            hint=f"Set the `{name}` input (an empty string is accepted).",
        )
    if not isinstance(value, str):
        raise ValidationError(
            name=name,
            detail=f"Input `{name}` must be a string, got `{type(value).__name__}`.",
        )
    return value
