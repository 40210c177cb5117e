"""Domain exceptions for input validation and CLI diagnostics."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when an action input is absent or is not text."""

    def __init__(
        self,
        *,
        name: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an input-scoped validation error."""

        super().__init__(detail)
        self.name = name
        self.detail = detail
        self.hint = hint


class ActionStageError(RuntimeError):
    """Raised when a specific CLI stage fails outside the core transform."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped action error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
