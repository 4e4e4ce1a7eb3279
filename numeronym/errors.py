"""Domain exceptions for CLI host diagnostics."""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Raised when a specific stage of a CLI command fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
