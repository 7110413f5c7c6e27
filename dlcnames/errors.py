"""Domain exceptions for configuration, file filtering, and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class NamingStageError(RuntimeError):
    """Raised when a specific naming stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped naming error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ContentFileError(NamingStageError):
    """Raised when a content file is missing or cannot be read."""

    def __init__(
        self,
        *,
        path: Path,
        detail: str,
        missing: bool,
        hint: str | None = None,
    ) -> None:
        """Initialize a file error for the `read` stage."""

        super().__init__(stage="read", detail=detail, hint=hint)
        self.path = path
        self.missing = missing
