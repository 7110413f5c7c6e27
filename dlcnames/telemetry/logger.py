"""Structured command logging utilities.

Responsibilities:
- Emit concise, deterministic command-level log lines through `loguru`.
- Keep context values shell-safe so log lines stay grep-friendly.

The package disables its loguru records on import; creating a `RunLogger`
re-enables them and replaces every existing sink with the given one.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in sorted key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit deterministic command logs for CLI-observable activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to ``sink`` with a plain message format."""

        self._sink = sink or sys.stderr
        logger.enable("dlcnames")
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, command: str, **context: object) -> None:
        """Emit one structured log line."""

        logger.log(
            level,
            f"[command] level={level} command={command} event={event}{_format_context(context)}",
        )

    def log_command_start(self, command: str, **context: object) -> None:
        """Emit a command-start event."""

        self._emit("INFO", "start", command, **context)

    def log_command_complete(self, command: str, **context: object) -> None:
        """Emit a command-complete event."""

        self._emit("INFO", "complete", command, **context)

    def log_command_failure(self, command: str, error_type: str) -> None:
        """Emit a command-failure event without the failing input."""

        self._emit("ERROR", "failure", command, error_type=error_type)
