"""Shared pytest fixtures for the full dlcnames test suite."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def _clear_naming_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `DLCNAMES_*` variables from leaking into config resolution."""

    for key in ("DLCNAMES_PLATFORM", "DLCNAMES_USE_ACRONYM", "DLCNAMES_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _detach_log_sinks() -> Iterator[None]:
    """Remove loguru sinks bound to per-test streams once a test finishes."""

    yield
    logger.remove()
