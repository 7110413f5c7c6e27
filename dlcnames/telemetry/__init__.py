"""Logging helpers for command-level observability."""

from .logger import RunLogger

__all__ = ["RunLogger"]
