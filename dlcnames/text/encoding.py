"""Decoding helpers for fixed-width, NUL-padded name fields."""

from __future__ import annotations


def to_null_terminated_ascii(data: bytes) -> str:
    """Decode ASCII bytes, replacing non-ASCII bytes with ``?``, and drop trailing NULs."""

    return data.decode("ascii", errors="replace").replace("\ufffd", "?").rstrip("\0")


def to_null_terminated_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes and drop trailing NULs."""

    return data.decode("utf-8", errors="replace").rstrip("\0")
