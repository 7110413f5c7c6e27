"""XML-illegal character filtering for content files.

Responsibilities:
- Remove control characters that XML 1.1 parsers reject.
- Decode content files leniently and re-encode them as UTF-8 without a
  byte-order mark.

This module is the only part of the package that touches the filesystem;
the text rules in `dlcnames.text` stay pure.
"""

from __future__ import annotations

import codecs
import io
from pathlib import Path
import re

from loguru import logger

from ..errors import ContentFileError

ILLEGAL_XML_CHARS_RE = re.compile(r"[\x01-\x08\x0B-\x0C\x0E-\x1F\x7F-\x84\x86-\x9F]")

# Longer marks first: the UTF-32 LE mark starts with the UTF-16 LE mark.
_BYTE_ORDER_MARKS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def strip_illegal_xml_chars(text: str | None) -> str:
    """Remove XML-illegal control characters from text."""

    if not text:
        return ""
    return ILLEGAL_XML_CHARS_RE.sub("", text)


def decode_content(payload: bytes) -> str:
    """Decode file bytes, honouring a leading byte-order mark.

    Without a mark the payload is read as UTF-8. Undecodable bytes become
    U+FFFD instead of failing the read.
    """

    for mark, encoding in _BYTE_ORDER_MARKS:
        if payload.startswith(mark):
            return payload[len(mark):].decode(encoding, errors="replace")
    return payload.decode("utf-8", errors="replace")


def filter_xml_file(path: Path | str) -> io.BytesIO:
    """Return the file's contents with illegal characters removed.

    The file is decoded with `decode_content` and the cleaned content is
    returned as a stream of BOM-less UTF-8 bytes.

    Raises:
        ContentFileError: If the file is missing or cannot be read.
    """

    source = Path(path)
    try:
        payload = source.read_bytes()
    except FileNotFoundError as exc:
        raise ContentFileError(
            path=source,
            detail=f"Content file not found: `{source}`.",
            missing=True,
            hint="Verify the path points to an existing XML file.",
        ) from exc
    except OSError as exc:
        raise ContentFileError(
            path=source,
            detail=f"Failed to read content file `{source}`: {exc}",
            missing=False,
            hint="Verify the path is a regular file and readable.",
        ) from exc

    contents = decode_content(payload)
    cleaned = strip_illegal_xml_chars(contents)
    logger.debug(
        "Filtered XML content file {} (removed {} characters).",
        source,
        len(contents) - len(cleaned),
    )
    return io.BytesIO(cleaned.encode("utf-8"))
