"""Target-platform filesystem character sets.

Responsibilities:
- Describe reserved file-name and path characters as plain configuration.
- Keep name cleanup host-independent: nothing here queries the live OS.

Key types:
- `FilesystemCharset`: reserved characters and separator of one platform.
- `WINDOWS`, `POSIX`: presets selectable by name via `charset_for_platform`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

_CONTROL_CHARACTERS = "".join(chr(code) for code in range(1, 32))


@dataclass(frozen=True, slots=True)
class FilesystemCharset:
    """Reserved characters for one target filesystem.

    Attributes:
        name: Preset identifier (`windows`, `posix`).
        invalid_file_name_chars: Characters removed from file names.
        invalid_path_chars: Characters removed from directory paths.
        separator: Primary path separator.
        alternate_separators: Other characters the platform also treats as
            separators when splitting a path.
    """

    name: str
    invalid_file_name_chars: frozenset[str]
    invalid_path_chars: frozenset[str]
    separator: str
    alternate_separators: tuple[str, ...] = ()

    def last_separator_index(self, path: str) -> int:
        """Return the index of the last separator in `path`, or -1."""

        return max(path.rfind(mark) for mark in (self.separator, *self.alternate_separators))


WINDOWS = FilesystemCharset(
    name="windows",
    invalid_file_name_chars=frozenset('"<>|\0' + _CONTROL_CHARACTERS + ':*?\\/'),
    invalid_path_chars=frozenset('"<>|\0' + _CONTROL_CHARACTERS),
    separator="\\",
    alternate_separators=("/",),
)

POSIX = FilesystemCharset(
    name="posix",
    invalid_file_name_chars=frozenset("\0/"),
    invalid_path_chars=frozenset("\0"),
    separator="/",
)

PLATFORM_CHARSETS = MappingProxyType({WINDOWS.name: WINDOWS, POSIX.name: POSIX})


def charset_for_platform(platform: str) -> FilesystemCharset:
    """Return the preset charset for a platform identifier.

    Raises:
        ValueError: If the identifier has no preset.
    """

    key = platform.strip().lower()
    try:
        return PLATFORM_CHARSETS[key]
    except KeyError:
        supported = ", ".join(sorted(PLATFORM_CHARSETS))
        raise ValueError(
            f"Unsupported platform `{platform}`. Supported: {supported}."
        ) from None
