"""Setting value parsing shared by the YAML and environment config loaders."""

from __future__ import annotations

from typing import Collection

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def optional_text(value: object) -> str | None:
    """Return a stripped string, or `None` for missing and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_boolean_token(value: object) -> bool | None:
    """Parse `true/false`, `1/0`, `yes/no`, or `on/off`; `None` when unrecognized."""

    if isinstance(value, bool):
        return value
    token = optional_text(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def parse_flag(value: object, field_name: str, *, default: bool = False) -> bool:
    """Parse an optional boolean setting, using `default` when it is unset.

    Raises:
        ValueError: If the value is set but is not an accepted boolean token.
    """

    if optional_text(value) is None:
        return default
    parsed = parse_boolean_token(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def parse_choice(
    value: object,
    field_name: str,
    choices: Collection[str],
    *,
    default: str,
    upper: bool = False,
) -> str:
    """Normalize a case-insensitive identifier and check it against `choices`.

    Blank values resolve to `default`. Matching is done on the lower-cased
    token, or the upper-cased one when `upper` is set.

    Raises:
        ValueError: If the normalized token is not one of `choices`.
    """

    token = optional_text(value) or default
    token = token.upper() if upper else token.lower()
    if token not in choices:
        supported = ", ".join(sorted(choices))
        raise ValueError(f"`{field_name}` must be one of: {supported} (got `{token}`).")
    return token
