"""Configuration model and loaders for dlcnames.

Responsibilities:
- Define naming defaults as a typed dataclass.
- Resolve the target filesystem charset from a platform identifier.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `NamingConfig`: normalized naming settings.
- `ConfigLoader`: static construction helpers for `NamingConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

from loguru import logger
import yaml

from .parsing import parse_choice, parse_flag
from .platforms import PLATFORM_CHARSETS, FilesystemCharset, charset_for_platform

_DEFAULT_PLATFORM = "windows"
_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


@dataclass(slots=True)
class NamingConfig:
    """Naming defaults for one packaging run.

    Attributes:
        platform: Target filesystem preset (`windows` or `posix`).
        use_acronym: Whether short file names use the artist acronym.
        log_level: Minimum level for command logs.
    """

    platform: str = _DEFAULT_PLATFORM
    use_acronym: bool = False
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.platform not in PLATFORM_CHARSETS:
            supported = ", ".join(sorted(PLATFORM_CHARSETS))
            raise ValueError(
                f"`platform` must be one of: {supported} (got `{self.platform}`)."
            )
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"`log_level` must be one of: {supported} (got `{self.log_level}`)."
            )

    def charset(self) -> FilesystemCharset:
        """Return the reserved-character preset for the configured platform."""

        return charset_for_platform(self.platform)


class ConfigLoader:
    """Factory methods for creating `NamingConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"platform", "use_acronym", "log_level"})

    @staticmethod
    def from_yaml(path: Path) -> NamingConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        logger.debug("Loading naming config from {}.", path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NamingConfig:
        """Create a validated config from `DLCNAMES_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        config = NamingConfig(
            platform=parse_choice(
                env_map.get("DLCNAMES_PLATFORM"),
                "DLCNAMES_PLATFORM",
                PLATFORM_CHARSETS,
                default=_DEFAULT_PLATFORM,
            ),
            use_acronym=parse_flag(env_map.get("DLCNAMES_USE_ACRONYM"), "DLCNAMES_USE_ACRONYM"),
            log_level=parse_choice(
                env_map.get("DLCNAMES_LOG_LEVEL"),
                "DLCNAMES_LOG_LEVEL",
                _SUPPORTED_LOG_LEVELS,
                default=_DEFAULT_LOG_LEVEL,
                upper=True,
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> NamingConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        config = NamingConfig(
            platform=parse_choice(
                payload.get("platform"), "platform", PLATFORM_CHARSETS, default=_DEFAULT_PLATFORM
            ),
            use_acronym=parse_flag(payload.get("use_acronym"), "use_acronym"),
            log_level=parse_choice(
                payload.get("log_level"),
                "log_level",
                _SUPPORTED_LOG_LEVELS,
                default=_DEFAULT_LOG_LEVEL,
                upper=True,
            ),
        )
        config.validate()
        return config
