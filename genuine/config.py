"""
Config system - typed routing configuration with layered sources.

Merge precedence (later overrides earlier):
defaults < .env file < environment variables < explicit overrides
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from dotenv import dotenv_values


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


_TRUE = ("true", "yes", "1", "on")
_FALSE = ("false", "no", "0", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RoutingConfig:
    """Settings consumed by the route table and the CLI."""

    # Strip one trailing '/' from request paths before matching
    strip_trailing_slash: bool = True
    # Treat zero-length param captures as non-matches
    reject_empty_params: bool = False
    log_level: str = "WARNING"

    @classmethod
    def load(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        env_prefix: str = "GENUINE_",
    ) -> "RoutingConfig":
        """
        Load configuration from all sources.

        Args:
            env_file: Path to a .env file (read with python-dotenv)
            overrides: Manual overrides (highest precedence)
            env_prefix: Prefix for environment variables

        Returns:
            Validated RoutingConfig instance
        """
        data: Dict[str, Any] = {}

        if env_file:
            data.update(_strip_prefix(dotenv_values(env_file), env_prefix))

        data.update(_strip_prefix(os.environ, env_prefix))

        if overrides:
            data.update({key.lower(): value for key, value in overrides.items()})

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoutingConfig":
        """Build a config from raw values, coercing strings."""
        known = {f.name: f for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, raw in data.items():
            field_def = known.get(key)
            if field_def is None or raw is None:
                continue
            if field_def.type in (bool, "bool"):
                values[key] = _parse_bool(key, raw)
            else:
                values[key] = str(raw)

        if "log_level" in values:
            level = values["log_level"].upper()
            if level not in _LOG_LEVELS:
                raise ConfigError(
                    f"Invalid log_level {values['log_level']!r}, expected one of {', '.join(_LOG_LEVELS)}"
                )
            values["log_level"] = level

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _strip_prefix(source, prefix: str) -> Dict[str, Any]:
    """Select GENUINE_FOO style keys and turn them into ``foo``."""
    return {
        key[len(prefix):].lower(): value
        for key, value in source.items()
        if key.startswith(prefix)
    }


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for {key}: {value!r}")
