"""
Library Settings: Environment-Driven Behaviour Switches

Settings govern how the loader treats its input and how diagnostics are
emitted. They never change the declared parameter schema.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from diskann_config.core import constants as C
from diskann_config.core.errors import ConfigError, Err, Ok, Result

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})
_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(C.ENV_PREFIX + name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{C.ENV_PREFIX}{name}={raw!r} is not a boolean")


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Loader and logging settings.

    Parameters:
        log_level: Minimum level for the package loggers
        log_json: Emit JSON lines instead of plain text
        reject_unknown_params: Fail loading on undeclared keys instead of skipping them
    """
    log_level: str = "INFO"
    log_json: bool = True
    reject_unknown_params: bool = False

    def validate(self) -> Result[None, str]:
        if self.log_level not in _LEVELS:
            return Err(f"log_level must be one of {sorted(_LEVELS)}, got {self.log_level!r}")
        return Ok(None)

    @classmethod
    def from_env(cls) -> Result["Settings", str]:
        """
        Load settings from environment variables.

        Environment variables are prefixed with DISKANN_CONFIG_.
        Example: DISKANN_CONFIG_LOG_LEVEL=DEBUG, DISKANN_CONFIG_REJECT_UNKNOWN=1
        """
        try:
            settings = cls(
                log_level=os.getenv(C.ENV_PREFIX + "LOG_LEVEL", "INFO").strip().upper(),
                log_json=_env_flag("LOG_JSON", True),
                reject_unknown_params=_env_flag("REJECT_UNKNOWN", False),
            )
        except ValueError as e:
            return Err(f"Configuration error: {e}")
        return settings.validate().map(lambda _: settings)



def resolve_settings(settings: Optional[Settings] = None) -> Result[Settings, ConfigError]:
    """Explicit settings win; otherwise read DISKANN_CONFIG_* from the environment."""
    if settings is not None:
        return Ok(settings)
    result = Settings.from_env()
    if result.is_err():
        return Err(ConfigError.invalid_settings(result.error))
    return result
