"""Environment-aware configuration for the transaction display engine."""
from __future__ import annotations

import copy
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from errors import ConfigurationError


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> bool:
    raw = value.strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"expected a boolean, got {value!r}")


@dataclass
class LoggingSettings:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def validate(self) -> None:
        if not self.level:
            raise ConfigurationError("Logging level must be provided.")
        if not self.format:
            raise ConfigurationError("Logging format must be provided.")


@dataclass
class ReviewSettings:
    # Default review depth used when the caller does not pick one.
    expert_mode: bool = False

    def validate(self) -> None:
        if not isinstance(self.expert_mode, bool):
            raise ConfigurationError(
                f"Review expert_mode must be a boolean (got {self.expert_mode!r})."
            )


@dataclass
class Settings:
    env: str
    logging: LoggingSettings
    review: ReviewSettings

    def validate(self) -> None:
        self.logging.validate()
        self.review.validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "env": self.env,
            "logging": asdict(self.logging),
            "review": asdict(self.review),
        }


BASE_DEFAULTS: Dict[str, Any] = {
    "logging": asdict(LoggingSettings()),
    "review": asdict(ReviewSettings()),
}

ENVIRONMENT_OVERRIDES: Dict[str, Dict[str, Any]] = {
    "development": {},
    "test": {
        "logging": {"level": "DEBUG"},
    },
    "production": {
        "logging": {"level": "WARNING"},
    },
}

_ENV_VALUE_CASTERS: Dict[str, Any] = {
    "TXN_LOG_LEVEL": ("logging", "level", str),
    "TXN_LOG_FORMAT": ("logging", "format", str),
    "TXN_LOG_DATEFMT": ("logging", "datefmt", str),
    "TXN_EXPERT_MODE": ("review", "expert_mode", _parse_bool),
}


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _overrides_from_env() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_key, (section, key, caster) in _ENV_VALUE_CASTERS.items():
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            parsed = caster(raw)
        except Exception as exc:
            raise ConfigurationError(f"Failed to coerce environment variable {env_key}: {exc}") from exc
        overrides.setdefault(section, {})[key] = parsed
    return overrides


def _settings_from_dict(env: str, payload: Dict[str, Any]) -> Settings:
    return Settings(
        env=env,
        logging=LoggingSettings(**payload["logging"]),
        review=ReviewSettings(**payload["review"]),
    )


def load_settings(env: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Settings:
    env_name = (env or os.environ.get("TXN_ENV", "development")).lower()
    base = copy.deepcopy(BASE_DEFAULTS)
    env_specific = ENVIRONMENT_OVERRIDES.get(env_name, {})
    base = _deep_merge(base, copy.deepcopy(env_specific))
    base = _deep_merge(base, _overrides_from_env())
    if overrides:
        base = _deep_merge(base, overrides)
    settings_obj = _settings_from_dict(env_name, base)
    settings_obj.validate()
    return settings_obj


def reload_settings(env: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Settings:
    global settings
    settings = load_settings(env=env or settings.env, overrides=overrides)
    return settings


settings: Settings = load_settings()

__all__ = [
    "settings",
    "load_settings",
    "reload_settings",
    "Settings",
    "LoggingSettings",
    "ReviewSettings",
]
