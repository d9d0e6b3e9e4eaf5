"""Translator configuration: TOML file, environment and explicit overrides.

Priority (highest first): explicit overrides, environment variables
(``OTEL_XRAY_*``), config file, defaults.
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from otel_xray.errors import ConfigError
from otel_xray.translator.attributes import UnknownAttributePolicy
from otel_xray.translator.ids import MAX_AGE_SECONDS, MAX_SKEW_SECONDS
from otel_xray.translator.names import DEFAULT_NAME, INVALID_NAME_CHARACTERS, MAX_NAME_LENGTH

CONFIG_FILE_NAME = "otel_xray.toml"
ENV_PREFIX = "OTEL_XRAY_"


class NamingConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    invalid_characters: str = INVALID_NAME_CHARACTERS
    max_length: int = Field(default=MAX_NAME_LENGTH, ge=1, le=MAX_NAME_LENGTH)
    default_name: str = Field(default=DEFAULT_NAME, min_length=1)

    @field_validator("invalid_characters")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression: {exc}") from exc
        return value


class IdentifierConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_age_seconds: int = Field(default=MAX_AGE_SECONDS, ge=0)
    max_skew_seconds: int = Field(default=MAX_SKEW_SECONDS, ge=0)


class TranslationConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    unknown_attributes: UnknownAttributePolicy = UnknownAttributePolicy.DROP
    legacy_remote_namespace: bool = False
    millisecond_precision: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    debug: bool = False


class XRayConfig(BaseModel):
    """Complete otel_xray configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    naming: NamingConfig = Field(default_factory=NamingConfig)
    identifiers: IdentifierConfig = Field(default_factory=IdentifierConfig)
    translation: TranslationConfig = Field(default_factory=TranslationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# flat key -> (section, field)
FLAT_KEYS: Dict[str, Tuple[str, str]] = {
    "invalid_characters": ("naming", "invalid_characters"),
    "max_name_length": ("naming", "max_length"),
    "default_name": ("naming", "default_name"),
    "max_age_seconds": ("identifiers", "max_age_seconds"),
    "max_skew_seconds": ("identifiers", "max_skew_seconds"),
    "unknown_attributes": ("translation", "unknown_attributes"),
    "legacy_remote_namespace": ("translation", "legacy_remote_namespace"),
    "millisecond_precision": ("translation", "millisecond_precision"),
    "debug": ("logging", "debug"),
}

_BOOL_KEYS = {"legacy_remote_namespace", "millisecond_precision", "debug"}
_INT_KEYS = {"max_name_length", "max_age_seconds", "max_skew_seconds"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def find_config_file() -> Optional[str]:
    """
    Look for a config file in the current directory, then the home directory.

    Returns:
        Path of the first file found, or None
    """
    candidates = [
        Path.cwd() / CONFIG_FILE_NAME,
        Path.home() / f".{CONFIG_FILE_NAME}",
    ]
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Read a TOML config file.

    Returns:
        Nested dict of sections, or {} if the file does not exist

    Raises:
        ConfigError: If the file is not valid TOML
    """
    config_path = Path(path)
    if not config_path.is_file():
        return {}
    try:
        with config_path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError("Invalid TOML config file", {"path": str(config_path), "error": str(exc)}) from exc


def _convert_env_value(key: str, raw: str) -> Any:
    if key in _BOOL_KEYS:
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigError("Invalid boolean environment value", {"key": ENV_PREFIX + key.upper(), "value": raw})
    if key in _INT_KEYS:
        try:
            return int(raw)
        except ValueError as exc:
            raise ConfigError("Invalid integer environment value", {"key": ENV_PREFIX + key.upper(), "value": raw}) from exc
    return raw


def nest(flat: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Turn flat keys into the sectioned layout used by the config file."""
    nested: Dict[str, Dict[str, Any]] = {}
    for key, value in flat.items():
        if key not in FLAT_KEYS:
            raise ConfigError("Unknown configuration key", {"key": key})
        section, field = FLAT_KEYS[key]
        nested.setdefault(section, {})[field] = value
    return nested


def load_config_from_env(flat: bool = False) -> Dict[str, Any]:
    """
    Read ``OTEL_XRAY_*`` environment variables.

    Args:
        flat: Return flat keys instead of config-file sections

    Returns:
        Only the keys whose variables are set
    """
    values: Dict[str, Any] = {}
    for key in FLAT_KEYS:
        raw = os.environ.get(ENV_PREFIX + key.upper())
        if raw is None:
            continue
        values[key] = _convert_env_value(key, raw)
    return values if flat else nest(values)


def _merge(base: Dict[str, Dict[str, Any]], update: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    merged = {section: dict(fields) for section, fields in base.items()}
    for section, fields in update.items():
        merged.setdefault(section, {}).update(fields)
    return merged


def load_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> XRayConfig:
    """
    Build the effective configuration.

    Args:
        config_file: TOML file to read; discovered with find_config_file() if None
        overrides: Flat keys (see FLAT_KEYS) that win over everything else

    Raises:
        ConfigError: If any source is unreadable or the result is invalid
    """
    path = config_file or find_config_file()
    data = load_toml_config(path) if path else {}
    data = _merge(data, load_config_from_env())
    if overrides:
        data = _merge(data, nest(overrides))
    try:
        return XRayConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError("Invalid configuration", {"errors": exc.error_count(), "detail": str(exc)}) from exc


def validate_config(data: Dict[str, Any]) -> Tuple[bool, str, Optional[XRayConfig]]:
    """
    Validate a sectioned config mapping without raising.

    Returns:
        (is_valid, message, config or None)
    """
    try:
        config = XRayConfig.model_validate(data)
    except ValidationError as exc:
        return False, str(exc), None
    return True, "ok", config
