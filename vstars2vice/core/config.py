"""Converter configuration loaded from environment variables.

All configuration values have defaults that reproduce the reference
vice output. Fail-fast validation: ``from_env()`` raises
``ConfigValidationError`` if any value is malformed or out of range, so
bad configuration is caught before the input file is touched.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from vstars2vice.core.constants import DEFAULT_JSON_INDENT
from vstars2vice.core.exceptions import ValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are malformed or out of range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        json_indent: Spaces per indentation level in the JSON output.
        log_level: Name of the logging level used by the CLI.
        huge_tree: Lift lxml's safety limits for very large facility files.
    """

    json_indent: int = DEFAULT_JSON_INDENT
    log_level: str = "INFO"
    huge_tree: bool = False

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value cannot be parsed or is out
                of range.
        """
        raw_indent = os.getenv("VSTARS2VICE_JSON_INDENT", str(DEFAULT_JSON_INDENT))
        try:
            json_indent = int(raw_indent)
        except ValueError as exc:
            raise ConfigValidationError(
                "VSTARS2VICE_JSON_INDENT", raw_indent, "must be an integer"
            ) from exc

        config = cls(
            json_indent=json_indent,
            log_level=os.getenv("VSTARS2VICE_LOG_LEVEL", "INFO").strip().upper(),
            huge_tree=_parse_bool(
                "VSTARS2VICE_HUGE_TREE", os.getenv("VSTARS2VICE_HUGE_TREE", "")
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (1/0, true/false, yes/no, on/off)")


def _validate(config: ConverterConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.json_indent < 0:
        raise ConfigValidationError(
            "VSTARS2VICE_JSON_INDENT",
            config.json_indent,
            "must be >= 0 (spaces)",
        )

    if config.log_level not in LOG_LEVELS:
        raise ConfigValidationError(
            "VSTARS2VICE_LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(LOG_LEVELS)}",
        )
