"""Configuration model and loaders for Numeronym.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide deterministic precedence resolution for CLI, environment, and file values.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `NumeronymConfig`: normalized settings for one CLI invocation.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `NumeronymConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import MIN_ABBREVIATION_LENGTH, NumeronymOptions
from .parsing import (
    normalize_optional_string,
    parse_positive_int,
    parse_required_boolean,
)
from .telemetry.logger import LOG_LEVELS

_DEFAULT_LOG_LEVEL = "WARNING"

ENV_KEYS: Mapping[str, str] = {
    "min_length": "NUMERONYM_MIN_LENGTH",
    "lowercase": "NUMERONYM_LOWERCASE",
    "join_words": "NUMERONYM_JOIN_WORDS",
    "html": "NUMERONYM_HTML",
    "log_level": "NUMERONYM_LOG_LEVEL",
}


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic runtime value precedence.

    Attributes:
        cli: Values explicitly provided by CLI options, keyed by field name.
        env: Environment variables, keyed by variable name.
    """

    cli: Mapping[str, object] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class NumeronymConfig:
    """Runtime configuration for one CLI invocation.

    Attributes:
        min_length: Shortest word length that gets abbreviated.
        lowercase: Lowercase input before abbreviating.
        join_words: Abbreviate the whole input as a single word.
        html: Render results as escaped `<p>` markup.
        log_level: Minimum `loguru` level for phase logs.
    """

    min_length: int = MIN_ABBREVIATION_LENGTH
    lowercase: bool = False
    join_words: bool = False
    html: bool = False
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before a command runs."""

        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int):
            raise ValueError("`min_length` must be a positive integer.")
        if self.min_length < MIN_ABBREVIATION_LENGTH:
            raise ValueError(
                f"`min_length` must be at least {MIN_ABBREVIATION_LENGTH}; "
                f"got {self.min_length}."
            )
        if self.log_level not in LOG_LEVELS:
            supported = ", ".join(LOG_LEVELS)
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )

    def to_options(self) -> NumeronymOptions:
        """Return generator options for this configuration."""

        return NumeronymOptions(
            min_length=self.min_length,
            lowercase=self.lowercase,
            join_words=self.join_words,
        )

    def resolved(self, sources: RuntimeConfigSources | None = None) -> NumeronymConfig:
        """Resolve settings with deterministic source precedence.

        Precedence for each key is:
        `cli` > `env` > this config's value (file or default).
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()
        overrides: dict[str, Any] = {}
        for key, env_key in ENV_KEYS.items():
            cli_value = resolved_sources.cli.get(key)
            if cli_value is not None:
                overrides[key] = _coerce_field(key, cli_value, source_label="CLI option")
                continue
            env_value = normalize_optional_string(resolved_sources.env.get(env_key))
            if env_value is not None:
                overrides[key] = _coerce_field(
                    key, env_value, source_label=f"Environment variable `{env_key}`"
                )

        config = replace(self, **overrides)
        config.validate()
        return config


def _coerce_field(key: str, value: object, source_label: str) -> Any:
    """Convert a raw source value into the typed config field value."""

    try:
        if key == "min_length":
            return parse_positive_int(value, key)
        if key == "log_level":
            normalized = normalize_optional_string(value)
            return normalized.upper() if normalized is not None else _DEFAULT_LOG_LEVEL
        return parse_required_boolean(value, key)
    except ValueError as exc:
        raise ValueError(f"{source_label}: {exc}") from exc


class ConfigLoader:
    """Factory methods for creating `NumeronymConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(ENV_KEYS)

    @staticmethod
    def from_yaml(path: Path) -> NumeronymConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NumeronymConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        return NumeronymConfig().resolved(RuntimeConfigSources(env=env_map))

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> NumeronymConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        values: dict[str, Any] = {}
        for key, raw_value in payload.items():
            if normalize_optional_string(raw_value) is None:
                continue
            values[key] = _coerce_field(key, raw_value, source_label=f"{source_label} field")

        config = NumeronymConfig(**values)
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config
