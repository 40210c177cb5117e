"""Configuration model and loaders for rot13action.

Responsibilities:
- Define the action's input/output naming and host-input handling as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ActionConfig`: normalized settings for one action run.
- `ConfigLoader`: static construction helpers for `ActionConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


DEFAULT_INPUT_NAME = "string"
DEFAULT_OUTPUT_NAME = "result"

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def parse_boolean(value: object, field_name: str) -> bool:
    """Parse a boolean from a YAML scalar or an environment string.

    Raises:
        ValueError: If the value is not `true`/`false`, `1`/`0`, `yes`/`no` or `on`/`off`.
    """

    if isinstance(value, bool):
        return value
    token = str(value).strip().lower() if value is not None else ""
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def _stripped_name(value: object) -> str | None:
    """Return a configured name without surrounding whitespace, or `None` when blank."""

    if value is None:
        return None
    return str(value).strip() or None


@dataclass(slots=True)
class ActionConfig:
    """Runtime configuration for one action run.

    Attributes:
        input_name: Name of the action input holding the source text.
        output_name: Name of the action output receiving the ROT-13 text.
        trim_whitespace: Whether host input reads strip surrounding whitespace.
    """

    input_name: str = DEFAULT_INPUT_NAME
    output_name: str = DEFAULT_OUTPUT_NAME
    trim_whitespace: bool = True

    def validate(self) -> None:
        """Validate configuration values before the action runs."""

        self._require_non_empty(self.input_name, "input_name")
        self._require_non_empty(self.output_name, "output_name")

    @staticmethod
    def _require_non_empty(value: str, field_name: str) -> None:
        """Validate that configured names are not empty."""

        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"`{field_name}` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for creating `ActionConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"input_name", "output_name", "trim_whitespace"})

    @staticmethod
    def from_yaml(path: Path) -> ActionConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        source_label = f"YAML `{path}`"

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        config = ActionConfig(
            input_name=_stripped_name(payload.get("input_name")) or DEFAULT_INPUT_NAME,
            output_name=_stripped_name(payload.get("output_name")) or DEFAULT_OUTPUT_NAME,
            trim_whitespace=ConfigLoader._optional_boolean(
                payload, "trim_whitespace", source_label
            ),
        )
        config.validate()
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ActionConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        config = ActionConfig(
            input_name=_stripped_name(env_map.get("ROT13_INPUT_NAME")) or DEFAULT_INPUT_NAME,
            output_name=(
                _stripped_name(env_map.get("ROT13_OUTPUT_NAME")) or DEFAULT_OUTPUT_NAME
            ),
            trim_whitespace=ConfigLoader._optional_env_boolean(
                env_map, "ROT13_TRIM_WHITESPACE"
            ),
        )
        config.validate()
        return config

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
    def _optional_boolean(payload: Mapping[str, Any], key: str, source_label: str) -> bool:
        """Read a boolean payload field, defaulting to `True` when absent."""

        if key not in payload:
            return True
        try:
            return parse_boolean(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool:
        """Read a boolean environment variable, defaulting to `True` when unset or blank."""

        value = env.get(key)
        if value is None or not value.strip():
            return True
        return parse_boolean(value, key)
