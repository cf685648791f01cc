"""Environment variable configuration loader."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import cast

from ..exceptions import EnvLoadError


class EnvLoader:
    """Environment variable loader with nested keys and type conversion.

    ``DIRUTIL_SIZE__CONTINUE_ON_ERROR=false`` becomes
    ``{"size": {"continue_on_error": False}}``: the prefix is removed, the
    rest is lower-cased and split on the nesting separator.
    """

    def __init__(
        self,
        prefix: str = "DIRUTIL_",
        separator: str = "__",
        convert_types: bool = True,
    ) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            separator: Separator for nested field names
            convert_types: Whether to attempt automatic type conversion
        """
        self.prefix: str = prefix
        self.separator: str = separator
        self.convert_types: bool = convert_types

    def load(self, environ: Mapping[str, str] | None = None) -> dict[str, object]:
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Dictionary containing the loaded configuration

        Raises:
            EnvLoadError: If a JSON-looking value cannot be parsed
        """
        source = os.environ if environ is None else environ
        config: dict[str, object] = {}

        for env_var, raw_value in source.items():
            if not env_var.startswith(self.prefix):
                continue

            config_key = env_var[len(self.prefix):]
            if not config_key:
                continue

            keys = [key for key in config_key.lower().split(self.separator) if key]
            if not keys:
                continue

            value: object = raw_value
            if self.convert_types:
                value = self._convert_value(raw_value, env_var)

            self._set_nested_value(config, keys, value)

        return config

    def _convert_value(self, value: str, env_var: str) -> object:
        """Convert string value to appropriate Python type.

        Raises:
            EnvLoadError: If JSON parsing fails
        """
        if not value:
            return value

        lower_value = value.lower()
        if lower_value in ("true", "yes", "on"):
            return True
        if lower_value in ("false", "no", "off"):
            return False

        try:
            if "." not in value and "e" not in lower_value:
                return int(value)
            return float(value)
        except ValueError:
            pass

        if value.startswith(("[", "{")):
            try:
                return cast(object, json.loads(value))
            except json.JSONDecodeError as e:
                raise EnvLoadError(f"Failed to parse JSON for {env_var}: {e}", env_var) from e

        return value

    def _set_nested_value(self, config: dict[str, object], keys: list[str], value: object) -> None:
        """Set a value in a nested dictionary, creating levels as needed."""
        current: dict[str, object] = config
        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]  # pyright: ignore[reportAssignmentType]
        current[keys[-1]] = value
