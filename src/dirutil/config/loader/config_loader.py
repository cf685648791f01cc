"""Configuration loader combining a YAML file with environment overrides."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import handle_config_error
from ..models import DirUtilConfig
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES: tuple[str, ...] = ("dirutil.yaml", "dirutil.yml")


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Merge two nested mappings; values from ``override`` take precedence.

    Nested mappings are merged key by key, any other value is replaced.
    Neither input is modified.
    """
    result: dict[str, object] = copy.deepcopy(dict(base))
    for key, value in override.items():
        existing = result.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(existing, value)  # pyright: ignore[reportUnknownArgumentType]
        else:
            result[key] = copy.deepcopy(value)
    return result


class ConfigLoader:
    """Loader producing a validated DirUtilConfig."""

    def __init__(
        self,
        config_dir: Path | None = None,
        env_loader: EnvLoader | None = None,
    ) -> None:
        """Initialize configuration loader.

        Args:
            config_dir: Directory searched for a default config file
                (defaults to the current directory)
            env_loader: Loader for environment overrides
        """
        self.config_dir: Path = config_dir or Path.cwd()
        self.yaml_loader: YamlLoader = YamlLoader()
        self.env_loader: EnvLoader = env_loader or EnvLoader()

    def find_config_file(self) -> Path | None:
        """Return the first default config file present in ``config_dir``."""
        for name in DEFAULT_CONFIG_NAMES:
            candidate = self.config_dir / name
            if candidate.is_file():
                return candidate
        return None

    def load(
        self,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> DirUtilConfig:
        """Load configuration from all sources.

        Precedence, lowest to highest: model defaults, the YAML file,
        environment variables.

        Args:
            config_path: Explicit config file; when None a default file in
                ``config_dir`` is used if present
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            Validated configuration

        Raises:
            ConfigLoadError: If the config file cannot be read
            EnvLoadError: If an environment override is malformed
            ConfigValidationError: If the merged configuration is invalid
        """
        path = config_path if config_path is not None else self.find_config_file()

        file_config: dict[str, object] = {}
        if path is not None:
            file_config = self.yaml_loader.load(path)
            logger.debug("Loaded configuration file %s", path, extra={"file_path": str(path)})

        env_config = self.env_loader.load(environ)
        merged = deep_merge(file_config, env_config)

        try:
            return DirUtilConfig.model_validate(merged)
        except ValidationError as e:
            raise handle_config_error(e, "configuration validation") from e


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> DirUtilConfig:
    """Load and validate configuration; see ``ConfigLoader.load``."""
    loader = ConfigLoader(config_dir=config_path.parent if config_path is not None else None)
    return loader.load(config_path, environ)
