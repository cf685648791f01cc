"""Configuration management for dirutil."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    EnvLoadError,
    handle_config_error,
)
from .loader import ConfigLoader, EnvLoader, YamlLoader, load_config
from .models import (
    BaseConfig,
    CopyConfig,
    DirUtilConfig,
    ExecutionConfig,
    LoggingConfig,
    SizeScanConfig,
    TempConfig,
)

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "EnvLoadError",
    "handle_config_error",
    # Loading
    "ConfigLoader",
    "EnvLoader",
    "YamlLoader",
    "load_config",
    # Models
    "BaseConfig",
    "CopyConfig",
    "DirUtilConfig",
    "ExecutionConfig",
    "LoggingConfig",
    "SizeScanConfig",
    "TempConfig",
]
