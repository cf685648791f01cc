"""Error handling for the configuration system."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible config error context
        """Initialize ConfigError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible config error context


class ConfigLoadError(ConfigError):
    """Exception raised when a configuration file cannot be read or parsed."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        super().__init__(message, {"file_path": file_path} if file_path is not None else None)
        self.file_path: str | None = file_path


class EnvLoadError(ConfigError):
    """Exception raised when an environment override cannot be interpreted."""

    def __init__(self, message: str, env_var: str | None = None) -> None:
        super().__init__(message, {"env_var": env_var} if env_var is not None else None)
        self.env_var: str | None = env_var


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, pydantic_error: ValidationError | None = None) -> None:
        """Initialize ConfigValidationError.

        Args:
            message: Error message
            pydantic_error: Original Pydantic ValidationError
        """
        context: dict[str, Any] = {}  # pyright: ignore[reportAny] # Flexible config error context
        if pydantic_error is not None:
            context["validation_errors"] = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in pydantic_error.errors()
            ]
        super().__init__(message, context)
        self.pydantic_error: ValidationError | None = pydantic_error


def handle_config_error(error: Exception, operation: str) -> ConfigError:
    """Wrap an error raised while loading configuration in a ConfigError.

    Args:
        error: Original exception
        operation: Description of the operation that failed

    Returns:
        ``error`` itself if it already is a ConfigError, otherwise a wrapper
    """
    logger.debug("Configuration error during %s: %s", operation, error, exc_info=True)

    if isinstance(error, ConfigError):
        return error

    if isinstance(error, ValidationError):
        return ConfigValidationError(
            f"Configuration validation failed during {operation}",
            pydantic_error=error,
        )

    wrapped_error = ConfigError(
        f"Configuration error during {operation}: {error}",
        context={"operation": operation, "original_error_type": type(error).__name__},
    )
    wrapped_error.__cause__ = error
    return wrapped_error
