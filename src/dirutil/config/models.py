"""Configuration models."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dirutil.core.execution import ExecutionMode
from dirutil.types.aliases import ProgressCallback
from dirutil.types.models import SizeMode, SizeOptions
from dirutil.utils.logging import DEFAULT_LOG_FORMAT, configure_logging


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        frozen=False,
    )


class SizeScanConfig(BaseConfig):
    """Defaults for directory size scans."""

    recursive: bool = Field(
        default=True,
        description="Descend into subdirectories",
    )
    continue_on_error: bool = Field(
        default=True,
        description="Skip unreadable directories instead of aborting the scan",
    )
    mode: SizeMode = Field(
        default=SizeMode.APPARENT,
        description="Count apparent file sizes or allocated disk usage",
    )

    def to_options(self, progress: ProgressCallback | None = None) -> SizeOptions:
        """Build scan options from this configuration."""
        return SizeOptions(
            recursive=self.recursive,
            continue_on_error=self.continue_on_error,
            progress=progress,
            mode=self.mode,
        )


class CopyConfig(BaseConfig):
    """Defaults for recursive directory copies."""

    overwrite: bool = Field(
        default=True,
        description="Replace existing destination files",
    )
    buffer_size: int = Field(
        default=81920,
        ge=4096,
        le=64 * 1024 * 1024,
        description="Chunk size in bytes used when streaming file contents",
    )


class ExecutionConfig(BaseConfig):
    """Configuration of where blocking work runs for async callers."""

    mode: ExecutionMode = Field(
        default=ExecutionMode.OFFLOAD,
        description="Run work inline on the caller or offload it to a worker thread",
    )


class TempConfig(BaseConfig):
    """Configuration for temp directory creation."""

    root: str | None = Field(
        default=None,
        description="Parent directory for temp directories (system default when unset)",
    )
    prefix: str | None = Field(
        default=None,
        max_length=64,
        description="Name prefix for temp directories",
    )

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str | None) -> str | None:
        """Reject prefixes that would escape the temp root."""
        if v is not None and any(sep in v for sep in ("/", "\\")):
            raise ValueError("Temp directory prefix cannot contain path separators")
        return v or None


class LoggingConfig(BaseConfig):
    """Configuration for logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Log message format",
    )
    enable_console: bool = Field(
        default=True,
        description="Write log output to stdout",
    )
    file: str | None = Field(
        default=None,
        description="Log file path (optional)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    def apply(self) -> logging.Logger:
        """Configure the dirutil logger from this configuration."""
        return configure_logging(
            log_level=self.level,
            enable_console=self.enable_console,
            log_file=self.file,
            log_format=self.format,
        )


class DirUtilConfig(BaseConfig):
    """Complete dirutil configuration."""

    # "copy" is the key in config files; the attribute avoids BaseModel.copy
    model_config: ConfigDict = ConfigDict(populate_by_name=True)  # pyright: ignore[reportIncompatibleVariableOverride]

    size: SizeScanConfig = Field(
        default_factory=SizeScanConfig,
        description="Size scan defaults",
    )
    copy_options: CopyConfig = Field(
        default_factory=CopyConfig,
        alias="copy",
        description="Directory copy defaults",
    )
    execution: ExecutionConfig = Field(
        default_factory=ExecutionConfig,
        description="Execution context configuration",
    )
    temp: TempConfig = Field(
        default_factory=TempConfig,
        description="Temp directory configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
