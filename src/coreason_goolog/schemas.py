# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

import os
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Level(IntEnum):
    """
    Severity of a log record.

    Values match loguru's severity numbers so records can travel through
    the loguru facade without a lookup table.
    """

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def facade_name(self) -> str:
        """Level name as registered in loguru."""
        return "WARNING" if self is Level.WARN else self.name

    @classmethod
    def parse(cls, value: str) -> "Level":
        name = value.strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None

    @classmethod
    def from_severity(cls, severity: int) -> "Level":
        """
        Maps any loguru severity number to the closest level at or below it.
        SUCCESS (25) becomes INFO, CRITICAL (50) becomes ERROR.
        """
        for level in reversed(cls):
            if severity >= level.value:
                return level
        return cls.TRACE


class LevelFilter(IntEnum):
    OFF = 0
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    def accepts(self, level: Level) -> bool:
        return self is not LevelFilter.OFF and level.value >= self.value

    @classmethod
    def from_level(cls, level: Level) -> "LevelFilter":
        return cls(level.value)

    @classmethod
    def parse(cls, value: str) -> "LevelFilter":
        if value.strip().upper() == "OFF":
            return cls.OFF
        return cls.from_level(Level.parse(value))


class Record(BaseModel):
    """
    A single log call.

    The message is already interpolated by the caller. The timestamp is left
    empty by callers and filled in by the Dispatcher when the record is accepted.
    """

    model_config = ConfigDict(frozen=True)

    target: str
    level: Level
    message: str
    timestamp: Optional[datetime] = None


class FormatterPolicy(BaseModel):
    """
    How one sink wants its lines rendered.
    """

    model_config = ConfigDict(frozen=True)

    include_timestamp: bool = True
    colorize: bool = False
    recognize_fatal_sentinel: bool = True
    level_width: int = Field(default=5, ge=0)


class LoggerConfig(BaseModel):
    """
    Install-time configuration of the process-wide logger.

    `external_sink` replaces stdout as the console sink. `colorize` left as
    None means: decorate stdout only when it is a terminal, never decorate an
    external sink. `clock` is the wall-clock provider used to stamp records.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    threshold: LevelFilter = LevelFilter.INFO
    fixed_width: int = Field(default=16, ge=0)
    file_path: Optional[Path] = None
    external_sink: Optional[Callable[[str], None]] = None
    colorize: Optional[bool] = None
    timestamps: bool = True
    clock: Optional[Callable[[], datetime]] = None

    @field_validator("threshold", mode="before")
    @classmethod
    def _parse_threshold(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LevelFilter.parse(value)
        if isinstance(value, Level):
            return LevelFilter.from_level(value)
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "LoggerConfig":
        """
        Builds a configuration from GOOLOG_* environment variables.
        Keyword overrides take precedence over the environment.
        """
        values: dict[str, Any] = {}
        if level := os.getenv("GOOLOG_LEVEL"):
            values["threshold"] = level
        if width := os.getenv("GOOLOG_TARGET_WIDTH"):
            values["fixed_width"] = width
        if file_path := os.getenv("GOOLOG_FILE"):
            values["file_path"] = file_path
        if color := os.getenv("GOOLOG_COLOR"):
            values["colorize"] = color
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
