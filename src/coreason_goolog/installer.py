# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

import threading
from pathlib import Path
from typing import Any, Callable, ClassVar, Optional, Union

from coreason_goolog.dispatcher import Dispatcher, Pipe
from coreason_goolog.errors import AlreadyInstalledError
from coreason_goolog.interfaces import Sink
from coreason_goolog.schemas import FormatterPolicy, Level, LevelFilter, LoggerConfig
from coreason_goolog.sinks import ExternalSink, FileSink, StdoutSink
from coreason_goolog.utils.logger import register


class GlobalSlot:
    """
    Process-wide holder of the installed Dispatcher.

    Written at most once, under the install lock. The "active" latch is set
    only after the Dispatcher is registered with loguru.
    """

    _instance: ClassVar[Optional[Dispatcher]] = None
    _lock = threading.Lock()
    _active = threading.Event()

    @classmethod
    def install(cls, config: LoggerConfig) -> Dispatcher:
        with cls._lock:
            if cls._instance is not None:
                raise AlreadyInstalledError()

            dispatcher = build_dispatcher(config)
            cls._instance = dispatcher
            try:
                register(dispatcher)
            except Exception as e:
                cls._instance = None
                raise AlreadyInstalledError(f"Failed to register the goolog logger with loguru: {e}") from e

            cls._active.set()
            return dispatcher

    @classmethod
    def get_instance(cls) -> Optional[Dispatcher]:
        return cls._instance

    @classmethod
    def is_active(cls) -> bool:
        return cls._active.is_set()


def build_dispatcher(config: LoggerConfig) -> Dispatcher:
    """
    Builds the console pipe, followed by the file pipe when a log file is set.
    """
    console: Sink
    if config.external_sink is not None:
        console = ExternalSink(config.external_sink)
    else:
        console = StdoutSink()

    colorize = config.colorize if config.colorize is not None else console.isatty()
    pipes = [Pipe(FormatterPolicy(include_timestamp=config.timestamps, colorize=colorize), console)]

    if config.file_path is not None:
        file_policy = FormatterPolicy(include_timestamp=config.timestamps, colorize=False)
        pipes.append(Pipe(file_policy, FileSink(config.file_path)))

    return Dispatcher(
        threshold=config.threshold,
        pipes=pipes,
        fixed_width=config.fixed_width,
        clock=config.clock,
    )


# --- Public API Functions ---


def install(config: Optional[LoggerConfig] = None, **overrides: Any) -> Dispatcher:
    """
    Installs the process-wide goolog logger.

    Raises AlreadyInstalledError if a logger is already installed and
    LogFileError if the log file cannot be opened.
    """
    if config is None:
        config = LoggerConfig(**overrides)
    elif overrides:
        config = LoggerConfig(**{**dict(config), **overrides})
    return GlobalSlot.install(config)


def init_logger(
    log_level: Optional[Level] = None,
    target_length: Optional[int] = None,
    log_file: Optional[Union[str, Path]] = None,
    println: Optional[Callable[[str], None]] = None,
) -> Dispatcher:
    """
    Installs the logger from the most common options. Unset options use
    their defaults: INFO, a target width of 16, no log file and stdout.
    """
    values: dict[str, Any] = {"file_path": log_file, "external_sink": println}
    if log_level is not None:
        values["threshold"] = log_level
    if target_length is not None:
        values["fixed_width"] = target_length
    return install(LoggerConfig(**values))


def is_active() -> bool:
    """Whether a goolog logger was installed successfully."""
    return GlobalSlot.is_active()


def get_dispatcher() -> Optional[Dispatcher]:
    return GlobalSlot.get_instance()
