# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

"""
coreason-goolog
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .dispatcher import Dispatcher, Pipe
from .errors import AlreadyInstalledError, GoologError, LogFileError
from .fatal import FATAL_SENTINEL, set_on_fatal
from .helpers import TargetLogger, debug, error, fatal, info, set_target, trace, warn
from .installer import get_dispatcher, init_logger, install, is_active
from .render import LineFormatter, render_target
from .schemas import FormatterPolicy, Level, LevelFilter, LoggerConfig, Record
from .sinks import ExternalSink, FileSink, StdoutSink

__all__ = [
    "Level",
    "LevelFilter",
    "Record",
    "FormatterPolicy",
    "LoggerConfig",
    "LineFormatter",
    "render_target",
    "Dispatcher",
    "Pipe",
    "StdoutSink",
    "FileSink",
    "ExternalSink",
    "install",
    "init_logger",
    "is_active",
    "get_dispatcher",
    "set_on_fatal",
    "FATAL_SENTINEL",
    "set_target",
    "TargetLogger",
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "fatal",
    "GoologError",
    "AlreadyInstalledError",
    "LogFileError",
]
