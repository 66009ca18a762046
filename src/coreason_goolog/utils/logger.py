# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

from typing import Any

from loguru import logger as _logger

from coreason_goolog.schemas import Level, Record

__all__ = ["logger", "emit", "to_record", "register", "TARGET_KEY"]

# Key under which the caller-side helpers bind the target into loguru's extra dict.
TARGET_KEY = "goolog_target"

logger: Any = _logger


def emit(target: str, level: Level, message: str) -> None:
    """
    Sends an already formatted message through loguru.

    No format arguments are passed, so braces in the message are kept as-is.
    """
    _logger.bind(**{TARGET_KEY: target}).log(level.facade_name, message)


def to_record(loguru_record: dict[str, Any]) -> Record:
    """
    Converts a loguru record into a goolog Record.

    Records logged through loguru directly carry no bound target; they use the
    emitting module name instead.
    """
    target = loguru_record["extra"].get(TARGET_KEY)
    if target is None:
        target = loguru_record.get("name") or ""
    return Record(
        target=str(target),
        level=Level.from_severity(loguru_record["level"].no),
        message=loguru_record["message"],
    )


def register(dispatcher: Any) -> int:
    """
    Makes `dispatcher` the only loguru handler and returns the handler id.
    """

    def accepts(loguru_record: dict[str, Any]) -> bool:
        return bool(dispatcher.enabled(Level.from_severity(loguru_record["level"].no)))

    def sink(message: Any) -> None:
        dispatcher.log(to_record(message.record))

    # Remove every handler, loguru's default stderr one included
    _logger.remove()
    return int(_logger.add(sink, level=0, format="{message}", filter=accepts, colorize=False))
