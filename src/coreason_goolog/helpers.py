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
Caller-side logging helpers.

Every helper takes the target (the logical sender) first, followed by a
`str.format` template and its arguments::

    from coreason_goolog import info, warn

    info("Main", "Hello, world!")
    warn("Main", "Accept the EULA to use this server. Error: {}", error)

To avoid repeating the target, bind it once per module::

    from coreason_goolog import set_target

    GOOLOG_TARGET = set_target("Main")
    GOOLOG_TARGET.info("The target of this message is Main.")
"""

from typing import Any

from coreason_goolog.fatal import FATAL_SENTINEL, run_on_fatal
from coreason_goolog.installer import is_active
from coreason_goolog.schemas import Level
from coreason_goolog.utils.logger import emit


def _materialize(template: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    if args or kwargs:
        return template.format(*args, **kwargs)
    return template


def trace(target: str, template: str, *args: Any, **kwargs: Any) -> None:
    """Steps leading up to errors and warnings."""
    emit(target, Level.TRACE, _materialize(template, args, kwargs))


def debug(target: str, template: str, *args: Any, **kwargs: Any) -> None:
    """
    Debugging information. Dropped entirely when Python runs with -O.
    """
    if __debug__:
        emit(target, Level.DEBUG, _materialize(template, args, kwargs))


def info(target: str, template: str, *args: Any, **kwargs: Any) -> None:
    """Information worth logging under normal conditions, such as services starting."""
    emit(target, Level.INFO, _materialize(template, args, kwargs))


def warn(target: str, template: str, *args: Any, **kwargs: Any) -> None:
    """A potential problem that may or may not need investigation."""
    emit(target, Level.WARN, _materialize(template, args, kwargs))


def error(target: str, template: str, *args: Any, **kwargs: Any) -> None:
    """
    A problem that needs investigating but not immediate attention.

    A message starting with `$goolog:fatal=` is rendered as a fatal line by the
    goolog logger; such a message cannot be logged as a plain error.
    """
    emit(target, Level.ERROR, _materialize(template, args, kwargs))


def fatal(target: str, template: str, *args: Any, **kwargs: Any) -> None:
    """
    Logs an unrecoverable error, then runs the fatal callback.

    By default the callback exits the process with status 1, see
    `set_on_fatal`. Without an installed goolog logger the message is logged
    as a plain error.
    """
    message = _materialize(template, args, kwargs)
    if is_active():
        message = FATAL_SENTINEL + message
    emit(target, Level.ERROR, message)
    run_on_fatal()


class TargetLogger:
    """
    The helpers bound to a fixed target.
    """

    def __init__(self, target: str):
        self.target = target

    def trace(self, template: str, *args: Any, **kwargs: Any) -> None:
        trace(self.target, template, *args, **kwargs)

    def debug(self, template: str, *args: Any, **kwargs: Any) -> None:
        debug(self.target, template, *args, **kwargs)

    def info(self, template: str, *args: Any, **kwargs: Any) -> None:
        info(self.target, template, *args, **kwargs)

    def warn(self, template: str, *args: Any, **kwargs: Any) -> None:
        warn(self.target, template, *args, **kwargs)

    def error(self, template: str, *args: Any, **kwargs: Any) -> None:
        error(self.target, template, *args, **kwargs)

    def fatal(self, template: str, *args: Any, **kwargs: Any) -> None:
        fatal(self.target, template, *args, **kwargs)

    def __repr__(self) -> str:
        return f"TargetLogger({self.target!r})"


def set_target(target: str) -> TargetLogger:
    """
    Returns the helpers bound to `target`, meant to be kept as a module constant.
    """
    return TargetLogger(target)
