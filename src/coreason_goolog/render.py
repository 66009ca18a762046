# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

from datetime import datetime

from coreason_goolog.fatal import FATAL_SENTINEL
from coreason_goolog.schemas import FormatterPolicy, Level, Record

SEPARATOR = " | "

ANSI_RESET = "\x1b[0m"
ANSI_DIM_BOLD = "\x1b[2m\x1b[1m"

LEVEL_COLORS = {
    "TRACE": "\x1b[37m",
    "DEBUG": "\x1b[34m",
    "INFO": "\x1b[32m",
    "WARN": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "FATAL": "\x1b[31m",
}

FATAL_LEVEL_NAME = "FATAL"


def render_target(target: str, fixed_width: int) -> str:
    """
    Renders a target name to exactly `fixed_width` characters.

    Longer names are truncated, shorter ones right-padded with spaces. A width
    of 0 returns the target unchanged. Characters are counted as code points,
    so wide or combining characters may not line up in a terminal.
    """
    if fixed_width == 0:
        return target
    return target[:fixed_width].ljust(fixed_width)


class LineFormatter:
    """
    Builds a single log line from a Record according to a FormatterPolicy:

        [DD.MM.YYYY | HH:MM:SS | ]TARGET | LEVEL | message

    No line terminator is added; that is the sink's job.

    The level field is padded to `level_width` visible characters (5), with
    color escapes outside that count; a 14-wide field only matches 5 once the
    escapes around a colored ERROR are counted, and FATAL fits in 5 anyway.
    """

    def __init__(self, policy: FormatterPolicy, fixed_width: int = 16):
        self.policy = policy
        self.fixed_width = fixed_width

    def format(self, record: Record) -> str:
        level_name = record.level.name
        message = record.message

        if self.policy.recognize_fatal_sentinel and is_fatal_message(record):
            level_name = FATAL_LEVEL_NAME
            message = message[len(FATAL_SENTINEL) :]

        parts = []
        if self.policy.include_timestamp and record.timestamp is not None:
            parts.append(self._format_timestamp(record.timestamp))
        parts.append(render_target(record.target, self.fixed_width))
        parts.append(self._format_level(level_name))
        parts.append(message)
        return SEPARATOR.join(parts)

    def _format_timestamp(self, timestamp: datetime) -> str:
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone()
        date = timestamp.strftime("%d.%m.%Y")
        time = timestamp.strftime("%H:%M:%S")
        if self.policy.colorize:
            date = f"{ANSI_DIM_BOLD}{date}{ANSI_RESET}"
            time = f"{ANSI_DIM_BOLD}{time}{ANSI_RESET}"
        return f"{date}{SEPARATOR}{time}"

    def _format_level(self, level_name: str) -> str:
        width = self.policy.level_width
        visible = level_name[:width]
        padding = " " * (width - len(visible))
        if self.policy.colorize:
            # Padding goes after the reset.
            return f"{LEVEL_COLORS[level_name]}{visible}{ANSI_RESET}{padding}"
        return f"{visible}{padding}"


def is_fatal_message(record: Record) -> bool:
    return record.level is Level.ERROR and record.message.startswith(FATAL_SENTINEL)
