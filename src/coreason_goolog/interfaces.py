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
from typing import Protocol


class Sink(Protocol):
    """
    Protocol for an endpoint that accepts rendered log lines.
    """

    def write_line(self, line: str) -> None:
        """
        Writes one line. The sink appends its own line terminator.
        """
        ...

    def isatty(self) -> bool:
        """
        Whether the sink ends up on an interactive terminal.
        """
        ...


class Clock(Protocol):
    """
    Wall-clock provider used to stamp accepted records.
    """

    def __call__(self) -> datetime: ...
