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
from typing import Callable, Generator, List

import pytest
from loguru import logger

from coreason_goolog.fatal import get_on_fatal, set_on_fatal
from coreason_goolog.installer import GlobalSlot

# --- Mocks ---


class ListSink:
    """
    Sink that keeps every written line in memory.
    """

    def __init__(self, tty: bool = False):
        self.lines: List[str] = []
        self.tty = tty

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def isatty(self) -> bool:
        return self.tty


class BrokenSink:
    def write_line(self, line: str) -> None:
        raise OSError("Disk full")

    def isatty(self) -> bool:
        return False


# --- Fixtures ---


@pytest.fixture(autouse=True)
def reset_goolog() -> Generator[None, None, None]:
    """
    Every test starts without an installed logger, without loguru handlers
    and the fatal callback is restored afterwards.
    """
    on_fatal = get_on_fatal()
    _reset()
    yield
    _reset()
    set_on_fatal(on_fatal)


def _reset() -> None:
    GlobalSlot._instance = None
    GlobalSlot._active.clear()
    logger.remove()


@pytest.fixture
def list_sink() -> ListSink:
    return ListSink()


@pytest.fixture
def broken_sink() -> BrokenSink:
    return BrokenSink()


@pytest.fixture
def wall_time() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def fixed_clock(wall_time: datetime) -> Callable[[], datetime]:
    return lambda: wall_time
