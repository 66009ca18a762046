# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

import sys
import threading
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from coreason_goolog.errors import LogFileError


class StdoutSink:
    """
    Writes lines to standard output.

    Without an explicit stream, `sys.stdout` is looked up on every write so
    that redirections made after installation are honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()

    def isatty(self) -> bool:
        try:
            return self.stream.isatty()
        except (AttributeError, ValueError):
            return False


class FileSink:
    """
    Appends lines to a log file.

    The parent directory is created on construction and the file stays open
    for the lifetime of the process.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, "a", encoding="utf-8", newline="")
        except OSError as e:
            raise LogFileError(self.path, e) from e

    def write_line(self, line: str) -> None:
        with self._lock:
            self._file.write(line + "\n")
            self._file.flush()

    def isatty(self) -> bool:
        return False


class ExternalSink:
    """
    Forwards lines to an injected callback, for hosts without a usable stdout.
    """

    def __init__(self, callback: Callable[[str], None]):
        self._callback = callback

    def write_line(self, line: str) -> None:
        self._callback(line)

    def isatty(self) -> bool:
        return False
