# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

from pathlib import Path
from typing import Union


class GoologError(Exception):
    """Base class for installation errors."""


class AlreadyInstalledError(GoologError):
    """A logger has already been installed for this process."""

    def __init__(self, message: str = "A goolog logger has already been installed.") -> None:
        super().__init__(message)


class LogFileError(GoologError):
    """
    The log file directory could not be created or the file could not be opened.
    """

    def __init__(self, path: Union[str, Path], cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to open log file {self.path}: {cause}")
