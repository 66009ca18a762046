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
import sys
import threading
from typing import Callable, Optional

FATAL_SENTINEL = "$goolog:fatal="

OnFatal = Callable[[], None]


def _exit_process() -> None:
    """
    Ends the process with status 1 from any thread.

    Unlike sys.exit, this also ends the process when called from a worker
    thread. Standard streams are flushed first.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, OSError, ValueError):
            continue
    os._exit(1)


_on_fatal_lock = threading.Lock()
_on_fatal: Optional[OnFatal] = _exit_process


def set_on_fatal(on_fatal: Optional[OnFatal]) -> None:
    """
    Sets the callback run after every fatal log call.

    The default exits the process with status 1. Passing None disables the
    callback so that fatal only logs.
    """
    global _on_fatal
    with _on_fatal_lock:
        _on_fatal = on_fatal


def get_on_fatal() -> Optional[OnFatal]:
    with _on_fatal_lock:
        return _on_fatal


def run_on_fatal() -> None:
    # Called outside the lock; the callback may call set_on_fatal itself.
    on_fatal = get_on_fatal()
    if on_fatal is not None:
        on_fatal()
