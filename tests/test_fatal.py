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
import subprocess
import sys
import textwrap
from pathlib import Path
from unittest.mock import MagicMock, patch

from coreason_goolog.fatal import FATAL_SENTINEL, get_on_fatal, run_on_fatal, set_on_fatal

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _run_script(script: str) -> "subprocess.CompletedProcess[str]":
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(script)],
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
    )


def test_sentinel_value() -> None:
    assert FATAL_SENTINEL == "$goolog:fatal="


def test_default_callback_exits_with_status_one() -> None:
    with patch("coreason_goolog.fatal.os._exit") as mock_exit:
        run_on_fatal()
    mock_exit.assert_called_once_with(1)


def test_default_callback_flushes_standard_streams() -> None:
    stdout = MagicMock()
    stderr = MagicMock()
    with patch.object(sys, "stdout", stdout), patch.object(sys, "stderr", stderr):
        with patch("coreason_goolog.fatal.os._exit") as mock_exit:
            run_on_fatal()

    stdout.flush.assert_called_once_with()
    stderr.flush.assert_called_once_with()
    mock_exit.assert_called_once_with(1)


def test_default_callback_without_standard_streams() -> None:
    with patch.object(sys, "stdout", None), patch.object(sys, "stderr", None):
        with patch("coreason_goolog.fatal.os._exit") as mock_exit:
            run_on_fatal()
    mock_exit.assert_called_once_with(1)


def test_set_on_fatal_replaces_callback() -> None:
    callback = MagicMock()
    set_on_fatal(callback)

    assert get_on_fatal() is callback
    run_on_fatal()
    callback.assert_called_once_with()


def test_set_on_fatal_none_disables_callback() -> None:
    set_on_fatal(None)
    assert get_on_fatal() is None
    run_on_fatal()


def test_callback_may_replace_itself() -> None:
    second = MagicMock()

    def first() -> None:
        set_on_fatal(second)

    set_on_fatal(first)
    run_on_fatal()
    run_on_fatal()

    second.assert_called_once_with()


def test_fatal_in_main_thread_ends_process() -> None:
    result = _run_script(
        """
        from coreason_goolog import fatal, install

        install(external_sink=print, timestamps=False)
        try:
            fatal("Main", "disk full")
        except BaseException:
            print("caught")
        print("still running")
        """
    )

    assert result.returncode == 1, result.stderr
    assert result.stdout == "Main             | FATAL | disk full\n"


def test_fatal_in_worker_thread_ends_process() -> None:
    result = _run_script(
        """
        import threading

        from coreason_goolog import fatal, install

        install(external_sink=print, timestamps=False)
        worker = threading.Thread(target=fatal, args=("Worker", "disk full"))
        worker.start()
        worker.join()
        print("still running")
        """
    )

    assert result.returncode == 1, result.stderr
    assert result.stdout == "Worker           | FATAL | disk full\n"


def test_fatal_without_installed_logger_ends_process() -> None:
    result = _run_script(
        """
        from coreason_goolog import fatal

        fatal("Main", "no logger yet")
        print("still running")
        """
    )

    assert result.returncode == 1
    assert "still running" not in result.stdout
    assert "no logger yet" in result.stderr
