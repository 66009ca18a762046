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
from typing import NamedTuple, Optional, Sequence

from coreason_goolog.interfaces import Clock, Sink
from coreason_goolog.render import LineFormatter
from coreason_goolog.schemas import FormatterPolicy, Level, LevelFilter, Record


class Pipe(NamedTuple):
    policy: FormatterPolicy
    sink: Sink


class Dispatcher:
    """
    Filters records by level and fans each accepted record out to its pipes.

    Every pipe pairs a sink with the policy used to render lines for it. Pipes
    are visited in the order given. The Dispatcher holds no mutable state.
    """

    def __init__(
        self,
        threshold: LevelFilter = LevelFilter.INFO,
        pipes: Sequence[Pipe] = (),
        fixed_width: int = 16,
        clock: Optional[Clock] = None,
    ):
        self._threshold = threshold
        self._fixed_width = fixed_width
        self._clock: Clock = clock or datetime.now
        self._pipes = tuple(pipes)
        self._formatters = tuple(LineFormatter(pipe.policy, fixed_width) for pipe in self._pipes)

    @property
    def threshold(self) -> LevelFilter:
        return self._threshold

    @property
    def fixed_width(self) -> int:
        return self._fixed_width

    @property
    def pipes(self) -> tuple[Pipe, ...]:
        return self._pipes

    def enabled(self, level: Level) -> bool:
        return self._threshold.accepts(level)

    def log(self, record: Record) -> None:
        """
        Formats and writes an accepted record to every sink.

        A failing sink never stops the remaining sinks and never raises.
        """
        if not self.enabled(record.level):
            return

        stamped = record.model_copy(update={"timestamp": self._clock()})
        for formatter, pipe in zip(self._formatters, self._pipes):
            try:
                pipe.sink.write_line(formatter.format(stamped))
            except Exception:
                # Emission is best-effort; logging must not raise or log about itself.
                continue

    def flush(self) -> None:
        """Nothing is buffered."""
