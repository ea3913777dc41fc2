"""Handler chain: records and track signals flowing through ordered stages."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence

EMPTY: Sequence[logging.LogRecord] = ()


class RecordHandler(ABC):
    """One stage of a handler chain.

    Each call returns the records the stage passes on to the next stage,
    which may be none, the input itself, or records the stage produced.
    """

    @abstractmethod
    def handle(self, record: logging.LogRecord) -> Sequence[logging.LogRecord]: ...

    def signal_start_track(self, signal: logging.LogRecord) -> Sequence[logging.LogRecord]:
        return EMPTY

    def signal_end_track(self, new_depth: int, time_of_end: float) -> Sequence[logging.LogRecord]:
        return EMPTY


class HandlerChain(logging.Handler):
    """Feeds stdlib log records through chain stages into a sink handler."""

    def __init__(self, stages: Iterable[RecordHandler], sink: logging.Handler) -> None:
        super().__init__()
        self.stages = list(stages)
        self.sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        for survivor in self._run(self.stages, [record]):
            self.sink.handle(survivor)

    def start_track(self, signal: logging.LogRecord) -> None:
        """Open a track; stages may turn the signal into records."""
        with self.lock:
            self._signal(lambda stage: stage.signal_start_track(signal))

    def end_track(self, new_depth: int, time_of_end: float) -> None:
        with self.lock:
            self._signal(lambda stage: stage.signal_end_track(new_depth, time_of_end))

    def _signal(self, fire: Callable[[RecordHandler], Sequence[logging.LogRecord]]) -> None:
        # Records a stage produces from a signal only visit the stages after it
        for i, stage in enumerate(self.stages):
            for survivor in self._run(self.stages[i + 1 :], fire(stage)):
                self.sink.handle(survivor)

    @staticmethod
    def _run(
        stages: Iterable[RecordHandler], records: Iterable[logging.LogRecord]
    ) -> list[logging.LogRecord]:
        records = list(records)
        for stage in stages:
            records = [out for record in records for out in stage.handle(record)]
        return records
