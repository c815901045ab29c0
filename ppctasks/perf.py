"""Timing of task pipelines."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from ppctasks.task import Task


@dataclass
class PerfAttr:
    """How many times the measured code is run."""

    num_running: int = 1


@dataclass
class PerfResults:
    """Measured time in seconds."""

    time_sec: float = 0.0


class Perf:
    """Measures the time a task takes."""

    def __init__(self, task: Task) -> None:
        self.set_task(task)

    def set_task(self, task: Task) -> None:
        self.task = task

    def pipeline_run(self, attr: PerfAttr) -> PerfResults:
        """Time the whole pipeline, repeated ``attr.num_running`` times."""

        def pipeline() -> None:
            self.task.validation()
            self.task.pre_processing()
            self.task.run()
            self.task.post_processing()

        return self._common_run(attr, pipeline)

    def task_run(self, attr: PerfAttr) -> PerfResults:
        """Time only ``run``, repeated ``attr.num_running`` times."""
        self.task.validation()
        self.task.pre_processing()
        results = self._common_run(attr, self.task.run)
        self.task.post_processing()
        return results

    @staticmethod
    def _common_run(attr: PerfAttr, pipeline: Callable[[], object]) -> PerfResults:
        begin = time.perf_counter_ns()
        for _ in range(attr.num_running):
            pipeline()
        end = time.perf_counter_ns()
        return PerfResults(time_sec=(end - begin) * 1e-9)