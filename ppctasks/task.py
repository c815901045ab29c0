"""Task pipeline base class with enforcement of the stage order."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, MutableSequence, Sequence

STAGES: tuple[str, ...] = ("validation", "pre_processing", "run", "post_processing")


class OrderError(ValueError):
    """Raised when the stages of a task are called out of order."""

    def __init__(self, position: int, actual: str, expected: str) -> None:
        self.position = position
        self.actual = actual
        self.expected = expected
        super().__init__(
            "ORDER OF FUNCTIONS IS NOT RIGHT:\n"
            f"Serial number: {position}\n"
            f"Yours function: {actual}\n"
            f"Expected function: {expected}"
        )


@dataclass
class TaskData:
    """Input sequences and output buffers of a task, with their element counts."""

    inputs: list[Sequence[Any]] = field(default_factory=list)
    inputs_count: list[int] = field(default_factory=list)
    outputs: list[MutableSequence[Any]] = field(default_factory=list)
    outputs_count: list[int] = field(default_factory=list)

    def add_input(self, data: Sequence[Any]) -> None:
        """Append an input sequence and record its length."""
        self.inputs.append(data)
        self.inputs_count.append(len(data))

    def add_output(self, buffer: MutableSequence[Any]) -> None:
        """Append a mutable output buffer and record its length."""
        self.outputs.append(buffer)
        self.outputs_count.append(len(buffer))


def _ordered(name: str, method: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(method)
    def wrapper(self: "Task", *args: Any, **kwargs: Any) -> Any:
        if self._active_stage is not None:
            # Nested call, e.g. through super(): already checked.
            return method(self, *args, **kwargs)
        self._record_stage(name)
        self._active_stage = name
        try:
            return method(self, *args, **kwargs)
        finally:
            self._active_stage = None

    return wrapper


class Task(ABC):
    """A task run as validation -> pre_processing -> run -> post_processing.

    Every stage a subclass defines is checked against that order; a stage
    called out of turn raises OrderError. Consecutive calls of ``run`` are
    allowed.
    """

    _active_stage: str | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in STAGES:
            method = cls.__dict__.get(name)
            if method is None or getattr(method, "__isabstractmethod__", False):
                continue
            setattr(cls, name, _ordered(name, method))

    def __init__(self, task_data: TaskData) -> None:
        self._functions_order: list[str] = []
        self.set_data(task_data)

    def set_data(self, task_data: TaskData) -> None:
        """Replace the task data and start the stage order afresh."""
        self._functions_order = []
        self._task_data = task_data

    @property
    def task_data(self) -> TaskData:
        return self._task_data

    @property
    def completed_stages(self) -> tuple[str, ...]:
        """Stages recorded so far, in call order."""
        return tuple(self._functions_order)

    def _record_stage(self, name: str) -> None:
        order = self._functions_order
        if order and order[-1] == name == "run":
            return
        order.append(name)
        for position, actual in enumerate(order):
            expected = STAGES[position % len(STAGES)]
            if actual != expected:
                raise OrderError(position + 1, actual, expected)

    @abstractmethod
    def validation(self) -> bool:
        """Check the task data; return whether it suits the task."""

    @abstractmethod
    def pre_processing(self) -> None:
        """Read the inputs and prepare the state."""

    @abstractmethod
    def run(self) -> None:
        """Do the work of the task."""

    @abstractmethod
    def post_processing(self) -> None:
        """Write the results into the output buffers."""