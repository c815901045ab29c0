"""Reference tasks that reduce vectors and matrices to a few values."""

from __future__ import annotations

from operator import mul
from typing import Any

from ppctasks.task import Task, TaskData


class _VectorTask(Task):
    """Shared input handling for the reference tasks."""

    def _read_input(self, index: int = 0) -> list[Any]:
        data = self.task_data
        return list(data.inputs[index][: data.inputs_count[index]])


class AverageOfVectorElements(_VectorTask):
    """Arithmetic mean of the first input, written to ``outputs[0][0]``."""

    def __init__(self, task_data: TaskData) -> None:
        super().__init__(task_data)
        self._input: list[Any] = []
        self.average = 0.0

    def validation(self) -> bool:
        return self.task_data.outputs_count[0] == 1

    def pre_processing(self) -> None:
        self._input = self._read_input()
        self.average = 0.0

    def run(self) -> None:
        total = sum(self._input, 0.0)
        self.average = total / self.task_data.inputs_count[0]

    def post_processing(self) -> None:
        self.task_data.outputs[0][0] = self.average


class MaxOfVectorElements(_VectorTask):
    """Largest element and the index of its first occurrence."""

    def __init__(self, task_data: TaskData) -> None:
        super().__init__(task_data)
        self._input: list[Any] = []
        self.max: Any = 0
        self.max_index = 0

    def validation(self) -> bool:
        counts = self.task_data.outputs_count
        return counts[0] == 1 and counts[1] == 1

    def pre_processing(self) -> None:
        self._input = self._read_input()
        self.max = 0
        self.max_index = 0

    def run(self) -> None:
        values = self._input
        self.max_index = max(range(len(values)), key=values.__getitem__)
        self.max = values[self.max_index]

    def post_processing(self) -> None:
        outputs = self.task_data.outputs
        outputs[0][0] = self.max
        outputs[1][0] = self.max_index


class MinOfVectorElements(_VectorTask):
    """Smallest element and the index of its first occurrence."""

    def __init__(self, task_data: TaskData) -> None:
        super().__init__(task_data)
        self._input: list[Any] = []
        self.min: Any = 0
        self.min_index = 0

    def validation(self) -> bool:
        counts = self.task_data.outputs_count
        return counts[0] == 1 and counts[1] == 1

    def pre_processing(self) -> None:
        self._input = self._read_input()
        self.min = 0
        self.min_index = 0

    def run(self) -> None:
        values = self._input
        self.min_index = min(range(len(values)), key=values.__getitem__)
        self.min = values[self.min_index]

    def post_processing(self) -> None:
        outputs = self.task_data.outputs
        outputs[0][0] = self.min
        outputs[1][0] = self.min_index


class SumOfVectorElements(_VectorTask):
    """Sum of the first input, written to ``outputs[0][0]``."""

    def __init__(self, task_data: TaskData) -> None:
        super().__init__(task_data)
        self._input: list[Any] = []
        self.sum: Any = 0

    def validation(self) -> bool:
        return self.task_data.outputs_count[0] == 1

    def pre_processing(self) -> None:
        self._input = self._read_input()
        self.sum = 0

    def run(self) -> None:
        self.sum = sum(self._input)

    def post_processing(self) -> None:
        self.task_data.outputs[0][0] = self.sum


class SumValuesByRowsMatrix(_VectorTask):
    """Row sums of a row-major matrix.

    ``inputs[0]`` holds the elements, ``inputs[1]`` holds ``(rows, cols)``;
    one sum per row is written to ``outputs[0]``.
    """

    def __init__(self, task_data: TaskData) -> None:
        super().__init__(task_data)
        self._input: list[Any] = []
        self.rows = 0
        self.cols = 0
        self.sums: list[Any] = []

    def validation(self) -> bool:
        data = self.task_data
        return data.inputs_count[1] == 2 and data.outputs_count[0] == data.inputs[1][0]

    def pre_processing(self) -> None:
        self._input = self._read_input()
        shape = self.task_data.inputs[1]
        self.rows, self.cols = int(shape[0]), int(shape[1])
        self.sums = [0.0] * self.rows

    def run(self) -> None:
        cols = self.cols
        self.sums = [
            sum(self._input[cols * row : cols * (row + 1)], 0.0)
            for row in range(self.rows)
        ]

    def post_processing(self) -> None:
        output = self.task_data.outputs[0]
        for row, value in enumerate(self.sums):
            output[row] = value


class VectorDotProduct(_VectorTask):
    """Dot product of the first two inputs, written to ``outputs[0][0]``."""

    def __init__(self, task_data: TaskData) -> None:
        super().__init__(task_data)
        self._inputs: tuple[list[Any], list[Any]] = ([], [])
        self.dot_product: Any = 0

    def validation(self) -> bool:
        data = self.task_data
        return data.outputs_count[0] == 1 and data.inputs_count[0] == data.inputs_count[1]

    def pre_processing(self) -> None:
        self._inputs = (self._read_input(0), self._read_input(1))
        self.dot_product = 0

    def run(self) -> None:
        left, right = self._inputs
        self.dot_product = sum(map(mul, left, right))

    def post_processing(self) -> None:
        self.task_data.outputs[0][0] = self.dot_product