from ppctasks.perf import Perf, PerfAttr, PerfResults
from ppctasks.task import Task, TaskData


class SumTask(Task):
    def __init__(self, task_data):
        super().__init__(task_data)
        self.run_calls = 0

    def validation(self):
        return self.task_data.outputs_count[0] == 1

    def pre_processing(self):
        self._input = self.task_data.inputs[0]
        self._output = self.task_data.outputs[0]
        self._output[0] = 0

    def run(self):
        self.run_calls += 1
        for value in self._input:
            self._output[0] += value

    def post_processing(self):
        pass


def make_task(size):
    data = TaskData()
    data.add_input([1] * size)
    data.add_output([0])
    return SumTask(data), data


def test_perf_pipeline():
    task, data = make_task(2000)
    results = Perf(task).pipeline_run(PerfAttr(num_running=10))
    assert 0.0 <= results.time_sec <= 10.0
    assert data.outputs[0][0] == 2000
    assert task.run_calls == 10
    assert len(task.completed_stages) == 40


def test_perf_task_run():
    task, data = make_task(2000)
    results = Perf(task).task_run(PerfAttr(num_running=10))
    assert 0.0 <= results.time_sec <= 10.0
    assert data.outputs[0][0] == 20000
    assert task.run_calls == 10
    assert task.completed_stages == ("validation", "pre_processing", "run", "post_processing")


def test_zero_runs():
    task, data = make_task(5)
    results = Perf(task).pipeline_run(PerfAttr(num_running=0))
    assert task.run_calls == 0
    assert data.outputs[0][0] == 0
    assert results.time_sec >= 0.0


def test_set_task_switches_target():
    first, _ = make_task(3)
    second, second_data = make_task(4)
    perf = Perf(first)
    perf.set_task(second)
    perf.pipeline_run(PerfAttr(num_running=1))
    assert first.run_calls == 0
    assert second.run_calls == 1
    assert second_data.outputs[0][0] == 4


def test_result_defaults():
    assert PerfResults().time_sec == 0.0
    assert PerfAttr().num_running == 1