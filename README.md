# ppctasks

A small library of computational tasks built around a fixed four-stage
pipeline, plus reference reductions and worked examples of splitting work
between several workers. It needs nothing beyond the standard library.

## The task pipeline

Every task derived from `ppctasks.task.Task` goes through the same stages,
in this order:

1. `validation()` – check that the inputs and outputs have the right shape
2. `pre_processing()` – copy the inputs into the task
3. `run()` – do the work (it may be called again straight away)
4. `post_processing()` – write the results to the output buffers

Calling the stages in any other order raises `OrderError`, a subclass of
`ValueError`. Calling `set_data()` with a new `TaskData` starts the order
check afresh, and `completed_stages` shows the stages recorded so far.

Inputs and outputs are registered on a `TaskData` with `add_input()` and
`add_output()`, which also record their lengths in `inputs_count` and
`outputs_count`. Output buffers are filled in place by `post_processing()`.

```python
from ppctasks.task import TaskData
from ppctasks.aggregates import SumOfVectorElements

data = TaskData()
data.add_input([1, 2, 3, 4])
result = [0]
data.add_output(result)

task = SumOfVectorElements(data)
assert task.validation()
task.pre_processing()
task.run()
task.post_processing()
print(result[0])  # 10
```

## Reference tasks

`ppctasks.aggregates`:

- `AverageOfVectorElements` – mean of the input
- `MaxOfVectorElements`, `MinOfVectorElements` – the value and the index of
  its first occurrence, written to two output buffers
- `SumOfVectorElements` – sum of the input
- `SumValuesByRowsMatrix` – one sum per row; the second input holds
  `(rows, cols)`
- `VectorDotProduct` – dot product of two inputs of equal length

## Timing

`ppctasks.perf.Perf` runs a task repeatedly and measures it.
`pipeline_run(attr)` times the whole pipeline; `task_run(attr)` times only
`run()`, with the other stages done once around it. The number of
repetitions comes from `PerfAttr.num_running`, and both methods return a
`PerfResults` whose `time_sec` holds the elapsed time in seconds.

## Worked examples

- `ppctasks.reductions` – sum, difference, product and maximum of integer
  vectors: `sequential_operations`, `parallel_operations` (chunks in
  threads, same result as the sequential form), `threaded_operations` and
  `distributed_operations` (equal blocks per worker; any remainder is left
  out). `random_vector` makes test data in `[0, 100)`.
- `ppctasks.integration` – trapezoidal integration split across workers
  (`parallel_integral`, built on `trapezium` and `get_area`), with sample
  integrands `sin_f`, `sin2_f`, `hardfn_f`, `hardfn2_f` and `sin_cos_f`.
- `ppctasks.vectors` – vector sum (`sum_seq`, `sum_par`), largest
  difference of neighbouring elements (`seq_find_most_different`,
  `par_find_most_different`) and minimum element (`get_min_element`), with
  random data from `random_number`, `create_random_array` and
  `get_random_vector`.
- `ppctasks.matrices` – strip-partitioned multiplication where row `j` of
  the second matrix serves as column `j` (`parallel_matmul`, checked
  against `sequential_matmul`; `random_matrix` makes test data).
- `ppctasks.topology` – forwarding a value along a line of workers:
  `route` lists the ranks visited, `send_data_linear` passes the value
  through them concurrently and returns what each rank received;
  `get_next`, `get_prev` and `in_route` are the helpers behind them.

Workers are threads in one process. Functions taking `workers` default to
the number of CPUs where the signature allows `None`.

## What it does not do

There is no command-line program; the package is used as a library only.
Work is not spread across processes or machines.

## Running the tests

```
pip install ppctasks[test]
pytest
```