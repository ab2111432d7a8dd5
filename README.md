# osalgos

Small implementations of classic operating-system algorithms. You can use
them as a library or from the command line. The package needs nothing beyond
the standard library.

## Modules

### `osalgos.scheduling`: CPU scheduling

`Process(pid, arrival_time, burst_time, priority=0)` describes one job. Each
scheduler below takes an iterable of processes and returns a `Schedule`:

- `fcfs(processes)`: first come, first served. Results are listed in the
  order the processes ran.
- `priority_non_preemptive(processes)`: among the processes that have
  arrived, the one with the lowest priority number runs to completion.
- `round_robin(processes, quantum)`: cycles through the arrived processes in
  input order, one quantum at a time.
- `sjf_preemptive(processes)`: shortest remaining time first. It decides
  again after every time unit.

Apart from `fcfs`, the schedulers list results in input order. An empty
process list raises `ValueError`. `round_robin` also raises `ValueError` for
a quantum that is not positive. `round_robin` and `sjf_preemptive` raise
`ValueError` for a burst time that is not positive.

`Schedule.results` is a tuple of `ProcessResult` objects. Each one holds
`completion_time`, `turnaround_time` and `waiting_time`.
`average_waiting_time()` and `average_turnaround_time()` return the means.
`format_table()` renders a tab-separated table followed by the averages.

```python
from osalgos.scheduling import Process, round_robin

schedule = round_robin(
    [Process(pid=1, arrival_time=0, burst_time=5),
     Process(pid=2, arrival_time=1, burst_time=3)],
    quantum=2,
)
print(schedule.format_table())
print(schedule.average_waiting_time())
```

### `osalgos.bankers`: deadlock avoidance

`BankersState(maximum, allocation, available)` holds the maximum demand
matrix, the allocation matrix and the available vector. It allows at most
10 processes and 10 resources, and it raises `ValueError` if the shapes
disagree. It has three methods:

- `need()` returns maximum minus allocation.
- `safe_sequence()` returns the process indices in a safe order. If there is
  no safe order it raises `UnsafeStateError`. The error's `completed`
  attribute lists the processes that could finish.
- `format_matrices()` renders all three matrices and the available vector.

```python
from osalgos.bankers import BankersState, UnsafeStateError

state = BankersState(
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    available=[3, 3, 2],
)
try:
    print(state.safe_sequence())   # [1, 3, 4, 0, 2]
except UnsafeStateError:
    print("unsafe")
```

### `osalgos.matmul`: threaded matrix multiplication

- `multiply(matrix_a, matrix_b, max_workers=4)` computes each cell of the
  product as a separate task in a thread pool. It raises `ValueError` if the
  dimensions do not match.
- `sample_matrices(size)` builds the demo matrices `A[i][j] = i + j` and
  `B[i][j] = i - j`.
- `format_matrix(matrix)` renders a matrix with one row per line.

### `osalgos.studentdb`: fixed-record student file

`Student(roll, name, marks)` is one record. `to_bytes()` and
`Student.from_bytes(data)` convert it to and from a fixed-size binary record
of 60 bytes, little-endian. The name must be shorter than 50 bytes in UTF-8.

`StudentDatabase(path)` keeps the records back to back in one file. It has
these methods:

- `create()` creates the file or empties it.
- `insert(student)` appends a record to a file that already exists.
- `records()` yields every record in file order.
- `search(roll)` returns the first record with that roll number.
- `delete(roll)` removes every record with that roll number and returns the
  count.
- `update(roll, name, marks)` rewrites the first matching record in place.

`search`, `delete` and `update` raise `RecordNotFoundError` if no record
matches.

```python
from osalgos.studentdb import Student, StudentDatabase

db = StudentDatabase("students.dat")
db.create()
db.insert(Student(1, "Alice", 90))
print(db.search(1))
```

### `osalgos.forkdemo`: split work

`array_sum(values)` and `array_product(values)` reduce an array of integers.

## Command line

Each command reads its input from standard input:

```
osalgos-schedule {fcfs,priority,rr,sjf}   # prompts for the processes (and the quantum for rr)
osalgos-bankers                           # menu: input details, display matrices, find safe sequence, exit
osalgos-matmul                            # prompts for a size, multiplies the sample matrices
osalgos-studentdb [PATH]                  # menu-driven record database, default file student.dat
osalgos-forkdemo [--no-fork]              # sum and product of 1..10
```

## What it does not do

`osalgos-forkdemo` does not start a separate operating-system process. The
parent prints the sum. The "child" line with the product is printed from a
second thread, or from the calling thread when you pass `--no-fork`.

## Installation and tests

```
pip install .[test]
pytest
```