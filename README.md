# tasksim

`tasksim` simulates a CPU scheduler that runs a set of randomly sized tasks.
No real processes are run. Each time slice is a sleep. It has four policies:

1. **Priority**: runs the ready task with the lowest priority number. When two tasks tie, the earlier one runs.
2. **Round Robin**: cycles through the ready tasks and starts each search just after the task that ran last.
3. **FCFS**: runs the first ready task, in creation order, for all of its remaining time.
4. **MLFQ**: uses three feedback queues. A task that is still ready after a slice moves down one level, and stays on the lowest level once it gets there. A task that was blocked returns to the queue of its current level when it is unblocked.

Every policy except FCFS runs a task for a slice of at most 100 ms. A task that has not finished after its slice blocks with a chance of one in five. A separate unblocker thread gives each blocked task a one-in-three chance to become ready, and does this every 200 ms. The simulator writes every event to standard output and to a log file, with the local time in brackets before it. When every task has finished, it prints a summary with the turnaround time of each task.

## Installing

```
pip install .
```

## Running

```
tasksim [--log-file PATH] [--seed N]
```

- `--log-file PATH` sets where the log goes. The default is `scheduler.log` in the current directory. The file is truncated on each run.
- `--seed N` seeds the random numbers. Task durations, priorities, blocking and unblocking then repeat from run to run.

The program reads two integers from standard input: the scheduler choice (1–4) and the number of tasks. Any choice outside 1–4 selects FCFS. Each task gets a random duration of 200–599 ms and a random priority of 1–3. At most 100 tasks can exist. Any request beyond that logs `Maximum task limit reached`. If the input does not supply two integers, the program prints `expected an integer` to standard error and exits with status 1.

Example session (the times are illustrative):

```
Select scheduler type:
1. Priority
2. Round Robin
3. FCFS
4. MLFQ
 4
Enter number of tasks: 3
[Mon Jan  1 12:00:00 2024] Task 0 created: Duration=312ms, Priority=2
...

=== Task Summary ===
Task 0 | Priority: 2 | Turnaround: 1.00s | Status: Finished
...
```

## Using it as a library

```python
import random
from tasksim.logger import Logger
from tasksim.scheduler import Scheduler, scheduler_type_from_choice

with Logger("scheduler.log") as logger:
    sched = Scheduler(scheduler_type_from_choice(2), logger, random.Random(1))
    sched.add_task(0, 250, 1)
    sched.add_task(1, 300, 2)
    sched.run()
    print(sched.tasks.summary())
```

- `tasksim.logger`
  - `Logger(path="scheduler.log", stream=None, clock=time.time)` writes each message to the file and to the stream. The stream defaults to standard output. Pass `path=None` to write to the stream only.
  - `format_log_line(timestamp, message)` builds the same `[time] message` line.
- `tasksim.task`
  - `TaskState` and `SchedulerType` are enums.
  - `Task` is a dataclass. Its `turnaround()` returns the finish time minus the arrival time, in seconds.
  - `TaskTable` holds the tasks. It has `create()`, `summary()` and `all_finished()`, and supports iteration, `len()` and indexing.
- `tasksim.scheduler`
  - `scheduler_type_from_choice(choice)` maps a menu number to a `SchedulerType`.
  - `Scheduler` takes optional `rng`, `sleep` and `clock` arguments, so a run can be made deterministic. Its methods are:
    - `add_task()` creates a task.
    - `step()` makes one scheduling decision.
    - `unblock_pass()` makes one unblocker pass.
    - `run_scheduler()` and `run_unblocker(interval)` run the two loops.
    - `run()` starts both loops on threads and waits for every task to finish.
    - `enqueue()` and `dequeue()` work on the MLFQ queues directly.
- `tasksim.cli`
  - `main(argv=None)` is the `tasksim` command. It returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```