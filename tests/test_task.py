import pytest

from tasksim.task import MAX_TASKS, Task, TaskState, TaskTable


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def table(logger):
    return TaskTable(logger, clock=lambda: 10.0)


def test_create_sets_fields(table):
    task = table.create(3, 250, 2)
    assert task.id == 3
    assert task.duration_ms == 250
    assert task.remaining_ms == 250
    assert task.priority == 2
    assert task.state is TaskState.READY
    assert task.arrival_time == 10.0
    assert task.queue_level == 0
    assert table[0] is task


def test_create_logs_message(table, logger):
    task = table.create(3, 250, 2)
    assert (task.id, task.duration_ms, task.priority) == (3, 250, 2)
    assert logger.messages == ["Task 3 created: Duration=250ms, Priority=2"]


def test_table_limit(table, logger):
    for i in range(MAX_TASKS):
        assert table.create(i, 200, 1) is not None
    assert table.create(MAX_TASKS, 200, 1) is None
    assert len(table) == MAX_TASKS
    assert logger.messages[-1] == "Maximum task limit reached"


def test_iteration_preserves_order(table):
    for i in (5, 1, 7):
        table.create(i, 300, 1)
    assert [task.id for task in table] == [5, 1, 7]
    assert len(table) == 3


def test_all_finished(table):
    assert table.all_finished()
    a = table.create(0, 200, 1)
    b = table.create(1, 200, 1)
    assert not table.all_finished()
    a.state = TaskState.FINISHED
    b.state = TaskState.BLOCKED
    assert not table.all_finished()
    b.state = TaskState.FINISHED
    assert table.all_finished()


def test_turnaround_is_finish_minus_arrival():
    task = Task(id=0, duration_ms=100, remaining_ms=0, priority=1,
                arrival_time=10.0, finish_time=15.0)
    assert task.turnaround() == 5.0


def test_summary_lines(table):
    done = table.create(0, 200, 1)
    done.state = TaskState.FINISHED
    done.finish_time = 15.0
    pending = table.create(1, 300, 3)
    pending.finish_time = 10.0
    report = table.summary()
    assert report.startswith("\n=== Task Summary ===\n")
    lines = report.splitlines()[2:]
    assert lines[0] == "Task 0 | Priority: 1 | Turnaround: 5.00s | Status: Finished"
    assert lines[1].startswith("Task 1 | Priority: 3 |")
    assert lines[1].endswith("| Status: Incomplete")


def test_summary_empty(table):
    assert table.summary() == "\n=== Task Summary ===\n"