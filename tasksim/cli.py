"""Command line entry point: pick a policy, create random tasks, run them."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator

from tasksim.logger import DEFAULT_LOG_PATH, Logger
from tasksim.scheduler import Scheduler, scheduler_type_from_choice

MENU = "Select scheduler type:\n1. Priority\n2. Round Robin\n3. FCFS\n4. MLFQ\n "


def _read_ints(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            yield int(token)


def _prompt(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive scheduling simulation; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="tasksim", description="Simulate CPU scheduling of random tasks."
    )
    parser.add_argument(
        "--log-file", default=DEFAULT_LOG_PATH, help="where to write the log"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    numbers = _read_ints(sys.stdin)
    with Logger(args.log_file) as logger:
        try:
            _prompt(MENU)
            choice = next(numbers)
            _prompt("Enter number of tasks: ")
            count = next(numbers)
        except (StopIteration, ValueError):
            print("\nexpected an integer", file=sys.stderr)
            return 1

        scheduler = Scheduler(scheduler_type_from_choice(choice), logger, rng=rng)
        for task_id in range(count):
            duration = 200 + rng.randrange(400)
            priority = 1 + rng.randrange(3)
            scheduler.add_task(task_id, duration, priority)

        scheduler.run()
        sys.stdout.write(scheduler.tasks.summary())
    return 0