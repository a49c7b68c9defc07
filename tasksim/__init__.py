"""Threaded CPU scheduling simulator with priority, round-robin, FCFS and MLFQ policies."""

__version__ = "0.1.0"
__all__ = ["cli", "logger", "scheduler", "task"]