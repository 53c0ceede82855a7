"""Runnable demonstrations of threads, locks, semaphores and condition variables."""

__version__ = "0.1.0"

__all__ = [
    "booking",
    "counters",
    "cpu",
    "hello",
    "lounge",
    "pool",
    "reminders",
    "semaphore_steps",
    "signals",
]