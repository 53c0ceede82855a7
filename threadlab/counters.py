"""Shared visitor counters incremented by several threads."""

from __future__ import annotations

import argparse
import enum
import threading
from typing import Callable

DEFAULT_THREADS = 4
DEFAULT_ITERATIONS = 200_000


class Strategy(enum.Enum):
    """How concurrent increments of the shared counter are coordinated."""

    RACE = "race"
    MUTEX = "mutex"
    SEMAPHORE = "semaphore"
    ATOMIC = "atomic"


class AtomicCounter:
    """An integer counter whose increments are indivisible."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self, amount: int = 1) -> int:
        """Add amount and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value = previous + amount
            return previous


class _Tally:
    def __init__(self) -> None:
        self.value = 0


def _incrementer(strategy: Strategy) -> tuple[Callable[[], None], Callable[[], int]]:
    if strategy is Strategy.ATOMIC:
        counter = AtomicCounter()
        return counter.increment, lambda: counter.value

    tally = _Tally()

    if strategy is Strategy.RACE:

        def increment() -> None:
            current = tally.value
            tally.value = current + 1

    else:
        guard = threading.Lock() if strategy is Strategy.MUTEX else threading.Semaphore(1)

        def increment() -> None:
            with guard:
                tally.value += 1

    return increment, lambda: tally.value


def count_visitors(
    strategy: Strategy | str = Strategy.MUTEX,
    threads: int = DEFAULT_THREADS,
    iterations: int = DEFAULT_ITERATIONS,
) -> int:
    """Let each thread add one visitor per iteration and return the final count."""
    strategy = Strategy(strategy)
    if threads < 1:
        raise ValueError("threads must be at least 1")
    if iterations < 0:
        raise ValueError("iterations must not be negative")

    increment, result = _incrementer(strategy)
    barrier = threading.Barrier(threads)

    def work() -> None:
        barrier.wait()
        for _ in range(iterations):
            increment()

    workers = [threading.Thread(target=work) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return result()


def main(argv: list[str] | None = None) -> int:
    """Run the visitor counter and print the final count."""
    parser = argparse.ArgumentParser(description="Count visitors from several threads.")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=Strategy.MUTEX.value,
    )
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    args = parser.parse_args(argv)
    try:
        total = count_visitors(args.strategy, args.threads, args.iterations)
    except ValueError as error:
        parser.error(str(error))
    print(f"Público final: {total} (esperado: {args.threads * args.iterations})")
    return 0