"""Threads that greet, optionally limited by a semaphore."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Callable, TextIO, Union

Work = Union[float, Callable[[int], float]]

DEFAULT_THREADS = 40
DEFAULT_WORK = 2.0


def _printer(output: TextIO | None) -> Callable[[str], None]:
    out = output if output is not None else sys.stdout
    lock = threading.Lock()

    def say(message: str) -> None:
        with lock:
            out.write(message + "\n")
            out.flush()

    return say


def greet_pair(
    first: int = 10,
    second: int = 15,
    main_count: int = 5,
    delay: float = 1.0,
    output: TextIO | None = None,
) -> None:
    """Run two greeting threads alongside the main thread."""
    if min(first, second, main_count) < 0:
        raise ValueError("counts must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")
    say = _printer(output)

    def hello(label: str, times: int) -> None:
        for i in range(times):
            say(f"{label} {i}")
            time.sleep(delay)

    threads = [
        threading.Thread(target=hello, args=("Hello1", first)),
        threading.Thread(target=hello, args=("Hello2", second)),
    ]
    for thread in threads:
        thread.start()
    for i in range(main_count):
        say(f"Principal {i}")
        time.sleep(delay)
    for thread in threads:
        thread.join()


def run_hello_threads(
    count: int = DEFAULT_THREADS,
    work: Work = DEFAULT_WORK,
    limit: int | None = None,
    output: TextIO | None = None,
) -> int:
    """Start count greeting threads, at most limit at a time.

    work is either the seconds each thread works or a function of the rank
    giving them. Returns the largest number of threads seen running at once.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if limit is not None and limit < 1:
        raise ValueError("limit must be at least 1")
    say = _printer(output)
    duration: Callable[[int], float] = work if callable(work) else (lambda _rank: work)
    gate = threading.BoundedSemaphore(limit) if limit is not None else None
    lock = threading.Lock()
    running = 0
    peak = 0

    def hello(rank: int) -> None:
        nonlocal running, peak
        try:
            with lock:
                running += 1
                peak = max(peak, running)
            say(f"Thread {rank} iniciada (de {count})")
            time.sleep(duration(rank))
            say(f"Thread {rank} terminando")
        finally:
            with lock:
                running -= 1
            if gate is not None:
                gate.release()

    threads: list[threading.Thread] = []
    for rank in range(count):
        if gate is not None:
            gate.acquire()
        thread = threading.Thread(target=hello, args=(rank,))
        thread.start()
        threads.append(thread)

    say("Thread principal criou todas as threads")
    for rank, thread in enumerate(threads):
        thread.join()
        say(f"Thread {rank} finalizada")
    say("Programa encerrado")
    return peak


def main(argv: list[str] | None = None) -> int:
    """Run greeting threads."""
    parser = argparse.ArgumentParser(description="Start greeting threads.")
    parser.add_argument("--count", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--work", type=float, default=DEFAULT_WORK)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument(
        "--random", action="store_true", help="work a random 2 to 6 seconds per thread"
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    work: Work = args.work
    if args.random:
        rng = random.Random(args.seed)
        durations = [rng.randint(2, 6) for _ in range(max(args.count, 0))]
        work = durations.__getitem__
    try:
        run_hello_threads(args.count, work, args.limit)
    except ValueError as error:
        parser.error(str(error))
    return 0