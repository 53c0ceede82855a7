"""A fixed pool of worker threads that sum pairs of numbers from a bounded queue."""

from __future__ import annotations

import argparse
import collections
import random
import sys
import threading
from dataclasses import dataclass
from typing import Any, TextIO

THREAD_NUM = 4
BUFFER_SIZE = 256
DEFAULT_TASKS = 500

_STOP = object()


@dataclass(frozen=True)
class Task:
    """Two numbers to be added."""

    a: int
    b: int

    def execute(self) -> int:
        return self.a + self.b


class TaskQueue:
    """A bounded FIFO queue: submit blocks while full, get blocks while empty."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: collections.deque[Any] = collections.deque()
        lock = threading.Lock()
        self._not_empty = threading.Condition(lock)
        self._not_full = threading.Condition(lock)

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)

    def submit(self, task: Any) -> None:
        with self._not_full:
            while len(self._items) >= self.capacity:
                self._not_full.wait()
            self._items.append(task)
            self._not_empty.notify()

    def get(self) -> Any:
        with self._not_empty:
            while not self._items:
                self._not_empty.wait()
            task = self._items.popleft()
            self._not_full.notify()
            return task


class WorkerPool:
    """Worker threads that take tasks from a shared queue and report each sum."""

    def __init__(
        self,
        size: int = THREAD_NUM,
        capacity: int = BUFFER_SIZE,
        output: TextIO | None = None,
    ) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self.results: list[tuple[int, Task, int]] = []
        self._queue = TaskQueue(capacity)
        self._output = output
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self._closed = False

    def __enter__(self) -> WorkerPool:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start(self) -> WorkerPool:
        if self._threads:
            raise RuntimeError("pool already started")
        if self._closed:
            raise RuntimeError("pool is closed")
        self._threads = [
            threading.Thread(target=self._work, args=(worker_id,), daemon=True)
            for worker_id in range(self.size)
        ]
        for thread in self._threads:
            thread.start()
        return self

    def submit(self, task: Task) -> None:
        if self._closed:
            raise RuntimeError("pool is closed")
        self._queue.submit(task)

    def close(self) -> None:
        """Finish the queued tasks and stop the workers."""
        if self._closed:
            return
        self._closed = True
        for _ in self._threads:
            self._queue.submit(_STOP)
        for thread in self._threads:
            thread.join()

    def _work(self, worker_id: int) -> None:
        while True:
            task = self._queue.get()
            if task is _STOP:
                return
            result = task.execute()
            with self._lock:
                self.results.append((worker_id, task, result))
                out = self._output or sys.stdout
                print(
                    f"(Thread {worker_id}) Sum of {task.a} and {task.b} is {result}",
                    file=out,
                    flush=True,
                )


def main(argv: list[str] | None = None) -> int:
    """Feed random tasks to a worker pool."""
    parser = argparse.ArgumentParser(description="Sum random pairs with a thread pool.")
    parser.add_argument("--tasks", type=int, default=DEFAULT_TASKS)
    parser.add_argument("--threads", type=int, default=THREAD_NUM)
    parser.add_argument("--capacity", type=int, default=BUFFER_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        pool = WorkerPool(args.threads, args.capacity)
    except ValueError as error:
        parser.error(str(error))
    with pool:
        for _ in range(args.tasks):
            pool.submit(Task(rng.randrange(100), rng.randrange(100)))
    return 0