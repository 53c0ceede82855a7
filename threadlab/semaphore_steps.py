"""A counting semaphore and a walk through its wait/post operations."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import TextIO

INITIAL_VALUE = 2


class CountingSemaphore:
    """A semaphore whose current value can be read."""

    def __init__(self, value: int = 1) -> None:
        if value < 0:
            raise ValueError("semaphore value must not be negative")
        self._value = value
        self._condition = threading.Condition()

    @property
    def value(self) -> int:
        with self._condition:
            return self._value

    def acquire(self) -> None:
        """Wait until the value is positive, then decrement it."""
        with self._condition:
            while self._value == 0:
                self._condition.wait()
            self._value -= 1

    def release(self) -> None:
        """Increment the value and wake one waiter."""
        with self._condition:
            self._value += 1
            self._condition.notify()

    def __enter__(self) -> CountingSemaphore:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


_POST_MESSAGES = {
    3: "sem_post (liberando 1 acesso)",
    4: "sem_post (liberando mais 1 acesso)",
}


def run_steps(output: TextIO | None = None) -> int:
    """Print a sequence of wait/post operations and return the final value."""
    out = output or sys.stdout

    def say(message: str) -> None:
        print(message, file=out, flush=True)

    semaphore = CountingSemaphore(INITIAL_VALUE)
    say(f"Semáforo inicializado (valor={semaphore.value})\n")
    for step in range(1, 5):
        if step in _POST_MESSAGES:
            say(f"[{step}] {_POST_MESSAGES[step]}")
            semaphore.release()
        say(f"[{step}] sem_wait...")
        semaphore.acquire()
        say(f"[{step}] PASS (valor={semaphore.value})\n")
    say("Liberando todos os acessos...")
    semaphore.release()
    semaphore.release()
    say("Semáforo destruído")
    return semaphore.value


def main(argv: list[str] | None = None) -> int:
    """Walk through the semaphore operations."""
    argparse.ArgumentParser(description="Show semaphore wait and post steps.").parse_args(argv)
    run_steps()
    return 0